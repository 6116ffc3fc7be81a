from django.db import models
from django.conf import settings
from django.utils.translation import gettext_lazy as _

from .board import Position


class Task(models.Model):
    """
    A card on a project's board.
    """
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.CASCADE,
        related_name='tasks',
        verbose_name=_("project")
    )

    category = models.ForeignKey(
        'projects.Category',
        on_delete=models.SET_NULL, # Deleting a category keeps its tasks
        null=True, blank=True,
        related_name='tasks',
        verbose_name=_("category")
    )

    title = models.CharField(max_length=255, blank=True, verbose_name=_("title"))
    description = models.TextField(blank=True, verbose_name=_("description"))

    # None means "not estimated yet", which is not the same as 0 points
    points = models.PositiveIntegerField(
        null=True, blank=True,
        verbose_name=_("points"),
        help_text=_("Estimated size of the task.")
    )

    position = models.PositiveSmallIntegerField(
        choices=Position.choices,
        default=Position.BACKLOG,
        verbose_name=_("position"),
        help_text=_("The board column the task sits in.")
    )

    contributors = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name='tasks',
        verbose_name=_("contributors"),
        help_text=_("Contributors credited for the task.")
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        verbose_name = _("Task")
        verbose_name_plural = _("Tasks")
        # Board columns list tasks in the order they were added
        ordering = ['id']

    def __str__(self):
        return f"{self.get_position_display()}: {self.title or self.pk}"


class Comment(models.Model):
    task = models.ForeignKey(
        Task,
        on_delete=models.CASCADE,
        related_name='comments',
        verbose_name=_("task")
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='comments',
        verbose_name=_("author")
    )
    body = models.TextField(verbose_name=_("body"))
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))

    class Meta:
        verbose_name = _("Comment")
        verbose_name_plural = _("Comments")
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"Comment on task {self.task_id}"
