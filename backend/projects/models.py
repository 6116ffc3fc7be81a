import logging

from django.conf import settings
from django.db import models, transaction
from django.db.models.functions import Lower
from django.utils.translation import gettext_lazy as _

from tasks import board
from .identity import NAME_MAX_LENGTH, duplicate_name_error, project_sort_key, validate_and_normalize
from .managers import ProjectManager
from .scoreboard import scoreboard_cache

logger = logging.getLogger(__name__)


class Project(models.Model):
    """
    A Kanban board owned by one contributor and shared with others.
    """
    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        verbose_name=_("name"),
        help_text=_("Letters, digits, underscores and hyphens. Stored lowercased.")
    )

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='owned_projects',
        verbose_name=_("owner")
    )

    contributors = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name='projects',
        verbose_name=_("contributors")
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    objects = ProjectManager()

    class Meta:
        verbose_name = _("Project")
        verbose_name_plural = _("Projects")
        ordering = [Lower('name')]
        constraints = [
            models.UniqueConstraint(fields=['name', 'owner'], name='unique_project_name_per_owner'),
        ]

    def __str__(self):
        return self.name

    def __lt__(self, other):
        return project_sort_key(self.name) < project_sort_key(other.name)

    # ------------------ Validation ------------------

    def clean_fields(self, exclude=None):
        # name and owner are checked together by clean()
        exclude = set(exclude or ()) | {'name', 'owner'}
        super().clean_fields(exclude=exclude)

    def clean(self):
        self.name = validate_and_normalize(self.name, self.owner_id)

        if Project.objects.name_taken(self.name, self.owner_id, exclude_pk=self.pk):
            raise duplicate_name_error(self.name)

    def save(self, *args, **kwargs):
        """
        Validates before every save. The unique constraint is left to the
        database; clean() already reports duplicates with a friendlier error.
        """
        self.full_clean(validate_constraints=False)
        super().save(*args, **kwargs)

    # ------------------ Contributors ------------------

    def all_contributors(self):
        """The owner plus everyone added to the project."""
        return {self.owner, *self.contributors.all()}

    def contributors_for_token_input(self):
        from .tokens import render_contributor_tokens

        return render_contributor_tokens(self.contributors.all())

    def set_contributor_tokens(self, ids_csv):
        """
        Replaces the contributor set with the ids in `ids_csv` ("1, 2").
        """
        from .tokens import resolve_contributor_tokens

        self.contributors.set(resolve_contributor_tokens(ids_csv))

    @property
    def contributor_ids(self):
        return list(self.contributors.values_list('id', flat=True))

    # ------------------ Board ------------------

    def tasks_by_position(self, position):
        return board.tasks_by_position(self.tasks.all(), position)

    def count_points(self, position):
        return board.count_points(self.tasks.all(), position)

    def clean_up_done_tasks(self):
        """
        Sweeps every Done task to Out. Returns how many tasks moved.
        """
        with transaction.atomic():
            moved = board.clean_up_done_tasks(self.tasks.select_for_update())
            if moved:
                self.tasks.model.objects.bulk_update(moved, ['position'])

        # bulk_update sends no signals
        scoreboard_cache.invalidate(self.pk)
        logger.info(f"Project {self.pk}: moved {len(moved)} Done task(s) to Out")
        return len(moved)

    def contributors_scores(self):
        """
        Contributors ranked by the points of their Done tasks.
        See tasks.board.ledger for the scoring rules.
        """
        def compute():
            done_tasks = self.tasks.filter(position=board.Position.DONE).prefetch_related('contributors')
            return board.contributor_scores(done_tasks, contributors_of=lambda task: task.contributors.all())

        return scoreboard_cache.get_or_compute(self.pk, compute)


class Category(models.Model):
    """
    A label grouping tasks of one project.
    """
    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='categories',
        verbose_name=_("project")
    )
    name = models.CharField(max_length=100, verbose_name=_("name"))

    class Meta:
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")
        ordering = ['name']

    def __str__(self):
        return f"{self.project.name}: {self.name}"
