# tasks/signals.py
"""
Keeps cached project scoreboards in step with their tasks.

A ranking changes whenever a task is saved, moved to another project or
deleted, whenever the contributors credited on a task change, and whenever a
credited contributor is deleted.
"""

import logging

from django.db.models.signals import m2m_changed, post_delete, post_save, pre_delete, pre_save
from django.dispatch import receiver

from contributors.models import Contributor
from projects.scoreboard import scoreboard_cache
from .models import Task

logger = logging.getLogger(__name__)


def _reset(project_ids):
    for project_id in project_ids:
        if project_id is not None:
            scoreboard_cache.invalidate(project_id)


@receiver(pre_save, sender=Task)
def remember_stored_project(sender, instance, **kwargs):
    # The project the task belongs to in the database, before this save
    if instance.pk is None:
        instance._stored_project_id = None
    else:
        instance._stored_project_id = (
            Task.objects.filter(pk=instance.pk).values_list('project_id', flat=True).first()
        )


@receiver(post_save, sender=Task)
def reset_scoreboard_on_task_save(sender, instance, **kwargs):
    _reset({instance.project_id, getattr(instance, '_stored_project_id', None)})


@receiver(post_delete, sender=Task)
def reset_scoreboard_on_task_delete(sender, instance, **kwargs):
    _reset({instance.project_id})


@receiver(m2m_changed, sender=Task.contributors.through)
def reset_scoreboard_on_credit_change(sender, instance, action, reverse, pk_set, **kwargs):
    if not reverse:
        if action in ('post_add', 'post_remove', 'post_clear'):
            _reset({instance.project_id})
        return

    # Changed from the contributor side: instance is a Contributor
    if action == 'pre_clear':
        # The tasks are unknown once the clear has run
        instance._cleared_task_projects = set(
            instance.tasks.values_list('project_id', flat=True)
        )
        return

    if action == 'post_clear':
        project_ids = getattr(instance, '_cleared_task_projects', set())
    elif action in ('post_add', 'post_remove'):
        project_ids = set(
            Task.objects.filter(pk__in=pk_set or ()).values_list('project_id', flat=True)
        )
    else:
        return

    logger.debug(f"Credits of contributor {instance.pk} changed, resetting scoreboards {project_ids}")
    _reset(project_ids)


@receiver(pre_delete, sender=Contributor)
def remember_credited_projects(sender, instance, **kwargs):
    # Credit rows go with the contributor without any m2m_changed signal
    instance._credited_projects = set(
        instance.tasks.values_list('project_id', flat=True)
    )


@receiver(post_delete, sender=Contributor)
def reset_scoreboard_on_contributor_delete(sender, instance, **kwargs):
    project_ids = getattr(instance, '_credited_projects', set())
    logger.debug(f"Contributor {instance.pk} deleted, resetting scoreboards {project_ids}")
    _reset(project_ids)
