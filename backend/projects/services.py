# projects/services.py

import logging
from typing import Dict, Optional

from django.db import IntegrityError, transaction

from .identity import duplicate_name_error
from .models import Project

logger = logging.getLogger(__name__)


def create_project(owner, name: str, contributor_tokens: Optional[str] = None) -> Project:
    """
    Creates a project for `owner` and optionally sets its contributors from
    a token string ("1, 2").

    Project.save() rejects duplicate names up front, but two concurrent
    requests can both pass that check. The database constraint then fails
    the second insert, which is reported as the same duplicate_name error.
    """
    try:
        with transaction.atomic():
            project = Project(owner=owner, name=name)
            project.save()

            if contributor_tokens is not None:
                project.set_contributor_tokens(contributor_tokens)
    except IntegrityError as e:
        logger.warning(f"Unique constraint rejected project '{name}' for owner {getattr(owner, 'pk', None)}: {str(e)}")
        raise duplicate_name_error(str(name).lower())

    logger.info(f"Created project {project.pk} '{project.name}' for owner {project.owner_id}")
    return project


def destroy_project(project: Project) -> Dict[str, int]:
    """
    Deletes a project with its tasks, their comments and its categories.

    Returns the number of deleted rows per model label.
    """
    project_id = project.pk
    with transaction.atomic():
        total, per_model = project.delete()

    logger.info(f"Destroyed project {project_id}: {total} row(s) {per_model}")
    return per_model


def schedule_board_cleanup(project: Project) -> None:
    """
    Queues the Done -> Out sweep of `project` once the current transaction
    commits, so the worker sees committed task state.
    """
    project_id = project.pk

    def enqueue():
        from tasks.celery_tasks import clean_up_done_tasks_for_project
        clean_up_done_tasks_for_project.delay(project_id)

    transaction.on_commit(enqueue)
