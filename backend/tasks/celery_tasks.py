# tasks/celery_tasks.py

import logging
from celery import shared_task
from projects.models import Project

# Configure logging for background worker monitoring
logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=True,
    retry_backoff_max=600,  # Max backoff of 10 minutes
    max_retries=3,
    time_limit=30,
    soft_time_limit=25
)
def clean_up_done_tasks_for_project(self, project_id: int) -> int:
    """
    Worker: sweep the Done column of one project to Out.
    Returns the number of tasks moved, 0 when the project is gone.
    """
    logger.info(f"Board cleanup started for Project {project_id}")
    try:
        project = Project.objects.filter(id=project_id).first()
        if not project:
            logger.warning(f"Project {project_id} not found. Exiting worker.")
            return 0

        return project.clean_up_done_tasks()

    except Exception as exc:
        logger.exception(f"Board cleanup failed for Project {project_id}: {exc}")
        # Re-raise for Celery retry policy
        raise
