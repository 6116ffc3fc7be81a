# tasks/board/__init__.py
"""
Board Package
=============

Pure computations over a project's task collection. Nothing in here touches
the ORM: every function takes an iterable of task-like objects exposing
``position``, ``points`` and (for the ledger) credited contributors, so the
same code runs over querysets and plain in-memory values.

Modules:
--------
- positions: The ordered board columns
- aggregator: Filtering, point sums and cleanup of Done tasks
- ledger: Contributor scores earned from Done tasks

Usage:
------
    from tasks.board import Position, count_points, contributor_scores

    count_points(project.tasks.all(), Position.TODO)
    contributor_scores(tasks, contributors_of=lambda t: t.contributors.all())
"""

from .aggregator import clean_up_done_tasks, count_points, tasks_by_position
from .ledger import ZERO_POINTS_CREDIT, contributor_scores, task_credit
from .positions import Position

__all__ = [
    "Position",
    # Aggregator
    "tasks_by_position",
    "clean_up_done_tasks",
    "count_points",
    # Ledger
    "contributor_scores",
    "task_credit",
    "ZERO_POINTS_CREDIT",
]
