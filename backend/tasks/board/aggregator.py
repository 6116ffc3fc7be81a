# tasks/board/aggregator.py

from typing import Any, Iterable, List

from .positions import Position


def tasks_by_position(tasks: Iterable[Any], position: int) -> List[Any]:
    """
    Returns the tasks sitting exactly at `position`, in their original order.
    Unknown positions simply match nothing.
    """
    return [task for task in tasks if task.position == position]


def clean_up_done_tasks(tasks: Iterable[Any]) -> List[Any]:
    """
    Moves every Done task to Out, in place.

    Returns the tasks that moved so callers can persist just those.
    Running it again over the same tasks moves nothing.
    """
    moved = []
    for task in tasks:
        if task.position == Position.DONE:
            task.position = Position.OUT
            moved.append(task)
    return moved


def count_points(tasks: Iterable[Any], position: int) -> int:
    """Sums the points at `position`; unestimated tasks count as 0."""
    return sum(task.points or 0 for task in tasks_by_position(tasks, position))
