# tasks/board/ledger.py
"""
Contributor score ledger.

Every contributor credited on a Done task earns the task's full point value.
Two details shape the numbers:

- A task without an estimate (points is None) earns nothing at all.
- A task explicitly estimated at 0 points still earns 0.1, so finishing small
  work shows up on the scoreboard.

Scores are Decimals; repeated 0.1 credits must add up exactly (0 + 3 + 0 = 3.2).
"""

from decimal import Decimal
from operator import attrgetter
from typing import Any, Callable, Dict, Iterable, List, Optional

from .positions import Position

ZERO_POINTS_CREDIT = Decimal("0.1")


def task_credit(points: Optional[float]) -> Optional[Decimal]:
    """
    Credit one Done task grants each of its contributors.
    None means the task does not count.
    """
    if points is None:
        return None
    if points == 0:
        return ZERO_POINTS_CREDIT
    return Decimal(str(points))


def contributor_scores(
    tasks: Iterable[Any],
    contributors_of: Callable[[Any], Iterable[Any]] = attrgetter("contributors"),
) -> List[Dict[str, Any]]:
    """
    Ranks contributors by the credit earned from Done tasks.

    Args:
        tasks: Task-like objects; only those at Position.DONE are read.
        contributors_of: Returns the contributors credited on a task.
            Contributors must be hashable (model instances, ids, names...).

    Returns:
        [{"contributor": ..., "score": Decimal}, ...] by descending score.
        Equal scores keep the order in which contributors first earned
        credit. Contributors with no credit are left out.
    """
    scores: Dict[Any, Decimal] = {}

    for task in tasks:
        if task.position != Position.DONE:
            continue

        credit = task_credit(task.points)
        if credit is None:
            continue

        for contributor in contributors_of(task):
            scores[contributor] = scores.get(contributor, Decimal(0)) + credit

    # sorted() is stable, so ties keep first-credit (insertion) order
    ranking = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [{"contributor": contributor, "score": score} for contributor, score in ranking]
