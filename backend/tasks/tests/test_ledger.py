# tasks/tests/test_ledger.py
"""
Score Ledger Unit Tests
=======================

Contributors are plain strings here; any hashable value works.

Rules under test:
- Only Done tasks count
- Every credited contributor gets the full points of the task
- Unestimated tasks (points=None) earn nothing
- Zero-point tasks earn 0.1
- Ranking by descending score, ties in first-credit order
"""

from decimal import Decimal
from types import SimpleNamespace

from django.test import SimpleTestCase

from tasks.board import Position, ZERO_POINTS_CREDIT, contributor_scores, task_credit


def make_task(position, points, contributors):
    return SimpleNamespace(position=position, points=points, contributors=list(contributors))


def as_pairs(ranking):
    return [(entry["contributor"], entry["score"]) for entry in ranking]


class TestTaskCredit(SimpleTestCase):

    def test_points_are_credited_as_decimals(self) -> None:
        self.assertEqual(task_credit(5), Decimal("5"))
        self.assertIsInstance(task_credit(5), Decimal)

    def test_zero_points_earn_one_tenth(self) -> None:
        self.assertEqual(task_credit(0), ZERO_POINTS_CREDIT)
        self.assertEqual(ZERO_POINTS_CREDIT, Decimal("0.1"))

    def test_unestimated_tasks_earn_nothing(self) -> None:
        self.assertIsNone(task_credit(None))


class TestContributorScores(SimpleTestCase):

    def setUp(self) -> None:
        self.tasks = [
            make_task(Position.DOING, 13, ["dudu"]),
            make_task(Position.TODO, 5, ["hugo"]),
            make_task(Position.BACKLOG, 8, ["max"]),
            make_task(Position.OUT, 1, ["dudu", "hugo", "max"]),
            make_task(Position.DONE, 1, ["dudu"]),
            make_task(Position.DONE, 3, ["hugo", "dudu"]),
            make_task(Position.DONE, 2, ["max"]),
            make_task(Position.DONE, 5, ["hugo"]),
            make_task(Position.DONE, 3, ["dudu", "max"]),
        ]

    def test_returns_scores_ordered_by_score(self) -> None:
        self.assertEqual(
            as_pairs(contributor_scores(self.tasks)),
            [("hugo", 8), ("dudu", 7), ("max", 5)],
        )

    def test_new_done_task_reorders_the_ranking(self) -> None:
        self.tasks.append(make_task(Position.DONE, 13, ["max"]))

        self.assertEqual(
            as_pairs(contributor_scores(self.tasks)),
            [("max", 18), ("hugo", 8), ("dudu", 7)],
        )

    def test_entries_carry_contributor_and_score(self) -> None:
        first = contributor_scores(self.tasks)[0]

        self.assertEqual(set(first), {"contributor", "score"})

    def test_ignores_tasks_without_points(self) -> None:
        tasks = [
            make_task(Position.DONE, None, ["hugo"]),
            make_task(Position.DONE, 3, ["hugo"]),
        ]

        self.assertEqual(as_pairs(contributor_scores(tasks)), [("hugo", 3)])

    def test_contributor_with_only_unestimated_tasks_is_left_out(self) -> None:
        tasks = [
            make_task(Position.DONE, None, ["dudu"]),
            make_task(Position.DONE, 2, ["hugo"]),
        ]

        self.assertEqual(as_pairs(contributor_scores(tasks)), [("hugo", 2)])

    def test_sums_one_tenth_for_tasks_with_zero_points(self) -> None:
        tasks = [
            make_task(Position.DONE, 0, ["hugo"]),
            make_task(Position.DONE, 3, ["hugo"]),
        ]
        self.assertEqual(contributor_scores(tasks)[0]["score"], Decimal("3.1"))

        tasks.append(make_task(Position.DONE, 0, ["hugo"]))
        self.assertEqual(contributor_scores(tasks)[0]["score"], Decimal("3.2"))

    def test_zero_point_credit_goes_to_every_contributor(self) -> None:
        tasks = [make_task(Position.DONE, 0, ["hugo", "max"])]

        self.assertEqual(
            as_pairs(contributor_scores(tasks)),
            [("hugo", Decimal("0.1")), ("max", Decimal("0.1"))],
        )

    def test_points_are_not_divided_between_contributors(self) -> None:
        tasks = [make_task(Position.DONE, 8, ["hugo", "max", "dudu"])]

        self.assertEqual([score for _, score in as_pairs(contributor_scores(tasks))], [8, 8, 8])

    def test_ties_keep_first_credit_order(self) -> None:
        tasks = [
            make_task(Position.DONE, 2, ["max"]),
            make_task(Position.DONE, 5, ["hugo"]),
            make_task(Position.DONE, 2, ["dudu"]),
            make_task(Position.DONE, 3, ["dudu"]),
        ]

        self.assertEqual(
            as_pairs(contributor_scores(tasks)),
            [("hugo", 5), ("dudu", 5), ("max", 2)],
        )

    def test_no_done_tasks_gives_an_empty_ranking(self) -> None:
        tasks = [make_task(Position.DOING, 5, ["hugo"]), make_task(77, 5, ["hugo"])]

        self.assertEqual(contributor_scores(tasks), [])
        self.assertEqual(contributor_scores([]), [])

    def test_custom_contributor_accessor(self) -> None:
        tasks = [SimpleNamespace(position=Position.DONE, points=4, crew=("ana",))]

        ranking = contributor_scores(tasks, contributors_of=lambda task: task.crew)

        self.assertEqual(as_pairs(ranking), [("ana", 4)])
