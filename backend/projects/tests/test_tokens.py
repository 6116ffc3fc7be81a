# projects/tests/test_tokens.py

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, TestCase

from projects.tests.factories import create_contributor
from projects.tokens import INVALID_TOKEN, parse_contributor_tokens, render_contributor_tokens


class TestParseContributorTokens(SimpleTestCase):

    def test_splits_on_commas_and_strips_padding(self) -> None:
        self.assertEqual(parse_contributor_tokens("1, 2,3 ,  4"), [1, 2, 3, 4])

    def test_skips_blank_tokens(self) -> None:
        self.assertEqual(parse_contributor_tokens("1,, 2, "), [1, 2])

    def test_collapses_repeated_ids(self) -> None:
        self.assertEqual(parse_contributor_tokens("2, 1, 2"), [2, 1])

    def test_empty_input_yields_no_ids(self) -> None:
        self.assertEqual(parse_contributor_tokens(""), [])
        self.assertEqual(parse_contributor_tokens(None), [])

    def test_rejects_non_numeric_tokens(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            parse_contributor_tokens("1, hugo")

        self.assertEqual(ctx.exception.error_dict["contributors"][0].code, INVALID_TOKEN)
        self.assertTrue(ctx.exception.__suppress_context__)
        self.assertIsNone(ctx.exception.__cause__)


class TestRenderContributorTokens(TestCase):

    def test_renders_compact_id_name_records(self) -> None:
        hugo = create_contributor("Hugo")
        rodrigo = create_contributor("Rodrigo")

        json = render_contributor_tokens([hugo, rodrigo])

        self.assertEqual(
            json,
            f'[{{"id":{hugo.id},"name":"Hugo"}},{{"id":{rodrigo.id},"name":"Rodrigo"}}]',
        )

    def test_keeps_non_ascii_names_unescaped(self) -> None:
        joao = create_contributor("João")

        self.assertEqual(render_contributor_tokens([joao]), f'[{{"id":{joao.id},"name":"João"}}]')

    def test_renders_empty_list(self) -> None:
        self.assertEqual(render_contributor_tokens([]), "[]")
