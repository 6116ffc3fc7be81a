# projects/tokens.py
"""
Contributor tokens: the wire format of the contributor picker.

Out: a compact JSON list of {"id", "name"} records.
In:  a comma separated list of contributor ids, e.g. "3, 7".
"""

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _
from rest_framework.renderers import JSONRenderer

from contributors.models import Contributor
from contributors.serializers import ContributorTokenSerializer

INVALID_TOKEN = 'invalid_token'
UNKNOWN_CONTRIBUTOR = 'unknown_contributor'


def render_contributor_tokens(contributors):
    """Renders contributors as `[{"id":1,"name":"Hugo"}]`, no whitespace."""
    data = ContributorTokenSerializer(contributors, many=True).data
    return JSONRenderer().render(data).decode('utf-8')


def parse_contributor_tokens(ids_csv):
    """
    Parses "1, 2,3" into [1, 2, 3].
    Blank tokens are skipped and repeated ids kept once, in first-seen order.
    """
    ids = []
    for token in (ids_csv or '').split(','):
        token = token.strip()
        if not token:
            continue
        try:
            contributor_id = int(token)
        except ValueError:
            raise ValidationError({
                'contributors': ValidationError(
                    _('"%(token)s" is not a contributor id.'),
                    code=INVALID_TOKEN,
                    params={'token': token},
                )
            }) from None
        if contributor_id not in ids:
            ids.append(contributor_id)
    return ids


def resolve_contributor_tokens(ids_csv):
    """
    Parses `ids_csv` and loads the matching contributors.
    Every id must belong to an existing contributor.
    """
    ids = parse_contributor_tokens(ids_csv)
    found = list(Contributor.objects.filter(pk__in=ids))

    missing = sorted(set(ids) - {c.pk for c in found})
    if missing:
        raise ValidationError({
            'contributors': ValidationError(
                _('Unknown contributor ids: %(ids)s.'),
                code=UNKNOWN_CONTRIBUTOR,
                params={'ids': ', '.join(str(pk) for pk in missing)},
            )
        })

    return found
