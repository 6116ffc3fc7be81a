# projects/identity.py
"""
Project identity rules.

A project is identified by its owner and its name. Names are restricted to
letters, digits, underscores and hyphens, and are stored lowercased so that
"KanbanRoots" and "kanbanroots" are the same project for a given owner.

Errors are raised as Django ValidationErrors keyed by field, each carrying one
of the codes below so callers can tell the failures apart.
"""

import re

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

EMPTY_OWNER = 'empty_owner'
EMPTY_NAME = 'empty_name'
INVALID_FORMAT = 'invalid_format'
DUPLICATE_NAME = 'duplicate_name'
NAME_TOO_LONG = 'name_too_long'

NAME_PATTERN = re.compile(r'[A-Za-z0-9_-]+')
NAME_MAX_LENGTH = 255


def validate_and_normalize(name, owner_id):
    """
    Checks a project's name and owner and returns the canonical name.

    Owner and name problems are reported together in a single ValidationError.
    A whitespace-only name counts as empty; whitespace inside a name is an
    invalid character.
    """
    errors = {}

    if owner_id in (None, ''):
        errors['owner'] = ValidationError(_('A project must have an owner.'), code=EMPTY_OWNER)

    if name is None or not str(name).strip():
        errors['name'] = ValidationError(_('Name can not be blank.'), code=EMPTY_NAME)
    elif not NAME_PATTERN.fullmatch(str(name)):
        errors['name'] = ValidationError(
            _('Name may only contain letters, digits, underscores and hyphens.'),
            code=INVALID_FORMAT,
        )
    elif len(str(name)) > NAME_MAX_LENGTH:
        errors['name'] = ValidationError(
            _('Name can have at most %(limit)d characters.'),
            code=NAME_TOO_LONG,
            params={'limit': NAME_MAX_LENGTH},
        )

    if errors:
        raise ValidationError(errors)

    return str(name).lower()


def duplicate_name_error(name):
    return ValidationError({
        'name': ValidationError(
            _('You already have a project named "%(name)s".'),
            code=DUPLICATE_NAME,
            params={'name': name},
        )
    })


def project_sort_key(name):
    """Default project ordering: case-insensitive, ascending."""
    return (name or '').lower()
