from django.db import models
from django.utils.translation import gettext_lazy as _


class Position(models.IntegerChoices):
    """Board columns, left to right."""

    BACKLOG = 1, _("Backlog")
    TODO = 2, _("To do")
    DOING = 3, _("Doing")
    DONE = 4, _("Done")
    # Completed tasks swept off the Done column
    OUT = 5, _("Out")
