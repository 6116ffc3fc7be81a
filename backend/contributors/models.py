from django.db import models
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.utils.translation import gettext_lazy as _
from .managers import ContributorManager


class Contributor(AbstractBaseUser, PermissionsMixin):
    """
    A person who owns projects or gets credited on tasks.
    Uses email as the unique identifying field.
    """
    email = models.EmailField(_('email address'), unique=True)

    name = models.CharField(_('name'), max_length=150)

    is_staff = models.BooleanField(
        _('staff status'),
        default=False,
        help_text=_('Designates whether the contributor can log into the admin site.'),
    )
    is_active = models.BooleanField(
        _('active'),
        default=True,
        help_text=_(
            'Designates whether this contributor should be treated as active. '
            'Unselect this instead of deleting accounts.'
        ),
    )
    date_joined = models.DateTimeField(_('date joined'), auto_now_add=True)

    # ------------------ Model Configuration ------------------
    objects = ContributorManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        verbose_name = _('contributor')
        verbose_name_plural = _('contributors')
        # Token input lists contributors in id order
        ordering = ['id']

    def get_full_name(self):
        return self.name

    def get_short_name(self):
        return self.name

    def __str__(self):
        return self.name or self.email
