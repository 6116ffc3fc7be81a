from django.contrib.auth.base_user import BaseUserManager


class ContributorManager(BaseUserManager):
    """
    Builds contributors keyed by email address.
    """

    def _create(self, email, password, **fields):
        if not email:
            raise ValueError('A contributor needs an email address.')

        contributor = self.model(email=self.normalize_email(email), **fields)
        # None leaves the account without a usable password
        contributor.set_password(password)
        contributor.save(using=self._db)
        return contributor

    def create_user(self, email, password=None, **fields):
        fields.setdefault('is_staff', False)
        fields.setdefault('is_superuser', False)
        return self._create(email, password, **fields)

    def create_superuser(self, email, password, **fields):
        """Admin accounts must be staff and superuser."""
        fields.setdefault('is_staff', True)
        fields.setdefault('is_superuser', True)

        for flag in ('is_staff', 'is_superuser'):
            if fields[flag] is not True:
                raise ValueError(f'A superuser must have {flag}=True.')

        return self._create(email, password, **fields)
