from django.db import models


class ProjectQuerySet(models.QuerySet):

    def owned_by(self, owner_id):
        return self.filter(owner_id=owner_id)

    def name_taken(self, name, owner_id, exclude_pk=None):
        """
        True when `owner_id` already has a project called `name`.
        `name` must already be normalized.
        """
        qs = self.owned_by(owner_id).filter(name=name)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.exists()


ProjectManager = models.Manager.from_queryset(ProjectQuerySet)
