# projects/signals.py

from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Project
from .scoreboard import scoreboard_cache


@receiver(post_save, sender=Project)
def reset_scoreboard_on_create(sender, instance, created, **kwargs):
    # Database ids can be reused, never inherit a previous project's ranking.
    if created:
        scoreboard_cache.invalidate(instance.pk)
