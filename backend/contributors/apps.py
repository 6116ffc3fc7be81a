from django.apps import AppConfig


class ContributorsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'contributors'
