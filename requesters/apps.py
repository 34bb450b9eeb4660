from django.apps import AppConfig


class RequestersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'requesters'
    verbose_name = 'Blood Requests'

    def ready(self):
        from . import signals  # noqa: F401
