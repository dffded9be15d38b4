"""
Change tracking app configuration
"""

from django.apps import AppConfig


class ChangeTrackingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'change_tracking'
    verbose_name = 'Change Tracking'

    def ready(self):
        """Import signals when app is ready"""
        import change_tracking.signals  # noqa: F401
