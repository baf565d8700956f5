from django.apps import AppConfig


class ApiConfig(AppConfig):
    """App configuration for the read-only catalogue API."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "api"

