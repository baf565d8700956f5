from django.apps import AppConfig


class ListFilterConfig(AppConfig):
    """App configuration for the session-backed list filter helpers."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "listfilter"
    verbose_name = "List filters"
