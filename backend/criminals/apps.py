from django.apps import AppConfig


class CriminalsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "criminals"
