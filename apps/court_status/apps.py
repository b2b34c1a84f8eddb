from django.apps import AppConfig


class CourtStatusConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.court_status"

    def ready(self) -> None:
        from shared.application.audit import register_audit_handlers
        from shared.application.message_bus import message_bus

        from .events import CLOSURE_EVENTS

        register_audit_handlers(message_bus, CLOSURE_EVENTS)
