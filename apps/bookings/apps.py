from django.apps import AppConfig


class BookingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.bookings"

    def ready(self) -> None:
        from shared.application.audit import register_audit_handlers
        from shared.application.message_bus import message_bus

        from .events import BOOKING_EVENTS

        register_audit_handlers(message_bus, BOOKING_EVENTS)
