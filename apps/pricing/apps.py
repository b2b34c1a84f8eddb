from django.apps import AppConfig


class PricingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.pricing"

    def ready(self) -> None:
        from shared.application.audit import register_audit_handlers
        from shared.application.message_bus import message_bus

        from .events import PRICING_EVENTS

        register_audit_handlers(message_bus, PRICING_EVENTS)
