from django.apps import AppConfig


class ReplicaRoutingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "replica_routing"
    verbose_name = "Replica Routing"

    def ready(self):
        from . import signals  # noqa: F401
        from .logging_utils import log_system_event
        from .region import get_region_context

        ctx = get_region_context()
        log_system_event(
            'REGION_CONTEXT',
            f"Loaded region context ({ctx})",
            extra_data={'current_region': ctx.current(), 'primary_region': ctx.primary()},
        )
