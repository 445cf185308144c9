"""
Signal handlers for replica routing.
"""
from django.core.signals import setting_changed
from django.dispatch import receiver

from .region import REGION_CONTEXT_SETTING, reset_region_context


@receiver(setting_changed)
def reload_region_context(sender, setting, **kwargs):
    """Rebuild the region context when REGION_CONTEXT is overridden."""
    if setting == REGION_CONTEXT_SETTING:
        reset_region_context()
