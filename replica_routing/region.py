"""
Region context for the running process.

Holds the two region tokens the routing policy needs: the region this
instance runs in and the region hosting the writable primary database.
Built once at startup and shared read-only by every request.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

CURRENT_REGION_ENV = 'FLY_REGION'
PRIMARY_REGION_ENV = 'PRIMARY_REGION'
REGION_CONTEXT_SETTING = 'REGION_CONTEXT'


def _token(value):
    """Normalise an environment value to a region token or None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class RegionContext:
    """Immutable pair of (current region, primary region)."""

    current_region: Optional[str] = None
    primary_region: Optional[str] = None

    @classmethod
    def load(cls, env: Optional[Mapping[str, str]] = None) -> 'RegionContext':
        """Read both region tokens from env (defaults to os.environ)."""
        if env is None:
            env = os.environ
        return cls(
            current_region=_token(env.get(CURRENT_REGION_ENV)),
            primary_region=_token(env.get(PRIMARY_REGION_ENV)),
        )

    def current(self) -> Optional[str]:
        return self.current_region

    def primary(self) -> Optional[str]:
        return self.primary_region

    def is_known(self) -> bool:
        return self.current_region is not None and self.primary_region is not None

    def is_primary(self) -> bool:
        """True iff both regions are known and equal."""
        return self.is_known() and self.current_region == self.primary_region

    def is_remote(self) -> bool:
        """True iff both regions are known and differ (a replica region)."""
        return self.is_known() and self.current_region != self.primary_region

    def __str__(self):
        return f"current={self.current_region or '-'} primary={self.primary_region or '-'}"


@lru_cache(maxsize=None)
def get_region_context() -> RegionContext:
    """
    Process-wide region context.

    Returns the instance built once in settings (``REGION_CONTEXT``), the same
    one used to configure DATABASES. Projects that do not define it get a
    context loaded from the environment on first use.
    """
    from django.conf import settings
    ctx = getattr(settings, REGION_CONTEXT_SETTING, None)
    if ctx is None:
        ctx = RegionContext.load()
    return ctx


def reset_region_context():
    """Forget the cached context so the next lookup re-reads settings."""
    get_region_context.cache_clear()
