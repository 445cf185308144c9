"""
Database Router for region-aware read/write splitting.

This router provides:
1. Reads and writes sent to the local replica when running away from the primary region
2. A write rejected by the replica is replayed in the primary region (see replay.py)
3. Fallback to the default database when no replica alias is configured
4. Migrations only against the default (primary) database
"""
from django.conf import settings

from .logging_utils import log_routing_decision
from .region import get_region_context

REPLICA_ALIAS = 'replica'
PRIMARY_ALIAS = 'default'


class RegionDatabaseRouter:
    """
    A router that sends every query to the nearest endpoint.

    Writes are attempted against the same endpoint as reads. Away from the
    primary that is the read-only replica, which rejects them with SQLSTATE
    25006 so the request can be replayed where the primary lives.
    """

    def nearest_alias(self, operation):
        ctx = get_region_context()
        alias = None
        if REPLICA_ALIAS in settings.DATABASES and ctx.is_remote():
            alias = REPLICA_ALIAS
        log_routing_decision(operation, alias, ctx)
        return alias

    def db_for_read(self, model, **hints):
        """Suggest the database that should be used for reads of objects of type model."""
        return self.nearest_alias('read')

    def db_for_write(self, model, **hints):
        """Suggest the database that should be used for writes of objects of type model."""
        return self.nearest_alias('write') or PRIMARY_ALIAS

    def allow_relation(self, obj1, obj2, **hints):
        """Both aliases point at the same data, so relations between them are fine."""
        db_set = {PRIMARY_ALIAS, REPLICA_ALIAS}
        if obj1._state.db in db_set and obj2._state.db in db_set:
            return True
        return None

    def allow_migrate(self, db, app_label, model_name=None, **hints):
        """Only migrate the primary; replicas follow it."""
        if db == PRIMARY_ALIAS:
            return True
        elif db == REPLICA_ALIAS:
            return False
        return None
