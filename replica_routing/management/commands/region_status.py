"""
Management command to show the region context and where reads and writes go
"""

import json

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import connections

from replica_routing.db_router import PRIMARY_ALIAS, RegionDatabaseRouter
from replica_routing.models import Item
from replica_routing.region import get_region_context


class Command(BaseCommand):
    help = 'Show the current/primary regions and the database aliases used for reads and writes'

    def add_arguments(self, parser):
        parser.add_argument(
            '--format',
            choices=['text', 'json'],
            default='text',
            help='Output format (default: text)',
        )
        parser.add_argument(
            '--check-connections',
            action='store_true',
            help='Run SELECT 1 against every configured database',
        )

    def handle(self, *args, **options):
        status = self.collect_status()

        if options['check_connections']:
            status['connections'] = {
                alias: self.check_connection(alias) for alias in settings.DATABASES
            }

        if options['format'] == 'json':
            self.stdout.write(json.dumps(status, indent=2))
        else:
            self.show_status(status)

    def collect_status(self):
        ctx = get_region_context()
        router = RegionDatabaseRouter()
        return {
            'fly_region': ctx.current(),
            'primary_region': ctx.primary(),
            'is_primary': ctx.is_primary(),
            'read_alias': router.db_for_read(Item) or PRIMARY_ALIAS,
            'write_alias': router.db_for_write(Item),
            'databases': {
                alias: {
                    'engine': config.get('ENGINE'),
                    'host': config.get('HOST') or None,
                    'port': str(config['PORT']) if config.get('PORT') else None,
                }
                for alias, config in settings.DATABASES.items()
            },
        }

    def check_connection(self, alias):
        """Return True when a trivial query succeeds on the alias"""
        try:
            with connections[alias].cursor() as cursor:
                cursor.execute("SELECT 1")
                return cursor.fetchone() is not None
        except Exception as e:
            self.stderr.write(self.style.ERROR(f"{alias} connection failed: {str(e)}"))
            return False

    def show_status(self, status):
        self.stdout.write(self.style.SUCCESS("=== Region Context ==="))
        self.stdout.write(f"FLY_REGION: {status['fly_region'] or '(unset)'}")
        self.stdout.write(f"PRIMARY_REGION: {status['primary_region'] or '(unset)'}")
        self.stdout.write(f"Primary instance: {status['is_primary']}")

        self.stdout.write(self.style.SUCCESS("=== Databases ==="))
        for alias, config in status['databases'].items():
            self.stdout.write(f"{alias}: {config['engine']}")
            if config['host']:
                self.stdout.write(f"  Host: {config['host']}")
            if config['port']:
                self.stdout.write(f"  Port: {config['port']}")

        self.stdout.write(f"Reads use: {status['read_alias']}")
        self.stdout.write(f"Writes use: {status['write_alias']}")

        for alias, ok in status.get('connections', {}).items():
            if ok:
                self.stdout.write(self.style.SUCCESS(f"{alias} connection successful"))
            else:
                self.stdout.write(self.style.ERROR(f"{alias} connection failed"))
