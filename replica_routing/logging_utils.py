"""
Logging utilities for region-aware replica routing.
Provides standardized logging functions and the error-reporting hook that keeps
replayed read-only rejections out of the error logs.
"""
import logging

from .region import get_region_context
from .replay import directive_for_exception

# Get loggers for different categories
app_logger = logging.getLogger('replica_routing')
replay_logger = logging.getLogger('replica_routing.replay')
performance_logger = logging.getLogger('replica_routing.performance')


def get_client_info(request):
    """Extract client information from request for logging."""
    if not request:
        return {
            'ip': 'Unknown',
            'path': 'Unknown',
            'method': 'Unknown',
        }

    # Get client IP (handles proxy headers)
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('HTTP_FLY_CLIENT_IP') or request.META.get('REMOTE_ADDR', 'Unknown')

    return {
        'ip': ip,
        'path': request.path,
        'method': request.method,
    }


def should_report(exc, ctx=None):
    """
    Error-reporting hook.

    A read-only rejection that is replayed in the primary region is not an
    application error. Without a replay target it propagates and is reported
    like any other failure.
    """
    if ctx is None:
        ctx = get_region_context()
    return directive_for_exception(exc, ctx) is None


class SuppressReplayableErrors(logging.Filter):
    """Drop log records carrying a read-only rejection that is being replayed."""

    def filter(self, record):
        if record.exc_info and record.exc_info[1] is not None:
            return should_report(record.exc_info[1])
        return True


def log_replay_event(directive, request=None, failure=None):
    """Log a write being handed to the primary region."""
    client_info = get_client_info(request)

    replay_logger.info(
        f"Replay | Target: {directive.target_region} | {client_info['method']} "
        f"{client_info['path']} | IP: {client_info['ip']}",
        extra={
            'event_type': 'REPLAY',
            'target_region': directive.target_region,
            'remote_addr': client_info['ip'],
            'path': client_info['path'],
            'raw_message': failure.raw_message if failure else '',
        }
    )


def log_routing_decision(operation, alias, ctx):
    """Log which database alias an operation was routed to."""
    app_logger.debug(
        f"Routing | Operation: {operation} | Alias: {alias or 'default'} | {ctx}",
        extra={
            'operation': operation,
            'alias': alias or 'default',
            'current_region': ctx.current(),
            'primary_region': ctx.primary(),
        }
    )


def log_performance_event(operation, duration, details=None):
    """Log performance metrics."""
    details = details or {}

    performance_logger.info(
        f"Performance | Operation: {operation} | Duration: {duration:.3f}s | Details: {details}",
        extra={
            'operation': operation,
            'duration': duration,
            'details': details
        }
    )


def log_system_event(event_type, description, level="INFO", extra_data=None):
    """Log system-level events."""
    extra_data = extra_data or {}

    log_func = {
        'DEBUG': app_logger.debug,
        'INFO': app_logger.info,
        'WARNING': app_logger.warning,
        'ERROR': app_logger.error,
        'CRITICAL': app_logger.critical
    }.get(level.upper(), app_logger.info)

    log_func(
        f"System {event_type} | {description}",
        extra={
            'event_type': event_type,
            'description': description,
            **extra_data
        }
    )
