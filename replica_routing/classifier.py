"""
Classification of failed database operations.

A write that lands on a read-only replica is only recognisable from its error
text: PostgreSQL reports SQLSTATE 25006 ("read only sql transaction"). Those
failures can be replayed in the primary region; every other failure
(connectivity, syntax, constraints, timeouts) must propagate unchanged.
"""
from dataclasses import dataclass

from django.db import DatabaseError

from .outcomes import Failure, FailureKind

READ_ONLY_SQLSTATE = '25006'
READ_ONLY_MARKER = f'SQLSTATE[{READ_ONLY_SQLSTATE}]'


@dataclass(frozen=True)
class Classification:
    replay_eligible: bool


def _sqlstate(exc):
    """SQLSTATE code exposed by the driver error (psycopg or psycopg2), if any."""
    for candidate in (exc, exc.__cause__):
        if candidate is None:
            continue
        code = getattr(candidate, 'sqlstate', None) or getattr(candidate, 'pgcode', None)
        if code:
            return str(code)
    return None


def raw_message(exc):
    """Error text, prefixed with the driver's SQLSTATE when it is not already in it."""
    message = str(exc)
    code = _sqlstate(exc)
    if code and f'SQLSTATE[{code}]' not in message:
        message = f'SQLSTATE[{code}]: {message}'
    return message


def failure_from_exception(exc):
    """Describe an exception raised by a database operation as a Failure."""
    message = raw_message(exc)
    if isinstance(exc, DatabaseError) and READ_ONLY_MARKER in message:
        kind = FailureKind.READ_ONLY_REJECTION
    else:
        kind = FailureKind.OTHER
    return Failure(kind=kind, raw_message=message, error=exc)


def classify(failure):
    """Decide whether a failure is a read-only rejection worth replaying."""
    eligible = (
        failure.kind is not FailureKind.OTHER
        and READ_ONLY_MARKER in (failure.raw_message or '')
    )
    return Classification(replay_eligible=eligible)


def is_replayable_exception(exc):
    return classify(failure_from_exception(exc)).replay_eligible
