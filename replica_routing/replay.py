"""
Replay directives.

When a write is rejected by a read-only replica, the request is answered with
a 409 carrying a ``fly-replay`` header. The edge proxy intercepts that
response and re-issues the original request in the named region; the end user
never sees it.
"""
from dataclasses import dataclass

from django.db import DatabaseError
from django.http import HttpResponse

from .classifier import classify, failure_from_exception
from .outcomes import Replay, Success

REPLAY_HEADER = 'fly-replay'
REPLAY_STATUS = 409


@dataclass(frozen=True)
class ReplayDirective:
    target_region: str
    http_status: int = REPLAY_STATUS

    @property
    def header_value(self):
        return f'region={self.target_region}'

    @property
    def body(self):
        return f'Replaying request in {self.target_region}'

    @property
    def headers(self):
        return {
            REPLAY_HEADER: self.header_value,
            'content-type': 'text/plain',
        }


def build_directive(ctx):
    """Directive targeting the primary region, or None when there is no safe target."""
    if not ctx.is_remote():
        return None
    return ReplayDirective(target_region=ctx.primary())


def directive_for_exception(exc, ctx):
    """Classify a failed write and build its directive if it may be replayed."""
    failure = failure_from_exception(exc)
    if not classify(failure).replay_eligible:
        return None
    return build_directive(ctx)


def render_replay_response(directive):
    """Turn a directive into the response the edge proxy acts on."""
    response = HttpResponse(
        directive.body,
        status=directive.http_status,
        content_type='text/plain',
    )
    response[REPLAY_HEADER] = directive.header_value
    return response


def execute_read(operation):
    return Success(operation())


def execute_write(operation, ctx):
    """
    Attempt a write once.

    Returns Success with the operation's value, or Replay when the write was
    rejected by a read-only replica and the primary region is known. Any other
    failure, or a rejection with no replay target, re-raises the original error.
    """
    try:
        value = operation()
    except DatabaseError as exc:
        failure = failure_from_exception(exc)
        directive = build_directive(ctx) if classify(failure).replay_eligible else None
        if directive is None:
            raise
        return Replay(directive=directive, failure=failure)
    return Success(value)
