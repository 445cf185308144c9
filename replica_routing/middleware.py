"""
Region middleware.
Converts read-only rejections into replay responses and tags responses with
the region that served them.
"""
from django.utils.deprecation import MiddlewareMixin

from .classifier import failure_from_exception
from .logging_utils import log_replay_event
from .region import get_region_context
from .replay import directive_for_exception, render_replay_response


class ReplayMiddleware(MiddlewareMixin):
    """
    Answer writes that hit a read-only replica with a fly-replay response.

    Returning a response from process_exception short-circuits Django's 500
    handling, so the rejection is never reported as an error.
    """

    def process_exception(self, request, exception):
        directive = directive_for_exception(exception, get_region_context())
        if directive is None:
            return None

        log_replay_event(directive, request, failure_from_exception(exception))
        return render_replay_response(directive)


class RegionHeaderMiddleware(MiddlewareMixin):
    """Add a fly-region header naming the region that handled the request."""

    def process_response(self, request, response):
        region = get_region_context().current()
        if region:
            response['fly-region'] = region
        return response
