"""
Latency demo views.
Read and write a tiny table and report how long the database took, so the
benefit of reading from the nearest replica is visible per region.
"""
import time

from django.http import JsonResponse
from django.utils import timezone
from django.utils.crypto import get_random_string
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from .logging_utils import log_performance_event, log_replay_event
from .models import Item
from .outcomes import Replay
from .region import get_region_context
from .replay import execute_read, execute_write, render_replay_response


def _region_info(ctx):
    return {
        'fly_region': ctx.current(),
        'primary_region': ctx.primary(),
        'is_primary': ctx.is_primary(),
    }


@require_http_methods(["GET"])
def read_items(request):
    """Fetch the five newest items to test read speed."""
    ctx = get_region_context()
    start_time = time.perf_counter()

    outcome = execute_read(lambda: list(Item.objects.order_by('-created_at')[:5]))

    # ... convert to ms
    elapsed = (time.perf_counter() - start_time) * 1000
    log_performance_event('items.read', elapsed / 1000, {'count': len(outcome.value)})

    return JsonResponse({
        'success': True,
        'count': len(outcome.value),
        'items': [item.name for item in outcome.value],
        'time_ms': round(elapsed, 2),
        **_region_info(ctx),
        'timestamp': timezone.now().isoformat(),
    })


@require_http_methods(["POST"])
def write_item(request):
    """Create an item to test write speed."""
    ctx = get_region_context()
    name = get_random_string(10)
    start_time = time.perf_counter()

    outcome = execute_write(lambda: Item.objects.create(name=name), ctx)
    if isinstance(outcome, Replay):
        log_replay_event(outcome.directive, request, outcome.failure)
        return render_replay_response(outcome.directive)

    elapsed = (time.perf_counter() - start_time) * 1000
    log_performance_event('items.write', elapsed / 1000, {'name': name})

    return JsonResponse({
        'success': True,
        'name': outcome.value.name,
        'time_ms': round(elapsed, 2),
        **_region_info(ctx),
        'timestamp': timezone.now().isoformat(),
    }, status=201)


@csrf_exempt
@require_http_methods(["GET", "POST"])
def items(request):
    """GET reads the newest items, POST writes a new one."""
    if request.method == "POST":
        return write_item(request)
    return read_items(request)
