# src/jamfusage/app/event_bus.py
import logging
from contextlib import contextmanager

logger = logging.getLogger(__name__)

# Refresh jobs publish "<job>.ready" {"sheet", "rows"} or "<job>.failed" {"sheet", "error"}
_subs: dict[str, list] = {}

def ready_topic(job: str) -> str:
    return f"{job}.ready"

def failed_topic(job: str) -> str:
    return f"{job}.failed"

def publish(topic: str, payload=None):
    for h in list(_subs.get(topic, [])):
        try:
            h(payload)
        except Exception:
            # listener errors are logged, never raised to the publisher
            logger.exception("Listener for %s failed", topic)

def subscribe(topic: str, handler):
    _subs.setdefault(topic, []).append(handler)

def unsubscribe(topic: str, handler):
    handlers = _subs.get(topic, [])
    if handler in handlers:
        handlers.remove(handler)

@contextmanager
def subscription(topic: str, handler):
    """Listen on topic for the duration of a with-block."""
    subscribe(topic, handler)
    try:
        yield handler
    finally:
        unsubscribe(topic, handler)
