"""
Change tracking signals.

`change_logged` fires once per tracked write with the number of entries it
produced (the fan-out), so operators can spot components with heavy
field churn.
"""
import logging

from django.conf import settings
from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

DEFAULT_FANOUT_WARNING_THRESHOLD = 5

# Sent with: component_type, component_id, change_type, fan_out
change_logged = Signal()


@receiver(change_logged)
def warn_on_high_fan_out(sender, component_type, component_id, change_type, fan_out, **kwargs):
    """Log a warning when a single write produced many entries"""
    threshold = getattr(settings, 'CHANGE_TRACKING', {}).get(
        'FANOUT_WARNING_THRESHOLD', DEFAULT_FANOUT_WARNING_THRESHOLD
    )
    if fan_out >= threshold:
        logger.warning(
            f"High change fan-out: {component_type} #{component_id} wrote {fan_out} "
            f"{change_type} entries in one operation"
        )
