"""Resource lifecycle helpers and the integration scenarios built on them."""

from .resources import managed_alarm, managed_queue, managed_resource
from .scenarios import (
    run_dead_letter_queue_scenario,
    run_disable_alarm_scenario,
    run_get_queue_url_scenario,
)

__all__ = [
    "managed_alarm",
    "managed_queue",
    "managed_resource",
    "run_dead_letter_queue_scenario",
    "run_disable_alarm_scenario",
    "run_get_queue_url_scenario",
]
