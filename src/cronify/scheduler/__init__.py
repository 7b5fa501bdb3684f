"""APScheduler bridge for emitted cron lines."""

from .triggers import next_fire_times, to_trigger, to_triggers

__all__ = ["next_fire_times", "to_trigger", "to_triggers"]
