"""Persistence helpers for the task tracker."""

from task_tracker.persistence._utils import atomic_write_json, atomic_write_text, dump_json

__all__ = [
    "atomic_write_json",
    "atomic_write_text",
    "dump_json",
]
