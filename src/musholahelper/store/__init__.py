"""Schedule store collaborators."""

from musholahelper.store.base import ScheduleStore
from musholahelper.store.memory import InMemoryScheduleStore

__all__ = [
    "ScheduleStore",
    "InMemoryScheduleStore",
]
