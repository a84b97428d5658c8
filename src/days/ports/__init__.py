"""Ports - interfaces/protocols for external dependencies."""

from .event_store import EventStore

__all__ = [
    "EventStore",
]
