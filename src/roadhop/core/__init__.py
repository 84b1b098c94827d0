"""Core framework components for ROADHOP."""

from .state import GameMode, StateMachine
from .events import EventBus, Event, EventType

__all__ = ["GameMode", "StateMachine", "EventBus", "Event", "EventType"]
