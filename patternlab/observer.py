"""An alarm manager notifying attached listeners of event changes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Event(Enum):
    ON = -1
    OFF = 0
    ALARM = 1


@dataclass(frozen=True)
class ResponseEventManager:
    event: Event


class EventListener(ABC):
    """Receives event updates."""

    def __init__(self, event: Event) -> None:
        self.current_event = event

    @abstractmethod
    def update(self, response: ResponseEventManager) -> None:
        """Handle a notification."""


class EventManager(ABC):
    """Keeps the set of attached listeners."""

    def __init__(self) -> None:
        self._listeners: dict[EventListener, None] = {}

    @property
    def listeners(self) -> list[EventListener]:
        return list(self._listeners)

    def attach(self, listener: EventListener) -> None:
        self._listeners[listener] = None

    def detach(self, listener: EventListener) -> None:
        """Remove an attached listener; KeyError if it is not attached."""
        if listener not in self._listeners:
            raise KeyError("listener is not attached")
        self._listeners.pop(listener)

    @abstractmethod
    def notify(self) -> None:
        """Tell every listener about the current state."""


class AlarmManager(EventManager):
    def __init__(self, event: Event) -> None:
        super().__init__()
        self._event = event

    @property
    def event(self) -> Event:
        return self._event

    def set_event(self, event: Event) -> None:
        self._event = event
        self.notify()

    def notify(self) -> None:
        response = ResponseEventManager(self._event)
        for listener in list(self._listeners):
            listener.update(response)


_MONITOR_TEXT = {Event.OFF: "OFF", Event.ON: "ON", Event.ALARM: "ALARM"}
_LOG_TEXT = {
    Event.OFF: "Alarm disabled",
    Event.ON: "Alarm enabled",
    Event.ALARM: "ALARM!!!",
}


class Monitor(EventListener):
    def update(self, response: ResponseEventManager) -> None:
        self.current_event = response.event

    def show_state(self) -> str:
        line = f"Monitor shows {_MONITOR_TEXT.get(self.current_event, '')}"
        print(line)
        return line


class LogSystem(EventListener):
    def update(self, response: ResponseEventManager) -> None:
        self.current_event = response.event

    def show_log(self) -> str:
        line = f"Log: {_LOG_TEXT.get(self.current_event, '')}"
        print(line)
        return line


def run() -> None:
    start_event = Event.OFF
    monitor = Monitor(start_event)
    log_system = LogSystem(start_event)

    alarm = AlarmManager(start_event)
    alarm.attach(monitor)
    alarm.attach(log_system)

    monitor.show_state()
    log_system.show_log()

    alarm.set_event(Event.ON)
    monitor.show_state()
    log_system.show_log()

    alarm.detach(monitor)

    alarm.set_event(Event.ALARM)
    log_system.show_log()