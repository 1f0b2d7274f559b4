"""
Actuators - Turning Abstract Events into Input

TigerStyle: Abstract interface allows swapping recording/real implementations.
The scheduler loop is synchronous, so every actuator it sees must block until
its event has been delivered. BlockingActuator adapts async backends.
"""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from ..core.constants import ACTUATOR_ACK_TIMEOUT_SECS_DEFAULT
from ..core.errors import ActuatorError
from ..core.models import ActionKind, ActuatorEvent

logger = logging.getLogger(__name__)


@runtime_checkable
class Actuator(Protocol):
    """Protocol for synchronous actuators."""

    def perform(self, event: ActuatorEvent) -> None:
        """Deliver an event, returning once it has been injected."""
        ...

    def pending_alerts(self) -> list[int]:
        """Button count of every alert currently on screen."""
        ...


@runtime_checkable
class AsyncActuator(Protocol):
    """Protocol for actuators whose backend acknowledges asynchronously."""

    async def perform(self, event: ActuatorEvent) -> None:
        """Deliver an event, completing once the backend acknowledges it."""
        ...

    async def pending_alerts(self) -> list[int]:
        """Button count of every alert currently on screen."""
        ...


@dataclass
class RecordingActuator:
    """In-memory actuator that records every event.

    Used for dry runs and tests. Alerts are whatever the caller puts in
    `alerts`; tapping a button does not dismiss them.
    """

    alerts: list[int] = field(default_factory=list)
    events: list[ActuatorEvent] = field(default_factory=list)
    _counts: Counter = field(default_factory=Counter, init=False)

    def perform(self, event: ActuatorEvent) -> None:
        assert event is not None, "event must not be None"
        self.events.append(event)
        self._counts[event.kind.value] += 1

    def pending_alerts(self) -> list[int]:
        return list(self.alerts)

    def kinds(self) -> list[ActionKind]:
        """Kinds of all recorded events, in order."""
        return [event.kind for event in self.events]

    def stats(self) -> dict[str, int]:
        """Get event counts keyed by kind value."""
        return dict(self._counts)

    def clear(self) -> None:
        """Forget all recorded events."""
        self.events.clear()
        self._counts.clear()


class BlockingActuator:
    """Synchronous facade over an AsyncActuator.

    Every call runs the backend coroutine to completion on a private event
    loop, so the scheduler waits for the acknowledgement before the next tick.
    The loop is created on first use and released by close(); the
    context-manager form closes it automatically.

    Usage:
        with BlockingActuator(remote_device) as actuator:
            ctx = ActionContext(monkey=monkey, actuator=actuator)
            add_default_actions(ctx)
            monkey.run(1000)
    """

    def __init__(
        self,
        backend: AsyncActuator,
        timeout_secs: float = ACTUATOR_ACK_TIMEOUT_SECS_DEFAULT,
    ):
        """Create the bridge.

        Args:
            backend: The async actuator to drive.
            timeout_secs: Max wait for an acknowledgement.
        """
        assert backend is not None, "backend must not be None"
        assert timeout_secs > 0, f"timeout_secs ({timeout_secs}) must be positive"
        self._backend = backend
        self._timeout_secs = timeout_secs
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._closed = False

    def perform(self, event: ActuatorEvent) -> None:
        self._wait(self._backend.perform(event), f"perform {event.kind.value}")

    def pending_alerts(self) -> list[int]:
        return self._wait(self._backend.pending_alerts(), "pending_alerts")

    def _wait(self, coro, operation: str):
        if self._closed:
            coro.close()
            raise ActuatorError(f"{operation}: actuator is closed")
        if self._loop is None:
            self._loop = asyncio.new_event_loop()
        try:
            return self._loop.run_until_complete(
                asyncio.wait_for(coro, timeout=self._timeout_secs)
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Actuator did not acknowledge {operation} within {self._timeout_secs}s")
            raise ActuatorError(
                f"{operation}: no acknowledgement within {self._timeout_secs}s"
            ) from e

    def close(self) -> None:
        """Close the private event loop, if one was created."""
        self._closed = True
        if self._loop is not None:
            self._loop.close()
            self._loop = None

    def __enter__(self) -> BlockingActuator:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
