"""Hooks run around the stages of a container's life."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from containerkit.logs import Logging

Hook = Callable[[Any], None]


class Stage(Enum):
    """A point in the container lifecycle; the value names the hooks method."""

    CREATING = "creating"
    CREATED = "created"
    STARTING = "starting"
    STARTED = "started"
    STOPPING = "stopping"
    STOPPED = "stopped"
    TERMINATING = "terminating"
    TERMINATED = "terminated"


def _call_all(hooks: Iterable[Hook], target: Any) -> None:
    for hook in hooks:
        hook(target)


@dataclass
class ContainerLifecycleHooks:
    """Hooks for each lifecycle stage.

    Pre-create hooks receive the container request; all others receive the
    container. Hooks run in order and the first exception stops the run.
    """

    pre_creates: list[Hook] = field(default_factory=list)
    post_creates: list[Hook] = field(default_factory=list)
    pre_starts: list[Hook] = field(default_factory=list)
    post_starts: list[Hook] = field(default_factory=list)
    pre_stops: list[Hook] = field(default_factory=list)
    post_stops: list[Hook] = field(default_factory=list)
    pre_terminates: list[Hook] = field(default_factory=list)
    post_terminates: list[Hook] = field(default_factory=list)

    def creating(self, request: Any) -> None:
        """Run the hooks for before a container is created."""
        _call_all(self.pre_creates, request)

    def created(self, container: Any) -> None:
        """Run the hooks for after a container is created."""
        _call_all(self.post_creates, container)

    def starting(self, container: Any) -> None:
        """Run the hooks for before a container is started."""
        _call_all(self.pre_starts, container)

    def started(self, container: Any) -> None:
        """Run the hooks for after a container is started."""
        _call_all(self.post_starts, container)

    def stopping(self, container: Any) -> None:
        """Run the hooks for before a container is stopped."""
        _call_all(self.pre_stops, container)

    def stopped(self, container: Any) -> None:
        """Run the hooks for after a container is stopped."""
        _call_all(self.post_stops, container)

    def terminating(self, container: Any) -> None:
        """Run the hooks for before a container is terminated."""
        _call_all(self.pre_terminates, container)

    def terminated(self, container: Any) -> None:
        """Run the hooks for after a container is terminated."""
        _call_all(self.post_terminates, container)


def run_hooks(
    hooks_list: Iterable[ContainerLifecycleHooks], stage: Stage | str, target: Any
) -> None:
    """Run one stage of every hook set, in order.

    Raises ``ValueError`` for an unknown stage name.
    """
    stage = Stage(stage)
    for hooks in hooks_list:
        getattr(hooks, stage.value)(target)


def _short_id(container: Any) -> str:
    return container.id[:12]


def default_logging_hook(logger: Logging) -> ContainerLifecycleHooks:
    """Return hooks that log every lifecycle stage to ``logger``."""

    def container_hook(template: str) -> Hook:
        return lambda container: logger.printf(template, _short_id(container))

    return ContainerLifecycleHooks(
        pre_creates=[
            lambda request: logger.printf("🐳 Creating container for image %s", request.image)
        ],
        post_creates=[container_hook("✅ Container created: %s")],
        pre_starts=[container_hook("🐳 Starting container: %s")],
        post_starts=[container_hook("✅ Container started: %s")],
        pre_stops=[container_hook("🐳 Stopping container: %s")],
        post_stops=[container_hook("✋ Container stopped: %s")],
        pre_terminates=[container_hook("🐳 Terminating container: %s")],
        post_terminates=[container_hook("🚫 Container terminated: %s")],
    )