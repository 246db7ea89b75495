"""Observer registry and synchronous notification dispatch.

A subject embeds an :class:`ObservableState` and forwards to it. Observers must
implement ``observable_changed(*args)``; the subject calls it with whatever
arguments it passes to :meth:`ObservableState.notify`.

Notification happens only after the subject has called
:meth:`ObservableState.mark_changed`. Each broadcast works on a snapshot of the
registry, so observers added or removed while it runs only take part from the
next broadcast on.

If an observer raises, the exception propagates out of ``notify`` unchanged,
the remaining observers of that broadcast are skipped and the changed flag
stays set. A later ``notify`` call therefore re-broadcasts.

No locking is done here; share a subject between threads only behind an
external lock.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

REACTION_METHOD = "observable_changed"

logger = logging.getLogger("eventful.observable")


@runtime_checkable
class Observer(Protocol):
    """Anything that can react to a subject's notifications."""

    def observable_changed(self, *args: Any) -> None:
        """Receive the arguments of one broadcast."""


class CapabilityError(TypeError):
    """Raised when registering an observer without a reaction method."""


class ObservableState:
    """Ordered observer registry plus the changed flag of one subject."""

    def __init__(self) -> None:
        self.observers: list[Observer] = []
        self.dirty = False

    def add(self, observer: Observer) -> None:
        """Register ``observer``; duplicates are kept and notified once each."""
        if not callable(getattr(observer, REACTION_METHOD, None)):
            raise CapabilityError(f"observer missing reaction method '{REACTION_METHOD}'")
        self.observers.append(observer)
        logger.debug("Added observer %r (%d registered)", observer, len(self.observers))

    def remove(self, observer: Observer) -> None:
        """Drop every registration that is, or compares equal to, ``observer``."""
        before = len(self.observers)
        self.observers[:] = [
            item for item in self.observers if not (item is observer or item == observer)
        ]
        if len(self.observers) != before:
            logger.debug("Removed observer %r (%d registered)", observer, len(self.observers))

    def clear(self) -> None:
        if self.observers:
            self.observers.clear()
            logger.debug("Cleared all observers")

    def count(self) -> int:
        return len(self.observers)

    def __len__(self) -> int:
        return self.count()

    def mark_changed(self, state: bool = True) -> None:
        """Set the changed flag; only a set flag lets ``notify`` broadcast."""
        self.dirty = bool(state)

    def is_changed(self) -> bool:
        return self.dirty

    def notify(self, *args: Any) -> None:
        """Broadcast ``args`` to a snapshot of the observers if changed."""
        if not self.dirty:
            return
        snapshot = tuple(self.observers)
        logger.debug("Notifying %d observer(s)", len(snapshot))
        for observer in snapshot:
            getattr(observer, REACTION_METHOD)(*args)
        self.dirty = False
