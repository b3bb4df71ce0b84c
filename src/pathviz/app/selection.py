# app/selection.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class SelectionPhase(Enum):
    IDLE = "idle"
    SOURCE_PICKED = "source_picked"  # exactly one endpoint set
    BOTH_PICKED = "both_picked"


@dataclass(frozen=True)
class Selection:
    """
    Which endpoints the user has tapped. Immutable; ``tap`` returns the next
    selection:
      • tapping the current source clears it
      • tapping the current target clears it
      • with no source, a tap sets the source
      • otherwise a tap sets (or replaces) the target
    """

    source: str | None = None
    target: str | None = None

    @property
    def phase(self) -> SelectionPhase:
        picked = (self.source is not None) + (self.target is not None)
        return (SelectionPhase.IDLE, SelectionPhase.SOURCE_PICKED, SelectionPhase.BOTH_PICKED)[
            picked
        ]

    @property
    def complete(self) -> bool:
        return self.phase is SelectionPhase.BOTH_PICKED

    def tap(self, node: str) -> Selection:
        if node == self.source:
            return replace(self, source=None)
        if node == self.target:
            return replace(self, target=None)
        if self.source is None:
            return replace(self, source=node)
        return replace(self, target=node)

    def reset(self) -> Selection:
        return Selection()
