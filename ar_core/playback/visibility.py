# ar_core/playback/visibility.py
"""
Temporal visibility engine.

Decides, for a playback position, which annotations are shown. Display state
is kept in the engine's own table keyed by annotation id (the annotation's
position in the loaded list); the Annotation records are never touched.

States: HIDDEN, VISIBLE, DISMISSED. DISMISSED is absorbing until the set is
reloaded or reset. Only real state changes are reported, so a steady tick
costs the renderer nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from ..models.annotations import Annotation, TimeRange
from ..models.enums import DisplayState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """A single state change the renderer must apply."""

    annotation_id: int
    previous: DisplayState
    current: DisplayState


def compute_visibility(state: DisplayState, time_range: TimeRange, current_time: float) -> DisplayState:
    """
    Target state for one annotation at current_time.

    The window is half-open: visible at start, hidden again at end.
    """
    if state is DisplayState.DISMISSED:
        return DisplayState.DISMISSED
    if time_range.contains(current_time):
        return DisplayState.VISIBLE
    return DisplayState.HIDDEN


class VisibilityEngine:
    """Owns the display state of one loaded annotation set."""

    def __init__(self, annotations: Iterable[Annotation] = ()):
        self._annotations: dict[int, Annotation] = {}
        self._states: dict[int, DisplayState] = {}
        self.load(annotations)

    def load(self, annotations: Iterable[Annotation]) -> None:
        """Replace the annotation set; every annotation starts HIDDEN."""
        self._annotations = dict(enumerate(annotations))
        self.reset()
        logger.debug("Loaded %d annotations", len(self._annotations))

    def reset(self) -> None:
        """Put every annotation back to HIDDEN, clearing dismissals."""
        self._states = {ann_id: DisplayState.HIDDEN for ann_id in self._annotations}

    def next_state(self, annotation_id: int, current_time: float) -> DisplayState:
        """The state update() would assign, without applying it."""
        return compute_visibility(
            self._states[annotation_id],
            self._annotations[annotation_id].time_range,
            current_time,
        )

    def update(self, current_time: float) -> dict[int, Transition]:
        """
        Apply visibility for current_time to every annotation.

        All annotations are judged against the same time value.

        Returns:
            Transitions keyed by annotation id; empty when nothing changed
        """
        transitions: dict[int, Transition] = {}
        for ann_id, annotation in self._annotations.items():
            previous = self._states[ann_id]
            current = compute_visibility(previous, annotation.time_range, current_time)
            if current is not previous:
                self._states[ann_id] = current
                transitions[ann_id] = Transition(ann_id, previous, current)

        if transitions:
            logger.debug("t=%.3f: %d transitions", current_time, len(transitions))
        return transitions

    def dismiss(self, annotation_id: int) -> Transition | None:
        """
        Permanently hide one annotation until the next load/reset.

        Raises:
            KeyError: For an unknown annotation id
        """
        previous = self._states[annotation_id]
        if previous is DisplayState.DISMISSED:
            return None
        self._states[annotation_id] = DisplayState.DISMISSED
        return Transition(annotation_id, previous, DisplayState.DISMISSED)

    def hide_all(self) -> dict[int, Transition]:
        """Hide everything currently visible (playback stopped)."""
        transitions: dict[int, Transition] = {}
        for ann_id, previous in self._states.items():
            if previous is DisplayState.VISIBLE:
                self._states[ann_id] = DisplayState.HIDDEN
                transitions[ann_id] = Transition(ann_id, previous, DisplayState.HIDDEN)
        return transitions

    def state(self, annotation_id: int) -> DisplayState:
        return self._states[annotation_id]

    def annotation(self, annotation_id: int) -> Annotation:
        return self._annotations[annotation_id]

    def items(self) -> Iterator[tuple[int, Annotation]]:
        return iter(self._annotations.items())

    def visible_ids(self) -> list[int]:
        return [ann_id for ann_id, state in self._states.items() if state is DisplayState.VISIBLE]

    def __len__(self) -> int:
        return len(self._annotations)

    def __iter__(self) -> Iterator[int]:
        return iter(self._annotations)

    def __contains__(self, annotation_id: object) -> bool:
        return annotation_id in self._annotations
