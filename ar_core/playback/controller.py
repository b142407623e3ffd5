# ar_core/playback/controller.py
"""
Glue between a video player, the visibility engine and a renderer.

The player and renderer are external; only their interfaces live here. The
periodic driver that calls tick() every update_interval_ms is external too.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from ..models.annotations import Annotation
from ..models.enums import ActionKind, DisplayState
from ..models.settings import AppSettings
from .visibility import Transition, VisibilityEngine

logger = logging.getLogger(__name__)


class Player(Protocol):
    def get_video_time(self) -> float: ...

    def seek_to(self, seconds: float) -> None: ...

    def is_paused(self) -> bool: ...


class Renderer(Protocol):
    def show(self, annotation_id: int, annotation: Annotation) -> None: ...

    def hide(self, annotation_id: int, annotation: Annotation) -> None: ...

    def navigate(self, url: str) -> None: ...


class PlaybackController:
    """Routes player events and user clicks into the engine, and transitions out to the renderer."""

    def __init__(self, engine: VisibilityEngine, player: Player, renderer: Renderer, update_interval_ms: int = 1000):
        if update_interval_ms <= 0:
            raise ValueError(f"update_interval_ms must be positive, got {update_interval_ms}")
        self.engine = engine
        self.player = player
        self.renderer = renderer
        self.update_interval_ms = update_interval_ms
        self.running = False

    @classmethod
    def from_settings(cls, engine: VisibilityEngine, player: Player, renderer: Renderer, settings: AppSettings) -> PlaybackController:
        """Build a controller whose tick period comes from the app settings."""
        return cls(engine, player, renderer, update_interval_ms=settings.update_interval_ms)

    def _apply(self, transitions: dict[int, Transition]) -> None:
        for ann_id, transition in transitions.items():
            annotation = self.engine.annotation(ann_id)
            if transition.current is DisplayState.VISIBLE:
                self.renderer.show(ann_id, annotation)
            else:
                self.renderer.hide(ann_id, annotation)

    def refresh(self) -> dict[int, Transition]:
        """Read the time once and push the resulting transitions."""
        transitions = self.engine.update(self.player.get_video_time())
        self._apply(transitions)
        return transitions

    def tick(self) -> dict[int, Transition]:
        if self.player.is_paused():
            return {}
        return self.refresh()

    def start(self) -> None:
        self.running = True
        self.tick()

    def stop(self) -> None:
        self.running = False
        self._apply(self.engine.hide_all())

    def on_play(self) -> None:
        if not self.running:
            self.start()

    def on_pause(self) -> None:
        if self.running:
            self.stop()

    def on_seeked(self) -> None:
        self.refresh()

    def on_click(self, annotation_id: int) -> None:
        action = self.engine.annotation(annotation_id).action
        if action is None:
            return
        if action.kind is ActionKind.TIME:
            logger.debug("Annotation %d seeks to %ss", annotation_id, action.seconds)
            self.player.seek_to(action.seconds or 0)
            self.tick()
        elif action.kind is ActionKind.URL and action.href:
            logger.debug("Annotation %d navigates to %s", annotation_id, action.href)
            self.renderer.navigate(action.href)

    def on_dismiss(self, annotation_id: int) -> None:
        transition = self.engine.dismiss(annotation_id)
        if transition is not None:
            self._apply({annotation_id: transition})

    def load(self, annotations: Iterable[Annotation]) -> None:
        """Swap in a new annotation set, hiding whatever the old one showed."""
        self._apply(self.engine.hide_all())
        self.engine.load(annotations)
        if self.running:
            self.tick()
