"""Playback-time visibility: engine plus player/renderer glue."""

from .controller import PlaybackController, Player, Renderer
from .visibility import Transition, VisibilityEngine, compute_visibility

__all__ = [
    'PlaybackController',
    'Player',
    'Renderer',
    'Transition',
    'VisibilityEngine',
    'compute_visibility',
]
