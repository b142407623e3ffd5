# ar_core/models/__init__.py
"""Data models shared across ar_core."""

from .annotations import FIELD_ORDER, Action, Annotation, Appearance, Geometry, TimeRange
from .enums import ActionKind, AnnotationType, DisplayState
from .settings import AppSettings

__all__ = [
    "FIELD_ORDER",
    "Action",
    "ActionKind",
    "Annotation",
    "AnnotationType",
    "Appearance",
    "AppSettings",
    "DisplayState",
    "Geometry",
    "TimeRange",
]
