# ar_core/models/annotations.py
"""
Canonical annotation data model.

An Annotation is produced by either ingest path (legacy XML or AR text) and
consumed by the visibility engine and the renderer. Records are built once
per load and treated as read-only afterwards; display state lives in the
visibility engine, not here.

Geometry is in percent of the video frame, times are in FLOAT SECONDS.

The flat field view (to_fields/from_fields) uses the canonical field names
of the AR format: x, y, width, height, timeStart, timeEnd, actionType, ...
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..errors import FormatError
from .enums import ActionKind

# Canonical flat field order; serialization follows it.
FIELD_ORDER = (
    "type",
    "style",
    "x",
    "y",
    "width",
    "height",
    "timeStart",
    "timeEnd",
    "text",
    "actionType",
    "actionUrl",
    "actionSeconds",
    "bgOpacity",
    "bgColor",
    "fgColor",
    "textSize",
)


@dataclass
class Geometry:
    """Annotation box, each value a percentage of the video frame (not clamped)."""

    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None


@dataclass
class TimeRange:
    """Display window in seconds, half-open: [start, end)."""

    start: float | None = None
    end: float | None = None

    def contains(self, seconds: float) -> bool:
        if self.start is None or self.end is None:
            return False
        # NaN compares False on both sides, so it never matches
        return self.start <= seconds < self.end


@dataclass
class Action:
    """Click action: seek within the video (TIME) or leave for another one (URL)."""

    kind: ActionKind
    seconds: float | None = None
    href: str | None = None

    @classmethod
    def seek(cls, seconds: float) -> Action:
        return cls(kind=ActionKind.TIME, seconds=seconds)

    @classmethod
    def link(cls, href: str) -> Action:
        return cls(kind=ActionKind.URL, href=href)


@dataclass
class Appearance:
    """Colors are 24-bit RGB integers; text_size is percent of container height."""

    bg_opacity: float | None = None
    bg_color: int | None = None
    fg_color: int | None = None
    text_size: float | None = None

    def is_empty(self) -> bool:
        return (
            self.bg_opacity is None
            and self.bg_color is None
            and self.fg_color is None
            and self.text_size is None
        )


@dataclass
class Annotation:
    """A single time-coded, clickable overlay region."""

    type: str | None = None
    geometry: Geometry = field(default_factory=Geometry)
    time_range: TimeRange = field(default_factory=TimeRange)
    style: str | None = None
    text: str | None = None
    action: Action | None = None
    appearance: Appearance | None = None

    @property
    def time_start(self) -> float | None:
        return self.time_range.start

    @property
    def time_end(self) -> float | None:
        return self.time_range.end

    def to_fields(self) -> dict[str, Any]:
        """Flatten to canonical field names, omitting absent values."""
        values: dict[str, Any] = {
            "type": self.type,
            "style": self.style,
            "x": self.geometry.x,
            "y": self.geometry.y,
            "width": self.geometry.width,
            "height": self.geometry.height,
            "timeStart": self.time_range.start,
            "timeEnd": self.time_range.end,
            "text": self.text,
        }
        if self.action is not None:
            values["actionType"] = self.action.kind.value
            values["actionUrl"] = self.action.href
            values["actionSeconds"] = self.action.seconds
        if self.appearance is not None:
            values["bgOpacity"] = self.appearance.bg_opacity
            values["bgColor"] = self.appearance.bg_color
            values["fgColor"] = self.appearance.fg_color
            values["textSize"] = self.appearance.text_size

        return {name: values[name] for name in FIELD_ORDER if values.get(name) is not None}

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> Annotation:
        """
        Build an Annotation from canonical flat field names.

        Raises:
            FormatError: If action fields are present without a valid actionType
        """
        action = None
        if any(name in fields for name in ("actionType", "actionUrl", "actionSeconds")):
            action_type = fields.get("actionType")
            try:
                kind = ActionKind(action_type)
            except ValueError:
                raise FormatError(f"Unknown action type {action_type!r}") from None
            action = Action(kind=kind, seconds=fields.get("actionSeconds"), href=fields.get("actionUrl"))

        appearance = Appearance(
            bg_opacity=fields.get("bgOpacity"),
            bg_color=fields.get("bgColor"),
            fg_color=fields.get("fgColor"),
            text_size=fields.get("textSize"),
        )

        return cls(
            type=fields.get("type"),
            geometry=Geometry(
                x=fields.get("x"),
                y=fields.get("y"),
                width=fields.get("width"),
                height=fields.get("height"),
            ),
            time_range=TimeRange(start=fields.get("timeStart"), end=fields.get("timeEnd")),
            style=fields.get("style"),
            text=fields.get("text"),
            action=action,
            appearance=None if appearance.is_empty() else appearance,
        )

    def to_dict(self) -> dict[str, Any]:
        """Nested, JSON-friendly view."""
        result: dict[str, Any] = {
            "type": self.type,
            "geometry": {
                "x": self.geometry.x,
                "y": self.geometry.y,
                "width": self.geometry.width,
                "height": self.geometry.height,
            },
            "time_range": {"start": self.time_range.start, "end": self.time_range.end},
        }
        if self.style is not None:
            result["style"] = self.style
        if self.text is not None:
            result["text"] = self.text
        if self.action is not None:
            action: dict[str, Any] = {"kind": self.action.kind.value}
            if self.action.seconds is not None:
                action["seconds"] = self.action.seconds
            if self.action.href is not None:
                action["href"] = self.action.href
            result["action"] = action
        if self.appearance is not None:
            result["appearance"] = {
                k: v
                for k, v in (
                    ("bg_opacity", self.appearance.bg_opacity),
                    ("bg_color", self.appearance.bg_color),
                    ("fg_color", self.appearance.fg_color),
                    ("text_size", self.appearance.text_size),
                )
                if v is not None
            }
        return result
