# ar_core/annotations/attribute_map.py
"""
Short-key table for the AR text format.

One forward table (field name -> short key) is the only source of truth. The
reverse lookup is derived from it when the map is built, so encode and decode
can never drift apart.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping


class AttributeMap:
    """Immutable bidirectional mapping between canonical field names and short keys."""

    def __init__(self, forward: Mapping[str, str]):
        self._forward = MappingProxyType(dict(forward))
        reverse: dict[str, str] = {}
        for name, key in self._forward.items():
            if key in reverse:
                raise ValueError(
                    f"Short key {key!r} is used by both {reverse[key]!r} and {name!r}"
                )
            reverse[key] = name
        self._reverse = MappingProxyType(reverse)

    def short_key(self, field_name: str) -> str | None:
        """Forward lookup; None for fields that are not encoded."""
        return self._forward.get(field_name)

    def field_name(self, short_key: str) -> str | None:
        """Reverse lookup; None for unknown short keys."""
        return self._reverse.get(short_key)

    @property
    def forward(self) -> Mapping[str, str]:
        return self._forward

    @property
    def reverse(self) -> Mapping[str, str]:
        return self._reverse

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._forward

    def __iter__(self) -> Iterator[str]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)


ATTRIBUTE_MAP = AttributeMap({
    "type": "tp",
    "style": "s",
    "x": "x",
    "y": "y",
    "width": "w",
    "height": "h",
    "timeStart": "ts",
    "timeEnd": "te",
    "text": "t",
    "actionType": "at",
    "actionUrl": "au",
    "actionSeconds": "as",
    "bgOpacity": "bgo",
    "bgColor": "bgc",
    "fgColor": "fgc",
    "textSize": "txsz",
})

# Percent-encoded on the wire
STRING_FIELDS = frozenset({"type", "style", "text", "actionType", "actionUrl"})

# Numeric fields that decode to int rather than float
INTEGER_FIELDS = frozenset({"bgColor", "fgColor"})

# Minimal serialization profile
REQUIRED_FIELDS = ("x", "y", "width", "height", "timeStart", "timeEnd")
