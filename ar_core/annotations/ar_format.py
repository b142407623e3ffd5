# ar_core/annotations/ar_format.py
"""
AR text format codec.

Record:  key=value,key=value,...      (short keys from ATTRIBUTE_MAP)
List:    record;record;...;           (always a trailing ';')

String fields are percent-encoded with the same safe set as JavaScript's
encodeURIComponent, so ',', ';' and '=' never appear raw inside a value.
Numbers use the shortest repr that round-trips; integral values drop the
".0" so "x=10" survives decode/encode unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union
from urllib.parse import quote, unquote

from ..errors import FormatError, ValidationError
from ..models.annotations import Annotation
from .attribute_map import ATTRIBUTE_MAP, INTEGER_FIELDS, REQUIRED_FIELDS, STRING_FIELDS

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = ";"
PAIR_SEPARATOR = ","
KEY_VALUE_SEPARATOR = "="

# encodeURIComponent leaves these unescaped (alphanumerics are always safe)
_URI_COMPONENT_SAFE = "-_.!~*'()"

AnnotationLike = Union[Annotation, Mapping[str, Any]]


def _format_number(value: Any) -> str:
    if isinstance(value, bool):
        raise FormatError(f"Expected a number, got {value!r}")
    if isinstance(value, int):
        return str(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise FormatError(f"Expected a number, got {value!r}") from None
    if number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return repr(number)


def _parse_number(name: str, raw: str) -> float | int:
    try:
        number = float(raw)
    except ValueError:
        raise FormatError(f"Invalid number {raw!r} for '{name}'") from None

    if name in INTEGER_FIELDS:
        if not number.is_integer():
            raise FormatError(f"Expected an integer for '{name}', got {raw!r}")
        return int(number)
    return number


def _check_required(fields: Mapping[str, Any], required: Iterable[str]) -> None:
    for name in required:
        if fields.get(name) is None:
            raise ValidationError(name)


def serialize_annotation(annotation: AnnotationLike, required: Iterable[str] = REQUIRED_FIELDS) -> str:
    """
    Encode one annotation as an AR record.

    Args:
        annotation: Annotation, or a mapping of canonical flat field names
        required: Fields that must be present (serialization profile)

    Returns:
        AR record without a trailing separator

    Raises:
        ValidationError: If a required field is missing
        FormatError: If a numeric field holds something that is not a number
    """
    if isinstance(annotation, Annotation):
        fields = annotation.to_fields()
    else:
        fields = {name: value for name, value in annotation.items() if value is not None}

    _check_required(fields, required)

    pairs = []
    for name, value in fields.items():
        key = ATTRIBUTE_MAP.short_key(name)
        if key is None:
            # Not part of the AR format
            continue
        if name in STRING_FIELDS:
            encoded = quote(str(value), safe=_URI_COMPONENT_SAFE)
        else:
            encoded = _format_number(value)
        pairs.append(f"{key}{KEY_VALUE_SEPARATOR}{encoded}")

    return PAIR_SEPARATOR.join(pairs)


def deserialize_fields(segment: str) -> dict[str, Any]:
    """
    Decode one AR record into canonical flat fields.

    Raises:
        FormatError: On an empty record, a pair without '=', an unknown or
            repeated short key, or a malformed number
    """
    if not segment:
        raise FormatError("Empty annotation record")

    fields: dict[str, Any] = {}
    for pair in segment.split(PAIR_SEPARATOR):
        key, sep, raw = pair.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            raise FormatError(f"Malformed attribute {pair!r} (expected key=value)")

        name = ATTRIBUTE_MAP.field_name(key)
        if name is None:
            raise FormatError(f"Unknown attribute key {key!r}")
        if name in fields:
            raise FormatError(f"Duplicate attribute key {key!r}")

        if name in STRING_FIELDS:
            try:
                fields[name] = unquote(raw, errors="strict")
            except UnicodeDecodeError as e:
                raise FormatError(f"Invalid percent-encoding for '{name}': {e}") from e
        else:
            fields[name] = _parse_number(name, raw)

    return fields


def deserialize_annotation(segment: str) -> Annotation:
    """Decode one AR record into an Annotation."""
    return Annotation.from_fields(deserialize_fields(segment))


def serialize_annotation_list(
    annotations: Iterable[AnnotationLike], required: Iterable[str] = REQUIRED_FIELDS
) -> str:
    """Encode annotations as an AR list; every record is followed by ';'."""
    required = tuple(required)
    records = [serialize_annotation(a, required) + RECORD_SEPARATOR for a in annotations]
    logger.debug("Serialized %d annotations", len(records))
    return "".join(records)


def deserialize_annotation_list(text: str) -> list[Annotation]:
    """
    Decode an AR list.

    The trailing ';' leaves an empty final segment, which is discarded.

    Raises:
        FormatError: If the list does not end with ';' or a record is malformed
    """
    if not text:
        return []

    segments = text.split(RECORD_SEPARATOR)
    tail = segments.pop()
    if tail:
        raise FormatError(f"Annotation list must end with '{RECORD_SEPARATOR}'")

    annotations = [deserialize_annotation(segment) for segment in segments]
    logger.debug("Deserialized %d annotations", len(annotations))
    return annotations

