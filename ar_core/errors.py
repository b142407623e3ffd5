# ar_core/errors.py
# -*- coding: utf-8 -*-
"""
Codec error types.

Malformed input to the AR codec or the time parsers is a hard failure and
surfaces as one of these. Defective individual annotations in legacy XML are
not errors: ingest drops them and carries on.
"""


class FormatError(ValueError):
    """Raised for malformed AR text, unknown short keys, bad durations or unparsable XML."""
    pass


class ValidationError(ValueError):
    """Raised when an annotation is missing a field the serialization profile requires."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Annotation is missing required property '{field}'")
