"""
Annotation codecs.

This package provides:
- AR text format: serialize/deserialize single records and lists
- ATTRIBUTE_MAP: the one short-key table both directions share
- Legacy XML ingest (one-way)
- Duration parsing helpers
"""

from .ar_format import (
    deserialize_annotation,
    deserialize_annotation_list,
    deserialize_fields,
    serialize_annotation,
    serialize_annotation_list,
)
from .attribute_map import (
    ATTRIBUTE_MAP,
    INTEGER_FIELDS,
    REQUIRED_FIELDS,
    STRING_FIELDS,
    AttributeMap,
)
from .parsers import DEFAULT_TRUSTED_PREFIX, ingest_document, ingest_one

__all__ = [
    # AR format
    'serialize_annotation',
    'deserialize_annotation',
    'deserialize_fields',
    'serialize_annotation_list',
    'deserialize_annotation_list',
    # Short-key table
    'AttributeMap',
    'ATTRIBUTE_MAP',
    'STRING_FIELDS',
    'INTEGER_FIELDS',
    'REQUIRED_FIELDS',
    # Legacy XML
    'DEFAULT_TRUSTED_PREFIX',
    'ingest_document',
    'ingest_one',
]
