# ar_core/annotations/parsers/__init__.py
# -*- coding: utf-8 -*-
"""Annotation source format parsers."""

from .legacy_xml import DEFAULT_TRUSTED_PREFIX, ingest_document, ingest_one

__all__ = ['DEFAULT_TRUSTED_PREFIX', 'ingest_document', 'ingest_one']
