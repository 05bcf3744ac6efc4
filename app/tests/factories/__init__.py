"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_context,
    make_html_document,
    make_phrases,
    make_translator,
)

__all__ = [
    "make_context",
    "make_html_document",
    "make_phrases",
    "make_translator",
]
