"""Embedded translation configuration.

Pages can ship additional translator options as JSON inside
``<script data-bit-translation>`` elements. Each element is a fragment that
is parsed, normalized and merged into the startup options in document order.
A fragment that is not valid JSON is logged and skipped.
"""

import json
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Protocol

import structlog
from bs4 import BeautifulSoup

from bits_translator.i18n.models import TranslationNode
from bits_translator.i18n.options import (
    canonical_options,
    merge_options,
    prepare_phrases,
)

logger = structlog.get_logger()

TRANSLATION_SELECTOR = "script[data-bit-translation]"

# Top-level fields that mark a fragment as a full options object rather
# than a bare phrase tree
OPTION_MARKERS = ("locale", "defaultLocale", "phrases")


class TranslationDocument(Protocol):
    """The parts of a host document the translator reads."""

    @property
    def lang(self) -> Optional[str]:
        """The document's root language attribute, if any."""
        ...

    def find_translation_nodes(self) -> Iterable[TranslationNode]:
        """Yield the embedded translation fragments in document order."""
        ...


class HTMLDocument:
    """TranslationDocument backed by parsed HTML markup.

    Attributes:
        soup: The parsed document.
    """

    def __init__(self, markup: str, features: str = "html.parser"):
        self.soup = BeautifulSoup(markup, features)

    @property
    def lang(self) -> Optional[str]:
        root = self.soup.find("html")
        if root is None:
            return None
        return root.get("lang") or None

    def find_translation_nodes(self) -> Iterator[TranslationNode]:
        for el in self.soup.select(TRANSLATION_SELECTOR):
            yield TranslationNode(
                content=str(el.string or ""), lang=el.get("lang") or None
            )


def parse_fragment(content: str, lang: str) -> Optional[Dict[str, Any]]:
    """Parse one translation fragment into an options mapping.

    Args:
        content: Raw JSON text of the fragment.
        lang: Language of the fragment's phrases if they are a single tree.

    Returns:
        Options mapping with phrases keyed by language, or None if the
        fragment cannot be used.
    """
    try:
        data = json.loads(content)
    except ValueError as e:
        logger.error(
            "translation_fragment_parse_failed",
            content=content,
            error=str(e),
        )
        return None

    if not isinstance(data, Mapping):
        logger.warning(
            "invalid_translation_fragment",
            expected="object",
            received=type(data).__name__,
        )
        return None

    if all(data.get(marker) is None for marker in OPTION_MARKERS):
        data = {"phrases": data}

    data = canonical_options(data)
    by_language = data.pop("phrases_by_language", None)
    return prepare_phrases(data, lang, by_language)


def find_document_options(
    options: Mapping[str, Any],
    document: TranslationDocument,
    lang: str,
) -> Dict[str, Any]:
    """Merge every fragment of a document into the given options.

    Args:
        options: Options collected so far, phrases already keyed by language.
        document: Document to scan for fragments.
        lang: Default language for fragments without a ``lang`` attribute.

    Returns:
        The merged options; later fragments override earlier ones.
    """
    merged = dict(options)
    fragment_count = 0

    for node in document.find_translation_nodes():
        fragment = parse_fragment(node.content, node.lang or lang)
        if fragment is None:
            continue
        merged = merge_options(merged, fragment)
        fragment_count += 1

    logger.debug("translation_fragments_merged", fragment_count=fragment_count)
    return merged
