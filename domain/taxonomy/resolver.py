"""Resolve locale tags (BCP 47 style, e.g. "de-DE") to taxonomy node ids."""

import logging
from collections.abc import Mapping

from langcodes import Language, LanguageTagError

from domain.errors import UnresolvableIdentifierError
from domain.taxonomy.fallbacks import MACROLANGUAGE_FALLBACKS
from domain.taxonomy.store import TaxonomyStore

logger = logging.getLogger(__name__)


def base_language(tag: str) -> str:
    """
    Extract the primary language subtag from a locale tag.

    Examples:
        >>> base_language("de-DE")
        'de'
        >>> base_language("sr_Latn_RS")
        'sr'

    Tags that cannot be parsed are returned whole (stripped, lowercased).
    """
    raw = tag.strip()
    try:
        language = Language.get(raw, normalize=False).language
    except LanguageTagError:
        language = None
    return language or raw.lower()


def same_base_language(tag_a: str, tag_b: str) -> bool:
    return base_language(tag_a) == base_language(tag_b)


def to_alpha3(subtag: str) -> str | None:
    """
    Map a language subtag to its three-letter (ISO 639-3 / 639-2T) code.

    Three-letter subtags without a known mapping are kept as-is; anything else
    without a mapping returns None.
    """
    try:
        return Language.get(subtag, normalize=False).to_alpha3()
    except (LanguageTagError, LookupError):
        return subtag if len(subtag) == 3 else None


class IdentifierResolver:
    """Resolve locale tags to node ids in a TaxonomyStore, with macrolanguage fallback."""

    def __init__(self, store: TaxonomyStore, fallbacks: Mapping[str, str] = MACROLANGUAGE_FALLBACKS) -> None:
        self.store = store
        self.fallbacks = fallbacks

    def external_code(self, tag: str) -> str | None:
        """Locale tag -> three-letter code (not yet checked against the taxonomy)."""
        return to_alpha3(base_language(tag))

    def lookup_code(self, code: str) -> str | None:
        """Three-letter code -> node id, trying the fallback table on a miss."""
        node_id = self.store.id_for_external_code(code)
        if node_id is not None:
            return node_id
        fallback = self.fallbacks.get(code)
        if fallback is None:
            return None
        logger.debug("Code %r not in taxonomy; trying fallback %r", code, fallback)
        return self.store.id_for_external_code(fallback)

    def resolve(self, tag: str) -> str:
        """
        Resolve a locale tag to a node id.

        Raises:
            TaxonomyNotReadyError: If the store is not loaded
            UnresolvableIdentifierError: If no node matches, even after fallback
        """
        code = self.external_code(tag)
        node_id = self.lookup_code(code) if code else None
        if node_id is None:
            logger.debug("Unresolvable identifier %r (code=%s)", tag, code)
            raise UnresolvableIdentifierError(tag, code)
        return node_id
