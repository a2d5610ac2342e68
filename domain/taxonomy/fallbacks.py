"""
Macrolanguage fallback codes.

General-purpose code registries often return a macrolanguage code where the
taxonomy files only carry an individual-language code (or the reverse). When a
direct lookup misses, the resolver retries once with the code listed here.
"""

from collections.abc import Mapping
from types import MappingProxyType

MACROLANGUAGE_FALLBACKS: Mapping[str, str] = MappingProxyType(
    {
        # Croatian / Serbian / Bosnian -> Serbo-Croatian
        "hrv": "hbs",
        "srp": "hbs",
        "bos": "hbs",
        # Arabic -> Standard Arabic
        "ara": "arb",
        # Chinese -> Mandarin Chinese
        "zho": "cmn",
        # Azerbaijani -> North Azerbaijani
        "aze": "azj",
        # Estonian macrolanguage -> Standard Estonian
        "est": "ekk",
        # Malagasy -> Plateau Malagasy
        "mlg": "plt",
        # Malay -> Standard Malay
        "msa": "zsm",
        # Oriya -> Odia
        "ori": "ory",
        # Persian -> Western Farsi
        "fas": "pes",
        # Swahili macrolanguage -> Swahili (individual language)
        "swa": "swh",
    }
)


def fallback_for(code: str, table: Mapping[str, str] = MACROLANGUAGE_FALLBACKS) -> str | None:
    """Return the fallback code for `code`, or None if there is none."""
    return table.get(code.strip().lower())


def merge_fallbacks(extra: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Return the built-in table extended (and overridden) by `extra`."""
    merged = dict(MACROLANGUAGE_FALLBACKS)
    for src, dst in (extra or {}).items():
        src_norm, dst_norm = str(src).strip().lower(), str(dst).strip().lower()
        if not src_norm or not dst_norm:
            raise ValueError(f"Invalid fallback entry: {src!r} -> {dst!r}")
        merged[src_norm] = dst_norm
    return MappingProxyType(merged)
