"""Preset name to slug normalization.

Canonical form: ASCII lowercase letters and digits joined by single hyphens
(e.g., "Basic Kit" -> "basic-kit", "Électro  Drums!" -> "electro-drums").

Used for preset file names and for name-or-slug lookups.
"""
from __future__ import annotations

import re
import unicodedata
from typing import Any

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_ALNUM_RUN = re.compile(r"[^A-Za-z0-9]+")


def slugify(value: Any) -> str:
    """Normalize a display name into a URL- and filesystem-safe slug.

    Args:
        value: Display name or existing slug. None is treated as "".

    Returns:
        Slug string, possibly empty when nothing alphanumeric remains.

    Examples:
        >>> slugify("Basic Kit")
        'basic-kit'
        >>> slugify("  Café / Lounge  ")
        'cafe-lounge'
        >>> slugify(None)
        ''
    """
    text = "" if value is None else str(value)
    text = unicodedata.normalize("NFKD", text)
    text = _COMBINING_MARKS.sub("", text)
    text = _NON_ALNUM_RUN.sub("-", text)
    return text.strip("-").lower()
