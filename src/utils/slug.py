"""URL slug normalization and validation utilities.

Note: normalize_slug() keeps ASCII letters and digits only, anything else
(including accented letters) becomes a separator. Transliteration with
python-slugify is only used as a fallback when normalization leaves nothing.
"""

import re

from slugify import slugify

from src.constants import SLUG_PATTERN, SLUG_SEPARATOR
from src.errors import InvalidFormatError

_SLUG_RE = re.compile(SLUG_PATTERN)
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_REPEATED_SEPARATOR_RE = re.compile(r"-{2,}")


def normalize_slug(name: str) -> str:
    """Derive a URL-safe slug from a display name.

    Args:
        name: Human-entered display name (may be empty or punctuation only)

    Returns:
        Normalized slug, or an empty string if the name has no ASCII
        letters or digits

    Examples:
        >>> normalize_slug("My Button!!")
        'my-button'
        >>> normalize_slug("***")
        ''
    """
    slug = name.lower()
    slug = _NON_ALNUM_RE.sub(SLUG_SEPARATOR, slug)
    slug = slug.strip(SLUG_SEPARATOR)
    return _REPEATED_SEPARATOR_RE.sub(SLUG_SEPARATOR, slug)


def is_valid_slug(value: str) -> bool:
    """Return True when value matches the slug grammar."""
    return bool(_SLUG_RE.fullmatch(value))


def validate_slug(value: str) -> str:
    """
    Ensure a user-supplied slug matches the grammar.

    Args:
        value: Candidate slug

    Returns:
        The unchanged candidate

    Raises:
        InvalidFormatError: If the candidate is not a valid slug
    """
    if not is_valid_slug(value):
        raise InvalidFormatError(value)
    return value


def transliterate_slug(name: str) -> str:
    """
    Build a slug from a name after transliterating it to ASCII.

    Args:
        name: Display name, typically one whose normalized form is empty

    Returns:
        Normalized slug of the transliterated name (may still be empty)

    Examples:
        >>> transliterate_slug("日本語")
        'ri-ben-yu'
    """
    return normalize_slug(slugify(name, separator=SLUG_SEPARATOR))


def suffixed_slug(base: str, suffix: int | None) -> str:
    """Append a numeric suffix to a base slug (``base`` or ``base-N``)."""
    if suffix is None:
        return base
    return f"{base}{SLUG_SEPARATOR}{suffix}"
