"""Title normalization for broadcast listings.

The guide decorates the same broadcast with cosmetic markers (``●NEW●``
prefixes, ``[HD]``/``[字]`` annotations). Episodes are deduplicated by
title, so these markers are stripped before anything else looks at it.
"""

import re

# Leading promotional run such as "●NEW● " (shortest match between markers)
_PROMO_PREFIX = re.compile(r"^\s*●.*?●\s*")

# Bracketed annotation without nested brackets, plus surrounding whitespace
_ANNOTATION = re.compile(r"\s*\[[^\[\]]*\]\s*")


def normalize_title(title: str) -> str:
    """Strip noise markers from a raw listing title.

    Args:
        title: Raw title from the guide or the episode table

    Returns:
        Cleaned title (possibly empty)

    Example:
        >>> normalize_title("●NEW● Show [HD]")
        'Show'
    """
    title = _PROMO_PREFIX.sub("", title, count=1)
    title = _ANNOTATION.sub("", title)
    return title.strip()
