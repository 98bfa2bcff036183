"""Producer name parsing.

Producer credits arrive as one string, e.g.
"Gloria Katz, Willard Huyck and Allan Carr".
"""

import re

_PRODUCER_SEPARATOR = re.compile(r",| and ")


def parse_producers(producers: str | None) -> list[str]:
    """Split a raw producer credit into individual names.

    Separators are commas and the word " and ". Names are trimmed and
    empty entries dropped. Duplicates are kept.

    Args:
        producers: Raw producer string (may be None or blank).

    Returns:
        Producer names in credit order.
    """
    if not producers or not producers.strip():
        return []

    names = (name.strip() for name in _PRODUCER_SEPARATOR.split(producers))
    return [name for name in names if name]
