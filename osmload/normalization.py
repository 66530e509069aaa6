"""Tag normalization for element rows."""

import json
from typing import Dict, Iterable, Optional, Tuple

__all__ = [
    "normalize_tags",
    "tags_to_json",
]


def normalize_tags(pairs: Iterable[Tuple[str, str]]) -> Optional[Dict[str, str]]:
    """
    Convert key/value pairs into an optional mapping.

    The source guarantees unique keys; if a key repeats, the last value wins.

    Args:
        pairs: Iterable of (key, value) string pairs

    Returns:
        None when there are no pairs, otherwise a dict of the pairs

    Example:
        >>> normalize_tags([])
        >>> normalize_tags([("highway", "residential")])
        {'highway': 'residential'}
    """
    tags = dict(pairs)
    if not tags:
        return None
    return tags


def tags_to_json(tags: Optional[Dict[str, str]]) -> Optional[str]:
    """
    Render an optional tag mapping as compact JSON text.

    Absent tags stay absent (None) so they load as SQL NULL rather than '{}'.
    """
    if tags is None:
        return None
    return json.dumps(tags, ensure_ascii=False, separators=(",", ":"))
