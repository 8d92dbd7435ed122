"""Cleanup of emoji strings."""

from __future__ import annotations

_VARIATION_SELECTOR_16 = 65039


def sanitize_emoji(emoji: str) -> str:
    """Strip an extraneous trailing variation selector from common emoji.

    Covers regional-indicator flags, tag-sequence flags, keycaps and single
    code points followed by a selector; anything else is returned unchanged.
    """
    points = [ord(c) for c in emoji]
    count = len(points)

    if count == 3 and 127462 <= points[0] <= 127487 and 127464 <= points[1] <= 127484:
        return emoji[:-1]

    if count == 8 and points[0] == 127988 and points[6] == 917631:
        return emoji[:-1]

    if count == 4 and points[0] >= 35 and points[2] >= 57:
        return emoji[:-1]

    if count == 2 and points[-1] == _VARIATION_SELECTOR_16:
        return emoji[:-1]

    return emoji