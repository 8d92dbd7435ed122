"""Fixed widget dimensions and the CSS variables derived from them."""

from __future__ import annotations

HEADER_HEIGHT = 42
HEADER_PADDING = 16
GUILD_ICON_SIZE = 48
CHANNEL_ICON_SIZE = 32
MESSAGE_AVATAR_SIZE = 42
EMBED_MAX_WIDTH = 250
EMBED_IMG_HEIGHT = 300
INLINE_EMOJI_SIZE = 22
LARGE_EMOJI_SIZE = 48
STICKER_SIZE = 92
USER_BAR_AVATAR_SIZE = 32


def px(num: int) -> str:
    """Format a number of pixels as a CSS length."""
    return f"{num}px"


def css_variables() -> dict[str, str]:
    """Return the CSS variables that expose the dimensions to stylesheets."""
    return {
        "header_height": px(HEADER_HEIGHT),
        "header_padding": px(HEADER_PADDING),
        "guild_icon_size": px(GUILD_ICON_SIZE),
        "channel_icon_size": px(CHANNEL_ICON_SIZE),
        "message_avatar_size": px(MESSAGE_AVATAR_SIZE),
        "inline_emoji_size": px(INLINE_EMOJI_SIZE),
        "large_emoji_size": px(LARGE_EMOJI_SIZE),
        "sticker_size": px(STICKER_SIZE),
        "user_bar_avatar_size": px(USER_BAR_AVATAR_SIZE),
    }