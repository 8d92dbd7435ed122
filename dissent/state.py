"""Chat model types and the plain-text helpers built on them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from dissent.colorhash import default_hasher, rgb_hex


class ChannelType(enum.IntEnum):
    """The kinds of channel the chat service knows about."""

    GUILD_TEXT = 0
    DIRECT_MESSAGE = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    GUILD_ANNOUNCEMENT_THREAD = 10
    GUILD_PUBLIC_THREAD = 11
    GUILD_PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15


ALLOWED_CHANNEL_TYPES: tuple[ChannelType, ...] = (
    ChannelType.GUILD_TEXT,
    ChannelType.GUILD_CATEGORY,
    ChannelType.GUILD_PUBLIC_THREAD,
    ChannelType.GUILD_PRIVATE_THREAD,
    ChannelType.GUILD_FORUM,
    ChannelType.GUILD_ANNOUNCEMENT,
    ChannelType.GUILD_ANNOUNCEMENT_THREAD,
    ChannelType.GUILD_VOICE,
    ChannelType.GUILD_STAGE_VOICE,
)
"""The channel types that are shown."""


@dataclass
class User:
    """A chat user."""

    id: int
    username: str
    discriminator: str = "0"
    display_name: str = ""
    bot: bool = False

    def tag(self) -> str:
        """Return the user's tag: the name, plus the discriminator if any."""
        if self.discriminator in ("", "0"):
            return self.username
        return f"{self.username}#{self.discriminator}"

    def mention(self) -> str:
        """Return the mention syntax for this user."""
        return f"<@{self.id}>"


@dataclass
class Channel:
    """A channel, guild-bound or direct."""

    id: int
    type: ChannelType
    name: str = ""
    guild_id: int = 0
    dm_recipients: list[User] = field(default_factory=list)


def inject_avatar_size(urlstr: str, scale: int = 1) -> str:
    """Inject a 64px size into an avatar URL, scaled as :func:`inject_size`."""
    return inject_size(urlstr, 64, scale)


def inject_size(urlstr: str, size: int, scale: int = 1) -> str:
    """Inject a size query parameter, scaled by at least 2x.

    A display scale factor above 2 is used as the multiplier instead.
    """
    if not urlstr:
        return ""
    size *= scale if scale > 2 else 2
    return inject_size_unscaled(urlstr, size)


def inject_size_unscaled(urlstr: str, size: int) -> str:
    """Set the URL's size parameter to ``size`` rounded up to a power of two.

    An unparsable URL is returned unchanged.
    """
    size = round_size(size)
    try:
        parts = urlsplit(urlstr)
    except ValueError:
        return urlstr

    params: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        params.setdefault(key, []).append(value)
    params["size"] = [str(size)]

    query = urlencode(sorted(params.items()), doseq=True)
    return urlunsplit(parts._replace(query=query))


def round_size(size: int) -> int:
    """Round ``size`` up to the nearest power of two (0 stays 0)."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return 0
    return 1 << (size - 1).bit_length()


def channel_name(ch: Channel | None) -> str:
    """Return the channel's name in plain text, with a hash for guild channels."""
    return _channel_name(ch, with_hash=True)


def channel_name_without_hash(ch: Channel | None) -> str:
    """Return the channel's name in plain text without the hash."""
    return _channel_name(ch, with_hash=False)


def _channel_name(ch: Channel | None, with_hash: bool) -> str:
    if ch is None:
        return "Unknown channel"
    if ch.type == ChannelType.DIRECT_MESSAGE:
        if not ch.dm_recipients:
            return recipient_names(ch)
        return user_name(ch.dm_recipients[0])
    if ch.type == ChannelType.GROUP_DM:
        return ch.name or recipient_names(ch)
    if ch.type in (ChannelType.GUILD_PUBLIC_THREAD, ChannelType.GUILD_PRIVATE_THREAD):
        return ch.name
    return f"#{ch.name}" if with_hash else ch.name


def recipient_names(ch: Channel) -> str:
    """Format the list of recipients of the channel."""
    names = [user_name(u) for u in ch.dm_recipients]
    if not names:
        return "Empty channel"
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    head = "".join(f"{name}, " for name in names[:-1])
    return f"{head} and {names[-1]}"


def user_name(user: User) -> str:
    """Return the display name, with the username added when they differ."""
    if not user.display_name:
        return user.username
    if user.display_name.casefold() == user.username.casefold():
        return user.display_name
    return f"{user.display_name} ({user.username})"


def hash_user_color(user: User) -> str:
    """Return a hex color generated from the user's tag."""
    return rgb_hex(default_hasher().hash(user.tag()))