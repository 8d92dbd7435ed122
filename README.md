# dissent

Building blocks for a Discord chat client that need no GUI toolkit.

## Modules

- `dissent.colorhash` turns names into stable colors. `HSVHasher` hashes a
  string with `Djb2` or `Fnv32a` and picks a hue, saturation and value from
  the hash; `hsv_to_rgb` converts to an `RGBA` and `rgb_hex` formats it as
  `#RRGGBB`. `LIGHT_COLOR_HASHER` (pastel, for dark backgrounds) is the
  default; `DARK_COLOR_HASHER` suits light backgrounds. Switch with
  `set_default_hasher` and read it back with `default_hasher`.
- `dissent.emoji` has `sanitize_emoji`, which drops a stray trailing
  variation selector from flags, keycaps and single-code-point emoji and
  returns anything else unchanged.
- `dissent.dimensions` holds the client's layout sizes (`HEADER_HEIGHT`,
  `GUILD_ICON_SIZE`, `STICKER_SIZE`, ...) and exposes them as CSS variables
  through `css_variables()`, formatted by `px()`.
- `dissent.handler` dispatches events to handlers registered per event type
  (`EventHandler`), queues callbacks on a `MainLoop`, and with
  `MainThreadHandler` relays events from one `EventHandler` so that its own
  handlers run only when the loop's `run_pending()` is called.
- `dissent.state` has the chat model types `User`, `Channel` and
  `ChannelType` (with `ALLOWED_CHANNEL_TYPES`), and plain-text helpers:
  `channel_name`, `channel_name_without_hash`, `recipient_names`,
  `user_name`, `hash_user_color`, and URL sizing with `inject_size`,
  `inject_avatar_size`, `inject_size_unscaled` and `round_size`.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

Color a user's name:

```python
from dissent.colorhash import default_hasher, rgb_hex

print(rgb_hex(default_hasher().hash("someone")))
```

Size an image URL. `inject_size_unscaled` rounds the size up to a power of
two; `inject_size` first multiplies it by the display scale, or by 2 when
the scale is 2 or less:

```python
from dissent.state import inject_size, inject_size_unscaled

inject_size_unscaled("https://cdn.example.com/avatar.png", 100)
# 'https://cdn.example.com/avatar.png?size=128'
inject_size("https://cdn.example.com/avatar.png", 48)
# 'https://cdn.example.com/avatar.png?size=128'
```

Name a channel:

```python
from dissent.state import Channel, ChannelType, User, channel_name

dm = Channel(id=1, type=ChannelType.GROUP_DM,
             dm_recipients=[User(1, "ann"), User(2, "bob", display_name="Bobby")])
channel_name(dm)
# 'ann and Bobby (bob)'
channel_name(Channel(id=2, type=ChannelType.GUILD_TEXT, name="general"))
# '#general'
```

Run event handlers on a main loop:

```python
from dissent.handler import EventHandler, MainLoop, MainThreadHandler

source = EventHandler()
loop = MainLoop()
ui = MainThreadHandler(source, loop)

remove = ui.add_handler(print, str)
source.dispatch("hello")   # queued, nothing printed yet
loop.run_pending()         # prints "hello"
remove()
```

## What it does not do

This package has no network client, no windows or widgets, and no command
to run. It does not connect to Discord, keep a cache of guilds, members or
roles, render message markup or previews, or build member-name markup with
role colors; it offers only the helpers listed above.