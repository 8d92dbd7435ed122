"""Deterministic colors derived from strings, for tinting user names."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Callable, Protocol

_MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class RGBA:
    """An 8-bit-per-channel color."""

    r: int
    g: int
    b: int
    a: int = 0xFF


class _Hash32(Protocol):
    def update(self, data: bytes) -> None: ...

    def sum32(self) -> int: ...


class Djb2:
    """The 32-bit DJB2 string hash."""

    MAGIC = 5381
    block_size = 1
    digest_size = 4

    def __init__(self, data: bytes = b"") -> None:
        self._value = self.MAGIC
        self.update(data)

    def update(self, data: bytes) -> None:
        value = self._value
        for byte in data:
            value = ((value << 5) + value + byte) & _MASK32
        self._value = value

    def sum32(self) -> int:
        return self._value

    def digest(self) -> bytes:
        return self._value.to_bytes(4, "big")

    def reset(self) -> None:
        self._value = self.MAGIC


class Fnv32a:
    """The 32-bit FNV-1a string hash."""

    OFFSET_BASIS = 2166136261
    PRIME = 16777619
    block_size = 1
    digest_size = 4

    def __init__(self, data: bytes = b"") -> None:
        self._value = self.OFFSET_BASIS
        self.update(data)

    def update(self, data: bytes) -> None:
        value = self._value
        for byte in data:
            value = ((value ^ byte) * self.PRIME) & _MASK32
        self._value = value

    def sum32(self) -> int:
        return self._value

    def digest(self) -> bytes:
        return self._value.to_bytes(4, "big")

    def reset(self) -> None:
        self._value = self.OFFSET_BASIS


FNV_HASHER: Callable[[], _Hash32] = Fnv32a
DJB2_HASHER: Callable[[], _Hash32] = Djb2

_N_HUE = 31
_N_SAT = 10
_N_VAL = 10


def hsv_to_rgb(h: float, s: float, v: float) -> RGBA:
    """Convert a hue in degrees and saturation/value in [0, 1] to RGBA."""
    hp = h / 60.0
    chroma = v * s
    x = chroma * (1.0 - abs(math.fmod(hp, 2.0) - 1.0))
    m = v - chroma

    r = g = b = 0.0
    if 0.0 <= hp < 1.0:
        r, g = chroma, x
    elif 1.0 <= hp < 2.0:
        r, g = x, chroma
    elif 2.0 <= hp < 3.0:
        g, b = chroma, x
    elif 3.0 <= hp < 4.0:
        g, b = x, chroma
    elif 4.0 <= hp < 5.0:
        r, b = x, chroma
    elif 5.0 <= hp < 6.0:
        r, b = chroma, x

    def channel(c: float) -> int:
        return int((m + c) * 0xFF) & 0xFF

    return RGBA(channel(r), channel(g), channel(b), 0xFF)


def rgb_hex(color: RGBA) -> str:
    """Format a color as an HTML hex string, ignoring alpha."""
    return f"#{color.r:02X}{color.g:02X}{color.b:02X}"


@dataclass(frozen=True)
class HSVHasher:
    """Hashes names into colors within a saturation and value range."""

    hasher: Callable[[], _Hash32]
    saturation: tuple[float, float]
    value: tuple[float, float]

    def hash(self, name: str) -> RGBA:
        h = self.hasher()
        h.update(name.encode("utf-8"))
        n = h.sum32()

        hue = float((n % (_N_HUE + 1)) * (360 // _N_HUE))
        s_lo, s_hi = self.saturation
        v_lo, v_hi = self.value
        sat = s_lo + (n % (_N_SAT + 1)) / _N_SAT * (s_hi - s_lo)
        val = v_lo + (n % (_N_VAL + 1)) / _N_VAL * (v_hi - v_lo)
        return hsv_to_rgb(hue, sat, val)


LIGHT_COLOR_HASHER = HSVHasher(FNV_HASHER, (0.3, 0.4), (0.9, 1.0))
"""Pastel colors for use on a dark background."""

DARK_COLOR_HASHER = HSVHasher(FNV_HASHER, (0.9, 1.0), (0.6, 0.7))
"""Darker, stronger colors for use on a light background."""

_default_hasher: HSVHasher = LIGHT_COLOR_HASHER
_hasher_lock = threading.Lock()


def default_hasher() -> HSVHasher:
    """Return the hasher currently used by default."""
    with _hasher_lock:
        return _default_hasher


def set_default_hasher(hasher: HSVHasher) -> None:
    """Replace the hasher used by default."""
    global _default_hasher
    with _hasher_lock:
        _default_hasher = hasher