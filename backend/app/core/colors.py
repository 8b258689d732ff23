"""Portable RGBA color values.

Catalog entries and inventory items store colors as four floats in [0, 1].
Callers may hand in either 0-1 or 0-255 channel values; anything above 1 (up
to 255) is read as an 8-bit channel and scaled down on construction.

The presentation layer talks in its own color type (``rgba()`` strings for the
web UI). Conversion goes through a ``PlatformColorAdapter`` so nothing in the
core depends on the concrete type.
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger(__name__)


def _normalize_channel(value: float) -> float:
    value = float(value)
    if 1.0 < value <= 255.0:
        value = value / 255.0
    return min(1.0, max(0.0, value))


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass(frozen=True)
class ColorValue:
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self):
        for channel in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, channel, _normalize_channel(getattr(self, channel)))

    # ── Derived values ─────────────────────────────────────────────────────

    def brightness(self) -> float:
        """Perceptual luma (ITU-R BT.601 weights)."""
        return 0.299 * self.red + 0.587 * self.green + 0.114 * self.blue

    @property
    def is_bright(self) -> bool:
        return self.brightness() > 0.5

    def contrast_color(self) -> "ColorValue":
        """Black text on bright colors, white on dark ones."""
        return BLACK if self.is_bright else WHITE

    def lighten(self, amount: float = 0.2) -> "ColorValue":
        return self._shift(amount)

    def darken(self, amount: float = 0.2) -> "ColorValue":
        return self._shift(-amount)

    def _shift(self, delta: float) -> "ColorValue":
        # Clamp before constructing so 1.2 isn't mistaken for an 8-bit value
        return ColorValue(
            _clamp(self.red + delta),
            _clamp(self.green + delta),
            _clamp(self.blue + delta),
            self.alpha,
        )

    # ── Hex / dict conversion ──────────────────────────────────────────────

    @classmethod
    def from_hex(cls, value: str) -> "ColorValue":
        """Parse #RGB, #RRGGBB or #RRGGBBAA. Unparseable input gives mid gray."""
        digits = "".join(c for c in (value or "") if c.isalnum())
        try:
            number = int(digits, 16)
        except ValueError:
            return NEUTRAL_GRAY

        if len(digits) == 3:
            r, g, b, a = (number >> 8) * 17, (number >> 4 & 0xF) * 17, (number & 0xF) * 17, 255
        elif len(digits) == 6:
            r, g, b, a = number >> 16, number >> 8 & 0xFF, number & 0xFF, 255
        elif len(digits) == 8:
            r, g, b, a = number >> 24, number >> 16 & 0xFF, number >> 8 & 0xFF, number & 0xFF
        else:
            return NEUTRAL_GRAY

        # Divide here rather than in __post_init__: a channel of exactly 1 must mean 1/255
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def to_hex(self, include_alpha: bool = False) -> str:
        channels = [self.red, self.green, self.blue]
        if include_alpha:
            channels.append(self.alpha)
        return "#" + "".join(f"{round(c * 255):02X}" for c in channels)

    def to_dict(self) -> dict[str, float]:
        return {"red": self.red, "green": self.green, "blue": self.blue, "alpha": self.alpha}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ColorValue | None":
        if not data:
            return None
        return cls(data["red"], data["green"], data["blue"], data.get("alpha", 1.0))

    # ── Platform bridging ──────────────────────────────────────────────────

    @classmethod
    def from_platform_color(cls, adapter: "PlatformColorAdapter", native: Any) -> "ColorValue":
        """Extract RGBA from a presentation-layer color. Never raises."""
        try:
            return adapter.to_rgba(native)
        except Exception as e:
            logger.debug("Could not extract RGBA from %r: %s", native, e)
            return NEUTRAL_GRAY

    def to_platform_color(self, adapter: "PlatformColorAdapter") -> Any:
        return adapter.from_rgba(self)


BLACK = ColorValue(0.0, 0.0, 0.0, 1.0)
WHITE = ColorValue(1.0, 1.0, 1.0, 1.0)
NEUTRAL_GRAY = ColorValue(0.5, 0.5, 0.5, 1.0)


class PlatformColorAdapter(Protocol):
    """Bridge between ColorValue and a presentation layer's color type."""

    def to_rgba(self, native: Any) -> ColorValue: ...

    def from_rgba(self, color: ColorValue) -> Any: ...


class RgbaColorAdapter:
    """``rgba(r, g, b, a)`` strings with unit-range float channels.

    Channels are written with ``repr`` so every float in [0, 1] reads back
    unchanged. 8-bit hex is available separately through ``to_hex``.
    """

    def to_rgba(self, native: str) -> ColorValue:
        if not isinstance(native, str):
            raise TypeError(f"Expected rgba() string, got {type(native).__name__}")
        text = native.strip()
        if not (text.startswith("rgba(") and text.endswith(")")):
            raise ValueError(f"Invalid rgba color: {native!r}")
        channels = [float(part) for part in text[5:-1].split(",")]
        if len(channels) != 4 or any(not 0.0 <= c <= 1.0 for c in channels):
            raise ValueError(f"Invalid rgba color: {native!r}")
        return ColorValue(*channels)

    def from_rgba(self, color: ColorValue) -> str:
        return f"rgba({color.red!r}, {color.green!r}, {color.blue!r}, {color.alpha!r})"


# ── Name-based default colors ──────────────────────────────────────────────

# First match wins. Each entry: (Chinese keyword, English keyword, color)
NAME_COLOR_KEYWORDS: list[tuple[str, str, ColorValue]] = [
    ("黑", "black", BLACK),
    ("白", "white", WHITE),
    ("红", "red", ColorValue(1.0, 0.0, 0.0)),
    ("蓝", "blue", ColorValue(0.0, 0.0, 1.0)),
    ("绿", "green", ColorValue(0.0, 0.5, 0.0)),
    ("黄", "yellow", ColorValue(1.0, 1.0, 0.0)),
    ("紫", "purple", ColorValue(0.5, 0.0, 0.5)),
    ("橙", "orange", ColorValue(1.0, 0.5, 0.0)),
    ("灰", "gray", ColorValue(0.5, 0.5, 0.5)),
    ("透明", "transparent", ColorValue(1.0, 1.0, 1.0, 0.5)),
]


def default_color_for_name(name: str | None) -> ColorValue:
    """Guess a display color from a free-text color name.

    Substring match on the lower-cased name, so "黑白条纹" is black. This is a
    heuristic for items entered without a picked color, not a classifier.
    """
    lowered = (name or "").lower()
    for chinese, english, color in NAME_COLOR_KEYWORDS:
        if chinese in lowered or english in lowered:
            return color
    return NEUTRAL_GRAY
