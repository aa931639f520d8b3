"""
Colors and the stochastic color model.

A ColorItem draws a fresh color on every sample: its base shade perturbed by
a bounded random deviation, then pulled toward the run's theme color.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar
import random
import re

T = TypeVar("T")

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{6})$')


def _clamp(value: int) -> int:
    return max(0, min(255, value))


@dataclass(frozen=True)
class Color:
    """An RGB color with 8-bit channels."""
    r: int
    g: int
    b: int

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    @classmethod
    def random(cls, rng: random.Random) -> 'Color':
        return cls(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))

    def variate(self, rng: random.Random, deviation: int) -> 'Color':
        """Perturb every channel by an independent offset in [-deviation, deviation]."""
        if deviation <= 0:
            return self
        return Color(
            _clamp(self.r + rng.randint(-deviation, deviation)),
            _clamp(self.g + rng.randint(-deviation, deviation)),
            _clamp(self.b + rng.randint(-deviation, deviation)),
        )

    def meanpoint(self, other: 'Color', weight: int) -> 'Color':
        """
        Weighted mean of self (weight 1) and `other` (weight `weight`).

        A weight of 0 returns self unchanged; large weights converge to `other`.
        """
        if weight <= 0:
            return self
        total = weight + 1
        return Color(
            round((self.r + other.r * weight) / total),
            round((self.g + other.g * weight) / total),
            round((self.b + other.b * weight) / total),
        )

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, text: str) -> 'Color':
        """Parse "#rrggbb" (the leading '#' is optional)."""
        match = _HEX_RE.match(text.strip())
        if not match:
            raise ValueError(f"Invalid color: {text!r}")
        value = match.group(1)
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


@dataclass
class ColorItem:
    """
    Color source for one paint region (or the background).

    Attributes:
        shade: Base color
        deviation: Bound on per-channel random perturbation
        theme: Color every sample is pulled toward
        weight: Strength of the pull toward the theme (0 = none)
    """
    shade: Color
    deviation: int = 0
    theme: Color = Color(0, 0, 0)
    weight: int = 0

    def sample(self, rng: random.Random) -> Color:
        return self.shade.variate(rng, self.deviation).meanpoint(self.theme, self.weight)

    def to_dict(self) -> dict:
        return {
            "shade": self.shade.to_hex(),
            "deviation": self.deviation,
            "theme": self.theme.to_hex(),
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ColorItem':
        return cls(
            shade=Color.from_hex(data["shade"]),
            deviation=data.get("deviation", 0),
            theme=Color.from_hex(data.get("theme", "#000000")),
            weight=data.get("weight", 0),
        )


@dataclass
class Chooser(Generic[T]):
    """Weighted random choice among items."""
    items: list[tuple[T, int]] = field(default_factory=list)

    def push(self, item: T, weight: int) -> None:
        if weight > 0:
            self.items.append((item, weight))

    def __len__(self):
        return len(self.items)

    def choose(self, rng: random.Random) -> Optional[T]:
        """Pick one item with probability proportional to its weight; None if empty."""
        if not self.items:
            return None
        values = [item for item, _ in self.items]
        weights = [w for _, w in self.items]
        return rng.choices(values, weights=weights, k=1)[0]
