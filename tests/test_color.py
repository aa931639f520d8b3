"""Unit tests for color module."""

import pytest
import random

from wallrnd.color import Color, ColorItem, Chooser


class TestColor:
    """Tests for Color class."""

    def test_random_in_range(self):
        """Random colors have 8-bit channels."""
        rng = random.Random(3)
        for _ in range(50):
            c = Color.random(rng)
            assert all(0 <= ch <= 255 for ch in c)

    def test_variate_bounded(self):
        """Variation stays within the deviation and the channel range."""
        rng = random.Random(5)
        base = Color(100, 5, 250)
        for _ in range(200):
            c = base.variate(rng, 10)
            assert abs(c.r - base.r) <= 10
            assert 0 <= c.g <= 15
            assert 240 <= c.b <= 255

    def test_variate_zero(self):
        """Zero deviation leaves the color unchanged."""
        assert Color(1, 2, 3).variate(random.Random(0), 0) == Color(1, 2, 3)

    def test_meanpoint_weight_zero(self):
        """Weight 0 ignores the theme."""
        assert Color(10, 20, 30).meanpoint(Color(255, 255, 255), 0) == Color(10, 20, 30)

    def test_meanpoint_weight_one(self):
        """Weight 1 is the midpoint."""
        assert Color(0, 100, 200).meanpoint(Color(100, 100, 0), 1) == Color(50, 100, 100)

    def test_meanpoint_large_weight(self):
        """Large weights converge to the theme."""
        theme = Color(12, 200, 99)
        c = Color(255, 0, 255).meanpoint(theme, 10000)
        assert abs(c.r - theme.r) <= 1
        assert abs(c.g - theme.g) <= 1
        assert abs(c.b - theme.b) <= 1

    def test_hex(self):
        """Test hex formatting and parsing."""
        assert Color(255, 0, 16).to_hex() == "#ff0010"
        assert Color.from_hex("#ff0010") == Color(255, 0, 16)
        assert Color.from_hex("A0B0C0") == Color(160, 176, 192)

    def test_invalid_hex_raises(self):
        """Malformed colors are rejected."""
        with pytest.raises(ValueError):
            Color.from_hex("#12345")
        with pytest.raises(ValueError):
            Color.from_hex("red")


class TestColorItem:
    """Tests for ColorItem class."""

    def test_sample_exact_without_deviation_or_weight(self):
        """Deviation 0 and weight 0 always sample the base shade."""
        rng = random.Random(11)
        item = ColorItem(shade=Color(33, 66, 99), deviation=0, theme=Color(255, 255, 255), weight=0)
        for _ in range(20):
            assert item.sample(rng) == Color(33, 66, 99)

    def test_sample_pulled_to_theme(self):
        """Large weights drive samples to the theme regardless of shade."""
        rng = random.Random(11)
        theme = Color(10, 220, 130)
        item = ColorItem(shade=Color(250, 0, 0), deviation=30, theme=theme, weight=5000)
        for _ in range(20):
            c = item.sample(rng)
            assert abs(c.r - theme.r) <= 1
            assert abs(c.g - theme.g) <= 1
            assert abs(c.b - theme.b) <= 1

    def test_sample_varies(self):
        """With deviation, repeated samples differ."""
        rng = random.Random(2)
        item = ColorItem(shade=Color(128, 128, 128), deviation=40)
        samples = {item.sample(rng) for _ in range(20)}
        assert len(samples) > 1

    def test_dict_roundtrip(self):
        """Test serialization."""
        item = ColorItem(shade=Color(1, 2, 3), deviation=7, theme=Color(4, 5, 6), weight=9)
        data = item.to_dict()
        assert data == {"shade": "#010203", "deviation": 7, "theme": "#040506", "weight": 9}
        assert ColorItem.from_dict(data) == item


class TestChooser:
    """Tests for Chooser class."""

    def test_empty(self):
        """Empty chooser yields None."""
        assert Chooser().choose(random.Random(0)) is None

    def test_zero_weight_ignored(self):
        """Items with non-positive weight are never chosen."""
        chooser = Chooser()
        chooser.push("a", 0)
        chooser.push("b", 1)
        assert len(chooser) == 1
        rng = random.Random(0)
        assert all(chooser.choose(rng) == "b" for _ in range(20))

    def test_weighted(self):
        """Heavier items are chosen more often."""
        chooser = Chooser()
        chooser.push("heavy", 9)
        chooser.push("light", 1)
        rng = random.Random(42)
        picks = [chooser.choose(rng) for _ in range(1000)]
        assert picks.count("heavy") > picks.count("light") * 3
