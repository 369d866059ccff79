"""Tests for colortools.core.generator."""

import random
import re

from colortools.core.color import Color
from colortools.core.generator import random_color
from colortools.shared.formatting import rgb_to_hex

HEX_RE = re.compile(r'^#[0-9a-f]{6}$')


class FakeRng:
    """Deterministic stand-in for random.Random."""

    def __init__(self, value: float = 0.0, ints=(0, 0, 0)) -> None:
        self.value = value
        self.ints = list(ints)

    def random(self) -> float:
        return self.value

    def randint(self, a: int, b: int) -> int:
        return self.ints.pop(0)


class TestRandomColor:
    def test_plain_uses_three_draws(self) -> None:
        assert random_color(rng=FakeRng(ints=(1, 2, 3))) == Color(1, 2, 3)

    def test_fancy_fixed_saturation_and_lightness(self) -> None:
        assert random_color(fancy=True, rng=FakeRng(0.0)) == Color(224, 82, 82)

    def test_fancy_hue_scaled_to_degrees(self) -> None:
        # 1/3 of the circle is 120 degrees: the green sextant
        col = random_color(fancy=True, rng=FakeRng(1 / 3))
        assert col.g > col.r and col.g > col.b

    def test_always_opaque(self) -> None:
        assert random_color(rng=random.Random(7)).a == 1.0
        assert random_color(fancy=True, rng=random.Random(7)).a == 1.0

    def test_seeded_rng_is_reproducible(self) -> None:
        assert random_color(rng=random.Random(42)) == random_color(rng=random.Random(42))

    def test_successive_draws_differ(self) -> None:
        rng = random.Random(42)
        assert random_color(rng=rng) != random_color(rng=rng)
        assert random_color(fancy=True, rng=rng) != random_color(fancy=True, rng=rng)

    def test_module_random_is_default(self) -> None:
        random.seed(3)
        first = random_color()
        random.seed(3)
        assert random_color() == first

    def test_hex_shape(self) -> None:
        rng = random.Random(0)
        for _ in range(50):
            assert HEX_RE.match(rgb_to_hex(random_color(rng=rng)))
            assert HEX_RE.match(rgb_to_hex(random_color(fancy=True, rng=rng)))
