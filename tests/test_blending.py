"""Tests for colortools.core.compositing and colortools.core.mixing."""

import pytest
from colortools.core.color import Color
from colortools.core.compositing import compose
from colortools.core.mixing import mix
from colortools.core.parser import parse_color


class TestCompose:
    def test_opaque_foreground_unchanged(self) -> None:
        assert compose('#ff0000', '#ffffff') == Color(255, 0, 0)

    def test_half_red_over_white(self) -> None:
        assert compose('#ff000080', '#ffffff') == Color(255, 127, 127, 1.0)

    def test_rounds_half_up(self) -> None:
        assert compose('rgba(0, 0, 255, 0.5)', '#ffffff') == Color(128, 128, 255)

    def test_fully_transparent_shows_background(self) -> None:
        assert compose('transparent', '#336699') == Color(0x33, 0x66, 0x99)

    def test_background_alpha_ignored(self) -> None:
        assert compose('#00000080', '#ffffff00') == Color(127, 127, 127, 1.0)

    def test_accepts_color_objects(self) -> None:
        assert compose(Color(0, 0, 0, 0.5), Color(255, 255, 255)) == Color(128, 128, 128)

    def test_invalid(self) -> None:
        assert compose('nope', '#ffffff') is None
        assert compose('#ffffff80', 'nope') is None


class TestMix:
    def test_endpoints_exact(self) -> None:
        assert mix('#123456', '#abcdef', 0) == parse_color('#123456')
        assert mix('#123456', '#abcdef', 1) == parse_color('#abcdef')

    def test_midpoint(self) -> None:
        assert mix('#ff0000', '#0000ff') == Color(128, 0, 128)

    def test_quarter(self) -> None:
        assert mix('#000000', '#ffffff', 0.25) == Color(64, 64, 64)

    def test_alpha_interpolated(self) -> None:
        assert mix('#ff000000', '#ff0000ff', 0.5).a == pytest.approx(0.5)

    def test_invalid_color(self) -> None:
        assert mix('#f00', 'nope') is None

    @pytest.mark.parametrize('ratio', ['abc', None, float('nan'), float('inf')])
    def test_invalid_ratio(self, ratio) -> None:
        assert mix('#f00', '#00f', ratio) is None

    def test_huge_ratio_saturates(self) -> None:
        assert mix('#000000', '#ffffff', 1e308) == Color(255, 255, 255)
        assert mix('#000000', '#ffffff', -1e308) == Color(0, 0, 0)

    def test_extrapolation_keeps_equal_channels(self) -> None:
        assert mix('#ff0000', '#ff00ff', 1e308) == Color(255, 0, 255)
