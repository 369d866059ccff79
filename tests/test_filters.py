"""Tests for colortools.filters, the string-in/string-out surface."""

import random
import re

import pytest
from colortools import filters


class TestFormatFilters:
    def test_to_hex(self) -> None:
        assert filters.to_hex('rgb(255, 0, 0)') == '#ff0000'
        assert filters.to_hex('#ff000080') == '#ff0000'

    def test_to_rgb(self) -> None:
        assert filters.to_rgb('#ff0000') == 'rgb(255, 0, 0)'

    def test_to_rgba(self) -> None:
        assert filters.to_rgba('#ff0000') == 'rgba(255, 0, 0, 1.00)'
        assert filters.to_rgba('#ff000080') == 'rgba(255, 0, 0, 0.50)'

    def test_to_rgba_explicit_alpha(self) -> None:
        assert filters.to_rgba('#ff0000', 0.5) == 'rgba(255, 0, 0, 0.50)'
        assert filters.to_rgba('#ff0000', '0.25') == 'rgba(255, 0, 0, 0.25)'
        assert filters.to_rgba('#ff0000', 2) == 'rgba(255, 0, 0, 1.00)'
        assert filters.to_rgba('#ff0000', -1) == 'rgba(255, 0, 0, 0.00)'

    def test_to_rgba_bad_alpha(self) -> None:
        assert filters.to_rgba('#ff0000', 'abc') is None
        assert filters.to_rgba('#ff0000', float('nan')) is None

    def test_to_hsl(self) -> None:
        assert filters.to_hsl('#ff0000') == 'hsl(0, 100%, 50%)'

    @pytest.mark.parametrize('name', ['to_hex', 'to_rgb', 'to_rgba', 'to_hsl'])
    def test_invalid_input(self, name: str) -> None:
        assert getattr(filters, name)('not a color') is None


class TestColorimetryFilters:
    def test_luminance(self) -> None:
        assert filters.luminance('#ffffff') == pytest.approx(1.0)

    def test_contrast_ratio_is_alpha_aware(self) -> None:
        assert filters.contrast_ratio('#000000', '#ffffff') == 21.0
        assert filters.contrast_ratio('#00000000', '#ffffff') == 1.0

    def test_best_text_color(self) -> None:
        assert filters.best_text_color('#000000') == '#ffffff'
        assert filters.best_text_color('#00000080') == '#000000'
        assert filters.best_text_color('#00000000', '#000000') == '#ffffff'

    def test_is_contrast_ok(self) -> None:
        assert filters.is_contrast_ok('#000', '#fff') is True
        assert filters.is_contrast_ok('#cccccc', '#ffffff') is False
        assert filters.is_contrast_ok('#cccccc', '#ffffff', 'AA', 'large') is False
        assert filters.is_contrast_ok('x', '#fff') is None


class TestBlendFilters:
    def test_color_mix(self) -> None:
        assert filters.color_mix('#ff0000', '#0000ff') == '#800080'
        assert filters.color_mix('#ff0000', '#0000ff', 0) == '#ff0000'

    def test_color_mix_invalid(self) -> None:
        assert filters.color_mix('#ff0000', 'nope') is None

    def test_color_compose(self) -> None:
        assert filters.color_compose('#ff000080', '#ffffff') == '#ff7f7f'

    def test_color_random(self) -> None:
        assert re.match(r'^#[0-9a-f]{6}$', filters.color_random())
        assert re.match(r'^#[0-9a-f]{6}$', filters.color_random(fancy=True, rng=random.Random(1)))


class TestRegistries:
    def test_filter_names(self) -> None:
        assert set(filters.FILTERS) == {
            'to_hex', 'to_rgb', 'to_rgba', 'to_hsl',
            'luminance', 'contrast_ratio', 'best_text_color',
        }

    def test_function_names(self) -> None:
        assert set(filters.FUNCTIONS) == {'color_mix', 'color_compose', 'is_contrast_ok', 'color_random'}

    def test_registries_point_at_module_functions(self) -> None:
        assert filters.FILTERS['to_hex'] is filters.to_hex
        assert filters.FUNCTIONS['color_mix'] is filters.color_mix
