"""Tests for colortools.widget: live contrast preview and save-time validation."""

import pytest
from colortools.core.color import Color
from colortools.widget.contrast_info import (
    STATUS_FAIL,
    STATUS_PASS,
    STATUS_WARNING,
    ContrastInfo,
    ContrastStatus,
    resolve_compare_color,
    should_calculate_contrast,
)
from colortools.widget.validation import ContrastValidationError, validate_contrast


class TestThreshold:
    def test_defaults(self) -> None:
        assert ContrastInfo(role='foreground').threshold == 4.5

    @pytest.mark.parametrize('level,size,expected', [
        ('AAA', 'normal', 7.0),
        ('AAA', 'large', 4.5),
        ('aa', 'LARGE', 3.0),
        ('AAA', 'ui', 3.0),
    ])
    def test_table_lookup(self, level: str, size: str, expected: float) -> None:
        assert ContrastInfo(contrast_level=level, contrast_size=size).threshold == expected

    def test_unknown_key_defaults(self) -> None:
        assert ContrastInfo(contrast_level='AAA', contrast_size='huge').threshold == 4.5

    def test_target_label(self) -> None:
        assert ContrastInfo(contrast_level='AAA').target_label == '(>= 7:1)'


class TestParseColor:
    def test_long_hex(self) -> None:
        assert ContrastInfo.parse_color('#FF0000') == Color(255, 0, 0)

    def test_long_hex_with_alpha(self) -> None:
        assert ContrastInfo.parse_color('#ff000080') == Color(255, 0, 0, 128 / 255)

    def test_short_hex(self) -> None:
        assert ContrastInfo.parse_color('#abc') == Color(0xAA, 0xBB, 0xCC)

    @pytest.mark.parametrize('value', ['#abcd', 'rgb(0, 0, 0)', 'hsl(0, 0%, 0%)', 'transparent', '', None])
    def test_narrower_than_engine(self, value) -> None:
        assert ContrastInfo.parse_color(value) is None


class TestCalculateContrastRatio:
    def test_opaque(self) -> None:
        assert ContrastInfo().calculate_contrast_ratio('#000000', '#ffffff') == 21.0

    def test_foreground_composites(self) -> None:
        info = ContrastInfo(role='foreground')
        assert info.calculate_contrast_ratio('#00000000', '#ffffff') == 1.0

    def test_background_does_not_composite(self) -> None:
        info = ContrastInfo(role='background')
        assert info.calculate_contrast_ratio('#00000000', '#ffffff') == 21.0

    def test_unparseable(self) -> None:
        assert ContrastInfo().calculate_contrast_ratio('rgb(0,0,0)', '#ffffff') is None


class TestCompareColor:
    def test_compare_to_wins(self) -> None:
        info = ContrastInfo(role='foreground', compare_to='#123456', contrast_with='bg')
        assert info.get_compare_color('#abcdef') == '#123456'

    def test_linked_value(self) -> None:
        info = ContrastInfo(role='foreground', contrast_with='bg')
        assert info.get_compare_color('#abcdef') == '#abcdef'

    def test_fallback_by_role(self) -> None:
        assert ContrastInfo(role='foreground', contrast_with='bg').get_compare_color() == '#ffffff'
        assert ContrastInfo(role='background', contrast_with='fg').get_compare_color() == '#000000'

    def test_nothing_configured(self) -> None:
        assert resolve_compare_color('foreground') is None


class TestShouldCalculate:
    def test_needs_role_and_target(self) -> None:
        assert should_calculate_contrast('foreground', None, 'bg') is True
        assert should_calculate_contrast('background', '#fff', None) is True
        assert should_calculate_contrast(None, '#fff', None) is False
        assert should_calculate_contrast('foreground', None, None) is False


class TestValidate:
    def test_pass(self) -> None:
        status = ContrastInfo(role='foreground', compare_to='#ffffff').validate('#000000')
        assert status == ContrastStatus(21.0, STATUS_PASS, 4.5)
        assert status.text == '21:1'
        assert status.icon == 'icon-check-circle'

    def test_warning_when_optional(self) -> None:
        status = ContrastInfo(role='foreground', compare_to='#ffffff').validate('#cccccc')
        assert status.status == STATUS_WARNING
        assert status.text == '1.61:1'

    def test_fail_when_required(self) -> None:
        info = ContrastInfo(role='foreground', compare_to='#ffffff', contrast_required=True)
        assert info.validate('#cccccc').status == STATUS_FAIL

    def test_hidden_without_compare_color(self) -> None:
        assert ContrastInfo(role='foreground').validate('#000000') is None

    def test_hidden_for_unparseable_value(self) -> None:
        assert ContrastInfo(role='foreground', compare_to='#fff').validate('rgb(0,0,0)') is None


class TestSwatchColor:
    def test_foreground_drops_alpha(self) -> None:
        assert ContrastInfo(role='foreground').swatch_color('#ff000080') == '#ff0000'

    def test_background_unchanged(self) -> None:
        assert ContrastInfo(role='background').swatch_color('#ff000080') == '#ff000080'


class TestValidateContrast:
    def test_passing_pair(self) -> None:
        assert validate_contrast('#000000', '#ffffff', 'foreground') is None

    def test_no_compare_color(self) -> None:
        assert validate_contrast('#cccccc', None, 'foreground') is None

    def test_optional_failure_warns(self, capsys: pytest.CaptureFixture) -> None:
        message = validate_contrast('#cccccc', '#ffffff', 'background', label='Text')
        assert message == 'Contrast for field "Text" is insufficient (1.61:1).'
        assert message in capsys.readouterr().err

    def test_required_failure_raises(self) -> None:
        with pytest.raises(ContrastValidationError) as exc_info:
            validate_contrast(
                '#cccccc', '#ffffff', 'foreground',
                required=True, label='Text', field='text_color',
            )
        assert exc_info.value.field == 'text_color'
        assert 'insufficient (1.61:1)' in exc_info.value.message

    def test_foreground_keeps_alpha(self) -> None:
        message = validate_contrast('#00000000', '#ffffff', 'foreground')
        assert message == 'Contrast for field "color" is insufficient (1:1).'

    def test_background_treated_as_opaque(self) -> None:
        assert validate_contrast('#00000000', '#ffffff', 'background') is None

    def test_level_and_size(self) -> None:
        assert validate_contrast('#808080', '#ffffff', 'foreground', 'AA', 'ui') is None
        assert validate_contrast('#808080', '#ffffff', 'foreground', 'AAA', 'normal') is not None

    def test_invalid_value_is_not_reported(self) -> None:
        assert validate_contrast('nope', '#ffffff', 'foreground') is None
