"""Tests for the scalar value builders and their clamps."""

import pytest

from weft.values import (
    Color,
    Length,
    as_length,
    auto,
    clamp,
    clamp_percent,
    clamp_unit,
    font_weight_value,
    format_number,
    hex_color,
    ms,
    named_color,
    percent,
    px,
    rem,
    rgb,
    rgba,
    seconds,
    vw,
)


class TestNumbers:
    def test_format_integral_float(self):
        assert format_number(1.0) == "1"

    def test_format_fraction(self):
        assert format_number(0.5) == "0.5"
        assert format_number(0.125) == "0.125"

    def test_format_negative(self):
        assert format_number(-2) == "-2"

    def test_clamp_bounds_are_inclusive(self):
        assert clamp(5, 0, 5) == 5
        assert clamp(0, 0, 5) == 0
        assert clamp(6, 0, 5) == 5

    def test_unit_and_percent(self):
        assert clamp_unit(2.0) == 1.0
        assert clamp_unit(-0.5) == 0.0
        assert clamp_percent(150) == 100
        assert clamp_percent(-10) == 0


class TestFontWeight:
    @pytest.mark.parametrize(
        "weight,expected",
        [(-5, "1"), (1, "1"), (400, "400"), (1000, "1000"), (5000, "1000")],
    )
    def test_clamped(self, weight, expected):
        assert font_weight_value(weight) == expected


class TestLength:
    def test_units(self):
        assert str(px(4)) == "4px"
        assert str(rem(1.5)) == "1.5rem"
        assert str(percent(50)) == "50%"
        assert str(vw(100)) == "100vw"
        assert str(auto()) == "auto"

    def test_at_least(self):
        assert str(px(-3).at_least(0)) == "0px"
        assert px(3).at_least(0) == px(3)
        assert auto().at_least(0) == auto()

    def test_as_length(self):
        assert as_length(8) == px(8)
        assert str(as_length("fit-content")) == "fit-content"
        assert as_length(rem(2)) == rem(2)

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            px(1).amount = 2  # type: ignore[misc]

    def test_equality(self):
        assert px(4) == px(4)
        assert px(4) != rem(4)

    def test_public_fields_are_not_constructor_arguments(self):
        with pytest.raises(TypeError):
            Length(amount=-5, unit="px")  # type: ignore[call-arg]

    def test_accessors(self):
        assert (rem(2).amount, rem(2).unit, rem(2).keyword) == (2, "rem", "")
        assert auto().keyword == "auto"


class TestColor:
    def test_hex_is_lowercased(self):
        assert str(hex_color("#FFAA00")) == "#ffaa00"
        assert str(hex_color("ffaa00")) == "#ffaa00"

    def test_rgb_channels_clamped(self):
        assert str(rgb(300, -1, 10)) == "rgb(255,0,10)"

    def test_rgba_alpha_clamped(self):
        assert str(rgba(0, 0, 0, 2.0)) == "rgba(0,0,0,1)"
        assert str(rgba(0, 0, 0, 0.25)) == "rgba(0,0,0,0.25)"

    def test_named(self):
        assert str(named_color(" Red ")) == "red"

    def test_public_field_is_not_a_constructor_argument(self):
        with pytest.raises(TypeError):
            Color(css="#FFF")  # type: ignore[call-arg]

    def test_css_accessor(self):
        assert hex_color("#ABC").css == "#abc"


class TestDuration:
    def test_negative_duration_clamped(self):
        assert str(ms(-5)) == "0ms"

    def test_seconds_render_as_ms(self):
        assert str(seconds(0.25)) == "250ms"
