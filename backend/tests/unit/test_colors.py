"""Unit tests for ColorValue, the rgba() adapter and name-based default colors."""

import logging

import pytest

from backend.app.core.colors import (
    BLACK,
    NEUTRAL_GRAY,
    WHITE,
    ColorValue,
    RgbaColorAdapter,
    default_color_for_name,
)


class TestChannelNormalization:
    """Channels accept 0-1 floats or 0-255 values."""

    def test_unit_range_kept(self):
        color = ColorValue(0.25, 0.5, 1.0, 0.75)
        assert (color.red, color.green, color.blue, color.alpha) == (0.25, 0.5, 1.0, 0.75)

    def test_byte_range_scaled(self):
        color = ColorValue(255, 128, 0)
        assert color.red == 1.0
        assert color.green == pytest.approx(128 / 255)
        assert color.blue == 0.0

    def test_exactly_one_is_not_scaled(self):
        assert ColorValue(1, 1, 1).red == 1.0

    def test_out_of_range_clamped(self):
        color = ColorValue(300, -5, 0.5, 2000)
        assert color.red == 1.0
        assert color.green == 0.0
        assert color.blue == 0.5
        assert color.alpha == 1.0

    def test_alpha_defaults_to_opaque(self):
        assert ColorValue(0, 0, 0).alpha == 1.0


class TestBrightness:
    def test_black_and_white(self):
        assert BLACK.brightness() == 0.0
        assert WHITE.brightness() == pytest.approx(1.0)

    def test_weights(self):
        assert ColorValue(1, 0, 0).brightness() == pytest.approx(0.299)
        assert ColorValue(0, 1, 0).brightness() == pytest.approx(0.587)
        assert ColorValue(0, 0, 1).brightness() == pytest.approx(0.114)

    def test_contrast_color(self):
        """Bright colors get black text, dark colors white."""
        assert ColorValue(1, 1, 0).contrast_color() == BLACK
        assert ColorValue(0, 0, 1).contrast_color() == WHITE
        assert WHITE.contrast_color() == BLACK
        assert BLACK.contrast_color() == WHITE

    def test_is_bright_threshold(self):
        assert NEUTRAL_GRAY.brightness() == pytest.approx(0.5)
        assert ColorValue(0.4, 0.4, 0.4).is_bright is False
        assert ColorValue(0.6, 0.6, 0.6).is_bright is True


class TestLightenDarken:
    def test_lighten_default_amount(self):
        lighter = NEUTRAL_GRAY.lighten()
        assert lighter.red == pytest.approx(0.7)
        assert lighter.green == pytest.approx(0.7)
        assert lighter.blue == pytest.approx(0.7)

    def test_darken_default_amount(self):
        darker = NEUTRAL_GRAY.darken()
        assert darker.red == pytest.approx(0.3)

    def test_lighten_clamps_at_one(self):
        assert ColorValue(0.9, 0.9, 0.9).lighten(0.5).red == 1.0

    def test_darken_clamps_at_zero(self):
        assert ColorValue(0.1, 0.1, 0.1).darken(0.5).red == 0.0

    def test_alpha_unchanged(self):
        assert ColorValue(0.5, 0.5, 0.5, 0.4).lighten().alpha == pytest.approx(0.4)
        assert ColorValue(0.5, 0.5, 0.5, 0.4).darken().alpha == pytest.approx(0.4)


class TestHexConversion:
    def test_six_digit(self):
        assert ColorValue.from_hex("#FF0000") == ColorValue(1, 0, 0)

    def test_three_digit(self):
        assert ColorValue.from_hex("#0F0") == ColorValue(0, 1, 0)

    def test_eight_digit_alpha(self):
        color = ColorValue.from_hex("#0000FF80")
        assert color.blue == 1.0
        assert color.alpha == pytest.approx(128 / 255)

    def test_without_hash(self):
        assert ColorValue.from_hex("ffffff") == WHITE

    @pytest.mark.parametrize("value", ["nope", "#12345", "", None, "#GGGGGG"])
    def test_invalid_gives_neutral_gray(self, value):
        assert ColorValue.from_hex(value) == NEUTRAL_GRAY

    def test_to_hex(self):
        assert ColorValue(1, 0, 0).to_hex() == "#FF0000"
        assert ColorValue(1, 0, 0).to_hex(include_alpha=True) == "#FF0000FF"

    def test_dict_conversion(self):
        color = ColorValue(0.1, 0.2, 0.3, 0.4)
        assert ColorValue.from_dict(color.to_dict()) == color
        assert ColorValue.from_dict(None) is None
        assert ColorValue.from_dict({}) is None


class TestPlatformAdapter:
    """Conversion to and from the presentation layer's color type."""

    def test_round_trip_through_rgba_adapter(self):
        adapter = RgbaColorAdapter()
        native = ColorValue(0, 0, 1).to_platform_color(adapter)
        assert native == "rgba(0.0, 0.0, 1.0, 1.0)"
        assert ColorValue.from_platform_color(adapter, native) == ColorValue(0, 0, 1)

    @pytest.mark.parametrize(
        "color",
        [
            ColorValue(0.3, 0.6, 0.9, 0.25),
            ColorValue(0.1, 0.2, 0.7, 0.333),
            ColorValue(1 / 3, 2 / 3, 0.0001, 0.999999),
        ],
    )
    def test_round_trip_keeps_full_precision(self, color):
        """Channels that are not multiples of 1/255 survive unchanged."""
        adapter = RgbaColorAdapter()
        assert ColorValue.from_platform_color(adapter, color.to_platform_color(adapter)) == color

    def test_reads_whitespace_variants(self):
        color = ColorValue.from_platform_color(RgbaColorAdapter(), " rgba(0.5,0.25, 1,0) ")
        assert color == ColorValue(0.5, 0.25, 1.0, 0.0)

    @pytest.mark.parametrize(
        "native",
        [42, None, "xyz", "#12", "rgba(0.1, 0.2, 0.3)", "rgba(0.1, 0.2, 0.3, 1.5)", "rgba(a, b, c, d)", "rgba(nan, 0, 0, 1)"],
    )
    def test_unreadable_native_color_gives_neutral_gray(self, native):
        assert ColorValue.from_platform_color(RgbaColorAdapter(), native) == NEUTRAL_GRAY

    def test_adapter_without_rgba_support(self):
        class BrokenAdapter:
            def to_rgba(self, native):
                return native.rgba  # AttributeError for plain objects

            def from_rgba(self, color):
                return color

        assert ColorValue.from_platform_color(BrokenAdapter(), object()) == NEUTRAL_GRAY

    @pytest.mark.parametrize("error", [RuntimeError("backend gone"), OverflowError("too big"), LookupError()])
    def test_any_adapter_failure_gives_neutral_gray(self, error):
        class FailingAdapter:
            def to_rgba(self, native):
                raise error

            def from_rgba(self, color):
                return color

        assert ColorValue.from_platform_color(FailingAdapter(), "anything") == NEUTRAL_GRAY

    def test_adapter_failure_is_logged_at_debug(self, caplog):
        class FailingAdapter:
            def to_rgba(self, native):
                raise RuntimeError("backend gone")

            def from_rgba(self, color):
                return color

        with caplog.at_level(logging.DEBUG, logger="backend.app.core.colors"):
            ColorValue.from_platform_color(FailingAdapter(), "anything")
        assert "backend gone" in caplog.text


class TestDefaultColorForName:
    """Display color guessed from a free-text color name."""

    def test_first_keyword_wins(self):
        assert default_color_for_name("黑白条纹") == BLACK

    def test_single_character(self):
        assert default_color_for_name("黑") == BLACK

    def test_transparent_is_half_alpha_white(self):
        color = default_color_for_name("透明")
        assert (color.red, color.green, color.blue) == (1.0, 1.0, 1.0)
        assert color.alpha == 0.5

    def test_english_keywords_case_insensitive(self):
        assert default_color_for_name("Sky BLUE") == ColorValue(0, 0, 1)
        assert default_color_for_name("Forest green") == ColorValue(0, 0.5, 0)

    def test_chinese_keywords(self):
        assert default_color_for_name("红色") == ColorValue(1, 0, 0)
        assert default_color_for_name("樱花紫") == ColorValue(0.5, 0, 0.5)
        assert default_color_for_name("橙色") == ColorValue(1, 0.5, 0)

    @pytest.mark.parametrize("name", ["Unobtainium", "", None, "樱花粉"])
    def test_unmatched_gives_neutral_gray(self, name):
        assert default_color_for_name(name) == NEUTRAL_GRAY
