"""Tests for the composed profile document and its stylesheet."""

import xml.etree.ElementTree as ET

import pytest

from profile3d.config import L10n, PieLangColorSettings
from profile3d.errors import InconsistentSettings
from profile3d.models import UserInfo
from profile3d.render.css import create_css_colors, season_colors
from profile3d.render.rgb import parse_color
from profile3d.render.svg import build_svg, create_svg

NS = {"svg": "http://www.w3.org/2000/svg"}


class TestCreateSvg:
    def test_root(self, user_info, normal_settings):
        root = ET.fromstring(create_svg(user_info, normal_settings))
        assert root.tag == "{http://www.w3.org/2000/svg}svg"
        assert root.get("width") == "1280"
        assert root.get("viewBox") == "0 0 1280 850"

    def test_stylesheet_and_background(self, user_info, normal_settings):
        root = ET.fromstring(create_svg(user_info, normal_settings))
        style = root.find("svg:style", NS).text
        assert "font-family" in style
        assert ".cont-top-4 { fill: #196127; }" in style
        stops = root.findall(".//svg:linearGradient[@id='bg-gradient']/svg:stop", NS)
        assert stops[0].get("stop-color") == "#ffffff"
        # light background darkens towards the bottom
        assert parse_color(stops[1].get("stop-color")).luminance() < 255

    def test_stats(self, user_info, normal_settings):
        texts = [t.text for t in ET.fromstring(create_svg(user_info, normal_settings)).iter(
            "{http://www.w3.org/2000/svg}text")]
        assert "1,234" in texts
        assert "contributions" in texts
        assert "5.3k" in texts
        assert "42" in texts
        assert "2024-01-03 / 2024-01-23" in texts

    def test_localized_label(self, user_info, normal_settings):
        normal_settings = normal_settings.model_copy(update={"l10n": L10n(contrib="Beiträge")})
        assert "Beiträge" in create_svg(user_info, normal_settings)

    def test_empty_calendar(self, normal_settings):
        markup = create_svg(UserInfo(), normal_settings)
        root = ET.fromstring(markup)
        texts = [t.text for t in root.iter("{http://www.w3.org/2000/svg}text")]
        assert not any(t and " / " in t for t in texts)

    def test_bitmap_defines_patterns(self, user_info, bitmap_settings):
        root = ET.fromstring(create_svg(user_info, bitmap_settings))
        patterns = root.findall(".//svg:pattern", NS)
        assert len(patterns) == 15

    def test_inconsistent_bitmap_produces_nothing(self, user_info, bitmap_settings):
        bitmap_settings.contrib_patterns = bitmap_settings.contrib_patterns[:1]
        with pytest.raises(InconsistentSettings):
            create_svg(user_info, bitmap_settings)

    @pytest.mark.parametrize("fixture", ["normal_settings", "season_settings", "rainbow_settings", "bitmap_settings"])
    def test_byte_identical(self, request, user_info, fixture):
        settings = request.getfixturevalue(fixture)
        assert create_svg(user_info, settings, True) == create_svg(user_info, settings, True)

    def test_dark_background_brightens(self, user_info, normal_settings):
        dark = normal_settings.model_copy(update={"background_color": "#002b36"})
        svg = build_svg(user_info, dark)
        stops = svg.findall(".//linearGradient/stop")
        assert parse_color(stops[1].get("stop-color")).luminance() > parse_color("#002b36").luminance()


class TestCss:
    def test_common_classes(self, normal_settings):
        css = create_css_colors(normal_settings)
        assert ".fill-bg { fill: #ffffff; }" in css
        assert ".stroke-bg { stroke: #ffffff; }" in css
        assert ".fill-weak { fill: #aaaaaa; }" in css

    def test_normal_side_panels_darker(self, normal_settings):
        css = create_css_colors(normal_settings)
        assert ".cont-left-0 { fill: rgb(199, 199, 199); }" in css
        assert ".cont-right-0 { fill: rgb(167, 167, 167); }" in css

    def test_season_has_all_patterns(self, season_settings):
        css = create_css_colors(season_settings)
        for pattern in range(20):
            assert f".cont-top-p{pattern}-4 " in css

    def test_season_blends(self, season_settings):
        palettes = season_settings.season_palettes
        as_rgb = lambda colors: [str(parse_color(c)) for c in colors]
        assert season_colors(palettes, 0) == as_rgb(palettes[3])   # still summer
        assert season_colors(palettes, 4) == as_rgb(palettes[0])   # autumn
        assert season_colors(palettes, 9) == as_rgb(palettes[1])   # winter
        assert season_colors(palettes, 19) == as_rgb(palettes[3])  # summer

    def test_rainbow_has_no_contrib_classes(self, rainbow_settings):
        assert ".cont-" not in create_css_colors(rainbow_settings)

    def test_bitmap_classes(self, bitmap_settings):
        css = create_css_colors(bitmap_settings)
        assert ".cont-top-bg-0 { fill: #101010; }" in css
        assert ".cont-right-fg-4 { fill: #f0f0f0; }" in css


class TestCssColorSyntax:
    @pytest.mark.parametrize("background", ["white", "rgba(255, 255, 255, 1)", "#ffffffff", "hsl(0, 0%, 100%)"])
    def test_background_formats(self, user_info, normal_settings, background):
        settings = normal_settings.model_copy(update={"background_color": background})
        root = ET.fromstring(create_svg(user_info, settings))
        stops = root.findall(".//svg:linearGradient[@id='bg-gradient']/svg:stop", NS)
        assert stops[0].get("stop-color") == background
        assert parse_color(stops[1].get("stop-color")).luminance() < 255

    def test_named_contrib_color(self, user_info, normal_settings):
        colors = ["lightgray", *normal_settings.contrib_colors[1:]]
        settings = normal_settings.model_copy(update={"contrib_colors": colors})
        css = create_css_colors(settings)
        assert ".cont-top-0 { fill: lightgray; }" in css
        # lightgray = rgb(211, 211, 211); right panel shaded by 0.7
        assert ".cont-right-0 { fill: rgb(148, 148, 148); }" in css
        create_svg(user_info, settings)

    def test_named_season_colors(self, user_info, season_settings):
        settings = season_settings.model_copy(update={"contrib_colors1": ["white", "gold", "orange", "tomato", "brown"]})
        assert ".cont-top-p4-1 { fill: rgb(255, 215, 0); }" in create_css_colors(settings)
        create_svg(user_info, settings)


class TestPieOnly:
    @pytest.fixture()
    def pie_settings(self, normal_settings):
        return PieLangColorSettings(**normal_settings.model_dump(include={
            "background_color", "foreground_color", "strong_color", "weak_color",
        }))

    def test_canvas_is_pie_sized(self, user_info, pie_settings):
        root = ET.fromstring(create_svg(user_info, pie_settings))
        assert (root.get("width"), root.get("height")) == ("520", "260")
        assert root.get("viewBox") == "0 0 520 260"
        bg = root.find("svg:rect", NS)
        assert bg.get("class") == "fill-bg"

    def test_only_the_pie(self, user_info, pie_settings):
        svg = build_svg(user_info, pie_settings)
        assert svg.find(".//linearGradient") is None
        assert svg.findall(".//text")  # legend labels
        texts = [t.text for t in svg.iter("text")]
        assert "1,234" not in texts
        groups = svg.findall("g")
        assert len(groups) == 1
        assert groups[0].get("transform") == "translate(0, 0)"
        assert len(groups[0].findall("g")[1].findall("path")) == 3

    def test_css_has_no_bar_classes(self, pie_settings):
        css = create_css_colors(pie_settings)
        assert ".fill-bg { fill: #ffffff; }" in css
        assert ".cont-" not in css

    def test_animated(self, user_info, pie_settings):
        svg = build_svg(user_info, pie_settings, force_animation=True)
        assert svg.find("defs/filter").get("id") == "pie-glow"
