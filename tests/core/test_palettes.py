import re

from surveyview.core.palettes import grid_palette, hcl_to_hex, heat_hcl, point_palette, rainbow_hcl

_HEX = re.compile(r"^#[0-9A-F]{6}$")


def _rgb(hex_color: str) -> tuple[int, int, int]:
    return int(hex_color[1:3], 16), int(hex_color[3:5], 16), int(hex_color[5:7], 16)


def test_palettes_return_n_hex_colors():
    for palette in (rainbow_hcl, heat_hcl, point_palette, grid_palette):
        colors = palette(7)
        assert len(colors) == 7
        assert all(_HEX.match(c) for c in colors)


def test_empty_palette_for_non_positive_n():
    assert rainbow_hcl(0) == []
    assert heat_hcl(-3) == []


def test_zero_chroma_is_grey():
    for lum in (20.0, 50.0, 80.0):
        (color,) = hcl_to_hex(0.0, 0.0, lum)
        r, g, b = _rgb(color)
        assert abs(r - g) <= 1
        assert abs(g - b) <= 1


def test_luminance_extremes():
    assert hcl_to_hex(0.0, 0.0, 0.0) == ["#000000"]
    assert hcl_to_hex(0.0, 0.0, 100.0) == ["#FFFFFF"]


def test_hcl_to_hex_broadcasts_scalars():
    colors = hcl_to_hex([0.0, 120.0, 240.0], 50.0, 70.0)

    assert len(colors) == 3
    assert len(set(colors)) == 3


def test_single_color_rainbow_uses_start_hue():
    assert rainbow_hcl(1, c=80.0, l=60.0, start=30.0, end=300.0) == hcl_to_hex(30.0, 80.0, 60.0)


def test_heat_palette_gets_lighter():
    colors = heat_hcl(5)

    assert sum(_rgb(colors[-1])) > sum(_rgb(colors[0]))
