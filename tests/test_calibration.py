import numpy as np
import pytest

from relicscan.core.errors import UnsupportedResolutionError
from relicscan.layout import (
    DEFAULT_CATALOG,
    GENSHIN_16_9,
    STAR_RAIL_16_9,
    PixelRect,
    Rect,
    ReferenceLayout,
    calibrate,
    classify_aspect,
)


def test_reference_size_keeps_panel_and_makes_regions_panel_relative():
    geo = calibrate(GENSHIN_16_9, 1600, 900)
    assert geo.panel == PixelRect(left=1090, top=100, width=410, height=700)
    # title (106.6, 1417.7, 139.6, 1111.8) minus panel top-left (100, 1090)
    assert geo.region("title") == PixelRect(left=22, top=7, width=306, height=33)
    assert geo.counts["rows"] == 5
    assert geo.counts["cols"] == 8


def test_axes_scale_independently():
    geo = calibrate(GENSHIN_16_9, 1600, 1000)
    # x unchanged, y scaled by 10/9; rounding happens on the edges
    assert geo.panel.left == 1090
    assert geo.panel.width == 410
    assert geo.panel.top == 111
    assert geo.panel.height == 889 - 111


def test_uniform_scale_1080p():
    geo = calibrate(GENSHIN_16_9, 1920, 1080)
    assert geo.panel == PixelRect(left=1308, top=120, width=492, height=840)
    # 102 * 1.2 = 122.4
    assert geo.points["tile_width"] == 122
    # 126 * 1.2 = 151.2
    assert geo.points["tile_height"] == 151


def test_rounding_is_half_to_even():
    layout = ReferenceLayout(
        name="half_even",
        width=100.0,
        height=100.0,
        rects={"panel": Rect(0.0, 10.0, 10.0, 0.0), "a": Rect(0.5, 3.5, 2.5, 1.5)},
        x_scalars={"x": 2.5},
        y_scalars={"y": 3.5},
    )
    geo = calibrate(layout, 100, 100)
    assert geo.region("a") == PixelRect(left=2, top=0, width=2, height=2)
    assert dict(geo.points) == {"x": 2, "y": 4}


@pytest.mark.parametrize("size", [(1280, 720), (1600, 900), (1920, 1080), (2560, 1440), (3840, 2160)])
@pytest.mark.parametrize("layout", [GENSHIN_16_9, STAR_RAIL_16_9])
def test_widths_never_negative(layout, size):
    geo = calibrate(layout, *size)
    for name in layout.rects:
        r = geo.region(name)
        assert r.width >= 0 and r.height >= 0, name


def test_absolute_adds_panel_and_window_origin():
    geo = calibrate(GENSHIN_16_9, 1600, 900, left=10, top=20)
    assert geo.absolute("panel") == PixelRect(1100, 120, 410, 700)
    assert geo.absolute("title") == PixelRect(22 + 1090 + 10, 7 + 100 + 20, 306, 33)
    assert geo.absolute("title").to_region() == {"left": 1122, "top": 127, "width": 306, "height": 33}


@pytest.mark.parametrize("size", [(1366, 768), (1280, 720), (1600, 900), (2560, 1440), (3840, 2160)])
@pytest.mark.parametrize("layout", [GENSHIN_16_9, STAR_RAIL_16_9])
def test_regions_follow_rounded_window_edges(layout, size):
    width, height = size
    sx = width / layout.width
    sy = height / layout.height
    geo = calibrate(layout, width, height, left=7, top=3)
    for name, rect in layout.rects.items():
        left, right = int(np.rint(rect.left * sx)), int(np.rint(rect.right * sx))
        top, bottom = int(np.rint(rect.top * sy)), int(np.rint(rect.bottom * sy))
        assert geo.absolute(name) == PixelRect(left + 7, top + 3, right - left, bottom - top), name


def test_non_integer_scale_keeps_title_on_rounded_edge():
    geo = calibrate(GENSHIN_16_9, 1366, 768)
    # 1111.8 * 1366 / 1600 = 949.2
    assert geo.absolute("title").left == 949
    assert geo.region("title").left == 949 - geo.panel.left


def test_region_position_does_not_depend_on_window_origin():
    a = calibrate(STAR_RAIL_16_9, 1920, 1080, left=0, top=0)
    b = calibrate(STAR_RAIL_16_9, 1920, 1080, left=300, top=150)
    assert dict(a.regions) == dict(b.regions)
    assert a.panel == b.panel


@pytest.mark.parametrize(
    "w,h,expected",
    [
        (1920, 1080, "16:9"),
        (1280, 720, "16:9"),
        (1920, 1200, "8:5"),
        (1440, 900, "8:5"),
        (1024, 768, "4:3"),
        (1000, 999, None),
        (0, 0, None),
    ],
)
def test_classify_aspect(w, h, expected):
    assert classify_aspect(w, h) == expected


def test_select_layout():
    assert DEFAULT_CATALOG.select("starrail", 2560, 1440) is STAR_RAIL_16_9
    assert DEFAULT_CATALOG.select("genshin", 1280, 720) is GENSHIN_16_9


@pytest.mark.parametrize("size", [(1920, 1200), (1024, 768), (1000, 999)])
def test_select_unsupported(size):
    with pytest.raises(UnsupportedResolutionError):
        DEFAULT_CATALOG.select("genshin", *size)


def test_layout_requires_panel_and_is_read_only():
    with pytest.raises(ValueError):
        ReferenceLayout(name="bad", width=1.0, height=1.0, rects={"title": Rect(0, 1, 1, 0)})
    with pytest.raises(TypeError):
        GENSHIN_16_9.rects["title"] = Rect(0, 0, 0, 0)
