import pytest

from llcmerge.layout import TitleAlignment, WidgetPlacement, panel_origin, title_anchor


def test_left_is_flush_and_vertically_centered():
    assert panel_origin(WidgetPlacement.LEFT, 350, 200, 300, 150) == (0, 25)


def test_right_ends_at_last_pixel():
    x, y = panel_origin(WidgetPlacement.RIGHT, 350, 200, 300, 150)
    assert x + 300 == 350 - 1
    assert y == panel_origin(WidgetPlacement.LEFT, 350, 200, 300, 150)[1]


def test_top_and_bottom_share_x():
    top = panel_origin(WidgetPlacement.TOP, 400, 300, 300, 150)
    bottom = panel_origin(WidgetPlacement.BOTTOM, 400, 300, 300, 150)
    assert top[0] == bottom[0]
    assert top[1] == 0
    assert bottom[1] + 150 == 300 - 1


def test_small_area_truncates_toward_zero():
    assert panel_origin(WidgetPlacement.LEFT, 100, 149, 300, 150)[1] == 0


@pytest.mark.parametrize(
    "alignment,anchor",
    [(TitleAlignment.LEFT, "w"), (TitleAlignment.RIGHT, "e"), (TitleAlignment.CENTER, "center")],
)
def test_title_anchor(alignment, anchor):
    assert title_anchor(alignment) == anchor