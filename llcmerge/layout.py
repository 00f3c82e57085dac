"""Placement of a selection panel within its area."""

from __future__ import annotations

from enum import Enum


class WidgetPlacement(Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"


class TitleAlignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def _half(value: int) -> int:
    """Halve, truncating toward zero."""
    return int(value / 2)


def panel_origin(
    placement: WidgetPlacement, width: int, height: int, panel_width: int, panel_height: int
) -> tuple[int, int]:
    """Top-left corner of a panel placed inside a ``width`` x ``height`` area."""
    right = width - 1
    bottom = height - 1
    middle_y = _half(height - panel_height)
    shifted_x = _half(width + panel_width)
    if placement is WidgetPlacement.LEFT:
        return 0, middle_y
    if placement is WidgetPlacement.RIGHT:
        return right - panel_width, middle_y
    if placement is WidgetPlacement.TOP:
        return shifted_x, 0
    if placement is WidgetPlacement.BOTTOM:
        return shifted_x, bottom - panel_height
    return shifted_x, middle_y


def title_anchor(alignment: TitleAlignment) -> str:
    """Tk anchor for a title with the given alignment."""
    return {
        TitleAlignment.LEFT: "w",
        TitleAlignment.RIGHT: "e",
        TitleAlignment.CENTER: "center",
    }[alignment]