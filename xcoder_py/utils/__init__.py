"""Utility functions."""

from .terminal import (
    choose_index,
    format_result_color,
    create_table,
    print_notifications,
    render_description,
    scanline,
    scanline_trim,
)

__all__ = [
    "choose_index",
    "format_result_color",
    "create_table",
    "print_notifications",
    "render_description",
    "scanline",
    "scanline_trim",
]
