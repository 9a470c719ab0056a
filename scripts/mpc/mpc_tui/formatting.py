"""Text formatting rules for declared widgets."""

from __future__ import annotations

ELLIPSIS = "..."

# "= " + "..." + " =" around the kept part of an over-long title.
TITLE_DECORATION = 7


def trim_title(text: str, width: int) -> str:
    if len(text) + 2 <= width:
        return text
    keep = max(0, width - TITLE_DECORATION)
    return f"{text[:keep]}{ELLIPSIS}"


def title_text(text: str, width: int) -> str:
    if width <= 0:
        return ""
    decorated = f" {trim_title(text, width)} "
    return f"{decorated:=^{width}}"[:width]


def input_label(label: str) -> str:
    return f"{label}: "


def input_field_width(label: str, width: int | None = None) -> int:
    minimum = len(label) + 1
    return max(width or minimum, minimum)


def input_value(label: str, value: str, width: int | None = None) -> str:
    return f"{value:<{input_field_width(label, width)}}"


def button_text(label: str, width: int | None = None) -> str:
    field = len(label) + 2 if width is None else max(0, width)
    if field <= len(label):
        return f"[{label}]"
    return f"[{label:^{field}}]"


def hint_text(index: int, size: int) -> str:
    number = str(index + 1)
    if size <= len(number):
        return number
    return f"{number:^{size}}"


def clip(text: str, available: int) -> str:
    if available <= 0:
        return ""
    return text[:available]
