"""Shared model contracts for the per-frame widget list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Position:
    col: int
    row: int

    def __add__(self, other: Position) -> Position:
        return Position(self.col + other.col, self.row + other.row)

    def __sub__(self, other: Position) -> Position:
        return Position(self.col - other.col, self.row - other.row)


@dataclass
class Screen:
    row: int
    col: int
    width: int
    height: int

    @property
    def origin(self) -> Position:
        return Position(self.col, self.row)

    @property
    def interior_origin(self) -> Position:
        return Position(self.col + 1, self.row + 1)


@dataclass(frozen=True)
class Title:
    text: str


@dataclass(frozen=True)
class Input:
    label: str
    value: str


@dataclass(frozen=True)
class Button:
    label: str
    active: bool = False


ElementKind = Union[Title, Input, Button]


@dataclass
class Element:
    kind: ElementKind
    position: Position
    width: int
    focusable: bool = False
    rendered: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "kind": type(self.kind).__name__.lower(),
            "col": self.position.col,
            "row": self.position.row,
            "width": self.width,
            "focusable": self.focusable,
            "rendered": self.rendered,
        }
        if isinstance(self.kind, Title):
            data["text"] = self.kind.text
        elif isinstance(self.kind, Input):
            data["label"] = self.kind.label
            data["value"] = self.kind.value
        else:
            data["label"] = self.kind.label
            data["active"] = self.kind.active
        return data
