from dataclasses import dataclass, field
from typing import NamedTuple

from ..config import AppConfig


class Point(NamedTuple):
    x: float
    y: float


ORIGIN = Point(*AppConfig.ORIGIN)


@dataclass(frozen=True)
class Pen:
    """Snapshot of the stroke attributes handed to the canvas with each primitive."""
    color: str = AppConfig.DEFAULT_COLOR
    thickness: float = AppConfig.DEFAULT_LINE_WIDTH
    rotation: float = 0.0


@dataclass
class PenState:
    position: Point = ORIGIN
    color: str = AppConfig.DEFAULT_COLOR
    thickness: float = AppConfig.DEFAULT_LINE_WIDTH
    fill: bool = False
    rotation: float = 0.0
    text_color: str = field(default=AppConfig.DEFAULT_TEXT_COLOR)

    def pen(self) -> Pen:
        return Pen(self.color, self.thickness, self.rotation)

    def move_to(self, x: float, y: float) -> Point:
        self.position = Point(x, y)
        return self.position

    def reset_position(self) -> Point:
        self.position = ORIGIN
        return self.position
