import math
from abc import ABC, abstractmethod
from typing import Any, List, NamedTuple, Sequence, Tuple

from ..config import AppConfig
from ..utils import logger
from .pen import Pen, Point


class Canvas(ABC):
    """The drawing surface the interpreter renders onto.

    Coordinates are top-left based with y growing downwards. Implementations
    own pixels, windows and files; the interpreter only issues primitives.
    """

    @abstractmethod
    def move_cursor(self, point: Point): ...

    @abstractmethod
    def draw_line(self, start: Point, end: Point, pen: Pen): ...

    @abstractmethod
    def draw_rect(self, pos: Point, width: float, height: float, pen: Pen): ...

    @abstractmethod
    def fill_rect(self, pos: Point, width: float, height: float, pen: Pen): ...

    @abstractmethod
    def draw_ellipse(self, center: Point, radius: float, pen: Pen): ...

    @abstractmethod
    def fill_ellipse(self, center: Point, radius: float, pen: Pen): ...

    @abstractmethod
    def draw_polygon(self, points: Sequence[Point], pen: Pen): ...

    @abstractmethod
    def fill_polygon(self, points: Sequence[Point], pen: Pen): ...

    @abstractmethod
    def draw_text(self, text: str, pos: Point, color: str): ...

    @abstractmethod
    def clear(self, color: str): ...

    @abstractmethod
    def refresh(self): ...


class Operation(NamedTuple):
    name: str
    args: Tuple[Any, ...]


class RecordingCanvas(Canvas):
    """Headless canvas that records every primitive it receives."""

    def __init__(self):
        self.operations: List[Operation] = []
        self.refreshes = 0

    def _record(self, name, *args):
        self.operations.append(Operation(name, args))

    def move_cursor(self, point): self._record("move_cursor", point)
    def draw_line(self, start, end, pen): self._record("draw_line", start, end, pen)
    def draw_rect(self, pos, width, height, pen): self._record("draw_rect", pos, width, height, pen)
    def fill_rect(self, pos, width, height, pen): self._record("fill_rect", pos, width, height, pen)
    def draw_ellipse(self, center, radius, pen): self._record("draw_ellipse", center, radius, pen)
    def fill_ellipse(self, center, radius, pen): self._record("fill_ellipse", center, radius, pen)
    def draw_polygon(self, points, pen): self._record("draw_polygon", tuple(points), pen)
    def fill_polygon(self, points, pen): self._record("fill_polygon", tuple(points), pen)
    def draw_text(self, text, pos, color): self._record("draw_text", text, pos, color)
    def clear(self, color): self._record("clear", color)

    def refresh(self):
        self.refreshes += 1

    def named(self, name: str) -> List[Operation]:
        return [op for op in self.operations if op.name == name]

    @property
    def last(self) -> Operation:
        return self.operations[-1]


def rotate_points(points: Sequence[Point], pivot: Point, degrees: float) -> List[Point]:
    """Rotates points clockwise (on a y-down surface) around ``pivot``."""
    if not degrees:
        return list(points)
    rad = math.radians(degrees)
    cos, sin = math.cos(rad), math.sin(rad)
    rotated = []
    for x, y in points:
        dx, dy = x - pivot.x, y - pivot.y
        rotated.append(Point(pivot.x + dx * cos - dy * sin, pivot.y + dx * sin + dy * cos))
    return rotated


def ellipse_points(center: Point, radius: float, steps: int = 72) -> List[Point]:
    return [
        Point(center.x + radius * math.cos(2 * math.pi * i / steps),
              center.y + radius * math.sin(2 * math.pi * i / steps))
        for i in range(steps)
    ]


class TurtleCanvas(Canvas):
    """
    Renders onto a standard library turtle screen.

    The screen is created on first use so that constructing the canvas does
    not pop up a window.
    """

    def __init__(self, width: int = AppConfig.CANVAS_WIDTH, height: int = AppConfig.CANVAS_HEIGHT):
        self.width = width
        self.height = height
        self._screen = None
        self._turtle = None

    @property
    def turtle(self):
        if self._turtle is None:
            import turtle

            screen = turtle.Screen()
            screen.setup(self.width, self.height)
            # y grows downwards, origin at the top-left corner
            screen.setworldcoordinates(0, self.height, self.width, 0)
            screen.tracer(0)
            t = turtle.Turtle()
            t.hideturtle()
            t.penup()
            t.speed("fastest")
            self._screen, self._turtle = screen, t
        return self._turtle

    def _apply(self, pen: Pen):
        t = self.turtle
        t.pencolor(pen.color)
        t.fillcolor(pen.color)
        t.pensize(pen.thickness)
        return t

    def _trace(self, points: Sequence[Point], pen: Pen, filled: bool, closed: bool = True):
        t = self._apply(pen)
        t.penup()
        t.goto(*points[0])
        if filled:
            t.begin_fill()
        t.pendown()
        for point in list(points[1:]) + ([points[0]] if closed else []):
            t.goto(*point)
        t.penup()
        if filled:
            t.end_fill()

    def _rect_points(self, pos, width, height, pen):
        corners = [pos, Point(pos.x + width, pos.y), Point(pos.x + width, pos.y + height), Point(pos.x, pos.y + height)]
        return rotate_points(corners, pos, pen.rotation)

    def _polygon_points(self, points, pen):
        points = list(points)
        cx = sum(p.x for p in points) / len(points)
        cy = sum(p.y for p in points) / len(points)
        return rotate_points(points, Point(cx, cy), pen.rotation)

    def move_cursor(self, point):
        t = self.turtle
        t.penup()
        t.goto(*point)

    def draw_line(self, start, end, pen):
        self._trace([start, end], pen, filled=False, closed=False)

    def draw_rect(self, pos, width, height, pen):
        self._trace(self._rect_points(pos, width, height, pen), pen, filled=False)

    def fill_rect(self, pos, width, height, pen):
        self._trace(self._rect_points(pos, width, height, pen), pen, filled=True)

    def draw_ellipse(self, center, radius, pen):
        self._trace(ellipse_points(center, radius), pen, filled=False)

    def fill_ellipse(self, center, radius, pen):
        self._trace(ellipse_points(center, radius), pen, filled=True)

    def draw_polygon(self, points, pen):
        self._trace(self._polygon_points(points, pen), pen, filled=False)

    def fill_polygon(self, points, pen):
        self._trace(self._polygon_points(points, pen), pen, filled=True)

    def draw_text(self, text, pos, color):
        t = self.turtle
        t.penup()
        t.goto(*pos)
        t.pencolor(color)
        t.write(text, font=AppConfig.TEXT_FONT)

    def clear(self, color):
        t = self.turtle
        t.clear()
        self._screen.bgcolor(color)

    def refresh(self):
        if self._screen is not None:
            self._screen.update()

    def hold(self) -> str:
        """Keeps the window open until it is clicked."""
        import turtle

        if self._screen is None:
            return "Nothing was drawn."
        try:
            self._screen.exitonclick()
        except turtle.Terminator:
            # Raised when the window is closed by the user.
            logger.debug("Turtle window closed by user.")
            return "Turtle window closed by user."
        return "Drawing complete."
