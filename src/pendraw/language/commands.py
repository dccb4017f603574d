"""Typed commands produced from single script lines.

Every line maps to exactly one of the dataclasses below. Numeric operands are
kept as their source text (a literal or a variable name) and are only
resolved when the command is dispatched.
"""
import re
from dataclasses import dataclass
from typing import Tuple, Union

from ..config import AppConfig
from ..errors import MalformedCommand, UnknownCommand
from ..framework.base_interpreter import BaseInterpreter, parse_text, v_args
from ..runtime.evaluator import split_condition
from ..utils import keyword_of
from .colors import is_known_color

Operand = str


@dataclass(frozen=True)
class MoveTo:
    x: Operand
    y: Operand


@dataclass(frozen=True)
class DrawTo:
    x: Operand
    y: Operand


@dataclass(frozen=True)
class Rectangle:
    width: Operand
    height: Operand


@dataclass(frozen=True)
class Circle:
    radius: Operand


@dataclass(frozen=True)
class Triangle:
    coords: Tuple[Operand, ...]


@dataclass(frozen=True)
class SetColor:
    name: str


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Fill:
    enabled: bool


@dataclass(frozen=True)
class LineWidth:
    width: Operand


@dataclass(frozen=True)
class Rotate:
    angle: Operand


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class VarDef:
    name: str
    value: Operand


@dataclass(frozen=True)
class VarSet:
    name: str
    value: Operand


@dataclass(frozen=True)
class If:
    condition: str


@dataclass(frozen=True)
class EndIf:
    pass


@dataclass(frozen=True)
class Loop:
    pass


@dataclass(frozen=True)
class EndLoop:
    pass


@dataclass(frozen=True)
class MethodDef:
    name: str
    params: Tuple[str, ...]


@dataclass(frozen=True)
class EndMethod:
    pass


@dataclass(frozen=True)
class Call:
    name: str
    args: Tuple[Operand, ...]


Command = Union[
    MoveTo, DrawTo, Rectangle, Circle, Triangle, SetColor, Reset, Fill,
    LineWidth, Rotate, Text, Clear, VarDef, VarSet, If, EndIf, Loop, EndLoop,
    MethodDef, EndMethod, Call,
]

KEYWORDS = frozenset({
    "moveto", "drawto", "rectangle", "circle", "triangle", "color", "reset",
    "fill", "linewidth", "rotate", "text", "clear", "var", "set",
    "if", "endif", "loop", "endloop", "method", "endmethod",
})

CALL_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\(")


class CommandBuilder(BaseInterpreter):
    """Turns the parse tree of one line into a typed command."""

    @v_args(inline=True)
    def moveto(self, x, y): return MoveTo(x, y)

    @v_args(inline=True)
    def drawto(self, x, y): return DrawTo(x, y)

    @v_args(inline=True)
    def rectangle(self, width, height): return Rectangle(width, height)

    @v_args(inline=True)
    def circle(self, radius): return Circle(radius)

    def triangle(self, coords): return Triangle(tuple(coords))

    @v_args(inline=True)
    def color(self, name):
        if not is_known_color(name):
            raise MalformedCommand(f"Unknown color '{name}'.")
        return SetColor(name.lower())

    def reset(self, _): return Reset()

    @v_args(inline=True)
    def fill(self, switch): return Fill(switch.lower() == "on")

    @v_args(inline=True)
    def linewidth(self, width): return LineWidth(width)

    @v_args(inline=True)
    def rotate(self, angle): return Rotate(angle)

    def text(self, children): return Text(children[0] if children else "")

    def clear(self, _): return Clear()

    @v_args(inline=True)
    def var(self, name, value): return VarDef(name, value)

    @v_args(inline=True)
    def set(self, name, value): return VarSet(name, value)

    def if_(self, children):
        condition = children[0] if children else ""
        split_condition(condition)
        return If(condition)

    def endif(self, _): return EndIf()

    def loop(self, _): return Loop()

    def endloop(self, _): return EndLoop()

    @v_args(inline=True)
    def method(self, name, *params):
        if name.lower() in KEYWORDS:
            raise MalformedCommand(f"'{name}' is a command keyword and cannot name a method.")
        if len(set(params)) != len(params):
            raise MalformedCommand(f"Method '{name}' declares the same parameter twice.")
        return MethodDef(name, tuple(params))

    def endmethod(self, _): return EndMethod()

    @v_args(inline=True)
    def call(self, name, *args): return Call(name, tuple(args))

    def SWITCH(self, switch):
        return switch.value


def is_call(line: str) -> bool:
    return CALL_RE.match(line.strip()) is not None


def parse_line(line: str) -> Command:
    """Parses one non-empty script line.

    Raises ``UnknownCommand`` when the leading token is neither a keyword nor a
    method call, and ``MalformedCommand`` when a known command has the wrong
    shape. An ``if`` condition is checked for its three-token shape and its
    operator, raising ``MalformedCondition`` or ``UnknownOperator``.
    """
    text = line.strip()
    keyword = keyword_of(text)
    if keyword not in KEYWORDS and not is_call(text):
        raise UnknownCommand(f"Unknown command: {text.split()[0] if text else text!r}")

    return parse_text(text, AppConfig.get_grammar_path(), CommandBuilder(), AppConfig.PARSER)
