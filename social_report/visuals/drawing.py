"""Immutable drawing primitives.

Charts and page frames are described as flat tuples of draw commands in a
local coordinate space (origin top-left, y grows downwards, units are PDF
points). The HTML template flattens them into inline SVG, so no drawing
state is shared between page-building functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


dataclass_kwargs = {"slots": True, "frozen": True}


@dataclass(**dataclass_kwargs)
class Point:
    x: float
    y: float


@dataclass(**dataclass_kwargs)
class Box:
    """Axis-aligned bounding box a chart is mapped into."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(**dataclass_kwargs)
class Line:
    kind: ClassVar[str] = "line"

    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    width: float = 1.0


@dataclass(**dataclass_kwargs)
class Polyline:
    kind: ClassVar[str] = "polyline"

    points: tuple[Point, ...]
    stroke: str
    width: float = 1.0

    @property
    def path(self) -> str:
        return " ".join(f"{p.x:.2f},{p.y:.2f}" for p in self.points)


@dataclass(**dataclass_kwargs)
class Rect:
    kind: ClassVar[str] = "rect"

    x: float
    y: float
    width: float
    height: float
    fill: str
    opacity: float = 1.0
    radius: float = 0.0


@dataclass(**dataclass_kwargs)
class Ellipse:
    kind: ClassVar[str] = "ellipse"

    cx: float
    cy: float
    rx: float
    ry: float
    fill: str
    opacity: float = 1.0


@dataclass(**dataclass_kwargs)
class Text:
    """A single line of text; ``y`` is the baseline."""

    kind: ClassVar[str] = "text"

    x: float
    y: float
    text: str
    size: float
    fill: str
    anchor: str = "start"  # start | middle | end
    bold: bool = False


@dataclass(**dataclass_kwargs)
class LinearGradient:
    """Gradient definition, referenced from a fill as ``url(#id)``."""

    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    stops: tuple[tuple[float, str], ...]

    @property
    def ref(self) -> str:
        return f"url(#{self.id})"


DrawCommand = Line | Polyline | Rect | Ellipse | Text


@dataclass(**dataclass_kwargs)
class Drawing:
    width: float
    height: float
    commands: tuple[DrawCommand, ...]
    gradients: tuple[LinearGradient, ...] = field(default_factory=tuple)

    def of_kind(self, kind: str) -> list[DrawCommand]:
        return [c for c in self.commands if c.kind == kind]

    @property
    def texts(self) -> list[str]:
        return [c.text for c in self.commands if isinstance(c, Text)]
