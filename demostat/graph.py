"""Layout of a line chart of yearly values with min, max and median lines.

The model computes drawing primitives for a canvas of a given size. A
toolkit can paint them without doing any layout of its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Optional, Union

PLACEHOLDER_TEXT = "Введите данные"

Primitive = Union["Line", "Text", "Ellipse", "Polyline"]


@dataclass
class GraphSettings:
    """Colours, margins and sizes used to lay out the chart."""

    background_color: str = "white"
    axis_color: str = "black"
    grid_color: str = "lightgray"
    data_color: str = "blue"
    min_line_color: str = "red"
    max_line_color: str = "green"
    median_line_color: str = "darkyellow"

    margin: int = 50
    top_margin: int = 80
    axis_offset: int = 20
    point_size: int = 10
    tick_length: int = 5
    horizontal_title_pos_x: int = 1
    horizontal_title_pos_y: int = 35
    vertical_title_pos_x: int = 50
    vertical_title_pos_y: int = -10
    line_weight: int = 1

    axis_width: int = 2
    grid_width: int = 1
    data_width: int = 2
    metric_width: int = 1
    axis_line_width: int = 2
    x_ellipse: int = 4
    y_ellipse: int = 4

    default_x_label: str = "Year"
    default_y_label: str = "Value"


@dataclass(frozen=True)
class Line:
    """A straight line segment; ``style`` is "solid", "dot" or "dash"."""

    x1: int
    y1: int
    x2: int
    y2: int
    color: str
    width: int
    style: str = "solid"


@dataclass(frozen=True)
class Text:
    """A text label at a baseline position, or centred on it."""

    x: int
    y: int
    text: str
    color: str
    centered: bool = False


@dataclass(frozen=True)
class Ellipse:
    """A filled ellipse around a centre point."""

    cx: int
    cy: int
    rx: int
    ry: int
    color: str


@dataclass(frozen=True)
class Polyline:
    """An open path through a sequence of points."""

    points: tuple[tuple[int, int], ...]
    color: str
    width: int


class _Rect(NamedTuple):
    """Inclusive pixel rectangle."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1


def _scale(offset: float, length: int, span: float) -> float:
    """Map ``offset`` within ``span`` onto ``length`` pixels; a zero span maps to 0."""
    if span == 0:
        return 0.0
    return offset * length / span


@dataclass
class GraphModel:
    """Data, labels and settings of a chart, with its layout as primitives."""

    settings: GraphSettings = field(default_factory=GraphSettings)
    points: list[tuple[float, float]] = field(default_factory=list)
    minimum: float = 0.0
    maximum: float = 0.0
    median: float = 0.0
    x_label: Optional[str] = None
    y_label: Optional[str] = None
    title: str = ""

    def __post_init__(self) -> None:
        if self.x_label is None:
            self.x_label = self.settings.default_x_label
        if self.y_label is None:
            self.y_label = self.settings.default_y_label

    def set_data(
        self,
        points: Iterable[tuple[float, float]],
        minimum: float,
        maximum: float,
        median: float,
    ) -> None:
        """Replace the plotted points and the metric values."""
        self.points = [(float(x), float(y)) for x, y in points]
        self.minimum = minimum
        self.maximum = maximum
        self.median = median

    def set_axis_labels(self, x_label: str, y_label: str) -> None:
        """Set axis labels; an empty label falls back to its default."""
        self.x_label = x_label or self.settings.default_x_label
        self.y_label = y_label or self.settings.default_y_label

    def set_title(self, title: str) -> None:
        """Set the chart title."""
        self.title = title

    def clear(self) -> None:
        """Remove the plotted points."""
        self.points = []

    def graph_rect(self, width: int, height: int) -> _Rect:
        """The plotting area inside a canvas of the given size."""
        s = self.settings
        return _Rect(s.margin, s.top_margin, width - 1 - s.margin, height - 1 - s.margin)

    def render(self, width: int, height: int) -> list[Primitive]:
        """Lay out the chart for a canvas of the given size, in drawing order."""
        if not self.points:
            return [Text(width // 2, height // 2, PLACEHOLDER_TEXT, self.settings.axis_color, True)]
        rect = self.graph_rect(width, height)
        return [
            *self._axes(rect),
            *self._grid(rect),
            *self._data(rect),
            *self._metrics(rect),
        ]

    def _axes(self, rect: _Rect) -> list[Primitive]:
        s = self.settings
        color, pen = s.axis_color, s.axis_line_width
        items: list[Primitive] = [
            Line(rect.left, rect.bottom, rect.right, rect.bottom, color, pen),
            Line(rect.left, rect.bottom, rect.left, rect.top, color, pen),
            Text(
                rect.right - s.horizontal_title_pos_x,
                rect.bottom + s.horizontal_title_pos_y,
                self.x_label,
                color,
            ),
            Text(
                rect.left - s.vertical_title_pos_x,
                rect.top + s.vertical_title_pos_y,
                self.y_label,
                color,
            ),
        ]

        min_x, max_x = self.points[0][0], self.points[-1][0]
        steps = min(s.tick_length, len(self.points))
        x_step = (max_x - min_x) / steps
        y_step = (self.maximum - self.minimum) / s.tick_length
        x_spacing = rect.width // s.tick_length
        y_spacing = rect.height // s.tick_length

        for i in range(s.tick_length + 1):
            x_pos = rect.left + i * x_spacing
            items.append(Line(x_pos, rect.bottom, x_pos, rect.bottom + s.tick_length, color, pen))
            items.append(
                Text(x_pos - s.axis_offset, rect.bottom + s.axis_offset, f"{min_x + i * x_step:.0f}", color)
            )

        for i in range(s.tick_length + 1):
            y_pos = rect.bottom - i * y_spacing
            items.append(Line(rect.left - s.tick_length, y_pos, rect.left, y_pos, color, pen))
            items.append(
                Text(
                    rect.left - s.margin + s.tick_length,
                    y_pos + s.tick_length,
                    f"{self.minimum + i * y_step:.{s.axis_line_width}f}",
                    color,
                )
            )
        return items

    def _grid(self, rect: _Rect) -> list[Primitive]:
        s = self.settings
        color, pen = s.grid_color, s.line_weight
        x_spacing = rect.width // s.tick_length
        y_spacing = rect.height // s.tick_length
        vertical = [
            Line(x, rect.top, x, rect.bottom, color, pen, "dot")
            for x in (rect.left + i * x_spacing for i in range(1, s.tick_length))
        ]
        horizontal = [
            Line(rect.left, y, rect.right, y, color, pen, "dot")
            for y in (rect.bottom - i * y_spacing for i in range(1, s.tick_length))
        ]
        return [*vertical, *horizontal]

    def _data(self, rect: _Rect) -> list[Primitive]:
        s = self.settings
        min_x, max_x = self.points[0][0], self.points[-1][0]
        span_x = max_x - min_x
        span_y = self.maximum - self.minimum
        plotted = tuple(
            (
                int(rect.left + _scale(x - min_x, rect.width, span_x)),
                int(rect.bottom - _scale(y - self.minimum, rect.height, span_y)),
            )
            for x, y in self.points
        )
        items: list[Primitive] = [Polyline(plotted, s.data_color, s.axis_line_width)]
        items.extend(Ellipse(x, y, s.x_ellipse, s.y_ellipse, s.data_color) for x, y in plotted)
        return items

    def _metrics(self, rect: _Rect) -> list[Primitive]:
        s = self.settings
        span = self.maximum - self.minimum
        items: list[Primitive] = []
        for label, value, color in (
            ("Min", self.minimum, s.min_line_color),
            ("Max", self.maximum, s.max_line_color),
            ("Median", self.median, s.median_line_color),
        ):
            y_pos = int(rect.bottom - _scale(value - self.minimum, rect.height, span))
            items.append(Line(rect.left, y_pos, rect.right, y_pos, color, s.line_weight, "dash"))
            items.append(
                Text(
                    rect.right - s.margin,
                    y_pos - s.tick_length,
                    f"{label}: {value:.{s.axis_line_width}f}",
                    color,
                )
            )
        return items