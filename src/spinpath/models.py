"""Dataclasses describing points, styling and configuration for spinpath."""

from __future__ import annotations

import json
import math
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from .errors import ArgumentError

DEFAULT_EPSILON = 1e-6

_HEX_COLOR = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Point2D:
    """An immutable pair of coordinates."""

    x: float
    y: float

    @staticmethod
    def of(value: "Point2D | Sequence[float]") -> "Point2D":
        """Coerce a :class:`Point2D` or an ``(x, y)`` pair."""
        if isinstance(value, Point2D):
            return value
        try:
            x, y = value
            return Point2D(float(x), float(y))
        except (TypeError, ValueError) as e:
            raise ArgumentError(f"Expected an (x, y) pair, got {value!r}") from e

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


ORIGIN = Point2D(0.0, 0.0)


@dataclass
class RotationSettings:
    """How the input points are rotated before rendering."""

    angle_deg: float = 0.0
    copies: Optional[int] = None  # full turn split into N steps; wins over angle
    center: Tuple[float, float] = (0.0, 0.0)
    clockwise: bool = True
    epsilon: float = DEFAULT_EPSILON

    @property
    def center_point(self) -> Point2D:
        return Point2D.of(self.center)


@dataclass
class PathStyle:
    """Styling and viewport of the rendered path document."""

    stroke_width: float = 0.5
    stroke_color: str = "444"
    fill_color: str = "ddd"
    viewport_size: float = 200.0
    round_to: Optional[int] = None  # decimal places, None keeps full precision

    def __post_init__(self) -> None:
        self.stroke_color = str(self.stroke_color).strip().lstrip("#")
        self.fill_color = str(self.fill_color).strip().lstrip("#")

    def validate(self) -> "PathStyle":
        """Raise :class:`ArgumentError` unless every field is usable."""
        if not math.isfinite(self.stroke_width) or self.stroke_width < 0:
            raise ArgumentError(
                f"stroke_width must be a finite number >= 0, got {self.stroke_width!r}"
            )
        if not math.isfinite(self.viewport_size) or self.viewport_size <= 0:
            raise ArgumentError(
                f"viewport_size must be a finite number > 0, got {self.viewport_size!r}"
            )
        for name in ("stroke_color", "fill_color"):
            value = getattr(self, name)
            if not _HEX_COLOR.match(value):
                raise ArgumentError(
                    f"{name} must be 3 or 6 hex digits, got {value!r}"
                )
        if self.round_to is not None:
            if isinstance(self.round_to, bool) or not isinstance(self.round_to, int):
                raise ArgumentError(f"round_to must be an integer, got {self.round_to!r}")
            if self.round_to < 0:
                raise ArgumentError(f"round_to must be >= 0, got {self.round_to!r}")
        return self


@dataclass
class AppConfig:
    """Persisted configuration for the command line tool."""

    rotation: RotationSettings = field(default_factory=RotationSettings)
    style: PathStyle = field(default_factory=PathStyle)

    def to_json(self) -> str:
        data = asdict(self)
        data["rotation"]["center"] = list(self.rotation.center)
        return json.dumps(data, indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict[str, Any] = json.loads(text)
        r = data.get("rotation", {})
        s = data.get("style", {})
        copies = r.get("copies")
        round_to = s.get("round_to")
        cx, cy = r.get("center", (0.0, 0.0))
        return AppConfig(
            rotation=RotationSettings(
                angle_deg=float(r.get("angle_deg", 0.0)),
                copies=None if copies is None else int(copies),
                center=(float(cx), float(cy)),
                clockwise=bool(r.get("clockwise", True)),
                epsilon=float(r.get("epsilon", DEFAULT_EPSILON)),
            ),
            style=PathStyle(
                stroke_width=float(s.get("stroke_width", 0.5)),
                stroke_color=str(s.get("stroke_color", "444")),
                fill_color=str(s.get("fill_color", "ddd")),
                viewport_size=float(s.get("viewport_size", 200.0)),
                round_to=None if round_to is None else int(round_to),
            ),
        )


__all__ = [
    "DEFAULT_EPSILON",
    "ORIGIN",
    "Point2D",
    "RotationSettings",
    "PathStyle",
    "AppConfig",
]
