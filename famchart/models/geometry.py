"""Geometry value types shared by layout, selection and hit-testing.

All coordinates are layout-space (top-left origin, y growing downward),
independent of the current zoom and pan.
"""

from typing import List, Tuple

from pydantic import BaseModel, Field

from famchart.exceptions import InvalidArgumentError


class NodePosition(BaseModel):
    """Top-left position of a single node in 2D layout space.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float = Field(..., description="Horizontal coordinate")
    y: float = Field(..., description="Vertical coordinate")

    @classmethod
    def from_list(cls, pos: List[float]) -> "NodePosition":
        """Create NodePosition from [x, y] list.

        Raises:
            ValueError: If pos doesn't have exactly 2 elements
        """
        if len(pos) != 2:
            raise ValueError(f"Position must be [x, y], got {len(pos)} elements")
        return cls(x=pos[0], y=pos[1])

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class Rect(BaseModel):
    """Axis-aligned rectangle used for node bounds and marquee selection.

    Attributes:
        x: Left edge
        y: Top edge
        width: Non-negative width
        height: Non-negative height
    """

    model_config = {"frozen": True}

    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")
    width: float = Field(..., ge=0.0, description="Width (must be >= 0)")
    height: float = Field(..., ge=0.0, description="Height (must be >= 0)")

    def __init__(self, **data):
        """Reject negative sizes with InvalidArgumentError before field validation."""
        for name in ("width", "height"):
            value = data.get(name)
            if isinstance(value, (int, float)) and value < 0:
                raise InvalidArgumentError(f"Rect {name} must be >= 0, got {value}")
        super().__init__(**data)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        """Computed center point of the rectangle."""
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, px: float, py: float) -> bool:
        """Check whether a point lies inside the rectangle (edges included)."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def intersects(self, other: "Rect") -> bool:
        """Check for a strictly positive-area overlap with another rectangle.

        Rectangles that only share an edge or a corner do not intersect.
        """
        if other is None:
            return False
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    @classmethod
    def from_corners(cls, x1: float, y1: float, x2: float, y2: float) -> "Rect":
        """Build a rectangle from two opposite corners in any order.

        Handy for marquee drags that go up or to the left.
        """
        return cls(
            x=min(x1, x2),
            y=min(y1, y2),
            width=abs(x2 - x1),
            height=abs(y2 - y1),
        )


__all__ = ["NodePosition", "Rect"]
