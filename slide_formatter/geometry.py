"""Bounding boxes of slide shapes, read from and written to their <a:xfrm>."""
from dataclasses import dataclass
from typing import Optional

from .classifier import ShapeKind, classify_shape
from .errors import GeometryMissingError, InvalidArgumentError, NullInputError


@dataclass(frozen=True)
class Geometry:
    """Axis-aligned box of a shape, all values in EMUs."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height


def bounds_of(shape) -> Optional[Geometry]:
    """
    Return the shape's own bounding box, or None when it has no transform.

    Only the slide-level <a:xfrm> counts; a placeholder that inherits its
    position from the layout has no geometry here.
    """
    if shape is None:
        raise NullInputError("Shape cannot be None.")

    xfrm = shape._element.xfrm
    if xfrm is None or xfrm.off is None or xfrm.ext is None:
        return None

    return Geometry(
        left=int(xfrm.off.x),
        top=int(xfrm.off.y),
        width=int(xfrm.ext.cx),
        height=int(xfrm.ext.cy),
    )


def textbox_bounds(shape) -> Geometry:
    """Return the bounds of a text box; fails for other shapes or missing transforms."""
    if shape is None:
        raise NullInputError("Shape cannot be None.")
    if classify_shape(shape) is not ShapeKind.TEXT_BOX:
        raise InvalidArgumentError(f"Shape '{shape.name}' is not a text box.")

    bounds = bounds_of(shape)
    if bounds is None:
        raise GeometryMissingError(f"Text box '{shape.name}' does not have transformation properties.")
    return bounds


def overlaps(a: Geometry, b: Geometry) -> bool:
    """Closed-interval rectangle intersection; boxes sharing an edge overlap."""
    return (
        a.left <= b.right
        and a.right >= b.left
        and a.top <= b.bottom
        and a.bottom >= b.top
    )


def place(shape, geometry: Geometry) -> None:
    """Write position and size back to the shape's transform."""
    shape.left = geometry.left
    shape.top = geometry.top
    shape.width = geometry.width
    shape.height = geometry.height
