"""Walk the p:sp shapes of a slide in document order."""
from typing import Iterator, Optional

from pptx.oxml.ns import qn
from pptx.shapes.group import GroupShape


def iter_shapes(shapes) -> Iterator:
    """Yield every p:sp shape, descending into group shapes depth first."""
    for shape in shapes:
        if isinstance(shape, GroupShape):
            yield from iter_shapes(shape.shapes)
        elif shape._element.tag == qn("p:sp"):
            yield shape


def text_frame_of(shape) -> Optional:
    """Return the shape's text frame without creating a <p:txBody> when absent."""
    if shape._element.txBody is None:
        return None
    return shape.text_frame
