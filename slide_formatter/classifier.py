"""Determine the role a shape plays on the slide."""
from enum import Enum
from typing import List

from pptx.enum.shapes import PP_PLACEHOLDER

from .config import TARGET_SHAPE_MARKERS, TEXT_BOX_MARKER
from .shapes import iter_shapes


class ShapeKind(Enum):
    TEXT_BOX = "TextBox"
    TARGET_SHAPE = "TargetShape"
    TITLE_PLACEHOLDER = "TitlePlaceholder"
    OTHER = "Other"


def classify(name: str) -> ShapeKind:
    """Classify by case-sensitive substring of the shape name."""
    if not name:
        return ShapeKind.OTHER
    if TEXT_BOX_MARKER in name:
        return ShapeKind.TEXT_BOX
    if any(marker in name for marker in TARGET_SHAPE_MARKERS):
        return ShapeKind.TARGET_SHAPE
    return ShapeKind.OTHER


def is_title_placeholder(shape) -> bool:
    return shape.is_placeholder and shape.placeholder_format.type == PP_PLACEHOLDER.TITLE


def classify_shape(shape) -> ShapeKind:
    """Title placeholders win over the name; everything else goes by name."""
    if is_title_placeholder(shape):
        return ShapeKind.TITLE_PLACEHOLDER
    return classify(shape.name)


def text_boxes(slide) -> List:
    """Text boxes of the slide in document order."""
    return [s for s in iter_shapes(slide.shapes) if classify_shape(s) is ShapeKind.TEXT_BOX]


def target_shapes(slide) -> List:
    """Chevron and Pentagon shapes of the slide in document order."""
    return [s for s in iter_shapes(slide.shapes) if classify_shape(s) is ShapeKind.TARGET_SHAPE]
