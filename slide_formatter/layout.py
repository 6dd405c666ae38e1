"""Line up target shapes and text boxes left to right at a uniform size."""
import math
from typing import Callable, List, Optional

from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.oxml.ns import qn
from pptx.oxml.xmlchemy import OxmlElement

from .classifier import target_shapes, text_boxes
from .config import (
    TARGET_SHAPE_GAP_EMU,
    TARGET_SHAPE_HEIGHT_EMU,
    TARGET_SHAPE_WIDTH_EMU,
    TEXT_BOX_GAP_EMU,
)
from .errors import GeometryMissingError, NullInputError, TextFrameMissingError
from .geometry import Geometry, bounds_of, place
from .shapes import text_frame_of


def layout_target_shapes(slide) -> int:
    """
    Resize every Chevron/Pentagon to the fixed size and place them in a row.

    The row starts at the left-most shape's position and keeps its top. Text
    inside each placed shape is centered horizontally and vertically.

    Returns: number of shapes placed (0 when the slide has none)
    """
    if slide is None:
        raise NullInputError("Slide cannot be None.")

    return _lay_out_in_row(
        target_shapes(slide),
        size=lambda first: (TARGET_SHAPE_WIDTH_EMU, TARGET_SHAPE_HEIGHT_EMU),
        gap=TARGET_SHAPE_GAP_EMU,
        after_place=_center_text,
    )


def layout_text_boxes(slide) -> int:
    """
    Give every text box the size of the left-most one and place them in a row.

    Returns: number of text boxes placed (0 when the slide has none)
    """
    if slide is None:
        raise NullInputError("Slide cannot be None.")

    return _lay_out_in_row(
        text_boxes(slide),
        size=lambda first: (first.width, first.height),
        gap=TEXT_BOX_GAP_EMU,
    )


def _lay_out_in_row(
    shapes: List,
    size: Callable[[Geometry], tuple],
    gap: int,
    after_place: Optional[Callable] = None,
) -> int:
    """Shared cursor walk; shapes without geometry sort last and are skipped."""
    if not shapes:
        return 0

    ordered = sorted(shapes, key=_left_or_infinity)
    first = bounds_of(ordered[0])
    if first is None:
        raise GeometryMissingError(f"First shape '{ordered[0].name}' does not have transformation properties.")

    width, height = size(first)
    cursor = first.left
    placed = 0

    for shape in ordered:
        if bounds_of(shape) is None:
            continue

        place(shape, Geometry(left=cursor, top=first.top, width=width, height=height))
        cursor += width + gap
        placed += 1

        if after_place is not None:
            after_place(shape)

    return placed


def _left_or_infinity(shape):
    bounds = bounds_of(shape)
    return bounds.left if bounds is not None else math.inf


def _center_text(shape) -> None:
    text_frame = text_frame_of(shape)
    if text_frame is None:
        raise TextFrameMissingError(f"Shape '{shape.name}' does not contain a text body.")

    for paragraph in text_frame.paragraphs:
        paragraph.alignment = PP_ALIGN.CENTER

    txBody = text_frame._txBody
    if txBody.find(qn("a:bodyPr")) is None:
        txBody.insert(0, OxmlElement("a:bodyPr"))
    text_frame.vertical_anchor = MSO_ANCHOR.MIDDLE
