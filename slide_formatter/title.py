"""Rewrite the slide title to the fixed output title."""
from pptx.enum.text import PP_ALIGN
from pptx.oxml.ns import qn

from .classifier import is_title_placeholder
from .config import OUTPUT_TITLE_TEXT, TITLE_TYPEFACE
from .errors import NotFoundError, NullInputError
from .shapes import iter_shapes, text_frame_of


def rewrite_title(slide) -> None:
    """
    Replace the title text with the output title, centered, in the title typeface.

    Only the first paragraph of the first Title placeholder is touched. A title
    without a text frame or without any paragraph is an error; nothing is
    synthesized for it.
    """
    if slide is None:
        raise NullInputError("Slide cannot be None.")

    title_shape = next((s for s in iter_shapes(slide.shapes) if is_title_placeholder(s)), None)
    if title_shape is None:
        raise NotFoundError("Couldn't find the title placeholder.")

    text_frame = text_frame_of(title_shape)
    if text_frame is None:
        raise NotFoundError("Couldn't find the title shape or its text body.")

    paragraphs = text_frame.paragraphs
    if not paragraphs:
        raise NotFoundError("Couldn't find a paragraph in the title shape.")
    paragraph = paragraphs[0]

    # first text node of the paragraph, whichever run or field holds it
    text_elm = next(paragraph._p.iter(qn("a:t")), None)
    if text_elm is not None:
        text_elm.text = OUTPUT_TITLE_TEXT
    else:
        paragraph.add_run().text = OUTPUT_TITLE_TEXT

    paragraph.alignment = PP_ALIGN.CENTER

    for run in paragraph.runs:
        run.font.name = TITLE_TYPEFACE
