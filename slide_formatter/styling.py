"""Run and paragraph level style normalization."""
from pptx.oxml.ns import qn
from pptx.oxml.xmlchemy import OxmlElement

from .classifier import text_boxes
from .config import BODY_TYPEFACE, BULLET_CHAR, BULLET_TYPEFACE
from .errors import NullInputError
from .shapes import iter_shapes, text_frame_of

# <a:pPr> children that must follow <a:buFont> / <a:buChar> (CT_TextParagraphProperties)
_BU_FONT_SUCCESSORS = ("a:buNone", "a:buAutoNum", "a:buChar", "a:buBlip", "a:tabLst", "a:defRPr", "a:extLst")
_BU_CHAR_SUCCESSORS = ("a:buBlip", "a:tabLst", "a:defRPr", "a:extLst")


def normalize_fonts(slide) -> None:
    """Set the body typeface on every run of every shape that has text."""
    if slide is None:
        raise NullInputError("Slide cannot be None.")

    for shape in iter_shapes(slide.shapes):
        text_frame = text_frame_of(shape)
        if text_frame is None:
            continue
        for paragraph in text_frame.paragraphs:
            for run in paragraph.runs:
                run.font.name = BODY_TYPEFACE


def normalize_bullets(slide) -> None:
    """
    Turn bulleted and numbered paragraphs into dot bullets.

    Paragraphs that carry neither a character bullet nor auto-numbering are
    left exactly as they are; no bullet is added to plain text.
    """
    if slide is None:
        raise NullInputError("Slide cannot be None.")

    # every <a:p> of the slide, table cells included
    for p in slide.shapes._spTree.iter(qn("a:p")):
        _to_dot_bullet(p)


def strip_bold_underline(slide) -> None:
    """Clear bold and underline on text box runs that carry run properties."""
    if slide is None:
        raise NullInputError("Slide cannot be None.")

    for shape in text_boxes(slide):
        text_frame = text_frame_of(shape)
        if text_frame is None:
            continue
        for paragraph in text_frame.paragraphs:
            for run in paragraph.runs:
                # run.font would add an empty <a:rPr>
                if run._r.rPr is None:
                    continue
                run.font.bold = None
                run.font.underline = None


def has_bullet(p) -> bool:
    pPr = p.pPr
    return pPr is not None and pPr.find(qn("a:buChar")) is not None


def has_numbered_bullet(p) -> bool:
    pPr = p.pPr
    return pPr is not None and pPr.find(qn("a:buAutoNum")) is not None


def _to_dot_bullet(p) -> None:
    if not (has_bullet(p) or has_numbered_bullet(p)):
        return

    pPr = p.get_or_add_pPr()

    auto_num = pPr.find(qn("a:buAutoNum"))
    if auto_num is not None:
        pPr.remove(auto_num)

    bu_font = pPr.find(qn("a:buFont"))
    if bu_font is None:
        bu_font = pPr.insert_element_before(OxmlElement("a:buFont"), *_BU_FONT_SUCCESSORS)
    bu_font.set("typeface", BULLET_TYPEFACE)

    bu_char = pPr.find(qn("a:buChar"))
    if bu_char is None:
        bu_char = pPr.insert_element_before(OxmlElement("a:buChar"), *_BU_CHAR_SUCCESSORS)
    bu_char.set("char", BULLET_CHAR)
