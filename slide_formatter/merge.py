"""Move text from free-floating text boxes into the shapes they overlap."""
import copy
from typing import Callable, Optional

from pptx.oxml.ns import qn

from .classifier import target_shapes, text_boxes
from .errors import GeometryMissingError, NullInputError
from .geometry import bounds_of, overlaps, textbox_bounds
from .shapes import text_frame_of


def merge_text_boxes(slide, persist: Optional[Callable[[], None]] = None) -> int:
    """
    Transfer each text box's paragraphs to the first target shape it overlaps.

    Target shapes are matched in document order and are never taken out of
    the candidate list, so when two text boxes overlap the same target the
    later one overwrites the earlier transfer. Consumed text boxes are removed
    from the slide; text boxes overlapping nothing stay as they are.

    ``persist`` is called once the slide has been updated so the merge result
    is flushed before any later pass runs.

    Returns: number of text boxes consumed
    """
    if slide is None:
        raise NullInputError("Slide cannot be None.")

    boxes = text_boxes(slide)
    targets = target_shapes(slide)

    missing = [box.name for box in boxes if bounds_of(box) is None]
    if missing:
        raise GeometryMissingError(f"Failed to retrieve bounds for text box(es): {', '.join(missing)}")

    consumed = 0
    for box in boxes:
        box_bounds = textbox_bounds(box)
        target = _first_overlapping(box_bounds, targets)
        if target is None:
            continue

        transfer_text(box, target)
        _remove_shape(box)
        consumed += 1

    if persist is not None:
        persist()

    return consumed


def transfer_text(source, target) -> None:
    """Replace all paragraphs of ``target`` with deep copies of ``source``'s."""
    if source is None:
        raise NullInputError("Source shape cannot be None.")
    if target is None:
        raise NullInputError("Target shape cannot be None.")

    source_frame = text_frame_of(source)
    if source_frame is None:
        raise NullInputError(f"Source shape '{source.name}' does not contain a text body.")

    # creates the target's <p:txBody> when it has none
    txBody = target.text_frame._txBody
    for p in txBody.findall(qn("a:p")):
        txBody.remove(p)
    for p in source_frame._txBody.findall(qn("a:p")):
        txBody.append(copy.deepcopy(p))


def _first_overlapping(box_bounds, targets) -> Optional:
    """First target (document order) whose bounds overlap the text box."""
    for target in targets:
        target_bounds = bounds_of(target)
        if target_bounds is None:
            continue
        if overlaps(box_bounds, target_bounds):
            return target
    return None


def _remove_shape(shape) -> None:
    sp = shape._element
    sp.getparent().remove(sp)
