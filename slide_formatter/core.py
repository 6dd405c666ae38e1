"""Formatting workflows shared by the CLI and the API."""
import logging
import os
from io import BytesIO
from typing import Any, Dict, List

from .classifier import classify_shape
from .document import load_first_slide, persist
from .geometry import bounds_of
from .errors import SlideFormatError
from .pipeline import format_slide, ran_after_merge
from .shapes import iter_shapes, text_frame_of

logger = logging.getLogger(__name__)


def format_presentation_workflow(path: str, output_path: str | None = None) -> str:
    """
    Format the first slide of the presentation at ``path``.

    The result is written to ``output_path`` when given, otherwise back to
    ``path``. The text merge is flushed before the layout passes run, so a
    later failure leaves the merged slide on disk.

    Returns: path the presentation was written to
    """
    _validate_path(path)
    target = output_path or path

    handle = load_first_slide(path, target)
    logger.info("Formatting first slide of %s", os.path.basename(path))

    try:
        results = format_slide(handle.slide, persist=lambda: _flush(handle, "text merge"))
    except SlideFormatError as e:
        if ran_after_merge(e.step):
            logger.warning("%s failed; the text merge was already saved to %s", e.step, target)
        raise
    _log_results(results)

    _flush(handle, "formatting")
    return str(target)


def format_presentation_to_memory(data: bytes) -> BytesIO:
    """
    Format the first slide of an in-memory presentation (for API streaming).

    Returns: BytesIO with the formatted PPTX data
    """
    output = BytesIO()
    handle = load_first_slide(BytesIO(data), output)

    results = format_slide(handle.slide, persist=lambda: persist(handle))
    _log_results(results)

    persist(handle)
    return output


def summarize_first_slide(data: bytes) -> List[Dict[str, Any]]:
    """Describe the shapes of the first slide without modifying anything."""
    handle = load_first_slide(BytesIO(data), BytesIO())

    summary = []
    for shape in iter_shapes(handle.slide.shapes):
        bounds = bounds_of(shape)
        text_frame = text_frame_of(shape)
        summary.append({
            "name": shape.name,
            "kind": classify_shape(shape).value,
            "bounds": None if bounds is None else {
                "left": bounds.left,
                "top": bounds.top,
                "width": bounds.width,
                "height": bounds.height,
            },
            "text": text_frame.text if text_frame is not None else None,
        })
    return summary


def _validate_path(path: str) -> None:
    """Validate the presentation file exists."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Presentation not found: {path}")


def _flush(handle, stage: str) -> None:
    persist(handle)
    logger.debug("Saved %s after %s", handle.target, stage)


def _log_results(results: Dict[str, Any]) -> None:
    logger.debug("Merged %d text box(es) into target shapes", results.get("merge_text_boxes", 0))
    if not results.get("layout_target_shapes"):
        logger.info("No matching shapes found.")
    logger.debug("Placed %s text box(es)", results.get("layout_text_boxes", 0))
