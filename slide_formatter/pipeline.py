"""Apply the formatting passes to one slide in their fixed order."""
from typing import Callable, Optional

from .errors import SlideFormatError
from .layout import layout_target_shapes, layout_text_boxes
from .merge import merge_text_boxes
from .styling import normalize_bullets, normalize_fonts, strip_bold_underline
from .title import rewrite_title

# Text must be merged before layout (consumed text boxes disappear), and fonts
# are set between the two layout passes.
PASSES = (
    rewrite_title,
    merge_text_boxes,
    layout_target_shapes,
    normalize_fonts,
    layout_text_boxes,
    normalize_bullets,
    strip_bold_underline,
)


def format_slide(slide, persist: Optional[Callable[[], None]] = None) -> dict:
    """
    Run every pass over ``slide``; the first failure aborts the rest.

    Mutations from passes that already ran are kept. ``persist`` is handed to
    the merge pass, which flushes its result before layout starts. A failing
    pass's name is recorded on the raised error as ``error.step``.

    Returns: mapping of pass name to its return value
    """
    results = {}
    for step in PASSES:
        try:
            if step is merge_text_boxes:
                results[step.__name__] = step(slide, persist=persist)
            else:
                results[step.__name__] = step(slide)
        except SlideFormatError as e:
            e.step = step.__name__
            raise
    return results


def ran_after_merge(step_name: Optional[str]) -> bool:
    """True when ``step_name`` is a pass that runs after the merge flush."""
    names = [step.__name__ for step in PASSES]
    if step_name not in names:
        return False
    return names.index(step_name) > names.index(merge_text_boxes.__name__)
