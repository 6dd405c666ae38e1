"""Open a presentation, expose its first slide, and save changes back."""
import os
from dataclasses import dataclass
from typing import IO, Union

from pptx import Presentation

from .errors import NoSlidesFoundError, NullInputError

Target = Union[str, os.PathLike, IO[bytes]]


@dataclass
class SlideHandle:
    """First slide of an open presentation plus where it is saved to."""

    presentation: object
    slide: object
    target: Target


def load_first_slide(source: Target, target: Target = None) -> SlideHandle:
    """
    Open ``source`` and return a handle on its first slide (p:sldIdLst order).

    A path source is saved back in place unless ``target`` is given; a stream
    source needs an explicit writable ``target``.
    """
    if source is None:
        raise NullInputError("Presentation source cannot be None.")
    if target is None:
        if not isinstance(source, (str, os.PathLike)):
            raise NullInputError("A target stream is required when loading from a stream.")
        target = source

    prs = Presentation(source)
    if len(prs.slides) == 0:
        raise NoSlidesFoundError("No slides found in the presentation.")

    return SlideHandle(presentation=prs, slide=prs.slides[0], target=target)


def persist(handle: SlideHandle) -> None:
    """Flush the presentation to its target; safe to call more than once."""
    target = handle.target
    if hasattr(target, "write"):
        target.seek(0)
        target.truncate()
        handle.presentation.save(target)
        target.seek(0)
    else:
        handle.presentation.save(os.fspath(target))
