"""Errors raised by the formatting passes and the document provider."""


class SlideFormatError(Exception):
    """Base class; ``kind`` names the failure, ``str(error)`` carries the detail."""

    kind = "SlideFormatError"
    step = None  # name of the pass that raised, set by the pipeline

    def __str__(self) -> str:
        return super().__str__() or self.kind


class NullInputError(SlideFormatError):
    """A required shape, paragraph or text frame is absent."""

    kind = "NullInput"


class NotFoundError(SlideFormatError):
    """Title placeholder, title text frame or title paragraph is missing."""

    kind = "NotFound"


class GeometryMissingError(SlideFormatError):
    """A shape has no transform where geometry is required."""

    kind = "GeometryMissing"


class TextFrameMissingError(SlideFormatError):
    """A shape has no text frame where one is required for alignment."""

    kind = "TextFrameMissing"


class InvalidArgumentError(SlideFormatError):
    """A shape does not have the classification an operation expects."""

    kind = "InvalidArgument"


class NoSlidesFoundError(SlideFormatError):
    """The presentation's slide list is empty."""

    kind = "NoSlidesFound"
