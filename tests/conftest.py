"""Pytest configuration and fixtures."""
import pytest
from pptx import Presentation

# Layout indexes of python-pptx's default template
TITLE_ONLY_LAYOUT = 5
BLANK_LAYOUT = 6


@pytest.fixture
def presentation():
    """Empty presentation built from the default template."""
    return Presentation()


@pytest.fixture
def slide(presentation):
    """Slide whose only shape is a Title placeholder with one empty paragraph."""
    return presentation.slides.add_slide(presentation.slide_layouts[TITLE_ONLY_LAYOUT])


@pytest.fixture
def blank_slide(presentation):
    """Slide without any placeholder."""
    return presentation.slides.add_slide(presentation.slide_layouts[BLANK_LAYOUT])


@pytest.fixture
def title_shape(slide):
    return slide.shapes.title
