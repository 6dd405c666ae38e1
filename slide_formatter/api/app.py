"""FastAPI application for slide formatting."""
import logging
import zipfile
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from dotenv import load_dotenv
from pptx.exc import PackageNotFoundError

from .. import __version__
from ..config import PPTX_MEDIA_TYPE
from ..core import format_presentation_to_memory, summarize_first_slide
from ..errors import NoSlidesFoundError, SlideFormatError

from .schemas import ErrorResponse, SlideSummary

load_dotenv()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Slide Formatter API",
    description="REST API that normalizes the layout and styling of a presentation's first slide",
    version=__version__
)

# CORS configuration for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Update with specific origins in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post(
    "/api/format",
    response_class=StreamingResponse,
    responses={
        200: {"description": "Formatted PPTX file"},
        400: {"model": ErrorResponse, "description": "Missing or unreadable presentation"},
        422: {"model": ErrorResponse, "description": "Slide could not be formatted"},
    }
)
async def format_presentation(request: Request):
    """
    Format the first slide of the uploaded presentation.

    The request body is the raw .pptx file; the response is the formatted file.
    """
    data = await _read_presentation(request)

    try:
        pptx_data = format_presentation_to_memory(data)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unreadable presentation: {str(e)}"
        )
    except NoSlidesFoundError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="No slides found in the presentation."
        )
    except SlideFormatError as e:
        logger.warning("Formatting failed in %s: %s: %s", e.step, e.kind, e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"{e.kind}: {str(e)}"
        )

    return StreamingResponse(
        pptx_data,
        media_type=PPTX_MEDIA_TYPE,
        headers={"Content-Disposition": 'attachment; filename="formatted.pptx"'}
    )


@app.post(
    "/api/inspect",
    response_model=SlideSummary,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or unreadable presentation"},
        422: {"model": ErrorResponse, "description": "Presentation has no slides"},
    }
)
async def inspect_presentation(request: Request):
    """List the shapes of the first slide with the role each one plays."""
    data = await _read_presentation(request)

    try:
        shapes = summarize_first_slide(data)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unreadable presentation: {str(e)}"
        )
    except NoSlidesFoundError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="No slides found in the presentation."
        )

    return SlideSummary(shapes=shapes)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "slide-formatter"}


async def _read_presentation(request: Request) -> bytes:
    """Read the raw request body; an empty body is a client error."""
    data = await request.body()
    if not data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must contain a .pptx file"
        )
    return data
