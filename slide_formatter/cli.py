"""CLI interface for the slide formatter."""
import logging
import os
import sys
import click
from dotenv import load_dotenv

from pptx.exc import PackageNotFoundError

from .config import DEFAULT_ERROR_LOG, ERROR_LOG_ENV_VAR
from .core import format_presentation_workflow
from .errors import NoSlidesFoundError, SlideFormatError

failure_log = logging.getLogger("slide_formatter.error_log")

# click uses 2 for usage errors
EXIT_NO_SLIDES = 3


@click.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option(
    "--output",
    "output_path",
    default=None,
    help="Write the formatted presentation here instead of overwriting PATH"
)
@click.option(
    "--error-log",
    "error_log_path",
    default=None,
    help=f"File that failures are appended to (or set {ERROR_LOG_ENV_VAR})"
)
@click.option("--verbose", is_flag=True, help="Show debug output")
def main(path, output_path, error_log_path, verbose):
    """Format the first slide of the PowerPoint file at PATH."""
    load_dotenv()
    error_log_path = error_log_path or os.getenv(ERROR_LOG_ENV_VAR, DEFAULT_ERROR_LOG)
    _configure_logging(verbose, error_log_path)

    if not path.lower().endswith(".pptx"):
        click.echo(f"Warning: {os.path.basename(path)} does not look like a .pptx file", err=True)

    try:
        written = format_presentation_workflow(path, output_path)
        click.echo("Slide Updated Successfully!")
        click.echo(f"      {os.path.abspath(written)}")

    except NoSlidesFoundError:
        click.echo("No slides found in the presentation.")
        sys.exit(EXIT_NO_SLIDES)
    except SlideFormatError as e:
        stage = f" in {e.step}" if e.step else ""
        _fail(f"{e.kind}{stage}: {e}")
    except (FileNotFoundError, PackageNotFoundError) as e:
        _fail(f"Invalid file path or file does not exist: {e}")
    except Exception as e:
        import traceback
        traceback.print_exc()
        _fail(str(e) or type(e).__name__)


def _fail(message: str) -> None:
    failure_log.error(message)
    click.echo(f"An error occurred: {message}", err=True)
    sys.exit(1)


def _configure_logging(verbose: bool, error_log_path: str) -> None:
    """Console logging plus an append-only error log file."""
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_log = logging.getLogger("slide_formatter")
    package_log.handlers[:] = [console]
    package_log.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = logging.FileHandler(error_log_path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter("%(asctime)s: %(message)s"))
    for old in failure_log.handlers:
        old.close()
    failure_log.handlers[:] = [handler]
    failure_log.propagate = False


if __name__ == "__main__":
    main()
