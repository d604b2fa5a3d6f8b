from logging import getLogger
from pathlib import Path

from ..exceptions import ExportError

_logger = getLogger(__name__)

LAUNCH_ARGS = ["--no-sandbox", "--disable-dev-shm-usage", "--disable-gpu"]


def export_pdf(html_path: Path, output_path: Path, paper_format: str = "A4") -> None:
    """Print a built deck to PDF with a headless Chromium.

    Pages are landscape and backgrounds are printed, so that highlighted code keeps \
    its theme.

    Args:
        html_path: Path of the HTML file produced by a build.
        output_path: Path of the PDF to write.
        paper_format: Paper format understood by Chromium.

    Raises:
        ExportError: Raised if Playwright is not installed or if the browser fails.
    """
    try:
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright
    except ImportError as e:
        msg = "PDF export needs playwright: pip install 'mdeck[pdf]'"
        raise ExportError(msg) from e

    if not html_path.is_file():
        msg = f"cannot export {html_path}: file not found"
        raise ExportError(msg)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _logger.info(f"Printing {html_path} to {output_path}")
    try:
        with sync_playwright() as playwright:
            browser = playwright.chromium.launch(headless=True, args=LAUNCH_ARGS)
            try:
                page = browser.new_page()
                page.goto(html_path.resolve().as_uri())
                page.pdf(
                    path=str(output_path),
                    format=paper_format,
                    landscape=True,
                    print_background=True,
                )
            finally:
                browser.close()
    except PlaywrightError as e:
        msg = f"headless browser failed to print {html_path}: {e.message}"
        raise ExportError(msg) from e
