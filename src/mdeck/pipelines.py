from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from .components.factory import BuildSettingsFactory
from .models import Document, RenderedDeck
from .splitting import split_slides

if TYPE_CHECKING:
    from .configuring.settings import BuildSettings, ServeSettings

_logger = getLogger(__name__)


def build(document: Document, settings: "BuildSettings") -> RenderedDeck:
    """Split and render a document.

    Args:
        document: The Markdown source and the extra assets to embed.
        settings: Build settings. The extra assets are taken from the document, not \
            from the settings.

    Raises:
        ThemeNotFoundError: Raised if the configured theme doesn't exist.
        AssetNotFoundError: Raised if one of the extra assets cannot be read.

    Returns:
        The rendered deck.
    """
    factory = BuildSettingsFactory(settings)
    renderer = factory.renderer()
    assets_loader = factory.assets_loader()
    stylesheets = assets_loader.load(document.css)
    scripts = assets_loader.load(document.js)
    slides = split_slides(document.source)
    _logger.debug(f"Rendering {len(slides)} slides")
    return renderer.render(slides, stylesheets, scripts)


def build_file(source: Path, settings: "BuildSettings") -> RenderedDeck:
    text = BuildSettingsFactory(settings).assets_loader().read_source(source)
    return build(document_from(text, settings), settings)


def document_from(text: str, settings: "BuildSettings") -> Document:
    return Document(source=text, css=tuple(settings.css), js=tuple(settings.js))


def serve(settings: "ServeSettings") -> None:
    import uvicorn

    from .components.serving import create_app

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
        ws_ping_interval=None,
    )


def export(source: Path, output: Path, settings: "BuildSettings") -> None:
    """Export a deck to PDF.

    Args:
        source: An HTML build, or a Markdown document that is built first.
        output: Path of the PDF to write.
        settings: Build settings, used when SOURCE is a Markdown document.
    """
    from contextlib import suppress
    from tempfile import NamedTemporaryFile

    from .components.exporting import export_pdf

    if source.suffix.lower() in (".html", ".htm"):
        export_pdf(source, output)
        return
    deck = build_file(source, settings)
    # Written next to the source so that relative links resolve as when serving
    try:
        with NamedTemporaryFile(
            "w",
            encoding="utf8",
            suffix=".html",
            prefix=f".{source.stem}-",
            dir=source.resolve().parent,
            delete=False,
        ) as fh:
            fh.write(deck.html)
        export_pdf(Path(fh.name), output)
    finally:
        with suppress(FileNotFoundError):
            Path(fh.name).unlink()


def available_themes(settings: "BuildSettings") -> list[str]:
    return BuildSettingsFactory(settings).theme_loader().available()
