from pathlib import Path

from ..models import AssetsMode
from . import absolute_paths, app


@app.command()
def build(
    source: Path | None = None,
    /,
    *,
    output: Path | None = None,
    theme: str | None = None,
    theme_dirs: list[Path] | None = None,
    css: list[Path] | None = None,
    js: list[Path] | None = None,
    assets_mode: AssetsMode | None = None,
    title: str | None = None,
    workdir: Path = Path(),
) -> None:
    """Render a Markdown document into a self-contained HTML deck.

    Nothing is written if the build fails.

    Args:
        source: Markdown document to render. Read from the standard input if omitted
        output: File to write the deck to. Written to the standard output if omitted
        theme: Syntax highlighting theme of the code blocks
        theme_dirs: Directories to search for YAML themes
        css: Stylesheets to embed, in order
        js: Scripts to embed, in order
        assets_mode: Whether stylesheets and scripts append to or override the defaults
        title: Title of the HTML document
        workdir: Directory to read the mdeck.yml settings file from

    """
    from sys import stdin, stdout

    from ..configuring.settings import BuildSettings
    from ..pipelines import build, build_file, document_from
    from ..splitting import decode_source

    settings = BuildSettings.from_yaml(
        workdir,
        theme=theme,
        theme_dirs=absolute_paths(theme_dirs),
        css=absolute_paths(css),
        js=absolute_paths(js),
        assets_mode=assets_mode,
        title=title,
    )
    if source is None:
        text = decode_source(stdin.buffer.read())
        deck = build(document_from(text, settings), settings)
    else:
        deck = build_file(source, settings)
    if output is None:
        stdout.write(deck.html)
        stdout.flush()
    else:
        output.write_text(deck.html, encoding="utf8")
