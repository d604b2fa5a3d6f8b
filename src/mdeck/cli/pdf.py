from pathlib import Path

from ..models import AssetsMode
from . import absolute_paths, app


@app.command()
def pdf(
    source: Path,
    output: Path,
    /,
    *,
    theme: str | None = None,
    theme_dirs: list[Path] | None = None,
    css: list[Path] | None = None,
    js: list[Path] | None = None,
    assets_mode: AssetsMode | None = None,
    workdir: Path = Path(),
) -> None:
    """Print a deck to a landscape PDF with a headless Chromium.

    Args:
        source: HTML deck produced by the build command, or a Markdown document
        output: PDF file to write
        theme: Syntax highlighting theme, when SOURCE is a Markdown document
        theme_dirs: Directories to search for YAML themes
        css: Stylesheets to embed, in order
        js: Scripts to embed, in order
        assets_mode: Whether stylesheets and scripts append to or override the defaults
        workdir: Directory to read the mdeck.yml settings file from

    """
    from ..configuring.settings import BuildSettings
    from ..pipelines import export

    settings = BuildSettings.from_yaml(
        workdir,
        theme=theme,
        theme_dirs=absolute_paths(theme_dirs),
        css=absolute_paths(css),
        js=absolute_paths(js),
        assets_mode=assets_mode,
    )
    export(source, output, settings)
