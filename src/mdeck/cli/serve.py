from pathlib import Path

from ..models import AssetsMode
from . import absolute_paths, app


@app.command()
def serve(
    source: Path,
    /,
    *,
    port: int | None = None,
    host: str | None = None,
    watch: bool | None = None,
    debounce: int | None = None,
    theme: str | None = None,
    theme_dirs: list[Path] | None = None,
    css: list[Path] | None = None,
    js: list[Path] | None = None,
    assets_mode: AssetsMode | None = None,
    title: str | None = None,
    workdir: Path | None = None,
) -> None:
    """Serve SOURCE as a deck, rebuilt on each page load.

    Args:
        source: Markdown document to serve
        port: Port to listen on (3030 by default)
        host: Address to bind (127.0.0.1 by default)
        watch: Reload the browser tabs when SOURCE or the extra assets change
        debounce: Milliseconds during which file changes are grouped in one reload
        theme: Syntax highlighting theme of the code blocks
        theme_dirs: Directories to search for YAML themes
        css: Stylesheets to embed, in order
        js: Scripts to embed, in order
        assets_mode: Whether stylesheets and scripts append to or override the defaults
        title: Title of the HTML document. Defaults to the name of SOURCE
        workdir: Directory to read the mdeck.yml settings file from. Defaults to the \
            directory of SOURCE

    """
    from ..configuring.settings import ServeSettings
    from ..pipelines import serve as serve_pipeline

    settings = ServeSettings.from_yaml(
        source.resolve().parent if workdir is None else workdir,
        source=source.resolve(),
        port=port,
        host=host,
        watch=watch,
        debounce=debounce,
        theme=theme,
        theme_dirs=absolute_paths(theme_dirs),
        css=absolute_paths(css),
        js=absolute_paths(js),
        assets_mode=assets_mode,
        title=title,
    )
    if settings.title is None:
        settings = settings.model_copy(update={"title": source.stem})
    serve_pipeline(settings)
