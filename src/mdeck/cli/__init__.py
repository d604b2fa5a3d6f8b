from logging import INFO, basicConfig
from pathlib import Path

from cyclopts import App
from rich.logging import RichHandler

from .. import __version__, app_name

app = App(name=app_name, version=__version__)
app.register_install_completion_command()


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, tracebacks_show_locals=False)],
    )
    from logging import getLogger
    from sys import exit

    from ..exceptions import MdeckError
    from ..utils import import_module_and_submodules

    import_module_and_submodules(__name__)
    try:
        app()
    except MdeckError as e:
        getLogger(__name__).critical(str(e))
        exit(1)


def absolute_paths(paths: list[Path] | None) -> list[Path] | None:
    """Resolve command line paths against the current directory.

    Relative paths of the settings files are resolved against the deck directory \
    instead, so command line paths are made absolute before being merged.
    """
    return None if paths is None else [path.resolve() for path in paths]
