from pathlib import Path

from . import app


@app.command()
def themes(*, theme_dirs: list[Path] | None = None, workdir: Path = Path()) -> None:
    """List the available syntax highlighting themes.

    Args:
        theme_dirs: Directories to search for YAML themes
        workdir: Directory to read the mdeck.yml settings file from

    """
    from rich import print as rich_print

    from ..configuring.settings import BuildSettings
    from ..pipelines import available_themes

    settings = BuildSettings.from_yaml(workdir, theme_dirs=theme_dirs)
    rich_print(
        "\n".join(
            f"[green]{name}[/] (default)" if name == settings.theme else name
            for name in available_themes(settings)
        )
    )
