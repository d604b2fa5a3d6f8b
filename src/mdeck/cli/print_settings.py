from pathlib import Path

from . import app


@app.command()
def print_settings(*, workdir: Path = Path()) -> None:
    """Print the resolved settings.

    Args:
        workdir: Directory to read the mdeck.yml settings file from

    """
    from rich import print as rich_print

    from ..configuring.settings import BuildSettings

    rich_print(BuildSettings.from_yaml(workdir))
