from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationInfo

from .. import app_name
from ..models import AssetsMode
from ..utils import load_all_yamls

DEFAULT_THEME = "base16-ocean.dark"
SETTINGS_FILENAME = f"{app_name}.yml"

user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


def _resolve(input_value: str | Path, info: ValidationInfo) -> Path:
    path = Path(input_value).expanduser()
    if not path.is_absolute() and info.context and "workdir" in info.context:
        path = info.context["workdir"] / path
    return path.resolve()


_Path = Annotated[Path, BeforeValidator(_resolve)]


class BuildSettings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    theme: str = DEFAULT_THEME
    theme_dirs: list[_Path] = Field(default_factory=list)
    css: list[_Path] = Field(default_factory=list)
    js: list[_Path] = Field(default_factory=list)
    assets_mode: AssetsMode = AssetsMode.append
    title: str | None = None

    @property
    def theme_search_dirs(self) -> list[Path]:
        return [*self.theme_dirs, user_config_dir / "themes"]

    @classmethod
    def from_yaml(cls, workdir: Path, /, **overrides: Any) -> Self:
        """Load the settings of a deck.

        The user settings file (in the user config directory) is read first, then \
        the one of WORKDIR, then the overrides that are not `None` (usually command \
        line options). Later values win. Relative paths are relative to WORKDIR.

        Args:
            workdir: Directory of the deck.
            overrides: Values taking precedence over the settings files.

        Returns:
            The validated settings.
        """
        resolved_workdir = workdir.resolve()
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **(b or {})},
            load_all_yamls(
                [
                    user_config_dir / SETTINGS_FILENAME,
                    resolved_workdir / SETTINGS_FILENAME,
                ]
            ),
            {},
        )
        content.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(content, context={"workdir": resolved_workdir})


class ServeSettings(BuildSettings):
    source: _Path
    host: str = "127.0.0.1"
    port: int = Field(default=3030, ge=0, le=65535)
    watch: bool = False
    debounce: int = Field(default=300, gt=0)
    """Milliseconds without file events after which the pending events trigger one reload."""

    send_timeout: float = Field(default=5.0, gt=0)
    """Seconds after which a push connection that doesn't accept a message is dropped."""

    @property
    def watched_files(self) -> list[Path]:
        return [self.source, *self.css, *self.js]

    @property
    def slides_url(self) -> str:
        url = f"http://{self.host}:{self.port}/slides"
        return f"{url}?watch=true" if self.watch else url
