"""Resolve syntax highlighting themes.

A theme is either a Pygments style or a YAML file describing one. YAML themes are \
looked up, in order, in the search directories given by the user and in the themes \
shipped with mdeck. Pygments styles come last.

A YAML theme looks like this:

    background: "#2b303b"
    highlight: "#4f5b66"
    styles:
      Comment: "italic #65737e"
      Keyword: "#b48ead"
      Name.Function: "#8fa1b3"
"""

from collections.abc import Iterable, Iterator
from functools import cached_property
from logging import getLogger
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from pygments.style import Style
from pygments.token import STANDARD_TYPES, _TokenType, string_to_tokentype

from ..exceptions import InvalidThemeError, ThemeNotFoundError
from ..models import Theme
from ..utils import load_yaml

_logger = getLogger(__name__)

THEME_SUFFIXES = (".yml", ".yaml")
packaged_themes_dir = Path(__file__).parent.parent / "themes"


class _ThemeDefinition(BaseModel):
    background: str = "#ffffff"
    highlight: str = "#ffffcc"
    styles: dict[str, str] = Field(default_factory=dict)


class ThemeLoader:
    def __init__(self, search_dirs: Iterable[Path] = ()) -> None:
        self._search_dirs = (*search_dirs, packaged_themes_dir)

    def load(self, name: str) -> Theme:
        """Resolve a theme by name.

        Args:
            name: Name of the theme: a YAML file stem or a Pygments style name.

        Raises:
            ThemeNotFoundError: Raised if no theme of this name exists.
            InvalidThemeError: Raised if the theme file exists but is not a valid \
                theme definition.

        Returns:
            The loaded theme.
        """
        from pygments.styles import get_style_by_name
        from pygments.util import ClassNotFound

        path = self._find_file(name)
        if path is not None:
            _logger.debug(f"Loading theme {name} from {path}")
            return Theme(name, self._style_from_file(name, path))
        try:
            return Theme(name, get_style_by_name(name))
        except ClassNotFound:
            msg = (
                f"theme {name!r} not found in the built-in themes nor in "
                f"{', '.join(str(d) for d in self._search_dirs[:-1]) or 'any directory'}"
            )
            raise ThemeNotFoundError(msg) from None

    def available(self) -> list[str]:
        return sorted(set(self._file_themes) | set(self._pygments_themes))

    @cached_property
    def _file_themes(self) -> dict[str, Path]:
        themes: dict[str, Path] = {}
        for search_dir in reversed(self._search_dirs):
            for path in self._theme_files(search_dir):
                themes[path.stem] = path
        return themes

    @cached_property
    def _pygments_themes(self) -> list[str]:
        from pygments.styles import get_all_styles

        return list(get_all_styles())

    def _find_file(self, name: str) -> Path | None:
        for search_dir in self._search_dirs:
            for suffix in THEME_SUFFIXES:
                path = search_dir / f"{name}{suffix}"
                if path.is_file():
                    return path
        return None

    def _theme_files(self, directory: Path) -> Iterator[Path]:
        if not directory.is_dir():
            return
        for path in sorted(directory.iterdir()):
            if path.suffix in THEME_SUFFIXES and path.is_file():
                yield path

    def _style_from_file(self, name: str, path: Path) -> type[Style]:
        from yaml import YAMLError

        try:
            definition = _ThemeDefinition.model_validate(load_yaml(path) or {})
        except (YAMLError, ValidationError) as e:
            msg = f"invalid theme file {path}: {e}"
            raise InvalidThemeError(msg) from e
        try:
            return type(
                f"{name.title().replace('-', '').replace('.', '')}Style",
                (Style,),
                {
                    "name": name,
                    "background_color": definition.background,
                    "highlight_color": definition.highlight,
                    "styles": {
                        _token_type(token): style
                        for token, style in definition.styles.items()
                    },
                },
            )
        except (AssertionError, ValueError) as e:
            msg = f"invalid style in theme file {path}: {e}"
            raise InvalidThemeError(msg) from e


def _token_type(name: str) -> _TokenType:
    token_type = string_to_tokentype(name)
    if token_type not in STANDARD_TYPES:
        msg = f"unknown token type {name!r}"
        raise ValueError(msg)
    return token_type
