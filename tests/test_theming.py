from pathlib import Path

from pygments.token import Comment, Keyword
from pytest import fixture, raises

from mdeck.components.theming import ThemeLoader
from mdeck.exceptions import InvalidThemeError, ThemeNotFoundError

_theme = """\
background: "#101010"
highlight: "#202020"
styles:
  Keyword: "bold #ff0000"
  Comment: "italic #00ff00"
"""


@fixture
def themes_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "themes"
    directory.mkdir()
    (directory / "red.yml").write_text(_theme, encoding="utf8")
    return directory


def test_packaged_default_theme() -> None:
    theme = ThemeLoader().load("base16-ocean.dark")

    assert theme.name == "base16-ocean.dark"
    assert theme.style.background_color == "#2b303b"
    assert theme.style.style_for_token(Keyword)["color"] == "b48ead"


def test_pygments_theme() -> None:
    theme = ThemeLoader().load("monokai")

    assert theme.style.background_color == "#272822"


def test_theme_from_search_dir(themes_dir: Path) -> None:
    theme = ThemeLoader([themes_dir]).load("red")

    assert theme.style.background_color == "#101010"
    assert theme.style.style_for_token(Keyword)["bold"]
    assert theme.style.style_for_token(Comment)["color"] == "00ff00"


def test_search_dir_shadows_builtins(themes_dir: Path) -> None:
    (themes_dir / "monokai.yaml").write_text(_theme, encoding="utf8")

    theme = ThemeLoader([themes_dir]).load("monokai")

    assert theme.style.background_color == "#101010"


def test_first_search_dir_wins(tmp_path: Path, themes_dir: Path) -> None:
    other_dir = tmp_path / "other"
    other_dir.mkdir()
    (other_dir / "red.yml").write_text('background: "#303030"', encoding="utf8")

    theme = ThemeLoader([other_dir, themes_dir]).load("red")

    assert theme.style.background_color == "#303030"


def test_unknown_theme(themes_dir: Path) -> None:
    with raises(ThemeNotFoundError, match="does-not-exist"):
        ThemeLoader([themes_dir]).load("does-not-exist")


def test_missing_search_dir_is_ignored(tmp_path: Path) -> None:
    assert ThemeLoader([tmp_path / "missing"]).load("monokai").name == "monokai"


def test_invalid_theme_file(themes_dir: Path) -> None:
    (themes_dir / "broken.yml").write_text("styles: [1, 2]", encoding="utf8")

    with raises(InvalidThemeError):
        ThemeLoader([themes_dir]).load("broken")


def test_invalid_yaml(themes_dir: Path) -> None:
    (themes_dir / "broken.yml").write_text("styles: {Keyword: [", encoding="utf8")

    with raises(InvalidThemeError):
        ThemeLoader([themes_dir]).load("broken")


def test_invalid_style(themes_dir: Path) -> None:
    (themes_dir / "broken.yml").write_text(
        "styles:\n  Keyword: bold notacolor\n", encoding="utf8"
    )

    with raises(InvalidThemeError):
        ThemeLoader([themes_dir]).load("broken")


def test_available(themes_dir: Path) -> None:
    names = ThemeLoader([themes_dir]).available()

    assert {"red", "base16-ocean.dark", "base16-ocean.light", "monokai"} <= set(names)
    assert names == sorted(names)


def test_unknown_token_type(themes_dir: Path) -> None:
    (themes_dir / "typo.yml").write_text(
        'styles:\n  Coment: "italic #00ff00"\n', encoding="utf8"
    )

    with raises(InvalidThemeError, match="Coment"):
        ThemeLoader([themes_dir]).load("typo")
