from collections.abc import Sequence
from functools import cached_property
from html import escape
from logging import getLogger
from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, StrictUndefined

from .. import app_name
from ..models import AssetsMode, RenderedDeck, Slide, Theme

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from pygments.formatters import HtmlFormatter

_logger = getLogger(__name__)


def _template_env() -> Environment:
    return Environment(
        loader=PackageLoader(app_name, "templates"),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


class Renderer:
    def __init__(
        self,
        theme: Theme,
        default_stylesheet: str,
        runtime_script: str,
        assets_mode: AssetsMode = AssetsMode.append,
        title: str | None = None,
    ) -> None:
        self._theme = theme
        self._default_stylesheet = default_stylesheet
        self._runtime_script = runtime_script
        self._assets_mode = assets_mode
        self._title = title

    def render(
        self,
        slides: Sequence[Slide],
        stylesheets: Sequence[str] = (),
        scripts: Sequence[str] = (),
    ) -> RenderedDeck:
        """Render slides into a single self-contained HTML document.

        Args:
            slides: Slides to render, in deck order.
            stylesheets: Content of the user stylesheets, in embedding order.
            scripts: Content of the user scripts, in embedding order.

        Returns:
            The rendered deck. Rendering the same input twice gives the same HTML.
        """
        bodies = tuple(self.render_markdown(slide.source) for slide in slides)
        all_stylesheets = self._combine(self._default_stylesheet, stylesheets)
        all_scripts = self._combine(self._runtime_script, scripts)
        html = self._env.get_template("deck.html.jinja").render(
            title=self._title,
            stylesheets=all_stylesheets,
            scripts=all_scripts,
            slides=bodies,
        )
        return RenderedDeck(
            title=self._title,
            slides=bodies,
            stylesheets=all_stylesheets,
            scripts=all_scripts,
            html=html,
        )

    def render_error(
        self,
        error: Exception,
        stylesheets: Sequence[str] = (),
        scripts: Sequence[str] = (),
    ) -> str:
        return self._env.get_template("error.html.jinja").render(
            app_name=app_name,
            error=str(error),
            stylesheets=self._combine(self._default_stylesheet, stylesheets),
            scripts=self._combine(self._runtime_script, scripts),
        )

    def render_markdown(self, source: str) -> str:
        return self._markdown.render(source)

    def _combine(self, default: str, user_assets: Sequence[str]) -> tuple[str, ...]:
        if self._assets_mode is AssetsMode.override and user_assets:
            return tuple(user_assets)
        return (default, *user_assets)

    @cached_property
    def _env(self) -> Environment:
        return _template_env()

    @cached_property
    def _markdown(self) -> "MarkdownIt":
        from markdown_it import MarkdownIt

        return MarkdownIt(
            "commonmark", options_update={"highlight": self._highlight}
        ).enable(["table", "strikethrough"])

    @cached_property
    def _formatter(self) -> "HtmlFormatter":
        from pygments.formatters import HtmlFormatter

        return HtmlFormatter(style=self._theme.style, noclasses=True, nowrap=True)

    @cached_property
    def _pre_style(self) -> str:
        from pygments.token import Text

        style = f"background-color: {self._theme.style.background_color};"
        color = self._theme.style.style_for_token(Text)["color"]
        if color:
            style += f" color: #{color};"
        return style

    def _highlight(self, code: str, lang: str, attrs: str) -> str:
        # An empty string makes markdown-it emit an escaped, unhighlighted block
        if not lang:
            return ""
        from pygments import highlight
        from pygments.lexers import get_lexer_by_name
        from pygments.util import ClassNotFound

        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            _logger.debug(f"No lexer for language {lang}, not highlighting")
            return ""
        return (
            f'<pre class="highlight" style="{escape(self._pre_style)}">'
            f'<code class="language-{escape(lang)}">'
            f"{highlight(code, lexer, self._formatter)}</code></pre>"
        )
