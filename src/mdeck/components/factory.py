from typing import TYPE_CHECKING

from .protocols import AssetsLoaderProtocol, RendererProtocol, ThemeLoaderProtocol

if TYPE_CHECKING:
    from ..configuring.settings import BuildSettings


class BuildSettingsFactory:
    def __init__(self, settings: "BuildSettings") -> None:
        self._settings = settings

    def theme_loader(self) -> ThemeLoaderProtocol:
        from .theming import ThemeLoader

        return ThemeLoader(search_dirs=self._settings.theme_search_dirs)

    def assets_loader(self) -> AssetsLoaderProtocol:
        from .assets import AssetsLoader

        return AssetsLoader()

    def renderer(self) -> RendererProtocol:
        """Build a renderer for the configured theme.

        The theme is resolved on each call so that a theme fixed on disk is picked \
        up by the next build.

        Raises:
            ThemeNotFoundError: Raised if the configured theme doesn't exist.
        """
        from .rendering import Renderer

        assets_loader = self.assets_loader()
        return Renderer(
            theme=self.theme_loader().load(self._settings.theme),
            default_stylesheet=assets_loader.default_stylesheet,
            runtime_script=assets_loader.runtime_script,
            assets_mode=self._settings.assets_mode,
            title=self._settings.title,
        )

    def error_renderer(self) -> RendererProtocol:
        """Build a renderer that doesn't depend on the configured theme."""
        from ..configuring.settings import DEFAULT_THEME
        from .rendering import Renderer
        from .theming import ThemeLoader

        assets_loader = self.assets_loader()
        return Renderer(
            theme=ThemeLoader().load(DEFAULT_THEME),
            default_stylesheet=assets_loader.default_stylesheet,
            runtime_script=assets_loader.runtime_script,
        )
