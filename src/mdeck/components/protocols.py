from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import PushEvent, RenderedDeck, Slide, Theme


class ThemeLoaderProtocol(Protocol):
    def load(self, name: str) -> "Theme": ...

    def available(self) -> list[str]: ...


class AssetsLoaderProtocol(Protocol):
    @property
    def default_stylesheet(self) -> str: ...

    @property
    def runtime_script(self) -> str: ...

    def load(self, paths: Iterable[Path]) -> list[str]: ...

    def read_source(self, path: Path) -> str: ...


class RendererProtocol(Protocol):
    def render(
        self,
        slides: Sequence["Slide"],
        stylesheets: Sequence[str] = (),
        scripts: Sequence[str] = (),
    ) -> "RenderedDeck": ...

    def render_error(
        self,
        error: Exception,
        stylesheets: Sequence[str] = (),
        scripts: Sequence[str] = (),
    ) -> str: ...


class PushConnectionProtocol(Protocol):
    """One browser tab listening for push events.

    Starlette's WebSocket satisfies this protocol.
    """

    async def send_text(self, data: str) -> None: ...

    async def close(self, code: int = 1000, reason: str | None = None) -> None: ...


class BroadcasterProtocol(Protocol):
    async def add(self, connection: PushConnectionProtocol) -> int: ...

    async def remove(self, connection_id: int) -> None: ...

    async def broadcast(self, event: "PushEvent") -> int: ...
