"""Development server: serves the deck and reloads the browser tabs on change.

Routes:

- `/slides`: the deck, rebuilt from the files on disk at each request;
- `/ws`: push connections, only when watching;
- anything else: static files next to the Markdown source (images, etc).
"""

from asyncio import Event, Task, create_task, to_thread, wait
from collections.abc import AsyncIterator, Set
from contextlib import asynccontextmanager
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI, WebSocket
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from .. import app_name
from ..exceptions import MdeckError
from ..models import PushEvent
from ..pipelines import build_file
from .broadcasting import ConnectionRegistry
from .factory import BuildSettingsFactory
from .protocols import BroadcasterProtocol

if TYPE_CHECKING:
    from watchfiles import Change

    from ..configuring.settings import ServeSettings

_logger = getLogger(__name__)

Changes = AsyncIterator[Set[tuple["Change", str]]]

MAX_BATCH_MS = 1600


def watched_changes(
    files: Set[Path], debounce: int, stop_event: Event | None = None
) -> Changes:
    """Yield batches of changes affecting FILES.

    Parent directories are watched rather than the files themselves, so that \
    editors that save by writing a temporary file and renaming it are detected.

    A batch is yielded once DEBOUNCE milliseconds went by without a new event, so \
    the writes of one save end up in the same batch. A batch that keeps growing is \
    yielded after MAX_BATCH_MS anyway.
    """
    from watchfiles import awatch

    resolved = frozenset(f.resolve() for f in files)

    def only_watched_files(change: "Change", path: str) -> bool:
        return Path(path).resolve() in resolved

    return awatch(
        *sorted({f.parent for f in resolved}),
        watch_filter=only_watched_files,
        step=debounce,
        debounce=max(MAX_BATCH_MS, debounce),
        recursive=False,
        stop_event=stop_event,
    )


async def reload_on_change(
    settings: "ServeSettings", broadcaster: BroadcasterProtocol, changes: Changes
) -> None:
    """Rebuild and send one reload event for each batch of changes."""
    async for batch in changes:
        names = ", ".join(sorted({Path(path).name for _, path in batch}))
        _logger.info(f"Detected changes in {names}, starting a new build")
        try:
            await to_thread(build_file, settings.source, settings)
            _logger.info("Build finished")
        except MdeckError as e:
            _logger.error(f"Build failed: {e}")
        except Exception as e:
            _logger.exception(str(e))
        await broadcaster.broadcast(PushEvent(type="reload"))


def _log_watch_end(task: Task[None]) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        _logger.error(
            f"Stopped watching for changes, tabs won't reload anymore: {error!r}"
        )


def create_app(
    settings: "ServeSettings", registry: ConnectionRegistry | None = None
) -> FastAPI:
    factory = BuildSettingsFactory(settings)
    connections = (
        ConnectionRegistry(send_timeout=settings.send_timeout)
        if registry is None
        else registry
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        stop_event = Event()
        task = None
        if settings.watch:
            _logger.info(
                "Watching "
                + ", ".join(str(f) for f in settings.watched_files)
                + " for changes"
            )
            task = create_task(
                reload_on_change(
                    settings,
                    connections,
                    watched_changes(
                        frozenset(settings.watched_files),
                        settings.debounce,
                        stop_event,
                    ),
                )
            )
            task.add_done_callback(_log_watch_end)
        _logger.info(f"Go to {settings.slides_url} to see your slides")
        try:
            yield
        finally:
            stop_event.set()
            if task is not None:
                # A failure was already logged when the task ended
                await wait([task])
            await connections.close_all()
            _logger.info("Server stopped")

    app = FastAPI(title=app_name, lifespan=lifespan, openapi_url=None)
    app.state.connections = connections

    @app.get("/", include_in_schema=False)
    def index() -> RedirectResponse:
        return RedirectResponse("/slides?watch=true" if settings.watch else "/slides")

    @app.get("/slides", response_class=HTMLResponse)
    def slides() -> HTMLResponse:
        try:
            deck = build_file(settings.source, settings)
        except MdeckError as e:
            _logger.error(f"Cannot build {settings.source}: {e}")
            return HTMLResponse(
                factory.error_renderer().render_error(e), status_code=500
            )
        return HTMLResponse(deck.html)

    if settings.watch:

        @app.websocket("/ws")
        async def push(websocket: WebSocket) -> None:
            await websocket.accept()
            connection_id = await connections.add(websocket)
            try:
                # Tabs never send anything meaningful
                while (await websocket.receive())["type"] != "websocket.disconnect":
                    pass
            finally:
                await connections.remove(connection_id)

    app.mount(
        "/",
        StaticFiles(directory=settings.source.parent, check_dir=False),
        name="assets",
    )
    return app
