"""Model classes shared by the building and serving sides of mdeck.

The classes defined here are plain containers: the logic lives in the splitting \
module and in the components.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pygments.style import Style


@dataclass(frozen=True)
class Document:
    """Markdown source of a deck and the extra assets to embed with it."""

    source: str
    """Raw Markdown text."""

    css: tuple[Path, ...] = field(default_factory=tuple)
    """Extra stylesheets, in the order they should be embedded."""

    js: tuple[Path, ...] = field(default_factory=tuple)
    """Extra scripts, in the order they should be embedded."""


@dataclass(frozen=True)
class Slide:
    """One fragment of a document, addressed by its position in the deck."""

    index: int
    source: str


@dataclass(frozen=True)
class Theme:
    """Named syntax highlighting scheme applied to every code block of a build."""

    name: str
    style: type[Style]


@dataclass(frozen=True)
class RenderedDeck:
    """Result of a single build. Never patched, always recomputed in full."""

    title: str | None
    slides: tuple[str, ...]
    """HTML body of each slide, in deck order."""

    stylesheets: tuple[str, ...]
    scripts: tuple[str, ...]
    html: str
    """The complete, self-contained HTML document."""


class AssetsMode(Enum):
    """How user stylesheets and scripts combine with the default ones."""

    append = "append"
    override = "override"


class PushEvent(BaseModel):
    """Message pushed to the browser tabs over their WebSocket.

    Serialized as `{"type": "<kind>"}`. Clients ignore kinds they do not know, so \
    new kinds can be added without breaking older pages.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["reload"] = "reload"
