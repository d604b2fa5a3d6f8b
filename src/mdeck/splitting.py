"""Split a Markdown document into slides.

A slide ends where a delimiter line starts: a line made only of a thematic break \
(`---`, `***`, `___`, possibly spaced out like `- - -`). Headings and blank lines \
never split a slide, and a delimiter inside a fenced code block is just code.
"""

from collections.abc import Iterable
from re import compile as re_compile

from .exceptions import MalformedInputError
from .models import Slide

_delimiter_re = re_compile(r"^(?:(?:-[ \t]*){3,}|(?:\*[ \t]*){3,}|(?:_[ \t]*){3,})$")
_fence_re = re_compile(r"^ {0,3}(`{3,}|~{3,})")


def decode_source(raw: bytes) -> str:
    """Decode the raw bytes of a Markdown document.

    Args:
        raw: Content of the document, UTF-8 encoded. A leading BOM is dropped.

    Raises:
        MalformedInputError: Raised if the bytes are not valid UTF-8.

    Returns:
        The document text.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        msg = f"source is not valid UTF-8 text ({e.reason} at byte {e.start})"
        raise MalformedInputError(msg) from e


def is_delimiter(line: str) -> bool:
    return _delimiter_re.match(line.strip()) is not None


def split_slides(text: str) -> list[Slide]:
    """Partition a Markdown document into slides.

    Args:
        text: The whole document.

    Returns:
        The slides in document order. There is always at least one slide, and a \
        document with k delimiter lines gives exactly k + 1 slides.
    """
    fragments: list[list[str]] = [[]]
    fence: str | None = None
    for line in text.split("\n"):
        if fence is None:
            if is_delimiter(line):
                fragments.append([])
                continue
            if match := _fence_re.match(line):
                fence = match.group(1)
        elif _closes_fence(line, fence):
            fence = None
        fragments[-1].append(line)
    return [Slide(i, "\n".join(lines)) for i, lines in enumerate(fragments)]


def join_slides(slides: Iterable[Slide | str], delimiter: str = "---") -> str:
    """Rebuild a document from its slides, the inverse of `split_slides`.

    The result matches the original document except for the exact spelling of \
    the delimiter lines.
    """
    return f"\n{delimiter}\n".join(
        s.source if isinstance(s, Slide) else s for s in slides
    )


def _closes_fence(line: str, fence: str) -> bool:
    stripped = line.strip()
    return (
        len(line) - len(line.lstrip(" ")) <= 3
        and stripped.startswith(fence)
        and stripped == fence[0] * len(stripped)
    )
