from pytest import mark, raises

from mdeck.exceptions import MalformedInputError
from mdeck.models import Slide
from mdeck.splitting import decode_source, is_delimiter, join_slides, split_slides


def test_three_slides() -> None:
    slides = split_slides("# A\n\n---\n\n# B\n\n---\n\n# C")

    assert [s.index for s in slides] == [0, 1, 2]
    assert [s.source.strip() for s in slides] == ["# A", "# B", "# C"]


def test_no_delimiter_gives_one_slide() -> None:
    text = "# Title\n\nSome text\n\n## Subtitle\n\nMore text\n"

    assert split_slides(text) == [Slide(0, text)]


def test_empty_document_gives_one_empty_slide() -> None:
    assert split_slides("") == [Slide(0, "")]


def test_leading_delimiter_gives_empty_first_slide() -> None:
    slides = split_slides("---\n# A")

    assert [s.source for s in slides] == ["", "# A"]


def test_consecutive_delimiters_give_empty_slide() -> None:
    slides = split_slides("# A\n---\n---\n# B")

    assert [s.source for s in slides] == ["# A", "", "# B"]


@mark.parametrize(
    "text",
    [
        "a",
        "a\n---\nb",
        "a\n***\nb\n___\nc",
        "---\n---\n---",
        "a\n  - - -  \nb\n----------\nc",
        "# a\n\n---\n\n```python\nx = 1\n```\n---\n",
    ],
)
def test_k_delimiters_give_k_plus_one_slides(text: str) -> None:
    k = sum(is_delimiter(line) for line in text.split("\n"))

    assert len(split_slides(text)) == k + 1


@mark.parametrize(
    "line", ["---", "***", "___", "  ---  ", "- - -", "*  *  *", "-----", "---\r"]
)
def test_delimiters(line: str) -> None:
    assert is_delimiter(line)


@mark.parametrize("line", ["--", "-*-", "--- a", "# ---", "|---|---|", "", "==="])
def test_not_delimiters(line: str) -> None:
    assert not is_delimiter(line)


def test_delimiter_in_fenced_code_does_not_split() -> None:
    text = "# Code\n\n```yaml\n---\nkey: value\n```\n\n---\n\n~~~~\n***\n~~~~\n"

    slides = split_slides(text)

    assert len(slides) == 2
    assert "key: value" in slides[0].source
    assert "***" in slides[1].source


def test_unclosed_fence_runs_to_the_end() -> None:
    assert len(split_slides("```\n---\n---")) == 1


def test_join_reproduces_document() -> None:
    text = "# A\n\n---\n\n# B\n\n---\n\n# C\n"

    assert join_slides(split_slides(text)) == text


def test_join_normalizes_delimiters() -> None:
    text = "# A\n  ***  \n# B"

    assert join_slides(split_slides(text)) == "# A\n---\n# B"


def test_decode_source_drops_bom() -> None:
    assert decode_source("\ufeff# Été".encode()) == "# Été"


def test_decode_source_rejects_invalid_utf8() -> None:
    with raises(MalformedInputError):
        decode_source(b"# A\n\xff\xfe\xfa")
