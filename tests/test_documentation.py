import pytest

from uml_codegen.core.documentation import DocumentationTransfer, split_comment_body
from uml_codegen.core.model import Comment


def test_split_comment_body():
    assert split_comment_body("one\r\ntwo\nthree\n") == ["one", "two", "three"]
    assert split_comment_body("one\n\ntwo") == ["one", "", "two"]
    assert split_comment_body("") == []


def test_one_tag_per_line():
    javadoc = DocumentationTransfer().to_javadoc([Comment("First\nSecond")])

    assert javadoc.tags == ["First", "Second"]


def test_comments_accumulate():
    javadoc = DocumentationTransfer().to_javadoc([Comment("First"), Comment("Second\nThird")])

    assert javadoc.tags == ["First", "Second", "Third"]


def test_no_comments_gives_no_javadoc():
    assert DocumentationTransfer().to_javadoc([]) is None


def test_empty_body_gives_empty_javadoc():
    assert DocumentationTransfer().to_javadoc([Comment("")]).tags == []


def test_block_style():
    transfer = DocumentationTransfer(style="block")

    javadoc = transfer.to_javadoc([Comment("First\n  Second"), Comment("Third")])

    assert javadoc.tags == ["First Second", "Third"]


def test_disabled():
    assert DocumentationTransfer(enabled=False).to_javadoc([Comment("x")]) is None


def test_unknown_style():
    with pytest.raises(ValueError):
        DocumentationTransfer(style="html")
