"""
Tests for the content formatter — merged layout and split file names.
"""

from aictx.core.models.document import SourceDocument
from aictx.core.services.formatter import merge_documents, split_documents, split_output_name


def _docs(*pairs: tuple[str, str]) -> list[SourceDocument]:
    return [SourceDocument(relative_path=p, content=c) for p, c in pairs]


class TestMergeDocuments:
    def test_without_filenames(self):
        merged = merge_documents(_docs(("a.md", "X\n"), ("b/c.md", "\nY")))
        assert merged == "X\n\nY"
        assert "# a.md" not in merged

    def test_with_filenames(self):
        merged = merge_documents(_docs(("a.md", "X"), ("b/c.md", "Y")), include_filenames=True)
        assert merged == "# a.md\n\nX\n\n# b/c.md\n\nY"

    def test_one_heading_per_file(self):
        docs = _docs(("a.md", "alpha"), ("b/c.md", "beta"), ("d.md", "gamma"))
        lines = merge_documents(docs, include_filenames=True).splitlines()
        assert [line for line in lines if line.startswith("# ")] == ["# a.md", "# b/c.md", "# d.md"]

    def test_empty_input(self):
        assert merge_documents([]) == ""
        assert merge_documents([], include_filenames=True) == ""

    def test_blank_body_dropped(self):
        assert merge_documents(_docs(("a.md", "   \n"), ("b.md", "B"))) == "B"

    def test_blank_body_keeps_heading(self):
        merged = merge_documents(_docs(("a.md", ""), ("b.md", "B")), include_filenames=True)
        assert merged == "# a.md\n\n# b.md\n\nB"


class TestSplit:
    def test_split_keeps_order_and_content(self):
        docs = _docs(("a.md", "X"), ("b/c.md", "Y"))
        assert split_documents(docs) == [("a.md", "X"), ("b/c.md", "Y")]

    def test_split_empty(self):
        assert split_documents([]) == []

    def test_output_name_default(self):
        assert split_output_name("a.md") == "a.md"
        assert split_output_name("b/c.md") == "b_c.md"

    def test_output_name_separator_and_suffix(self):
        assert split_output_name("b/c.md", separator="-") == "b-c.md"
        assert split_output_name("guides/setup.md", suffix=".instructions.md") == "guides_setup.instructions.md"
