"""Tests for link and anchor cross-referencing."""

from navcheck.api.check.Category import Category
from navcheck.api.check.GraphChecker import GraphChecker
from navcheck.api.config.NavConfig import NavConfig
from tests.unit.conftest import build_index


def _findings(index):
    return [(f.path, f.line, f.category) for f in GraphChecker(index).check_all()]


def test_existing_target_without_anchor_is_clean(indexed):
    index = indexed({"a.md": "[b](b.md) [img](img/logo.png)", "b.md": "text", "img/logo.png": "png"})
    assert _findings(index) == []


def test_valid_anchor(indexed):
    index = indexed({"a.md": "[see B](b.md#section-one)", "b.md": "## Section One"})
    assert _findings(index) == []


def test_missing_file_is_one_broken_file_finding(indexed):
    index = indexed({"a.md": "# A\n[missing](c.md#whatever)"})
    findings = GraphChecker(index).check_all()
    assert len(findings) == 1
    finding = findings[0]
    assert finding.category is Category.BROKEN_FILE
    assert (finding.path, finding.line) == ("a.md", 2)
    assert "c.md" in finding.message
    assert finding.span == "[missing](c.md#whatever)"


def test_missing_anchor_is_one_broken_anchor_finding(indexed):
    index = indexed({"a.md": "[see B](b.md#section-one)", "b.md": "## Section Two"})
    findings = GraphChecker(index).check_all()
    assert [(f.path, f.category) for f in findings] == [("a.md", Category.BROKEN_ANCHOR)]
    assert "#section-one" in findings[0].message
    assert "b.md" in findings[0].message


def test_same_file_anchors(indexed):
    index = indexed({"a.md": "# Top\n## Usage\n[u](#usage) [x](#nope)"})
    assert _findings(index) == [("a.md", 3, Category.BROKEN_ANCHOR)]


def test_duplicate_heading_anchor(indexed):
    index = indexed({"a.md": "## Notes\n## Notes\n[second](#notes-1) [third](#notes-2)"})
    assert _findings(index) == [("a.md", 3, Category.BROKEN_ANCHOR)]


def test_file_url_is_non_portable_even_when_it_exists(indexed, tmp_path):
    existing = tmp_path / "elsewhere.md"
    existing.write_text("# Elsewhere")
    index = indexed(
        {
            "a.md": f"[here]({existing.as_uri()})\n[gone](file:///Users/someone/docs/doc.md#intro)",
        }
    )
    assert _findings(index) == [
        ("a.md", 1, Category.NON_PORTABLE),
        ("a.md", 2, Category.NON_PORTABLE),
    ]


def test_external_links_are_skipped(indexed):
    index = indexed({"a.md": "[w](https://example.com/missing.md#x) [m](mailto:a@b.c) [c](//cdn.example.com)"})
    assert _findings(index) == []


def test_directory_and_non_markdown_targets(indexed):
    index = indexed({"a.md": "[d](docs/) [d2](docs#x) [s](run.sh#L1)", "docs/x.md": "", "run.sh": "echo"})
    assert _findings(index) == []


def test_root_relative_links(indexed):
    index = indexed({"docs/a.md": "[b](/b.md#b) [c](/c.md)", "b.md": "# B"})
    assert _findings(index) == [("docs/a.md", 1, Category.BROKEN_FILE)]


def test_relative_parent_links(indexed):
    index = indexed({"docs/deep/a.md": "[r](../../README.md#readme)", "README.md": "# Readme"})
    assert _findings(index) == []


def test_percent_encoded_paths(indexed):
    index = indexed({"a.md": "[s](my%20notes.md#todo)", "my notes.md": "## TODO"})
    assert _findings(index) == []


def test_html_anchor_satisfies_link(indexed):
    index = indexed({"a.md": "[c](b.md#custom)", "b.md": '<a name="custom"></a>\n# B'})
    assert _findings(index) == []


def test_anchor_into_excluded_document_is_checked(corpus):
    root = corpus({"a.md": "[ok](vendor/b.md#deep) [bad](vendor/b.md#shallow)", "vendor/b.md": "## Deep"})
    index = build_index(root, NavConfig(exclude_dirnames=["vendor"]))
    assert _findings(index) == [("a.md", 1, Category.BROKEN_ANCHOR)]


def test_anchor_into_unparseable_document_is_not_reported_twice(indexed):
    index = indexed({"a.md": "[b](b.md#x)", "b.md": b"\x00"})
    assert _findings(index) == []
    assert [f.category for f in index.findings] == [Category.PARSE_ERROR]


def test_links_in_code_fences_are_not_checked(indexed):
    index = indexed({"a.md": "```\n[example](does-not-exist.md)\n```\n"})
    checker = GraphChecker(index)
    assert checker.check_all() == []
    assert checker.links_checked == 0


def test_links_checked_counts_every_link(indexed):
    index = indexed({"a.md": "[b](b.md) [w](https://e.com) [x](#x)", "b.md": ""})
    checker = GraphChecker(index)
    checker.check_all()
    assert checker.links_checked == 3


def test_target_with_parentheses_in_name(indexed):
    index = indexed({"a.md": "[x](notes_(draft).md)\n[y](gone_(old).md)", "notes_(draft).md": "# Draft"})
    assert _findings(index) == [("a.md", 2, Category.BROKEN_FILE)]


def test_anchor_to_emphasized_heading(indexed):
    index = indexed(
        {
            "a.md": "[s](b.md#setup-guide) [n](b.md#important-notes)",
            "b.md": "## _Setup_ guide\n## __Important__ notes",
        }
    )
    assert _findings(index) == []


def test_links_in_fence_nested_in_list_are_not_checked(indexed):
    index = indexed({"a.md": "1. Run:\n\n    ```md\n    [example](nowhere.md)\n    ```\n"})
    assert _findings(index) == []
