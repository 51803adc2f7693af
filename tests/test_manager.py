import logging

import pytest

from appo_mcp.features import SDK_FEATURES
from appo_mcp.manager import BUNDLED_DOCS_DIR, DocsManager, parse_uri, split_frontmatter


@pytest.fixture(scope="module")
def bundled():
    return DocsManager()


def write_doc(directory, filename, uri, body, name="Doc"):
    path = directory / filename
    path.write_text(
        f"---\nuri: {uri}\nname: {name}\ndescription: A test document\n---\n\n{body}\n",
        encoding="utf-8",
    )
    return path


def test_parse_uri():
    assert parse_uri("appo://api/push") == ("api", "push")
    assert parse_uri("appo://overview") == ("overview", None)
    assert parse_uri("appo://a/b/c") is None
    assert parse_uri("https://example.com") is None
    assert parse_uri("") is None


def test_split_frontmatter():
    assert split_frontmatter("---\nuri: x\n---\n\n# Body\n") == ("\nuri: x\n", "# Body")
    assert split_frontmatter("# No frontmatter") == (None, "# No frontmatter")


def test_bundled_resources_are_listed_in_order(bundled):
    uris = [doc.uri for doc in bundled.list_resources()]
    assert len(uris) == 21
    assert uris[:len(SDK_FEATURES)] == [f"appo://api/{f}" for f in SDK_FEATURES]
    assert uris[len(SDK_FEATURES):2 * len(SDK_FEATURES)] == [f"appo://examples/{f}" for f in SDK_FEATURES]
    assert uris[-3:] == ["appo://best-practices", "appo://troubleshooting", "appo://overview"]


def test_bundled_metadata(bundled):
    docs = {doc.uri: doc for doc in bundled.list_resources()}
    assert docs["appo://api/push"].name == "API: push"
    assert docs["appo://api/push"].description == "API reference for appo.push"
    assert docs["appo://examples/camera"].name == "Examples: camera"
    assert docs["appo://overview"].name == "SDK Overview"
    assert all(doc.mime_type == "text/markdown" for doc in docs.values())


def test_read_known_resource(bundled):
    result = bundled.read_resource("appo://api/push")
    assert result.status == "ok"
    assert result.text.startswith("# Push Notifications API")
    assert "uri:" not in result.text.splitlines()[0]


def test_reads_are_repeatable(bundled):
    assert bundled.read_resource("appo://overview") == bundled.read_resource("appo://overview")


@pytest.mark.parametrize("uri,message", [
    ("https://example.com", "Unknown resource: https://example.com"),
    ("appo://a/b/c", "Unknown resource: appo://a/b/c"),
    ("appo://api/bluetooth", "No API documentation found for feature: bluetooth"),
    ("appo://examples/bluetooth", "No examples found for feature: bluetooth"),
    ("appo://changelog", "Unknown resource type: changelog"),
])
def test_read_unknown_resource(bundled, uri, message):
    result = bundled.read_resource(uri)
    assert result.status == "error"
    assert result.text == message


def test_extra_directory_overrides_bundled_docs(tmp_path):
    write_doc(tmp_path, "overview.md", "appo://overview", "# Local overview")
    write_doc(tmp_path, "changelog.md", "appo://changelog", "# Changelog")

    manager = DocsManager(docs_dirs=[str(tmp_path), str(BUNDLED_DOCS_DIR)])

    assert manager.read_resource("appo://overview").text == "# Local overview"
    uris = [doc.uri for doc in manager.list_resources()]
    assert len(uris) == 22
    assert uris[-1] == "appo://changelog"


def test_duplicate_is_logged(tmp_path, caplog):
    write_doc(tmp_path, "overview.md", "appo://overview", "# Local overview")
    with caplog.at_level(logging.WARNING, logger="appo_mcp.manager"):
        DocsManager(docs_dirs=[str(tmp_path), str(BUNDLED_DOCS_DIR)])
    assert "Duplicate resource 'appo://overview'" in caplog.text


def test_invalid_documents_are_skipped(tmp_path, caplog):
    (tmp_path / "notes.md").write_text("# No frontmatter here\n", encoding="utf-8")
    write_doc(tmp_path, "bad-uri.md", "https://example.com", "# Wrong scheme")
    write_doc(tmp_path, "good.md", "appo://guide", "# Guide")

    with caplog.at_level(logging.WARNING, logger="appo_mcp.manager"):
        manager = DocsManager(docs_dirs=[str(tmp_path)])

    assert [doc.uri for doc in manager.list_resources()] == ["appo://guide"]
    assert "missing YAML frontmatter" in caplog.text
    assert "Invalid or missing appo:// uri" in caplog.text


def test_missing_directory_is_logged(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="appo_mcp.manager"):
        manager = DocsManager(docs_dirs=[str(tmp_path / "nope")])
    assert manager.list_resources() == []
    assert "Docs directory does not exist" in caplog.text
