"""Unit tests for extract_from_node_graph."""

import json

import pytest

from imgvault.api.link import LinkKind, ParseError, extract_from_node_graph

pytestmark = pytest.mark.link


def _graph(*nodes) -> str:
    return json.dumps({"nodes": list(nodes), "edges": []})


def test_file_nodes_are_direct_references():
    occurrences = extract_from_node_graph(_graph({"id": "1", "type": "file", "file": "attachments/a.png"}))
    assert len(occurrences) == 1
    assert occurrences[0].kind is LinkKind.FILE_REFERENCE
    assert occurrences[0].raw_target == "attachments/a.png"
    assert occurrences[0].span is None


def test_text_nodes_are_scanned():
    occurrences = extract_from_node_graph(
        _graph({"id": "1", "type": "text", "text": "see ![[b.png]] and ![x](http://h/c.jpg)"})
    )
    assert [occ.raw_target for occ in occurrences] == ["b.png", "http://h/c.jpg"]


def test_children_are_walked_and_deduplicated():
    graph = _graph(
        {
            "id": "g",
            "type": "group",
            "children": [
                {"id": "1", "type": "file", "file": "a.png"},
                {"id": "2", "type": "text", "text": "![[a.png]] ![[d.png]]"},
            ],
        }
    )
    assert [occ.raw_target for occ in extract_from_node_graph(graph)] == ["a.png", "d.png"]


def test_bare_node_list_is_accepted():
    graph = json.dumps([{"type": "file", "file": "x.gif"}])
    assert [occ.raw_target for occ in extract_from_node_graph(graph)] == ["x.gif"]


def test_other_node_types_are_ignored():
    assert extract_from_node_graph(_graph({"type": "link", "url": "https://x"})) == []


def test_empty_document():
    assert extract_from_node_graph("{}") == []


def test_malformed_json():
    with pytest.raises(ParseError) as exc_info:
        extract_from_node_graph("{not json", "board.canvas")
    assert exc_info.value.path == "board.canvas"
    assert "board.canvas" in str(exc_info.value)


def test_invalid_node_anywhere_rejects_whole_document():
    graph = _graph({"type": "file", "file": "a.png"}, {"type": "group", "children": ["oops"]})
    with pytest.raises(ParseError):
        extract_from_node_graph(graph)


def test_nodes_must_be_a_list():
    with pytest.raises(ParseError):
        extract_from_node_graph(json.dumps({"nodes": {"a": 1}}))
