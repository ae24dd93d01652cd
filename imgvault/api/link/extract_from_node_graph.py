"""Link extraction from node-graph (canvas) documents."""

import json
from collections.abc import Iterator
from typing import Any

from .extract_from_text import extract_from_text
from .LinkKind import LinkKind
from .LinkOccurrence import LinkOccurrence
from .ParseError import ParseError


def _iter_nodes(nodes: Any, path: str) -> Iterator[dict[str, Any]]:
    if not isinstance(nodes, list):
        raise ParseError("'nodes' must be a list", path)
    for node in nodes:
        if not isinstance(node, dict):
            raise ParseError(f"node must be an object, got {type(node).__name__}", path)
        yield node
        if "children" in node:
            yield from _iter_nodes(node["children"], path)


def extract_from_node_graph(graph_json: str, path: str = "") -> list[LinkOccurrence]:
    """Extract link occurrences from a node-graph document.

    The document is a JSON object with a ``nodes`` list (a bare list of nodes
    is accepted too). ``file`` nodes contribute a direct reference to their
    ``file`` value; ``text`` nodes are scanned with ``extract_from_text``;
    ``children`` are walked recursively. Results are deduplicated by
    ``raw_target``.

    Raises:
        ParseError: If the JSON is malformed or the node structure is invalid.
    """
    try:
        data = json.loads(graph_json)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e}", path) from e

    nodes = data.get("nodes", []) if isinstance(data, dict) else data

    # Validate the whole tree before reporting anything
    all_nodes = list(_iter_nodes(nodes, path))

    seen: set[str] = set()
    occurrences: list[LinkOccurrence] = []
    for node in all_nodes:
        node_type = node.get("type")
        if node_type == "file" and isinstance(node.get("file"), str):
            found = [LinkOccurrence(kind=LinkKind.FILE_REFERENCE, raw_target=node["file"])]
        elif node_type == "text" and isinstance(node.get("text"), str):
            found = extract_from_text(node["text"])
        else:
            continue
        for occurrence in found:
            if occurrence.raw_target not in seen:
                seen.add(occurrence.raw_target)
                occurrences.append(occurrence)
    return occurrences
