#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/ast/serialization.py
"""JSON serialization and deserialization for documentation trees.

The XML parsing layer and the renderers usually run in one process, but a
dumped tree is handy for fixtures, debugging and the command line tool. The
format is a direct image of the node dataclasses:

- a node is an object with a ``"kind"`` key naming its element kind plus one
  key per dataclass field that differs from its default;
- a text run is an object with a single ``"text"`` key; inside a list a bare
  JSON string is accepted as a shorthand;
- tuples are JSON arrays.

Examples
--------
    >>> from doxy2md.ast import Bold, Paragraph, Text
    >>> tree = Paragraph(children=(Text("Hello "), Bold(children=(Text("world"),))))
    >>> json_to_tree(tree_to_json(tree)) == tree
    True

"""

from __future__ import annotations

import json
import logging
from dataclasses import MISSING, fields
from typing import Any, Union

from doxy2md.ast.nodes import ALL_NODE_TYPES, Node, Text
from doxy2md.exceptions import MalformedNodeError

logger = logging.getLogger(__name__)

KIND_TO_TYPE: dict[str, type[Node]] = {node_type.kind: node_type for node_type in ALL_NODE_TYPES}

Serializable = Union[Node, Text]


def _field_default(f: Any) -> Any:
    if f.default is not MISSING:
        return f.default
    if f.default_factory is not MISSING:
        return f.default_factory()
    return MISSING


def _encode_value(value: Any) -> Any:
    if isinstance(value, (Node, Text)):
        return tree_to_dict(value)
    if isinstance(value, tuple):
        return [_encode_value(item) for item in value]
    return value


def tree_to_dict(node: Serializable) -> dict[str, Any]:
    """Convert a node or text run to a JSON-compatible dictionary.

    Fields equal to their default are omitted.

    Parameters
    ----------
    node : Node or Text
        Tree to convert

    Returns
    -------
    dict
        Dictionary representation

    """
    if isinstance(node, Text):
        return {"text": node.text}

    result: dict[str, Any] = {"kind": node.kind}
    for f in fields(node):
        value = getattr(node, f.name)
        if value == _field_default(f):
            continue
        result[f.name] = _encode_value(value)
    return result


def tree_to_json(node: Serializable, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string."""
    return json.dumps(tree_to_dict(node), indent=indent, ensure_ascii=False)


def _decode_value(value: Any, in_sequence: bool) -> Any:
    if isinstance(value, dict):
        return dict_to_tree(value)
    if isinstance(value, list):
        return tuple(_decode_value(item, in_sequence=True) for item in value)
    if in_sequence and isinstance(value, str):
        return Text(value)
    return value


def dict_to_tree(data: dict[str, Any]) -> Serializable:
    """Build a node or text run from its dictionary representation.

    Parameters
    ----------
    data : dict
        Dictionary produced by :func:`tree_to_dict` or an equivalent dump

    Returns
    -------
    Node or Text
        The rebuilt tree

    Raises
    ------
    MalformedNodeError
        If the kind is unknown or the dictionary names a field the kind lacks

    """
    if "kind" not in data:
        if set(data) == {"text"}:
            return Text(str(data["text"]))
        raise MalformedNodeError(f"Object without a 'kind' key: {sorted(data)}")

    kind = data["kind"]
    node_type = KIND_TO_TYPE.get(kind)
    if node_type is None:
        raise MalformedNodeError(f"Unknown node kind '{kind}'")

    known = {f.name for f in fields(node_type)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == "kind":
            continue
        if key not in known:
            raise MalformedNodeError(f"Node kind '{kind}' has no field '{key}'")
        kwargs[key] = _decode_value(value, in_sequence=False)

    try:
        return node_type(**kwargs)
    except TypeError as e:
        raise MalformedNodeError(f"Cannot build '{kind}' node: {e}") from e


def json_to_tree(json_str: str) -> Serializable:
    """Deserialize a tree from a JSON string.

    Raises
    ------
    MalformedNodeError
        If the JSON is invalid or does not describe a tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise MalformedNodeError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedNodeError(f"Expected a JSON object at the top level, got {type(data).__name__}")
    tree = dict_to_tree(data)
    logger.debug(f"Loaded tree rooted at {getattr(tree, 'kind', 'text')}")
    return tree
