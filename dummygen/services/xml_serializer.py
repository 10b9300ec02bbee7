# dummygen/services/xml_serializer.py
from __future__ import annotations

from typing import Any, Iterable, Mapping, Tuple

from dummygen.core.constants import NodeKeys
from dummygen.core.exceptions import PayloadSerializationError


def _items(node: Any, root_tag: str) -> Iterable[Tuple[str, Any]]:
    # a list is keyed by its indices: <data><0>...</0><1>...</1></data>
    if isinstance(node, Mapping):
        return ((str(k), v) for k, v in node.items())
    if isinstance(node, list):
        return ((str(i), v) for i, v in enumerate(node))
    raise PayloadSerializationError(key=root_tag, value_type=type(node).__name__)


def _scalar_text(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise PayloadSerializationError(key=key, value_type=type(value).__name__)


def _element(key: str, value: Any) -> str:
    if isinstance(value, (list, Mapping)):
        return to_xml(value, key)
    return f"<{key}>{_scalar_text(key, value)}</{key}>"


def to_xml(node: Any, root_tag: str = NodeKeys.XML_ROOT) -> str:
    """
    Serialize a generated node as XML.

    Each key becomes an element. A list value repeats the key's element once
    per entry, without an index. Values are written as-is: nothing is escaped,
    so this only suits the alphanumeric values the generator produces.
    """
    parts = [f"<{root_tag}>"]
    for key, value in _items(node, root_tag):
        if isinstance(value, list):
            parts.extend(_element(key, item) for item in value)
        else:
            parts.append(_element(key, value))
    parts.append(f"</{root_tag}>")
    return "".join(parts)
