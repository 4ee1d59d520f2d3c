"""XML -> generic tree decoding.

Steam's XML endpoints are consumed as a nested mapping where every child
element is a list, even when it appears once:

    <profile><steamID64>7656...</steamID64></profile>
    -> {"profile": {"steamID64": ["7656..."]}}

Rules:
- text-only element without attributes -> its text (empty element -> "")
- attributes -> `"$"` mapping; text next to children/attributes -> `"_"`
- text is stripped, whitespace runs collapsed, NFC-normalized

Parsing goes through defusedxml so entity-expansion and external-entity
payloads are rejected instead of expanded.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any
from xml.etree.ElementTree import Element

from defusedxml import ElementTree
from defusedxml.common import DefusedXmlException

from steamid_resolver.core.errors import SteamParseError

ATTRIBUTES_KEY = "$"
TEXT_KEY = "_"

DecodedTree = dict[str, Any]

_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")


def _clean_text(value: str | None) -> str:
    if not value:
        return ""
    text = unicodedata.normalize("NFC", value)
    return _WHITESPACE_RUN_RE.sub(" ", text).strip()


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _decode_element(element: Element) -> Any:
    children = list(element)
    attributes = {_local_name(k): v for k, v in element.attrib.items()}
    text = _clean_text(element.text)

    if not children and not attributes:
        return text

    node: dict[str, Any] = {}
    if attributes:
        node[ATTRIBUTES_KEY] = attributes
    if text:
        node[TEXT_KEY] = text
    for child in children:
        node.setdefault(_local_name(child.tag), []).append(_decode_element(child))
    return node


def decode_xml(text: str) -> DecodedTree:
    """Decode an XML document into `{root_tag: node}`.

    Leading whitespace before the declaration is skipped. Raises
    `SteamParseError` for malformed or unsafe XML.
    """

    try:
        root = ElementTree.fromstring(text.lstrip())
    except ElementTree.ParseError as exc:
        raise SteamParseError(f"XML parsing failed: {exc}", exc) from exc
    except DefusedXmlException as exc:
        raise SteamParseError(f"XML parsing failed: unsafe XML content ({exc})", exc) from exc

    return {_local_name(root.tag): _decode_element(root)}
