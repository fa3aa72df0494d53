"""Load a UBX message schema document into the Definitions graph.

The document is an XML tree of ``<Message>`` elements under an arbitrary
root element::

    <Messages>
      <Message>
        <Name>NAV-POSLLH</Name>
        <Structure>
          <Class>0x01</Class>
          <Id>0x02</Id>
          <Length>28</Length>
          <Payload>
            <Block><Offset>0</Offset><Name>iTOW</Name><Type>U4</Type></Block>
          </Payload>
        </Structure>
      </Message>
    </Messages>

Document order is preserved at every level. Any structural problem aborts
the load with a SchemaError naming the message and the offending value.
"""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from typing import IO, Any, Dict, Optional, Union

from pydantic import ValidationError

from ..exceptions import SchemaError
from ..models.definitions import Definitions, Message

logger = logging.getLogger(__name__)

# Deepest Block nesting accepted; validation and linking recurse once per level
MAX_NESTING = 100

Source = Union[str, os.PathLike, IO[Any]]


def load_definitions(source: Source) -> Definitions:
    """Load an unlinked Definitions graph from a file.

    Args:
        source: Path to the document, or an open binary/text stream

    Returns:
        Definitions graph (not yet linked)

    Raises:
        SchemaError: If the document cannot be read or does not match the schema
    """
    try:
        root = ET.parse(source).getroot()
    except ET.ParseError as e:
        raise SchemaError(f"malformed schema document: {e}") from e
    except OSError as e:
        raise SchemaError(f"cannot read schema document {source}: {e.strerror or e}") from e
    return _definitions(root)


def loads_definitions(text: Union[str, bytes]) -> Definitions:
    """Load an unlinked Definitions graph from document text.

    Args:
        text: XML document

    Returns:
        Definitions graph (not yet linked)

    Raises:
        SchemaError: If the text is not well-formed or does not match the schema
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise SchemaError(f"malformed schema document: {e}") from e
    return _definitions(root)


def compile_definitions(source: Source) -> Definitions:
    """Load and link a Definitions graph from a file.

    Example:
        >>> definitions = compile_definitions("messages.xml")
        >>> definitions.linked
        True
    """
    return load_definitions(source).link()


def _definitions(root: ET.Element) -> Definitions:
    messages = [
        _message(element, position) for position, element in enumerate(root.findall("Message"), 1)
    ]
    logger.debug("loaded %d message definitions", len(messages))
    return Definitions(messages=messages)


def _message(element: ET.Element, position: int) -> Message:
    name = _text(element, "Name")
    label = f"message {name!r}" if name else f"message #{position}"

    for required in ("Name", "Structure/Class", "Structure/Id"):
        if element.find(required) is None:
            raise SchemaError(f"{label}: missing <{required}>")

    data: Dict[str, Any] = {
        "name": name,
        "type": _text(element, "Type"),
        "description": _text(element, "Description"),
        "comment": _text(element, "Comment"),
        "firmware": _text(element, "Firmware"),
        "msg_class": _text(element, "Structure/Class"),
        "msg_id": _text(element, "Structure/Id"),
        "length": _text(element, "Structure/Length"),
        "blocks": [
            _block(child, label, 1) for child in element.findall("Structure/Payload/Block")
        ],
    }

    try:
        return Message.model_validate(data)
    except ValidationError as e:
        raise SchemaError(f"{label}: {_describe(e)}") from e


def _block(element: ET.Element, label: str, depth: int) -> Dict[str, Any]:
    if depth > MAX_NESTING:
        raise SchemaError(f"{label}: blocks nested more than {MAX_NESTING} levels deep")
    return {
        "cardinality": element.get("type"),
        "count_field": element.get("name", ""),
        "offset": _text(element, "Offset"),
        "name": _text(element, "Name"),
        "type": _text(element, "Type"),
        "comment": _text(element, "Comment"),
        "scale": _text(element, "Scale"),
        "unit": _text(element, "Unit"),
        "bitfield": [_bitdef(child) for child in element.findall("Bitfield/Type")],
        "nested": [_block(child, label, depth + 1) for child in element.findall("Block")],
    }


def _bitdef(element: ET.Element) -> Dict[str, Any]:
    return {
        "index": _text(element, "Index"),
        "type": _text(element, "Type"),
        "name": _text(element, "Name"),
        "description": _text(element, "Description"),
    }


def _text(element: ET.Element, path: str) -> str:
    found: Optional[ET.Element] = element.find(path)
    if found is None:
        return ""
    # Own character data only; text inside child elements is skipped
    return (found.text or "") + "".join(child.tail or "" for child in found)


def _describe(error: ValidationError) -> str:
    """Render the first validation failure as 'location: reason'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    reason = first["msg"]
    # Pydantic prefixes messages from our own validators with "Value error, "
    if reason.startswith("Value error, "):
        reason = reason[len("Value error, ") :]
    return f"{location}: {reason}" if location else reason
