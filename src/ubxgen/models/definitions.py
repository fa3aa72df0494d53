"""Schema graph: Definitions, Message, Block and BitDef.

The graph is built once from the schema document and then linked. Linking
gives every Block the index of its owning Message and a stable pre-order
``block_id``, and every BitDef the ``block_id`` of its owning Block. The
Definitions object keeps the Blocks in an arena indexed by ``block_id``, so
back-references are plain integers resolved through Definitions rather than
object pointers.

Example:
    >>> definitions = Definitions(messages=[...]).link()
    >>> for block in definitions.iter_blocks():
    ...     print(definitions.message_of(block).name, block.name)
"""

from __future__ import annotations

import enum
from typing import Any, Iterator, List, Optional

from pydantic import Field, PrivateAttr, field_validator

from ..exceptions import LinkError, SchemaError
from .base import Hex, SchemaNode


class Cardinality(str, enum.Enum):
    """How often a Block occurs in the payload."""

    SINGULAR = "singular"
    OPTIONAL = "optional"
    REPEATED = "repeated"


class BitDef(SchemaNode):
    """A named bit or inclusive bit range within a bitfield Block.

    Attributes:
        index: Bit index ("3") or inclusive range ("7:4"), as text
        type: Scalar type code of the extracted value
        name: Name of the bit(s)
        description: Free-form documentation
    """

    index: str = ""
    type: str = ""
    name: str = ""
    description: str = ""

    _block_id: Optional[int] = PrivateAttr(default=None)

    @property
    def block_id(self) -> Optional[int]:
        """Arena index of the owning Block, or None before linking."""
        return self._block_id

    def link(self, block_id: int) -> None:
        self._block_id = block_id


class Block(SchemaNode):
    """A field or field group within a message payload.

    A Block is either a scalar field (``type`` set), a bitfield (``type`` set
    and ``bitfield`` non-empty) or a group of ``nested`` Blocks, typically
    optional or repeated.

    Attributes:
        cardinality: Singular, optional or repeated
        count_field: For repeated blocks, name of the field holding the count
        offset: Payload offset expression (documentation only)
        name: Field name
        type: Scalar type code, empty for pure groups
        comment: Free-form documentation
        scale: Scale factor (documentation only)
        unit: Unit (documentation only)
        bitfield: Bit definitions, in document order
        nested: Child blocks, in document order
    """

    cardinality: Cardinality = Cardinality.SINGULAR
    count_field: str = ""
    offset: str = ""
    name: str = ""
    type: str = ""
    comment: str = ""
    scale: str = ""
    unit: str = ""
    bitfield: List[BitDef] = Field(default_factory=list)
    nested: List[Block] = Field(default_factory=list)

    _message_id: Optional[int] = PrivateAttr(default=None)
    _block_id: Optional[int] = PrivateAttr(default=None)

    @field_validator("cardinality", mode="before")
    @classmethod
    def _default_cardinality(cls, value: Any) -> Any:
        # The document leaves the attribute off for plain fields
        if value is None or value == "":
            return Cardinality.SINGULAR
        return value

    @property
    def message_id(self) -> Optional[int]:
        """Index of the owning Message in Definitions.messages, or None before linking."""
        return self._message_id

    @property
    def block_id(self) -> Optional[int]:
        """Pre-order arena index of this Block, or None before linking."""
        return self._block_id

    @property
    def is_repeated(self) -> bool:
        return self.cardinality is Cardinality.REPEATED

    @property
    def is_optional(self) -> bool:
        return self.cardinality is Cardinality.OPTIONAL

    @property
    def is_group(self) -> bool:
        return bool(self.nested)

    @property
    def is_bitfield(self) -> bool:
        return bool(self.bitfield)

    def walk(self) -> Iterator[Block]:
        """Yield this block and all nested blocks, pre-order."""
        yield self
        for child in self.nested:
            yield from child.walk()

    def link(self, message_id: int, arena: List[Block]) -> None:
        """Attach this block and its subtree to a message.

        Args:
            message_id: Index of the owning Message
            arena: Block arena being built; this block is appended to it
        """
        self._message_id = message_id
        self._block_id = len(arena)
        arena.append(self)
        for bit in self.bitfield:
            bit.link(self._block_id)
        for child in self.nested:
            child.link(message_id, arena)


class Message(SchemaNode):
    """One wire message type.

    ``msg_class`` and ``msg_id`` together form the on-wire discriminator.
    They are expected to be unique across a schema, but this is not checked.

    Attributes:
        name: Raw schema name, e.g. "NAV-POSLLH"
        type: Message type (documentation, e.g. "Periodic/Polled")
        description: Free-form documentation
        comment: Free-form documentation
        firmware: Firmware versions supporting the message
        msg_class: Message class byte
        msg_id: Message id byte
        length: Payload length expression, never evaluated
        blocks: Top-level payload blocks, in document order
    """

    name: str
    type: str = ""
    description: str = ""
    comment: str = ""
    firmware: str = ""
    msg_class: Hex
    msg_id: Hex
    length: str = ""
    blocks: List[Block] = Field(default_factory=list)

    def walk(self) -> Iterator[Block]:
        """Yield every block of the payload, pre-order."""
        for block in self.blocks:
            yield from block.walk()

    def link(self, message_id: int, arena: List[Block]) -> None:
        for block in self.blocks:
            block.link(message_id, arena)


class Definitions(SchemaNode):
    """Root of the schema graph: all messages, in document order."""

    messages: List[Message] = Field(default_factory=list)

    _blocks: List[Block] = PrivateAttr(default_factory=list)
    _linked: bool = PrivateAttr(default=False)

    @property
    def linked(self) -> bool:
        return self._linked

    def link(self) -> Definitions:
        """Populate the back-references of every Block and BitDef.

        The arena is rebuilt from scratch, so linking again assigns the same
        ids.

        Returns:
            self, for chaining

        Raises:
            SchemaError: If blocks nest deeper than the interpreter can recurse
        """
        arena: List[Block] = []
        try:
            for message_id, message in enumerate(self.messages):
                message.link(message_id, arena)
        except RecursionError as e:
            raise SchemaError("schema nesting too deep to link") from e
        self._blocks = arena
        self._linked = True
        return self

    def block(self, block_id: int) -> Block:
        """Look up a block by its arena id.

        Raises:
            LinkError: If no block has that id (or the graph is not linked)
        """
        if not 0 <= block_id < len(self._blocks):
            raise LinkError(f"no block with id {block_id}")
        return self._blocks[block_id]

    def message_of(self, block: Block) -> Message:
        """Return the Message that owns a block.

        Raises:
            LinkError: If the block has not been linked
        """
        if block.message_id is None:
            raise LinkError(f"block {block.name!r} is not linked to a message")
        return self.messages[block.message_id]

    def block_of(self, bit: BitDef) -> Block:
        """Return the Block whose bitfield contains a bit definition.

        Raises:
            LinkError: If the bit definition has not been linked
        """
        if bit.block_id is None:
            raise LinkError(f"bit {bit.name!r} is not linked to a block")
        return self.block(bit.block_id)

    def iter_blocks(self) -> Iterator[Block]:
        """Yield every block of every message, pre-order."""
        for message in self.messages:
            yield from message.walk()

    def find(self, msg_class: int, msg_id: int) -> Optional[Message]:
        """Return the first message with the given class and id, if any."""
        for message in self.messages:
            if message.msg_class == msg_class and message.msg_id == msg_id:
                return message
        return None


def link(definitions: Definitions) -> Definitions:
    """Link a freshly loaded graph. See Definitions.link."""
    return definitions.link()
