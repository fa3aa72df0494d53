"""Basic ubxgen usage: compile a schema, inspect it, render code.

Run from the repository root:
    python examples/basic_usage.py
"""

from __future__ import annotations

from pathlib import Path

from ubxgen import Renderer, compile_definitions, mask, msgtypename, resolve_type

SCHEMA = Path(__file__).parent / "messages.xml"


def main() -> None:
    definitions = compile_definitions(SCHEMA)

    print(f"{len(definitions.messages)} messages loaded.")
    print()

    for message in definitions.messages:
        print(f"{'=' * 10} {message.name} ({msgtypename(message.name)}) {'=' * 10}")
        print(f"class/id: 0x{message.msg_class:02x}/0x{message.msg_id:02x}  length: {message.length}")

        for block in message.walk():
            owner = definitions.message_of(block)
            if block.type:
                scalar = resolve_type(block.type)
                print(f"    [{block.block_id:2}] {block.name:<12} {str(scalar):<12} {scalar.size} bytes")
            else:
                print(f"    [{block.block_id:2}] <{block.cardinality.value} group of {owner.name}>")

            for bit in block.bitfield:
                print(f"           {bit.name:<12} bits {bit.index:<5} mask {mask(bit.index)}")
        print()

    # Generate a Python module from the bundled template
    source = Renderer("python").render(definitions)
    print(source.splitlines()[0])


if __name__ == "__main__":
    main()
