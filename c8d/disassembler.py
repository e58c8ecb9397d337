"""Linear disassembly pass over a loaded program."""

from collections.abc import Sized
from typing import Iterable, Iterator

from c8d.decode import DecodedInstruction, decode


class Disassembly:
    """Lazy, restartable sequence of ``(address, DecodedInstruction)``.

    Each iteration walks the source again from the start and decodes on
    demand; nothing is cached between passes. One-shot iterables are
    collected into a tuple up front so they can be walked again.
    """

    def __init__(self, source: Iterable[tuple[int, int]]):
        if not isinstance(source, Sized):
            source = tuple(source)
        self.source = source

    def __iter__(self) -> Iterator[tuple[int, DecodedInstruction]]:
        for address, opcode in self.source:
            yield address, decode(opcode)

    def __len__(self) -> int:
        return len(self.source)

    def mnemonics(self) -> list:
        """Mnemonic of every word, in address order."""
        return [instruction.mnemonic for _, instruction in self]


def disassemble(program: Iterable[tuple[int, int]]) -> Disassembly:
    """Disassemble a program (or any iterable of address/opcode pairs)."""
    return Disassembly(program)
