"""Program image loading: bytes to addressed 16-bit opcodes."""

from enum import Enum
from typing import Iterator, Optional

import jax.numpy as jnp
import numpy as np
from flax.struct import PyTreeNode, field

from c8d.constants import PROGRAM_START, WORD_SIZE, PAD_BYTE, NUM_FAMILIES, ADDRESS_SPACE
from c8d.fields import Fields, extract_fields
from c8d.logging import ConsoleLogger


class OddBytePolicy(str, Enum):
    """What to do with the unpaired last byte of an odd-length image."""
    PAD = "pad"
    DROP = "drop"
    REJECT = "reject"


class OddLengthImageError(ValueError):
    """Raised under ``OddBytePolicy.REJECT`` for an odd-length image."""

    def __init__(self, size: int):
        super().__init__(f"program image has odd length ({size} bytes)")
        self.size = size


class AddressRangeError(ValueError):
    """The image would extend past the end of the address space."""

    def __init__(self, base: int, size: int):
        super().__init__(
            f"image of {size} bytes at {base:#06x} does not fit below {ADDRESS_SPACE:#x}"
        )
        self.base = base
        self.size = size


class ImageAccessError(OSError):
    """The program image could not be read."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"cannot read {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class Program(PyTreeNode):
    """Program image as big-endian 16-bit words placed at ``base``."""
    words: jnp.ndarray
    base: int = field(pytree_node=False, default=PROGRAM_START)

    def __len__(self) -> int:
        return int(self.words.shape[0])

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield ``(address, opcode)`` pairs in ascending address order."""
        for k, word in enumerate(np.asarray(self.words).tolist()):
            yield self.base + WORD_SIZE * k, word

    def addresses(self) -> jnp.ndarray:
        return self.base + WORD_SIZE * jnp.arange(len(self), dtype=jnp.int32)

    def fields(self) -> Fields:
        """Extract fields for every word at once."""
        return extract_fields(self.words)

    def family_counts(self) -> jnp.ndarray:
        """Histogram of top nibbles, one bin per instruction family."""
        families = self.fields().family.astype(jnp.int32)
        return jnp.bincount(families, length=NUM_FAMILIES)


def _pack_u16(high: jnp.ndarray, low: jnp.ndarray) -> jnp.ndarray:
    """Pack two byte arrays into uint16 words."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def load_program(
    data: bytes,
    base: int = PROGRAM_START,
    policy: OddBytePolicy = OddBytePolicy.PAD,
    logger: Optional[ConsoleLogger] = None,
) -> Program:
    """Pair image bytes into opcodes; byte ``2k`` is the high byte of word ``k``."""
    logger = logger or ConsoleLogger()
    if not 0 <= base < ADDRESS_SPACE:
        raise AddressRangeError(base, 0)

    data = bytes(data)
    if len(data) % WORD_SIZE:
        policy = OddBytePolicy(policy)
        if policy is OddBytePolicy.REJECT:
            raise OddLengthImageError(len(data))
        if policy is OddBytePolicy.DROP:
            logger.warning(f"Odd-length image ({len(data)} bytes): dropping trailing byte {data[-1]:02X}")
            data = data[:-1]
        else:
            logger.warning(f"Odd-length image ({len(data)} bytes): padding trailing byte {data[-1]:02X} with {PAD_BYTE:02X}")
            data = data + bytes([PAD_BYTE])

    if base + len(data) > ADDRESS_SPACE:
        raise AddressRangeError(base, len(data))

    raw = jnp.array(list(data), dtype=jnp.uint8).reshape(-1, WORD_SIZE)
    program = Program(words=_pack_u16(raw[:, 0], raw[:, 1]), base=base)
    logger.debug(f"Loaded {len(data)} bytes as {len(program)} words at {base:#05x}")
    return program


def load_rom(
    filename: str,
    base: int = PROGRAM_START,
    policy: OddBytePolicy = OddBytePolicy.PAD,
    logger: Optional[ConsoleLogger] = None,
) -> Program:
    """Read a ROM file in full and load it as a program image."""
    try:
        with open(filename, 'rb') as f:
            rom_data = f.read()
    except OSError as e:
        raise ImageAccessError(str(filename), e) from e
    return load_program(rom_data, base=base, policy=policy, logger=logger)
