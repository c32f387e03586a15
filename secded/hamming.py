"""Extended (16,11) Hamming code with single-error correction and
double-error detection.

Bit positions follow the usual Hamming numbering, with position 0 being the
overall parity bit. Position ``p`` is stored in bit ``15 - p`` of the integer,
so position 0 is the MSB and position 15 the LSB:

    pos:  0  1  2  3  4  5  6  7  8  9 10 11 12 13 14 15
    use:  P  p1 p2 d  p4 d  d  d  p8 d  d  d  d  d  d  d
"""
import logging
import numbers
from dataclasses import dataclass, field
from typing import Optional, Union

logger = logging.getLogger(__name__)

WORD_BITS = 16
MESSAGE_BITS = 11

WORD_MASK = 0xFFFF
MESSAGE_MASK = 0x07FF

# Integer bit holding each parity position (1, 2, 4, 8) and the overall parity
PARITY_BITS = (0x4000, 0x2000, 0x0800, 0x0080)
OVERALL_BIT = 0x8000

# Every position whose index has bit j set, for j = 0..3
COVERAGE_MASKS = (0x5555, 0x3333, 0x0F0F, 0x00FF)


class SecdedError(Exception):
    pass


class MessageRangeError(SecdedError, ValueError):
    """Raised when a message does not fit in 11 bits."""


class CodewordRangeError(SecdedError, ValueError):
    """Raised when a codeword does not fit in 16 bits."""


@dataclass(frozen=True)
class RecoveredMessage:
    value: int
    # Position that was repaired, if any. Not part of equality.
    error_position: Optional[int] = field(default=None, compare=False)

    @property
    def corrected(self) -> bool:
        return self.error_position is not None


@dataclass(frozen=True)
class UncorrectableError:
    syndrome: int


DecodeOutcome = Union[RecoveredMessage, UncorrectableError]


def bit_for_position(pos: int) -> int:
    return 1 << (WORD_BITS - 1 - pos)


def is_parity_position(pos: int) -> bool:
    return pos & (pos - 1) == 0


def check_message(message):
    if isinstance(message, bool) or not isinstance(message, numbers.Integral):
        raise MessageRangeError(f'message must be an int, got {type(message).__name__}')
    if not 0 <= message <= MESSAGE_MASK:
        raise MessageRangeError(f'message {message} does not fit in {MESSAGE_BITS} bits')


def check_codeword(codeword):
    if isinstance(codeword, bool) or not isinstance(codeword, numbers.Integral):
        raise CodewordRangeError(f'codeword must be an int, got {type(codeword).__name__}')
    if not 0 <= codeword <= WORD_MASK:
        raise CodewordRangeError(f'codeword {codeword} does not fit in {WORD_BITS} bits')


def scatter_message(message: int) -> int:
    # pos 3 <- msg bit 10, pos 5..7 <- bits 9..7, pos 9..15 <- bits 6..0
    return (
        ((message & 0x400) << 2) |
        ((message & 0x380) << 1) |
        (message & 0x07F)
    )


def gather_message(chunk: int) -> int:
    return (
        ((chunk >> 2) & 0x400) |
        ((chunk >> 1) & 0x380) |
        (chunk & 0x07F)
    )


def syndrome(codeword: int) -> int:
    """XOR of the positions of every set bit in ``codeword``."""
    result = 0
    for j, mask in enumerate(COVERAGE_MASKS):
        result |= ((codeword & mask).bit_count() & 1) << j
    return result


def encode(message: int) -> int:
    """Encode an 11-bit message into a 16-bit SECDED codeword."""
    check_message(message)

    chunk = scatter_message(int(message))

    # Parity positions are still zero, so each group's parity is the parity bit
    for mask, bit in zip(COVERAGE_MASKS, PARITY_BITS):
        if (chunk & mask).bit_count() & 1:
            chunk |= bit

    if chunk.bit_count() & 1:
        chunk |= OVERALL_BIT

    return chunk


def decode(codeword: int) -> DecodeOutcome:
    """Decode a received 16-bit word.

    A single flipped bit anywhere in the word is repaired and reported through
    ``RecoveredMessage.error_position``. Two flipped bits leave the syndrome
    nonzero while the overall parity stays even; that case is returned as
    ``UncorrectableError`` without attempting to extract a message.
    """
    check_codeword(codeword)
    codeword = int(codeword)

    s = syndrome(codeword)
    odd = codeword.bit_count() & 1

    if s != 0 and not odd:
        logger.debug('uncorrectable word 0x%04X (syndrome %d)', codeword, s)
        return UncorrectableError(s)

    error_position = None
    if odd:
        # s == 0 means the overall parity bit itself was hit
        logger.debug('flipping bit %d of 0x%04X', s, codeword)
        codeword ^= bit_for_position(s)
        error_position = s

    return RecoveredMessage(gather_message(codeword), error_position)


def is_valid(codeword: int) -> bool:
    """True if ``codeword`` is an error-free word of this code."""
    check_codeword(codeword)
    codeword = int(codeword)
    return syndrome(codeword) == 0 and not codeword.bit_count() & 1
