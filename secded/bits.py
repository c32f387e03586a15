"""Bit-level helpers for codewords, using the codec's position numbering
(position 0 is the most significant bit)."""
import numpy as np

from .hamming import WORD_BITS, bit_for_position


def to_bit_string(value: int, width: int = WORD_BITS) -> str:
    if not 0 <= value < (1 << width):
        raise ValueError(f'{value} does not fit in {width} bits')
    return f'{value:0{width}b}'


def from_bit_string(text: str) -> int:
    text = text.strip()
    if not text or any(c not in '01' for c in text):
        raise ValueError(f'not a bit string: {text!r}')
    return int(text, 2)


def flip_bits(codeword: int, *positions: int) -> int:
    for pos in positions:
        if not 0 <= pos < WORD_BITS:
            raise ValueError(f'bit position {pos} out of range')
        codeword ^= bit_for_position(pos)
    return codeword


def flip_random_bits(codeword: int, count: int, rng: np.random.Generator):
    """Flip ``count`` distinct, randomly chosen bits of ``codeword``.

    Returns the damaged word and the positions that were flipped.
    """
    positions = [int(p) for p in rng.choice(WORD_BITS, size=count, replace=False)]
    return flip_bits(codeword, *positions), positions
