"""numpy versions of the codec, for encoding and decoding whole arrays at once.

Results agree element for element with ``hamming.encode``/``hamming.decode``.
"""
import numpy as np

from .hamming import (
    COVERAGE_MASKS,
    MESSAGE_MASK,
    OVERALL_BIT,
    PARITY_BITS,
    WORD_BITS,
    WORD_MASK,
    CodewordRangeError,
    MessageRangeError,
)
from .store import Corrupted, Found, NotFound, SearchOutcome

# Per-element decode status
CLEAN = 0
CORRECTED = 1
UNCORRECTABLE = 2


def _as_words(values, limit, error):
    a = np.asarray(values)
    if a.size == 0:
        return a.astype(np.int64)
    if not np.issubdtype(a.dtype, np.integer):
        raise error(f'expected an integer array, got {a.dtype}')
    if a.min() < 0 or a.max() > limit:
        raise error(f'values must be in [0, {limit}]')
    return a.astype(np.int64)


def _parity(a, mask):
    return np.bitwise_count(a & mask).astype(np.int64) & 1


def encode_array(messages) -> np.ndarray:
    m = _as_words(messages, MESSAGE_MASK, MessageRangeError)

    chunk = ((m & 0x400) << 2) | ((m & 0x380) << 1) | (m & 0x07F)
    for mask, bit in zip(COVERAGE_MASKS, PARITY_BITS):
        chunk |= _parity(chunk, mask) * bit
    chunk |= _parity(chunk, WORD_MASK) * OVERALL_BIT

    return chunk.astype(np.uint16)


def decode_array(codewords):
    """Decode every word in ``codewords``.

    Returns ``(messages, status)``. Entries whose status is ``UNCORRECTABLE``
    hold 0 in ``messages`` and carry no information.
    """
    c = _as_words(codewords, WORD_MASK, CodewordRangeError)

    s = np.zeros_like(c)
    for j, mask in enumerate(COVERAGE_MASKS):
        s |= _parity(c, mask) << j
    odd = _parity(c, WORD_MASK) == 1
    uncorrectable = (s != 0) & ~odd

    c = c ^ np.where(odd, 1 << (WORD_BITS - 1 - s), 0)
    messages = ((c >> 2) & 0x400) | ((c >> 1) & 0x380) | (c & 0x07F)
    messages[uncorrectable] = 0

    status = np.full(c.shape, CLEAN, dtype=np.int8)
    status[odd] = CORRECTED
    status[uncorrectable] = UNCORRECTABLE

    return messages.astype(np.uint16), status


def find_array(codewords, key: int) -> SearchOutcome:
    """Same result as ``store.find``, with the whole array decoded at once.

    Matches after the first uncorrectable entry are not reported.
    """
    messages, status = decode_array(np.ravel(codewords))

    (bad,) = np.nonzero(status == UNCORRECTABLE)
    limit = bad[0] if len(bad) else len(messages)

    (hits,) = np.nonzero(messages[:limit] == key)
    if len(hits):
        return Found(int(hits[0]))
    if len(bad):
        return Corrupted(int(bad[0]))
    return NotFound()
