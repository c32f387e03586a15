"""Store integers as SECDED codewords and search them."""
import logging
from dataclasses import dataclass
from typing import List, MutableSequence, Sequence, Union

from .hamming import DecodeOutcome, UncorrectableError, check_message, decode, encode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    index: int


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Corrupted:
    # First entry that could not be decoded
    index: int


SearchOutcome = Union[Found, NotFound, Corrupted]


def encode_all(values: MutableSequence[int]) -> None:
    """Replace every message in ``values`` with its codeword.

    All elements are checked before anything is written, so a bad element
    leaves ``values`` untouched.
    """
    for v in values:
        check_message(v)

    for i in range(len(values)):
        values[i] = encode(values[i])


def decode_all(codewords: Sequence[int]) -> List[DecodeOutcome]:
    return [decode(c) for c in codewords]


def find(codewords: Sequence[int], key: int) -> SearchOutcome:
    """Return the index of the first entry that decodes to ``key``.

    The scan stops at the first entry with an uncorrectable error and reports
    ``Corrupted`` for it, even if a later entry would match.
    """
    for i, c in enumerate(codewords):
        outcome = decode(c)
        if isinstance(outcome, UncorrectableError):
            logger.warning('entry %d (0x%04X) is uncorrectable, aborting search', i, c)
            return Corrupted(i)
        if outcome.value == key:
            return Found(i)
    return NotFound()
