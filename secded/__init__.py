from .hamming import (
    CodewordRangeError,
    MessageRangeError,
    RecoveredMessage,
    SecdedError,
    UncorrectableError,
    decode,
    encode,
    is_valid,
    syndrome,
)
from .store import Corrupted, Found, NotFound, decode_all, encode_all, find
