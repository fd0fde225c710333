"""RC6-32/20 block cipher: key schedule, block transform and CLI driver."""

__version__ = "0.1.0"

# Demo values: key "ABC", text "Anh"
DEFAULT_KEY = "ABC"
DEFAULT_TEXT = "Anh"

from .config import CipherConfig, BLOCK_SIZE, DEFAULT_ROUNDS
from .errors import RC6Error, InvalidInputLength, PaddingError
from .key_schedule import SubkeyArray, expand_key, pack_key_words
from .cipher import RC6Cipher, zero_pad
from .padding import PaddingScheme, pad, unpad
from .trace import TraceRecorder
from .vectors import KNOWN_ANSWER_VECTORS, validate_against_vector

__all__ = [
    "CipherConfig",
    "BLOCK_SIZE",
    "DEFAULT_ROUNDS",
    "RC6Error",
    "InvalidInputLength",
    "PaddingError",
    "SubkeyArray",
    "expand_key",
    "pack_key_words",
    "RC6Cipher",
    "zero_pad",
    "PaddingScheme",
    "pad",
    "unpad",
    "TraceRecorder",
    "KNOWN_ANSWER_VECTORS",
    "validate_against_vector",
]
