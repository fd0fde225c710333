"""Caller-level padding schemes for RC6 messages.

RC6Cipher.encrypt() always zero-pads and RC6Cipher.decrypt() never strips
anything. Callers that need to recover the exact plaintext length pad
with one of the reversible schemes here before encrypting and unpad
after decrypting. Zero padding cannot be undone for plaintext that ends
in zero bytes.
"""

from __future__ import annotations

from enum import Enum

from Crypto.Util.Padding import pad as _crypto_pad
from Crypto.Util.Padding import unpad as _crypto_unpad

from .cipher import zero_pad
from .config import BLOCK_SIZE
from .errors import PaddingError


class PaddingScheme(Enum):
    ZERO = "zero"
    PKCS7 = "pkcs7"
    ISO7816 = "iso7816"
    X923 = "x923"


def get_scheme(name: str | PaddingScheme) -> PaddingScheme:
    """Look up a padding scheme by name (case-insensitive).

    Raises:
        KeyError: If no scheme has that name
    """
    if isinstance(name, PaddingScheme):
        return name
    try:
        return PaddingScheme(name.lower())
    except ValueError:
        available = ", ".join(s.value for s in PaddingScheme)
        raise KeyError(f"Unknown padding scheme '{name}'. Available: {available}") from None


def pad(data: bytes, scheme: str | PaddingScheme = PaddingScheme.PKCS7) -> bytes:
    """Pad data to a multiple of the RC6 block size.

    ZERO adds nothing to already aligned data; the other schemes always
    add between 1 and 16 bytes.
    """
    scheme = get_scheme(scheme)
    if scheme is PaddingScheme.ZERO:
        return zero_pad(data, BLOCK_SIZE)
    return _crypto_pad(bytes(data), BLOCK_SIZE, style=scheme.value)


def unpad(data: bytes, scheme: str | PaddingScheme = PaddingScheme.PKCS7) -> bytes:
    """Remove padding added by pad().

    ZERO strips every trailing zero byte.

    Raises:
        PaddingError: If the padding is malformed
    """
    scheme = get_scheme(scheme)
    if scheme is PaddingScheme.ZERO:
        return bytes(data).rstrip(b"\x00")
    try:
        return _crypto_unpad(bytes(data), BLOCK_SIZE, style=scheme.value)
    except ValueError as e:
        raise PaddingError(f"Invalid {scheme.value} padding: {e}") from e
