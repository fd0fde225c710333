"""Known-answer vectors for RC6-32/20."""

from __future__ import annotations

from typing import Callable

from .cipher import RC6Cipher


# The all-zero-key vectors come from the RC6 submission. Key packing
# order does not matter for zero keys, so they hold here unchanged.
# The remaining entries pin this implementation's most-significant-byte-
# first key packing; non-zero keys do not match the submission's vectors.
KNOWN_ANSWER_VECTORS = [
    {
        "key": bytes(16),
        "plaintext": bytes(16),
        "ciphertext": bytes.fromhex("8fc3a53656b1f778c129df4e9848a41e"),
        "source": "RC6 submission, 128-bit zero key",
    },
    {
        "key": bytes(24),
        "plaintext": bytes(16),
        "ciphertext": bytes.fromhex("6cd61bcb190b30384e8a3f168690ae82"),
        "source": "RC6 submission, 192-bit zero key",
    },
    {
        "key": bytes(32),
        "plaintext": bytes(16),
        "ciphertext": bytes.fromhex("8f5fbd0510d15fa893fa3fda6e857ec2"),
        "source": "RC6 submission, 256-bit zero key",
    },
    {
        "key": b"ABC",
        "plaintext": b"Anh" + bytes(13),
        "ciphertext": bytes.fromhex("3e3f9049a31f3698c7154ab215032ddb"),
        "source": "demo key 'ABC', text 'Anh'",
    },
    {
        "key": b"ABC",
        "plaintext": bytes(16),
        "ciphertext": bytes.fromhex("fde6de6d0c6f4d49329c6c5b617cc77d"),
        "source": "key 'ABC', zero block",
    },
    {
        "key": b"ABD",
        "plaintext": b"Anh" + bytes(13),
        "ciphertext": bytes.fromhex("86c825666567bfbb0393d0116b9c8390"),
        "source": "key 'ABD' (one bit from 'ABC'), text 'Anh'",
    },
    {
        "key": b"",
        "plaintext": bytes(16),
        "ciphertext": bytes.fromhex("bc0aa90dcc98ef699676e3e646a8ce0e"),
        "source": "empty key, zero block",
    },
    {
        "key": b"",
        "plaintext": b"Anh" + bytes(13),
        "ciphertext": bytes.fromhex("ab2f4fb9145ea0baef001318794c8bde"),
        "source": "empty key, text 'Anh'",
    },
    {
        "key": bytes.fromhex("0123456789abcdef0112233445566778"),
        "plaintext": bytes.fromhex("02132435465768798a9bacbdcedfe0f1"),
        "ciphertext": bytes.fromhex("9f91501c1377c9848d39a65bf543dfd0"),
        "source": "RC6 submission 128-bit key (big-endian key packing)",
    },
]


def validate_against_vector(
    vector: dict,
    cipher_factory: Callable[[bytes], RC6Cipher] = RC6Cipher,
) -> tuple[bool, str]:
    """Check encryption and decryption of one known-answer vector.

    Args:
        vector: Entry with 'key', 'plaintext' and 'ciphertext'
        cipher_factory: Builds a cipher from a key

    Returns:
        Tuple of (is_correct, error_detail)
    """
    cipher = cipher_factory(vector["key"])
    expected = vector["ciphertext"]

    ciphertext = cipher.encrypt(vector["plaintext"])
    if ciphertext != expected:
        return False, (
            f"Ciphertext mismatch: expected {expected.hex()}, "
            f"got {ciphertext.hex()}"
        )

    plaintext = cipher.decrypt(ciphertext)
    if plaintext != vector["plaintext"]:
        return False, (
            f"Plaintext mismatch: expected {vector['plaintext'].hex()}, "
            f"got {plaintext.hex()}"
        )
    return True, ""
