"""
Command-line interface for the RC6 cipher.

Usage:
    rc6 demo --key ABC --text Anh
    rc6 encrypt --key ABC --text "hello world" --padding pkcs7
    rc6 decrypt --key ABC --hex <ciphertext> --padding pkcs7 --as-text
    rc6 subkeys --key ABC
    rc6 validate --n 100 --seed 42
"""

from __future__ import annotations

import contextlib
import random
import secrets
import sys
from typing import TextIO

import click

from . import DEFAULT_KEY, DEFAULT_TEXT, __version__
from .cipher import RC6Cipher, zero_pad
from .config import BLOCK_SIZE, DEFAULT_ROUNDS, CipherConfig
from .errors import RC6Error
from .padding import PaddingScheme, pad, unpad
from .trace import TraceRecorder, format_byte_dump, print_header, print_result
from .vectors import KNOWN_ANSWER_VECTORS, validate_against_vector
from .words import bytes_to_hex, hex_to_bytes

PADDING_CHOICES = [s.value for s in PaddingScheme] + ["none"]


def _encode_text(text: str) -> bytes:
    """ASCII-encode text; characters outside ASCII become '?'."""
    return text.encode("ascii", errors="replace")


def _resolve_key(key: str | None, key_hex: str | None) -> bytes:
    if key is not None and key_hex is not None:
        raise click.UsageError("Use either --key or --key-hex, not both")
    if key_hex is not None:
        try:
            return hex_to_bytes(key_hex)
        except ValueError as e:
            raise click.BadParameter(f"Invalid key hex: {e}", param_hint="--key-hex")
    return _encode_text(key if key is not None else DEFAULT_KEY)


def _resolve_input(text: str | None, data_hex: str | None) -> bytes:
    if text is not None and data_hex is not None:
        raise click.UsageError("Use either --text or --hex, not both")
    if data_hex is not None:
        try:
            return hex_to_bytes(data_hex)
        except ValueError as e:
            raise click.BadParameter(f"Invalid input hex: {e}", param_hint="--hex")
    if text is None:
        raise click.UsageError("One of --text or --hex is required")
    return _encode_text(text)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def key_options(func):
    """Attach the shared --key/--key-hex/--rounds options."""
    func = click.option(
        "--rounds",
        type=int,
        default=DEFAULT_ROUNDS,
        help=f"Number of rounds (default: {DEFAULT_ROUNDS})",
    )(func)
    func = click.option(
        "--key-hex",
        type=str,
        default=None,
        help="Key as hex bytes",
    )(func)
    func = click.option(
        "--key",
        type=str,
        default=None,
        help=f"Key as ASCII text (default: {DEFAULT_KEY})",
    )(func)
    return func


def trace_options(func):
    """Attach the shared --verbose/--trace options."""
    func = click.option(
        "--trace",
        "trace_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="Write a JSON Lines round trace to this file",
    )(func)
    func = click.option(
        "--verbose", "-v",
        is_flag=True,
        help="Print every round",
    )(func)
    return func


@contextlib.contextmanager
def _tracer(verbose: bool, trace_path: str | None):
    """Yield a TraceRecorder, or None when neither output is wanted."""
    if not verbose and trace_path is None:
        yield None
        return
    trace_file: TextIO | None = None
    try:
        if trace_path is not None:
            try:
                trace_file = open(trace_path, "w")
            except OSError as e:
                _fail(f"Cannot open trace file: {e}")
        yield TraceRecorder(verbose=verbose, trace_file=trace_file)
    finally:
        if trace_file is not None:
            trace_file.close()


@click.group()
@click.version_option(version=__version__, prog_name="rc6")
def main() -> None:
    """RC6-32/20 block cipher.

    Encrypt and decrypt 16-byte blocks, inspect the key schedule and
    check the implementation against known-answer vectors.
    """
    pass


@main.command()
@click.option("--key", type=str, default=DEFAULT_KEY, help=f"Key text (default: {DEFAULT_KEY})")
@click.option("--text", type=str, default=DEFAULT_TEXT, help=f"Plaintext (default: {DEFAULT_TEXT})")
def demo(key: str, text: str) -> None:
    """Encrypt and decrypt a short text, dumping every buffer."""
    click.echo("RC6 Encryption and Decryption Example")
    click.echo("====================================")

    cipher = RC6Cipher(_encode_text(key))
    plaintext = _encode_text(text)
    padded = zero_pad(plaintext) if plaintext else bytes(BLOCK_SIZE)

    click.echo(f"Original Text: {text}")
    click.echo(f"Key: {key}")

    click.echo("\nOriginal Bytes:")
    click.echo(format_byte_dump(padded))

    ciphertext = cipher.encrypt(padded)
    click.echo("\nEncrypted Bytes:")
    click.echo(format_byte_dump(ciphertext))

    decrypted = cipher.decrypt(ciphertext)
    click.echo("\nDecrypted Bytes:")
    click.echo(format_byte_dump(decrypted))

    decrypted_text = decrypted.decode("ascii", errors="replace").rstrip("\0")
    click.echo(f"\nDecrypted Text: {decrypted_text}")

    click.echo("\nVerification:")
    if decrypted[:len(plaintext)] == plaintext:
        click.echo("Decryption successful!")
    else:
        click.echo("Decryption failed!")
        sys.exit(1)


@main.command()
@key_options
@click.option("--text", type=str, default=None, help="Plaintext as ASCII text")
@click.option("--hex", "data_hex", type=str, default=None, help="Plaintext as hex bytes")
@click.option(
    "--padding",
    type=click.Choice(PADDING_CHOICES, case_sensitive=False),
    default="zero",
    help="Padding scheme applied before encryption (default: zero)",
)
@trace_options
def encrypt(
    key: str | None,
    key_hex: str | None,
    rounds: int,
    text: str | None,
    data_hex: str | None,
    padding: str,
    verbose: bool,
    trace_path: str | None,
) -> None:
    """Encrypt a message and print the ciphertext as hex."""
    key_bytes = _resolve_key(key, key_hex)
    plaintext = _resolve_input(text, data_hex)

    try:
        config = CipherConfig(rounds=rounds)
        if padding.lower() != "none":
            plaintext = pad(plaintext, padding)
        with _tracer(verbose, trace_path) as tracer:
            cipher = RC6Cipher(key_bytes, config=config, tracer=tracer)
            if verbose:
                print_header(f"RC6-32/{rounds} Encryption")
            ciphertext = cipher.encrypt(plaintext)
    except (RC6Error, ValueError) as e:
        _fail(str(e))

    if verbose:
        print_result(bytes_to_hex(ciphertext), len(ciphertext) // BLOCK_SIZE)
    else:
        click.echo(bytes_to_hex(ciphertext))


@main.command()
@key_options
@click.option("--hex", "data_hex", type=str, required=True, help="Ciphertext as hex bytes")
@click.option(
    "--padding",
    type=click.Choice(PADDING_CHOICES, case_sensitive=False),
    default="none",
    help="Padding scheme to remove after decryption (default: none)",
)
@click.option("--as-text", is_flag=True, help="Print the plaintext as ASCII text")
@trace_options
def decrypt(
    key: str | None,
    key_hex: str | None,
    rounds: int,
    data_hex: str,
    padding: str,
    as_text: bool,
    verbose: bool,
    trace_path: str | None,
) -> None:
    """Decrypt a hex ciphertext."""
    key_bytes = _resolve_key(key, key_hex)
    ciphertext = _resolve_input(None, data_hex)

    try:
        config = CipherConfig(rounds=rounds)
        with _tracer(verbose, trace_path) as tracer:
            cipher = RC6Cipher(key_bytes, config=config, tracer=tracer)
            if verbose:
                print_header(f"RC6-32/{rounds} Decryption")
            plaintext = cipher.decrypt(ciphertext)
        if padding.lower() != "none":
            plaintext = unpad(plaintext, padding)
    except (RC6Error, ValueError) as e:
        _fail(str(e))

    if as_text:
        click.echo(plaintext.decode("ascii", errors="replace"))
    else:
        click.echo(bytes_to_hex(plaintext))


@main.command()
@key_options
def subkeys(key: str | None, key_hex: str | None, rounds: int) -> None:
    """Print the round subkeys derived from a key."""
    key_bytes = _resolve_key(key, key_hex)
    try:
        cipher = RC6Cipher(key_bytes, config=CipherConfig(rounds=rounds))
    except (RC6Error, ValueError) as e:
        _fail(str(e))

    click.echo(f"Key: {bytes_to_hex(key_bytes) or '(empty)'} ({len(key_bytes)} bytes)")
    click.echo(f"Rounds: {rounds}, subkeys: {len(cipher.subkeys)}")
    for i, word in enumerate(cipher.subkeys):
        click.echo(f"  S[{i:2d}] = 0x{word:08x}")


@main.command()
@click.option(
    "--n",
    "num_tests",
    type=int,
    default=100,
    help="Number of random round-trip tests (default: 100)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for reproducibility",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show detailed output",
)
def validate(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Check known-answer vectors and random round trips."""
    click.echo("Running known-answer tests...")
    kat_passed = 0

    for i, vec in enumerate(KNOWN_ANSWER_VECTORS):
        ok, detail = validate_against_vector(vec)
        if ok:
            kat_passed += 1
            if verbose:
                click.echo(f"  KAT {i+1} ({vec['source']}): PASS")
        else:
            click.echo(f"  KAT {i+1} ({vec['source']}): FAIL - {detail}")

    click.echo(f"Known-answer tests: {kat_passed}/{len(KNOWN_ANSWER_VECTORS)} passed")

    click.echo(f"\nRunning {num_tests} random round trips...")

    if seed is not None:
        rng = random.Random(seed)
        random_bytes = lambda n: bytes(rng.randint(0, 255) for _ in range(n))
        random_length = lambda a, b: rng.randint(a, b)
    else:
        random_bytes = secrets.token_bytes
        random_length = lambda a, b: a + secrets.randbelow(b - a + 1)

    random_passed = 0
    for i in range(num_tests):
        key = random_bytes(random_length(0, 32))
        pt = random_bytes(BLOCK_SIZE * random_length(1, 4))

        cipher = RC6Cipher(key)
        rt = cipher.decrypt(cipher.encrypt(pt))
        if rt == pt:
            random_passed += 1
        elif verbose:
            click.echo(f"  Random test {i+1}: FAIL - key={key.hex()} pt={pt.hex()}")

    click.echo(f"Random round trips: {random_passed}/{num_tests} passed")

    total_passed = kat_passed + random_passed
    total_tests = len(KNOWN_ANSWER_VECTORS) + num_tests

    click.echo("")
    if total_passed == total_tests:
        click.echo(f"VALIDATION PASSED: All {total_tests} tests passed")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {total_tests - total_passed} failures")
        sys.exit(1)


if __name__ == "__main__":
    main()
