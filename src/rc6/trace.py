"""
Trace recording and pretty printing for RC6 operations.

Contains:
- TraceRecorder: JSON Lines trace + simple verbose round output
- format_byte_dump: ASCII / HEX / DEC / word views of a buffer
- print_header / print_result: shared formatting helpers
"""

import json
from typing import Any, TextIO

from .words import format_words


def _fmt_words(words: list[int] | tuple[int, ...]) -> str:
    """Format A,B,C,D as 4 space-separated 8-digit hex words."""
    return " ".join(f"{w:08x}" for w in words)


# ------------------------------------------------------------------
# TraceRecorder
# ------------------------------------------------------------------

class TraceRecorder:
    """
    Records and outputs traces of RC6 block processing.

    Supports:
    - In-memory records   (always)
    - JSON Lines output   (when trace_file is set)
    - Verbose stdout      (one line per record)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """
        Record a trace entry.

        The cipher records at least 'direction', 'block', 'round',
        'operation' and 'words' (A, B, C, D after the operation).
        """
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, (bytes, bytearray)):
            return bytes(obj).hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        direction = record.get("direction", "?")
        block = record.get("block", 0)
        round_num = record.get("round", 0)
        operation = record.get("operation", "unknown")

        tag = "E" if direction == "encrypt" else "D"
        line = f"{tag} B{block:04d} R{round_num:02d}  {operation:12s}"
        if "words" in record:
            line += f" ABCD:{_fmt_words(record['words'])}"
        print(line)

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def format_byte_dump(data: bytes) -> str:
    """
    Format a buffer in four views: ASCII, HEX, DEC and 32-bit words.

    Zero bytes show as \\0 and other control bytes as \\<decimal> in
    the ASCII view.
    """
    ascii_parts = []
    for b in data:
        if b == 0:
            ascii_parts.append("\\0")
        elif b < 0x20 or 0x7F <= b < 0xA0:
            ascii_parts.append(f"\\{b}")
        else:
            ascii_parts.append(chr(b))

    lines = [
        "ASCII: " + " ".join(ascii_parts),
        "HEX: " + " ".join(f"{b:02X}" for b in data),
        "DEC: " + " ".join(str(b) for b in data),
        "32-bit Words (Little Endian):",
    ]
    words = format_words(data)
    if words:
        lines.append(words)
    return "\n".join(lines)


def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(ciphertext_hex: str, blocks: int, passed: bool | None = None) -> None:
    """Print final encryption result."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"Ciphertext: {ciphertext_hex}")
    print(f"Blocks: {blocks}")

    if passed is not None:
        status = "PASS" if passed else "FAIL"
        marker = "[OK]" if passed else "[ERROR]"
        print(f"Round trip: {marker} {status}")
    print(f"{'='*70}")
