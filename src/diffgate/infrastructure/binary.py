"""Binary content probe.

Decides whether a file should be diffed as text. Looks at the first
BYTES_TO_READ bytes only:
  - empty file → text
  - byte order mark (UTF-8/16/32) → text
  - known binary signature (PDF) → binary
  - NUL byte → binary
  - valid UTF-8 → text
  - otherwise binary if more than 10% of bytes are control characters
"""

from __future__ import annotations

import codecs
from pathlib import Path

BYTES_TO_READ = 512
SUSPICIOUS_RATIO = 0.1

_TEXT_BOMS = (
    codecs.BOM_UTF8,
    codecs.BOM_UTF32_LE,
    codecs.BOM_UTF32_BE,
    codecs.BOM_UTF16_LE,
    codecs.BOM_UTF16_BE,
)
_BINARY_SIGNATURES = (b"%PDF-",)


def is_binary_bytes(sample: bytes) -> bool:
    """Classify a leading sample of file content."""
    if not sample:
        return False
    if sample.startswith(_TEXT_BOMS):
        return False
    if sample.startswith(_BINARY_SIGNATURES):
        return True
    if b"\x00" in sample:
        return True
    if _is_utf8(sample):
        return False

    suspicious = sum(1 for byte in sample if byte < 7 or 14 < byte < 32)
    return suspicious / len(sample) > SUSPICIOUS_RATIO


def is_binary_file(path: str | Path) -> bool:
    """Probe file content. Reads at most BYTES_TO_READ bytes.

    Raises:
        FileNotFoundError: Path missing.
    """
    with open(path, "rb") as handle:
        return is_binary_bytes(handle.read(BYTES_TO_READ))


def _is_utf8(sample: bytes) -> bool:
    """Valid UTF-8, tolerating a multibyte character cut at the sample end."""
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        decoder.decode(sample, final=False)
    except UnicodeDecodeError:
        return False
    return True
