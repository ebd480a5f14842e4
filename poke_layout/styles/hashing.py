"""Canonicalization and signature hashing for configuration records.

A configuration record is a flat mapping of primitive values. Its canonical
form is independent of key insertion order, and the signature is a short
non-cryptographic hash of that form, prefixed by the element kind so two
kinds with equal records never share a style entry.
"""

import hashlib
import json
from collections.abc import Mapping
from typing import Any, Literal

HashAlgorithm = Literal["djb2", "blake2b"]

DJB2_SEED = 5381
UINT32_MASK = 0xFFFFFFFF
ENTRY_SEPARATOR = "|"
BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(number: int) -> str:
    """Encode a non-negative integer in lowercase base36."""
    if number < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def render_value(value: Any) -> str:
    """Render a primitive the way a template literal would interpolate it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def canonicalize(record: Mapping[str, Any]) -> str:
    """Serialize a record as sorted ``key:value`` entries joined by ``|``.

    Args:
        record: Flat configuration record.

    Returns:
        Canonical string; equal for any permutation of the same entries.
    """
    entries = sorted(record.items(), key=lambda item: item[0])
    return ENTRY_SEPARATOR.join(f"{key}:{render_value(value)}" for key, value in entries)


def record_key(record: Mapping[str, Any]) -> str:
    """Unambiguous JSON form of a record.

    ``canonicalize`` does not escape ``|`` or ``:`` inside values, so two
    records can share a canonical string. This form cannot, and is what the
    registry compares when a signature is reused.
    """
    entries = sorted(record.items(), key=lambda item: item[0])
    return json.dumps(entries, separators=(",", ":"), default=str)


def hash_string(text: str) -> str:
    """djb2-xor rolling hash with 32-bit unsigned wraparound, base36 encoded."""
    h = DJB2_SEED
    for ch in text:
        h = ((h * 33) ^ ord(ch)) & UINT32_MASK
    return to_base36(h)


def hash_string_wide(text: str) -> str:
    """64-bit blake2b digest of the text, base36 encoded."""
    digest = hashlib.blake2b(text.encode("utf-8"), digest_size=8).digest()
    return to_base36(int.from_bytes(digest, "big"))


_HASHERS = {
    "djb2": hash_string,
    "blake2b": hash_string_wide,
}


def hash_canonical(canonical: str, algorithm: HashAlgorithm = "djb2") -> str:
    """Hash an already canonicalized record with the chosen algorithm."""
    try:
        hasher = _HASHERS[algorithm]
    except KeyError:
        raise ValueError(f"Unknown signature hash algorithm: {algorithm}") from None
    return hasher(canonical)


def generate_signature(
    record: Mapping[str, Any], algorithm: HashAlgorithm = "djb2"
) -> str:
    """Compute the order-independent hash of a configuration record.

    Args:
        record: Flat configuration record.
        algorithm: "djb2" (compact, collision-prone) or "blake2b" (wider).

    Returns:
        Opaque base36 signature string.
    """
    return hash_canonical(canonicalize(record), algorithm)


def element_signature(
    kind: str,
    record: Mapping[str, Any],
    prefix: str = "pc",
    algorithm: HashAlgorithm = "djb2",
) -> str:
    """Kind-prefixed signature, e.g. ``pc-box-1x2y3z``."""
    return f"{prefix}-{kind}-{generate_signature(record, algorithm)}"
