"""
MindTrack Canonical Hashing
Single source of truth for deterministic hashes of JSON-like payloads.
"""

import hashlib
import json
from typing import Any

HASH_PREFIX = "sha256:"


def canonicalize(obj: Any) -> str:
    """
    Convert object to canonical JSON string.
    Deterministic: same input always produces same output.
    """
    def _clean(o: Any) -> Any:
        if isinstance(o, dict):
            return {str(k): _clean(v) for k, v in sorted(o.items(), key=lambda kv: str(kv[0]))}
        elif isinstance(o, (list, tuple)):
            return [_clean(i) for i in o]
        elif isinstance(o, float):
            # Normalize floats to avoid precision issues
            return round(o, 10)
        return o

    return json.dumps(_clean(obj), sort_keys=True, separators=(',', ':'), ensure_ascii=True)


def canonicalize_and_hash(obj: Any) -> str:
    """
    Returns: "sha256:<64-char-hex>"
    """
    digest = hashlib.sha256(canonicalize(obj).encode('utf-8')).hexdigest()
    return f"{HASH_PREFIX}{digest}"


def extract_hash_digest(full_hash: str) -> str:
    """
    "sha256:abc123..." -> "abc123..."
    """
    if full_hash.startswith(HASH_PREFIX):
        return full_hash[len(HASH_PREFIX):]
    return full_hash


def hash_to_unit_interval(obj: Any) -> float:
    """
    Map an object onto [0.0, 1.0] through its canonical hash.

    Uses the first 8 hex digits (32 bits) of the digest, so equal inputs
    always land on the same point.
    """
    digest = extract_hash_digest(canonicalize_and_hash(obj))
    return int(digest[:8], 16) / 0xFFFFFFFF
