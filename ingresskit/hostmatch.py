"""Matching of host names against certificate common names."""

from __future__ import annotations

from typing import Iterable, Optional

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def to_lower_ascii(value: str) -> str:
    """Lower-case ASCII letters only, leaving other characters untouched."""
    return value.translate(_ASCII_LOWER)


def match_hostnames(pattern: str, host: str) -> bool:
    """Return True if host matches pattern; a leading ``*`` label matches any label."""
    host = host.removesuffix(".")
    pattern = pattern.removesuffix(".")
    if not pattern or not host:
        return False

    pattern_parts = pattern.split(".")
    host_parts = host.split(".")
    if len(pattern_parts) != len(host_parts):
        return False

    for position, (pattern_part, host_part) in enumerate(zip(pattern_parts, host_parts)):
        if position == 0 and pattern_part == "*":
            continue
        if pattern_part != host_part:
            return False
    return True


def is_host_valid(host: str, common_names: Optional[Iterable[str]]) -> bool:
    """Return True if any of the certificate's common names covers host."""
    if common_names is None:
        return False
    lowered = to_lower_ascii(host)
    return any(match_hostnames(to_lower_ascii(cn), lowered) for cn in common_names)