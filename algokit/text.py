"""Parsing helpers for address strings and delimited text."""

import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text):
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    return int(match.group(1))


@dataclass(frozen=True)
class IpAddress:
    """An address split into its host part and port."""

    ip: str
    port: int

    @classmethod
    def parse(cls, text):
        """Parse "host:port"; the port is the integer that leads the rest."""
        host, sep, rest = text.partition(":")
        if not sep:
            rest = text
        port_text = rest.partition(":")[0]
        return cls(host, _leading_int(port_text))


def split(text, delimiter):
    """Split text on a single-character delimiter, dropping an empty tail."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts