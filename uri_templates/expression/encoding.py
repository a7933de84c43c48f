"""Percent-encoding helpers used by the expansion engine."""

import re
from urllib.parse import quote


# RFC 3986 gen-delims and sub-delims
RESERVED_CHARACTERS = ":/?#[]@!$&'()*+,;="

_DECODE_RESERVED = {f'%{ord(char):02X}': char for char in RESERVED_CHARACTERS}
_ENCODED_RESERVED_PATTERN = re.compile('|'.join(re.escape(code) for code in _DECODE_RESERVED))


def encode(value: str) -> str:
    """
    Percent-encode everything outside the unreserved set (ALPHA / DIGIT / -._~).

    Non-ASCII characters are encoded from their UTF-8 bytes.

    Examples:
        >>> encode('Hello World!')
        'Hello%20World%21'
    """
    return quote(value, safe='')


def decode_reserved(value: str) -> str:
    """
    Reverse the percent-encoding of reserved characters only.

    Examples:
        >>> decode_reserved('%2Ffoo%2Fbar%20baz')
        '/foo/bar%20baz'
    """
    return _ENCODED_RESERVED_PATTERN.sub(lambda match: _DECODE_RESERVED[match.group(0)], value)


def encode_value(value: str, allow_reserved: bool = False) -> str:
    """Encode a value, leaving reserved characters literal when allowed."""
    encoded = encode(value)
    if allow_reserved:
        return decode_reserved(encoded)
    return encoded
