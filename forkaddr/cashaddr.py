"""
This module provides the raw cashaddr_ codec: the base-32 alphabet, the BCH
checksum engine and an encoder/decoder for arbitrary binary payloads. It knows
nothing about version bytes, address types or hash sizes; those live in
:mod:`forkaddr.address`, which is built on top of the functions here.

About the Codec
...............

A cashaddr string consists of an optional human-readable prefix_ followed by a
colon ``:`` and the payload. The payload is the binary data regrouped into
5-bit symbols and written with the 32-character :data:`ALPHABET`, followed by
eight symbols of a 40-bit `BCH code`_ checksum_. The checksum is computed over
both the prefix and the payload, so a string is only valid together with the
prefix it was made for. That property is what allows the prefix to be omitted
from the string: the decoder tries each candidate prefix in turn and keeps the
first one under which the checksum validates.

Strings may be upper or lower case but never a mix of both. Encoded output is
always lower case.

.. _cashaddr: https://github.com/bitcoincashorg/bitcoincash.org/blob/master/spec/cashaddr.md
.. _BCH code: https://en.wikipedia.org/wiki/BCH_code
.. _prefix: https://github.com/bitcoincashorg/bitcoincash.org/blob/master/spec/cashaddr.md#prefix
.. _checksum: https://github.com/bitcoincashorg/bitcoincash.org/blob/master/spec/cashaddr.md#checksum
"""
import logging
import re

from .errors import InvalidCharacter, InvalidChecksum, InvalidFormat, MixedCase
from .util import convertbits

log = logging.getLogger(__name__)

#: cashaddr alphabet
ALPHABET = 'qpzry9x8gf2tvdw0s3jn54khce6mua7l'

_GEN = (0x98F2BC8E61, 0x79B76D99E2, 0xF33E5FB3C4, 0xAE2EABE2A8, 0x1E4F43E470)

#: number of checksum symbols at the end of every payload
CHECKSUM_LEN = 8


def polymod(data) -> int:
    "Return the 40-bit polymod of the 5-bit symbol sequence `data`"
    c = 1
    for d in data:
        c0 = c >> 35
        c = ((c & 0x07FFFFFFFF) << 5) ^ d
        for i in range(5):
            c ^= _GEN[i] if ((c0 >> i) & 1) else 0
    return c ^ 1

def b32decode(text: str) -> list:
    """
    Decode base32-encoded string `text` into a list of integers indicating the
    indices into the alphabet of the corresponding characters. Decoding is case
    insensitive. Raises :class:`~forkaddr.errors.InvalidCharacter` describing
    the value and position of the first character not in :data:`ALPHABET`.

    >>> b32decode("qpzRY")
    [0, 1, 2, 3, 4]
    >>> b32decode("alphabetsoup")
    Traceback (most recent call last):
      ...
    forkaddr.errors.InvalidCharacter: invalid base32 symbol 'b' at position 5
    """
    dec = [ALPHABET.find(x) for x in text.lower()]
    if -1 in dec:
        badloc = dec.index(-1)
        raise InvalidCharacter(
            f"invalid base32 symbol '{text[badloc]}' at position {badloc}"
        )
    return dec

def b32encode(data) -> str:
    r"""
    Encode `data` as base32-encoded :class:`str` using the cashaddr alphabet.
    Returns a :class:`str` of the same length as `data` such that

    .. code-block:: python

        output[i] == ALPHABET[input[i]]

    All values in `data` must be less than 32.

    >>> b32encode(b"\x0f\x02\x18\x02\n\x13\r\x02\x0f\x01")
    '0zcz2ndz0p'
    """
    return "".join([ALPHABET[x] for x in data])

def prefix_expand(prefix: str) -> list:
    """
    Return the low five bits of each character of `prefix` followed by a zero
    separator symbol. This is the prefix part of the `cashaddr checksum`_
    input.

    .. _cashaddr checksum: https://github.com/bitcoincashorg/bitcoincash.org/blob/master/spec/cashaddr.md#checksum
    """
    return [ord(x) & 0x1f for x in prefix] + [0]

def calculate_checksum(prefix: str, payload) -> list:
    """
    With a given prefix string `prefix`, and 5-bit payload symbols `payload`,
    return the eight cashaddr checksum symbols, most significant first.
    """
    poly = polymod(prefix_expand(prefix) + list(payload) + [0] * CHECKSUM_LEN)
    return [(poly >> 5 * (7 - i)) & 0x1f for i in range(CHECKSUM_LEN)]

def verify_checksum(prefix: str, data) -> bool:
    """
    With a given prefix string `prefix` and symbols `data` ending with the
    checksum, return ``True`` if the checksum is valid and ``False`` otherwise.
    """
    return polymod(prefix_expand(prefix) + list(data)) == 0

def split(s: str) -> tuple:
    """
    Split address string `s` into a lower-cased ``(prefix, payload)`` pair.
    `prefix` is ``None`` when `s` carries no ``prefix:`` part. Raises
    :class:`~forkaddr.errors.MixedCase` for mixed-case input and
    :class:`~forkaddr.errors.InvalidFormat` for more than one separator.
    """
    if s != s.lower() and s != s.upper():
        raise MixedCase(f"{s} has mixed case")
    pieces = s.lower().split(":")
    if len(pieces) > 2:
        raise InvalidFormat(f"{s} has invalid format")
    if len(pieces) == 1:
        return None, pieces[0]
    return pieces[0], pieces[1]

def unpack(s: str, prefixes=()) -> tuple:
    """
    Validate cashaddr string `s` and return ``(prefix, symbols)`` where
    `symbols` are the 5-bit payload symbols with the checksum removed.

    If `s` has an explicit prefix the checksum is validated against it and
    `prefixes` is ignored. Otherwise each candidate in `prefixes` is tried in
    order and the first one the checksum validates under is returned. Raises
    :class:`~forkaddr.errors.InvalidChecksum` if validation fails.
    """
    prefixes = tuple(prefixes)
    prefix, pltxt = split(s)
    data = b32decode(pltxt)
    if prefix is not None:
        if not verify_checksum(prefix, data):
            raise InvalidChecksum(f"{s} has invalid checksum")
    else:
        prefix = next((p for p in prefixes if verify_checksum(p, data)), None)
        if prefix is None:
            raise InvalidChecksum(
                f"{s} has invalid checksum for prefixes {list(prefixes)}"
            )
        log.debug("resolved prefix %r for %s", prefix, s)
    return prefix, data[:-CHECKSUM_LEN]

def cashenc(pl: bytes, prefix: str = "bitcoincash",
            include_prefix: bool = True) -> str:
    r"""
    Return the cashaddr :class:`str` representation of the binary payload
    :class:`bytes` `pl` using human-readable prefix `prefix`. The prefix is
    always part of the checksum but only written out if `include_prefix` is
    set.

    **Examples**:

    >>> pl = b'\x00z#M\xdf\xf0\xaeh\x1fe\xc4\x99\x9d\xad9\x9e\xae\xa2\x92\xca\t'
    >>> cashenc(pl)
    'bitcoincash:qpazxnwl7zhxs8m9cjvemtfen6h29yk2pyucpwmjvj'
    >>> cashenc(pl, "myprefix")
    'myprefix:qpazxnwl7zhxs8m9cjvemtfen6h29yk2py5arywdw5'
    >>> cashenc(pl, include_prefix=False)
    'qpazxnwl7zhxs8m9cjvemtfen6h29yk2pyucpwmjvj'
    """
    if ":" in prefix:
        raise InvalidFormat(f"prefix {prefix!r} contains a separator")
    prefix = prefix.lower()
    pl32 = convertbits(pl, 8, 5)
    encoded = b32encode(pl32 + calculate_checksum(prefix, pl32))
    return prefix + ":" + encoded if include_prefix else encoded

def cashdec(s: str, prefixes=()) -> bytes:
    r"""
    Decode cashaddr encoded string `s` and return the :class:`bytes` payload.
    When `s` omits its prefix, the candidate `prefixes` are tried in order
    (see :func:`unpack`). The payload must regroup to whole bytes with zero
    padding.

    **Examples**:

    >>> cashdec("bitcoincash:qpazxnwl7zhxs8m9cjvemtfen6h29yk2pyucpwmjvj")
    b'\x00z#M\xdf\xf0\xaeh\x1fe\xc4\x99\x9d\xad9\x9e\xae\xa2\x92\xca\t'
    >>> cashdec("qpazxnwl7zhxs8m9cjvemtfen6h29yk2py5arywdw5",
    ...         ["bitcoincash", "myprefix"])[:3]
    b'\x00z#'

    Raises :class:`~forkaddr.errors.InvalidChecksum` if the checksum fails

    >>> # Bad Character---------------------↓
    >>> cashdec("bitcoincash:qpazxnwl7zhxs8mncjvemtfen6h29yk2pyucpwmjvj")
    Traceback (most recent call last):
      ...
    forkaddr.errors.InvalidChecksum: bitcoincash:qpazxnwl7zhxs8mncjvemtfen6h29yk2pyucpwmjvj has invalid checksum
    """
    _, data = unpack(s, prefixes)
    return bytes(convertbits(data, 5, 8, strict=True))

def is_cashaddr(s: str) -> bool:
    """
    Return ``True`` if and only if string `s` is syntactically a cashaddr
    string: single-cased, an optional alphanumeric prefix and a payload drawn
    entirely from the :data:`ALPHABET`. Does not validate the checksum.
    """
    if s != s.lower() and s != s.upper():
        return False
    return bool(re.match(f"([a-z0-9]+:)?[{ALPHABET}]+$", s.lower()))
