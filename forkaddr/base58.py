r"""
This module provides the `base58 and base58check`_ codecs used by legacy
addresses on bitcoin-derived networks. Cashaddr replaced base58check on the
forks this package targets, but legacy strings are still in circulation and
:mod:`forkaddr.convert` translates between the two.

.. _base58 and base58check: https://en.bitcoin.it/wiki/Base58Check_encoding
"""

from hashlib import sha256

from .errors import InvalidCharacter, InvalidChecksum

#: Base58 Alphabet
ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'

def _checksum(b: bytes) -> bytes:
    return sha256(sha256(b).digest()).digest()[:4]

def b58enc(b: bytes, check: bool = False) -> str:
    r"""
    Encode :class:`bytes` `b` to a base58 string. If `check` is set, use
    base58check encoding (appends a 4 byte double-SHA256 checksum). A
    :class:`str` argument is UTF-8 encoded first.

    **Examples**:

    .. code-block:: python

        >>> txt = "The quick brown fox jumps over the lazy dog"
        >>> b58enc(txt)
        '7DdiPPYtxLjCD3wA1po2rvZHTDYjkZYiEtazrfiwJcwnKCizhGFhBGHeRdx'
        >>> b58enc(txt, True)
        'hgrbmYjTAB9gMSwZ6bUP86rvvhPkJzRkcqkmdZXXPyQCbXzuSLGmEDgmK4iSfhDR'
    """
    if isinstance(b, str):
        b = b.encode()
    if check:
        b += _checksum(b)
    i = int.from_bytes(b, 'big')
    leading_nulls = len(b) - len(b.lstrip(b'\0'))

    string = ''
    while i:
        i, idx = divmod(i, 58)
        string += ALPHABET[idx]
    string += ALPHABET[0] * leading_nulls
    return string[::-1]

def b58dec(s: str, check: bool = False) -> bytes:
    """
    Decode a base58 or base58check-encoded string `s` and return the decoded
    :class:`bytes` payload. If `check` is ``True`` the trailing 4 byte checksum
    is verified and stripped.

    Raises :class:`~forkaddr.errors.InvalidCharacter` for characters outside
    :data:`ALPHABET` and :class:`~forkaddr.errors.InvalidChecksum` if base58check
    validation fails.

    .. code-block:: python

        >>> b58dec("7DdiPPYtxLjCD3wA1po2rvZHTDYjkZYiEtazrfiwJcwnKCizhGFhBGHeRdx")
        b'The quick brown fox jumps over the lazy dog'
        >>> b58dec("hgrbmYjTAB9gMSwZ6bUP86rvvhPkJzRkcqkmdZXXPyQCbXzuSLGmEDgmK4iSfhDR", True)
        b'The quick brown fox jumps over the lazy dog'
    """
    s = s.rstrip('\n')
    i = 0
    for pos, char in enumerate(s):
        idx = ALPHABET.find(char)
        if idx < 0:
            raise InvalidCharacter(
                f"invalid base58 symbol '{char}' at position {pos}"
            )
        i = i * 58 + idx
    leading_ones = len(s) - len(s.lstrip(ALPHABET[0]))
    n = (i.bit_length() + 7) // 8
    pl = b'\0' * leading_ones + i.to_bytes(n, 'big')
    if check:
        if len(pl) < 4:
            raise InvalidChecksum(f"{s} is too short for base58check")
        pl, cs = pl[:-4], pl[-4:]
        if _checksum(pl) != cs:
            raise InvalidChecksum(f"{s} has invalid base58check checksum")
    return pl
