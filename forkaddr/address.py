"""
Cashaddr addresses: a network prefix, an :class:`AddressType` and a hash,
encoded with the raw codec of :mod:`forkaddr.cashaddr`.

The payload of an address is a single version byte followed by the hash. The
version byte packs the address type into bits 3-6 and a hash size code into
bits 0-2::

    version = type_bits + SIZE_CODE[len(hash) * 8]

Both fields are recomputed from the hash and type on every encode and
validated again on every decode.

**Examples**:

>>> h = bytes.fromhex("F5BF48B397DAE70BE82B3CCA4793F8EB2B6CDAC9")
>>> encode(h)
'bitcoincash:qr6m7j9njldwwzlg9v7v53unlr4jkmx6eylep8ekg2'
>>> encode(h, AddressType.SCRIPT_HASH, "bchtest")
'bchtest:pr6m7j9njldwwzlg9v7v53unlr4jkmx6eyvwc0uz5t'
>>> addr = decode("pr6m7j9njldwwzlg9v7v53unlr4jkmx6eyvwc0uz5t",
...               ["bitcoincash", "bchtest"])
>>> addr.type, addr.prefix
(<AddressType.SCRIPT_HASH: 8>, 'bchtest')
>>> addr.hash == h
True
"""
from collections import namedtuple
from enum import IntEnum

from . import cashaddr
from .errors import (HashSizeMismatch, InvalidAddressType, InvalidVersionByte,
                     UnsupportedHashSize)
from .util import convertbits

#: Map of hash size in bits to version byte size code
SIZE_CODE = {160: 0, 192: 1, 224: 2, 256: 3, 320: 4, 384: 5, 448: 6, 512: 7}

#: Inverse of :data:`SIZE_CODE`
HASH_SIZE = {code: bits for bits, code in SIZE_CODE.items()}

_TYPE_MASK = 0x78
_SIZE_MASK = 0x07


class AddressType(IntEnum):
    "Address type. The value is the type field of the version byte."
    PUBKEY_HASH = 0
    SCRIPT_HASH = 8


def version_byte(type_, hash_: bytes) -> int:
    """
    Return the version byte for a hash `hash_` of address type `type_`. Raises
    :class:`~forkaddr.errors.UnsupportedHashSize` if the length of `hash_` has
    no size code and :class:`~forkaddr.errors.InvalidAddressType` if `type_` is
    not an :class:`AddressType` value.
    """
    try:
        size_code = SIZE_CODE[len(hash_) * 8]
    except KeyError:
        raise UnsupportedHashSize(
            f"unsupported hash size: {len(hash_)} bytes"
        ) from None
    try:
        type_ = AddressType(type_)
    except ValueError:
        raise InvalidAddressType(f"invalid address type: {type_!r}") from None
    return type_ + size_code

def parse_version_byte(vbyte: int, hash_: bytes) -> AddressType:
    """
    Check the version byte `vbyte` against the decoded hash `hash_` and return
    the :class:`AddressType` it carries.
    """
    if HASH_SIZE[vbyte & _SIZE_MASK] != len(hash_) * 8:
        raise HashSizeMismatch(
            f"version byte {vbyte:#04x} implies a "
            f"{HASH_SIZE[vbyte & _SIZE_MASK]} bit hash, got {len(hash_) * 8}"
        )
    try:
        return AddressType(vbyte & _TYPE_MASK)
    except ValueError:
        raise InvalidAddressType(
            f"invalid address type in version byte: {vbyte:#04x}"
        ) from None


class CashAddress(namedtuple("CashAddress", ["hash", "type", "prefix"])):

    """
    A decoded cashaddr address: the raw `hash` :class:`bytes`, its
    :class:`AddressType` and the network `prefix` its checksum validated
    under. ``str()`` gives the canonical, prefixed address string.
    """
    __slots__ = ()

    @classmethod
    def from_string(cls, s, prefixes=("bitcoincash",)):
        "Same as :func:`decode`"
        return decode(s, prefixes)

    def to_string(self, include_prefix=True):
        "Encode this address, optionally leaving out the prefix"
        return encode(self.hash, self.type, self.prefix, include_prefix)

    def __str__(self):
        return self.to_string()


def encode(hash_: bytes, type_=AddressType.PUBKEY_HASH,
           prefix: str = "bitcoincash", include_prefix: bool = True) -> str:
    """
    Return the cashaddr string of hash `hash_` with address type `type_` under
    network prefix `prefix`. The ``prefix:`` part is only written when
    `include_prefix` is set; the checksum always covers it.
    """
    vbyte = version_byte(type_, hash_)
    return cashaddr.cashenc(bytes([vbyte]) + hash_, prefix, include_prefix)

def decode(address: str, prefixes=("bitcoincash",)) -> CashAddress:
    """
    Decode cashaddr string `address` into a :class:`CashAddress`. If the string
    has no ``prefix:`` part, `prefixes` are tried in order and the first one
    the checksum validates under becomes the address prefix.

    Raises a :class:`~forkaddr.errors.CashaddrError` subclass describing the
    first problem found.
    """
    prefix, data = cashaddr.unpack(address, prefixes)
    payload = convertbits(data, 5, 8, strict=True)
    if not payload:
        raise InvalidVersionByte(f"{address} has no version byte")
    vbyte, hash_ = payload[0], bytes(payload[1:])
    return CashAddress(hash_, parse_version_byte(vbyte, hash_), prefix)
