"""
Address parameters of the supported forks: the cashaddr prefixes to try when an
address omits its prefix, and the legacy base58check version bytes used when
converting to and from legacy addresses.
"""
from collections import namedtuple

from .address import AddressType
from .errors import InvalidVersionByte, UnknownNetwork

class Network(namedtuple("Network", ["name", "prefixes", "pubkey_vbyte",
                                     "script_vbyte"])):
    """
    Address parameters of one network. `prefixes` is ordered: the first entry
    is the one written on encode and candidates are tried in this order on
    decode.
    """
    __slots__ = ()

    @property
    def prefix(self):
        'Canonical cashaddr prefix'
        return self.prefixes[0]

    def legacy_vbyte(self, type_):
        "Legacy version byte for an :class:`~forkaddr.address.AddressType`"
        if type_ == AddressType.SCRIPT_HASH:
            return self.script_vbyte
        return self.pubkey_vbyte

    def address_type(self, vbyte):
        "Inverse of :meth:`legacy_vbyte`"
        if vbyte == self.pubkey_vbyte:
            return AddressType.PUBKEY_HASH
        if vbyte == self.script_vbyte:
            return AddressType.SCRIPT_HASH
        raise InvalidVersionByte(
            f"legacy version byte {vbyte.hex()} is not used on {self.name}"
        )

NETWORKS = {n.name: n for n in [
    Network("bitcoincash", ("bitcoincash",), b"\x00", b"\x05"),
    Network("bitcoincash-testnet", ("bchtest",), b"\x6f", b"\xc4"),
    Network("bitcoincash-regtest", ("bchreg",), b"\x6f", b"\xc4"),
    Network("ecash", ("ecash",), b"\x00", b"\x05"),
    Network("ecash-testnet", ("ectest",), b"\x6f", b"\xc4"),
]}

def get_network(name: str) -> Network:
    "Return the :class:`Network` called `name`"
    try:
        return NETWORKS[name]
    except KeyError:
        raise UnknownNetwork(
            f"unknown network {name!r}, choose from {sorted(NETWORKS)}"
        ) from None
