import pytest

from forkaddr.address import AddressType, decode, encode
from forkaddr.errors import InvalidVersionByte, UnknownNetwork
from forkaddr.networks import NETWORKS, get_network

def test_get_network():
    net = get_network("bitcoincash")
    assert net.prefix == "bitcoincash"
    assert net.prefixes == ("bitcoincash",)
    assert get_network("bitcoincash-testnet").prefix == "bchtest"

def test_unknown_network():
    with pytest.raises(UnknownNetwork, match="unknown network 'dogecash'"):
        get_network("dogecash")

def test_prefixes_are_lowercase():
    for net in NETWORKS.values():
        assert all(p == p.lower() and ":" not in p for p in net.prefixes)

def test_legacy_vbytes():
    net = get_network("bitcoincash")
    assert net.legacy_vbyte(AddressType.PUBKEY_HASH) == b"\x00"
    assert net.legacy_vbyte(AddressType.SCRIPT_HASH) == b"\x05"
    assert net.address_type(b"\x05") is AddressType.SCRIPT_HASH
    with pytest.raises(InvalidVersionByte):
        net.address_type(b"\x6f")

@pytest.mark.parametrize("name", sorted(NETWORKS))
def test_prefixless_decode_with_network_prefixes(name):
    net = NETWORKS[name]
    bare = encode(bytes(range(20)), AddressType.PUBKEY_HASH, net.prefix, False)
    assert decode(bare, net.prefixes).prefix == net.prefix
