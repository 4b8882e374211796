"Convert addresses between legacy and cashaddr format"

import argparse
import logging

from . import address
from .base58 import b58enc, b58dec
from .cashaddr import is_cashaddr
from .errors import CashaddrError, InvalidVersionByte, NetworkMismatch
from .networks import NETWORKS, get_network

log = logging.getLogger(__name__)


def convert_word(word, network="bitcoincash", include_prefix=True):
    """
    Parse a string `word` as an address of `network` (a name or a
    :class:`~forkaddr.networks.Network`) and return a tuple::

        (ivbyte, ovbyte, intype, legaddr, cashaddr)

    where `ivbyte` and `ovbyte` are the input and output version bytes,
    `intype` is ``"CASHAD"`` or ``"LEGACY"`` and `legaddr`, `cashaddr` are the
    two forms of the same address. Raises a
    :class:`~forkaddr.errors.CashaddrError` if `word` is not a valid address.
    """
    net = get_network(network) if isinstance(network, str) else network
    if is_cashaddr(word):
        addr = address.decode(word, net.prefixes)
        if addr.prefix not in net.prefixes:
            raise NetworkMismatch(
                f"{word} has prefix {addr.prefix!r}, not one of the "
                f"{net.name} prefixes {list(net.prefixes)}"
            )
        ivbyte = bytes([address.version_byte(addr.type, addr.hash)])
        ovbyte = net.legacy_vbyte(addr.type)
        legaddr = b58enc(ovbyte + addr.hash, True)
        return (ivbyte, ovbyte, "CASHAD", legaddr,
                addr.to_string(include_prefix))
    pl = b58dec(word, True)
    ivbyte, _hash = pl[:1], pl[1:]
    if not ivbyte:
        raise InvalidVersionByte(f"{word} has no version byte")
    type_ = net.address_type(ivbyte)
    cashaddr = address.encode(_hash, type_, net.prefix, include_prefix)
    ovbyte = bytes([address.version_byte(type_, _hash)])
    return ivbyte, ovbyte, "LEGACY", word, cashaddr

def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("file", nargs="?", default="-",
                        type=argparse.FileType('r'))
    parser.add_argument("-n", "--network", default="bitcoincash",
                        choices=sorted(NETWORKS),
                        help="network whose prefixes and version bytes to use")
    parser.add_argument("--no-prefix", action="store_true",
                        help="print cashaddr strings without the prefix")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
        format="%(levelname)s %(name)s: %(message)s",
    )
    txt = args.file.read()

    for lineno, line in enumerate(txt.split("\n")):
        for wordno, word in enumerate(line.split()):
            try:
                ivbyte, ovbyte, intype, legaddr, cashaddr = convert_word(
                    word, args.network, not args.no_prefix
                )
            except CashaddrError as e:
                log.info("line %d word %d not converted: %s", lineno, wordno, e)
                print(f"{'':14}ERROR  {word} {type(e).__name__}: {e}")
                continue
            print(
                f"{lineno:4d} {wordno:2d} "
                f"{ivbyte.hex().upper():2} {ovbyte.hex().upper():2} "
                f"{intype:<6} {legaddr:<34} {cashaddr}"
            )

if __name__ == "__main__":
    main()
