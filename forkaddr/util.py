"Small utility module for some common functions"

from .errors import InvalidArgument, InvalidPadding

def convertbits(data, frombits: int, tobits: int, strict: bool = False) -> list:
    r"""
    Convert an iterable of non-negative integers `data` from base
    :math:`2^\mathrm{frombits}` to a list of base :math:`2^\mathrm{tobits}`
    symbols.

    Raises :class:`~forkaddr.errors.InvalidArgument` if any value of `data` does
    not fit in `frombits` bits. When `strict` is ``False`` leftover bits are
    zero-padded into one final symbol. When `strict` is ``True`` the input must
    regroup canonically: leftover bits must be fewer than `frombits` and all
    zero, otherwise :class:`~forkaddr.errors.InvalidPadding` is raised.

    >>> convertbits(b"\xff", 8, 5)
    [31, 28]
    >>> convertbits([31, 28], 5, 8, strict=True)
    [255]
    """
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or (value >> frombits):
            raise InvalidArgument(
                f"value {value!r} does not fit in {frombits} bits"
            )
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            ret.append((acc >> bits) & maxv)
    if not strict:
        if bits:
            ret.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits:
        raise InvalidPadding(f"{bits} excess padding bits")
    elif (acc << (tobits - bits)) & maxv:
        raise InvalidPadding("non-zero padding bits")
    return ret
