"""
Exceptions raised by the :mod:`forkaddr` codecs. Every error signals
malformed input supplied by the caller; none of them are transient. All derive
from :class:`CashaddrError`, which is a :class:`ValueError`, so code that only
cares whether a string is a usable address can catch either.
"""

class CashaddrError(ValueError):
    "Base class for all address codec errors"

class InvalidCharacter(CashaddrError):
    "A character outside the codec alphabet was found"

class InvalidArgument(CashaddrError):
    "A value does not fit the declared bit width"

class InvalidPadding(CashaddrError):
    "Bit regrouping left non-zero or excess padding bits"

class MixedCase(CashaddrError):
    "Address string mixes upper and lower case characters"

class InvalidFormat(CashaddrError):
    "Address string has more than one prefix separator"

class InvalidChecksum(CashaddrError):
    "Checksum does not validate under any applicable prefix"

class UnsupportedHashSize(CashaddrError):
    "Hash length has no size code"

class InvalidVersionByte(CashaddrError):
    "Payload is too short to carry a version byte"

class HashSizeMismatch(CashaddrError):
    "Hash length disagrees with the size code in the version byte"

class InvalidAddressType(CashaddrError):
    "Type bits of the version byte name no known address type"

class UnknownNetwork(CashaddrError):
    "Network name is not in the network table"

class NetworkMismatch(CashaddrError):
    "Address prefix belongs to a different network than the one selected"
