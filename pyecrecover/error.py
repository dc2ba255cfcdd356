class Error(Exception):
    # Base class of every error raised by this package.
    pass


class InvalidRecoveryByte(Error):
    # Recovery byte outside 0x1b, 0x1c, 0x1d and 0x1e.
    pass


class ComponentOutOfRange(Error):
    # A signature component or coordinate is wider than the curve order.
    pass


class NoSecondKeyCandidate(Error):
    # A second key candidate was requested but r < p mod n.
    pass


class RecoveryByteNotFound(Error):
    # No recovery byte reproduces the signer's own public key. This is a bug in the arithmetic, not a caller error.
    pass


class UnrecognizedSignatureFormat(Error):
    # The leading byte is neither a recovery byte nor the der sequence tag.
    pass


class SignatureDecodingError(Error):
    pass


class PointDecodingError(Error):
    pass


class InvalidPointError(Error):
    # The point is not on the curve, or is the point at infinity where a public key is expected.
    pass


class InvalidPrivateKey(Error):
    # Private key scalar outside [1, n).
    pass
