import ecdsa.der
import ecdsa.util
import pyecrecover.error
import pyecrecover.secp256k1
import typing

# Ecdsa-Sig-Value ::= SEQUENCE { r INTEGER, s INTEGER }
# Sequence tag, always the first byte of a der encoded signature.
tag = 0x30


def encode(r: int, s: int) -> bytearray:
    return bytearray(ecdsa.util.sigencode_der(r, s, pyecrecover.secp256k1.N))


def decode(data: bytearray) -> typing.Tuple[int, int]:
    try:
        return ecdsa.util.sigdecode_der(bytes(data), pyecrecover.secp256k1.N)
    except ecdsa.der.UnexpectedDER as e:
        raise pyecrecover.error.SignatureDecodingError(str(e)) from e
