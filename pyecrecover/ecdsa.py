import pyecrecover.rfc6979
import pyecrecover.secp256k1
import typing


def sign(prikey: pyecrecover.secp256k1.Fr, m: bytearray) -> typing.Tuple[pyecrecover.secp256k1.Fr, pyecrecover.secp256k1.Fr]:
    # https://www.secg.org/sec1-v2.pdf
    # 4.1.3 Signing Operation. The ephemeral key k is derived from the private key and the message hash as described
    # in rfc 6979, so the same pair always produces the same signature.
    e = pyecrecover.secp256k1.Fr(int.from_bytes(m))
    for n in pyecrecover.rfc6979.nonce(prikey.x, m):
        k = pyecrecover.secp256k1.Fr(n)
        R = pyecrecover.secp256k1.G * k
        r = pyecrecover.secp256k1.Fr(R.x.x)
        if r.x == 0:
            continue
        s = (e + prikey * r) / k
        if s.x == 0:
            continue
        return r, s


def verify(pubkey: pyecrecover.secp256k1.Pt, m: bytearray, r: int, s: int) -> bool:
    # https://www.secg.org/sec1-v2.pdf
    # 4.1.4 Verifying Operation
    if not 0 < r < pyecrecover.secp256k1.N:
        return False
    if not 0 < s < pyecrecover.secp256k1.N:
        return False
    e = pyecrecover.secp256k1.Fr(int.from_bytes(m))
    a = e / pyecrecover.secp256k1.Fr(s)
    b = pyecrecover.secp256k1.Fr(r) / pyecrecover.secp256k1.Fr(s)
    R = pyecrecover.secp256k1.mul2(pyecrecover.secp256k1.G, a, pubkey, b)
    if R == pyecrecover.secp256k1.I:
        return False
    return pyecrecover.secp256k1.Fr(R.x.x).x == r


def pubkey(
    m: bytearray,
    R: pyecrecover.secp256k1.Pt,
    r: pyecrecover.secp256k1.Fr,
    s: pyecrecover.secp256k1.Fr,
) -> pyecrecover.secp256k1.Pt:
    # https://www.secg.org/sec1-v2.pdf
    # 4.1.6 Public Key Recovery Operation. Computes Q = r⁻¹(sR - eG). R is the point whose x coordinate is r (or r + n)
    # and whose y parity is given by the recovery byte.
    e = pyecrecover.secp256k1.Fr(int.from_bytes(m))
    return pyecrecover.secp256k1.mul2(R, s, pyecrecover.secp256k1.G, -e) / r
