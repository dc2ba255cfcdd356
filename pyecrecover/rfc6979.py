import hashlib
import hmac
import itertools
import pyecrecover.secp256k1
import typing

# Deterministic Usage of the Digital Signature Algorithm (DSA) and Elliptic Curve Digital Signature Algorithm (ECDSA)
# https://datatracker.ietf.org/doc/html/rfc6979

qlen = pyecrecover.secp256k1.N.bit_length()
rlen = (qlen + 7) // 8


def mac(k: bytearray, v: bytearray) -> bytearray:
    return bytearray(hmac.new(k, v, hashlib.sha256).digest())


def bits2int(data: bytearray) -> int:
    # 2.3.2 Bit String to Integer
    x = int.from_bytes(data)
    blen = len(data) * 8
    if blen > qlen:
        x = x >> (blen - qlen)
    return x


def int2octets(x: int) -> bytearray:
    # 2.3.3 Integer to Octet String
    return bytearray(x.to_bytes(rlen))


def bits2octets(data: bytearray) -> bytearray:
    # 2.3.4 Bit String to Octet String
    z1 = bits2int(data)
    z2 = z1 % pyecrecover.secp256k1.N
    return int2octets(z2)


def nonce(prikey: int, data: bytearray) -> typing.Iterator[int]:
    # 3.2 Generation of k. Yields candidates in [1, n). A candidate rejected by the caller, because r or s turned out to
    # be zero, is followed by the next one.
    x = int2octets(prikey)
    h = bits2octets(data)
    v = bytearray([0x01] * 32)
    k = bytearray([0x00] * 32)
    k = mac(k, v + bytearray([0x00]) + x + h)
    v = mac(k, v)
    k = mac(k, v + bytearray([0x01]) + x + h)
    v = mac(k, v)
    for _ in itertools.repeat(0):
        t = bytearray()
        while len(t) < rlen:
            v = mac(k, v)
            t.extend(v)
        r = bits2int(t)
        if 1 <= r < pyecrecover.secp256k1.N:
            yield r
        k = mac(k, v + bytearray([0x00]))
        v = mac(k, v)
