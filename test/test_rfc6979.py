import hashlib
import pyecrecover


def test_nonce():
    m = bytearray(hashlib.sha256(b'Satoshi Nakamoto').digest())
    k = next(pyecrecover.rfc6979.nonce(1, m))
    assert k == 0x8f8a276c19f4149656b280621e358cce24f5f52542772691ee69063b74f15d15


def test_nonce_deterministic():
    m = bytearray(hashlib.sha256(b'Satoshi Nakamoto').digest())
    a = pyecrecover.rfc6979.nonce(2, m)
    b = pyecrecover.rfc6979.nonce(2, m)
    assert [next(a) for _ in range(4)] == [next(b) for _ in range(4)]


def test_nonce_distinct_candidates():
    m = bytearray(hashlib.sha256(b'Satoshi Nakamoto').digest())
    g = pyecrecover.rfc6979.nonce(1, m)
    k = [next(g) for _ in range(4)]
    assert len(set(k)) == 4
    for e in k:
        assert 1 <= e < pyecrecover.secp256k1.N
