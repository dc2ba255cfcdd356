import pyecrecover
import pytest
import secrets

G_compressed = '0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
G_uncompressed = ''.join([
    '04',
    '79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798',
    '483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8',
])


def test_pubkey():
    prikey = pyecrecover.core.PriKey(1)
    pubkey = prikey.pubkey()
    assert pubkey.x == 0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798
    assert pubkey.y == 0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8
    assert pubkey.hex() == G_compressed
    assert pubkey.hex(False) == G_uncompressed
    assert str(pubkey) == G_compressed


def test_pubkey_odd():
    pubkey = pyecrecover.core.PriKey(2).pubkey()
    assert pubkey.hex() == '02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5'
    pubkey = pyecrecover.core.PriKey(pyecrecover.secp256k1.N - 1).pubkey()
    assert pubkey.hex() == '0379be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'


def test_pubkey_hex_decode():
    pubkey = pyecrecover.core.PriKey(1).pubkey()
    assert pyecrecover.core.PubKey.hex_decode(G_compressed) == pubkey
    assert pyecrecover.core.PubKey.hex_decode(G_uncompressed) == pubkey
    assert pyecrecover.core.PubKey.hex_decode(G_compressed) == pyecrecover.core.PubKey.hex_decode(G_uncompressed)
    for _ in range(4):
        pubkey = pyecrecover.core.PriKey.random().pubkey()
        assert len(pubkey.hex()) == 66
        assert len(pubkey.hex(False)) == 130
        assert pyecrecover.core.PubKey.hex_decode(pubkey.hex()) == pubkey
        assert pyecrecover.core.PubKey.hex_decode(pubkey.hex(False)) == pubkey


def test_pubkey_hex_decode_failure():
    for e in [
        'zz',
        '',
        '00',
        '05' + '00' * 32,
        '02' + 'ff' * 32,
        G_compressed[:-2],
        G_uncompressed[:-2] + 'b9',
        '04' + '00' * 64,
        '0x' + G_compressed,
        '0X' + G_compressed,
        G_compressed[:2] + '_' + G_compressed[2:],
        ' ' + G_compressed,
        G_compressed + '\n',
        '-' + G_compressed,
        '+' + G_compressed,
    ]:
        with pytest.raises(pyecrecover.error.PointDecodingError):
            pyecrecover.core.PubKey.hex_decode(e)


def test_pubkey_invalid():
    with pytest.raises(pyecrecover.error.InvalidPointError):
        pyecrecover.core.PubKey(pyecrecover.secp256k1.Gx, pyecrecover.secp256k1.Gy + 1)
    with pytest.raises(pyecrecover.error.InvalidPointError):
        pyecrecover.core.PubKey(0, 0)
    with pytest.raises(pyecrecover.error.InvalidPointError):
        pyecrecover.core.PubKey(pyecrecover.secp256k1.Gx + pyecrecover.secp256k1.P, pyecrecover.secp256k1.Gy)


def test_prikey():
    prikey = pyecrecover.core.PriKey(0xff)
    assert prikey.hex() == 'ff'
    assert str(prikey) == 'ff'
    assert pyecrecover.core.PriKey.hex_decode('ff') == prikey
    assert pyecrecover.core.PriKey.hex_decode('00ff') == prikey
    prikey = pyecrecover.core.PriKey.random()
    assert pyecrecover.core.PriKey.hex_decode(prikey.hex()) == prikey
    assert len({prikey, pyecrecover.core.PriKey(prikey.n)}) == 1


def test_prikey_invalid():
    for e in [0, -1, pyecrecover.secp256k1.N]:
        with pytest.raises(pyecrecover.error.InvalidPrivateKey):
            pyecrecover.core.PriKey(e)
    for e in ['xyz', '', '0xff', 'f_f', ' ff', 'ff\n', '+ff']:
        with pytest.raises(pyecrecover.error.InvalidPrivateKey):
            pyecrecover.core.PriKey.hex_decode(e)


def test_sign_verify():
    prikey = pyecrecover.core.PriKey.random()
    pubkey = prikey.pubkey()
    data = bytearray(secrets.token_bytes(64))
    sig = prikey.sign(data)
    assert sig[:2] == '30'
    assert sig == sig.lower()
    assert pubkey.verify(data, sig)
    assert pubkey.verify(data, bytearray.fromhex(sig))
    assert not pubkey.verify(data + bytearray([0x00]), sig)
    assert not pyecrecover.core.PriKey.random().pubkey().verify(data, sig)


def test_sign_verify_recovery():
    prikey = pyecrecover.core.PriKey.random()
    pubkey = prikey.pubkey()
    sig = prikey.sign('Hello World!', True)
    assert int(sig[:2], 16) in pyecrecover.core.recovery_byte_list
    assert sig[2:4] == '30'
    assert pubkey.verify('Hello World!', sig)
    assert pubkey.verify(b'Hello World!', sig)
    assert not pubkey.verify('Hello World?', sig)
    assert sig[2:] == prikey.sign('Hello World!')


def test_sign_deterministic():
    prikey = pyecrecover.core.PriKey.random()
    assert prikey.sign('Hello World!') == prikey.sign('Hello World!')
    assert prikey.sign('Hello World!', True) == prikey.sign('Hello World!', True)
    assert prikey.sign('Hello World!') != prikey.sign('Hello World?')


def test_sign_generator():
    prikey = pyecrecover.core.PriKey(1)
    pubkey = pyecrecover.core.PubKey.hex_decode(G_compressed)
    sig = prikey.sign('Satoshi Nakamoto', True)
    assert sig[:2] in ['1b', '1c']
    assert pubkey.verify('Satoshi Nakamoto', sig)
    assert pubkey.verify('Satoshi Nakamoto', sig[2:])
    assert pyecrecover.core.PubKey.recover('Satoshi Nakamoto', sig) == pubkey
    r, s = pyecrecover.der.decode(bytearray.fromhex(sig[2:]))
    assert r == 0x934b1ea10a4b3c1757e2b0c017d0b6143ce3c9a7e6a4a49860d7a6ab210ee3d8


def test_ecrecover():
    for _ in range(4):
        prikey = pyecrecover.core.PriKey.random()
        data = bytearray(secrets.token_bytes(32))
        sig = bytearray.fromhex(prikey.sign(data, True))
        r, s = pyecrecover.der.decode(sig[1:])
        digest = pyecrecover.core.hash(data)
        assert pyecrecover.core.PubKey.ecrecover(digest, sig[0], r, s) == prikey.pubkey()
        assert pyecrecover.core.PubKey.recover_digest(digest, sig) == prikey.pubkey()
        assert pyecrecover.core.PubKey.recover(data, sig.hex()) == prikey.pubkey()


def test_ecrecover_other_parity():
    prikey = pyecrecover.core.PriKey.random()
    data = bytearray(secrets.token_bytes(32))
    sig = bytearray.fromhex(prikey.sign(data, True))
    r, s = pyecrecover.der.decode(sig[1:])
    digest = pyecrecover.core.hash(data)
    # Flipping bit 0 selects -R, which leads to a different but valid key.
    pubkey = pyecrecover.core.PubKey.ecrecover(digest, 0x1b + ((sig[0] - 0x1b) ^ 1), r, s)
    assert pubkey != prikey.pubkey()


def test_ecrecover_invalid_recovery_byte():
    digest = pyecrecover.core.hash(bytearray())
    for e in [0x00, 0x1a, 0x1f, 0x30]:
        with pytest.raises(pyecrecover.error.InvalidRecoveryByte):
            pyecrecover.core.PubKey.ecrecover(digest, e, 1, 1)
    with pytest.raises(pyecrecover.error.InvalidRecoveryByte):
        pyecrecover.core.PubKey.recover_digest(digest, '1f3006020101020101')


def test_ecrecover_component_out_of_range():
    digest = pyecrecover.core.hash(bytearray())
    for r, s in [(0, 1), (1, 0), (1 << 256, 1), (1, 1 << 256), (pyecrecover.secp256k1.N, 1)]:
        with pytest.raises(pyecrecover.error.ComponentOutOfRange):
            pyecrecover.core.PubKey.ecrecover(digest, 0x1b, r, s)


def test_ecrecover_no_second_key_candidate():
    digest = pyecrecover.core.hash(bytearray())
    r = pyecrecover.secp256k1.P % pyecrecover.secp256k1.N - 1
    for e in [0x1d, 0x1e]:
        with pytest.raises(pyecrecover.error.NoSecondKeyCandidate):
            pyecrecover.core.PubKey.ecrecover(digest, e, 1, 1)
        with pytest.raises(pyecrecover.error.NoSecondKeyCandidate):
            pyecrecover.core.PubKey.ecrecover(digest, e, r, 1)


def test_ecrecover_second_key_past_field():
    # With r >= p mod n, r + n is at least p and can not be an x coordinate.
    digest = pyecrecover.core.hash(bytearray())
    r = pyecrecover.secp256k1.P % pyecrecover.secp256k1.N
    with pytest.raises(pyecrecover.error.PointDecodingError):
        pyecrecover.core.PubKey.ecrecover(digest, 0x1d, r, 1)


def test_recovery_byte():
    prikey = pyecrecover.core.PriKey.random()
    data = bytearray(secrets.token_bytes(32))
    sig = bytearray.fromhex(prikey.sign(data, True))
    r, s = pyecrecover.der.decode(sig[1:])
    digest = pyecrecover.core.hash(data)
    assert prikey.recovery_byte(digest, r, s) == sig[0]
    # A signature made by another key recovers to neither of the candidates of this key.
    assert pyecrecover.core.PriKey.random().recovery_byte(digest, r, s) is None


def test_verify_unrecognized_signature_format():
    pubkey = pyecrecover.core.PriKey(1).pubkey()
    sig = pyecrecover.core.PriKey(1).sign('Hello World!')
    for e in ['00' + sig, '1f' + sig, '31' + sig[2:], '']:
        with pytest.raises(pyecrecover.error.UnrecognizedSignatureFormat):
            pubkey.verify('Hello World!', e)


def test_verify_malformed_signature():
    pubkey = pyecrecover.core.PriKey(1).pubkey()
    with pytest.raises(pyecrecover.error.SignatureDecodingError):
        pubkey.verify('Hello World!', '3')
    with pytest.raises(pyecrecover.error.SignatureDecodingError):
        pubkey.verify('Hello World!', '3006020101')
    sig = pyecrecover.core.PriKey(1).sign('Hello World!')
    for e in ['0x' + sig, sig[:2] + ' ' + sig[2:], sig + '\n']:
        with pytest.raises(pyecrecover.error.SignatureDecodingError):
            pubkey.verify('Hello World!', e)


def test_ecrecover_digest_above_order():
    # The digest is taken as an integer e and is not reduced mod n before it enters Q = r⁻¹(sR - eG), and R is not
    # checked against the point at infinity. A digest above n still signs, verifies and recovers.
    digest = bytearray(b'\xff' * 32)
    assert int.from_bytes(digest) >= pyecrecover.secp256k1.N
    prikey = pyecrecover.core.PriKey.random()
    sig = prikey.sign_digest(digest, True)
    assert pyecrecover.core.PubKey.recover_digest(digest, sig) == prikey.pubkey()
    assert prikey.pubkey().verify_digest(digest, sig)
    assert prikey.pubkey().verify_digest(digest, sig[2:])
    # e and e mod n are the same scalar, so both digests lead to the same key.
    reduced = bytearray((int.from_bytes(digest) % pyecrecover.secp256k1.N).to_bytes(32))
    assert pyecrecover.core.PubKey.recover_digest(reduced, sig) == prikey.pubkey()


def test_equality():
    assert pyecrecover.core.PriKey(1) == pyecrecover.core.PriKey(1)
    assert pyecrecover.core.PriKey(1) != pyecrecover.core.PriKey(2)
    assert pyecrecover.core.PriKey(1).pubkey() == pyecrecover.core.PriKey(1).pubkey()
    assert pyecrecover.core.PriKey(1).pubkey() != pyecrecover.core.PriKey(2).pubkey()
    other = pyecrecover.objectdict.ObjectDict({**pyecrecover.config.secp256k1, 'name': 'other'})
    assert pyecrecover.core.PriKey(1) != pyecrecover.core.PriKey(1, other)
    assert pyecrecover.core.PriKey(1).pubkey() != pyecrecover.core.PriKey(1, other).pubkey()
