import builtins
import hashlib
import json
import pyecrecover.config
import pyecrecover.der
import pyecrecover.ecdsa
import pyecrecover.error
import pyecrecover.objectdict
import pyecrecover.secp256k1
import secrets
import string
import typing

# A recovery byte tells ecrecover which of the four points sharing the signature's r is R. Bit 0 is the parity of the
# y coordinate of R (0 = even), bit 1 tells whether the x coordinate of R is r + n instead of r.
recovery_byte_list = [0x1b, 0x1c, 0x1d, 0x1e]


def hash(data: bytearray) -> bytearray:
    return bytearray(hashlib.sha256(data).digest())


def message(data: bytearray | str) -> bytearray:
    # Strings are signed and verified through their utf-8 encoding.
    if isinstance(data, str):
        return bytearray(data.encode())
    return bytearray(data)


def hexdigits(data: str) -> bool:
    # Bare hex digits only: no 0x prefix, no underscores, no whitespace.
    return len(data) != 0 and all(c in string.hexdigits for c in data)


def signature_decode(data: bytearray | str) -> bytearray:
    # Signatures travel as lowercase hex strings, optionally prefixed by the recovery byte.
    if isinstance(data, str):
        if data and not hexdigits(data):
            raise pyecrecover.error.SignatureDecodingError(f'signature is not hex: {data!r}')
        try:
            return bytearray.fromhex(data)
        except ValueError as e:
            raise pyecrecover.error.SignatureDecodingError(f'signature is not hex: {data!r}') from e
    return bytearray(data)


def zero_pad(curve: pyecrecover.objectdict.ObjectDict, x: int) -> str:
    # The width comes from the curve order, not from x, so that all encodings of all points have the same length.
    if x.bit_length() > curve.n.bit_length():
        raise pyecrecover.error.ComponentOutOfRange('input cannot have more bits than the curve modulus')
    return f'{x:0{pyecrecover.config.width(curve)}x}'


def point_encode_x(curve: pyecrecover.objectdict.ObjectDict, x: int, y_even: bool) -> str:
    if y_even:
        return '02' + zero_pad(curve, x)
    return '03' + zero_pad(curve, x)


def point_encode(curve: pyecrecover.objectdict.ObjectDict, pt: pyecrecover.secp256k1.Pt, compressed: bool = True) -> str:
    # X.509 / SEC 1 point encoding, as hex.
    # https://www.secg.org/sec1-v2.pdf
    # 2.3.3 Elliptic-Curve-Point-to-Octet-String Conversion
    if compressed:
        return point_encode_x(curve, pt.x.x, pt.y.x & 1 == 0)
    return '04' + zero_pad(curve, pt.x.x) + zero_pad(curve, pt.y.x)


def point_decode(curve: pyecrecover.objectdict.ObjectDict, data: str) -> pyecrecover.secp256k1.Pt:
    # https://www.secg.org/sec1-v2.pdf
    # 2.3.4 Octet-String-to-Elliptic-Curve-Point Conversion
    if not hexdigits(data):
        raise pyecrecover.error.PointDecodingError(f'point is not hex: {data!r}')
    n = int(data, 16)
    if n == 0:
        raise pyecrecover.error.PointDecodingError(f'unrecognized point encoding: {data!r}')
    b = bytearray(n.to_bytes((n.bit_length() + 7) // 8))
    size = (curve.p.bit_length() + 7) // 8
    if b[0] in [0x02, 0x03] and len(b) == 1 + size:
        x = int.from_bytes(b[1:])
        if x >= curve.p:
            raise pyecrecover.error.PointDecodingError('x coordinate is not a field element')
        x = pyecrecover.secp256k1.Fq(x)
        y = pyecrecover.secp256k1.sqrt(x * x * x + pyecrecover.secp256k1.A * x + pyecrecover.secp256k1.B)
        if y is None:
            raise pyecrecover.error.PointDecodingError('x coordinate has no point on the curve')
        if y.x & 1 != b[0] - 2:
            y = -y
        return pyecrecover.secp256k1.Pt(x, y)
    if b[0] == 0x04 and len(b) == 1 + 2 * size:
        x = int.from_bytes(b[1:1 + size])
        y = int.from_bytes(b[1 + size:])
        if x >= curve.p or y >= curve.p:
            raise pyecrecover.error.PointDecodingError('coordinate is not a field element')
        if x == 0 and y == 0:
            raise pyecrecover.error.PointDecodingError('point at infinity')
        try:
            return pyecrecover.secp256k1.Pt(pyecrecover.secp256k1.Fq(x), pyecrecover.secp256k1.Fq(y))
        except pyecrecover.error.InvalidPointError as e:
            raise pyecrecover.error.PointDecodingError(str(e)) from e
    raise pyecrecover.error.PointDecodingError(f'unrecognized point encoding: {data!r}')


class PriKey:
    def __init__(self, n: int, curve: pyecrecover.objectdict.ObjectDict = pyecrecover.config.secp256k1) -> None:
        if not 1 <= n < curve.n:
            raise pyecrecover.error.InvalidPrivateKey('private key must be in [1, n)')
        self.n = n
        self.curve = curve

    def __repr__(self) -> str:
        return json.dumps(self.json())

    def __str__(self) -> str:
        return self.hex()

    def __eq__(self, other: object) -> bool:
        assert isinstance(other, PriKey)
        return all([
            self.curve == other.curve,
            self.n == other.n,
        ])

    def __hash__(self) -> int:
        return builtins.hash((self.curve, self.n))

    def json(self) -> typing.Dict:
        return {
            'curve': self.curve.name,
            'n': f'{self.n:064x}',
        }

    def hex(self) -> str:
        return f'{self.n:x}'

    @classmethod
    def hex_decode(cls, data: str, curve: pyecrecover.objectdict.ObjectDict = pyecrecover.config.secp256k1) -> typing.Self:
        if not hexdigits(data):
            raise pyecrecover.error.InvalidPrivateKey(f'private key is not hex: {data!r}')
        return cls(int(data, 16), curve)

    def pubkey(self) -> 'PubKey':
        pubkey = pyecrecover.secp256k1.G * pyecrecover.secp256k1.Fr(self.n)
        return PubKey.pt_decode(pubkey, self.curve)

    @classmethod
    def random(cls, curve: pyecrecover.objectdict.ObjectDict = pyecrecover.config.secp256k1) -> typing.Self:
        return cls(secrets.randbelow(curve.n - 1) + 1, curve)

    def recovery_byte(self, digest: bytearray, r: int, s: int) -> typing.Optional[int]:
        # Try every recovery byte in order and keep the first one that leads back to this key. Candidates that can not
        # be reconstructed at all simply do not match.
        pubkey = self.pubkey()
        for e in recovery_byte_list:
            try:
                candidate = PubKey.ecrecover(digest, e, r, s, self.curve)
            except pyecrecover.error.Error:
                continue
            if candidate == pubkey:
                return e
        return None

    def sign(self, data: bytearray | str, recovery: bool = False) -> str:
        return self.sign_digest(hash(message(data)), recovery)

    def sign_digest(self, digest: bytearray, recovery: bool = False) -> str:
        assert len(digest) == 32
        r, s = pyecrecover.ecdsa.sign(pyecrecover.secp256k1.Fr(self.n), digest)
        sig = pyecrecover.der.encode(r.x, s.x)
        if recovery:
            v = self.recovery_byte(digest, r.x, s.x)
            if v is None:
                raise pyecrecover.error.RecoveryByteNotFound('could not find recovery byte')
            sig = bytearray([v]) + sig
        return sig.hex()


class PubKey:
    def __init__(self, x: int, y: int, curve: pyecrecover.objectdict.ObjectDict = pyecrecover.config.secp256k1) -> None:
        # The public key must be on the curve, and must not be the point at infinity.
        if not 0 <= x < curve.p or not 0 <= y < curve.p:
            raise pyecrecover.error.InvalidPointError('coordinate is not a field element')
        if x == 0 and y == 0:
            raise pyecrecover.error.InvalidPointError('public key is the point at infinity')
        _ = pyecrecover.secp256k1.Pt(pyecrecover.secp256k1.Fq(x), pyecrecover.secp256k1.Fq(y))
        self.x = x
        self.y = y
        self.curve = curve

    def __repr__(self) -> str:
        return json.dumps(self.json())

    def __str__(self) -> str:
        return self.hex()

    def __eq__(self, other: object) -> bool:
        assert isinstance(other, PubKey)
        return all([
            self.curve == other.curve,
            self.x == other.x,
            self.y == other.y,
        ])

    def __hash__(self) -> int:
        return builtins.hash((self.curve, self.x, self.y))

    def json(self) -> typing.Dict:
        return {
            'curve': self.curve.name,
            'x': f'{self.x:064x}',
            'y': f'{self.y:064x}',
        }

    def hex(self, compressed: bool = True) -> str:
        return point_encode(self.curve, self.pt(), compressed)

    @classmethod
    def hex_decode(cls, data: str, curve: pyecrecover.objectdict.ObjectDict = pyecrecover.config.secp256k1) -> typing.Self:
        return cls.pt_decode(point_decode(curve, data), curve)

    def pt(self) -> pyecrecover.secp256k1.Pt:
        return pyecrecover.secp256k1.Pt(pyecrecover.secp256k1.Fq(self.x), pyecrecover.secp256k1.Fq(self.y))

    @classmethod
    def pt_decode(
        cls,
        data: pyecrecover.secp256k1.Pt,
        curve: pyecrecover.objectdict.ObjectDict = pyecrecover.config.secp256k1,
    ) -> typing.Self:
        return cls(data.x.x, data.y.x, curve)

    def verify(self, data: bytearray | str, sig: bytearray | str) -> bool:
        return self.verify_digest(hash(message(data)), sig)

    def verify_digest(self, digest: bytearray, sig: bytearray | str) -> bool:
        sig = signature_decode(sig)
        if len(sig) == 0:
            raise pyecrecover.error.UnrecognizedSignatureFormat('signature is empty')
        if sig[0] in recovery_byte_list:
            return self == PubKey.recover_digest(digest, sig, self.curve)
        if sig[0] == pyecrecover.der.tag:
            r, s = pyecrecover.der.decode(sig)
            return pyecrecover.ecdsa.verify(self.pt(), digest, r, s)
        raise pyecrecover.error.UnrecognizedSignatureFormat(f'unrecognized signature format: 0x{sig[0]:02x}')

    @classmethod
    def ecrecover(
        cls,
        digest: bytearray,
        recovery_byte: int,
        r: int,
        s: int,
        curve: pyecrecover.objectdict.ObjectDict = pyecrecover.config.secp256k1,
    ) -> typing.Self:
        # https://www.secg.org/sec1-v2.pdf
        # 4.1.6 Public Key Recovery Operation
        if recovery_byte not in recovery_byte_list:
            raise pyecrecover.error.InvalidRecoveryByte('recovery byte must be 0x1b, 0x1c, 0x1d or 0x1e')
        for name, e in [('r', r), ('s', s)]:
            if e <= 0 or e % curve.n == 0 or len(f'{e:x}') > pyecrecover.config.width(curve):
                raise pyecrecover.error.ComponentOutOfRange(f'{name} component out of range')
        y_even = ((recovery_byte - 0x1b) & 1) == 0
        second = ((recovery_byte - 0x1b) >> 1) == 1
        # 1.1 Let x = r + jn.
        x = r
        if second:
            if r < curve.p % curve.n:
                raise pyecrecover.error.NoSecondKeyCandidate('unable to find second key candidate')
            x = r + curve.n
        # 1.2 - 1.3 Convert x to the point R through the compressed point decoder.
        R = point_decode(curve, point_encode_x(curve, x, y_even))
        # 1.6.1 Q = r⁻¹(sR - eG)
        Q = pyecrecover.ecdsa.pubkey(digest, R, pyecrecover.secp256k1.Fr(x), pyecrecover.secp256k1.Fr(s))
        return cls.pt_decode(Q, curve)

    @classmethod
    def recover(
        cls,
        data: bytearray | str,
        sig: bytearray | str,
        curve: pyecrecover.objectdict.ObjectDict = pyecrecover.config.secp256k1,
    ) -> typing.Self:
        return cls.recover_digest(hash(message(data)), sig, curve)

    @classmethod
    def recover_digest(
        cls,
        digest: bytearray,
        sig: bytearray | str,
        curve: pyecrecover.objectdict.ObjectDict = pyecrecover.config.secp256k1,
    ) -> typing.Self:
        # The signature must carry its recovery byte in front of the der sequence.
        sig = signature_decode(sig)
        if len(sig) == 0:
            raise pyecrecover.error.UnrecognizedSignatureFormat('signature is empty')
        if sig[0] not in recovery_byte_list:
            raise pyecrecover.error.InvalidRecoveryByte(f'recovery byte must be 0x1b, 0x1c, 0x1d or 0x1e, got 0x{sig[0]:02x}')
        r, s = pyecrecover.der.decode(sig[1:])
        return cls.ecrecover(digest, sig[0], r, s, curve)
