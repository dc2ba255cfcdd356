import pyecrecover.error
import typing

# https://www.secg.org/sec2-v2.pdf
# 2.4.1 Recommended Parameters secp256k1

# Prime of finite field.
P = 0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f
# The order n of G.
N = 0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141
# The cofactor.
H = 1
# Coordinates of the base point G.
Gx = 0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798
Gy = 0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8


class Fp:
    # Galois field. In mathematics, a finite field or Galois field is a field that contains a finite number of elements.
    # As with any field, a finite field is a set on which the operations of multiplication, addition, subtraction and
    # division are defined and satisfy certain basic rules.
    #
    # https://www.cs.miami.edu/home/burt/learning/Csc609.142/ecdsa-cert.pdf
    # Don Johnson, Alfred Menezes and Scott Vanstone, The Elliptic Curve Digital Signature Algorithm (ECDSA)
    # 3.1 The Finite Field Fp

    p = 0

    def __init__(self, x: int) -> None:
        self.x = x % self.p

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(0x{self.x:064x})'

    def __eq__(self, other: object) -> bool:
        assert isinstance(other, Fp)
        assert self.p == other.p
        return self.x == other.x

    def __hash__(self) -> int:
        return hash((self.p, self.x))

    def __add__(self, other: typing.Self) -> typing.Self:
        assert self.p == other.p
        return self.__class__(self.x + other.x)

    def __sub__(self, other: typing.Self) -> typing.Self:
        assert self.p == other.p
        return self.__class__(self.x - other.x)

    def __mul__(self, other: typing.Self) -> typing.Self:
        assert self.p == other.p
        return self.__class__(self.x * other.x)

    def __truediv__(self, other: typing.Self) -> typing.Self:
        return self * other ** -1

    def __pow__(self, other: int) -> typing.Self:
        return self.__class__(pow(self.x, other, self.p))

    def __pos__(self) -> typing.Self:
        return self.__class__(self.x)

    def __neg__(self) -> typing.Self:
        return self.__class__(self.p - self.x)

    @classmethod
    def nil(cls) -> typing.Self:
        return cls(0)

    @classmethod
    def one(cls) -> typing.Self:
        return cls(1)


class Fq(Fp):
    p = P


class Fr(Fp):
    p = N


A = Fq(0)
B = Fq(7)


class Pt:
    def __init__(self, x: Fq, y: Fq) -> None:
        if x != Fq(0) or y != Fq(0):
            if y ** 2 != x ** 3 + A * x + B:
                raise pyecrecover.error.InvalidPointError(f'point ({x.x:x}, {y.x:x}) is not on the curve')
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f'Pt({self.x}, {self.y})'

    def __eq__(self, other: object) -> bool:
        assert isinstance(other, Pt)
        return all([
            self.x == other.x,
            self.y == other.y,
        ])

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __add__(self, other: typing.Self) -> typing.Self:
        # https://www.cs.miami.edu/home/burt/learning/Csc609.142/ecdsa-cert.pdf
        # Don Johnson, Alfred Menezes and Scott Vanstone, The Elliptic Curve Digital Signature Algorithm (ECDSA)
        # 4.1 Elliptic Curves over Fp
        if self == I:
            return other
        if other == I:
            return self
        x1, y1 = self.x, self.y
        x2, y2 = other.x, other.y
        if x1 == x2 and y1 == -y2:
            return I
        if x1 == x2 and y1 == +y2:
            sk = (x1 * x1 + x1 * x1 + x1 * x1 + A) / (y1 + y1)
        else:
            sk = (y2 - y1) / (x2 - x1)
        x3 = sk * sk - x1 - x2
        y3 = sk * (x1 - x3) - y1
        return self.__class__(x3, y3)

    def __sub__(self, other: typing.Self) -> typing.Self:
        return self + -other

    def __mul__(self, k: Fr) -> typing.Self:
        # Point multiplication: Double-and-add
        # https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication
        n = k.x
        result = I
        addend = self
        while n:
            if n & 1 == 1:
                result = result + addend
            addend = addend + addend
            n = n >> 1
        return result

    def __truediv__(self, k: Fr) -> typing.Self:
        return self * k ** -1

    def __pos__(self) -> typing.Self:
        return self.__class__(self.x, +self.y)

    def __neg__(self) -> typing.Self:
        return self.__class__(self.x, -self.y)


# Identity element
I = Pt(Fq(0), Fq(0))
# Generator point
G = Pt(Fq(Gx), Fq(Gy))


def mul2(a: Pt, k: Fr, b: Pt, l: Fr) -> Pt:
    # Computes a * k + b * l sharing the doublings between both scalars, known as Shamir's trick.
    # https://www.secg.org/sec1-v2.pdf
    # 4.1.6 Public Key Recovery Operation, note on simultaneous multiple point multiplication
    c = a + b
    result = I
    for i in reversed(range(max(k.x.bit_length(), l.x.bit_length()))):
        result = result + result
        u = k.x >> i & 1
        v = l.x >> i & 1
        if u and v:
            result = result + c
        elif u:
            result = result + a
        elif v:
            result = result + b
    return result


def sqrt(z: Fq) -> typing.Optional[Fq]:
    # Since P % 4 == 3, a square root of z, if it exists, is z ** ((P + 1) / 4).
    y = z ** ((P + 1) // 4)
    if y * y != z:
        return None
    return y
