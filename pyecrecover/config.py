import pyecrecover.objectdict
import pyecrecover.secp256k1

# Domain parameters of secp256k1. Every key holds a reference to the parameters it was created with, and keys built on
# different parameters never compare equal.
secp256k1 = pyecrecover.objectdict.ObjectDict({
    'name': 'secp256k1',
    'p': pyecrecover.secp256k1.P,
    'a': pyecrecover.secp256k1.A.x,
    'b': pyecrecover.secp256k1.B.x,
    'n': pyecrecover.secp256k1.N,
    'h': pyecrecover.secp256k1.H,
    'g': pyecrecover.objectdict.ObjectDict({
        'x': pyecrecover.secp256k1.Gx,
        'y': pyecrecover.secp256k1.Gy,
    }),
})


def width(curve: pyecrecover.objectdict.ObjectDict) -> int:
    # Number of hex digits of a zero padded coordinate or signature component.
    return (curve.n.bit_length() + 3) // 4
