"""
Elliptic curve math

Short Weierstrass curves y^2 = x^3 + ax + b over Fp. Every function takes the
curve as a parameter; secp256k1 is the default everywhere.
"""
from typing import Dict
from typing import NamedTuple
from typing import Optional
from typing import Tuple

import ecdsa

# https://en.bitcoin.it/wiki/Secp256k1
# http://www.secg.org/sec2-v2.pdf - pg 13
# T(p, a, b, G, n, h)
SECP256K1_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECP256K1_A = 0x0000000000000000000000000000000000000000000000000000000000000000
SECP256K1_B = 0x0000000000000000000000000000000000000000000000000000000000000007
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SECP256K1_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
SECP256K1_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

Point = Optional[Tuple[int, int]]  # None is the point at infinity


class Curve(NamedTuple):
    name: str
    p: int
    a: int
    b: int
    n: int
    gx: int
    gy: int

    @property
    def G(self) -> Tuple[int, int]:
        return (self.gx, self.gy)


def curve_from_ecdsa(name: str, ecdsa_curve: ecdsa.curves.Curve) -> Curve:
    """
    Build a Curve from the parameters of an ecdsa package curve
    """
    p = ecdsa_curve.curve.p()
    return Curve(
        name=name,
        p=p,
        a=ecdsa_curve.curve.a() % p,
        b=ecdsa_curve.curve.b() % p,
        n=ecdsa_curve.order,
        gx=ecdsa_curve.generator.x(),
        gy=ecdsa_curve.generator.y(),
    )


SECP256K1 = Curve(
    name="secp256k1",
    p=SECP256K1_P,
    a=SECP256K1_A,
    b=SECP256K1_B,
    n=SECP256K1_N,
    gx=SECP256K1_Gx,
    gy=SECP256K1_Gy,
)
NIST_P256 = curve_from_ecdsa("p256", ecdsa.NIST256p)

CURVES: Dict[str, Curve] = {curve.name: curve for curve in [SECP256K1, NIST_P256]}
DEFAULT_CURVE = SECP256K1


def get_curve(name: str) -> Curve:
    """
    >>> get_curve("secp256k1").n == SECP256K1_N
    True
    """
    try:
        return CURVES[name.lower()]
    except KeyError:
        raise ValueError(f"unrecognized curve: {name}")


def add_mod_p(x: int, y: int, p: int = SECP256K1_P) -> int:
    """
    x + y (mod p)

    >>> add_mod_p(SECP256K1_P - 1, 3)
    2
    """
    if x < 0 or x >= p:
        raise ValueError(f"{x} not in integer set of order {p}")
    if y < 0 or y >= p:
        raise ValueError(f"{y} not in integer set of order {p}")
    return (x + y) % p


def sub_mod_p(x: int, y: int, p: int = SECP256K1_P) -> int:
    """
    x - y (mod p)

    >>> hex(sub_mod_p(0, 1))
    '0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2e'
    """
    if x < 0 or x >= p:
        raise ValueError(f"{x} not in integer set of order {p}")
    if y < 0 or y >= p:
        raise ValueError(f"{y} not in integer set of order {p}")
    return (x - y) % p


def mul_mod_p(x: int, y: int, p: int = SECP256K1_P) -> int:
    """
    x * y (mod p)
    """
    if x < 0 or x >= p:
        raise ValueError(f"{x} not in integer set of order {p}")
    if y < 0 or y >= p:
        raise ValueError(f"{y} not in integer set of order {p}")
    return (x * y) % p


def pow_mod_p(x: int, y: int, p: int = SECP256K1_P) -> int:
    """
    x ** y (mod p)
    """
    if x < 0 or x >= p:
        raise ValueError(f"{x} not in integer set of order {p}")
    if not type(y) is int:
        raise TypeError(f"{y} must be an integer")
    return pow(x, y, p)


def div_mod_p(x: int, y: int, p: int = SECP256K1_P) -> int:
    """
    x / y (mod p)
    Using Fermat's little thereom,
    x / y = x * (y ** (p - 2)) (mod p)
    """
    if x < 0 or x >= p:
        raise ValueError(f"{x} not in integer set of order {p}")
    if y <= 0 or y >= p:
        raise ValueError(f"{y} not invertible in integer set of order {p}")
    return mul_mod_p(x, pow_mod_p(y, p - 2, p), p)


def sqrt_mod_p(x: int, p: int = SECP256K1_P) -> Tuple[int, int]:
    """
    Square roots of x (mod p), for p = 3 (mod 4)
    Returns:
        (y, p - y)
    """
    # https://www.geeksforgeeks.org/find-square-root-under-modulo-p-set-1-when-p-is-in-form-of-4i-3/
    x = add_mod_p(0, x, p=p)
    if p % 4 != 3:
        raise NotImplementedError("only p = 3 (mod 4) is supported")
    y = pow_mod_p(x, (p + 1) // 4, p=p)
    if pow_mod_p(y, 2, p=p) != x:
        raise ValueError(f"{x} is not a quadratic residue mod {p}")
    return y, sub_mod_p(0, y, p=p)


def y_from_x(x: int, curve: Curve = SECP256K1) -> Tuple[int, int]:
    """
    Find y from x
    y^2 = x^3 + ax + b

    >>> y_from_x(SECP256K1_Gx)[0] == SECP256K1_Gy
    True
    """
    p = curve.p
    y_squared = add_mod_p(
        add_mod_p(pow_mod_p(x, 3, p=p), mul_mod_p(curve.a, x, p=p), p=p), curve.b, p=p
    )
    return sqrt_mod_p(y_squared, p=p)


def point_is_on_curve(x: int, y: int, curve: Curve = SECP256K1) -> bool:
    """
    Returns True if (x, y) is on elliptic curve given by y^2 = x^3 + ax + b, else False
    >>> point_is_on_curve(SECP256K1_Gx, SECP256K1_Gy)
    True
    >>> point_is_on_curve(NIST_P256.gx, NIST_P256.gy, curve=NIST_P256)
    True
    """
    p = curve.p
    if x < 0 or x >= p or y < 0 or y >= p:
        return False
    lhs = pow_mod_p(y, 2, p=p)
    rhs = add_mod_p(
        add_mod_p(pow_mod_p(x, 3, p=p), mul_mod_p(x, curve.a, p=p), p=p), curve.b, p=p
    )
    return lhs == rhs


def point_negate(P: Point, curve: Curve = SECP256K1) -> Point:
    """
    Returns:
        -P
    """
    if P is None:
        return None
    x, y = P
    return (x, sub_mod_p(0, y, p=curve.p))


def point_add(P1: Point, P2: Point, curve: Curve = SECP256K1) -> Point:
    # https://crypto.stanford.edu/pbc/notes/elliptic/explicit.html
    p = curve.p
    if P1 is None:
        return P2
    elif P2 is None:
        return P1
    elif P1 == point_negate(P2, curve=curve):
        # includes doubling a point with y == 0
        return None
    elif P1 == P2:
        x, y = P1
        # s = (3 * x ** 2 + a) / (2 * y)
        # xr = s ** 2 - 2 * x
        # yr = s * (x - xr) - y
        s = div_mod_p(
            add_mod_p(mul_mod_p(3, pow_mod_p(x, 2, p=p), p=p), curve.a, p=p),
            mul_mod_p(2, y, p=p),
            p=p,
        )
        xr = sub_mod_p(pow_mod_p(s, 2, p=p), mul_mod_p(2, x, p=p), p=p)
        yr = sub_mod_p(mul_mod_p(s, sub_mod_p(x, xr, p=p), p=p), y, p=p)
        return (xr, yr)
    else:
        x1, y1 = P1
        x2, y2 = P2
        # s = (y2 - y1) / (x2 - x1)
        s = div_mod_p(sub_mod_p(y2, y1, p=p), sub_mod_p(x2, x1, p=p), p=p)
        # xr = s ** 2 - x1 - x2
        xr = sub_mod_p(sub_mod_p(pow_mod_p(s, 2, p=p), x1, p=p), x2, p=p)
        # yr = s * (x1 - xr) - y1
        yr = sub_mod_p(mul_mod_p(s, sub_mod_p(x1, xr, p=p), p=p), y1, p=p)
        return (xr, yr)


def point_scalar_mul(k: int, P: Point, curve: Curve = SECP256K1) -> Point:
    """
    Point multiplication using double and add algorithm
    kP where k has n binary digits

    >>> point_scalar_mul(1, (SECP256K1_Gx, SECP256K1_Gy)) == (SECP256K1_Gx, SECP256K1_Gy)
    True
    >>> point_scalar_mul(SECP256K1_N, (SECP256K1_Gx, SECP256K1_Gy)) is None
    True
    """
    # https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication#Double-and-add
    if k < 0:
        raise ValueError("negative scalar")
    result = None
    for bit_no in reversed(range(k.bit_length())):
        result = point_add(result, result, curve=curve)  # double
        if k & (1 << bit_no):
            result = point_add(result, P, curve=curve)  # add
    return result
