"""
BIP32 private key derivation
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki
"""
import logging
from typing import NamedTuple
from typing import Tuple

from tronkeys.crypto import hash160
from tronkeys.crypto import hmac_sha512
from tronkeys.ecmath import Curve
from tronkeys.ecmath import DEFAULT_CURVE
from tronkeys.ecmath import point_scalar_mul
from tronkeys.exceptions import DerivationError

log = logging.getLogger(__name__)

MASTER_KEY_HMAC_KEY = b"Bitcoin seed"
HARDENED_OFFSET = 0x80000000
MAX_INDEX = 0xFFFFFFFF


class ExtendedKey(NamedTuple):
    key: int
    chaincode: bytes
    depth: int = 0
    parent_fingerprint: bytes = b"\x00\x00\x00\x00"
    child_no: int = 0

    @property
    def hardened(self) -> bool:
        return self.child_no >= HARDENED_OFFSET


# https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#conventions
def point(p: int, curve: Curve = DEFAULT_CURVE) -> Tuple[int, int]:
    """
    Returns the coordinate pair resulting from EC point multiplication
    of the curve base point with the integer p
    """
    return point_scalar_mul(p, curve.G, curve=curve)


def ser_32(i: int) -> bytes:
    """
    Serialize i as 32 bits big endian
    """
    return i.to_bytes(4, "big")


def ser_256(p: int) -> bytes:
    """
    Serialize p as a 256 bits big-endian
    """
    return p.to_bytes(32, "big")


def ser_p(P: Tuple[int, int]) -> bytes:
    """
    Serialize P = (x, y) in SEC1 compressed form

    >>> ser_p((1, 2)).hex()
    '020000000000000000000000000000000000000000000000000000000000000001'
    """
    x, y = P
    prefix = b"\x02" if y % 2 == 0 else b"\x03"
    return prefix + x.to_bytes(32, "big")


def parse_256(p: bytes) -> int:
    """
    Parse 256 bit, big endian number, p, as integer
    """
    return int.from_bytes(p, "big")


def fingerprint(k: int, curve: Curve = DEFAULT_CURVE) -> bytes:
    """
    First 4 bytes of HASH160 of the compressed public key for k
    """
    return hash160(ser_p(point(k, curve=curve)))[:4]


def to_master_key(seed: bytes, curve: Curve = DEFAULT_CURVE) -> ExtendedKey:
    """
    Defined in BIP32
    https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#master-key-generation

    Args:
        seed: bytes, seed (BIP39 seeds are 512 bits)
        curve: Curve, curve whose order bounds the key
    Raises:
        DerivationError: if the master key is not a valid scalar
    """
    I = hmac_sha512(MASTER_KEY_HMAC_KEY, seed)
    I_L, I_R = I[:32], I[32:]
    k = parse_256(I_L)
    if k == 0 or k >= curve.n:
        raise DerivationError("invalid master key", depth=0, child_no=0)
    return ExtendedKey(key=k, chaincode=I_R)


def CKDpriv(
    k_parent: int, c_parent: bytes, i: int, curve: Curve = DEFAULT_CURVE
) -> Tuple[int, bytes]:
    """
    private parent to private child
    https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#private-parent-key--private-child-key
    e.g. CKDpriv(CKDpriv(CKDpriv(m, 3'), 2), 5) == m/3'/2/5

    Raises:
        DerivationError: if I_L >= n or the child key is 0
    """
    if i >= HARDENED_OFFSET:
        # hardened child
        msg = b"\x00" + ser_256(k_parent) + ser_32(i)
    else:
        # normal child
        msg = ser_p(point(k_parent, curve=curve)) + ser_32(i)
    I = hmac_sha512(c_parent, msg)
    I_L, I_R = I[:32], I[32:]

    il = parse_256(I_L)
    if il >= curve.n:
        raise DerivationError(f"I_L not less than curve order for child {i}", child_no=i)
    key_i = (il + k_parent) % curve.n
    if key_i == 0:
        raise DerivationError(f"child key {i} is zero", child_no=i)
    return key_i, I_R


def derive_child(
    parent: ExtendedKey,
    index: int,
    hardened: bool = False,
    curve: Curve = DEFAULT_CURVE,
) -> ExtendedKey:
    """
    Derive the child extended private key of parent at index

    Args:
        parent: ExtendedKey, parent extended private key
        index: int, child number in [0, 2**32 - 1]
        hardened: bool, add the hardened offset to index
        curve: Curve
    Returns:
        child ExtendedKey
    """
    if type(index) is not int or index < 0 or index > MAX_INDEX:
        raise ValueError(f"child index out of range [0, {MAX_INDEX}]: {index!r}")
    if hardened:
        if index >= HARDENED_OFFSET:
            raise ValueError(f"index already in hardened range: {index}")
        index += HARDENED_OFFSET
    depth = parent.depth + 1
    log.trace(f"deriving child {index} at depth {depth}")
    try:
        key, chaincode = CKDpriv(parent.key, parent.chaincode, index, curve=curve)
    except DerivationError as err:
        err.depth = depth
        raise
    return ExtendedKey(
        key=key,
        chaincode=chaincode,
        depth=depth,
        parent_fingerprint=fingerprint(parent.key, curve=curve),
        child_no=index,
    )
