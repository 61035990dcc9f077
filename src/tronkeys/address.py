"""
TRON address encoding

address = base58(0x41 || keccak256(X || Y)[12:] || checksum)
checksum = keccak256(0x41 || keccak256(X || Y)[12:])[:4]
"""
from tronkeys.base58 import base58check
from tronkeys.base58 import base58check_decode
from tronkeys.crypto import keccak256
from tronkeys.ecmath import Curve
from tronkeys.ecmath import DEFAULT_CURVE
from tronkeys.ecmath import point_scalar_mul
from tronkeys.exceptions import EncodingError

VERSION_BYTE = b"\x41"
PRIVATE_KEY_LENGTH = 32
PAYLOAD_LENGTH = 21
ADDRESS_LENGTH = 25


def private_key_bytes(privkey: bytes) -> bytes:
    """
    Normalize privkey to exactly 32 bytes, left-padding shorter input with zeros

    >>> private_key_bytes(b"\\x01").hex()
    '0000000000000000000000000000000000000000000000000000000000000001'
    """
    if not isinstance(privkey, (bytes, bytearray)):
        raise TypeError(f"private key must be bytes, not {type(privkey).__name__}")
    if len(privkey) > PRIVATE_KEY_LENGTH:
        raise EncodingError(
            f"private key longer than {PRIVATE_KEY_LENGTH} bytes: {len(privkey)}"
        )
    return bytes(privkey).rjust(PRIVATE_KEY_LENGTH, b"\x00")


def private_key_int(privkey: bytes, curve: Curve = DEFAULT_CURVE) -> int:
    """
    Private key as a scalar in range(1, n)
    """
    d = int.from_bytes(private_key_bytes(privkey), "big")
    if d == 0 or d >= curve.n:
        raise EncodingError(f"private key not in range(1, n) for {curve.name}")
    return d


def public_key(privkey: bytes, curve: Curve = DEFAULT_CURVE) -> bytes:
    """
    Uncompressed SEC1 public key, 0x04 || X || Y
    """
    x, y = point_scalar_mul(private_key_int(privkey, curve=curve), curve.G, curve=curve)
    return b"\x04" + x.to_bytes(32, "big") + y.to_bytes(32, "big")


def public_key_to_address(pubkey: bytes) -> str:
    """
    Encode uncompressed public key as TRON address
    """
    if len(pubkey) != 65 or pubkey[0:1] != b"\x04":
        raise EncodingError("expected 65 byte uncompressed public key")
    payload = VERSION_BYTE + keccak256(pubkey[1:])[12:]
    return base58check(payload).decode("ascii")


def private_key_to_address(privkey: bytes, curve: Curve = DEFAULT_CURVE) -> str:
    """
    Calculate TRON address from private key

    Args:
        privkey: bytes, private key, at most 32 bytes (big endian)
        curve: Curve, curve used for the public key
    Returns:
        base58 encoded address
    Raises:
        EncodingError: if privkey is not a valid scalar for curve

    >>> private_key_to_address((1).to_bytes(32, "big"))[0]
    'T'
    """
    return public_key_to_address(public_key(privkey, curve=curve))


def decode_address(address: str) -> bytes:
    """
    Decode address into its 21 byte payload (version byte + 20 byte hash),
    verifying length, version and checksum
    """
    try:
        payload = base58check_decode(address.encode("ascii"))
    except (UnicodeEncodeError, ValueError) as err:
        raise EncodingError(f"invalid address {address!r}: {err}") from err
    if len(payload) != PAYLOAD_LENGTH:
        raise EncodingError(f"invalid address length: {len(payload) + 4}")
    if payload[0:1] != VERSION_BYTE:
        raise EncodingError(f"invalid address version: {payload[0:1].hex()}")
    return payload


def is_address(address: str) -> bool:
    try:
        decode_address(address)
        return True
    except EncodingError:
        return False


def to_hex_address(address: str) -> str:
    """
    41-prefixed hex form of address
    """
    return decode_address(address).hex()
