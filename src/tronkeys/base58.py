"""
Base58(check) encoding / decoding

The check variant here appends keccak256(data)[:4], a single hash pass,
rather than the double SHA256 used by Bitcoin's Base58Check.
"""
from tronkeys.crypto import keccak256

BITCOIN_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BITCOIN_ALPHABET_MAP = {value: idx for idx, value in enumerate(BITCOIN_ALPHABET)}

CHECKSUM_LENGTH = 4


def checksum(data: bytes) -> bytes:
    return keccak256(data)[:CHECKSUM_LENGTH]


def base58encode(data: bytes) -> bytes:
    """
    Encode data in base58 format
    Args:
        data: bytes, data to encode
    Returns:
        base58 encoded data

    >>> base58encode(b"hello world")
    b'StV1DL6CwTryKyV'
    >>> base58encode(b"\\x00\\x00\\x01")
    b'112'
    """
    origlen = len(data)
    data = data.lstrip(b"\x00")
    zeros = origlen - len(data)

    encoded = b""
    integer = int.from_bytes(data, "big")
    while integer:
        integer, idx = divmod(integer, 58)
        encoded = BITCOIN_ALPHABET[idx : idx + 1] + encoded
    return BITCOIN_ALPHABET[0:1] * zeros + encoded


def base58decode(data: bytes) -> bytes:
    """
    Decode base58 encoded data
    Args:
        data: bytes, data to decode
    Returns:
        decoded data

    >>> base58decode(b"StV1DL6CwTryKyV")
    b'hello world'
    """
    origlen = len(data)
    data = data.lstrip(b"1")
    ones = origlen - len(data)

    result = 0
    for byte in data:
        if byte not in BITCOIN_ALPHABET_MAP:
            raise ValueError(f"invalid base58 character: {chr(byte)!r}")
        result = result * 58 + BITCOIN_ALPHABET_MAP[byte]

    decoded = result.to_bytes((result.bit_length() + 7) // 8, "big")
    return b"\x00" * ones + decoded


def base58check(data: bytes) -> bytes:
    """
    Encode data with a 4 byte keccak256 checksum appended
    Args:
        data: bytes, data to encode
    Returns:
        base58 encoded data + checksum
    """
    return base58encode(data + checksum(data))


def base58check_decode(data: bytes) -> bytes:
    """
    Decode base58 data and verify its keccak256 checksum
    Args:
        data: bytes, data to decode
    Returns:
        decoded payload, checksum removed
    """
    decoded = base58decode(data)
    if len(decoded) <= CHECKSUM_LENGTH:
        raise ValueError("data too short for checksum")
    payload = decoded[:-CHECKSUM_LENGTH]
    if decoded[-CHECKSUM_LENGTH:] != checksum(payload):
        raise ValueError("invalid checksum")
    return payload


def is_base58check(data: bytes) -> bool:
    """
    Check if data is base58 encoded with a valid keccak256 checksum
    """
    try:
        base58check_decode(data)
        return True
    except ValueError:
        return False
