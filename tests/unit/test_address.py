import ecdsa
import pytest

from tronkeys import address
from tronkeys.base58 import base58decode
from tronkeys.base58 import base58encode
from tronkeys.crypto import keccak256
from tronkeys.ecmath import NIST_P256
from tronkeys.ecmath import SECP256K1
from tronkeys.exceptions import EncodingError

KEY_ONE = (1).to_bytes(32, "big")


def assert_address_shape(addr: str):
    decoded = base58decode(addr.encode("ascii"))
    assert len(decoded) == address.ADDRESS_LENGTH
    assert decoded[0:1] == address.VERSION_BYTE
    assert decoded[21:25] == keccak256(decoded[0:21])[0:4]
    assert addr.startswith("T")


def test_private_key_one():
    # pubkey is the generator; hash matches the well known ethereum address of key 1
    assert address.public_key(KEY_ONE) == (
        b"\x04" + SECP256K1.gx.to_bytes(32, "big") + SECP256K1.gy.to_bytes(32, "big")
    )
    addr = address.private_key_to_address(KEY_ONE)
    assert address.to_hex_address(addr) == "417e5f4552091a69125d5dfcb7b8c2659029395bdf"
    assert_address_shape(addr)


@pytest.mark.parametrize("curve,ecdsa_curve", [(SECP256K1, ecdsa.SECP256k1), (NIST_P256, ecdsa.NIST256p)])
def test_public_key_matches_ecdsa(curve, ecdsa_curve):
    privkey = bytes.fromhex(
        "c3e7b149ad167dc83a5653a9eaae1cc50b36793bfdc050d8efab831d04b876a7"
    )
    sk = ecdsa.SigningKey.from_string(privkey, curve=ecdsa_curve)
    expected = sk.get_verifying_key().to_string("uncompressed")
    assert address.public_key(privkey, curve=curve) == expected
    addr = address.private_key_to_address(privkey, curve=curve)
    assert address.decode_address(addr) == b"\x41" + keccak256(expected[1:])[12:]


def test_curves_give_different_addresses():
    privkey = bytes.fromhex(
        "c3e7b149ad167dc83a5653a9eaae1cc50b36793bfdc050d8efab831d04b876a7"
    )
    assert address.private_key_to_address(privkey) != address.private_key_to_address(
        privkey, curve=NIST_P256
    )


def test_deterministic():
    privkey = bytes(range(1, 33))
    assert address.private_key_to_address(privkey) == address.private_key_to_address(
        bytearray(privkey)
    )


def test_short_key_is_left_padded():
    assert address.private_key_to_address(b"\x01") == address.private_key_to_address(
        KEY_ONE
    )
    assert address.private_key_bytes(b"\xab\xcd") == bytes(30) + b"\xab\xcd"


def test_long_key_raises():
    with pytest.raises(EncodingError):
        address.private_key_to_address(b"\x00" + KEY_ONE)


def test_non_bytes_key_raises():
    with pytest.raises(TypeError):
        address.private_key_to_address(KEY_ONE.hex())


@pytest.mark.parametrize(
    "privkey",
    [
        bytes(32),
        b"\xff" * 32,
        b"",
        SECP256K1.n.to_bytes(32, "big"),
    ],
)
def test_invalid_scalar_raises(privkey):
    with pytest.raises(EncodingError):
        address.private_key_to_address(privkey)


def test_largest_valid_scalar():
    assert_address_shape(address.private_key_to_address((SECP256K1.n - 1).to_bytes(32, "big")))


def test_scalar_range_follows_curve():
    # the range check uses the order of the selected curve
    privkey = (NIST_P256.n - 1).to_bytes(32, "big")
    assert_address_shape(address.private_key_to_address(privkey, curve=NIST_P256))
    with pytest.raises(EncodingError):
        address.private_key_to_address(NIST_P256.n.to_bytes(32, "big"), curve=NIST_P256)


def test_public_key_to_address_rejects_compressed():
    with pytest.raises(EncodingError):
        address.public_key_to_address(b"\x02" + bytes(32))


def test_decode_address():
    addr = address.private_key_to_address(KEY_ONE)
    payload = address.decode_address(addr)
    assert len(payload) == 21
    assert address.is_address(addr)


def test_decode_address_bad_checksum():
    addr = address.private_key_to_address(KEY_ONE)
    decoded = base58decode(addr.encode("ascii"))
    tampered = base58encode(decoded[:-1] + bytes([decoded[-1] ^ 1])).decode("ascii")
    assert not address.is_address(tampered)
    with pytest.raises(EncodingError):
        address.decode_address(tampered)


def test_decode_address_wrong_version():
    payload = b"\x00" + bytes(20)
    addr = base58encode(payload + keccak256(payload)[:4]).decode("ascii")
    with pytest.raises(EncodingError, match="version"):
        address.decode_address(addr)


def test_decode_address_wrong_length():
    payload = b"\x41" + bytes(19)
    addr = base58encode(payload + keccak256(payload)[:4]).decode("ascii")
    with pytest.raises(EncodingError, match="length"):
        address.decode_address(addr)


@pytest.mark.parametrize("addr", ["", "T0000", "Tä", "not an address"])
def test_is_address_garbage(addr):
    assert not address.is_address(addr)
