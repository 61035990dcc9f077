"""
Test mnemonic / private key to address entry points
"""
import pytest

import tronkeys
from tronkeys import wallet
from tronkeys.base58 import base58decode
from tronkeys.crypto import keccak256
from tronkeys.ecmath import NIST_P256
from tronkeys.exceptions import DerivationError
from tronkeys.exceptions import EncodingError

TEST_MNEMONIC = "flash couple heart script ramp april average caution plunge alter elite author"


def assert_address_shape(addr: str):
    decoded = base58decode(addr.encode("ascii"))
    assert len(decoded) == 25
    assert decoded[0] == 0x41
    assert decoded[21:25] == keccak256(decoded[0:21])[0:4]


def assert_private_key_hex(privkey: str):
    assert len(privkey) == 64
    assert privkey == privkey.lower()
    bytes.fromhex(privkey)


def test_concrete_scenario():
    addr_0, privkey_0 = wallet.derive_address_from_mnemonic(TEST_MNEMONIC, 0)
    addr_1, privkey_1 = wallet.derive_address_from_mnemonic(TEST_MNEMONIC, 1)

    assert_private_key_hex(privkey_0)
    assert_private_key_hex(privkey_1)
    assert privkey_0 != privkey_1
    assert addr_0 != addr_1
    assert_address_shape(addr_0)
    assert_address_shape(addr_1)

    assert wallet.derive_address_from_mnemonic(TEST_MNEMONIC, 0) == (addr_0, privkey_0)


def test_index_sensitivity():
    indices = list(range(10)) + [2**32 - 1]
    results = [wallet.derive_address_from_mnemonic(TEST_MNEMONIC, i) for i in indices]
    assert len({addr for addr, _ in results}) == len(indices)
    assert len({privkey for _, privkey in results}) == len(indices)


@pytest.mark.parametrize(
    "m1,m2",
    [
        (TEST_MNEMONIC, TEST_MNEMONIC + " "),
        (TEST_MNEMONIC, TEST_MNEMONIC.upper()),
        ("", " "),
    ],
)
def test_mnemonic_sensitivity(m1, m2):
    assert (
        wallet.derive_address_from_mnemonic(m1, 0)[0]
        != wallet.derive_address_from_mnemonic(m2, 0)[0]
    )


@pytest.mark.parametrize("index", [0, 1, 5, 2**31, 2**32 - 1])
def test_round_trip(index):
    addr, privkey = wallet.derive_address_from_mnemonic(TEST_MNEMONIC, index)
    assert wallet.private_key_to_address(bytes.fromhex(privkey)) == addr


def test_empty_mnemonic():
    addr, privkey = wallet.derive_address_from_mnemonic("", 0)
    assert_address_shape(addr)
    assert_private_key_hex(privkey)
    assert wallet.derive_address_from_mnemonic("", 0) == (addr, privkey)


@pytest.mark.parametrize("privkey", [bytes(32), b"\xff" * 32])
def test_private_key_boundaries_raise(privkey):
    with pytest.raises(EncodingError):
        wallet.private_key_to_address(privkey)


def test_curve_is_used_consistently():
    addr, privkey = wallet.derive_address_from_mnemonic(TEST_MNEMONIC, 0, curve=NIST_P256)
    assert_address_shape(addr)
    assert wallet.private_key_to_address(bytes.fromhex(privkey), curve=NIST_P256) == addr
    assert (addr, privkey) != wallet.derive_address_from_mnemonic(TEST_MNEMONIC, 0)


def test_derivation_error_propagates(monkeypatch):
    from tronkeys.bips import bip32

    def invalid_master_key(seed, curve=bip32.DEFAULT_CURVE):
        raise DerivationError("invalid master key", depth=0, child_no=0)

    monkeypatch.setattr(bip32, "to_master_key", invalid_master_key)
    with pytest.raises(DerivationError):
        wallet.derive_address_from_mnemonic(TEST_MNEMONIC, 0)


@pytest.mark.parametrize("index", [-1, 2**32])
def test_index_out_of_range(index):
    with pytest.raises(ValueError):
        wallet.derive_address_from_mnemonic(TEST_MNEMONIC, index)


def test_derive_addresses():
    accounts = wallet.derive_addresses(TEST_MNEMONIC, start=1, count=2)
    assert [index for index, _, _ in accounts] == [1, 2]
    assert accounts[0][1:] == wallet.derive_address_from_mnemonic(TEST_MNEMONIC, 1)
    assert wallet.derive_addresses(TEST_MNEMONIC, count=0) == []
    with pytest.raises(ValueError):
        wallet.derive_addresses(TEST_MNEMONIC, count=-1)


def test_package_exports():
    assert tronkeys.derive_address_from_mnemonic is wallet.derive_address_from_mnemonic
    assert tronkeys.private_key_to_address is wallet.private_key_to_address
    assert issubclass(tronkeys.EncodingError, tronkeys.TronKeysError)
