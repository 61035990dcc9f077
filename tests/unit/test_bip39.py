"""
Test vectors in BIP39
https://github.com/trezor/python-mnemonic/blob/master/vectors.json
"""
import pytest
from mnemonic import Mnemonic

from tronkeys.bips import bip39

TEST_MNEMONIC = "flash couple heart script ramp april average caution plunge alter elite author"


def test_trezor_vector():
    seed = bip39.to_seed(
        "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about",
        passphrase="TREZOR",
    )
    assert seed.hex() == (
        "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e53495531f09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04"
    )


@pytest.mark.parametrize("passphrase", ["", "TREZOR"])
def test_seed_matches_python_mnemonic(passphrase):
    assert bip39.to_seed(TEST_MNEMONIC, passphrase=passphrase) == Mnemonic.to_seed(
        TEST_MNEMONIC, passphrase=passphrase
    )


@pytest.mark.parametrize(
    "mnemonic",
    ["", "not a bip39 phrase", "abandon", "   ", "été ☃"],
)
def test_any_string_is_accepted(mnemonic):
    seed = bip39.to_seed(mnemonic)
    assert len(seed) == 64
    assert seed == bip39.to_seed(mnemonic)


def test_seed_depends_on_passphrase():
    assert bip39.to_seed(TEST_MNEMONIC) != bip39.to_seed(TEST_MNEMONIC, "x")
