"""
Mnemonic / private key to TRON address
"""
import logging
from typing import List
from typing import Tuple

from tronkeys import address
from tronkeys.bips import bip39
from tronkeys.bips import bip44
from tronkeys.ecmath import Curve
from tronkeys.ecmath import DEFAULT_CURVE

log = logging.getLogger(__name__)


def derive_address_from_mnemonic(
    mnemonic: str, index: int, curve: Curve = DEFAULT_CURVE
) -> Tuple[str, str]:
    """
    Derive TRON address and private key at m/44'/195'/0'/0/index

    The mnemonic is not validated; any string yields a deterministic result.

    Args:
        mnemonic: str, mnemonic phrase
        index: int, address index in [0, 2**32 - 1]
        curve: Curve, curve for both key derivation and address encoding
    Returns:
        (address, private key as 64 lowercase hex characters)
    Raises:
        DerivationError: if a derivation step yields an invalid key
    """
    seed = bip39.to_seed(mnemonic, passphrase="")
    account_key = bip44.derive_account_key(seed, index, curve=curve)
    privkey = account_key.key.to_bytes(32, "big")
    return address.private_key_to_address(privkey, curve=curve), privkey.hex()


def private_key_to_address(privkey: bytes, curve: Curve = DEFAULT_CURVE) -> str:
    """
    Calculate TRON address from raw private key bytes
    Raises:
        EncodingError: if privkey is not a valid scalar for curve
    """
    return address.private_key_to_address(privkey, curve=curve)


def derive_addresses(
    mnemonic: str, start: int = 0, count: int = 1, curve: Curve = DEFAULT_CURVE
) -> List[Tuple[int, str, str]]:
    """
    Derive count consecutive accounts beginning at index start
    Returns:
        list of (index, address, private key hex)
    """
    if count < 0:
        raise ValueError(f"count must be non-negative: {count}")
    log.debug(f"deriving {count} address(es) from index {start}")
    return [
        (index, *derive_address_from_mnemonic(mnemonic, index, curve=curve))
        for index in range(start, start + count)
    ]
