"""
BIP44
m / purpose' / coin_type' / account' / change / address_index

TRON accounts use m/44'/195'/0'/0/index. Only the address index varies;
purpose, coin type, account and change are fixed.
"""
import logging
from typing import List

from tronkeys.bips import bip32
from tronkeys.bips.bip32 import ExtendedKey
from tronkeys.ecmath import Curve
from tronkeys.ecmath import DEFAULT_CURVE

log = logging.getLogger(__name__)

PURPOSE = 44
TRON_COIN_TYPE = 195  # SLIP-0044
ACCOUNT = 0
CHANGE = 0  # external chain


def derivation_path(index: int) -> str:
    """
    >>> derivation_path(7)
    "m/44'/195'/0'/0/7"
    """
    return f"m/{PURPOSE}'/{TRON_COIN_TYPE}'/{ACCOUNT}'/{CHANGE}/{index}"


def parse_path(path: str) -> List[int]:
    """
    Parse path in shortened notation into a list of child numbers,
    hardened children offset by 2**31

    >>> parse_path("m/44'/195'/0'/0/1") == [
    ...     44 + bip32.HARDENED_OFFSET, 195 + bip32.HARDENED_OFFSET, bip32.HARDENED_OFFSET, 0, 1
    ... ]
    True
    >>> parse_path("m")
    []
    """
    if path == "m":
        return []
    if not path.startswith("m/"):
        raise ValueError(f"path must start with m/: {path}")
    path_tree = []
    for segment in path.split("/")[1:]:
        hardened = segment.endswith("'") or segment.endswith("h")
        value = segment[:-1] if hardened else segment
        if not value.isdigit():
            raise ValueError(f"check path value: {segment}")
        child_no = int(value)
        if child_no >= bip32.HARDENED_OFFSET:
            raise ValueError(f"path value out of range: {segment}")
        path_tree.append(child_no + bip32.HARDENED_OFFSET if hardened else child_no)
    return path_tree


def derive_path(
    master: ExtendedKey, path: str, curve: Curve = DEFAULT_CURVE
) -> ExtendedKey:
    """
    Derive extended private key at path from master extended private key
    Args:
        master: ExtendedKey, master extended private key
        path: str, path in shortened notation, e.g. m/0'/1
    """
    key = master
    for child_no in parse_path(path):
        key = bip32.derive_child(key, child_no, curve=curve)
    return key


def derive_account_key(
    seed: bytes, index: int, curve: Curve = DEFAULT_CURVE
) -> ExtendedKey:
    """
    Derive the TRON account key at m/44'/195'/0'/0/index

    Args:
        seed: bytes, BIP39 seed
        index: int, address index in [0, 2**32 - 1]
        curve: Curve
    Returns:
        leaf ExtendedKey; its key is the account private key
    Raises:
        DerivationError: if any step yields an invalid key
    """
    if type(index) is not int or index < 0 or index > bip32.MAX_INDEX:
        raise ValueError(f"index out of range [0, {bip32.MAX_INDEX}]: {index!r}")
    log.debug(f"deriving {derivation_path(index)} on {curve.name}")
    key = bip32.to_master_key(seed, curve=curve)
    key = bip32.derive_child(key, PURPOSE, hardened=True, curve=curve)
    key = bip32.derive_child(key, TRON_COIN_TYPE, hardened=True, curve=curve)
    key = bip32.derive_child(key, ACCOUNT, hardened=True, curve=curve)
    key = bip32.derive_child(key, CHANGE, curve=curve)
    return bip32.derive_child(key, index, curve=curve)
