"""
https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki#from-mnemonic-to-seed

Only the mnemonic to seed step. The phrase is not checked against a wordlist
or checksum: any string is accepted, including the empty string.
"""
import hashlib

ITERATIONS = 2048
SEED_LENGTH = 64


def to_seed(mnemonic: str, passphrase: str = "") -> bytes:
    """
    PBKDF2-HMAC-SHA512 over the UTF-8 bytes of mnemonic, salted with
    "mnemonic" + passphrase

    >>> len(to_seed(""))
    64
    """
    return hashlib.pbkdf2_hmac(
        "sha512",
        mnemonic.encode("utf-8"),
        ("mnemonic" + passphrase).encode("utf-8"),
        ITERATIONS,
        dklen=SEED_LENGTH,
    )
