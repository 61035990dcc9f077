"""
Exceptions raised by key derivation and address encoding
"""
from typing import Optional


class TronKeysError(Exception):
    """
    Base exception for tronkeys errors
    """


class DerivationError(TronKeysError, ValueError):
    """
    Raised when HD key tree arithmetic yields an invalid scalar

    The event is cryptographically negligible (about 2^-127 per step) but is
    defined by BIP32. Inputs are deterministic, so the same call fails the same
    way every time; callers should not retry.
    """

    def __init__(
        self,
        message: str,
        depth: Optional[int] = None,
        child_no: Optional[int] = None,
    ):
        """
        Args:
            message: Error message
            depth: depth of the key that could not be derived (0 for master)
            child_no: child number of the key that could not be derived
        """
        self.depth = depth
        self.child_no = child_no
        super().__init__(message)


class EncodingError(TronKeysError, ValueError):
    """
    Raised when a private key is not a valid scalar for the curve, or when
    an address string fails to decode
    """
