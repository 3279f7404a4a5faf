"""
Exceptions raised by the RSA key generator.

Library code raises these; only the command-line front end turns them into
an exit status.
"""


class KeyGenError(Exception):
    """Base exception for all key generator errors"""
    pass


class InvalidBitLengthError(KeyGenError, ValueError):
    """Raised when a requested bit length is not accepted by the policy"""
    pass


class KeyGenerationError(KeyGenError):
    """Raised when the RSA key pair cannot be generated"""
    pass


class KeyEncryptionError(KeyGenError):
    """Raised when the private key cannot be password-protected"""
    pass


class KeyDecodeError(KeyGenError):
    """Raised when PEM data cannot be decoded (or decrypted) into a key"""
    pass


class KeyFileError(KeyGenError):
    """Raised when a key file cannot be written or read"""
    pass


class UnsupportedFormatError(KeyGenError, ValueError):
    """Raised when a PEM output format is not known"""
    pass
