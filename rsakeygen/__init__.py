"""
RSA key pair generator.

Generates RSA key pairs, optionally password-protects the private key and
writes both keys to disk as PEM files.
"""

from .exceptions import (
    KeyGenError,
    InvalidBitLengthError,
    KeyGenerationError,
    KeyEncryptionError,
    KeyDecodeError,
    KeyFileError,
    UnsupportedFormatError,
)
from .keygen import (
    BitLengthPolicy,
    DEFAULT_POLICY,
    RANGE_POLICY,
    KeyPair,
    generate_key_pair,
    validate_bit_length,
)
from .pem import (
    decode_private_key,
    decode_public_key,
    encode_private_key,
    encode_public_key,
    is_encrypted_pem,
)
from .keyfile import export_key_to_file, import_key_from_file
from .verify import verify_key_files, verify_key_pair

__all__ = [
    "KeyGenError",
    "InvalidBitLengthError",
    "KeyGenerationError",
    "KeyEncryptionError",
    "KeyDecodeError",
    "KeyFileError",
    "UnsupportedFormatError",
    "BitLengthPolicy",
    "DEFAULT_POLICY",
    "RANGE_POLICY",
    "KeyPair",
    "generate_key_pair",
    "validate_bit_length",
    "decode_private_key",
    "decode_public_key",
    "encode_private_key",
    "encode_public_key",
    "is_encrypted_pem",
    "export_key_to_file",
    "import_key_from_file",
    "verify_key_files",
    "verify_key_pair",
]

__version__ = "2.0.0"
