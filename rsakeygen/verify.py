"""
Check that a private key and a public key belong together.

A fixed message is signed with the private key (PKCS#1 v1.5, SHA-256) and the
signature is verified with the public key.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .keyfile import import_key_from_file
from .pem import decode_private_key, decode_public_key

logger = logging.getLogger(__name__)

TEST_MESSAGE = b"test-message-123"


def verify_key_pair(private_key: rsa.RSAPrivateKey, public_key: rsa.RSAPublicKey) -> bool:
    signature = private_key.sign(
        TEST_MESSAGE,
        padding.PKCS1v15(),
        hashes.SHA256(),
    )
    try:
        public_key.verify(
            signature,
            TEST_MESSAGE,
            padding.PKCS1v15(),
            hashes.SHA256(),
        )
    except InvalidSignature:
        logger.debug("Signature check failed: keys do not match")
        return False
    return True


def verify_key_files(
    private_key_path: Union[str, Path],
    public_key_path: Union[str, Path],
    password: Optional[str] = None,
) -> bool:
    """
    Load both PEM files and check that they form a key pair.

    Raises:
        KeyFileError: If a file cannot be read
        KeyDecodeError: If a file is not a valid key or the password is wrong
    """
    private_key = decode_private_key(import_key_from_file(private_key_path), password)
    public_key = decode_public_key(import_key_from_file(public_key_path))
    return verify_key_pair(private_key, public_key)
