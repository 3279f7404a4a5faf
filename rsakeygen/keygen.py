"""
RSA key pair generation and bit length validation.
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, Union

from cryptography.hazmat.primitives.asymmetric import rsa

from .exceptions import InvalidBitLengthError, KeyGenerationError

logger = logging.getLogger(__name__)

PUBLIC_EXPONENT = 65537


@dataclass(frozen=True)
class BitLengthPolicy:
    """Accepted RSA modulus sizes: an inclusive range, optionally narrowed to an allow-list."""

    minimum: int
    maximum: int
    allowed: Optional[Tuple[int, ...]] = None

    def accepts(self, bits: int) -> bool:
        if not self.minimum <= bits <= self.maximum:
            return False
        return self.allowed is None or bits in self.allowed

    def describe(self) -> str:
        if self.allowed is not None:
            return "one of " + ", ".join(str(b) for b in self.allowed)
        return f"an integer between {self.minimum} and {self.maximum}"


DEFAULT_POLICY = BitLengthPolicy(minimum=2048, maximum=4096, allowed=(2048, 3072, 4096))
# 1024 is the smallest modulus the cryptography library will generate.
RANGE_POLICY = BitLengthPolicy(minimum=1024, maximum=4096)


class KeyPair(NamedTuple):
    private_key: rsa.RSAPrivateKey
    public_key: rsa.RSAPublicKey


def validate_bit_length(value: Union[int, str], policy: BitLengthPolicy = DEFAULT_POLICY) -> int:
    """
    Validate a requested bit length against a policy.

    Args:
        value: Bit length as an integer or as user-entered text
        policy: Policy the value must satisfy

    Returns:
        The bit length as an int

    Raises:
        InvalidBitLengthError: If the value is not numeric or not accepted
    """
    if isinstance(value, bool):
        raise InvalidBitLengthError(f"Bit length must be {policy.describe()}, got {value!r}")

    if isinstance(value, str):
        text = value.strip()
        # a longer digit string is out of range anyway, and int() refuses huge ones
        if not text.isdecimal() or len(text) > len(str(policy.maximum)):
            raise InvalidBitLengthError(f"Bit length must be {policy.describe()}, got {text[:20]!r}")
        value = int(text)

    if not isinstance(value, int):
        raise InvalidBitLengthError(f"Bit length must be an integer, got {type(value)}")

    if not policy.accepts(value):
        raise InvalidBitLengthError(f"Bit length must be {policy.describe()}, got {value}")

    return value


def generate_key_pair(bits: Union[int, str], policy: BitLengthPolicy = DEFAULT_POLICY) -> KeyPair:
    """Generate a fresh RSA key pair whose modulus is exactly `bits` long."""
    bits = validate_bit_length(bits, policy)

    logger.debug("Generating %d-bit RSA key pair", bits)
    try:
        private_key = rsa.generate_private_key(
            public_exponent=PUBLIC_EXPONENT,
            key_size=bits,
        )
    except (ValueError, TypeError) as exc:
        raise KeyGenerationError(f"Error generating RSA keys: {exc}") from exc

    logger.info("Generated %d-bit RSA key pair", private_key.key_size)
    return KeyPair(private_key, private_key.public_key())
