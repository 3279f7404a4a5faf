"""
Interactive RSA key pair generator.

Shows a menu, asks for a bit length and an optional password, and writes
public.pem / private.pem. Existing files are overwritten.

Example:
    rsa-keygen --output-dir keys
    rsa-keygen --verify --output-dir keys
"""

import argparse
import getpass
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from .exceptions import InvalidBitLengthError, KeyGenError
from .keyfile import export_key_to_file, import_key_from_file
from .keygen import DEFAULT_POLICY, RANGE_POLICY, BitLengthPolicy, generate_key_pair, validate_bit_length
from .pem import PUBLIC_FORMATS, encode_private_key, encode_public_key, is_encrypted_pem
from .verify import verify_key_files

PUBLIC_KEY_PATH = "public.pem"
PRIVATE_KEY_PATH = "private.pem"

Prompt = Callable[[str], str]

logger = logging.getLogger(__name__)


def print_menu() -> None:
    print("RSA Key Generator")
    print("-----------------")
    print("1. Generate new key pair")
    print("2. Exit")


def read_bit_length(prompt: Prompt, policy: BitLengthPolicy) -> int:
    """Ask for a bit length until the answer satisfies the policy."""
    example = policy.allowed[0] if policy.allowed else 2048
    while True:
        answer = prompt(f"Enter the bit length for the key (e.g., {example}): ")
        try:
            return validate_bit_length(answer, policy)
        except InvalidBitLengthError:
            print(f"Please enter {policy.describe()}.")


def normalize_password(text: str) -> Optional[str]:
    """Strip surrounding whitespace; an empty result means no password."""
    return text.strip() or None


def read_password(prompt_secret: Prompt) -> Optional[str]:
    """Ask for an optional password; a non-empty one must be typed twice."""
    while True:
        password = normalize_password(prompt_secret(
            "Enter a password to protect your private key (leave empty for no password): "
        ))
        if password is None:
            return None

        confirm = normalize_password(prompt_secret("Confirm password: "))
        if password == confirm:
            return password
        print("Passwords do not match. Try again.")


def key_paths(args: argparse.Namespace) -> tuple[Path, Path]:
    return args.output_dir / args.public_key, args.output_dir / args.private_key


def run_generation(args: argparse.Namespace, prompt: Prompt, prompt_secret: Prompt) -> tuple[Path, Path]:
    """Generate one key pair and write it to disk. Errors propagate as KeyGenError."""
    policy = RANGE_POLICY if args.any_size else DEFAULT_POLICY
    bits = read_bit_length(prompt, policy)

    print(f"Generating {bits}-bit RSA key pair...")
    key_pair = generate_key_pair(bits, policy)

    password = read_password(prompt_secret)
    private_pem = encode_private_key(key_pair.private_key, password)
    public_pem = encode_public_key(key_pair.public_key, args.public_format)

    public_path, private_path = key_paths(args)
    # public.pem only changes once private.pem has been written
    export_key_to_file(private_pem, private_path)
    export_key_to_file(public_pem, public_path)

    print(f"Your keys have been generated and saved to {public_path} and {private_path}.")
    if password:
        print("Keep the password safe: the private key cannot be recovered without it.")
    return public_path, private_path


def run_menu(args: argparse.Namespace, prompt: Prompt = input, prompt_secret: Prompt = getpass.getpass) -> None:
    """Main loop. Returns when the user picks "Exit"."""
    print("Welcome to the custom RSA key generator!")
    print("-----------------------------------------")

    while True:
        print_menu()
        choice = prompt("Select an option: ").strip()

        if choice == "2":
            print("Goodbye.")
            return
        if choice != "1":
            print(f"Unknown option: {choice!r}")
            continue

        run_generation(args, prompt, prompt_secret)


def run_verify(args: argparse.Namespace, prompt_secret: Prompt = getpass.getpass) -> bool:
    public_path, private_path = key_paths(args)

    password = None
    if is_encrypted_pem(import_key_from_file(private_path)):
        password = normalize_password(prompt_secret("Private key password: "))

    if verify_key_files(private_path, public_path, password):
        print(f"{public_path} and {private_path} form a valid key pair.")
        return True
    print(f"{public_path} and {private_path} do NOT belong together.")
    return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate RSA key pairs and save them as PEM files.")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Folder to write the key files to (default: working directory)",
    )
    parser.add_argument(
        "--public-key",
        default=PUBLIC_KEY_PATH,
        help=f"File name of the public key (default: {PUBLIC_KEY_PATH})",
    )
    parser.add_argument(
        "--private-key",
        default=PRIVATE_KEY_PATH,
        help=f"File name of the private key (default: {PRIVATE_KEY_PATH})",
    )
    parser.add_argument(
        "--public-format",
        choices=sorted(PUBLIC_FORMATS),
        default="spki",
        help="spki writes 'PUBLIC KEY', pkcs1 writes 'RSA PUBLIC KEY' (default: spki)",
    )
    parser.add_argument(
        "--any-size",
        action="store_true",
        help=f"Accept {RANGE_POLICY.describe()} instead of {DEFAULT_POLICY.describe()}",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check that the existing key files belong together instead of generating new ones",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None, prompt: Prompt = input, prompt_secret: Prompt = getpass.getpass) -> None:
    """Entrypoint for the interactive key generator."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.verify:
            if not run_verify(args, prompt_secret):
                raise SystemExit(1)
            return
        run_menu(args, prompt, prompt_secret)
    except KeyGenError as exc:
        logger.debug("Aborting", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)
    except (EOFError, KeyboardInterrupt):
        print("\nInput closed, aborting.", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
