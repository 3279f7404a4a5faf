import pytest

from rsakeygen.exceptions import KeyDecodeError, KeyFileError
from rsakeygen.keyfile import export_key_to_file
from rsakeygen.pem import encode_private_key, encode_public_key
from rsakeygen.verify import verify_key_files, verify_key_pair


def test_matching_pair(key_pair):
    assert verify_key_pair(key_pair.private_key, key_pair.public_key)


def test_mismatched_pair(key_pair, other_key_pair):
    assert not verify_key_pair(key_pair.private_key, other_key_pair.public_key)


def write_pair(directory, private_key, public_key, password=None):
    private_path = export_key_to_file(encode_private_key(private_key, password), directory / "private.pem")
    public_path = export_key_to_file(encode_public_key(public_key), directory / "public.pem")
    return private_path, public_path


def test_files_match(tmp_path, key_pair):
    private_path, public_path = write_pair(tmp_path, key_pair.private_key, key_pair.public_key)
    assert verify_key_files(private_path, public_path)


def test_encrypted_files_match(tmp_path, key_pair):
    private_path, public_path = write_pair(tmp_path, key_pair.private_key, key_pair.public_key, "pw")
    assert verify_key_files(private_path, public_path, "pw")
    with pytest.raises(KeyDecodeError):
        verify_key_files(private_path, public_path, "wrong")


def test_files_mismatch(tmp_path, key_pair, other_key_pair):
    private_path, public_path = write_pair(tmp_path, key_pair.private_key, other_key_pair.public_key)
    assert not verify_key_files(private_path, public_path)


def test_missing_files(tmp_path):
    with pytest.raises(KeyFileError):
        verify_key_files(tmp_path / "private.pem", tmp_path / "public.pem")
