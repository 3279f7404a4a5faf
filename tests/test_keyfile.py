import os
import stat
import sys

import pytest

from rsakeygen.exceptions import KeyFileError
from rsakeygen.keyfile import export_key_to_file, import_key_from_file
from rsakeygen.pem import encode_private_key


def test_export_then_import_is_identical(tmp_path, key_pair):
    data = encode_private_key(key_pair.private_key, "pw")
    path = export_key_to_file(data, tmp_path / "private.pem")
    assert path == tmp_path / "private.pem"
    assert import_key_from_file(path) == data


def test_export_accepts_str_path_and_creates_dirs(tmp_path):
    target = tmp_path / "nested" / "keys" / "public.pem"
    export_key_to_file(b"abc", str(target))
    assert target.read_bytes() == b"abc"


def test_export_overwrites(tmp_path):
    target = tmp_path / "public.pem"
    export_key_to_file(b"first version, longer", target)
    export_key_to_file(b"second", target)
    assert import_key_from_file(target) == b"second"


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions only")
def test_export_is_owner_only(tmp_path):
    target = tmp_path / "private.pem"
    export_key_to_file(b"secret", target)
    assert stat.S_IMODE(os.stat(target).st_mode) == 0o600


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions only")
def test_export_tightens_existing_file(tmp_path):
    target = tmp_path / "private.pem"
    target.write_bytes(b"old")
    os.chmod(target, 0o644)
    export_key_to_file(b"new", target)
    assert stat.S_IMODE(os.stat(target).st_mode) == 0o600


def test_export_failure(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_bytes(b"")
    with pytest.raises(KeyFileError):
        export_key_to_file(b"data", blocker / "private.pem")


def test_import_missing_file(tmp_path):
    with pytest.raises(KeyFileError) as excinfo:
        import_key_from_file(tmp_path / "missing.pem")
    assert "missing.pem" in str(excinfo.value)


def test_import_returns_raw_bytes(tmp_path):
    target = tmp_path / "junk.pem"
    target.write_bytes(b"\x00not pem at all")
    assert import_key_from_file(target) == b"\x00not pem at all"
