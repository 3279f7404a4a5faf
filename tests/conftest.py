import pytest

from rsakeygen import generate_key_pair


@pytest.fixture(scope="session")
def key_pair():
    return generate_key_pair(2048)


@pytest.fixture(scope="session")
def other_key_pair():
    return generate_key_pair(2048)
