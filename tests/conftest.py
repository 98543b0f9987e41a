import pytest

HASH_A = "0123456789abcdef0123456789abcdef"
HASH_B = "fedcba9876543210fedcba9876543210"


class FakeFetch:
    """Stands in for downloader.fetch, recording every call."""

    def __init__(self, ext=".png"):
        self.ext = ext
        self.calls = []

    def __call__(self, url, base_path):
        self.calls.append((url, base_path))
        return self.ext


@pytest.fixture
def fake_fetch():
    return FakeFetch()
