import bz2

import pytest

from bin2c.compress import Bz2Compressor
from bin2c.errors import CompressionError


def test_bz2_compressor():
    data = b"abc" * 1000
    compressed = Bz2Compressor().compress(data)
    assert len(compressed) < len(data)
    assert bz2.decompress(compressed) == data


def test_bz2_compressor_failure(monkeypatch):
    def failing_compress(data, compresslevel=9):
        raise ValueError("-2")

    monkeypatch.setattr(bz2, "compress", failing_compress)
    with pytest.raises(CompressionError, match="Failed to compress data: error -2"):
        Bz2Compressor().compress(b"abc")
