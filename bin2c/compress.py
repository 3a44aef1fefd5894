import bz2
from typing import Protocol

from .errors import CompressionError


class Compressor(Protocol):
    def compress(self, data: bytes) -> bytes: ...


class Bz2Compressor:
    # Block size 9 (i.e. 900 kB), the highest compression level.
    def __init__(self, compresslevel: int = 9):
        self.compresslevel = compresslevel

    def compress(self, data: bytes) -> bytes:
        try:
            return bz2.compress(data, self.compresslevel)
        except (ValueError, OSError) as e:
            raise CompressionError(f"Failed to compress data: error {e}.") from e
