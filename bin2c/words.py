import numpy as np
from numpy.typing import NDArray

from .errors import InvalidConfiguration

WORD_WIDTHS = (8, 16, 32)  # Supported array element widths (in bits).
BYTES_PER_ROW = 16  # Source bytes per row of the generated array.

# Little-endian: the first byte of each group is the least significant one.
WORD_DTYPES = {
    8: np.dtype("<u1"),
    16: np.dtype("<u2"),
    32: np.dtype("<u4"),
}


def check_word_width(bits: int) -> int:
    if bits not in WORD_WIDTHS:
        raise InvalidConfiguration("Invalid bit size (must be 8, 16 or 32).")
    return bits


# Number of array elements needed to hold `length` bytes. The last element
# counts as a full one even if it is only partially filled.
def element_count(length: int, bits: int) -> int:
    word_size = check_word_width(bits) // 8
    return (length + word_size - 1) // word_size


def pack_words(data: bytes, bits: int) -> NDArray[np.unsignedinteger]:
    """Groups the bytes of `data` into little-endian words of `bits` bits.

    If the length of `data` is not a multiple of the word size, the missing
    high-order bytes of the last word are taken as zero, so that the result
    always holds element_count(len(data), bits) words.
    """
    word_size = check_word_width(bits) // 8
    padded = bytes(data).ljust(element_count(len(data), bits) * word_size, b"\0")
    return np.frombuffer(padded, dtype=WORD_DTYPES[bits])


# Inverse of pack_words: reassembles the words and drops the zero padding
# beyond the original `length`.
def unpack_words(words: NDArray[np.unsignedinteger], bits: int, length: int) -> bytes:
    word_size = check_word_width(bits) // 8
    if not (0 <= length <= len(words) * word_size):
        raise ValueError(f"Cannot extract {length} bytes from {len(words)} words")
    data = np.asarray(words).astype(WORD_DTYPES[bits]).tobytes()
    return data[:length]


def format_words(words: NDArray[np.unsignedinteger], bits: int) -> str:
    """Renders the words as the body of a C array initializer.

    Each word is printed as a lowercase hexadecimal literal, zero-padded to
    the full word width. Every word but the first is preceded by ", ", and a
    new (indented) row is started whenever the number of source bytes
    consumed so far is a multiple of BYTES_PER_ROW. Hence rows hold 16 words
    of 8 bits, 8 words of 16 bits or 4 words of 32 bits.
    """
    word_size = check_word_width(bits) // 8
    digits = 2 * word_size

    body = []
    for i, word in enumerate(words):
        if i > 0:
            body.append(", ")
        if (i * word_size) % BYTES_PER_ROW == 0:
            body.append("\n\t")
        body.append(f"0x{int(word):0{digits}x}")
    return "".join(body)
