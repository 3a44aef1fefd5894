from .errors import Bin2CError, CompressionError, InvalidArgument, InvalidConfiguration
from .words import WORD_WIDTHS, element_count, format_words, pack_words, unpack_words

__all__ = [
    "Bin2CError",
    "CompressionError",
    "InvalidArgument",
    "InvalidConfiguration",
    "WORD_WIDTHS",
    "element_count",
    "format_words",
    "pack_words",
    "unpack_words",
]
