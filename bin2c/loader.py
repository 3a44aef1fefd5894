# Reads the whole input file in memory.
#
# In text mode, every CR that precedes a LF is dropped, regardless of the
# platform's own line-ending conventions. The optional zero terminator is
# appended after this normalization.
def load_input(path: str, text_mode: bool = False, zero_terminate: bool = False) -> bytes:
    with open(path, "rb") as fp:
        data = fp.read()
    if text_mode:
        data = data.replace(b"\r\n", b"\n")
    if zero_terminate:
        data += b"\0"
    return data
