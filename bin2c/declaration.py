from .words import check_word_width

PREAMBLE = "/* generated by Bin2C */\n#include <stdint.h>"


class ArrayDeclaration:
    def __init__(
        self,
        name: str,
        bits: int,
        count: int,
        mutable: bool = False,
        use_macro: bool = False,
        uncompressed_size: int | None = None,
    ):
        assert count >= 0
        self.name = name
        self.bits = check_word_width(bits)
        self.count = count
        self.mutable = mutable
        self.use_macro = use_macro
        self.uncompressed_size = uncompressed_size  # only set if compressed

    @property
    def ctype(self) -> str:
        return f"uint{self.bits}_t"

    def size_declaration(self, suffix: str, value: int) -> str:
        if self.use_macro:
            return f"#define {self.name}{suffix} {value}\n"
        else:
            return f"const unsigned int {self.name}{suffix} = {value};\n"

    def render(self, body: str, preamble: bool = True) -> str:
        """Generates the C code declaring the array and its size.

        `body` is the array initializer, as returned by format_words. The
        preamble is meant to be written only once per output file, hence it
        must be omitted when appending to an existing file.
        """
        code = PREAMBLE if preamble else ""
        code += "\n\n"

        qualifier = "" if self.mutable else "const "
        code += f"{qualifier}{self.ctype} {self.name}[{self.count}] = {{"
        code += body
        code += "\n};\n\n"

        # Note: the size is expressed in elements, not in bytes.
        code += self.size_declaration("_size", self.count)
        if self.uncompressed_size is not None:
            code += self.size_declaration(
                "_size_uncompressed", self.uncompressed_size
            )
        return code


# Writes the declaration into a new file, or at the end of an existing one.
#
# The code is generated before opening the output file, but a failure while
# writing still leaves a partially written file behind.
def write_declaration(
    path: str,
    declaration: ArrayDeclaration,
    body: str,
    append: bool = False,
):
    code = declaration.render(body, preamble=not append)
    with open(path, "at" if append else "wt") as fp:
        fp.write(code)
