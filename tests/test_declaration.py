from bin2c.declaration import PREAMBLE, ArrayDeclaration, write_declaration
from bin2c.words import format_words, pack_words


def test_render_const():
    declaration = ArrayDeclaration(name="data", bits=8, count=3)
    body = format_words(pack_words(b"\x01\x02\x03", 8), 8)
    assert declaration.render(body) == (
        "/* generated by Bin2C */\n"
        "#include <stdint.h>\n"
        "\n"
        "const uint8_t data[3] = {\n"
        "\t0x01, 0x02, 0x03\n"
        "};\n"
        "\n"
        "const unsigned int data_size = 3;\n"
    )


def test_render_mutable_macro_without_preamble():
    declaration = ArrayDeclaration(
        name="table", bits=16, count=2, mutable=True, use_macro=True
    )
    body = format_words(pack_words(b"\x01\x02\x03", 16), 16)
    assert declaration.render(body, preamble=False) == (
        "\n"
        "\n"
        "uint16_t table[2] = {\n"
        "\t0x0201, 0x0003\n"
        "};\n"
        "\n"
        "#define table_size 2\n"
    )


def test_render_uncompressed_size():
    declaration = ArrayDeclaration(
        name="blob", bits=32, count=1, uncompressed_size=1000
    )
    code = declaration.render("\n\t0x00000000")
    assert code.endswith(
        "const unsigned int blob_size = 1;\n"
        "const unsigned int blob_size_uncompressed = 1000;\n"
    )

    declaration.use_macro = True
    code = declaration.render("\n\t0x00000000")
    assert code.endswith("#define blob_size 1\n#define blob_size_uncompressed 1000\n")


def test_render_empty():
    declaration = ArrayDeclaration(name="nothing", bits=8, count=0)
    assert "const uint8_t nothing[0] = {\n};\n" in declaration.render("")


def test_write_overwrite_and_append(tmp_path):
    path = tmp_path / "out.h"
    path.write_text("stale contents\n")

    first = ArrayDeclaration(name="first", bits=8, count=1)
    write_declaration(str(path), first, "\n\t0x2a")
    second = ArrayDeclaration(name="second", bits=8, count=1)
    write_declaration(str(path), second, "\n\t0x2b", append=True)

    text = path.read_text()
    assert text.startswith(PREAMBLE)
    assert "stale" not in text
    assert text.count(PREAMBLE) == 1
    assert "const unsigned int first_size = 1;\n\n\nconst uint8_t second[1]" in text
