import argparse
import sys

from .compress import Bz2Compressor, Compressor
from .declaration import ArrayDeclaration, write_declaration
from .errors import Bin2CError, InvalidArgument
from .label import DEFAULT_LABEL, default_output_path, resolve_symbol_name
from .loader import load_input
from .words import check_word_width, element_count, format_words, pack_words


# Shows the usage text on stderr and fails, like any other invalid invocation
# (the generated file is not produced).
class UsageAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, help=None):
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=argparse.SUPPRESS,
            nargs=0,
            help=help,
        )

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help(sys.stderr)
        parser.exit(1)


# Reports parsing errors as exceptions, so that main() can print them in the
# same format as the other fatal errors.
class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise InvalidArgument(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="bin2c",
        description="Converts a binary file to a C array declaration.",
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "input_file",
        help="The binary file to convert.",
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        help=(
            "The name of the generated file with the array declaration "
            '(default: the input file name, with extension ".h").'
        ),
    )

    parser.add_argument(
        "-a",
        "--append",
        action="store_true",
        help="Append to the output file instead of overwriting.",
    )
    parser.add_argument(
        "-b",
        "--bits",
        type=int,
        default=8,
        metavar="NUMBER",
        help="Set the width of the array elements: 8, 16 or 32 (default: 8).",
    )
    parser.add_argument(
        "-c",
        "--compress",
        action="store_true",
        help=(
            "Compress the data with bzip2 and also declare the uncompressed "
            "size."
        ),
    )
    parser.add_argument(
        "-d",
        "--define",
        dest="use_macro",
        action="store_true",
        help="Declare the array size as a #define, instead of a 'const int'.",
    )
    parser.add_argument(
        "-h",
        "--help",
        "-?",
        action=UsageAction,
        help="Show brief help.",
    )
    parser.add_argument(
        "-l",
        "--label",
        metavar="NAME",
        help=(
            "Set the symbol name for the array. In the label name, '$*' is "
            "replaced with the base filename (no extension) and '$@' is "
            f"replaced with the full filename (default: '{DEFAULT_LABEL}')."
        ),
    )
    parser.add_argument(
        "-m",
        "--mutable",
        action="store_true",
        help="Declare the array as mutable (non-const).",
    )
    parser.add_argument(
        "-t",
        "--text",
        dest="text_mode",
        action="store_true",
        help="Open the input file as a text file (CR-LF line endings become LF).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print a summary of the conversion.",
    )
    parser.add_argument(
        "-z",
        "--zero",
        dest="zero_terminate",
        action="store_true",
        help="Append a zero terminator at the end of the array.",
    )

    return parser


def convert(args: argparse.Namespace, compressor: Compressor | None = None):
    # Validate the configuration before touching any file.
    bits = check_word_width(args.bits)
    name = resolve_symbol_name(args.label, args.input_file)
    output_path = args.output_file or default_output_path(args.input_file)

    # Load (and optionally compress) the input before opening the output file,
    # so that a failure does not leave a truncated output behind.
    try:
        data = load_input(args.input_file, args.text_mode, args.zero_terminate)
    except OSError as e:
        sys.exit(
            f"ERROR: Failed to open {args.input_file} for reading "
            f"({e.strerror or e})."
        )

    if compressor is not None:
        uncompressed_size = len(data)
        data = compressor.compress(data)
    else:
        uncompressed_size = None

    declaration = ArrayDeclaration(
        name=name,
        bits=bits,
        count=element_count(len(data), bits),
        mutable=args.mutable,
        use_macro=args.use_macro,
        uncompressed_size=uncompressed_size,
    )
    body = format_words(pack_words(data, bits), bits)

    try:
        write_declaration(output_path, declaration, body, append=args.append)
    except OSError as e:
        sys.exit(
            f"ERROR: Failed to open {output_path} for writing ({e.strerror or e})."
        )

    if args.verbose:
        summary = f"{name}: {declaration.count} x {declaration.ctype}"
        if uncompressed_size is not None:
            ratio = round(100 * len(data) / max(uncompressed_size, 1))
            summary += f", {uncompressed_size} -> {len(data)} bytes ({ratio} %)"
        else:
            summary += f", {len(data)} bytes"
        print(f"{summary} written to {output_path}", file=sys.stderr)


def main(argv: list[str] | None = None):
    parser = build_parser()
    try:
        # Options may appear anywhere, including between the two file names.
        args = parser.parse_intermixed_args(argv)
    except InvalidArgument as e:
        print(f"ERROR: {e}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        sys.exit(1)

    compressor = Bz2Compressor() if args.compress else None
    try:
        convert(args, compressor)
    except Bin2CError as e:
        sys.exit(f"ERROR: {e}")
    except MemoryError:
        sys.exit("ERROR: Memory allocation error.")
