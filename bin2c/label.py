import re

from .errors import InvalidConfiguration

DEFAULT_LABEL = "$*"

# "$*" expands to the file name without extension, "$@" to the full file
# name. Neither includes the directory.
LABEL_TOKEN = re.compile(r"\$[*@]")
DIRECTORY_SEPARATOR = re.compile(r"[\\/]")


def split_file_name(path: str) -> tuple[str, str]:
    full_name = DIRECTORY_SEPARATOR.split(path)[-1]
    base_name, dot, _ = full_name.rpartition(".")
    if not dot:
        base_name = full_name
    return base_name, full_name


def substitute(template: str, base_name: str, full_name: str) -> str:
    expansions = {"$*": base_name, "$@": full_name}
    return LABEL_TOKEN.sub(lambda m: expansions[m.group()], template)


def _is_identifier_char(c: str) -> bool:
    return c == "_" or (c.isascii() and c.isalnum())


# Turns `name` into a valid C identifier. Offending characters are replaced
# with underscores, so the length never changes.
def sanitize(name: str) -> str:
    chars = [c if _is_identifier_char(c) else "_" for c in name]
    if chars and chars[0].isdigit():
        chars[0] = "_"
    return "".join(chars)


def resolve_symbol_name(template: str | None, input_path: str) -> str:
    if template is None:
        template = DEFAULT_LABEL
    base_name, full_name = split_file_name(input_path)
    name = sanitize(substitute(template, base_name, full_name))
    if name == "":
        raise InvalidConfiguration(
            f"Label '{template}' results in an empty symbol name for {input_path}."
        )
    return name


# Output file name used when none is given: the input file name, with its
# extension (if any) replaced by ".h". The directory is kept.
def default_output_path(input_path: str) -> str:
    base_name, full_name = split_file_name(input_path)
    directory = input_path[: len(input_path) - len(full_name)]
    if base_name == "":  # e.g. ".hidden", which has no extension
        base_name = full_name
    return directory + base_name + ".h"
