import logging

from bst_codec.src.errors import FormatError


OPEN_BRACE = "("
CLOSE_BRACE = ")"

LEFT_NODE_SYMBOL = "l"
RIGHT_NODE_SYMBOL = "r"


def parse_int_key(text: str) -> int:
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise FormatError(f"expected a decimal integer key, got {text!r}")
    return int(text)


def first_positive_index(*indices: int) -> int | None:
    """
    Nearest of the given str.find results. Both -1 and 0 count as not found,
    a key can never be empty so a delimiter right at the start never ends one.
    """
    found = [ind for ind in indices if ind > 0]
    return min(found) if found else None


def check_braces_balanced(encoded: str) -> None:
    depth = 0
    for ind, char in enumerate(encoded):
        if char == OPEN_BRACE:
            depth += 1
        elif char == CLOSE_BRACE:
            depth -= 1
            if depth < 0:
                raise FormatError(f"unmatched {CLOSE_BRACE!r} at position {ind}")

    if depth != 0:
        logging.debug(f"{depth = } at end of {encoded = }")
        raise FormatError(f"{depth} unterminated brace group(s) in {encoded!r}")
