"""
Date and time format handling.

Formats are strftime patterns. Formats written in the PHP ``date()``
notation (``Y-m-d``, ``H:i:s``) are recognised by the absence of ``%`` and
translated token by token.
"""

import re

# strftime directives that survive a strptime/strftime round trip
SUPPORTED_DIRECTIVES = frozenset("aAbBdfHIjmMpSwyYz%")

# PHP date() tokens with a zero-padded strftime equivalent
PHP_TOKENS = {
    "d": "%d",
    "D": "%a",
    "l": "%A",
    "m": "%m",
    "M": "%b",
    "F": "%B",
    "y": "%y",
    "Y": "%Y",
    "H": "%H",
    "h": "%I",
    "i": "%M",
    "s": "%S",
    "A": "%p",
    "w": "%w",
    "u": "%f",
}

DIRECTIVE_PATTERN = re.compile(r"%(.?)", re.DOTALL)


def translate_php_format(php_format: str) -> str:
    """
    Translate a PHP date() format string into strftime notation.

    Args:
        php_format: Format such as ``"Y-m-d"`` or ``"d/m/Y H:i"``

    Returns:
        The equivalent strftime pattern

    Raises:
        ValueError: If a token has no round-trippable strftime equivalent
    """
    parts = []
    escaped = False

    for char in php_format:
        if escaped:
            parts.append("%%" if char == "%" else char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in PHP_TOKENS:
            parts.append(PHP_TOKENS[char])
        elif char.isascii() and char.isalpha():
            raise ValueError(
                f"Unsupported date format token '{char}' in '{php_format}'"
            )
        else:
            parts.append("%%" if char == "%" else char)

    if escaped:
        raise ValueError(f"Dangling escape at end of date format '{php_format}'")

    return "".join(parts)


def normalize_format(fmt: str) -> str:
    """
    Return a strftime pattern for ``fmt``, translating PHP notation if needed.

    Raises:
        ValueError: If the format is empty or uses an unsupported directive
    """
    if not fmt:
        raise ValueError("Date/time format cannot be empty")

    if "%" not in fmt:
        return translate_php_format(fmt)

    for match in DIRECTIVE_PATTERN.finditer(fmt):
        directive = match.group(1)
        if directive not in SUPPORTED_DIRECTIVES:
            raise ValueError(
                f"Unsupported strftime directive '%{directive}' in '{fmt}'. "
                f"Supported: {''.join(sorted(SUPPORTED_DIRECTIVES))}"
            )

    return fmt
