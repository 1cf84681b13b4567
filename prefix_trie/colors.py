import string
import typing
from dataclasses import dataclass

# language selector => column holding the color's display name
LANGUAGES = {
    "en": 1,
    "de": 3,
    "fr": 4,
    "it": 5,
}

# column holding the "#rrggbb" code
HEX_COLUMN = 2

HEX_DIGITS = set(string.hexdigits)


class InvalidHexError(ValueError):
    pass


@dataclass(frozen=True)
class Color:
    hex: str
    name: typing.Optional[str]
    rgb: typing.Tuple[int, int, int]


def strip_hash(code):
    # turn " #FF0000" into "FF0000"
    code = code.strip()
    if code.startswith("#"):
        code = code[1:]
    return code


def hex_to_rgb(code) -> typing.Tuple[int, int, int]:
    # turn "ff8000" (or "#ff8000") into (255, 128, 0)
    code = strip_hash(code)
    if len(code) != 6 or not set(code) <= HEX_DIGITS:
        raise InvalidHexError(f"invalid hex value entered: {code!r}")
    return tuple(int(code[i : i + 2], 16) for i in (0, 2, 4))


def language_column(language):
    try:
        return LANGUAGES[language.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(LANGUAGES))
        raise ValueError(f"Unknown language '{language}', expected one of: {choices}") from None
