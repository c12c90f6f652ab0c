"""
Encoding name handling shared by the engine, the stream adapter and the CLI.
"""

from enum import Enum

__all__ = [
    "DEFAULT_ENCODING",
    "NATIVE_TEXT",
    "NativeText",
    "canonicalize_encoding_name",
]

DEFAULT_ENCODING = "utf-8"


class NativeText(Enum):
    """Target marker meaning "give me ``str`` back, do not encode"."""

    NATIVE_TEXT = "native-text"

    def __repr__(self) -> str:
        return "NATIVE_TEXT"


NATIVE_TEXT = NativeText.NATIVE_TEXT


def canonicalize_encoding_name(name: str) -> str:
    """
    Return the canonical form of an encoding name.

    Lowercase, then every ``_`` becomes ``-``. The result is idempotent.
    Aliases such as ``latin1`` vs ``iso-8859-1`` are left to the transcoder.

    Examples:
        >>> canonicalize_encoding_name("Shift_JIS")
        'shift-jis'
        >>> canonicalize_encoding_name("utf-8")
        'utf-8'
    """
    return name.lower().replace("_", "-")
