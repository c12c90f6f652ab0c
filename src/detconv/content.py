"""
Tagged values flowing in and out of the conversion engine.
"""

from dataclasses import dataclass
from typing import Union

from detconv.errors import InvalidInputType

__all__ = [
    "ByteContent",
    "Content",
    "TextContent",
    "as_content",
]


@dataclass(frozen=True)
class ByteContent:
    """Encoded data whose encoding is not known."""

    data: bytes

    @property
    def value(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class TextContent:
    """Decoded, encoding-agnostic text."""

    text: str

    @property
    def value(self) -> str:
        return self.text


Content = Union[ByteContent, TextContent]


def as_content(value) -> Content:
    """
    Wrap a plain value into its :data:`Content` variant.

    ``bytes``, ``bytearray`` and ``memoryview`` become :class:`ByteContent`,
    ``str`` becomes :class:`TextContent`, and existing variants pass through.

    Raises:
        InvalidInputType: For any other type.
    """
    if isinstance(value, (ByteContent, TextContent)):
        return value
    if isinstance(value, str):
        return TextContent(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ByteContent(bytes(value))
    raise InvalidInputType(f"Expected bytes or str, got {type(value).__name__}")
