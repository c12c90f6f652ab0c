"""
Buffering adapter: collect chunks, convert once at end of input.
"""

import logging
from collections.abc import Iterable, Iterator

from detconv.content import ByteContent, TextContent, as_content
from detconv.engine import Converter
from detconv.errors import BufferClosedError, InvalidInputType

__all__ = ["ConversionBuffer", "convert_stream"]

logger = logging.getLogger(__name__)


class ConversionBuffer:
    """
    Accumulates chunks and converts the aggregate in a single engine call.

    The first chunk decides whether the buffer holds bytes or text; mixing the two
    raises :class:`InvalidInputType`. Detection needs the whole input, so nothing
    is produced before :meth:`finalize`.

    Examples:
        >>> buffer = ConversionBuffer("utf-8")
        >>> buffer.feed("Hello, ")
        >>> buffer.feed("World")
        >>> buffer.finalize()
        b'Hello, World'
    """

    def __init__(self, encoding=None, converter: Converter | None = None, errors: str | None = None):
        self.encoding = encoding
        self.converter = converter if converter is not None else Converter()
        self.errors = errors
        self._chunks = []
        self._kind = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def feed(self, chunk) -> None:
        if self._closed:
            raise BufferClosedError("Cannot feed a finalized buffer")
        content = as_content(chunk)
        if self._kind is None:
            self._kind = type(content)
        elif not isinstance(content, self._kind):
            raise InvalidInputType(
                f"Cannot mix {type(content).__name__} into a buffer of {self._kind.__name__}"
            )
        self._chunks.append(content.value)

    def finalize(self):
        """
        Convert everything fed so far and close the buffer.

        An empty buffer is treated as empty bytes, which the default detector
        rejects with :class:`~detconv.errors.DetectionFailed`.
        """
        if self._closed:
            raise BufferClosedError("Buffer already finalized")
        self._closed = True

        if self._kind is TextContent:
            content = TextContent("".join(self._chunks))
        else:
            content = ByteContent(b"".join(self._chunks))
        self._chunks = []
        logger.debug("Finalizing buffer with %d units of %s", len(content.value), type(content).__name__)
        return self.converter.convert_content(content, self.encoding, self.errors).value


def convert_stream(
    chunks: Iterable,
    encoding=None,
    converter: Converter | None = None,
    errors: str | None = None,
) -> Iterator:
    """
    Convert a chunked source, yielding the single converted value at end of input.

    Engine failures propagate out of iteration; they never end the stream silently.

    Examples:
        >>> list(convert_stream([b"caf", b"\\xc3\\xa9"], "latin-1"))
        [b'caf\\xe9']
    """
    buffer = ConversionBuffer(encoding, converter, errors)
    for chunk in chunks:
        buffer.feed(chunk)
    yield buffer.finalize()
