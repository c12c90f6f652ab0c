"""
Exceptions raised by detconv.

Every error derives from :class:`ConversionError` and from the builtin exception
closest to its meaning, so ``except LookupError`` keeps catching bad encoding names.
"""

__all__ = [
    "BufferClosedError",
    "ConversionError",
    "DetectionFailed",
    "InvalidInputType",
    "TranscodingError",
    "UnsupportedEncoding",
    "UnsupportedSourceEncoding",
    "UnsupportedTargetEncoding",
]


class ConversionError(Exception):
    """Base class for all detconv errors."""


class DetectionFailed(ConversionError, ValueError):
    """The detector could not name a source encoding for the given bytes."""


class UnsupportedEncoding(ConversionError, LookupError):
    """An encoding name is unknown to the transcoder."""

    def __init__(self, encoding, message: str | None = None):
        self.encoding = encoding
        super().__init__(message or f"Unsupported encoding: {encoding!r}")


class UnsupportedSourceEncoding(UnsupportedEncoding):
    """The detected source encoding cannot be decoded."""

    def __init__(self, encoding):
        super().__init__(encoding, f"Detected encoding {encoding!r} is not supported")


class UnsupportedTargetEncoding(UnsupportedEncoding):
    """The requested target encoding cannot be encoded to."""

    def __init__(self, encoding):
        super().__init__(encoding, f"Target encoding {encoding!r} is not supported")


class InvalidInputType(ConversionError, TypeError):
    """Input is neither bytes-like nor ``str``."""


class TranscodingError(ConversionError, ValueError):
    """Decoding or encoding failed under the active error policy."""

    def __init__(self, encoding: str, message: str):
        self.encoding = encoding
        super().__init__(message)


class BufferClosedError(ConversionError, RuntimeError):
    """A :class:`~detconv.stream.ConversionBuffer` was used after ``finalize()``."""
