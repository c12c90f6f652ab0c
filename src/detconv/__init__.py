"""
detconv - Detect the character encoding of bytes and transcode them to a known encoding
"""

from detconv.content import ByteContent, Content, TextContent, as_content
from detconv.detector import CharsetNormalizerDetector, DetectionResult, Detector
from detconv.engine import Converter
from detconv.errors import (
    BufferClosedError,
    ConversionError,
    DetectionFailed,
    InvalidInputType,
    TranscodingError,
    UnsupportedEncoding,
    UnsupportedSourceEncoding,
    UnsupportedTargetEncoding,
)
from detconv.files import AnalysisResult, analyse, convert_file
from detconv.names import DEFAULT_ENCODING, NATIVE_TEXT, canonicalize_encoding_name
from detconv.stream import ConversionBuffer, convert_stream
from detconv.transcoder import CodecsTranscoder, Transcoder

__all__ = [
    "DEFAULT_ENCODING",
    "NATIVE_TEXT",
    "AnalysisResult",
    "BufferClosedError",
    "ByteContent",
    "CharsetNormalizerDetector",
    "CodecsTranscoder",
    "Content",
    "ConversionBuffer",
    "ConversionError",
    "Converter",
    "DetectionFailed",
    "DetectionResult",
    "Detector",
    "InvalidInputType",
    "TextContent",
    "TranscodingError",
    "Transcoder",
    "UnsupportedEncoding",
    "UnsupportedSourceEncoding",
    "UnsupportedTargetEncoding",
    "analyse",
    "as_content",
    "canonicalize_encoding_name",
    "convert",
    "convert_file",
    "convert_stream",
    "detect",
    "encoding_exists",
]
__version__ = "0.1.0"

_converter = Converter()


def convert(value, encoding=None, errors: str | None = None):
    """
    Detect the encoding of ``value`` and re-encode it.

    Text input skips detection. With ``NATIVE_TEXT`` as the target the decoded
    ``str`` is returned and no encode step runs.

    Args:
        value: ``bytes`` of unknown encoding, or ``str``
        encoding: Target encoding name, ``NATIVE_TEXT``, or ``None`` for 'utf-8'.
                  Names are compared lowercase with '_' read as '-'.
        errors: Codec error policy ('replace', 'strict', ...). Default: 'replace'

    Returns:
        bytes in the target encoding, or str when ``encoding`` is ``NATIVE_TEXT``

    Raises:
        DetectionFailed: If the encoding of byte input cannot be detected
        UnsupportedSourceEncoding: If the detected encoding cannot be decoded
        UnsupportedTargetEncoding: If the target encoding is unknown or not a string
        InvalidInputType: If ``value`` is neither bytes nor str
        TranscodingError: If the text cannot be encoded under ``errors``

    Examples:
        >>> import detconv
        >>> detconv.convert("Olá Mundo", "latin-1")
        b'Ol\\xe1 Mundo'
        >>> detconv.convert("hello", detconv.NATIVE_TEXT)
        'hello'
    """
    return _converter.convert(value, encoding, errors)


def detect(data) -> DetectionResult:
    """
    Detect the encoding of ``data`` with the default detector.

    The returned name is canonical; ``encoding`` is ``None`` when detection failed.
    """
    content = as_content(data)
    if isinstance(content, TextContent):
        raise InvalidInputType("detect() expects bytes, got str")
    return _converter.detect(content.data)


def encoding_exists(name: str) -> bool:
    """Return True if ``name`` is a text encoding the default transcoder supports."""
    return _converter.encoding_exists(name)
