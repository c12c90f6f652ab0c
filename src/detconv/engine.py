"""
Conversion engine: detect the source encoding, decode, re-encode.
"""

import logging

from detconv.content import ByteContent, Content, TextContent, as_content
from detconv.detector import CharsetNormalizerDetector, DetectionResult, Detector
from detconv.errors import DetectionFailed, UnsupportedSourceEncoding, UnsupportedTargetEncoding
from detconv.names import DEFAULT_ENCODING, NATIVE_TEXT, NativeText, canonicalize_encoding_name
from detconv.transcoder import CodecsTranscoder, Transcoder

__all__ = ["Converter", "resolve_target"]

logger = logging.getLogger(__name__)


def resolve_target(encoding) -> str | NativeText:
    """
    Turn a requested target into a canonical encoding name or ``NATIVE_TEXT``.

    ``None`` selects ``DEFAULT_ENCODING``. Any other non-string raises
    :class:`UnsupportedTargetEncoding` rather than falling back to the default.
    """
    if encoding is None:
        return DEFAULT_ENCODING
    if encoding is NATIVE_TEXT:
        return NATIVE_TEXT
    if not isinstance(encoding, str):
        raise UnsupportedTargetEncoding(encoding)
    return canonicalize_encoding_name(encoding)


class Converter:
    """
    Detects and transcodes text of unknown origin.

    A converter keeps no state between calls; one instance can be shared across
    threads as long as its detector and transcoder are stateless too.

    Args:
        detector: Detector capability. Defaults to :class:`CharsetNormalizerDetector`.
        transcoder: Transcoder capability. Defaults to :class:`CodecsTranscoder`.
        errors: Codec error policy used when a call does not give one. The default
            ``"replace"`` substitutes characters a codec cannot handle; pass
            ``"strict"`` to raise :class:`TranscodingError` instead.

    Examples:
        >>> converter = Converter()
        >>> converter.convert("café", "latin-1")
        b'caf\\xe9'
        >>> converter.convert("hello", NATIVE_TEXT)
        'hello'
    """

    def __init__(
        self,
        detector: Detector | None = None,
        transcoder: Transcoder | None = None,
        errors: str = "replace",
    ):
        self.detector = detector if detector is not None else CharsetNormalizerDetector()
        self.transcoder = transcoder if transcoder is not None else CodecsTranscoder()
        self.errors = errors

    def encoding_exists(self, name: str) -> bool:
        if not isinstance(name, str):
            return False
        return self.transcoder.encoding_exists(canonicalize_encoding_name(name))

    def detect(self, data: bytes) -> DetectionResult:
        """Run the detector and canonicalize the name it reports."""
        result = self.detector.detect(data)
        if result.encoding is None:
            return result
        return DetectionResult(
            encoding=canonicalize_encoding_name(result.encoding),
            confidence=result.confidence,
        )

    def decode(self, data: bytes, errors: str | None = None) -> str:
        """
        Detect the encoding of ``data`` and decode it.

        Raises:
            DetectionFailed: If the detector cannot name an encoding.
            UnsupportedSourceEncoding: If the detected encoding is unknown to the transcoder.
        """
        detected = self.detect(data)
        if detected.encoding is None:
            raise DetectionFailed(f"Could not detect the encoding of {len(data)} bytes")
        if not self.transcoder.encoding_exists(detected.encoding):
            raise UnsupportedSourceEncoding(detected.encoding)
        logger.debug("Decoding %d bytes as %s", len(data), detected.encoding)
        return self.transcoder.decode(data, detected.encoding, errors or self.errors)

    def convert_content(self, content: Content, encoding=None, errors: str | None = None) -> Content:
        """
        Convert tagged content to ``encoding``.

        Returns :class:`TextContent` when ``encoding`` is ``NATIVE_TEXT`` and
        :class:`ByteContent` otherwise.

        Raises:
            UnsupportedTargetEncoding: If the target is unknown or not a string.
            DetectionFailed: If byte input has no detectable encoding.
            UnsupportedSourceEncoding: If the detected encoding is unknown.
            TranscodingError: If decoding or encoding fails under ``errors``.
            InvalidInputType: If ``content`` is neither a :data:`Content` variant nor bytes or str.
        """
        target = resolve_target(encoding)
        errors = errors or self.errors

        content = as_content(content)
        if isinstance(content, TextContent):
            text = content.text
        else:
            text = self.decode(content.data, errors)

        if target is NATIVE_TEXT:
            logger.debug("Returning native text, no encode step")
            return TextContent(text)
        if not self.transcoder.encoding_exists(target):
            raise UnsupportedTargetEncoding(target)
        logger.debug("Encoding %d characters as %s", len(text), target)
        return ByteContent(self.transcoder.encode(text, target, errors))

    def convert(self, value, encoding=None, errors: str | None = None):
        """
        Convert ``bytes`` or ``str`` to ``encoding``.

        Args:
            value: Bytes of unknown encoding, or text.
            encoding: Target encoding name, ``NATIVE_TEXT`` for ``str`` output,
                or ``None`` for ``utf-8``.
            errors: Codec error policy for this call.

        Returns:
            ``bytes`` in the target encoding, or ``str`` for ``NATIVE_TEXT``.
        """
        return self.convert_content(as_content(value), encoding, errors).value
