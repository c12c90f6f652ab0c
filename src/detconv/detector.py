"""
Charset detection capability and its charset_normalizer-backed implementation.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from charset_normalizer import from_bytes

from detconv.names import canonicalize_encoding_name

__all__ = [
    "CharsetNormalizerDetector",
    "DetectionResult",
    "Detector",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionResult:
    """Best guess for the encoding of a byte sequence.

    ``encoding`` is ``None`` when detection failed; ``confidence`` is advisory only.
    """

    encoding: str | None
    confidence: float = 0.0

    @property
    def found(self) -> bool:
        return self.encoding is not None


class Detector(Protocol):
    def detect(self, data: bytes) -> DetectionResult: ...


class CharsetNormalizerDetector:
    """
    Detector backed by :func:`charset_normalizer.from_bytes`.

    Empty input and input charset_normalizer cannot explain below ``threshold``
    yield a result without an encoding instead of a guess.

    Args:
        threshold: Maximum mess ratio accepted by charset_normalizer (0.0 - 1.0).
        cp_isolation: Only consider these code pages.
        cp_exclusion: Never consider these code pages.
        steps: Number of chunks charset_normalizer samples.
        chunk_size: Size of each sampled chunk in bytes.
        prefer_bom_aware: Report UTF-8 input carrying a BOM as ``utf-8-sig``
            so decoding strips the mark.

    Examples:
        >>> detector = CharsetNormalizerDetector()
        >>> detector.detect("Olá Mundo, ação".encode("utf-8")).encoding
        'utf-8'
    """

    def __init__(
        self,
        threshold: float = 0.2,
        cp_isolation: Iterable[str] | None = None,
        cp_exclusion: Iterable[str] | None = None,
        steps: int = 5,
        chunk_size: int = 512,
        prefer_bom_aware: bool = True,
    ):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Invalid threshold {threshold!r}. Must be between 0.0 and 1.0")
        self.threshold = threshold
        self.cp_isolation = list(cp_isolation) if cp_isolation is not None else None
        self.cp_exclusion = list(cp_exclusion) if cp_exclusion is not None else None
        self.steps = steps
        self.chunk_size = chunk_size
        self.prefer_bom_aware = prefer_bom_aware

    def detect(self, data: bytes) -> DetectionResult:
        if not data:
            logger.debug("Empty input, nothing to detect")
            return DetectionResult(encoding=None, confidence=0.0)

        best = from_bytes(
            bytes(data),
            steps=self.steps,
            chunk_size=self.chunk_size,
            threshold=self.threshold,
            cp_isolation=self.cp_isolation,
            cp_exclusion=self.cp_exclusion,
        ).best()
        if best is None:
            logger.debug("charset_normalizer found no plausible encoding for %d bytes", len(data))
            return DetectionResult(encoding=None, confidence=0.0)

        encoding = canonicalize_encoding_name(best.encoding)
        if self.prefer_bom_aware and best.bom and encoding == "utf-8":
            encoding = "utf-8-sig"
        confidence = min(max(1.0 - best.chaos, 0.0), 1.0)

        logger.debug("Detected %s (confidence %.2f) for %d bytes", encoding, confidence, len(data))
        return DetectionResult(encoding=encoding, confidence=confidence)
