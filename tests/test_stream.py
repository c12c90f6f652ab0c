"""
Tests for the buffering adapter: ConversionBuffer and convert_stream()
"""

import pytest

from detconv import (
    NATIVE_TEXT,
    BufferClosedError,
    CodecsTranscoder,
    ConversionBuffer,
    Converter,
    DetectionFailed,
    DetectionResult,
    InvalidInputType,
    convert_stream,
)


class CountingDetector:
    def __init__(self, encoding):
        self.encoding = encoding
        self.calls = []

    def detect(self, data):
        self.calls.append(data)
        return DetectionResult(encoding=self.encoding, confidence=1.0 if self.encoding else 0.0)


class TestConversionBuffer:
    """Test ConversionBuffer.feed() and finalize()"""

    def test_byte_chunks_are_detected_once_as_a_whole(self):
        detector = CountingDetector("utf-8")
        buffer = ConversionBuffer("latin-1", Converter(detector, CodecsTranscoder()))

        data = "Olá, São Paulo".encode("utf-8")
        # Split inside the two-byte sequence for "á"
        buffer.feed(data[:3])
        buffer.feed(data[3:])
        assert detector.calls == []

        assert buffer.finalize() == "Olá, São Paulo".encode("latin-1")
        assert detector.calls == [data]
        assert buffer.closed

    def test_text_chunks(self):
        detector = CountingDetector("utf-8")
        buffer = ConversionBuffer(NATIVE_TEXT, Converter(detector, CodecsTranscoder()))
        for chunk in ["Hello", ", ", "World"]:
            buffer.feed(chunk)

        assert buffer.finalize() == "Hello, World"
        assert detector.calls == []

    def test_default_target_is_utf8(self):
        buffer = ConversionBuffer(converter=Converter(CountingDetector("utf-8"), CodecsTranscoder()))
        buffer.feed("ação")
        assert buffer.finalize() == "ação".encode("utf-8")

    def test_mixed_chunk_variants_are_rejected(self):
        buffer = ConversionBuffer("utf-8", Converter(CountingDetector("utf-8"), CodecsTranscoder()))
        buffer.feed(b"bytes first")
        with pytest.raises(InvalidInputType):
            buffer.feed("then text")

    def test_invalid_chunk_type(self):
        buffer = ConversionBuffer("utf-8")
        with pytest.raises(InvalidInputType):
            buffer.feed(123)

    def test_feed_after_finalize(self):
        buffer = ConversionBuffer("utf-8", Converter(CountingDetector("utf-8"), CodecsTranscoder()))
        buffer.feed("x")
        buffer.finalize()
        with pytest.raises(BufferClosedError):
            buffer.feed("y")
        with pytest.raises(BufferClosedError):
            buffer.finalize()

    def test_empty_buffer_fails_detection(self):
        """No chunks means empty bytes, which cannot be detected"""
        buffer = ConversionBuffer("utf-8")
        with pytest.raises(DetectionFailed):
            buffer.finalize()
        assert buffer.closed


class TestConvertStream:
    """Test convert_stream()"""

    def test_yields_single_result(self):
        converter = Converter(CountingDetector("utf-8"), CodecsTranscoder())
        results = list(convert_stream([b"caf", b"\xc3\xa9"], "latin-1", converter))
        assert results == [b"caf\xe9"]

    def test_failure_propagates_as_error(self):
        """A detection failure is raised during iteration, not swallowed as end of data"""
        converter = Converter(CountingDetector(None), CodecsTranscoder())
        stream = convert_stream(iter([b"\x00\x01", b"\x02"]), "utf-8", converter)
        with pytest.raises(DetectionFailed):
            next(stream)

    def test_lazy_until_iterated(self):
        converter = Converter(CountingDetector(None), CodecsTranscoder())
        convert_stream([b"\x00"], "utf-8", converter)
        assert converter.detector.calls == []

    def test_error_policy(self):
        converter = Converter(CountingDetector("utf-8"), CodecsTranscoder())
        results = list(convert_stream(["naïve"], "ascii", converter, errors="replace"))
        assert results == [b"na?ve"]
