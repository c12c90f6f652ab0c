"""
End-to-end tests for detconv.convert() with the real charset_normalizer detector
"""

import random

import pytest

import detconv

TRADITIONAL_CHINESE = (
    "人人生而自由，在尊嚴和權利上一律平等。他們賦有理性和良心，並應以兄弟關係的精神相對待。\n"
    "人人有資格享有本宣言所載的一切權利和自由，不分種族、膚色、性別、語言、宗教、政治或其他見解、"
    "國籍或社會出身、財產、出生或其他身分等任何區別。\n"
    "人人有權享有生命、自由和人身安全。任何人不得使為奴隸或奴役；一切形式的奴隸制度和奴隸買賣，均應予以禁止。\n"
)

JAPANESE = (
    "すべての人間は、生まれながらにして自由であり、かつ、尊厳と権利とについて平等である。"
    "人間は、理性と良心とを授けられており、互いに同胞の精神をもって行動しなければならない。\n"
    "すべて人は、人種、皮膚の色、性、言語、宗教、政治上その他の意見、国民的若しくは社会的出身、"
    "財産、門地その他の地位又はこれに類するいかなる事由による差別をも受けることなく、"
    "この宣言に掲げるすべての権利と自由とを享有することができる。\n"
)

RUSSIAN = (
    "Все люди рождаются свободными и равными в своем достоинстве и правах. "
    "Они наделены разумом и совестью и должны поступать в отношении друг друга в духе братства.\n"
)


class TestConvertBytes:
    """Byte input goes through detection"""

    def test_big5_to_gb18030(self):
        """Traditional Chinese in big5 re-encoded to the GB family"""
        source = TRADITIONAL_CHINESE.encode("big5")

        detected = detconv.detect(source)
        assert detected.encoding in {"big5", "cp950", "big5hkscs"}, f"Expected big5, got {detected.encoding}"

        converted = detconv.convert(source, "gb18030")
        assert isinstance(converted, bytes)
        assert converted != source
        assert converted.decode("gb18030") == TRADITIONAL_CHINESE

    def test_big5_to_gb2312(self):
        """Characters outside GB2312 are substituted instead of failing the conversion"""
        source = TRADITIONAL_CHINESE.encode("big5")

        converted = detconv.convert(source, "gb2312")
        assert isinstance(converted, bytes)
        assert converted != source

        redetected = detconv.detect(converted)
        assert redetected.encoding in {"gb2312", "gb18030", "gbk"}, f"Expected GB family, got {redetected.encoding}"

    def test_big5_to_gb2312_strict(self):
        source = TRADITIONAL_CHINESE.encode("big5")
        with pytest.raises(detconv.TranscodingError):
            detconv.convert(source, "gb2312", errors="strict")

    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
    def test_random_noise_fails_detection(self, seed):
        """Bytes without decodable structure are not guessed at"""
        rng = random.Random(seed)
        noise = bytes(rng.randrange(256) for _ in range(4096))
        with pytest.raises(detconv.DetectionFailed):
            detconv.convert(noise, "utf-8")

    def test_shift_jis_to_native_text(self):
        """Shift_JIS bytes decode to the original text"""
        source = JAPANESE.encode("shift_jis")

        text = detconv.convert(source, detconv.NATIVE_TEXT)
        assert isinstance(text, str)
        assert text == JAPANESE
        assert detconv.convert(text, "shift-jis") == source

    def test_utf8_to_koi8_r(self):
        source = RUSSIAN.encode("utf-8")

        converted = detconv.convert(source, "KOI8_R")
        assert converted == RUSSIAN.encode("koi8-r")
        assert converted != source

    def test_utf8_with_bom_loses_bom(self):
        source = b"\xef\xbb\xbf" + RUSSIAN.encode("utf-8")
        assert detconv.convert(source, detconv.NATIVE_TEXT) == RUSSIAN

    def test_latin1_to_utf8(self):
        """Latin-1 text is converted to UTF-8"""
        source = "Latin-1 text: café, São Paulo, ação, coração, não\n".encode("latin-1") * 3

        converted = detconv.convert(source, "utf-8")
        content = converted.decode("utf-8")
        assert "café" in content
        assert "São Paulo" in content

    def test_default_target_is_utf8(self):
        source = JAPANESE.encode("shift_jis")
        assert detconv.convert(source) == JAPANESE.encode("utf-8")

    def test_empty_bytes_fail_detection(self):
        with pytest.raises(detconv.DetectionFailed):
            detconv.convert(b"", "utf-8")


class TestConvertText:
    """Text input skips detection"""

    def test_native_text_passthrough(self):
        assert detconv.convert("hello", detconv.NATIVE_TEXT) == "hello"

    def test_default_target(self):
        assert detconv.convert("hello") == b"hello"

    def test_unsupported_target(self):
        with pytest.raises(detconv.UnsupportedTargetEncoding):
            detconv.convert("hello", "not-a-real-encoding")

    def test_invalid_input(self):
        with pytest.raises(detconv.InvalidInputType):
            detconv.convert(12345, "utf-8")

    def test_all_errors_share_a_base(self):
        for error in (
            detconv.DetectionFailed,
            detconv.UnsupportedSourceEncoding,
            detconv.UnsupportedTargetEncoding,
            detconv.InvalidInputType,
            detconv.TranscodingError,
            detconv.BufferClosedError,
        ):
            assert issubclass(error, detconv.ConversionError)


class TestEncodingExists:
    """Test detconv.encoding_exists()"""

    def test_encoding_exists(self):
        assert detconv.encoding_exists("Shift_JIS")
        assert detconv.encoding_exists("ISO-8859-7")
        assert not detconv.encoding_exists("not-a-real-encoding")


class TestDetect:
    """Test detconv.detect()"""

    def test_detect_rejects_text(self):
        with pytest.raises(detconv.InvalidInputType):
            detconv.detect("already text")

    def test_detect_empty(self):
        assert detconv.detect(b"").encoding is None
