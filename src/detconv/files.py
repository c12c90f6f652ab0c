"""
File-level helpers built on the conversion engine.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Literal

from detconv.engine import Converter
from detconv.errors import DetectionFailed, UnsupportedSourceEncoding
from detconv.names import DEFAULT_ENCODING, NATIVE_TEXT

__all__ = [
    "AnalysisResult",
    "analyse",
    "convert_file",
    "detect_newlines",
]

logger = logging.getLogger(__name__)

DEFAULT_MAX_SAMPLE_SIZE = 1024 * 1024
NEWLINE_MAP = {"LF": "\n", "CRLF": "\r\n", "CR": "\r"}
_LINE_WINDOW = 4096

_default_converter = Converter()


@dataclass(frozen=True)
class AnalysisResult:
    """Result of file analysis containing encoding and newline style information."""

    encoding: str
    confidence: float
    newlines: Literal["LF", "CRLF", "CR"]


def _resolve_path(file_path: str | Path) -> Path:
    if isinstance(file_path, str):
        file_path = Path(file_path)

    file_path = file_path.absolute()
    if file_path.is_dir():
        raise ValueError(f"Provided path '{file_path}' is a directory, expected a file path.")

    if file_path.exists() is False:
        raise FileNotFoundError(f"File '{file_path}' does not exist.")
    return file_path


def detect_newlines(text: str) -> Literal["LF", "CRLF", "CR"]:
    """Return the most frequent newline style in ``text``, ``LF`` when there is none."""
    crlf = text.count("\r\n")
    counts = {
        "LF": text.count("\n") - crlf,
        "CRLF": crlf,
        "CR": text.count("\r") - crlf,
    }
    style = max(counts, key=counts.get)
    if counts[style] == 0:
        return "LF"
    return style


def analyse(
    file_path: str | Path,
    max_sample_size: int | None = None,
    converter: Converter | None = None,
) -> AnalysisResult:
    """
    Analyse the encoding and newline style of a file.

    Only the first ``max_sample_size`` bytes are read.

    Args:
        file_path: Path to the file to analyse (string or Path object)
        max_sample_size: Optional. Maximum number of bytes to read from the file.
                        Default is 1MB (1024*1024 bytes).
        converter: Optional. Converter whose detector is used.

    Returns:
        AnalysisResult: Object containing encoding, confidence and newlines information

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is a directory
        DetectionFailed: If the file is empty or its encoding cannot be detected

    Examples:
        >>> import detconv
        >>> result = detconv.analyse("file.txt")
        >>> print(result.encoding)
        'utf-8'
        >>> print(result.newlines)
        'LF'
    """
    file_path = _resolve_path(file_path)
    converter = converter or _default_converter
    sample_size = max_sample_size or DEFAULT_MAX_SAMPLE_SIZE

    with file_path.open("rb") as f:
        sample = f.read(sample_size)
        # Extend to the next line break so the sample does not end inside a character.
        tail = f.read(_LINE_WINDOW)
        if tail:
            cut = tail.find(b"\n")
            sample += tail if cut == -1 else tail[: cut + 1]

    detected = converter.detect(sample)
    if detected.encoding is None:
        raise DetectionFailed(f"Could not detect the encoding of '{file_path}'")
    if not converter.encoding_exists(detected.encoding):
        raise UnsupportedSourceEncoding(detected.encoding)

    # The sample may end inside a multibyte sequence.
    text = converter.transcoder.decode(sample, detected.encoding, "ignore")
    return AnalysisResult(
        encoding=detected.encoding,
        confidence=detected.confidence,
        newlines=detect_newlines(text),
    )


def convert_file(
    file_path: str | Path,
    output: str | Path | None = None,
    encoding: str = DEFAULT_ENCODING,
    newlines: Literal["LF", "CRLF", "CR"] | None = None,
    errors: str | None = None,
    converter: Converter | None = None,
) -> Path:
    """
    Convert a file to ``encoding``, optionally rewriting its newline style.

    Without ``output`` the file is replaced in place through a temporary file in
    the same directory, so a failed conversion leaves the original untouched.

    Args:
        file_path: Path to the input file (string or Path object)
        output: Path to write the converted content to. Default: convert in place
        encoding: Target encoding name (e.g., 'utf-8', 'utf-16', 'latin-1'). Default: 'utf-8'
        newlines: Target newline style ('LF', 'CRLF', or 'CR'). Default: keep as is
        errors: Codec error policy, e.g. 'replace'. Default: the converter's policy
        converter: Optional. Converter to use.

    Returns:
        Path: The path that was written.

    Raises:
        FileNotFoundError: If the input file does not exist
        ValueError: If ``newlines`` is invalid or the path is a directory
        DetectionFailed: If the input encoding cannot be detected
        UnsupportedTargetEncoding: If the target encoding is invalid

    Examples:
        >>> import detconv
        >>> detconv.convert_file("file.txt", output="file_utf8.txt", encoding="utf-8", newlines="LF")

        >>> # Convert in place to Windows-style with a specific encoding
        >>> detconv.convert_file("file.txt", encoding="windows-1252", newlines="CRLF")
    """
    if newlines is not None and newlines not in NEWLINE_MAP:
        raise ValueError(f"Invalid newlines value '{newlines}'. Must be 'LF', 'CRLF', or 'CR'")

    file_path = _resolve_path(file_path)
    converter = converter or _default_converter

    raw_content = file_path.read_bytes()
    if newlines is None:
        converted = converter.convert(raw_content, encoding, errors)
    else:
        content = converter.convert(raw_content, NATIVE_TEXT, errors)
        content = content.replace("\r\n", "\n").replace("\r", "\n")
        if newlines != "LF":
            content = content.replace("\n", NEWLINE_MAP[newlines])
        converted = converter.convert(content, encoding, errors)

    if output is not None:
        output_path = Path(output).absolute()
        output_path.write_bytes(converted)
        logger.debug("Wrote %d bytes to %s", len(converted), output_path)
        return output_path

    with NamedTemporaryFile(mode="wb", delete=False, dir=file_path.parent, suffix=".tmp") as temp_file:
        temp_file.write(converted)
        temp_file_path = Path(temp_file.name)
    try:
        shutil.copymode(file_path, temp_file_path)
        os.replace(temp_file_path, file_path)
    except OSError:
        temp_file_path.unlink(missing_ok=True)
        raise
    logger.debug("Replaced %s with %d converted bytes", file_path, len(converted))
    return file_path
