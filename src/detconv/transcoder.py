"""
Transcoding capability and its implementation on top of the codec registry.
"""

import codecs
import logging
from typing import Protocol

from detconv.errors import TranscodingError, UnsupportedEncoding

__all__ = [
    "CodecsTranscoder",
    "Transcoder",
]

logger = logging.getLogger(__name__)


class Transcoder(Protocol):
    def encoding_exists(self, name: str) -> bool: ...

    def decode(self, data: bytes, name: str, errors: str = "strict") -> str: ...

    def encode(self, text: str, name: str, errors: str = "strict") -> bytes: ...


class CodecsTranscoder:
    """
    Transcoder using Python's codec registry.

    The registry resolves aliases on its own (``shift-jis``, ``SJIS`` and
    ``shift_jis`` all name one codec). Codecs that do not map bytes to text, such
    as ``base64`` or ``rot13``, are reported as unsupported.
    """

    def encoding_exists(self, name: str) -> bool:
        if not isinstance(name, str) or not name:
            return False
        try:
            info = codecs.lookup(name)
        except LookupError:
            return False
        return getattr(info, "_is_text_encoding", True)

    def _require(self, name: str) -> None:
        if not self.encoding_exists(name):
            raise UnsupportedEncoding(name)

    def decode(self, data: bytes, name: str, errors: str = "strict") -> str:
        """Decode ``data`` with ``name``.

        Raises:
            UnsupportedEncoding: If ``name`` is not a text codec.
            TranscodingError: If the bytes are invalid for ``name`` under ``errors``.
        """
        self._require(name)
        try:
            return codecs.decode(data, name, errors)
        except UnicodeError as err:
            logger.warning("Failed to decode %d bytes as %s: %s", len(data), name, err)
            raise TranscodingError(name, f"Cannot decode input as {name!r}: {err}") from err

    def encode(self, text: str, name: str, errors: str = "strict") -> bytes:
        """Encode ``text`` with ``name``.

        Raises:
            UnsupportedEncoding: If ``name`` is not a text codec.
            TranscodingError: If ``text`` cannot be represented in ``name`` under ``errors``.
        """
        self._require(name)
        try:
            return codecs.encode(text, name, errors)
        except UnicodeError as err:
            logger.warning("Failed to encode %d characters as %s: %s", len(text), name, err)
            raise TranscodingError(name, f"Cannot encode text as {name!r}: {err}") from err
