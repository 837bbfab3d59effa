"""
Container classifier.
Compares a short prefix of a media file against the ordered magic-byte
signature table and reports the first container that matches.
"""
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Sequence

from media_infer.base import (
    AbstractClassifier,
    ContainerType,
    IoFailure,
    PathArg,
    SignatureEntry,
    UnrecognizedFormat,
)
from media_infer.config import get_config
from media_infer.signatures import SIGNATURES

logger = logging.getLogger(__name__)


class MagicByteClassifier(AbstractClassifier):
    """Classifies media containers by their leading bytes."""

    def __init__(self, signatures: Optional[Sequence[SignatureEntry]] = None):
        """
        Args:
            signatures: Ordered signature table; defaults to SIGNATURES
        """
        self.config = get_config()

        # A level set by the host application wins over LOG_LEVEL
        package_logger = logging.getLogger('media_infer')
        if self.config.log_level is not None and package_logger.level == logging.NOTSET:
            package_logger.setLevel(self.config.log_level)

        self.signatures = tuple(SIGNATURES if signatures is None else signatures)
        if not self.signatures:
            raise ValueError("Signature table is empty")

        # Never read more than the longest entry needs
        self.prefix_size = max(entry.span for entry in self.signatures)

    # ---------------------------------------------------------- interface

    def classify_bytes(self, buf: bytes) -> ContainerType:
        """
        Return the container of the first table entry that matches buf.

        Entries are tried in table order; later entries are never looked
        at once one matches. Buffers shorter than an entry's span simply
        fail that entry.

        Args:
            buf: bytes, bytearray or memoryview holding the file prefix

        Returns:
            Detected container type

        Raises:
            UnrecognizedFormat: If no entry matches
        """
        for index, entry in enumerate(self.signatures):
            if entry.matches(buf):
                logger.debug("Matched %s (entry %d)", entry.container.name, index)
                return entry.container

        logger.debug("No signature matched %d byte(s)", len(buf))
        raise UnrecognizedFormat(len(buf))

    def classify_file_path(self, path: PathArg) -> ContainerType:
        """
        Open the file, read its prefix and classify it.

        A file that ends before a signature could be complete (including
        an empty file) is unrecognized, not an I/O failure.

        Args:
            path: Path to the media file

        Returns:
            Detected container type

        Raises:
            IoFailure: If the file cannot be opened or read
            UnrecognizedFormat: If no entry matches
        """
        path = Path(path)
        try:
            with open(path, 'rb') as f:
                header = self._read_prefix(f)
        except OSError as e:
            logger.warning("Cannot read %s: %s", path, e)
            raise IoFailure(e, path) from e

        return self.classify_bytes(header)

    def classify_open_file(self, handle: BinaryIO) -> ContainerType:
        """
        Read the prefix from an open binary handle and classify it.

        Reads from the current position without seeking first, and does
        not restore the position afterwards: the handle is left advanced
        by the number of bytes consumed (at most prefix_size).

        Args:
            handle: File object opened for binary reading

        Returns:
            Detected container type

        Raises:
            IoFailure: If reading fails
            UnrecognizedFormat: If no entry matches
            TypeError: If the handle yields str instead of bytes
        """
        try:
            header = self._read_prefix(handle)
        except OSError as e:
            name = getattr(handle, 'name', None)
            path = Path(name) if isinstance(name, str) else None
            logger.warning("Cannot read %s: %s", name or handle, e)
            raise IoFailure(e, path) from e

        return self.classify_bytes(header)

    # ---------------------------------------------------------- internals

    def _read_prefix(self, f: BinaryIO) -> bytes:
        """
        Read up to prefix_size bytes, retrying short reads until EOF.

        Raw and non-blocking streams may return fewer bytes than asked
        for; None (no data available yet) is treated like EOF.
        """
        chunks = []
        remaining = self.prefix_size

        while remaining > 0:
            chunk = f.read(remaining)
            if isinstance(chunk, str):
                raise TypeError("Handle must be opened in binary mode")
            if not chunk:
                break
            chunks.append(bytes(chunk))
            remaining -= len(chunk)

        return b''.join(chunks)


# Shared instance for the module-level helpers, created on first use
_default: Optional[MagicByteClassifier] = None


def _get_default() -> MagicByteClassifier:
    global _default
    if _default is None:
        _default = MagicByteClassifier()
    return _default


def classify_bytes(buf: bytes) -> ContainerType:
    """Classify a byte buffer with the default signature table."""
    return _get_default().classify_bytes(buf)


def classify_file_path(path: PathArg) -> ContainerType:
    """Classify the file at path with the default signature table."""
    return _get_default().classify_file_path(path)


def classify_open_file(handle: BinaryIO) -> ContainerType:
    """Classify an open binary handle with the default signature table."""
    return _get_default().classify_open_file(handle)
