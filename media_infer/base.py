"""
Base types for the media container classifier.
Defines the container enumeration, the signature record, the error
hierarchy and the classifier interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple, Union


class ContainerType(Enum):
    """Enumeration of supported media containers."""
    MKV = "mkv"
    ASF = "asf"
    GXF = "gxf"
    WTV = "wtv"
    RCWT = "rcwt"
    MP4 = "mp4"
    TS = "ts"
    M2TS = "m2ts"
    PS = "ps"
    TIVO_PS = "tivops"
    MXF = "mxf"
    ES = "es"

    @property
    def description(self) -> str:
        """Human readable name of the container."""
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.description

    @classmethod
    def from_name(cls, name: str) -> "ContainerType":
        """
        Parse a short container name or a file extension.

        Matching is case-insensitive and a leading dot is ignored, so
        "MKV", "mkv" and ".mkv" are all accepted.

        Args:
            name: Short name or extension

        Returns:
            The matching ContainerType

        Raises:
            ValueError: If name is not a known container
        """
        key = name.strip().lower().lstrip('.')
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown container name: {name!r}") from None


_DESCRIPTIONS = {
    ContainerType.MKV: "Matroska (MKV)",
    ContainerType.ASF: "Advanced Systems Format (ASF)",
    ContainerType.GXF: "General Exchange Format (GXF)",
    ContainerType.WTV: "Windows Recorded TV Show (WTV)",
    ContainerType.RCWT: "Raw Captions With Time (RCWT)",
    ContainerType.MP4: "MPEG-4 Part 14 (MP4)",
    ContainerType.TS: "MPEG Transport Stream (TS)",
    ContainerType.M2TS: "MPEG-2 Transport Stream (M2TS)",
    ContainerType.PS: "Program Stream (PS)",
    ContainerType.TIVO_PS: "TiVo Program Stream (TiVo PS)",
    ContainerType.MXF: "Material Exchange Format (MXF)",
    ContainerType.ES: "Elementary Stream (ES)",
}

# CCExtractor writes RCWT dumps with a .bin extension
_ALIASES = {
    'bin': 'rcwt',
    'tivo': 'tivops',
}


@dataclass(frozen=True)
class SignatureEntry:
    """
    One row of the signature table.

    The entry matches when `pattern` sits at `offset` and every
    (offset, pattern) pair in `extra` matches too. All comparisons are
    exact byte equality.
    """
    container: ContainerType
    offset: int
    pattern: bytes
    extra: Tuple[Tuple[int, bytes], ...] = ()
    # Minimum buffer length this entry can match
    span: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        for offset, pattern in self.segments:
            if not isinstance(pattern, bytes):
                raise ValueError(f"{self.container.name}: pattern must be bytes, got {type(pattern).__name__}")
            if not pattern:
                raise ValueError(f"{self.container.name}: empty pattern")
            if offset < 0:
                raise ValueError(f"{self.container.name}: negative offset {offset}")
        span = max(offset + len(pattern) for offset, pattern in self.segments)
        object.__setattr__(self, 'span', span)

    @property
    def segments(self) -> Iterator[Tuple[int, bytes]]:
        """Primary segment followed by the extra ones."""
        yield self.offset, self.pattern
        yield from self.extra

    def matches(self, buf: bytes) -> bool:
        """Return True if every segment is present in buf."""
        if len(buf) < self.span:
            return False
        return all(
            buf[offset:offset + len(pattern)] == pattern
            for offset, pattern in self.segments
        )


class ClassifyError(Exception):
    """Base class for classification failures."""


class UnrecognizedFormat(ClassifyError, ValueError):
    """The inspected bytes match no known signature."""

    def __init__(self, length: int):
        super().__init__(f"Could not identify container from {length} byte(s)")
        self.length = length


class IoFailure(ClassifyError):
    """Opening or reading the source failed."""

    def __init__(self, cause: OSError, path: Optional[Path] = None):
        where = f" {path}" if path is not None else ""
        super().__init__(f"Error reading{where}: {cause}")
        self.cause = cause
        self.path = path


PathArg = Union[str, PathLike]


class AbstractClassifier(ABC):
    """Abstract base class for container classification."""

    @abstractmethod
    def classify_bytes(self, buf: bytes) -> ContainerType:
        """
        Classify a byte buffer.

        Args:
            buf: Leading bytes of a media file

        Returns:
            Detected container type

        Raises:
            UnrecognizedFormat: If no signature matches
        """
        pass

    @abstractmethod
    def classify_file_path(self, path: PathArg) -> ContainerType:
        """
        Classify the file at path.

        Args:
            path: Path to file

        Returns:
            Detected container type

        Raises:
            IoFailure: If the file cannot be opened or read
            UnrecognizedFormat: If no signature matches
        """
        pass

    @abstractmethod
    def classify_open_file(self, handle: BinaryIO) -> ContainerType:
        """
        Classify the bytes readable from an open binary handle.

        Args:
            handle: File object opened for binary reading

        Returns:
            Detected container type

        Raises:
            IoFailure: If reading fails
            UnrecognizedFormat: If no signature matches
        """
        pass
