"""
media_infer - identify media containers by their magic bytes.

Reads a short fixed prefix of a file and compares it against a table of
known signatures (MKV, ASF, GXF, WTV, RCWT, MP4, TS, M2TS, PS, TiVo PS,
MXF and MPEG elementary streams).

    >>> import media_infer
    >>> media_infer.classify_bytes(b"\\x1a\\x45\\xdf\\xa3\\x00\\x01")
    <ContainerType.MKV: 'mkv'>

    media_infer.classify_file_path("some.mkv")

    with open("some.mkv", "rb") as f:
        media_infer.classify_open_file(f)

Failures raise UnrecognizedFormat (no signature matched) or IoFailure
(the file could not be opened or read); both derive from ClassifyError.
"""
import logging

from media_infer.base import (
    ClassifyError,
    ContainerType,
    IoFailure,
    SignatureEntry,
    UnrecognizedFormat,
)
from media_infer.classifiers.magic_classifier import (
    MagicByteClassifier,
    classify_bytes,
    classify_file_path,
    classify_open_file,
)
from media_infer.signatures import MIN_REQUIRED_LEN, SIGNATURES

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'ClassifyError',
    'ContainerType',
    'IoFailure',
    'MIN_REQUIRED_LEN',
    'MagicByteClassifier',
    'SIGNATURES',
    'SignatureEntry',
    'UnrecognizedFormat',
    'classify_bytes',
    'classify_file_path',
    'classify_open_file',
]
