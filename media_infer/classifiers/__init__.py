from media_infer.classifiers.magic_classifier import (
    MagicByteClassifier,
    classify_bytes,
    classify_file_path,
    classify_open_file,
)

__all__ = [
    'MagicByteClassifier',
    'classify_bytes',
    'classify_file_path',
    'classify_open_file',
]
