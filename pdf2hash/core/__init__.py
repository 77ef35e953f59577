"""
Core functionality for pdf2hash.
"""

from .document import EncryptedDocument
from .extractor import (
    EncryptionRecord,
    extract_record,
    max_password_length,
    truncate,
    to_signed32,
)
from .formatter import format_hash
from .batch import BatchExtractor, ExtractionResult
