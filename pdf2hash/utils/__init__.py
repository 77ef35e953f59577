"""
Utility modules for pdf2hash.
"""

from .config import Config, verbosity_to_level
from .exceptions import (
    PDFHashError,
    PDFIOError,
    PDFNotFoundError,
    PDFParseError,
    PDFNotEncryptedError,
    FieldError,
    MissingFieldError,
    InvalidFieldError,
    ConfigError,
)
from .logger import Logger
