"""
Document access for pdf2hash.

pypdf does the parsing. This module only opens files, turns pypdf and OS
failures into pdf2hash exceptions and hands out the trailer and the
encryption dictionary.
"""

import os
from typing import Optional

from pypdf import PdfReader
from pypdf.errors import PyPdfError
from pypdf.generic import ArrayObject, DictionaryObject, NameObject

from pdf2hash.utils.exceptions import (
    InvalidFieldError,
    PDFIOError,
    PDFNotEncryptedError,
    PDFNotFoundError,
    PDFParseError,
)

ENCRYPT_KEY = "/Encrypt"
ID_KEY = "/ID"


class RawPdfReader(PdfReader):
    """PdfReader that never sets up a security handler

    pypdf validates /Encrypt and tries the empty password while loading
    whenever the trailer looks encrypted. Reporting the file as plain
    skips that step, so every object, /Encrypt included, is returned
    exactly as stored and field checks are left to the extractor.
    """

    @property
    def is_encrypted(self) -> bool:
        return False


def _resolved_trailer(trailer: DictionaryObject) -> DictionaryObject:
    """Copy of the trailer with /Encrypt and /ID resolved one level deep"""
    resolved = DictionaryObject(trailer)
    for key in (ENCRYPT_KEY, ID_KEY):
        if key not in trailer:
            continue
        value = trailer[key]
        if isinstance(value, DictionaryObject):
            value = DictionaryObject({k: value[k] for k in value})
        elif isinstance(value, ArrayObject):
            value = ArrayObject(item.get_object() for item in value)
        resolved[NameObject(key)] = value
    return resolved


class EncryptedDocument:
    """Trailer view of a parsed PDF"""

    def __init__(self, trailer: DictionaryObject, name: Optional[str] = None):
        """Wrap an already parsed trailer dictionary

        Args:
            trailer: Trailer dictionary; indirect references must be resolvable
            name: Display name, usually the file path
        """
        self.trailer = trailer
        self.name = name or "<memory>"

    @classmethod
    def from_file(cls, path: str, strict: bool = False) -> "EncryptedDocument":
        """Parse a PDF file with pypdf

        Args:
            path: Path to the PDF file
            strict: Make pypdf reject recoverable structural problems

        Returns:
            The parsed document

        Raises:
            PDFNotFoundError: The path does not exist
            PDFIOError: The file could not be read
            PDFParseError: pypdf could not make sense of the bytes
        """
        if not os.path.exists(path):
            raise PDFNotFoundError(f"PDF file not found: {path}")

        try:
            reader = RawPdfReader(path, strict=strict)
            trailer = _resolved_trailer(reader.trailer)
        except OSError as e:
            raise PDFIOError(e) from e
        except PyPdfError as e:
            raise PDFParseError(e) from e
        except Exception as e:
            # Broken files reach pypdf internals that fail with plain
            # Python errors; one bad file must not end a batch
            raise PDFParseError(f"malformed document structure ({e!r})") from e

        return cls(trailer, name=path)

    @property
    def is_encrypted(self) -> bool:
        return ENCRYPT_KEY in self.trailer

    def encryption_dictionary(self) -> DictionaryObject:
        """Return the resolved /Encrypt dictionary

        Raises:
            PDFNotEncryptedError: The trailer has no /Encrypt entry
            InvalidFieldError: /Encrypt does not resolve to a dictionary
        """
        if not self.is_encrypted:
            raise PDFNotEncryptedError()

        encrypt = self.trailer[ENCRYPT_KEY]
        if not isinstance(encrypt, DictionaryObject):
            raise InvalidFieldError(ENCRYPT_KEY)
        return encrypt
