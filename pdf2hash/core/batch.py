"""
Batch extraction for pdf2hash.

This module provides the BatchExtractor class that walks a list of PDF
files in order and turns each one into a hash line or an error, without
letting one bad file stop the rest.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional

from tqdm import tqdm

from .document import EncryptedDocument
from .extractor import extract_record
from .formatter import format_hash
from pdf2hash.utils.exceptions import PDFHashError
from pdf2hash.utils.logger import Logger


@dataclass
class ExtractionResult:
    """Outcome of processing one file"""

    path: str
    hash: Optional[str] = None
    error: Optional[PDFHashError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def line(self, show_filename: bool = False) -> str:
        """Output line for a successful result"""
        if show_filename:
            return f"{self.path}:{self.hash}"
        return self.hash


class BatchExtractor:
    """Extracts hashes from several PDF files, one at a time"""

    def __init__(self, strict: bool = False, progress: bool = False,
                 opener: Optional[Callable[..., EncryptedDocument]] = None,
                 logger=None):
        """Initialize the extractor

        Args:
            strict: Ask pypdf for strict parsing
            progress: Show a progress bar on stderr
            opener: Callable turning a path into an EncryptedDocument
                (default: EncryptedDocument.from_file)
            logger: Optional logger instance
        """
        self.strict = strict
        self.progress = progress
        self.opener = opener or EncryptedDocument.from_file
        self.logger = logger or Logger(name="pdf2hash.batch").get_logger()

    def extract(self, path: str) -> ExtractionResult:
        """Process a single file

        Errors raised by pdf2hash are captured in the result. The
        default opener reports every parser failure as one of them.
        """
        self.logger.debug(f"Opening {path}")
        try:
            document = self.opener(path, strict=self.strict)
            record = extract_record(document)
        except PDFHashError as e:
            self.logger.debug(f"{path}: extraction failed ({e.__class__.__name__})")
            return ExtractionResult(path=path, error=e)

        if self.logger.isEnabledFor(logging.DEBUG):
            self._dump_encryption_dictionary(document)

        return ExtractionResult(path=path, hash=format_hash(record))

    def run(self, paths: Iterable[str]) -> Iterator[ExtractionResult]:
        """Process files in the given order, yielding one result per file"""
        paths = list(paths)
        with tqdm(total=len(paths), unit="file", disable=not self.progress) as progress_bar:
            for path in paths:
                result = self.extract(path)
                progress_bar.update(1)
                yield result

    def run_all(self, paths: Iterable[str]) -> List[ExtractionResult]:
        return list(self.run(paths))

    def _dump_encryption_dictionary(self, document: EncryptedDocument) -> None:
        self.logger.debug(f"Encryption dictionary of {document.name}:")
        for key, value in document.encryption_dictionary().items():
            self.logger.debug(f"  {key}: {value}")
