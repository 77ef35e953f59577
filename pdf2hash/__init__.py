"""
pdf2hash

Extracts the encryption parameters of password protected PDF files into
``$pdf$`` hash lines for John the Ripper and hashcat.
"""

from pdf2hash.core.batch import BatchExtractor, ExtractionResult
from pdf2hash.core.document import EncryptedDocument
from pdf2hash.core.extractor import EncryptionRecord, extract_record, max_password_length
from pdf2hash.core.formatter import format_hash

__version__ = "0.1.0"
