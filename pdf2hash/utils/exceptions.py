"""
Custom exceptions for pdf2hash.
"""

class PDFHashError(Exception):
    """Base exception for pdf2hash errors"""
    pass


class PDFIOError(PDFHashError):
    """PDF file could not be read"""

    def __init__(self, reason):
        super().__init__(f"I/O error: {reason}")
        self.reason = reason


class PDFNotFoundError(PDFIOError):
    """PDF file not found"""
    pass


class PDFParseError(PDFHashError):
    """PDF file is not a structurally valid document"""

    def __init__(self, reason):
        super().__init__(f"PDF error: {reason}")
        self.reason = reason


class PDFNotEncryptedError(PDFHashError):
    """PDF is not encrypted"""

    def __init__(self):
        super().__init__("File is not encrypted")


class FieldError(PDFHashError):
    """A dictionary entry needed for the hash could not be read"""

    kind = "Bad"

    def __init__(self, field: str):
        super().__init__(f"{self.kind} field: {field}")
        self.field = field


class MissingFieldError(FieldError):
    """Required entry is absent"""
    kind = "Missing"


class InvalidFieldError(FieldError):
    """Entry is present but has the wrong PDF object type"""
    kind = "Invalid"


class ConfigError(PDFHashError):
    """Error in configuration"""
    pass
