"""
Encryption parameter extraction.

This module reads the Standard security handler entries out of an
encrypted document and collects them into an EncryptionRecord, the
input of the hash formatter.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pypdf.generic import (
    ArrayObject,
    BooleanObject,
    ByteStringObject,
    DictionaryObject,
    NumberObject,
    TextStringObject,
)

from pdf2hash.core.document import EncryptedDocument
from pdf2hash.utils.exceptions import InvalidFieldError, MissingFieldError

DEFAULT_KEY_LENGTH = 40

# /O and /U grew from 32 to 48 bytes with the AES-256 handlers (R5, R6):
# a 32 byte hash followed by an 8 byte validation salt and an 8 byte key salt.
LEGACY_REVISIONS = (2, 3, 4)
LEGACY_PASSWORD_LENGTH = 32
PASSWORD_LENGTH = 48

_MISSING = object()


@dataclass(frozen=True)
class EncryptionRecord:
    """Everything a cracker needs to know about one encrypted PDF"""

    algorithm: int
    revision: int
    key_length: int
    permissions: int
    encrypt_metadata: bool
    document_id: bytes
    user_password_hash: bytes
    owner_password_hash: bytes
    owner_encryption_seed: Optional[bytes] = None
    user_encryption_seed: Optional[bytes] = None


def max_password_length(revision: int) -> int:
    """Number of /O, /U, /OE and /UE bytes kept for a security handler revision

    Unknown revisions get the larger, modern length.
    """
    if revision in LEGACY_REVISIONS:
        return LEGACY_PASSWORD_LENGTH
    return PASSWORD_LENGTH


def truncate(data: bytes, max_length: int) -> bytes:
    """Keep at most ``max_length`` leading bytes of ``data``"""
    return data[:max_length]


def to_signed32(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a two's complement integer

    /P is a 32 bit mask. Writers store it either signed (-3904) or
    unsigned (4294963392); both must come out as -3904.
    """
    low = value & 0xFFFFFFFF
    if low & 0x80000000:
        return low - 0x100000000
    return low


def _lookup(dictionary: DictionaryObject, key: str) -> Any:
    if key not in dictionary:
        return _MISSING
    return dictionary[key]


def _string_bytes(value: Any) -> Optional[bytes]:
    # pypdf decodes PDF strings to text when it can; original_bytes
    # gives back exactly what the file stored
    if isinstance(value, (ByteStringObject, TextStringObject)):
        return bytes(value.original_bytes)
    return None


def _require_integer(dictionary: DictionaryObject, key: str) -> int:
    value = _lookup(dictionary, key)
    if value is _MISSING:
        raise MissingFieldError(key)
    if not isinstance(value, NumberObject):
        raise InvalidFieldError(key)
    return int(value)


def _require_bytes(dictionary: DictionaryObject, key: str) -> bytes:
    value = _lookup(dictionary, key)
    if value is _MISSING:
        raise MissingFieldError(key)
    data = _string_bytes(value)
    if data is None:
        raise InvalidFieldError(key)
    return data


def _optional_bytes(dictionary: DictionaryObject, key: str) -> Optional[bytes]:
    value = _lookup(dictionary, key)
    if value is _MISSING:
        return None
    return _string_bytes(value)


def _key_length(dictionary: DictionaryObject) -> int:
    if "/Length" not in dictionary:
        return DEFAULT_KEY_LENGTH
    return _require_integer(dictionary, "/Length")


def _encrypt_metadata(dictionary: DictionaryObject) -> bool:
    value = _lookup(dictionary, "/EncryptMetadata")
    if isinstance(value, BooleanObject):
        return bool(value.value)
    return True


def _document_id(trailer: DictionaryObject) -> bytes:
    value = _lookup(trailer, "/ID")
    if value is _MISSING:
        raise MissingFieldError("/ID")
    if not isinstance(value, ArrayObject) or len(value) == 0:
        raise InvalidFieldError("/ID")

    first = _string_bytes(value[0].get_object())
    if first is None:
        raise InvalidFieldError("/ID")
    return first


def extract_record(document: EncryptedDocument) -> EncryptionRecord:
    """Build the EncryptionRecord for an encrypted document

    Args:
        document: Parsed document

    Returns:
        The extracted parameters

    Raises:
        PDFNotEncryptedError: The document has no encryption dictionary
        MissingFieldError: A required entry is absent
        InvalidFieldError: A required entry has the wrong type
    """
    encrypt = document.encryption_dictionary()

    algorithm = _require_integer(encrypt, "/V")
    revision = _require_integer(encrypt, "/R")
    key_length = _key_length(encrypt)
    permissions = to_signed32(_require_integer(encrypt, "/P"))
    encrypt_metadata = _encrypt_metadata(encrypt)

    document_id = _document_id(document.trailer)

    max_len = max_password_length(revision)
    user_password_hash = truncate(_require_bytes(encrypt, "/U"), max_len)
    owner_password_hash = truncate(_require_bytes(encrypt, "/O"), max_len)

    owner_encryption_seed = _optional_bytes(encrypt, "/OE")
    if owner_encryption_seed is not None:
        owner_encryption_seed = truncate(owner_encryption_seed, max_len)

    user_encryption_seed = _optional_bytes(encrypt, "/UE")
    if user_encryption_seed is not None:
        user_encryption_seed = truncate(user_encryption_seed, max_len)

    return EncryptionRecord(
        algorithm=algorithm,
        revision=revision,
        key_length=key_length,
        permissions=permissions,
        encrypt_metadata=encrypt_metadata,
        document_id=document_id,
        user_password_hash=user_password_hash,
        owner_password_hash=owner_password_hash,
        owner_encryption_seed=owner_encryption_seed,
        user_encryption_seed=user_encryption_seed,
    )
