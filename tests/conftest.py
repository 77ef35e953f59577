import pytest

from pypdf.generic import (
    ArrayObject,
    BooleanObject,
    ByteStringObject,
    DictionaryObject,
    NameObject,
    NumberObject,
)

from pdf2hash.core.document import EncryptedDocument

DOCUMENT_ID = bytes(range(16))
USER_HASH = bytes(range(0x20, 0x40))
OWNER_HASH = bytes(range(0x40, 0x60))

_DEFAULT_ID = object()


def pdf_value(value):
    """Wrap plain Python values into pypdf objects"""
    if isinstance(value, bool):
        return BooleanObject(value)
    if isinstance(value, int):
        return NumberObject(value)
    if isinstance(value, bytes):
        return ByteStringObject(value)
    if isinstance(value, list):
        return ArrayObject(pdf_value(v) for v in value)
    if isinstance(value, dict):
        return DictionaryObject({NameObject(k): pdf_value(v) for k, v in value.items()})
    return value


@pytest.fixture
def sample():
    """Raw values used by the default revision 4 document"""
    return {
        "id": DOCUMENT_ID,
        "u": USER_HASH,
        "o": OWNER_HASH,
    }


@pytest.fixture
def build_document():
    """Factory for in-memory documents

    ``encrypt`` overrides entries of a revision 4 encryption dictionary,
    ``drop`` removes them. ``document_id`` replaces the whole /ID entry,
    None leaves it out.
    """
    def _build(encrypt=None, drop=(), document_id=_DEFAULT_ID, trailer_extra=None):
        entries = {
            "/Filter": NameObject("/Standard"),
            "/V": 4,
            "/R": 4,
            "/Length": 128,
            "/P": -3904,
            "/EncryptMetadata": True,
            "/U": USER_HASH,
            "/O": OWNER_HASH,
        }
        entries.update(encrypt or {})
        for key in drop:
            entries.pop(key, None)

        trailer = {"/Encrypt": entries}
        if document_id is _DEFAULT_ID:
            trailer["/ID"] = [DOCUMENT_ID, DOCUMENT_ID]
        elif document_id is not None:
            trailer["/ID"] = document_id
        trailer.update(trailer_extra or {})
        return EncryptedDocument(pdf_value(trailer), name="test.pdf")

    return _build
