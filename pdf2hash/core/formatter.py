"""
Hash string formatting.

Produces the ``$pdf$`` line understood by John the Ripper and hashcat::

    $pdf$V*R*Length*P*EncryptMetadata*len(ID)*ID*len(U)*U*len(O)*O[*len(OE)*OE][*len(UE)*UE]
"""

from typing import List

from pdf2hash.core.extractor import EncryptionRecord

HASH_PREFIX = "$pdf$"
SEPARATOR = "*"


def _binary_field(data: bytes) -> List[str]:
    return [str(len(data)), data.hex()]


def format_hash(record: EncryptionRecord) -> str:
    """Serialize an EncryptionRecord into a single hash line (no newline)"""
    fields = [
        str(record.algorithm),
        str(record.revision),
        str(record.key_length),
        str(record.permissions),
        "1" if record.encrypt_metadata else "0",
    ]
    fields += _binary_field(record.document_id)
    fields += _binary_field(record.user_password_hash)
    fields += _binary_field(record.owner_password_hash)

    # Owner seed first; absent seeds leave no placeholder
    for seed in (record.owner_encryption_seed, record.user_encryption_seed):
        if seed is not None:
            fields += _binary_field(seed)

    return HASH_PREFIX + SEPARATOR.join(fields)
