import pytest

from pdf2hash.core.extractor import EncryptionRecord, extract_record
from pdf2hash.core.formatter import HASH_PREFIX, format_hash


def make_record(**overrides):
    fields = dict(
        algorithm=4,
        revision=4,
        key_length=128,
        permissions=-3904,
        encrypt_metadata=True,
        document_id=bytes(range(16)),
        user_password_hash=b"\x00" * 32,
        owner_password_hash=b"\xff" * 32,
    )
    fields.update(overrides)
    return EncryptionRecord(**fields)


def segments(line):
    assert line.startswith(HASH_PREFIX)
    return line[len(HASH_PREFIX):].split("*")


def test_revision4_line():
    line = format_hash(make_record())
    assert line == (
        "$pdf$4*4*128*-3904*1*16*000102030405060708090a0b0c0d0e0f"
        "*32*" + "00" * 32 +
        "*32*" + "ff" * 32
    )


def test_end_to_end_revision4(build_document, sample):
    line = format_hash(extract_record(build_document(encrypt={"/P": 4294963392})))
    assert line == "$pdf$4*4*128*-3904*1*16*{}*32*{}*32*{}".format(
        sample["id"].hex(), sample["u"].hex(), sample["o"].hex()
    )
    assert not line.endswith("\n")


def test_metadata_flag_zero():
    assert segments(format_hash(make_record(encrypt_metadata=False)))[4] == "0"


def test_no_seeds_gives_11_segments():
    assert len(segments(format_hash(make_record()))) == 11


def test_both_seeds_give_15_segments_owner_first():
    line = format_hash(make_record(
        owner_encryption_seed=b"\xaa" * 32,
        user_encryption_seed=b"\xbb" * 31,
    ))
    parts = segments(line)
    assert len(parts) == 15
    assert parts[11:] == ["32", "aa" * 32, "31", "bb" * 31]


@pytest.mark.parametrize("seed_field, seed", [
    ("owner_encryption_seed", b"\x01\x02"),
    ("user_encryption_seed", b"\x03\x04\x05"),
])
def test_single_seed_gives_13_segments(seed_field, seed):
    parts = segments(format_hash(make_record(**{seed_field: seed})))
    assert len(parts) == 13
    assert parts[11:] == [str(len(seed)), seed.hex()]


def test_lengths_count_raw_bytes():
    parts = segments(format_hash(make_record(document_id=b"\xde\xad\xbe", user_password_hash=b"")))
    assert parts[5:9] == ["3", "deadbe", "0", ""]


def test_hex_is_lowercase():
    line = format_hash(make_record(document_id=b"\xab\xcd\xef"))
    assert "abcdef" in line
    assert line[len(HASH_PREFIX):] == line[len(HASH_PREFIX):].lower()


def test_positive_permissions():
    assert segments(format_hash(make_record(permissions=3904)))[3] == "3904"


def test_formatting_is_deterministic():
    record = make_record(owner_encryption_seed=b"s" * 32)
    assert format_hash(record) == format_hash(record)
    assert format_hash(record) == format_hash(make_record(owner_encryption_seed=b"s" * 32))


def test_output_is_ascii():
    line = format_hash(make_record(document_id=bytes(range(256))))
    line.encode("ascii")
