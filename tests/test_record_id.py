import pytest

from timesheettool.record_id import (
    InvalidRecordIdError,
    decode_record_id,
    encode_record_id,
)


@pytest.mark.parametrize(
    "record_id", [0, 1, 2, 42, 12345, 26**5 - 1, 26**5, 26**6 + 17, 10**12]
)
def test_round_trip(record_id):
    code = encode_record_id(record_id)

    assert decode_record_id(code) == record_id


def test_codes_are_at_least_five_lowercase_letters():
    for record_id in range(200):
        code = encode_record_id(record_id)
        assert len(code) == 5
        assert code.isalpha() and code.islower()


def test_codes_grow_once_five_letters_are_exhausted():
    assert len(encode_record_id(26**5 - 1)) == 5
    assert len(encode_record_id(26**5)) == 6


def test_consecutive_ids_get_distinct_codes():
    codes = {encode_record_id(record_id) for record_id in range(1000)}

    assert len(codes) == 1000
    assert encode_record_id(2) != "aaaac"


def test_decoding_is_case_insensitive():
    code = encode_record_id(99)

    assert decode_record_id(code.upper()) == 99


@pytest.mark.parametrize("code", ["", "abc", "abcd", "ab1de", "abc-de", "aaaaaa"])
def test_rejects_foreign_codes(code):
    with pytest.raises(InvalidRecordIdError, match="invalid record id"):
        decode_record_id(code)


def test_rejects_negative_ids():
    with pytest.raises(ValueError):
        encode_record_id(-1)
