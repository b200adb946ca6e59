# SPDX-License-Identifier: MIT

import string

ALPHABET = string.ascii_lowercase
BASE = len(ALPHABET)
MIN_LENGTH = 5
# must share no factors with BASE so the scrambling stays a bijection
MULTIPLIER = 7_368_787


class InvalidRecordIdError(ValueError):
    def __init__(self, record_id: str) -> None:
        super().__init__(f"invalid record id '{record_id}'")
        self.record_id = record_id


def encode_record_id(record_id: int) -> str:
    """
    Encode a store id as a short lowercase string such as ``"kqfzb"``.

    Ids are scrambled inside the ``26 ** length`` space so that neighbouring
    records do not get neighbouring codes. Codes are at least five letters
    long and grow only once the five-letter space is exhausted.
    """
    if record_id < 0:
        raise ValueError(f"record ids must not be negative, got {record_id}")

    length = _code_length(record_id)
    space = BASE**length
    value = (record_id * MULTIPLIER) % space

    letters = []
    for _ in range(length):
        value, remainder = divmod(value, BASE)
        letters.append(ALPHABET[remainder])
    return "".join(reversed(letters))


def decode_record_id(code: str) -> int:
    """Reverse of encode_record_id, raising InvalidRecordIdError for foreign input."""
    normalized = code.strip().lower()
    if len(normalized) < MIN_LENGTH or any(c not in ALPHABET for c in normalized):
        raise InvalidRecordIdError(code)

    value = 0
    for letter in normalized:
        value = value * BASE + ALPHABET.index(letter)

    space = BASE ** len(normalized)
    record_id = (value * pow(MULTIPLIER, -1, space)) % space

    # only the shortest encoding of an id is valid
    if _code_length(record_id) != len(normalized):
        raise InvalidRecordIdError(code)
    return record_id


def _code_length(record_id: int) -> int:
    length = MIN_LENGTH
    while record_id >= BASE**length:
        length += 1
    return length
