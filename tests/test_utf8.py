import pytest
from hypothesis import given, strategies as st

from auxstr import utf8
from auxstr.errors import UnknownByteError

S1 = b"A"
S2 = b"\xDA\xBF"
S3 = b"\xEA\xBF\x80"
S4 = b"\xF2\xBF\x80\xA5"

SINGLES = [(S1, 1), (S2, 2), (S3, 3), (S4, 4)]

PAIRS = [
    (a + b, len(a) + len(b))
    for a, _ in SINGLES
    for b, _ in SINGLES
]

B1_1 = b"\x80"
B1_2 = b"\xA0"
B1_3 = b"\xF8"
B1_4 = b"\xFF"
B2 = b"\xDA\xFF"
B3 = b"\xEA\xBF\xC0"
B4 = b"\xF2\xBF\x80\x25"
BZ = b"\x92\xBF\x80\xA5"


@pytest.mark.parametrize("data, width", SINGLES)
def test_measure_valid(data, width):
    assert utf8.measure(data) == width


@pytest.mark.parametrize(
    "data, expected",
    [(B1_1, 0), (B1_2, 0), (B1_3, -1), (B1_4, -1)],
)
def test_measure_invalid(data, expected):
    assert utf8.measure(data) == expected


@pytest.mark.parametrize("data, width", SINGLES)
def test_measure_by_lookup_valid(data, width):
    assert utf8.measure_by_lookup(data) == width


@pytest.mark.parametrize("data", [B1_1, B1_2, B1_3, B1_4])
def test_measure_by_lookup_invalid(data):
    assert utf8.measure_by_lookup(data) == 0


def test_measure_at_position():
    data = S1 + S3
    assert utf8.measure(data, 1) == 3
    assert utf8.measure(data, 2) == 0


def test_count_s1():
    assert utf8.count(S1, 1) == (1, 1)


def test_count_s2():
    assert utf8.count(S2, 1) == (2, 1)


def test_count_s3():
    assert utf8.count(S3, 1) == (3, 1)


def test_count_s4_with_larger_limit():
    assert utf8.count(S4, 2) == (4, 1)


@pytest.mark.parametrize("data, size", PAIRS)
def test_count_pairs(data, size):
    assert utf8.count(data, 2) == (size, 2)


@pytest.mark.parametrize("data, size", PAIRS)
def test_count_pairs_limited_to_one(data, size):
    consumed, chars = utf8.count(data, 1)
    assert chars == 1
    assert consumed == utf8.measure(data)


def test_count_without_limit():
    assert utf8.count(S1 + S2 + S3 + S4) == (10, 4)


@pytest.mark.parametrize("data", [B4, BZ])
def test_count_rejects_bad_sequences(data):
    with pytest.raises(UnknownByteError) as info:
        utf8.count(data, 1)
    assert info.value.offset == 0
    assert info.value.chars == 0


@pytest.mark.parametrize("data", [B2, B3, B1_3, B1_4])
def test_count_rejects_bad_continuations_and_leads(data):
    with pytest.raises(UnknownByteError) as info:
        utf8.count(data)
    assert info.value.offset == 0


def test_count_reports_position_after_valid_prefix():
    with pytest.raises(UnknownByteError) as info:
        utf8.count(S1 + S3 + BZ)
    assert info.value.offset == 4
    assert info.value.chars == 2


def test_count_rejects_truncated_character():
    with pytest.raises(UnknownByteError) as info:
        utf8.count(S1 + S4[:3])
    assert info.value.offset == 1
    assert info.value.chars == 1


@pytest.mark.parametrize("data, _width", SINGLES)
def test_verify_singles(data, _width):
    assert utf8.verify(data) is True


@pytest.mark.parametrize("data, _size", PAIRS)
def test_verify_pairs(data, _size):
    assert utf8.verify(data) is True


@pytest.mark.parametrize("data", [B1_1, B1_2, B1_3, B1_4, B2, B3, B4, BZ])
def test_verify_rejects_bad_input(data):
    assert utf8.verify(data) is False


@given(st.text())
def test_count_matches_encoded_text(text):
    data = text.encode("utf-8")
    assert utf8.count(data) == (len(data), len(text))
    assert utf8.verify(data) is True


@given(st.text(min_size=1), st.integers(min_value=0, max_value=20))
def test_count_with_limit_matches_prefix(text, limit):
    data = text.encode("utf-8")
    consumed, chars = utf8.count(data, limit)
    assert chars == min(limit, len(text))
    assert consumed == len(text[:chars].encode("utf-8"))