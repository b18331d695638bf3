import itertools

import pytest

from vigenerecracker.classical.kasiski import (
    estimate_key_length,
    find_gaps,
    find_repeated_sequences,
    kasiski_examination,
)
from vigenerecracker.core.config import CrackConfig
from vigenerecracker.core.errors import (
    CrackError,
    DegenerateKeyLengthError,
    EmptyInputError,
    NoRepeatsFoundError,
)
from vigenerecracker.core.utils import gcd, gcd_all, normalize


def test_normalize_strips_listed_punctuation_and_lowercases():
    assert normalize("It’s A, B. ‘c’") == "itsabc"


def test_normalize_keeps_other_symbols():
    assert normalize("Ab!c?\n") == "ab!c?\n"


def test_normalize_empty():
    assert normalize("") == ""


def test_repeated_abc_window_three():
    seqs = find_repeated_sequences("abcabcabcxyzabcabc", min_window=3, max_window=3)
    assert seqs["abc"] == [0, 3, 6, 12, 15]
    assert find_gaps({"abc": seqs["abc"]}) == {"abc": [3, 3, 6, 3]}
    assert gcd_all([3, 3, 6, 3]) == 3


def test_only_sequences_seen_more_than_twice_are_kept():
    seqs = find_repeated_sequences("abcabcabcxyzabcabc")
    # "xyz" occurs once, "cxy" once
    assert "xyz" not in seqs
    assert "cxy" not in seqs
    assert all(len(positions) > 2 for positions in seqs.values())
    assert all(3 <= len(seq) <= 6 for seq in seqs)


def test_sequences_with_non_letters_are_ignored():
    seqs = find_repeated_sequences("a!ba!ba!ba!b", min_window=3, max_window=3)
    assert seqs == {}


def test_window_longer_than_text_is_skipped():
    seqs = find_repeated_sequences("aaaaa", min_window=3, max_window=6)
    assert seqs == {"aaa": [0, 1, 2]}


def test_find_gaps_lengths():
    gaps = find_gaps({"aa": [1, 4, 10], "bb": [0, 2, 4, 8]})
    assert gaps == {"aa": [3, 6], "bb": [2, 2, 4]}


def test_gcd_basics():
    assert gcd(12, 0) == 12
    assert gcd(0, 7) == 7
    assert gcd(54, 24) == 6
    assert gcd(17, 5) == 1


def test_gcd_all_is_order_independent():
    values = [135, 12, 54, 249, 30, 36]
    expected = gcd_all(values)
    assert expected == 3
    for perm in itertools.permutations(values):
        assert gcd_all(perm) == expected


def test_gcd_all_empty_raises():
    with pytest.raises(ValueError):
        gcd_all([])


def test_estimate_key_length_from_gaps():
    assert estimate_key_length({"abc": [3, 3, 6, 3], "bca": [3, 9]}, 18) == 3


def test_estimate_key_length_without_gaps():
    with pytest.raises(NoRepeatsFoundError):
        estimate_key_length({}, 100)


@pytest.mark.parametrize(
    "gaps,text_length",
    [
        ({"xyz": [0, 0]}, 50),
        ({"abc": [50]}, 20),
    ],
)
def test_estimate_key_length_degenerate(gaps, text_length):
    with pytest.raises(DegenerateKeyLengthError) as excinfo:
        estimate_key_length(gaps, text_length)
    assert excinfo.value.text_length == text_length


def test_examination_report():
    report = kasiski_examination("abcabcabcxyzabcabc")
    assert report.normalized == "abcabcabcxyzabcabc"
    assert report.sequences["abc"] == [0, 3, 6, 12, 15]
    assert report.gaps["abc"] == [3, 3, 6, 3]
    assert report.key_length == 3
    assert report.to_dict()["key_length"] == 3


def test_examination_of_sample(sample_ciphertext):
    report = kasiski_examination(sample_ciphertext)
    assert report.key_length == 3
    assert len(report.normalized) == 343
    assert report.gaps == {
        "ykr": [36, 72],
        "nra": [135, 12],
        "kre": [54, 54],
        "dai": [249, 30],
        "gnr": [135, 12],
        "gnra": [135, 12],
    }
    assert all(g % 3 == 0 for g in report.all_gaps())


@pytest.mark.parametrize("text", ["", "   ", " ,. ‘’", "ab", "A."])
def test_examination_rejects_empty_input(text):
    with pytest.raises(EmptyInputError):
        kasiski_examination(text)


def test_examination_without_repeats():
    with pytest.raises(NoRepeatsFoundError):
        kasiski_examination("abcdefghijklmnop")


def test_relaxed_threshold_finds_pairs():
    text = "qwertyzzqwerty"
    with pytest.raises(NoRepeatsFoundError):
        kasiski_examination(text)
    report = kasiski_examination(text, CrackConfig(min_occurrences=2))
    assert report.key_length == 8


def test_errors_are_value_errors():
    assert issubclass(CrackError, ValueError)
    assert issubclass(EmptyInputError, CrackError)
    assert issubclass(NoRepeatsFoundError, CrackError)
    assert issubclass(DegenerateKeyLengthError, CrackError)
