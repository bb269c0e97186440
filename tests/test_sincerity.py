"""
Unit tests for approvalrunoff/sincerity.py.
"""

import pytest
from approvalrunoff.misc import UnknownCandidateError
from approvalrunoff.sincerity import is_sincere_ballot

PREF_ABC = ["A", "B", "C"]


@pytest.mark.parametrize(
    "ballot, expected",
    [
        ({"A"}, True),
        ({"A", "B"}, True),
        ({"A", "B", "C"}, True),
        ({"A", "C"}, False),
        ({"B"}, False),
        ({"C"}, False),
        ({"B", "C"}, False),
    ],
)
def test_is_sincere_ballot(ballot, expected):
    assert is_sincere_ballot(ballot, PREF_ABC) == expected
    # the abstention setting is irrelevant for non-empty ballots
    assert is_sincere_ballot(ballot, PREF_ABC, abstention_is_sincere=True) == expected


@pytest.mark.parametrize("abstention_is_sincere", [False, True])
def test_abstention(abstention_is_sincere):
    assert is_sincere_ballot([], PREF_ABC, abstention_is_sincere) == abstention_is_sincere


def test_default_abstention_is_insincere():
    assert not is_sincere_ballot(set(), PREF_ABC)


def test_other_preference():
    pref = "C>A>D>B"
    assert is_sincere_ballot(["C", "A"], pref)
    assert is_sincere_ballot(["A", "C", "D"], pref)
    assert not is_sincere_ballot(["C", "D"], pref)
    assert not is_sincere_ballot(["A"], pref)


def test_unknown_candidate():
    with pytest.raises(UnknownCandidateError):
        is_sincere_ballot({"A", "D"}, PREF_ABC)
