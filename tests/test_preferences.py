"""
Unit tests for approvalrunoff/preferences.py.
"""

import pytest
from approvalrunoff.misc import UnknownCandidateError
from approvalrunoff.preferences import (
    Election,
    InconsistentMatchupError,
    Matchups,
    Preference,
    as_matchups,
    as_preference,
)


def test_preference():
    preference = Preference(["A", "B", "C"])
    assert len(preference) == 3
    assert list(preference) == ["A", "B", "C"]
    assert preference[0] == "A"
    assert [preference.rank(cand) for cand in "ABC"] == [0, 1, 2]
    assert preference.prefers("A", "B")
    assert not preference.prefers("C", "B")
    assert "B" in preference
    assert "D" not in preference
    assert str(preference) == "A > B > C"
    assert preference == Preference(("A", "B", "C"))
    assert preference != Preference(["B", "A", "C"])


def test_preference_top():
    preference = Preference(["C", "A", "B"])
    assert preference.top(0) == set()
    assert preference.top(2) == {"C", "A"}
    assert preference.top(3) == {"A", "B", "C"}
    with pytest.raises(ValueError):
        preference.top(4)


@pytest.mark.parametrize(
    "pref_string, expected",
    [("A>B>C", ["A", "B", "C"]), (" B > A >C ", ["B", "A", "C"]), ("A>>B", ["A", "B"])],
)
def test_preference_from_string(pref_string, expected):
    assert Preference.from_string(pref_string).order == tuple(expected)


def test_invalid_preferences():
    with pytest.raises(ValueError):
        Preference(["A", "B", "A"])
    with pytest.raises(ValueError):
        Preference(["A", "B"], candidates=["A", "B", "C"])
    with pytest.raises(UnknownCandidateError):
        Preference(["A", "B", "D"], candidates=["A", "B", "C"])
    with pytest.raises(UnknownCandidateError):
        Preference(["A", "B"]).rank("C")


def test_as_preference():
    preference = Preference(["A", "B"])
    assert as_preference(preference) is preference
    assert as_preference(["A", "B"]) == preference
    assert as_preference("A>B", candidates=["B", "A"]) == preference
    with pytest.raises(ValueError):
        as_preference(preference, candidates=["A", "B", "C"])


def test_matchups():
    matchups = Matchups([("B", "A"), ("A", "C")])
    assert matchups.winner("A", "B") == "B"
    assert matchups.winner("B", "A") == "B"
    assert matchups.winner("C", "A") == "A"
    assert matchups.winner("B", "C") is None
    assert matchups.beats("B", "A")
    assert not matchups.beats("A", "B")
    assert matchups.is_defined("A", "C")
    assert not matchups.is_defined("C", "B")
    assert len(matchups) == 2
    assert ("B", "A") in matchups
    assert matchups.candidates() == {"A", "B", "C"}
    assert matchups.to_dict() == {("B", "A"): True, ("A", "C"): True}
    assert str(matchups) == "B beats A, A beats C"
    assert str(Matchups()) == "no matchups"


def test_inconsistent_matchups():
    with pytest.raises(InconsistentMatchupError):
        Matchups([("A", "B"), ("B", "A")])
    with pytest.raises(InconsistentMatchupError):
        Matchups.from_dict({("A", "B"): True, ("B", "A"): True})
    with pytest.raises(ValueError):
        Matchups([("A", "A")])
    # adding the same result twice is fine
    assert len(Matchups([("A", "B"), ("A", "B")])) == 1


def test_matchups_from_dict():
    matchups = Matchups.from_dict({("A", "B"): True, ("C", "B"): False})
    assert matchups.winner("A", "B") == "A"
    assert matchups.winner("B", "C") is None


def test_matchups_from_strings():
    matchups = Matchups.from_strings({"B-A": True, "A-C": False}, ["A", "B", "C"])
    assert matchups == Matchups([("B", "A")])

    # names containing the separator
    matchups = Matchups.from_strings({"Jean-Luc-Kim": True}, ["Jean-Luc", "Kim"])
    assert matchups.winner("Kim", "Jean-Luc") == "Jean-Luc"

    with pytest.raises(ValueError):
        Matchups.from_strings({"A-D": True}, ["A", "B", "C"])
    with pytest.raises(ValueError):
        Matchups.from_strings({"AB": True}, ["A", "B"])
    with pytest.raises(ValueError):
        # "A-B-C" could be "A-B" beats "C" or "A" beats "B-C"
        Matchups.from_strings({"A-B-C": True}, ["A-B", "C", "A", "B-C"])


def test_as_matchups():
    candidates = ["A", "B", "C"]
    expected = Matchups([("B", "A")])
    assert as_matchups(None) == Matchups()
    assert as_matchups(expected) is expected
    assert as_matchups({("B", "A"): True}) == expected
    assert as_matchups({"B-A": True}, candidates) == expected
    assert as_matchups([("B", "A")], candidates) == expected
    with pytest.raises(ValueError):
        as_matchups({"B-A": True})
    with pytest.raises(UnknownCandidateError):
        as_matchups([("B", "D")], candidates)


def test_election():
    election = Election(["A", "B", "C"], base_votes={"A": 5, "C": 2}, matchups={"B-A": True})
    assert election.num_cand == 3
    assert election.base_votes == {"A": 5, "B": 0, "C": 2}
    assert election.matchups.winner("A", "B") == "B"
    assert election.preference("C>B>A").order == ("C", "B", "A")
    assert "3 candidates" in str(election)
    with pytest.raises(ValueError):
        election.preference(["A", "B"])


def test_invalid_elections():
    with pytest.raises(ValueError):
        Election(["A", "A"])
    with pytest.raises(UnknownCandidateError):
        Election(["A", "B"], base_votes={"C": 1})
    with pytest.raises(ValueError):
        Election(["A", "B"], base_votes={"A": -1})
    with pytest.raises(TypeError):
        Election(["A", "B"], base_votes={"A": 1.5})
    with pytest.raises(TypeError):
        Election(["A", "B"], base_votes=["A", "B"])
    with pytest.raises(UnknownCandidateError):
        Election(["A", "B"], matchups=[("A", "C")])
    with pytest.raises(InconsistentMatchupError):
        Election(["A", "B"], matchups={"A-B": True, "B-A": True})
