"""
Miscellaneous functions for ballots and sets of candidates.
"""

from collections import Counter
import numpy as np

ABSTENTION_STRING = "∅ (abstain)"
UNDEFINED_GAMMA_STRING = "undefined"

VOTE_TIERS = {
    "frontrunner": 100,
    "viable": 99,
    "nonviable": 10,
}
"""
Typical numbers of approvals used to set up scenarios.

A frontrunner is one vote ahead of a viable candidate, i.e., a single approval of the
focal voter can create or break a tie between them. Nonviable candidates cannot reach the
runoff.
"""


class UnknownCandidateError(ValueError):
    """
    Error: a candidate that is not part of the election.

    Parameters
    ----------
        candidate : object
            The unknown candidate.

        context : str, optional
            Where the candidate was found (e.g., "ballot").
    """

    def __init__(self, candidate, context=None):
        if context:
            message = f"Unknown candidate {candidate!r} in {context}."
        else:
            message = f"Unknown candidate {candidate!r}."
        super().__init__(message)
        self.candidate = candidate


class Ballot(frozenset):
    """
    An approval ballot, i.e., the set of candidates approved by the focal voter.

    The empty ballot corresponds to abstention.

    Parameters
    ----------
        approved : iterable
            The approved candidates (no duplicates).

        candidates : sequence, optional
            All candidates of the election. Used only for checks.

            If `candidates` is provided, it is verified that `approved` does not contain
            other candidates.
    """

    def __new__(cls, approved=(), candidates=None):
        approved = list(approved)
        ballot = super().__new__(cls, approved)
        if len(approved) != len(ballot):
            raise ValueError(f"Ballot initialized with duplicate elements ({approved}).")
        if candidates is not None:
            check_known_candidates(ballot, candidates, context="ballot")
        return ballot

    def __str__(self):
        return format_ballot(self)

    def __repr__(self):
        return f"Ballot({sorted(self, key=str)!r})"

    def is_abstention(self):
        """Check whether this ballot is empty."""
        return len(self) == 0


def check_candidate_list(candidates):
    """
    Verify that a list of candidates contains no duplicates.

    Parameters
    ----------
        candidates : iterable
            The candidates of an election.

    Returns
    -------
        tuple
            The candidates as a tuple (in the given order).
    """
    candidates = tuple(candidates)
    if len(set(candidates)) != len(candidates):
        raise ValueError(f"List of candidates contains duplicates ({list(candidates)}).")
    return candidates


def check_known_candidates(candset, candidates, context=None):
    """
    Raise `UnknownCandidateError` if `candset` contains a candidate not in `candidates`.

    Parameters
    ----------
        candset : iterable
            Candidates to be checked.

        candidates : iterable
            All candidates of the election.

        context : str, optional
            Used in the error message.
    """
    known = set(candidates)
    for cand in candset:
        if cand not in known:
            raise UnknownCandidateError(cand, context=context)


def check_vote_count(cand, count):
    """
    Verify that `count` is a valid number of approvals for candidate `cand`.

    Parameters
    ----------
        cand : object
            The candidate (used in error messages).

        count : int
            Number of approvals.

    Returns
    -------
        int
    """
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise TypeError(
            f"Vote count {count!r} of candidate {cand!r} has type {type(count)}, "
            f"only non-negative integers are allowed."
        )
    if count < 0:
        raise ValueError(f"Vote count of candidate {cand!r} is negative ({count}).")
    return int(count)


def tiered_base_votes(frontrunners=(), viable=(), nonviable=()):
    """
    Create base votes from the tiers in `VOTE_TIERS`.

    .. doctest::

        >>> tiered_base_votes(frontrunners=["A"], viable=["B"], nonviable=["C"])
        {'A': 100, 'B': 99, 'C': 10}

    Parameters
    ----------
        frontrunners, viable, nonviable : iterable
            Candidates in the respective tier.

    Returns
    -------
        dict
    """
    base_votes = {}
    for tier, tier_candidates in (
        ("frontrunner", frontrunners),
        ("viable", viable),
        ("nonviable", nonviable),
    ):
        for cand in tier_candidates:
            if cand in base_votes:
                raise ValueError(f"Candidate {cand!r} appears in more than one tier.")
            base_votes[cand] = VOTE_TIERS[tier]
    return base_votes


def str_set_of_candidates(candset):
    """
    Nicely format a set of candidates (sorted by their string representation).

    .. doctest::

        >>> print(str_set_of_candidates({"C", "A", "B"}))
        {A, B, C}

    Parameters
    ----------
        candset : iterable
            An iterable of candidates.

    Returns
    -------
        str
    """
    return "{" + ", ".join(sorted(str(cand) for cand in candset)) + "}"


def format_ballot(ballot):
    """
    Format a ballot for display.

    .. doctest::

        >>> print(format_ballot([]))
        ∅ (abstain)
        >>> print(format_ballot(["B", "A"]))
        {A, B}

    Parameters
    ----------
        ballot : iterable
            The approved candidates.

    Returns
    -------
        str
    """
    ballot = list(ballot)
    if not ballot:
        return ABSTENTION_STRING
    return str_set_of_candidates(ballot)


def format_gamma(gamma):
    """
    Format a set of possible winners for display.

    A single possible winner is printed without braces.

    .. doctest::

        >>> print(format_gamma(["A"]))
        A
        >>> print(format_gamma({"B", "A"}))
        {A, B}
        >>> print(format_gamma(None))
        undefined

    Parameters
    ----------
        gamma : iterable or None
            The possible winners.

    Returns
    -------
        str
    """
    if not gamma:
        return UNDEFINED_GAMMA_STRING
    gamma = list(gamma)
    if len(gamma) == 1:
        return str(gamma[0])
    return str_set_of_candidates(gamma)


def sets_equal_unordered(set1, set2):
    """
    Check whether two collections of candidates contain the same elements.

    The order is ignored, multiplicities are not.

    .. doctest::

        >>> sets_equal_unordered(["A", "B"], ("B", "A"))
        True
        >>> sets_equal_unordered(["A", "B"], ["A"])
        False

    Parameters
    ----------
        set1, set2 : iterable
            Two collections of candidates.

    Returns
    -------
        bool
    """
    return Counter(set1) == Counter(set2)


def gamma_key(gamma):
    """
    Return a canonical key for a set of possible winners.

    Two sets get the same key iff they contain the same candidates. Used to group ballots by
    their outcome.

    .. doctest::

        >>> gamma_key({"B", "A"})
        'A,B'

    Parameters
    ----------
        gamma : iterable
            Possible winners.

    Returns
    -------
        str
    """
    return ",".join(sorted(str(cand) for cand in gamma))


def header(text, symbol="-"):
    """
    Underline and overline `text`, e.g., for the title of an analysis report.

    Parameters
    ----------
        text : str
            The title.

        symbol : str, default="-"
            The first character of this string is repeated to draw both lines.

    Returns
    -------
        str
    """
    border = symbol[0] * len(text) + "\n"
    return border + text + "\n" + border
