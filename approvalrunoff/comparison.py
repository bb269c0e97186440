"""
Comparing outcomes from the point of view of the focal voter.

An outcome is evaluated by its set of possible winners (Gamma). Sets are compared
as follows:

1. Equal sets are indifferent.
2. Axiom P2 of Fishburn and Brams: if one set is `{x}` and the other is `{x, y}`, then
   `{x}` is better iff `x` is preferred to `y`.
3. Otherwise the sets are compared by their best possible winner and, if these are the
   same, by their worst possible winner.

This comparison is not a total order on sets of candidates; indifference does not imply
that the sets are equal.
"""

import math
from approvalrunoff import misc
from approvalrunoff.preferences import as_preference

BETTER = 1
WORSE = -1
INDIFFERENT = 0


def _gamma_of(outcome):
    # accept outcomes as well as plain sets of candidates
    return frozenset(getattr(outcome, "gamma", outcome))


def best_rank(gamma, preference):
    """
    Rank of the most preferred candidate in `gamma` (`math.inf` if `gamma` is empty).

    Parameters
    ----------
        gamma : iterable
            Possible winners.

        preference : Preference or sequence
            The focal voter's ranking of all candidates.

    Returns
    -------
        int or float
    """
    preference = as_preference(preference)
    return min((preference.rank(cand) for cand in gamma), default=math.inf)


def worst_rank(gamma, preference):
    """Rank of the least preferred candidate in `gamma` (`math.inf` if `gamma` is empty)."""
    preference = as_preference(preference)
    return max((preference.rank(cand) for cand in gamma), default=math.inf)


def outcome_rank(gamma, preference):
    """
    Sort key for sets of possible winners; lower is better.

    Sets are ordered by their best possible winner, then by their worst possible winner and
    finally by their size (i.e., less uncertainty is better).

    .. doctest::

        >>> outcome_rank({"B", "A"}, ["A", "B", "C"])
        (0, 1, 1)
        >>> outcome_rank(set(), ["A", "B", "C"])
        (inf, inf, inf)

    Parameters
    ----------
        gamma : iterable or Outcome
            Possible winners (or an outcome).

        preference : Preference or sequence
            The focal voter's ranking of all candidates.

    Returns
    -------
        tuple
    """
    gamma = _gamma_of(gamma)
    if not gamma:
        return (math.inf, math.inf, math.inf)
    return (best_rank(gamma, preference), worst_rank(gamma, preference), len(gamma) - 1)


def _axiom_p2(certain, risky, preference):
    """
    Compare `{x}` (certain) with `{x, y}` (risky).

    Returns `BETTER` if the certain set is better, `WORSE` if the risky set is better and
    `None` if axiom P2 does not apply.
    """
    if len(certain) != 1 or len(risky) != 2:
        return None
    (x,) = certain
    if x not in risky:
        return None
    (y,) = risky - certain
    if preference.prefers(x, y):
        return BETTER
    return WORSE


def compare_gammas(gamma1, gamma2, preference):
    """
    Compare two sets of possible winners.

    Parameters
    ----------
        gamma1, gamma2 : iterable
            Two sets of possible winners.

        preference : Preference or sequence
            The focal voter's ranking of all candidates.

    Returns
    -------
        int
            `1` if `gamma1` is better, `-1` if `gamma2` is better, `0` if the focal voter is
            indifferent.
    """
    preference = as_preference(preference)
    gamma1 = frozenset(gamma1)
    gamma2 = frozenset(gamma2)
    misc.check_known_candidates(gamma1 | gamma2, preference, context="set of possible winners")

    if misc.sets_equal_unordered(gamma1, gamma2):
        return INDIFFERENT

    result = _axiom_p2(gamma1, gamma2, preference)
    if result is not None:
        return result
    result = _axiom_p2(gamma2, gamma1, preference)
    if result is not None:
        return -result

    best1 = best_rank(gamma1, preference)
    best2 = best_rank(gamma2, preference)
    if best1 != best2:
        return BETTER if best1 < best2 else WORSE

    worst1 = worst_rank(gamma1, preference)
    worst2 = worst_rank(gamma2, preference)
    if worst1 != worst2:
        return BETTER if worst1 < worst2 else WORSE

    return INDIFFERENT


def compare_outcomes(outcome1, outcome2, preference):
    """
    Compare two outcomes from the point of view of a voter with the given preference.

    .. doctest::

        >>> compare_outcomes({"A"}, {"A", "B"}, ["A", "B", "C"])
        1
        >>> compare_outcomes({"A"}, {"A", "B"}, ["B", "A", "C"])
        -1

    Parameters
    ----------
        outcome1, outcome2 : Outcome or iterable
            Two outcomes (or their sets of possible winners).

        preference : Preference or sequence
            The focal voter's ranking of all candidates.

    Returns
    -------
        int
            `1` if `outcome1` is better, `-1` if `outcome2` is better, `0` if the voter is
            indifferent.
    """
    return compare_gammas(_gamma_of(outcome1), _gamma_of(outcome2), preference)
