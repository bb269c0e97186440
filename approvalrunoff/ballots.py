"""
Enumeration of the approval ballots available to the focal voter.
"""

from approvalrunoff import misc
from approvalrunoff.misc import Ballot
from approvalrunoff.preferences import as_preference


def enumerate_ballots(candidates):
    """
    Return all approval ballots the focal voter can cast.

    These are all subsets of `candidates` except the full set, which has the same effect as
    abstaining. For `n` candidates there are `2^n - 1` ballots; the empty ballot
    (abstention) comes first, followed by all other subsets in binary counting order
    (bit `j` corresponds to `candidates[j]`).

    The number of ballots grows exponentially, so this is only meant for small numbers of
    candidates.

    .. doctest::

        >>> [str(ballot) for ballot in enumerate_ballots(["A", "B", "C"])]
        ['∅ (abstain)', '{A}', '{B}', '{A, B}', '{C}', '{A, C}', '{B, C}']

    Parameters
    ----------
        candidates : sequence
            All candidates (without duplicates).

    Returns
    -------
        list of Ballot
    """
    candidates = misc.check_candidate_list(candidates)
    num_cand = len(candidates)
    if num_cand == 0:
        # the empty ballot is the full set of candidates
        return []
    ballots = [Ballot()]
    for mask in range(1, 2**num_cand - 1):
        ballots.append(Ballot(cand for j, cand in enumerate(candidates) if mask & (1 << j)))
    return ballots


def sincere_ballots(preference, abstention_is_sincere=False):
    """
    Return all sincere ballots for a given preference.

    Sincere ballots approve the `k` most preferred candidates for some `0 < k < n`;
    abstention is included if `abstention_is_sincere` is set.

    Parameters
    ----------
        preference : Preference or sequence
            The focal voter's ranking of all candidates.

        abstention_is_sincere : bool, default=False
            Whether abstaining counts as sincere.

    Returns
    -------
        list of Ballot
    """
    preference = as_preference(preference)
    ballots = [Ballot()] if abstention_is_sincere else []
    ballots.extend(preference.top(k) for k in range(1, len(preference)))
    return ballots
