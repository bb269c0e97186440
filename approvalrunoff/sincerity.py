"""
Sincere approval ballots.

A ballot is sincere if it approves the `k` most preferred candidates of the voter, i.e.,
there is no approved candidate ranked below a disapproved one. Whether abstaining is
sincere cannot be derived from the preference and is a setting
(`VotingConfig.abstention_is_sincere`).
"""

from approvalrunoff import misc
from approvalrunoff.preferences import as_preference


def is_sincere_ballot(ballot, preference, abstention_is_sincere=False):
    """
    Check whether a ballot is sincere with respect to a preference.

    .. doctest::

        >>> is_sincere_ballot({"A", "B"}, ["A", "B", "C"])
        True
        >>> is_sincere_ballot({"A", "C"}, ["A", "B", "C"])
        False

    Parameters
    ----------
        ballot : iterable
            The candidates approved by the focal voter.

        preference : Preference or sequence
            The focal voter's ranking of all candidates.

        abstention_is_sincere : bool, default=False
            Result for the empty ballot.

    Returns
    -------
        bool
    """
    preference = as_preference(preference)
    ballot = frozenset(ballot)
    misc.check_known_candidates(ballot, preference, context="ballot")
    if not ballot:
        return bool(abstention_is_sincere)

    lowest_approved_rank = max(preference.rank(cand) for cand in ballot)
    return ballot == frozenset(preference.order[: lowest_approved_rank + 1])
