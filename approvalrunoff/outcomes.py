"""
Outcomes of an election given the ballot of the focal voter.

Two voting modes are supported:

- `"approval"`: Approval Voting, all candidates with the most approvals win.
- `"runoff"`: Approval Voting with a runoff between the two candidates with the most
  approvals; the runoff is decided by pairwise matchups
  (Fishburn and Brams, "Approval Voting, Condorcet's Principle, and Runoff Elections",
  Public Choice 36, 1981).

Ties in the first round and undefined matchups are not broken. Instead, an outcome
contains the set of all candidates who could end up winning (Gamma).
"""

import itertools
from collections import namedtuple
from types import MappingProxyType
from approvalrunoff import misc
from approvalrunoff.misc import Ballot
from approvalrunoff.output import output
from approvalrunoff.preferences import as_matchups

MODE_APPROVAL = "approval"
MODE_RUNOFF = "runoff"

# valid voting modes with descriptions
VOTING_MODES = {
    MODE_APPROVAL: "Approval Voting (AV)",
    MODE_RUNOFF: "Approval Voting with Runoff",
}


class UnknownVotingModeError(ValueError):
    """
    Error: unknown voting mode.

    Parameters
    ----------
        mode : str
            The unknown voting mode.
    """

    def __init__(self, mode):
        message = f'Voting mode "{mode}" is not known (valid: {", ".join(VOTING_MODES)}).'
        super().__init__(message)


class VotingConfig(namedtuple("VotingConfig", ["mode", "abstention_is_sincere"])):
    """
    Settings that apply to all computations of a scenario.

    Parameters
    ----------
        mode : str, default="runoff"
            The voting mode, one of `VOTING_MODES`.

        abstention_is_sincere : bool, default=False
            Whether the empty ballot counts as a sincere ballot.
    """

    __slots__ = ()

    def __new__(cls, mode=MODE_RUNOFF, abstention_is_sincere=False):
        if mode not in VOTING_MODES:
            raise UnknownVotingModeError(mode)
        if not isinstance(abstention_is_sincere, bool):
            raise TypeError(
                f"abstention_is_sincere must be True or False, not {abstention_is_sincere!r}."
            )
        return super().__new__(cls, mode, abstention_is_sincere)

    @property
    def is_approval_mode(self):
        return self.mode == MODE_APPROVAL

    def with_mode(self, mode):
        """Return a copy of this configuration with a different voting mode."""
        return VotingConfig(mode, self.abstention_is_sincere)

    def __str__(self):
        abstention = "sincere" if self.abstention_is_sincere else "insincere"
        return f"{VOTING_MODES[self.mode]}, abstention is {abstention}"


def _mode_of(mode):
    if isinstance(mode, VotingConfig):
        return mode.mode
    if mode not in VOTING_MODES:
        raise UnknownVotingModeError(mode)
    return mode


class Runoff(namedtuple("Runoff", ["pair", "winner"])):
    """
    A possible runoff and its winner (`None` if the matchup is undefined).
    """

    __slots__ = ()

    @property
    def is_ambiguous(self):
        return self.winner is None

    def possible_winners(self):
        """Candidates who may win this runoff."""
        if self.winner is None:
            return tuple(self.pair)
        return (self.winner,)

    def __str__(self):
        winner = "undefined" if self.winner is None else self.winner
        return f"{self.pair[0]} vs {self.pair[1]}: {winner}"


class Outcome:
    """
    The result of an election for one ballot of the focal voter.

    Outcomes are immutable.

    Parameters
    ----------
        gamma : iterable
            All candidates who could win.

        votes : dict
            Number of approvals per candidate, including the focal voter's ballot.

        guaranteed : iterable, optional
            Candidates who certainly take part in the runoff (set A).

        contenders : iterable, optional
            Candidates who may take part in the runoff, depending on how ties are broken
            (set B).

        possible_runoffs : iterable of Runoff, optional
            All runoffs that may take place.

        is_approval_mode : bool, default=False
            Whether the outcome was computed without runoff.
    """

    __slots__ = (
        "gamma",
        "votes",
        "guaranteed",
        "contenders",
        "possible_runoffs",
        "is_approval_mode",
    )

    def __init__(
        self,
        gamma,
        votes,
        guaranteed=(),
        contenders=(),
        possible_runoffs=(),
        is_approval_mode=False,
    ):
        object.__setattr__(self, "gamma", frozenset(gamma))
        object.__setattr__(self, "votes", MappingProxyType(dict(votes)))
        object.__setattr__(self, "guaranteed", tuple(guaranteed))
        object.__setattr__(self, "contenders", tuple(contenders))
        object.__setattr__(self, "possible_runoffs", tuple(possible_runoffs))
        object.__setattr__(self, "is_approval_mode", bool(is_approval_mode))

    def __setattr__(self, name, value):
        raise AttributeError(f"Outcome is immutable (cannot set {name}).")

    @property
    def A(self):
        """Set A in the notation of Fishburn and Brams (alias of `guaranteed`)."""
        return self.guaranteed

    @property
    def B(self):
        """Set B in the notation of Fishburn and Brams (alias of `contenders`)."""
        return self.contenders

    def is_certain(self):
        """Check whether the winner is determined."""
        return len(self.gamma) == 1

    def __eq__(self, other):
        if not isinstance(other, Outcome):
            return NotImplemented
        return (
            self.gamma == other.gamma
            and dict(self.votes) == dict(other.votes)
            and self.guaranteed == other.guaranteed
            and self.contenders == other.contenders
            and self.possible_runoffs == other.possible_runoffs
            and self.is_approval_mode == other.is_approval_mode
        )

    __hash__ = None

    def __str__(self):
        text = f"possible winners: {misc.format_gamma(self.gamma)}\n"
        text += " votes: " + ", ".join(f"{cand}: {count}" for cand, count in self.votes.items())
        if not self.is_approval_mode:
            text += f"\n A = {misc.str_set_of_candidates(self.guaranteed)}"
            text += f", B = {misc.str_set_of_candidates(self.contenders)}"
            for runoff in self.possible_runoffs:
                text += f"\n runoff {runoff}"
        return text

    def __repr__(self):
        return (
            f"Outcome(gamma={misc.format_gamma(self.gamma)}, "
            f"is_approval_mode={self.is_approval_mode})"
        )


def tally(base_votes, ballot, candidates):
    """
    Add the focal voter's ballot to the approvals of all other voters.

    .. doctest::

        >>> tally({"A": 5, "B": 5, "C": 2}, ["A"], ["A", "B", "C"])
        {'A': 6, 'B': 5, 'C': 2}

    Parameters
    ----------
        base_votes : dict
            Approvals per candidate of all other voters. Missing candidates have 0 approvals.

        ballot : iterable
            The candidates approved by the focal voter.

        candidates : sequence
            All candidates.

    Returns
    -------
        dict
            Approvals per candidate (with an entry for every candidate, in the order of
            `candidates`).
    """
    candidates = misc.check_candidate_list(candidates)
    ballot = Ballot(ballot, candidates=candidates)
    votes = {cand: 0 for cand in candidates}
    if base_votes:
        misc.check_known_candidates(base_votes, candidates, context="base votes")
        for cand, count in base_votes.items():
            votes[cand] = misc.check_vote_count(cand, count)
    for cand in ballot:
        votes[cand] += 1
    return votes


def get_runoff_winner(cand1, cand2, matchups):
    """
    Determine who wins a runoff between `cand1` and `cand2`.

    Parameters
    ----------
        cand1, cand2 : object
            Two candidates.

        matchups : Matchups or dict or iterable
            Results of pairwise runoffs (see `approvalrunoff.preferences.as_matchups`).

    Returns
    -------
        object or None
            The winner, or `None` if the result is undefined.
    """
    return as_matchups(matchups).winner(cand1, cand2)


def compute_approval_outcome(base_votes, ballot, candidates):
    """
    Outcome under Approval Voting (without runoff).

    All candidates with the most approvals are possible winners.

    Parameters
    ----------
        base_votes : dict
            Approvals per candidate of all other voters.

        ballot : iterable
            The candidates approved by the focal voter.

        candidates : sequence
            All candidates.

    Returns
    -------
        Outcome
    """
    votes = tally(base_votes, ballot, candidates)
    if not votes:
        return Outcome(gamma=(), votes=votes, is_approval_mode=True)
    max_votes = max(votes.values())
    winners = [cand for cand, count in votes.items() if count == max_votes]
    return Outcome(gamma=winners, votes=votes, is_approval_mode=True)


def _runoff_pairings(guaranteed, contenders):
    if len(guaranteed) == 2:
        return [tuple(guaranteed)]
    if len(guaranteed) == 1:
        return [(guaranteed[0], cand) for cand in contenders]
    if len(guaranteed) == 0 and len(contenders) >= 2:
        return list(itertools.combinations(contenders, 2))
    return []


def compute_runoff_outcome(base_votes, matchups, ballot, candidates):
    """
    Outcome under Approval Voting with runoff.

    The two candidates with the most approvals proceed to a runoff, which is decided by
    `matchups`. Ties in the first round lead to several possible runoffs:

    - If several candidates share the most approvals, any two of them may meet in the
      runoff (A is empty, B contains all of them).
    - Otherwise the candidate with the most approvals certainly takes part (A) and faces
      one of the candidates with the second most approvals (B).

    If the result of a possible runoff is undefined, both of its candidates are possible
    winners.

    Parameters
    ----------
        base_votes : dict
            Approvals per candidate of all other voters.

        matchups : Matchups or dict or iterable
            Results of pairwise runoffs (see `approvalrunoff.preferences.as_matchups`).

        ballot : iterable
            The candidates approved by the focal voter.

        candidates : sequence
            All candidates.

    Returns
    -------
        Outcome
    """
    votes = tally(base_votes, ballot, candidates)
    matchups = as_matchups(matchups, candidates=list(votes))
    if not votes:
        return Outcome(gamma=(), votes=votes)

    # stable sort, i.e., ties are listed in the order of `candidates`
    ranking = sorted(votes, key=lambda cand: votes[cand], reverse=True)
    max_votes = votes[ranking[0]]
    second_max_votes = next((votes[cand] for cand in ranking if votes[cand] < max_votes), 0)
    top_tier = [cand for cand in ranking if votes[cand] == max_votes]
    second_tier = [
        cand for cand in ranking if votes[cand] == second_max_votes and votes[cand] < max_votes
    ]

    if len(top_tier) >= 2:
        guaranteed = []
        contenders = top_tier
    else:
        guaranteed = top_tier
        contenders = second_tier

    possible_runoffs = []
    gamma = set()
    for cand1, cand2 in _runoff_pairings(guaranteed, contenders):
        runoff = Runoff((cand1, cand2), matchups.winner(cand1, cand2))
        output.debug2(f"possible runoff {runoff}", indent="  ")
        possible_runoffs.append(runoff)
        gamma.update(runoff.possible_winners())

    if not possible_runoffs and len(top_tier) == 1:
        # only a single candidate
        gamma.add(top_tier[0])

    return Outcome(
        gamma=gamma,
        votes=votes,
        guaranteed=guaranteed,
        contenders=contenders,
        possible_runoffs=possible_runoffs,
    )


def resolve_outcome(base_votes, matchups, ballot, candidates, mode=MODE_RUNOFF):
    """
    Compute the outcome of an election for one ballot of the focal voter.

    Parameters
    ----------
        base_votes : dict
            Approvals per candidate of all other voters.

        matchups : Matchups or dict or iterable
            Results of pairwise runoffs. Ignored in approval mode.

        ballot : iterable
            The candidates approved by the focal voter.

        candidates : sequence
            All candidates.

        mode : str or VotingConfig, default="runoff"
            The voting mode (or a configuration containing it).

    Returns
    -------
        Outcome
    """
    mode = _mode_of(mode)
    ballot = Ballot(ballot)
    if mode == MODE_APPROVAL:
        outcome = compute_approval_outcome(base_votes, ballot, candidates)
    else:
        outcome = compute_runoff_outcome(base_votes, matchups, ballot, candidates)
    output.debug(f"ballot {misc.format_ballot(ballot)} -> {misc.format_gamma(outcome.gamma)}")
    return outcome
