"""
Preferences of the focal voter, pairwise matchups and elections.

.. important::

    - Candidates are arbitrary hashable objects, usually short strings such as `"A"`.
    - An election consists of a list of candidates, the approvals of all other voters
      (base votes) and the results of pairwise runoffs (matchups).
    - The focal voter's preference is a strict ranking of all candidates.

"""

from collections.abc import Mapping
from approvalrunoff import misc
from approvalrunoff.misc import Ballot, UnknownCandidateError

MATCHUP_KEY_SEPARATOR = "-"
PREFERENCE_SEPARATOR = ">"


class InconsistentMatchupError(ValueError):
    """
    Error: both directions of a matchup are asserted.

    Parameters
    ----------
        cand1, cand2 : object
            The two candidates that supposedly beat each other.
    """

    def __init__(self, cand1, cand2):
        message = (
            f"Inconsistent matchups: {cand1!r} beats {cand2!r} and "
            f"{cand2!r} beats {cand1!r}."
        )
        super().__init__(message)


class Preference:
    """
    A strict ranking of all candidates, from most to least preferred.

    Parameters
    ----------
        order : iterable
            All candidates, most preferred first. Must not contain duplicates.

        candidates : iterable, optional
            All candidates of the election. Used only for checks.

            If provided, it is verified that `order` is a permutation of `candidates`.

    Examples
    --------
    .. doctest::

        >>> preference = Preference(["A", "B", "C"])
        >>> preference.rank("B")
        1
        >>> preference.prefers("A", "C")
        True
        >>> print(preference)
        A > B > C
    """

    def __init__(self, order, candidates=None):
        self.order = misc.check_candidate_list(order)
        self._ranks = {cand: rank for rank, cand in enumerate(self.order)}
        if candidates is not None:
            self.check_candidates(candidates)

    @classmethod
    def from_string(cls, pref_string, candidates=None):
        """
        Parse a preference written as `"A>B>C"`.

        Whitespace around candidates is ignored, as are empty parts.

        Parameters
        ----------
            pref_string : str
                The preference.

            candidates : iterable, optional
                All candidates of the election. Used only for checks.

        Returns
        -------
            Preference
        """
        parts = [part.strip() for part in pref_string.split(PREFERENCE_SEPARATOR)]
        return cls([part for part in parts if part], candidates=candidates)

    def check_candidates(self, candidates):
        """
        Verify that this preference ranks exactly the given candidates.

        Parameters
        ----------
            candidates : iterable
                All candidates of the election.
        """
        candidates = misc.check_candidate_list(candidates)
        misc.check_known_candidates(self.order, candidates, context="preference")
        missing = [cand for cand in candidates if cand not in self._ranks]
        if missing:
            raise ValueError(f"Preference {self} does not rank the candidates {missing}.")

    def rank(self, cand):
        """
        Position of `cand` in the ranking (0 is the most preferred candidate).

        Parameters
        ----------
            cand : object
                A candidate.

        Returns
        -------
            int
        """
        try:
            return self._ranks[cand]
        except KeyError:
            raise UnknownCandidateError(cand, context="preference") from None

    def prefers(self, cand1, cand2):
        """Check whether `cand1` is strictly preferred to `cand2`."""
        return self.rank(cand1) < self.rank(cand2)

    def top(self, k):
        """
        The ballot approving exactly the `k` most preferred candidates.

        Parameters
        ----------
            k : int
                Number of approved candidates.

        Returns
        -------
            Ballot
        """
        if not 0 <= k <= len(self.order):
            raise ValueError(f"k={k} is not between 0 and {len(self.order)}.")
        return Ballot(self.order[:k])

    def __len__(self):
        return len(self.order)

    def __iter__(self):
        return iter(self.order)

    def __getitem__(self, i):
        return self.order[i]

    def __contains__(self, cand):
        return cand in self._ranks

    def __eq__(self, other):
        if isinstance(other, Preference):
            return self.order == other.order
        return NotImplemented

    def __hash__(self):
        return hash(self.order)

    def __str__(self):
        return f" {PREFERENCE_SEPARATOR} ".join(str(cand) for cand in self.order)

    def __repr__(self):
        return f"Preference({list(self.order)!r})"


def as_preference(preference, candidates=None):
    """
    Convert a sequence of candidates to a `Preference` (if it is not one already).

    Parameters
    ----------
        preference : Preference or iterable or str
            A preference; strings are parsed with `Preference.from_string`.

        candidates : iterable, optional
            All candidates of the election. Used only for checks.

    Returns
    -------
        Preference
    """
    if isinstance(preference, Preference):
        if candidates is not None:
            preference.check_candidates(candidates)
        return preference
    if isinstance(preference, str):
        return Preference.from_string(preference, candidates=candidates)
    return Preference(preference, candidates=candidates)


class Matchups:
    """
    Results of pairwise runoffs between candidates.

    For each pair of candidates, either one of them beats the other or the result is
    undefined. Asserting that both candidates beat each other raises
    `InconsistentMatchupError`.

    Parameters
    ----------
        beats : iterable of tuple, optional
            Pairs `(winner, loser)`.

    Examples
    --------
    .. doctest::

        >>> matchups = Matchups([("B", "A")])
        >>> matchups.winner("A", "B")
        'B'
        >>> matchups.winner("A", "C") is None
        True
    """

    def __init__(self, beats=()):
        self._beats = {}  # insertion-ordered set of (winner, loser)
        for winner, loser in beats:
            self.add(winner, loser)

    @classmethod
    def from_dict(cls, mapping):
        """
        Create matchups from a mapping `{(winner, loser): bool}`.

        Entries with a false value carry no information and are ignored.

        Parameters
        ----------
            mapping : dict
                Maps ordered pairs to `True` if the first candidate beats the second.

        Returns
        -------
            Matchups
        """
        return cls(pair for pair, value in mapping.items() if value)

    @classmethod
    def from_strings(cls, mapping, candidates):
        """
        Create matchups from a mapping with keys such as `"X-Y"` (meaning X beats Y).

        Keys are split at a `-` such that both parts are names of known candidates.
        Since names may contain `-` themselves, a key with no or with more than one such
        split is rejected.

        Parameters
        ----------
            mapping : dict
                Maps keys `"X-Y"` to `True` if X beats Y.

            candidates : iterable
                All candidates of the election.

        Returns
        -------
            Matchups
        """
        names = {str(cand): cand for cand in candidates}
        beats = []
        for key, value in mapping.items():
            if not value:
                continue
            splits = [
                (names[key[:i]], names[key[i + 1 :]])
                for i, char in enumerate(key)
                if char == MATCHUP_KEY_SEPARATOR and key[:i] in names and key[i + 1 :] in names
            ]
            if len(splits) != 1:
                raise ValueError(
                    f'Matchup key "{key}" does not denote exactly one pair of candidates.'
                )
            beats.append(splits[0])
        return cls(beats)

    def add(self, winner, loser):
        """
        Record that `winner` beats `loser` in a runoff.

        Parameters
        ----------
            winner, loser : object
                Two different candidates.
        """
        if winner == loser:
            raise ValueError(f"A candidate cannot beat itself ({winner!r}).")
        if (loser, winner) in self._beats:
            raise InconsistentMatchupError(winner, loser)
        self._beats[(winner, loser)] = None

    def beats(self, cand1, cand2):
        """Check whether `cand1` is known to beat `cand2`."""
        return (cand1, cand2) in self._beats

    def winner(self, cand1, cand2):
        """
        Winner of a runoff between `cand1` and `cand2`.

        Returns
        -------
            object or None
                The winner, or `None` if the result of this matchup is undefined.
        """
        if self.beats(cand1, cand2):
            return cand1
        if self.beats(cand2, cand1):
            return cand2
        return None

    def is_defined(self, cand1, cand2):
        """Check whether the result of a runoff between `cand1` and `cand2` is known."""
        return self.winner(cand1, cand2) is not None

    def candidates(self):
        """Set of all candidates appearing in some matchup."""
        return {cand for pair in self._beats for cand in pair}

    def to_dict(self):
        """Return a dictionary `{(winner, loser): True}`."""
        return {pair: True for pair in self._beats}

    def __iter__(self):
        return iter(self._beats)

    def __len__(self):
        return len(self._beats)

    def __contains__(self, pair):
        return tuple(pair) in self._beats

    def __eq__(self, other):
        if isinstance(other, Matchups):
            return set(self._beats) == set(other._beats)
        return NotImplemented

    __hash__ = None

    def __str__(self):
        if not self._beats:
            return "no matchups"
        return ", ".join(f"{winner} beats {loser}" for winner, loser in self._beats)


def as_matchups(matchups, candidates=None):
    """
    Convert matchups given in one of the accepted formats to `Matchups`.

    Accepted are `None` (no matchups), `Matchups`, mappings with keys `(winner, loser)` or
    `"winner-loser"` (the latter requires `candidates`) and iterables of pairs.

    Parameters
    ----------
        matchups : Matchups or dict or iterable or None
            The matchups.

        candidates : iterable, optional
            All candidates of the election. If provided, it is verified that the matchups
            only contain these candidates.

    Returns
    -------
        Matchups
    """
    if matchups is None:
        result = Matchups()
    elif isinstance(matchups, Matchups):
        result = matchups
    elif isinstance(matchups, Mapping):
        if any(isinstance(key, str) for key in matchups):
            if candidates is None:
                raise ValueError("Matchups with string keys require the list of candidates.")
            result = Matchups.from_strings(matchups, candidates)
        else:
            result = Matchups.from_dict(matchups)
    else:
        result = Matchups(matchups)
    if candidates is not None:
        misc.check_known_candidates(result.candidates(), candidates, context="matchups")
    return result


class Election:
    """
    A fixed election background for the focal voter.

    Parameters
    ----------
        candidates : iterable
            All candidates, without duplicates. The order is used to break ties when
            sorting and to enumerate ballots.

        base_votes : dict, optional
            Number of approvals each candidate receives from all other voters.
            Missing candidates receive 0 approvals.

        matchups : Matchups or dict or iterable, optional
            Results of pairwise runoffs (see `as_matchups`).

    Attributes
    ----------
        candidates : tuple
            All candidates.

        base_votes : dict
            Approvals of all other voters; contains an entry for every candidate.

        matchups : Matchups
            Results of pairwise runoffs.
    """

    def __init__(self, candidates, base_votes=None, matchups=None):
        self.candidates = misc.check_candidate_list(candidates)
        self.base_votes = {cand: 0 for cand in self.candidates}
        if base_votes is not None:
            if not isinstance(base_votes, Mapping):
                raise TypeError(
                    f"Base votes must be a mapping from candidates to counts, not {base_votes!r}."
                )
            misc.check_known_candidates(base_votes, self.candidates, context="base votes")
            for cand, count in base_votes.items():
                self.base_votes[cand] = misc.check_vote_count(cand, count)
        self.matchups = as_matchups(matchups, self.candidates)

    @property
    def num_cand(self):
        """Number of candidates."""
        return len(self.candidates)

    def preference(self, order):
        """
        Create a preference over the candidates of this election.

        Parameters
        ----------
            order : iterable or str
                All candidates, most preferred first (or a string `"A>B>C"`).

        Returns
        -------
            Preference
        """
        return as_preference(order, candidates=self.candidates)

    def __str__(self):
        output = f"election with {self.num_cand} candidates:\n"
        for cand in self.candidates:
            output += f" {str(cand) + ':':6s} {self.base_votes[cand]} approvals\n"
        output += f" matchups: {self.matchups}"
        return output
