"""
Strategic voting: can an insincere ballot be better than every sincere ballot?

For a fixed election, every ballot of the focal voter is evaluated, the resulting sets of
possible winners are compared according to the voter's preference, and sincere ballots are
compared with insincere ones.
"""

from collections import OrderedDict, namedtuple
from approvalrunoff import misc
from approvalrunoff.ballots import enumerate_ballots
from approvalrunoff.comparison import compare_outcomes, outcome_rank, BETTER
from approvalrunoff.misc import header
from approvalrunoff.outcomes import VotingConfig, resolve_outcome
from approvalrunoff.output import output
from approvalrunoff.sincerity import is_sincere_ballot


class BallotEvaluation(namedtuple("BallotEvaluation", ["ballot", "outcome", "sincere"])):
    """
    A ballot together with its outcome and whether it is sincere.

    `sincere` is `None` if no preference was given.
    """

    __slots__ = ()

    @property
    def gamma(self):
        return self.outcome.gamma

    def __str__(self):
        text = f"{misc.format_ballot(self.ballot):20s} -> {misc.format_gamma(self.gamma)}"
        if self.sincere:
            text += " (sincere)"
        return text


def evaluate_ballots(election, config=None, preference=None):
    """
    Compute the outcome of every ballot the focal voter can cast.

    Parameters
    ----------
        election : approvalrunoff.preferences.Election
            The election.

        config : VotingConfig, optional
            Voting mode and abstention policy. Defaults to `VotingConfig()`.

        preference : Preference or sequence, optional
            If given, each ballot is classified as sincere or insincere.

    Returns
    -------
        list of BallotEvaluation
            One entry per ballot, in the order of `enumerate_ballots()`.
    """
    if config is None:
        config = VotingConfig()
    if preference is not None:
        preference = election.preference(preference)

    evaluations = []
    for ballot in enumerate_ballots(election.candidates):
        outcome = resolve_outcome(
            election.base_votes, election.matchups, ballot, election.candidates, config
        )
        if preference is None:
            sincere = None
        else:
            sincere = is_sincere_ballot(ballot, preference, config.abstention_is_sincere)
        evaluation = BallotEvaluation(ballot, outcome, sincere)
        output.details(str(evaluation), indent=" ")
        evaluations.append(evaluation)
    return evaluations


def _undominated(evaluations, competitors, preference):
    # compare each distinct set of possible winners only once
    gammas = {evaluation.gamma for evaluation in competitors}
    return [
        evaluation
        for evaluation in evaluations
        if not any(
            compare_outcomes(gamma, evaluation.gamma, preference) == BETTER for gamma in gammas
        )
    ]


class StrategyAnalysis:
    """
    Sincere and insincere ballots of a voter and their outcomes.

    Use `analyze()` to create an instance.

    Attributes
    ----------
        election : approvalrunoff.preferences.Election
            The election.

        preference : approvalrunoff.preferences.Preference
            The focal voter's preference.

        config : VotingConfig
            Voting mode and abstention policy.

        evaluations : list of BallotEvaluation
            All ballots with their outcomes.
    """

    def __init__(self, election, preference, config, evaluations):
        self.election = election
        self.preference = preference
        self.config = config
        self.evaluations = evaluations

    @property
    def sincere(self):
        """Evaluations of all sincere ballots."""
        return [evaluation for evaluation in self.evaluations if evaluation.sincere]

    @property
    def insincere(self):
        """Evaluations of all insincere ballots."""
        return [evaluation for evaluation in self.evaluations if not evaluation.sincere]

    @property
    def optimal(self):
        """Evaluations of ballots whose outcome is not worse than the outcome of any ballot."""
        return _undominated(self.evaluations, self.evaluations, self.preference)

    @property
    def best_sincere(self):
        """Evaluations of sincere ballots not worse than any other sincere ballot."""
        return _undominated(self.sincere, self.sincere, self.preference)

    @property
    def dominating_insincere(self):
        """
        Evaluations of insincere ballots that are better than every sincere ballot.

        If there is no sincere ballot, this list is empty.
        """
        sincere_gammas = {evaluation.gamma for evaluation in self.sincere}
        if not sincere_gammas:
            return []
        return [
            evaluation
            for evaluation in self.insincere
            if all(
                compare_outcomes(evaluation.gamma, gamma, self.preference) == BETTER
                for gamma in sincere_gammas
            )
        ]

    @property
    def has_strategic_incentive(self):
        """Check whether some insincere ballot is better than every sincere ballot."""
        return len(self.dominating_insincere) > 0

    def groups(self):
        """
        Group ballots by their set of possible winners.

        Returns
        -------
            OrderedDict
                Maps `misc.gamma_key(gamma)` to the list of ballots with this outcome,
                ordered from the best to the worst outcome (see `outcome_rank`).
        """
        groups = OrderedDict()
        for evaluation in self.ranked():
            groups.setdefault(misc.gamma_key(evaluation.gamma), []).append(evaluation.ballot)
        return groups

    def ranked(self):
        """All evaluations sorted from the best to the worst outcome."""
        return sorted(
            self.evaluations,
            key=lambda evaluation: outcome_rank(evaluation.gamma, self.preference),
        )

    def __str__(self):
        text = header(f"Preference {self.preference} ({self.config})")
        for evaluation in self.ranked():
            text += f" {evaluation}\n"
        dominating = self.dominating_insincere
        if dominating:
            text += "Insincere ballots better than every sincere ballot:\n"
            text += "".join(f" {misc.format_ballot(ev.ballot)}\n" for ev in dominating)
        else:
            text += "No insincere ballot is better than every sincere ballot.\n"
        return text


def analyze(election, preference, config=None):
    """
    Analyze whether the focal voter has an incentive to vote insincerely.

    Parameters
    ----------
        election : approvalrunoff.preferences.Election
            The election.

        preference : Preference or sequence or str
            The focal voter's ranking of all candidates.

        config : VotingConfig, optional
            Voting mode and abstention policy. Defaults to `VotingConfig()`.

    Returns
    -------
        StrategyAnalysis
    """
    if config is None:
        config = VotingConfig()
    preference = election.preference(preference)
    output.info(header(f"Ballots of a voter with preference {preference}"))
    evaluations = evaluate_ballots(election, config=config, preference=preference)
    analysis = StrategyAnalysis(election, preference, config, evaluations)
    if not analysis.sincere:
        output.warning(
            f"No ballot is sincere for preference {preference} ({config}), "
            "so no insincere ballot can be better than every sincere ballot."
        )
    output.info(
        f"strategic incentive: {analysis.has_strategic_incentive} "
        f"({len(analysis.sincere)} sincere of {len(evaluations)} ballots)"
    )
    return analysis
