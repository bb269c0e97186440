"""
Fishburn and Brams: a voter with preference A > B > C is better off approving B only.
"""

from approvalrunoff import strategy
from approvalrunoff.misc import format_ballot
from approvalrunoff.outcomes import VotingConfig, MODE_APPROVAL
from approvalrunoff.output import output, INFO
from approvalrunoff.preferences import Election

output.set_verbosity(INFO)

election = Election(
    ["A", "B", "C"],
    base_votes={"A": 5, "B": 4, "C": 6},
    matchups=[("C", "A"), ("B", "C"), ("A", "B")],
)
print(f"Input: {election}\n")

analysis = strategy.analyze(election, "A>B>C")
print(analysis)

for evaluation in analysis.dominating_insincere:
    print(f"The insincere ballot {format_ballot(evaluation.ballot)} beats every sincere ballot.")
assert analysis.has_strategic_incentive

# without a runoff, approving A (and possibly B) is optimal
analysis = strategy.analyze(election, "A>B>C", VotingConfig(MODE_APPROVAL))
print(analysis)
assert not analysis.has_strategic_incentive
