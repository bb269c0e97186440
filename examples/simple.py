"""
Very simple example (outcome of a single ballot)
"""

from approvalrunoff.outcomes import resolve_outcome, MODE_RUNOFF
from approvalrunoff.output import output, INFO

output.set_verbosity(INFO)

candidates = ["A", "B", "C"]
base_votes = {"A": 5, "B": 5, "C": 2}
matchups = {("B", "A"): True}
ballot = {"A"}
print(
    f"Computing the outcome of Approval Voting with runoff\n"
    f"for the ballot {ballot} given the approvals {base_votes}\n"
)
outcome = resolve_outcome(base_votes, matchups, ballot, candidates, MODE_RUNOFF)
print(outcome)
