import pytest

from approvalrunoff.output import output, WARNING
from approvalrunoff.preferences import Election


@pytest.fixture(autouse=True)
def reset_verbosity():
    # tests and examples may modify the verbosity of the global output object
    output.set_verbosity(WARNING)
    yield
    output.set_verbosity(WARNING)


@pytest.fixture
def election_abc():
    """Three candidates, A and B tied before the focal voter, B beats A in a runoff."""
    return Election(["A", "B", "C"], base_votes={"A": 5, "B": 5, "C": 2}, matchups=[("B", "A")])
