"""
Unit tests for approvalrunoff/fileio.py.
"""

import os
import pytest
from approvalrunoff import fileio, strategy
from approvalrunoff.outcomes import MODE_APPROVAL, MODE_RUNOFF, VotingConfig
from approvalrunoff.preferences import Election, Preference


def _write(path, content):
    with open(path, "w", encoding="utf-8") as file:
        file.write(content)
    return str(path)


def test_read_scenario(tmp_path):
    filename = _write(
        tmp_path / "scenario.ar.yaml",
        "description: three candidates\n"
        "candidates: [A, B, C]\n"
        "base_votes: {A: 5, B: 5, C: 2}\n"
        "matchups: [[B, A]]\n"
        "mode: approval\n"
        "abstention_is_sincere: true\n"
        "preference: A>B>C\n",
    )
    election, config, preference, data = fileio.read_scenario_yaml(filename)
    assert election.candidates == ("A", "B", "C")
    assert election.base_votes == {"A": 5, "B": 5, "C": 2}
    assert election.matchups.winner("A", "B") == "B"
    assert config == VotingConfig(MODE_APPROVAL, True)
    assert preference == Preference(["A", "B", "C"])
    assert data["description"] == "three candidates"


def test_read_minimal_scenario(tmp_path):
    filename = _write(tmp_path / "minimal.ar.yaml", "candidates: [X, Y]\n")
    election, config, preference, _ = fileio.read_scenario_yaml(filename)
    assert election.base_votes == {"X": 0, "Y": 0}
    assert len(election.matchups) == 0
    assert config == VotingConfig()
    assert preference is None


def test_read_string_keyed_matchups(tmp_path):
    filename = _write(
        tmp_path / "strings.ar.yaml",
        "candidates: [A, B, C]\nmatchups: {B-A: true, C-A: false}\n",
    )
    election, _, _, _ = fileio.read_scenario_yaml(filename)
    assert list(election.matchups) == [("B", "A")]


@pytest.mark.parametrize(
    "content",
    [
        "- A\n- B\n",
        "base_votes: {A: 1}\n",
        "candidates: A\n",
        "candidates: [A, B]\ncommitteesize: 2\n",
        "candidates: [A, B]\nbase_votes: {C: 1}\n",
        "candidates: [A, B]\nbase_votes: {A: -1}\n",
        "candidates: [A, B]\nbase_votes: [A, B]\n",
        "candidates: [A, B]\nmatchups: [[A, B], [B, A]]\n",
        "candidates: [A, B]\nmatchups: [[A, B, A]]\n",
        "candidates: [A, B]\nmatchups: A\n",
        "candidates: [A, B]\nmode: borda\n",
        'candidates: [A, B]\nabstention_is_sincere: "no"\n',
        "candidates: [A, B]\nabstention_is_sincere: 1\n",
        "candidates: [A, B]\npreference: [A]\n",
    ],
)
def test_malformatted_files(tmp_path, content):
    filename = _write(tmp_path / "bad.ar.yaml", content)
    with pytest.raises(fileio.MalformattedFileException):
        fileio.read_scenario_yaml(filename)


def test_write_and_read(tmp_path):
    election = Election(
        ["A", "B", "C"], base_votes={"A": 5, "B": 4, "C": 6}, matchups=[("C", "A"), ("B", "C")]
    )
    config = VotingConfig(MODE_RUNOFF, abstention_is_sincere=True)
    filename = str(tmp_path / "cycle.ar.yaml")
    fileio.write_scenario_yaml(
        filename, election, config=config, preference="A>B>C", description="a cycle"
    )

    election2, config2, preference2, data = fileio.read_scenario_yaml(filename)
    assert election2.candidates == election.candidates
    assert election2.base_votes == election.base_votes
    assert election2.matchups == election.matchups
    assert config2 == config
    assert preference2.order == ("A", "B", "C")
    assert data["description"] == "a cycle"

    analysis1 = strategy.analyze(election, preference2, config)
    analysis2 = strategy.analyze(election2, preference2, config2)
    assert [ev.gamma for ev in analysis1.evaluations] == [ev.gamma for ev in analysis2.evaluations]


def test_write_without_config(tmp_path):
    election = Election(["A", "B"])
    filename = str(tmp_path / "plain.ar.yaml")
    fileio.write_scenario_yaml(filename, election)
    with open(filename, encoding="utf-8") as file:
        content = file.read()
    assert "mode" not in content
    assert "preference" not in content
    election2, config, preference, _ = fileio.read_scenario_yaml(filename)
    assert election2.candidates == ("A", "B")
    assert config == VotingConfig()
    assert preference is None


def test_read_from_dir(tmp_path):
    _write(tmp_path / "one.ar.yaml", "candidates: [A, B]\n")
    _write(tmp_path / "two.ar.yaml", "candidates: [A, B, C]\n")
    _write(tmp_path / "notes.txt", "not a scenario")
    scenarios = fileio.read_scenario_yaml_files_from_dir(str(tmp_path))
    assert list(scenarios.keys()) == ["one.ar.yaml", "two.ar.yaml"]
    assert scenarios["two.ar.yaml"][0].num_cand == 3


def test_empty_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileio.get_file_names(str(tmp_path))


def test_example_scenarios():
    dirname = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
    scenarios = fileio.read_scenario_yaml_files_from_dir(dirname)
    assert len(scenarios) >= 2
    for election, config, preference, _ in scenarios.values():
        assert preference is not None
        strategy.analyze(election, preference, config)
