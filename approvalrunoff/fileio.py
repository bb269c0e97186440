"""
Read and write scenarios (.ar.yaml files).

A scenario file describes an election, the voting configuration and, optionally, the
preference of the focal voter:

.. code-block:: yaml

    description: Fishburn and Brams, example with three candidates
    candidates: [A, B, C]
    base_votes: {A: 5, B: 5, C: 2}
    matchups: [[B, A]]   # pairs (winner, loser)
    mode: runoff
    abstention_is_sincere: false
    preference: [A, B, C]
"""

import os
import ruamel.yaml

from approvalrunoff.outcomes import VotingConfig
from approvalrunoff.preferences import Election, Matchups, as_preference

#: Valid keys for .ar.yaml files.
SCENARIO_YAML_VALID_KEYS = [
    "description",
    "candidates",
    "base_votes",
    "matchups",
    "mode",
    "abstention_is_sincere",
    "preference",
]

SCENARIO_FILE_EXTENSION = ".ar.yaml"


class MalformattedFileException(Exception):
    """Malformatted scenario file."""


def get_file_names(dir_name, filename_extensions=(SCENARIO_FILE_EXTENSION,)):
    """
    List all file names in a directory that end with one of the given extensions.

    .. important::

        Not recursive, i.e., does not look into sub-directories!

    Parameters
    ----------
        dir_name : str
            Path of directory to be searched for files.

        filename_extensions : iterable of str, optional
            File names must have one of these extensions.

    Returns
    -------
        list of str
            Sorted list of file names.
    """
    files = [
        entry.name
        for entry in os.scandir(dir_name)
        if entry.is_file() and any(entry.name.endswith(ext) for ext in filename_extensions)
    ]
    if not files:
        raise FileNotFoundError(f"No scenario files found in {dir_name}")
    return sorted(files)


def _yaml_flow_style_list(x):
    yamllist = ruamel.yaml.comments.CommentedSeq(x)
    yamllist.fa.set_flow_style()
    return yamllist


def _yaml_flow_style_map(x):
    yamlmap = ruamel.yaml.comments.CommentedMap(x)
    yamlmap.fa.set_flow_style()
    return yamlmap


def _parse_matchups(raw_matchups, candidates, filename):
    if raw_matchups is None:
        return Matchups()
    if isinstance(raw_matchups, dict):
        # keys "X-Y" meaning that X beats Y
        return Matchups.from_strings(raw_matchups, candidates)
    if not isinstance(raw_matchups, list):
        raise MalformattedFileException(f"{filename}: matchups must be a list of pairs.")
    pairs = []
    for pair in raw_matchups:
        if not isinstance(pair, list) or len(pair) != 2:
            raise MalformattedFileException(
                f"{filename}: matchup {pair} is not a pair [winner, loser]."
            )
        pairs.append(tuple(pair))
    return Matchups(pairs)


def read_scenario_yaml(filename):
    """
    Read a scenario from a .ar.yaml file.

    Parameters
    ----------
        filename : str
            File name of the .ar.yaml file.

    Returns
    -------
        election : approvalrunoff.preferences.Election
            The election.

        config : approvalrunoff.outcomes.VotingConfig
            Voting mode and abstention policy (defaults if not specified).

        preference : approvalrunoff.preferences.Preference or None
            The focal voter's preference, if specified.

        data : dict
            The YAML data from `filename`.
    """
    yaml = ruamel.yaml.YAML(typ="safe", pure=True)
    with open(filename, encoding="utf-8") as inputfile:
        data = yaml.load(inputfile)

    if not isinstance(data, dict):
        raise MalformattedFileException(f"{filename} does not contain a YAML mapping.")
    for key in data.keys():
        if key not in SCENARIO_YAML_VALID_KEYS:
            raise MalformattedFileException(f'Key "{key}" is not valid (undefined).')
    if "candidates" not in data.keys():
        raise MalformattedFileException(f"{filename} does not contain candidates.")
    if not isinstance(data["candidates"], list):
        raise MalformattedFileException(f"{filename}: candidates must be a list.")
    if not isinstance(data.get("base_votes"), (dict, type(None))):
        raise MalformattedFileException(f"{filename}: base_votes must be a mapping.")
    if not isinstance(data.get("abstention_is_sincere", False), bool):
        raise MalformattedFileException(
            f"{filename}: abstention_is_sincere must be true or false."
        )

    try:
        candidates = data["candidates"]
        matchups = _parse_matchups(data.get("matchups"), candidates, filename)
        election = Election(candidates, base_votes=data.get("base_votes"), matchups=matchups)
        config = VotingConfig(
            mode=data.get("mode", VotingConfig().mode),
            abstention_is_sincere=data.get("abstention_is_sincere", False),
        )
        if data.get("preference") is None:
            preference = None
        else:
            preference = as_preference(data["preference"], candidates=election.candidates)
    except (ValueError, TypeError) as error:
        raise MalformattedFileException(f"{filename}: {error}") from error

    return election, config, preference, data


def read_scenario_yaml_files_from_dir(dir_name):
    """
    Read all .ar.yaml files in a directory.

    Parameters
    ----------
        dir_name : str
            Path of the directory.

    Returns
    -------
        dict
            Maps file names to the return values of `read_scenario_yaml()`.
    """
    return {
        filename: read_scenario_yaml(os.path.join(dir_name, filename))
        for filename in get_file_names(dir_name)
    }


def write_scenario_yaml(filename, election, config=None, preference=None, description=None):
    """
    Write a scenario to a .ar.yaml file.

    Parameters
    ----------
        filename : str
            File name of the .ar.yaml file.

        election : approvalrunoff.preferences.Election
            The election.

        config : approvalrunoff.outcomes.VotingConfig, optional
            Voting mode and abstention policy.

        preference : Preference or sequence, optional
            The focal voter's preference.

        description : str, optional
            An optional description of the scenario.
    """
    data = {}
    if description is not None:
        data["description"] = description
    data["candidates"] = _yaml_flow_style_list(list(election.candidates))
    data["base_votes"] = _yaml_flow_style_map(election.base_votes)
    data["matchups"] = [_yaml_flow_style_list(list(pair)) for pair in election.matchups]
    if config is not None:
        data["mode"] = config.mode
        data["abstention_is_sincere"] = config.abstention_is_sincere
    if preference is not None:
        preference = as_preference(preference, candidates=election.candidates)
        data["preference"] = _yaml_flow_style_list(list(preference))

    yaml = ruamel.yaml.YAML()
    yaml.width = 120
    with open(filename, "w", encoding="utf-8") as outfile:
        yaml.dump(data, outfile)
