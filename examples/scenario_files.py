"""
Read scenarios from .ar.yaml files and analyze them.
"""

import os
from approvalrunoff import fileio, strategy

currdir = os.path.dirname(os.path.abspath(__file__))
dirname = os.path.join(currdir, "..", "tests", "data")

for filename, (election, config, preference, data) in sorted(
    fileio.read_scenario_yaml_files_from_dir(dirname).items()
):
    print(f"{filename}: {data.get('description', '')}")
    analysis = strategy.analyze(election, preference, config)
    print(analysis)
