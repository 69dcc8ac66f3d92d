# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from pathlib import Path

import pytest

from ball_sort.solver import create_solver

# Path to test-specific solver config files
TEST_CONFIG_FILE = Path(__file__).parent.parent / "config" / "test_solver.yaml"
BAD_CONFIG_FILE = Path(__file__).parent.parent / "config" / "bad_keys.yaml"


def test_create_solver_from_file() -> None:
    """Test creating a solver with a custom config file."""
    solver = create_solver(TEST_CONFIG_FILE)
    assert solver.max_states_explored == 5000
    assert solver.time_limit_ms == 20000
    assert solver.sample_interval == 1
    assert solver.history_size == 3
    assert solver.pruning is False


def test_create_solver_overrides_take_precedence() -> None:
    """Test that keyword overrides win over values from the file."""
    solver = create_solver(str(TEST_CONFIG_FILE), pruning=True, max_states_explored=10)
    assert solver.pruning is True
    assert solver.max_states_explored == 10
    # Untouched values still come from the file
    assert solver.history_size == 3


def test_create_solver_missing_keys_use_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "solver.yaml"
    config_file.write_text("time_limit_ms: 1000\n", encoding="utf-8")

    solver = create_solver(config_file)
    assert solver.time_limit_ms == 1000
    assert solver.max_states_explored == 25_000_000
    assert solver.pruning is True


def test_create_solver_empty_file(tmp_path: Path) -> None:
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("", encoding="utf-8")

    solver = create_solver(config_file)
    assert solver.sample_interval == 10_000


def test_create_solver_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="max_depth"):
        create_solver(BAD_CONFIG_FILE)


def test_create_solver_rejects_non_mapping(tmp_path: Path) -> None:
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        create_solver(config_file)
