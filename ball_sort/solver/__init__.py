# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from .definitions import Successor, admits_empty_destination, generate_successors, is_frozen
from .solver import (
    QueueSample,
    SearchStats,
    Solver,
    SolverStatus,
    SolveResult,
    create_solver,
    solve,
)

__all__ = [
    "Solver",
    "create_solver",
    "solve",
    "SolverStatus",
    "SolveResult",
    "SearchStats",
    "QueueSample",
    "Successor",
    "generate_successors",
    "admits_empty_destination",
    "is_frozen",
]
