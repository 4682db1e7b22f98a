"""
Common type definitions for Knapsack Heuristics.

Provides type aliases used across the package.
"""

from pathlib import Path
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

# Type aliases
FloatArray: TypeAlias = NDArray[np.float64]
IntArray: TypeAlias = NDArray[np.int64]
Rng: TypeAlias = np.random.Generator

# Item identifiers in selection order
Selection: TypeAlias = tuple[int, ...]

# Config types
ConfigDict: TypeAlias = dict[str, int | float | str | bool | list | dict | None]
MetricsDict: TypeAlias = dict[str, float]

# Path types
PathLike: TypeAlias = str | Path
