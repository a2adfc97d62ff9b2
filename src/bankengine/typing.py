"""
Type aliases for bankengine.

Account keys are unsigned 32-bit integers and monetary amounts are
unsigned 64-bit integers. Both are carried as plain Python ``int`` at the
API surface; the NumPy aliases describe the arrays used internally by the
containers and the safety checks.
"""

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

# === Scalar aliases ===

AccountKey: TypeAlias = int
"""Account identifier in ``[0, 2**32)``."""

Amount: TypeAlias = int
"""Non-negative monetary amount."""

Rate: TypeAlias = float
"""Non-negative interest rate (0.1 == 10% per epoch)."""

# === Internal array aliases ===

Int1D: TypeAlias = NDArray[np.int64]
Bool1D: TypeAlias = NDArray[np.bool_]
Idx1D: TypeAlias = NDArray[np.intp]

KEY_MAX: int = 2**32 - 1
AMOUNT_MAX: int = 2**64 - 1

__all__ = [
    "AccountKey",
    "Amount",
    "Rate",
    "Int1D",
    "Bool1D",
    "Idx1D",
    "KEY_MAX",
    "AMOUNT_MAX",
]
