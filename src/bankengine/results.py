# src/bankengine/results.py
"""Per-epoch outcome records and running counters."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["EpochResult", "EpochStats"]


@dataclass(slots=True, frozen=True)
class EpochResult:
    """
    Outcome of one `Bank.end_epoch` call.

    ``loans_accepted`` / ``operations_accepted`` are ``None`` when the
    corresponding queue was empty and no decision was taken.
    """

    epoch: int
    loans_accepted: bool | None
    operations_accepted: bool | None
    treasury: int


@dataclass(slots=True)
class EpochStats:
    """Running count of batch decisions since the bank was created."""

    epochs: int = 0
    loans_accepted: int = 0
    loans_rejected: int = 0
    operations_accepted: int = 0
    operations_rejected: int = 0

    def record(self, result: EpochResult) -> None:
        self.epochs += 1
        if result.loans_accepted is not None:
            if result.loans_accepted:
                self.loans_accepted += 1
            else:
                self.loans_rejected += 1
        if result.operations_accepted is not None:
            if result.operations_accepted:
                self.operations_accepted += 1
            else:
                self.operations_rejected += 1

    def as_dict(self) -> dict[str, int]:
        return {
            "epochs": self.epochs,
            "loans_accepted": self.loans_accepted,
            "loans_rejected": self.loans_rejected,
            "operations_accepted": self.operations_accepted,
            "operations_rejected": self.operations_rejected,
        }
