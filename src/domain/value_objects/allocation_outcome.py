"""票数変更リクエストの処理結果."""

from dataclasses import dataclass
from enum import Enum


class RejectionReason(Enum):
    """リクエストが却下された理由."""

    BUDGET_EXCEEDED = "budget_exceeded"
    PLACEMENT_INFEASIBLE = "placement_infeasible"

    @property
    def label(self) -> str:
        return _REJECTION_LABELS[self]


_REJECTION_LABELS = {
    RejectionReason.BUDGET_EXCEEDED: "ポイントが足りません",
    RejectionReason.PLACEMENT_INFEASIBLE: "グリッドにブロックを配置できません",
}


@dataclass(frozen=True)
class AllocationOutcome:
    """propose_weight の戻り値.

    却下時も状態は変更されない。
    """

    accepted: bool
    candidate_index: int
    requested_weight: int
    reason: RejectionReason | None = None

    def __bool__(self) -> bool:
        return self.accepted

    @classmethod
    def accept(cls, candidate_index: int, weight: int) -> "AllocationOutcome":
        return cls(True, candidate_index, weight)

    @classmethod
    def reject(
        cls, candidate_index: int, weight: int, reason: RejectionReason
    ) -> "AllocationOutcome":
        return cls(False, candidate_index, weight, reason)
