"""ポイント台帳ドメインサービス."""

from collections.abc import Sequence

from src.domain.exceptions import InvalidVoteRequestException
from src.domain.services.vote_weight import validate_weight


class BudgetLedger:
    """候補ごとの票数と消費ポイント（票数の2乗）を管理する.

    台帳自身は仮の変更を確定しない。票数の確定は commit でのみ行う。
    """

    def __init__(self, candidate_count: int, budget: int) -> None:
        self.budget = budget
        self._weights: list[int] = [0] * candidate_count

    @property
    def candidate_count(self) -> int:
        return len(self._weights)

    @property
    def weights(self) -> tuple[int, ...]:
        return tuple(self._weights)

    @property
    def total_cost(self) -> int:
        return sum(w * w for w in self._weights)

    @property
    def remaining_budget(self) -> int:
        return self.budget - self.total_cost

    def weight_of(self, candidate_index: int) -> int:
        self._validate_index(candidate_index)
        return self._weights[candidate_index]

    def cost_of(self, candidate_index: int) -> int:
        weight = self.weight_of(candidate_index)
        return weight * weight

    def validate_request(self, candidate_index: int, new_weight: object) -> None:
        """リクエストの前提条件を検証する.

        Raises:
            InvalidVoteRequestException: インデックスが範囲外、
                または票数が0以上の整数でない場合
        """
        self._validate_index(candidate_index)
        validate_weight(new_weight, candidate_index)

    def hypothetical_weights(self, candidate_index: int, new_weight: int) -> list[int]:
        """指定候補の票数だけを差し替えた票数ベクトルのコピーを返す."""
        weights = list(self._weights)
        weights[candidate_index] = new_weight
        return weights

    def hypothetical_cost(self, candidate_index: int, new_weight: int) -> int:
        others = self.total_cost - self._weights[candidate_index] ** 2
        return others + new_weight * new_weight

    def exceeds_budget(self, candidate_index: int, new_weight: int) -> bool:
        return self.hypothetical_cost(candidate_index, new_weight) > self.budget

    def commit(self, weights: Sequence[int]) -> None:
        """票数ベクトルを確定する."""
        if len(weights) != self.candidate_count:
            raise ValueError(
                f"票数ベクトルの長さが一致しません: {len(weights)} != "
                f"{self.candidate_count}"
            )
        total = sum(w * w for w in weights)
        if total > self.budget:
            raise ValueError(f"予算を超える票数は確定できません: {total} > {self.budget}")
        self._weights = list(weights)

    def _validate_index(self, candidate_index: object) -> None:
        if (
            isinstance(candidate_index, bool)
            or not isinstance(candidate_index, int)
            or not 0 <= candidate_index < self.candidate_count
        ):
            raise InvalidVoteRequestException(
                f"候補インデックスが範囲外です: {candidate_index!r}",
                candidate_index=candidate_index,  # type: ignore[arg-type]
            )
