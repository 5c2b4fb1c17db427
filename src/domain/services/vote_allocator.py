"""クアドラティック投票の票数割り当てドメインサービス.

票数変更リクエストは次の2段階で検証する。

1. 予算チェック: 変更後の消費ポイント合計が予算以下であること
2. 配置チェック: 変更後の票数ベクトル全体をゼロから配置し直し、
   すべてのブロックが置けること

両方を満たした場合にのみ票数と配置を同時に確定する。
どちらかで却下された場合、確定済みの状態は一切変更しない。
"""

from collections.abc import Sequence

from src.common.logging import get_logger
from src.domain.entities.candidate import Candidate
from src.domain.exceptions import ValidationException
from src.domain.services.budget_ledger import BudgetLedger
from src.domain.services.grid_packer import CellMatrix, GridPacker
from src.domain.value_objects.allocation_outcome import (
    AllocationOutcome,
    RejectionReason,
)
from src.domain.value_objects.block_placement import BlockPlacement
from src.domain.value_objects.grid_config import GridConfig
from src.domain.value_objects.vote_result import VoteResultItem


logger = get_logger(__name__)


class VoteAllocator:
    """1回の投票セッションの票数とブロック配置を保持する."""

    def __init__(
        self,
        candidate_names: Sequence[str],
        config: GridConfig | None = None,
    ) -> None:
        """割り当て状態を初期化する（全候補0票）.

        Args:
            candidate_names: 候補名（順序はセッション中固定）
            config: グリッド設定。Noneなら10×10・右上1マス予約

        Raises:
            ValidationException: 候補が1件もない場合
        """
        if not candidate_names:
            raise ValidationException("候補が指定されていません")
        self.config = config or GridConfig()
        self.candidate_names: tuple[str, ...] = tuple(candidate_names)
        self.packer = GridPacker(self.config)
        self.ledger = BudgetLedger(len(self.candidate_names), self.config.budget)
        self._placements: tuple[BlockPlacement, ...] = ()

    @property
    def budget(self) -> int:
        return self.config.budget

    @property
    def weights(self) -> tuple[int, ...]:
        return self.ledger.weights

    @property
    def total_cost(self) -> int:
        return self.ledger.total_cost

    @property
    def remaining_budget(self) -> int:
        return self.ledger.remaining_budget

    @property
    def placements(self) -> tuple[BlockPlacement, ...]:
        return self._placements

    @property
    def candidates(self) -> list[Candidate]:
        """現在の票数を反映した候補エンティティのスナップショット."""
        return [
            Candidate(index=i, name=name, weight=weight)
            for i, (name, weight) in enumerate(
                zip(self.candidate_names, self.ledger.weights, strict=True)
            )
        ]

    def propose_weight(
        self, candidate_index: int, new_weight: int
    ) -> AllocationOutcome:
        """候補の票数を new_weight に変更するよう要求する.

        Raises:
            InvalidVoteRequestException: インデックスが範囲外、
                または票数が0以上の整数でない場合
        """
        self.ledger.validate_request(candidate_index, new_weight)

        if self.ledger.exceeds_budget(candidate_index, new_weight):
            logger.info(
                "ポイント超過のため却下",
                candidate_index=candidate_index,
                weight=new_weight,
                cost=self.ledger.hypothetical_cost(candidate_index, new_weight),
                budget=self.budget,
            )
            return AllocationOutcome.reject(
                candidate_index, new_weight, RejectionReason.BUDGET_EXCEEDED
            )

        weights = self.ledger.hypothetical_weights(candidate_index, new_weight)
        result = self.packer.pack(weights)
        if not result.success:
            logger.info(
                "ブロック配置不可のため却下",
                candidate_index=candidate_index,
                weight=new_weight,
                weights=weights,
            )
            return AllocationOutcome.reject(
                candidate_index, new_weight, RejectionReason.PLACEMENT_INFEASIBLE
            )

        self.ledger.commit(weights)
        self._placements = result.placements
        logger.debug(
            "票数を更新",
            candidate_index=candidate_index,
            weight=new_weight,
            remaining_budget=self.remaining_budget,
        )
        return AllocationOutcome.accept(candidate_index, new_weight)

    def increment(self, candidate_index: int) -> AllocationOutcome:
        """票数を1増やす（＋ボタン）."""
        return self.propose_weight(
            candidate_index, self.ledger.weight_of(candidate_index) + 1
        )

    def decrement(self, candidate_index: int) -> AllocationOutcome:
        """票数を1減らす（－ボタン）. 0票からはそのまま0票."""
        return self.propose_weight(
            candidate_index, max(0, self.ledger.weight_of(candidate_index) - 1)
        )

    def cell_matrix(self) -> CellMatrix:
        """確定済みの配置から描画用のセル行列を作る."""
        return self.packer.build_cell_matrix(self._placements)

    def results(self) -> list[VoteResultItem]:
        """セッション終了時に引き渡す投票結果."""
        return [
            VoteResultItem(candidate=c.name, votes=c.weight, points=c.cost)
            for c in self.candidates
        ]
