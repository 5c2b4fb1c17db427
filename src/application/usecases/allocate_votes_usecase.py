"""クアドラティック投票の票数割り当てユースケース."""

from src.application.dtos.vote_allocation_dto import (
    AdjustWeightInputDto,
    AllocationStateOutputDto,
    BlockPlacementOutputItem,
    CandidateOutputItem,
    FinalizeVotesOutputDto,
    ProposeWeightInputDto,
    StartVotingSessionInputDto,
    StartVotingSessionOutputDto,
)
from src.common.logging import get_logger
from src.domain.exceptions import DomainException
from src.domain.services.grid_packer import CellMatrix
from src.domain.services.result_summary_service import ResultSummaryService
from src.domain.services.vote_allocator import VoteAllocator
from src.domain.value_objects.allocation_outcome import AllocationOutcome
from src.domain.value_objects.grid_config import GridConfig
from src.domain.value_objects.respondent_profile import RespondentProfile


logger = get_logger(__name__)

NO_SESSION_MESSAGE = "投票セッションが開始されていません"


class AllocateVotesUseCase:
    """1人分の投票セッションを管理するユースケース.

    セッションはメモリ上にのみ保持し、永続化はしない。
    """

    def __init__(
        self,
        grid_config: GridConfig | None = None,
        summary_service: ResultSummaryService | None = None,
    ) -> None:
        """ユースケースを初期化する.

        Args:
            grid_config: グリッド設定。Noneなら既定（10×10・右上1マス予約）
            summary_service: 結果集計サービス
        """
        self.grid_config = grid_config or GridConfig()
        self.summary_service = summary_service or ResultSummaryService()
        self.allocator: VoteAllocator | None = None
        self.profile: RespondentProfile | None = None

    @property
    def has_session(self) -> bool:
        return self.allocator is not None

    def start_session(
        self, input_dto: StartVotingSessionInputDto
    ) -> StartVotingSessionOutputDto:
        """候補一覧を受け取り、全候補0票でセッションを開始する."""
        try:
            self.allocator = VoteAllocator(input_dto.candidates, self.grid_config)
        except DomainException as e:
            logger.warning(f"Failed to start voting session: {e}")
            return StartVotingSessionOutputDto(success=False, error_message=e.message)

        self.profile = input_dto.profile
        logger.info(
            "投票セッションを開始",
            candidate_count=len(input_dto.candidates),
            budget=self.allocator.budget,
        )
        return StartVotingSessionOutputDto(success=True, state=self.get_state())

    def propose_weight(
        self, input_dto: ProposeWeightInputDto
    ) -> AllocationStateOutputDto:
        """候補の票数を指定した値に変更する."""
        if self.allocator is None:
            return _no_session_state()
        try:
            outcome = self.allocator.propose_weight(
                input_dto.candidate_index, input_dto.new_weight
            )
        except DomainException as e:
            logger.warning(f"Invalid vote request: {e}")
            return self._error_state(e.message)
        return self.get_state(outcome)

    def increment(self, input_dto: AdjustWeightInputDto) -> AllocationStateOutputDto:
        """候補の票数を1増やす."""
        if self.allocator is None:
            return _no_session_state()
        try:
            outcome = self.allocator.increment(input_dto.candidate_index)
        except DomainException as e:
            logger.warning(f"Invalid vote request: {e}")
            return self._error_state(e.message)
        return self.get_state(outcome)

    def decrement(self, input_dto: AdjustWeightInputDto) -> AllocationStateOutputDto:
        """候補の票数を1減らす."""
        if self.allocator is None:
            return _no_session_state()
        try:
            outcome = self.allocator.decrement(input_dto.candidate_index)
        except DomainException as e:
            logger.warning(f"Invalid vote request: {e}")
            return self._error_state(e.message)
        return self.get_state(outcome)

    def get_state(
        self, outcome: AllocationOutcome | None = None
    ) -> AllocationStateOutputDto:
        """確定済みの票数・残りポイント・配置を返す."""
        if self.allocator is None:
            return _no_session_state()

        allocator = self.allocator
        state = AllocationStateOutputDto(
            candidates=[
                CandidateOutputItem.from_entity(c) for c in allocator.candidates
            ],
            placements=[
                BlockPlacementOutputItem.from_value_object(
                    p, allocator.candidate_names[p.candidate_index]
                )
                for p in allocator.placements
            ],
            budget=allocator.budget,
            remaining_budget=allocator.remaining_budget,
        )
        if outcome is not None and outcome.reason is not None:
            state.accepted = False
            state.rejection_reason = outcome.reason.value
            state.rejection_message = outcome.reason.label
        return state

    def get_cell_matrix(self) -> CellMatrix:
        """描画用のセル行列（grid[y][x]）を返す. セッション未開始なら空."""
        if self.allocator is None:
            return []
        return self.allocator.cell_matrix()

    def finalize(self) -> FinalizeVotesOutputDto:
        """投票を確定し、結果一覧と集計を返す."""
        if self.allocator is None:
            return FinalizeVotesOutputDto(
                success=False, error_message=NO_SESSION_MESSAGE
            )

        results = self.allocator.results()
        logger.info(
            "投票を確定",
            total_points=self.allocator.total_cost,
            weights=list(self.allocator.weights),
        )
        return FinalizeVotesOutputDto(
            success=True,
            profile=self.profile,
            results=results,
            summary=self.summary_service.summarize(results),
            total_points=self.summary_service.total_points(results),
            remaining_budget=self.allocator.remaining_budget,
        )

    def _error_state(self, message: str) -> AllocationStateOutputDto:
        state = self.get_state()
        state.success = False
        state.accepted = False
        state.error_message = message
        return state


def _no_session_state() -> AllocationStateOutputDto:
    return AllocationStateOutputDto(success=False, error_message=NO_SESSION_MESSAGE)
