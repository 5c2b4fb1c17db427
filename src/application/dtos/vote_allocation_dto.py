"""票数割り当てに関するDTO."""

from dataclasses import dataclass, field

from src.domain.entities.candidate import Candidate
from src.domain.value_objects.block_placement import BlockPlacement
from src.domain.value_objects.respondent_profile import RespondentProfile
from src.domain.value_objects.vote_result import VoteResultItem, VoteShare


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class StartVotingSessionInputDto:
    """投票セッション開始の入力DTO."""

    candidates: list[str]
    profile: RespondentProfile | None = None


@dataclass
class ProposeWeightInputDto:
    """票数変更の入力DTO."""

    candidate_index: int
    new_weight: int


@dataclass
class AdjustWeightInputDto:
    """票数を1つ増減する入力DTO."""

    candidate_index: int


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class CandidateOutputItem:
    """候補の出力アイテム."""

    index: int
    name: str
    votes: int
    points: int

    @classmethod
    def from_entity(cls, entity: Candidate) -> "CandidateOutputItem":
        """エンティティから出力アイテムを生成する."""
        return cls(
            index=entity.index,
            name=entity.name,
            votes=entity.weight,
            points=entity.cost,
        )


@dataclass
class BlockPlacementOutputItem:
    """ブロック配置の出力アイテム."""

    candidate_index: int
    candidate: str
    x: int
    y: int
    size: int

    @classmethod
    def from_value_object(
        cls, placement: BlockPlacement, candidate: str
    ) -> "BlockPlacementOutputItem":
        return cls(
            candidate_index=placement.candidate_index,
            candidate=candidate,
            x=placement.x,
            y=placement.y,
            size=placement.size,
        )


@dataclass
class AllocationStateOutputDto:
    """リクエスト処理後の割り当て状態.

    accepted=False でも candidates/placements は確定済みの状態を表す。
    """

    candidates: list[CandidateOutputItem] = field(default_factory=list)
    placements: list[BlockPlacementOutputItem] = field(default_factory=list)
    budget: int = 0
    remaining_budget: int = 0
    accepted: bool = True
    rejection_reason: str | None = None
    rejection_message: str | None = None
    success: bool = True
    error_message: str | None = None

    @property
    def weights(self) -> list[int]:
        return [c.votes for c in self.candidates]


@dataclass
class StartVotingSessionOutputDto:
    """投票セッション開始の出力DTO."""

    success: bool
    state: AllocationStateOutputDto | None = None
    error_message: str | None = None


@dataclass
class FinalizeVotesOutputDto:
    """投票確定の出力DTO."""

    success: bool
    profile: RespondentProfile | None = None
    results: list[VoteResultItem] = field(default_factory=list)
    summary: list[VoteShare] = field(default_factory=list)
    total_points: int = 0
    remaining_budget: int = 0
    error_message: str | None = None
