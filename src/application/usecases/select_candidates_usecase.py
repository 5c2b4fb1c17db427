"""投票対象の候補選択ユースケース."""

from collections.abc import Sequence

from src.application.dtos.candidate_selection_dto import (
    CandidateOptionItem,
    ConfirmSelectionOutputDto,
    ListCandidateOptionsOutputDto,
    ToggleCandidateInputDto,
    ToggleCandidateOutputDto,
)
from src.common.logging import get_logger
from src.domain.exceptions import CandidateSelectionException
from src.domain.services.candidate_selection_service import (
    CandidateSelectionService,
)


logger = get_logger(__name__)


class SelectCandidatesUseCase:
    """関心のない候補を除外して投票対象を決めるユースケース."""

    def __init__(
        self,
        catalogue: Sequence[str],
        selection_service: CandidateSelectionService | None = None,
    ) -> None:
        self.catalogue = list(catalogue)
        self.selection_service = selection_service or CandidateSelectionService()

    def list_options(self, excluded: Sequence[str]) -> ListCandidateOptionsOutputDto:
        """候補一覧と除外状態を返す."""
        excluded_set = set(excluded)
        return ListCandidateOptionsOutputDto(
            options=[
                CandidateOptionItem(name=name, excluded=name in excluded_set)
                for name in self.catalogue
            ],
            can_proceed=self.selection_service.can_proceed(self.catalogue, excluded),
        )

    def toggle(self, input_dto: ToggleCandidateInputDto) -> ToggleCandidateOutputDto:
        """候補の除外状態を切り替える."""
        try:
            excluded = self.selection_service.toggle(
                self.catalogue, input_dto.excluded, input_dto.name
            )
        except CandidateSelectionException as e:
            logger.warning(f"Failed to toggle candidate: {e}")
            return ToggleCandidateOutputDto(
                success=False,
                excluded=list(input_dto.excluded),
                error_message=e.message,
            )
        # 一覧の順序に揃える
        return ToggleCandidateOutputDto(
            success=True,
            excluded=[name for name in self.catalogue if name in excluded],
        )

    def confirm(self, excluded: Sequence[str]) -> ConfirmSelectionOutputDto:
        """除外されていない候補を投票対象として確定する."""
        try:
            candidates = self.selection_service.finalize(self.catalogue, excluded)
        except CandidateSelectionException as e:
            return ConfirmSelectionOutputDto(success=False, error_message=e.message)
        return ConfirmSelectionOutputDto(success=True, candidates=candidates)
