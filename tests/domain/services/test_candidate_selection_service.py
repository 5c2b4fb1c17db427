"""CandidateSelectionServiceのテスト."""

import pytest

from src.domain.exceptions import CandidateSelectionException
from src.domain.services.candidate_selection_service import (
    NO_CANDIDATE_MESSAGE,
    CandidateSelectionService,
)


CATALOGUE = ["水質保全", "生態系保全", "ゴミ対策"]


@pytest.fixture
def service() -> CandidateSelectionService:
    return CandidateSelectionService()


class TestToggle:
    def test_toggle_adds_and_removes(self, service: CandidateSelectionService):
        excluded = service.toggle(CATALOGUE, [], "ゴミ対策")
        assert excluded == frozenset({"ゴミ対策"})

        excluded = service.toggle(CATALOGUE, excluded, "ゴミ対策")
        assert excluded == frozenset()

    def test_toggle_unknown_candidate_raises(
        self, service: CandidateSelectionService
    ):
        with pytest.raises(CandidateSelectionException):
            service.toggle(CATALOGUE, [], "存在しない政策")


class TestSupportedCandidates:
    def test_keeps_catalogue_order(self, service: CandidateSelectionService):
        supported = service.supported_candidates(CATALOGUE, ["生態系保全"])
        assert supported == ["水質保全", "ゴミ対策"]

    def test_can_proceed(self, service: CandidateSelectionService):
        assert service.can_proceed(CATALOGUE, ["水質保全"]) is True
        assert service.can_proceed(CATALOGUE, CATALOGUE) is False


class TestFinalize:
    def test_finalize_returns_supported(self, service: CandidateSelectionService):
        assert service.finalize(CATALOGUE, []) == CATALOGUE

    def test_all_excluded_raises(self, service: CandidateSelectionService):
        with pytest.raises(CandidateSelectionException, match=NO_CANDIDATE_MESSAGE):
            service.finalize(CATALOGUE, CATALOGUE)
