"""ResultSummaryServiceのテスト."""

import pytest

from src.domain.services.result_summary_service import (
    ResultSummaryService,
    round_half_up,
)
from src.domain.value_objects.vote_result import VoteResultItem


@pytest.fixture
def service() -> ResultSummaryService:
    return ResultSummaryService()


def _results(*votes: int) -> list[VoteResultItem]:
    return [
        VoteResultItem(candidate=f"政策{i}", votes=v, points=v * v)
        for i, v in enumerate(votes)
    ]


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.0, 0), (2.5, 3), (12.49, 12), (62.5, 63), (99.5, 100)],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestSummarize:
    """summarizeメソッドのテスト."""

    def test_share_is_percent_of_total_points(
        self, service: ResultSummaryService
    ) -> None:
        summary = service.summarize(_results(1, 9, 0))

        assert [s.share_percent for s in summary] == [1, 99, 0]
        assert [s.candidate for s in summary] == ["政策0", "政策1", "政策2"]

    def test_halves_are_rounded_up(self, service: ResultSummaryService) -> None:
        """2.5% や 62.5% は切り上げる."""
        summary = service.summarize(_results(1, 2, 5, 3, 1))

        assert [s.share_percent for s in summary] == [3, 10, 63, 23, 3]

    def test_no_points_spent(self, service: ResultSummaryService) -> None:
        """ポイントを使っていなければ割合はすべて0."""
        summary = service.summarize(_results(0, 0))
        assert [s.share_percent for s in summary] == [0, 0]

    def test_total_points(self, service: ResultSummaryService) -> None:
        assert service.total_points(_results(1, 2, 3)) == 14

    def test_empty_results(self, service: ResultSummaryService) -> None:
        assert service.summarize([]) == []
