"""BudgetLedgerのテスト."""

import pytest

from src.domain.exceptions import InvalidVoteRequestException
from src.domain.services.budget_ledger import BudgetLedger


@pytest.fixture
def ledger() -> BudgetLedger:
    ledger = BudgetLedger(candidate_count=3, budget=99)
    ledger.commit([1, 9, 0])
    return ledger


class TestCosts:
    """消費ポイント計算のテスト."""

    def test_initial_weights_are_zero(self):
        ledger = BudgetLedger(candidate_count=4, budget=99)
        assert ledger.weights == (0, 0, 0, 0)
        assert ledger.total_cost == 0
        assert ledger.remaining_budget == 99

    def test_cost_is_square_of_weight(self, ledger: BudgetLedger):
        assert ledger.cost_of(0) == 1
        assert ledger.cost_of(1) == 81
        assert ledger.total_cost == 82
        assert ledger.remaining_budget == 17

    def test_hypothetical_cost_replaces_current_weight(self, ledger: BudgetLedger):
        """対象候補の現在のコストは差し引いて計算する."""
        assert ledger.hypothetical_cost(1, 3) == 1 + 9
        assert ledger.hypothetical_cost(2, 4) == 82 + 16

    def test_exceeds_budget(self, ledger: BudgetLedger):
        assert ledger.exceeds_budget(2, 4) is False
        assert ledger.exceeds_budget(2, 5) is True

    def test_exact_budget_is_allowed(self):
        """ちょうど予算と同じ消費ポイントは許可される."""
        ledger = BudgetLedger(candidate_count=2, budget=50)
        ledger.commit([1, 0])
        assert ledger.exceeds_budget(1, 7) is False
        assert ledger.exceeds_budget(1, 8) is True

    def test_hypothetical_weights_is_a_copy(self, ledger: BudgetLedger):
        weights = ledger.hypothetical_weights(2, 4)
        assert weights == [1, 9, 4]
        weights[0] = 5
        assert ledger.weights == (1, 9, 0)


class TestValidateRequest:
    """validate_requestメソッドのテスト."""

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range_index(self, ledger: BudgetLedger, index: int):
        with pytest.raises(InvalidVoteRequestException) as exc_info:
            ledger.validate_request(index, 1)
        assert exc_info.value.candidate_index == index

    @pytest.mark.parametrize("weight", [-1, -10])
    def test_negative_weight(self, ledger: BudgetLedger, weight: int):
        with pytest.raises(InvalidVoteRequestException):
            ledger.validate_request(0, weight)

    @pytest.mark.parametrize("weight", [1.0, "3", None, False])
    def test_non_integer_weight(self, ledger: BudgetLedger, weight):
        with pytest.raises(InvalidVoteRequestException):
            ledger.validate_request(0, weight)

    def test_valid_request(self, ledger: BudgetLedger):
        ledger.validate_request(2, 0)
        ledger.validate_request(2, 100)


class TestCommit:
    """commitメソッドのテスト."""

    def test_commit_replaces_weights(self, ledger: BudgetLedger):
        ledger.commit([2, 3, 4])
        assert ledger.weights == (2, 3, 4)
        assert ledger.total_cost == 29

    def test_commit_rejects_over_budget(self, ledger: BudgetLedger):
        with pytest.raises(ValueError):
            ledger.commit([10, 0, 0])
        assert ledger.weights == (1, 9, 0)

    def test_commit_rejects_wrong_length(self, ledger: BudgetLedger):
        with pytest.raises(ValueError):
            ledger.commit([1, 2])
