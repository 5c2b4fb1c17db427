"""validate_weightのテスト."""

import pytest

from src.domain.exceptions import InvalidVoteRequestException
from src.domain.services.budget_ledger import BudgetLedger
from src.domain.services.grid_packer import GridPacker
from src.domain.services.vote_weight import validate_weight


class TestValidateWeight:
    @pytest.mark.parametrize("weight", [0, 1, 10])
    def test_non_negative_int_is_valid(self, weight: int) -> None:
        validate_weight(weight)

    @pytest.mark.parametrize("weight", [-1, 1.0, "2", None, True, False])
    def test_invalid_weight_raises(self, weight: object) -> None:
        with pytest.raises(InvalidVoteRequestException) as exc_info:
            validate_weight(weight, candidate_index=2)

        assert exc_info.value.candidate_index == 2
        assert exc_info.value.weight == weight

    @pytest.mark.parametrize("weight", [-3, 2.5, True])
    def test_ledger_and_packer_report_same_error(self, weight: object) -> None:
        """台帳とパッカーが同じ検証を使うことを確認."""
        ledger = BudgetLedger(candidate_count=2, budget=99)

        with pytest.raises(InvalidVoteRequestException) as from_ledger:
            ledger.validate_request(1, weight)
        with pytest.raises(InvalidVoteRequestException) as from_packer:
            GridPacker().pack([0, weight])

        assert from_ledger.value.message == from_packer.value.message
        assert from_ledger.value.details == from_packer.value.details
