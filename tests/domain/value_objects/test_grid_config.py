"""GridConfigのテスト."""

import pytest

from src.domain.exceptions import InvalidGridConfigException, ValidationException
from src.domain.value_objects.grid_config import GridCell, GridConfig


class TestDefaults:
    def test_default_is_10x10_with_top_right_reserved(self) -> None:
        config = GridConfig()
        assert (config.width, config.height) == (10, 10)
        assert config.reserved == frozenset({GridCell(9, 0)})
        assert config.budget == 99

    def test_with_top_right_reserved(self) -> None:
        config = GridConfig.with_top_right_reserved(6, 4)
        assert config.reserved == frozenset({GridCell(5, 0)})
        assert config.budget == 23

    def test_budget_follows_reserved_cells(self) -> None:
        """予算は常にマス数から予約セル数を引いた値."""
        reserved = frozenset({GridCell(0, 0), GridCell(3, 3)})
        config = GridConfig(width=4, height=4, reserved_cells=reserved)
        assert config.capacity == 16
        assert config.budget == 14

    def test_no_reserved_cells(self) -> None:
        config = GridConfig(width=3, height=3, reserved_cells=frozenset())
        assert config.budget == 9

    def test_reserved_cells_iterable_is_normalized(self) -> None:
        config = GridConfig(width=3, height=3, reserved_cells={GridCell(1, 1)})
        assert isinstance(config.reserved_cells, frozenset)
        assert config.is_reserved(1, 1) is True
        assert config.is_reserved(0, 0) is False


class TestValidation:
    @pytest.mark.parametrize(("width", "height"), [(0, 10), (10, 0), (-1, 5)])
    def test_non_positive_dimensions_raise(self, width: int, height: int) -> None:
        with pytest.raises(InvalidGridConfigException):
            GridConfig(width=width, height=height)

    def test_reserved_cell_outside_grid_raises(self) -> None:
        with pytest.raises(InvalidGridConfigException) as exc_info:
            GridConfig(width=3, height=3, reserved_cells=frozenset({GridCell(3, 0)}))
        assert exc_info.value.details == {"cells": [(3, 0)]}

    def test_fully_reserved_grid_raises(self) -> None:
        with pytest.raises(InvalidGridConfigException):
            GridConfig(width=1, height=1, reserved_cells=frozenset({GridCell(0, 0)}))

    def test_is_a_validation_error(self) -> None:
        with pytest.raises(ValidationException):
            GridConfig(width=0)
