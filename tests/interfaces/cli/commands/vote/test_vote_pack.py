"""vote pack コマンドのテスト."""

from unittest.mock import patch

import pytest

from click.testing import CliRunner

from src.infrastructure.config import Settings
from src.interfaces.cli.commands.vote import vote
from src.interfaces.cli.commands.vote.options import render_grid


_SETTINGS_PATH = "src.interfaces.cli.commands.vote.options.get_settings"


@pytest.fixture(autouse=True)
def default_settings():
    with patch(_SETTINGS_PATH) as mock_get_settings:
        mock_get_settings.return_value = Settings(_env_file=None)
        yield mock_get_settings


class TestPackCommand:
    def test_pack_success(self) -> None:
        runner = CliRunner()
        result = runner.invoke(vote, ["pack", "1", "9"])

        assert result.exit_code == 0
        assert "消費ポイント: 82 / 99" in result.output
        assert "配置成功" in result.output
        assert "A: x=0 y=0 size=1" in result.output
        assert "B: x=0 y=1 size=9" in result.output
        assert "A . . . . . . . ." in result.output

    def test_pack_fragmented_fails(self) -> None:
        """予算内でも配置できなければ終了コード1."""
        runner = CliRunner()
        result = runner.invoke(vote, ["pack", "1", "9", "4"])

        assert result.exit_code == 1
        assert "配置できないブロックがあります" in result.output

    def test_pack_over_budget_warns(self) -> None:
        runner = CliRunner()
        result = runner.invoke(vote, ["pack", "10"])

        assert "消費ポイント: 100 / 99" in result.output
        assert "ポイントが持ち点を超えています" in result.output
        assert result.exit_code == 1

    def test_pack_custom_grid(self) -> None:
        runner = CliRunner()
        result = runner.invoke(vote, ["pack", "2", "--width", "3", "--height", "2"])

        assert result.exit_code == 0
        assert "A: x=0 y=0 size=2" in result.output

    def test_pack_rejects_negative_weight(self) -> None:
        runner = CliRunner()
        result = runner.invoke(vote, ["pack", "--", "-1"])

        assert result.exit_code == 2

    def test_pack_requires_weights(self) -> None:
        runner = CliRunner()
        result = runner.invoke(vote, ["pack"])

        assert result.exit_code == 2


class TestRenderGrid:
    def test_render_grid_symbols(self) -> None:
        matrix = [[0, 0, "reserved"], [None, 1, None]]
        assert render_grid(matrix) == ["A A  ", ". B ."]
