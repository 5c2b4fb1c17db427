"""アプリケーション設定.

環境変数（プレフィックス ``QV_``）または ``.env`` から読み込む。
予算はグリッド容量から導出するため設定項目には含めない。
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.value_objects.grid_config import GridCell, GridConfig


DEFAULT_CANDIDATES: list[str] = [
    "水質保全",
    "生態系保全",
    "ゴミ対策",
    "漁業資源保護",
    "外来種対策",
    "水草対策",
    "温暖化対策",
    "湖魚料理などの継承",
    "レジャー対策",
    "環境学習",
]


def find_env_file(start: Path | None = None) -> Path | None:
    """カレントディレクトリから親方向に .env を探す."""
    current = (start or Path.cwd()).resolve()
    for directory in [current, *current.parents]:
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """クアドラティック投票アプリの設定."""

    model_config = SettingsConfigDict(
        env_prefix="QV_",
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    grid_width: int = Field(default=10, ge=1)
    grid_height: int = Field(default=10, ge=1)
    # [[x, y], ...]。未指定なら右上1マスを予約セルとする
    reserved_cells: list[tuple[int, int]] | None = None
    candidates: list[str] = Field(default_factory=lambda: list(DEFAULT_CANDIDATES))
    log_level: str = "INFO"
    log_format: str = "console"

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        if value not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return value

    def to_grid_config(
        self, width: int | None = None, height: int | None = None
    ) -> GridConfig:
        """設定値からGridConfigを生成する.

        width / height を指定した場合はグリッドの大きさだけを上書きする。
        予約セルが設定されていれば大きさを上書きしてもそのまま使う。

        Raises:
            InvalidGridConfigException: 予約セルがグリッドの範囲外の場合
        """
        width = width or self.grid_width
        height = height or self.grid_height
        if self.reserved_cells is None:
            return GridConfig.with_top_right_reserved(width, height)
        return GridConfig(
            width=width,
            height=height,
            reserved_cells=frozenset(GridCell(x, y) for x, y in self.reserved_cells),
        )


@lru_cache
def get_settings() -> Settings:
    """キャッシュされた設定インスタンスを返す."""
    return Settings()


def reload_settings() -> Settings:
    """設定キャッシュを破棄して再読み込みする."""
    get_settings.cache_clear()
    return get_settings()
