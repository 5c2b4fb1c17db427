"""グリッド設定の値オブジェクト."""

from dataclasses import dataclass

from src.domain.exceptions import InvalidGridConfigException


@dataclass(frozen=True, order=True)
class GridCell:
    """グリッド上の1マス. xは列、yは行（いずれも0始まり）."""

    x: int
    y: int


@dataclass(frozen=True)
class GridConfig:
    """ブロックを敷き詰めるグリッドの設定.

    予算（使用可能ポイント）は常に ``width * height - 予約セル数`` から導出する。
    予約セルには配置できないため、使えるポイント数と配置可能なマス数が一致する。
    """

    width: int = 10
    height: int = 10
    # Noneなら右上（行0・最終列）の1マス
    reserved_cells: frozenset[GridCell] | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            msg = (
                "グリッドの幅と高さは1以上である必要があります: "
                f"{self.width}x{self.height}"
            )
            raise InvalidGridConfigException(msg)
        if self.reserved_cells is None:
            object.__setattr__(
                self, "reserved_cells", frozenset({GridCell(self.width - 1, 0)})
            )
        elif not isinstance(self.reserved_cells, frozenset):
            object.__setattr__(self, "reserved_cells", frozenset(self.reserved_cells))

        outside = sorted(c for c in self.reserved if not self.contains(c))
        if outside:
            raise InvalidGridConfigException(
                "予約セルがグリッドの範囲外です",
                {"cells": [(c.x, c.y) for c in outside]},
            )
        if len(self.reserved) >= self.capacity:
            raise InvalidGridConfigException("すべてのマスが予約セルになっています")

    @classmethod
    def with_top_right_reserved(cls, width: int, height: int) -> "GridConfig":
        """右上（行0・最終列）の1マスを予約セルとした設定を作る."""
        return cls(width=width, height=height)

    @property
    def reserved(self) -> frozenset[GridCell]:
        """予約セルの集合（__post_init__ 以降は常に frozenset）."""
        return self.reserved_cells or frozenset()

    @property
    def capacity(self) -> int:
        """グリッドの総マス数."""
        return self.width * self.height

    @property
    def budget(self) -> int:
        """使用可能ポイント（= 配置可能なマス数）."""
        return self.capacity - len(self.reserved)

    def contains(self, cell: GridCell) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def is_reserved(self, x: int, y: int) -> bool:
        return GridCell(x, y) in self.reserved
