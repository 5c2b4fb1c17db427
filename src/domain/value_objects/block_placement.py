"""ブロック配置の値オブジェクト."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BlockPlacement:
    """候補1件分の正方形ブロックの配置.

    (x, y) は左上のマス、size は一辺の長さ（= 票数）。
    """

    candidate_index: int
    x: int
    y: int
    size: int

    def cells(self) -> list[tuple[int, int]]:
        """ブロックが占有するマスを (x, y) のリストで返す."""
        return [
            (self.x + dx, self.y + dy)
            for dy in range(self.size)
            for dx in range(self.size)
        ]


@dataclass(frozen=True)
class PackingResult:
    """1回の配置試行の結果.

    失敗時は部分的な配置を持たない（placements は空）。
    """

    success: bool
    placements: tuple[BlockPlacement, ...] = ()

    @classmethod
    def failure(cls) -> "PackingResult":
        return cls(success=False)

    @property
    def occupied_cell_count(self) -> int:
        return sum(p.size * p.size for p in self.placements)
