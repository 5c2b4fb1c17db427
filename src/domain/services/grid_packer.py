"""グリッド配置ドメインサービス.

票数の正方形ブロックを固定サイズのグリッドに敷き詰める。
配置は候補インデックス順・行優先走査の先頭一致（first-fit）で決まり、
同じ票数ベクトルに対しては常に同じ結果になる。
バックトラックは行わないため、より賢い詰め方なら入る組み合わせでも
失敗することがある。
"""

from collections.abc import Sequence
from typing import Final

from src.common.logging import get_logger
from src.domain.services.vote_weight import validate_weight
from src.domain.value_objects.block_placement import BlockPlacement, PackingResult
from src.domain.value_objects.grid_config import GridConfig


logger = get_logger(__name__)

RESERVED: Final = "reserved"

# None: 空き / RESERVED: 予約セル / int: 占有している候補インデックス
CellValue = int | str | None
CellMatrix = list[list[CellValue]]


class GridPacker:
    """票数ベクトル全体をゼロから配置し直すサービス.

    内部状態を持たないため、pack は入力だけで結果が決まる。
    """

    def __init__(self, config: GridConfig | None = None) -> None:
        self.config = config or GridConfig()

    def pack(self, weights: Sequence[int]) -> PackingResult:
        """すべての候補のブロックを配置する.

        Args:
            weights: 候補インデックス順の票数（0の候補はスキップ）

        Returns:
            全候補を配置できた場合は success=True と配置一覧。
            1件でも配置できなければ success=False（部分的な配置は返さない）。

        Raises:
            InvalidVoteRequestException: 票数が負または整数でない場合
        """
        for index, weight in enumerate(weights):
            validate_weight(weight, index)

        grid = self.new_grid()
        placements: list[BlockPlacement] = []
        for index, size in enumerate(weights):
            if size == 0:
                continue
            position = self._place_block(grid, size, index)
            if position is None:
                logger.debug(
                    "ブロックを配置できません", candidate_index=index, size=size
                )
                return PackingResult.failure()
            x, y = position
            placements.append(BlockPlacement(index, x, y, size))

        return PackingResult(success=True, placements=tuple(placements))

    def new_grid(self) -> CellMatrix:
        """予約セルだけが埋まった空のグリッドを作る."""
        grid: CellMatrix = [
            [None] * self.config.width for _ in range(self.config.height)
        ]
        for cell in self.config.reserved:
            grid[cell.y][cell.x] = RESERVED
        return grid

    def can_place(self, grid: CellMatrix, x: int, y: int, size: int) -> bool:
        """(x, y) を左上として size×size のブロックを置けるか判定する."""
        if x + size > self.config.width or y + size > self.config.height:
            return False
        for dy in range(size):
            for dx in range(size):
                if self.config.is_reserved(x + dx, y + dy):
                    return False
                if grid[y + dy][x + dx] is not None:
                    return False
        return True

    def _place_block(
        self, grid: CellMatrix, size: int, index: int
    ) -> tuple[int, int] | None:
        for y in range(self.config.height):
            for x in range(self.config.width):
                if self.can_place(grid, x, y, size):
                    for dy in range(size):
                        for dx in range(size):
                            grid[y + dy][x + dx] = index
                    return x, y
        return None

    def build_cell_matrix(self, placements: Sequence[BlockPlacement]) -> CellMatrix:
        """配置一覧から描画用のセル行列（grid[y][x]）を組み立てる."""
        grid = self.new_grid()
        for placement in placements:
            for x, y in placement.cells():
                if grid[y][x] is not RESERVED:
                    grid[y][x] = placement.candidate_index
        return grid

