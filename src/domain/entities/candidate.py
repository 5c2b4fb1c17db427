"""Candidate entity."""


class Candidate:
    """投票対象の候補（政策）を表すエンティティ.

    票数（weight）はブロックの一辺の長さでもあり、
    消費ポイント（cost）は票数の2乗になる。
    """

    def __init__(self, index: int, name: str, weight: int = 0) -> None:
        """候補エンティティを初期化する.

        Args:
            index: セッション内で固定の候補インデックス
            name: 候補名
            weight: 現在の票数
        """
        self.index = index
        self.name = name
        self.weight = weight

    @property
    def cost(self) -> int:
        """消費ポイント（票数の2乗）."""
        return self.weight * self.weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return (self.index, self.name, self.weight) == (
            other.index,
            other.name,
            other.weight,
        )

    def __repr__(self) -> str:
        return (
            f"Candidate(index={self.index}, name={self.name!r}, weight={self.weight})"
        )

    def __str__(self) -> str:
        """文字列表現を返す."""
        return f"{self.name} ({self.weight}票)"
