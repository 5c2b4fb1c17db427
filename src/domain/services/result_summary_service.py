"""投票結果集計ドメインサービス."""

import math

from collections.abc import Sequence

from src.domain.value_objects.vote_result import VoteResultItem, VoteShare


def round_half_up(value: float) -> int:
    """0.5を切り上げる四捨五入（非負の値のみを想定）."""
    return math.floor(value + 0.5)


class ResultSummaryService:
    """候補ごとの消費ポイントの割合を計算する."""

    def total_points(self, results: Sequence[VoteResultItem]) -> int:
        return sum(r.points for r in results)

    def summarize(self, results: Sequence[VoteResultItem]) -> list[VoteShare]:
        """消費ポイント全体に対する各候補の割合（%、整数）を付与する.

        ポイントが1つも使われていない場合、割合はすべて0になる。
        """
        total = self.total_points(results)
        return [
            VoteShare(
                candidate=r.candidate,
                votes=r.votes,
                points=r.points,
                share_percent=(
                    round_half_up(r.points / total * 100) if total > 0 else 0
                ),
            )
            for r in results
        ]
