"""投票対象の候補を絞り込むドメインサービス.

関心のない候補を除外し、残った候補だけを投票対象にする。
"""

from collections.abc import Iterable, Sequence

from src.domain.exceptions import CandidateSelectionException


NO_CANDIDATE_MESSAGE = "投票対象の候補が1つもありません"


class CandidateSelectionService:
    """候補の除外状態の切り替えと投票対象の決定."""

    def toggle(
        self, catalogue: Sequence[str], excluded: Iterable[str], name: str
    ) -> frozenset[str]:
        """name の除外状態を切り替えた新しい除外集合を返す."""
        if name not in catalogue:
            raise CandidateSelectionException(
                f"候補一覧に存在しません: {name}", {"name": name}
            )
        current = frozenset(excluded)
        if name in current:
            return current - {name}
        return current | {name}

    def supported_candidates(
        self, catalogue: Sequence[str], excluded: Iterable[str]
    ) -> list[str]:
        """除外されていない候補を一覧の順序のまま返す."""
        excluded_set = set(excluded)
        return [name for name in catalogue if name not in excluded_set]

    def can_proceed(self, catalogue: Sequence[str], excluded: Iterable[str]) -> bool:
        return bool(self.supported_candidates(catalogue, excluded))

    def finalize(self, catalogue: Sequence[str], excluded: Iterable[str]) -> list[str]:
        """投票対象を確定する.

        Raises:
            CandidateSelectionException: すべての候補が除外されている場合
        """
        supported = self.supported_candidates(catalogue, excluded)
        if not supported:
            raise CandidateSelectionException(NO_CANDIDATE_MESSAGE)
        return supported
