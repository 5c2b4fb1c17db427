"""ドメイン層の例外定義.

投票リクエストの不正（負の票数、範囲外の候補インデックスなど）は
ここで定義する例外で表現する。予算超過・配置不可は例外ではなく
AllocationOutcome の却下理由として扱う。
"""

from typing import Any


class DomainException(Exception):
    """ドメイン層の基底例外."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ValidationException(DomainException):
    """入力値の検証に失敗した場合の例外."""


class InvalidVoteRequestException(ValidationException):
    """票数変更リクエストが前提条件を満たさない場合の例外."""

    def __init__(
        self,
        message: str,
        candidate_index: int | None = None,
        weight: Any = None,
    ) -> None:
        super().__init__(
            message, {"candidate_index": candidate_index, "weight": weight}
        )
        self.candidate_index = candidate_index
        self.weight = weight


class InvalidGridConfigException(ValidationException):
    """グリッド設定が不正な場合の例外."""


class CandidateSelectionException(ValidationException):
    """候補の選択（除外）操作が不正な場合の例外."""
