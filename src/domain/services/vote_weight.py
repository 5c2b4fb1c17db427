"""票数の検証."""

from src.domain.exceptions import InvalidVoteRequestException


def validate_weight(weight: object, candidate_index: int | None = None) -> None:
    """票数が0以上の整数であることを検証する.

    bool は整数として扱わない。

    Raises:
        InvalidVoteRequestException: 票数が負または整数でない場合
    """
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidVoteRequestException(
            f"票数は整数である必要があります: {weight!r}",
            candidate_index=candidate_index,
            weight=weight,
        )
    if weight < 0:
        raise InvalidVoteRequestException(
            f"票数は0以上である必要があります: {weight}",
            candidate_index=candidate_index,
            weight=weight,
        )
