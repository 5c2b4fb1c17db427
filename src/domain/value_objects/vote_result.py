"""投票結果の値オブジェクト."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VoteResultItem:
    """候補ごとの確定済み投票結果. points は votes の2乗."""

    candidate: str
    votes: int
    points: int


@dataclass(frozen=True)
class VoteShare:
    """結果画面向けの集計行."""

    candidate: str
    votes: int
    points: int
    share_percent: int
