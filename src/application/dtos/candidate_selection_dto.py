"""候補選択に関するDTO."""

from dataclasses import dataclass, field


@dataclass
class CandidateOptionItem:
    """候補一覧の1行."""

    name: str
    excluded: bool


@dataclass
class ListCandidateOptionsOutputDto:
    """候補一覧取得の出力DTO."""

    options: list[CandidateOptionItem]
    can_proceed: bool


@dataclass
class ToggleCandidateInputDto:
    """除外状態切り替えの入力DTO."""

    excluded: list[str]
    name: str


@dataclass
class ToggleCandidateOutputDto:
    """除外状態切り替えの出力DTO."""

    success: bool
    excluded: list[str] = field(default_factory=list)
    error_message: str | None = None


@dataclass
class ConfirmSelectionOutputDto:
    """投票対象確定の出力DTO."""

    success: bool
    candidates: list[str] = field(default_factory=list)
    error_message: str | None = None
