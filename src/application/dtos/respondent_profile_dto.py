"""回答者プロフィールに関するDTO."""

from dataclasses import dataclass

from src.domain.value_objects.respondent_profile import RespondentProfile


@dataclass
class RegisterProfileInputDto:
    """プロフィール登録の入力DTO. 未選択の項目は空文字列."""

    age_group: str
    gender: str
    region: str


@dataclass
class RegisterProfileOutputDto:
    """プロフィール登録の出力DTO."""

    success: bool
    profile: RespondentProfile | None = None
    error_message: str | None = None


@dataclass
class ProfileOptionsOutputDto:
    """プロフィール入力の選択肢."""

    age_groups: list[tuple[str, str]]
    genders: list[str]
    regions: list[str]
