"""回答者プロフィールの値オブジェクト."""

from dataclasses import dataclass

from src.domain.exceptions import ValidationException


# (表示ラベル, 値)
AGE_GROUP_OPTIONS: list[tuple[str, str]] = [
    ("10代", "10s"),
    ("20代", "20s"),
    ("30代", "30s"),
    ("40代", "40s"),
    ("50代", "50s"),
    ("60代", "60s"),
    ("70代", "70s"),
    ("80代以上", "80s+"),
]
GENDER_OPTIONS: list[str] = ["男性", "女性", "その他"]
REGION_OPTIONS: list[str] = ["滋賀県", "滋賀県外"]

PROFILE_REQUIRED_MESSAGE = "年代、性別、居住地域を入力してください"


@dataclass(frozen=True)
class RespondentProfile:
    """投票者の属性（年代・性別・居住地域）."""

    age_group: str
    gender: str
    region: str

    def __post_init__(self) -> None:
        valid_ages = {value for _, value in AGE_GROUP_OPTIONS}
        if (
            self.age_group not in valid_ages
            or self.gender not in GENDER_OPTIONS
            or self.region not in REGION_OPTIONS
        ):
            raise ValidationException(
                PROFILE_REQUIRED_MESSAGE,
                {
                    "age_group": self.age_group,
                    "gender": self.gender,
                    "region": self.region,
                },
            )

    @property
    def age_group_label(self) -> str:
        return dict((v, label) for label, v in AGE_GROUP_OPTIONS)[self.age_group]
