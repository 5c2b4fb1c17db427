"""RespondentProfileのテスト."""

import pytest

from src.domain.exceptions import ValidationException
from src.domain.value_objects.respondent_profile import (
    PROFILE_REQUIRED_MESSAGE,
    RespondentProfile,
)


class TestRespondentProfile:
    def test_valid_profile(self) -> None:
        profile = RespondentProfile(age_group="30s", gender="女性", region="滋賀県")
        assert profile.age_group_label == "30代"

    def test_eighties_label(self) -> None:
        profile = RespondentProfile(age_group="80s+", gender="男性", region="滋賀県外")
        assert profile.age_group_label == "80代以上"

    @pytest.mark.parametrize(
        ("age_group", "gender", "region"),
        [
            ("", "女性", "滋賀県"),
            ("30s", "", "滋賀県"),
            ("30s", "女性", ""),
            ("90s", "女性", "滋賀県"),
            ("30代", "女性", "滋賀県"),
        ],
    )
    def test_missing_or_unknown_values_raise(
        self, age_group: str, gender: str, region: str
    ) -> None:
        with pytest.raises(ValidationException, match=PROFILE_REQUIRED_MESSAGE):
            RespondentProfile(age_group=age_group, gender=gender, region=region)
