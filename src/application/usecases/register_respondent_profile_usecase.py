"""回答者プロフィール登録のユースケース."""

from src.application.dtos.respondent_profile_dto import (
    ProfileOptionsOutputDto,
    RegisterProfileInputDto,
    RegisterProfileOutputDto,
)
from src.domain.exceptions import ValidationException
from src.domain.value_objects.respondent_profile import (
    AGE_GROUP_OPTIONS,
    GENDER_OPTIONS,
    REGION_OPTIONS,
    RespondentProfile,
)


class RegisterRespondentProfileUseCase:
    """年代・性別・居住地域を検証してプロフィールを作る."""

    def get_options(self) -> ProfileOptionsOutputDto:
        """入力フォームの選択肢を取得する."""
        return ProfileOptionsOutputDto(
            age_groups=list(AGE_GROUP_OPTIONS),
            genders=list(GENDER_OPTIONS),
            regions=list(REGION_OPTIONS),
        )

    def execute(self, input_dto: RegisterProfileInputDto) -> RegisterProfileOutputDto:
        try:
            profile = RespondentProfile(
                age_group=input_dto.age_group,
                gender=input_dto.gender,
                region=input_dto.region,
            )
        except ValidationException as e:
            return RegisterProfileOutputDto(success=False, error_message=e.message)
        return RegisterProfileOutputDto(success=True, profile=profile)
