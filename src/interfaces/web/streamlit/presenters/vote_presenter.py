"""クアドラティック投票画面のプレゼンター.

画面遷移（プロフィール入力 → 候補選択 → 投票 → 結果）の状態と
投票セッションを st.session_state に保持する。
"""

from typing import Any

import pandas as pd
import streamlit as st

from src.application.dtos.candidate_selection_dto import (
    ListCandidateOptionsOutputDto,
    ToggleCandidateInputDto,
)
from src.application.dtos.respondent_profile_dto import (
    ProfileOptionsOutputDto,
    RegisterProfileInputDto,
)
from src.application.dtos.vote_allocation_dto import (
    AdjustWeightInputDto,
    AllocationStateOutputDto,
    FinalizeVotesOutputDto,
    StartVotingSessionInputDto,
)
from src.application.usecases.allocate_votes_usecase import (
    NO_SESSION_MESSAGE,
    AllocateVotesUseCase,
)
from src.application.usecases.register_respondent_profile_usecase import (
    RegisterRespondentProfileUseCase,
)
from src.application.usecases.select_candidates_usecase import (
    SelectCandidatesUseCase,
)
from src.common.logging import get_logger
from src.domain.services.grid_packer import CellMatrix
from src.domain.value_objects.grid_config import GridConfig
from src.domain.value_objects.respondent_profile import RespondentProfile
from src.domain.value_objects.vote_result import VoteShare


logger = get_logger(__name__)

STEP_PROFILE = "profile"
STEP_SELECT = "select"
STEP_VOTE = "vote"
STEP_RESULT = "result"

_KEY_STEP = "qv_step"
_KEY_PROFILE = "qv_profile"
_KEY_EXCLUDED = "qv_excluded"
_KEY_USE_CASE = "qv_allocate_use_case"
_KEY_LAST_STATE = "qv_last_state"
_KEY_RESULT = "qv_result"


class VotePresenter:
    """投票フロー全体のプレゼンター."""

    def __init__(self, catalogue: list[str], grid_config: GridConfig):
        """プレゼンターを初期化する.

        Args:
            catalogue: 候補一覧（除外前）
            grid_config: 投票で使うグリッド設定
        """
        self.grid_config = grid_config
        self.profile_use_case = RegisterRespondentProfileUseCase()
        self.selection_use_case = SelectCandidatesUseCase(catalogue)

    # ------------------------------------------------------------------
    # 画面遷移
    # ------------------------------------------------------------------

    def get_step(self) -> str:
        return st.session_state.get(_KEY_STEP, STEP_PROFILE)

    def set_step(self, step: str) -> None:
        st.session_state[_KEY_STEP] = step

    def restart(self) -> None:
        """すべての入力を破棄して最初の画面に戻る."""
        for key in (
            _KEY_PROFILE,
            _KEY_EXCLUDED,
            _KEY_USE_CASE,
            _KEY_LAST_STATE,
            _KEY_RESULT,
        ):
            if key in st.session_state:
                del st.session_state[key]
        self.set_step(STEP_PROFILE)

    # ------------------------------------------------------------------
    # プロフィール入力
    # ------------------------------------------------------------------

    def get_profile_options(self) -> ProfileOptionsOutputDto:
        return self.profile_use_case.get_options()

    def get_profile(self) -> RespondentProfile | None:
        return st.session_state.get(_KEY_PROFILE)

    def register_profile(
        self, age_group: str, gender: str, region: str
    ) -> tuple[bool, str | None]:
        """プロフィールを検証して保存し、候補選択へ進む."""
        result = self.profile_use_case.execute(
            RegisterProfileInputDto(age_group=age_group, gender=gender, region=region)
        )
        if not result.success:
            return False, result.error_message
        st.session_state[_KEY_PROFILE] = result.profile
        self.set_step(STEP_SELECT)
        return True, None

    # ------------------------------------------------------------------
    # 候補選択
    # ------------------------------------------------------------------

    def get_excluded(self) -> list[str]:
        return list(st.session_state.get(_KEY_EXCLUDED, []))

    def list_candidate_options(self) -> ListCandidateOptionsOutputDto:
        return self.selection_use_case.list_options(self.get_excluded())

    def toggle_candidate(self, name: str) -> tuple[bool, str | None]:
        result = self.selection_use_case.toggle(
            ToggleCandidateInputDto(excluded=self.get_excluded(), name=name)
        )
        if result.success:
            st.session_state[_KEY_EXCLUDED] = result.excluded
        return result.success, result.error_message

    def confirm_selection(self) -> tuple[bool, str | None]:
        """除外されていない候補で投票セッションを開始する."""
        selection = self.selection_use_case.confirm(self.get_excluded())
        if not selection.success:
            return False, selection.error_message

        use_case = AllocateVotesUseCase(grid_config=self.grid_config)
        started = use_case.start_session(
            StartVotingSessionInputDto(
                candidates=selection.candidates, profile=self.get_profile()
            )
        )
        if not started.success:
            return False, started.error_message

        st.session_state[_KEY_USE_CASE] = use_case
        st.session_state[_KEY_LAST_STATE] = started.state
        self.set_step(STEP_VOTE)
        return True, None

    def back_to_selection(self) -> None:
        """投票を破棄して候補選択に戻る."""
        for key in (_KEY_USE_CASE, _KEY_LAST_STATE, _KEY_RESULT):
            if key in st.session_state:
                del st.session_state[key]
        self.set_step(STEP_SELECT)

    # ------------------------------------------------------------------
    # 投票
    # ------------------------------------------------------------------

    def _get_use_case(self) -> AllocateVotesUseCase | None:
        return st.session_state.get(_KEY_USE_CASE)

    def get_state(self) -> AllocationStateOutputDto | None:
        """直近のリクエスト結果（却下理由を含む）を返す."""
        return st.session_state.get(_KEY_LAST_STATE)

    def change_vote(self, candidate_index: int, step: int) -> AllocationStateOutputDto:
        """＋/－ボタンに応じて票数を1つ増減する."""
        use_case = self._get_use_case()
        if use_case is None:
            return AllocationStateOutputDto(
                success=False, error_message=NO_SESSION_MESSAGE
            )
        input_dto = AdjustWeightInputDto(candidate_index=candidate_index)
        if step > 0:
            state = use_case.increment(input_dto)
        else:
            state = use_case.decrement(input_dto)
        st.session_state[_KEY_LAST_STATE] = state
        return state

    def get_cell_matrix(self) -> CellMatrix:
        use_case = self._get_use_case()
        if use_case is None:
            return []
        return use_case.get_cell_matrix()

    def submit_votes(self) -> FinalizeVotesOutputDto:
        """投票を確定して結果画面へ進む."""
        use_case = self._get_use_case()
        if use_case is None:
            return FinalizeVotesOutputDto(
                success=False, error_message=NO_SESSION_MESSAGE
            )
        result = use_case.finalize()
        if result.success:
            st.session_state[_KEY_RESULT] = result
            self.set_step(STEP_RESULT)
        return result

    def get_result(self) -> FinalizeVotesOutputDto | None:
        """submit_votes で確定した結果を返す."""
        return st.session_state.get(_KEY_RESULT)

    # ------------------------------------------------------------------
    # 表示用変換
    # ------------------------------------------------------------------

    def summary_to_dataframe(self, summary: list[VoteShare]) -> pd.DataFrame | None:
        """集計結果をDataFrameに変換する."""
        if not summary:
            return None

        df_data: list[dict[str, Any]] = []
        for row in summary:
            df_data.append(
                {
                    "政策": row.candidate,
                    "票数": row.votes,
                    "ポイント": row.points,
                    "割合(%)": row.share_percent,
                }
            )
        return pd.DataFrame(df_data)
