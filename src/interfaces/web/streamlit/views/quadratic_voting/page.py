"""クアドラティック投票ページ.

プロフィール入力 → 候補選択 → 投票 → 結果 の順に画面を切り替える。
"""

import streamlit as st

from src.infrastructure.config import get_settings
from src.interfaces.web.streamlit.presenters.vote_presenter import (
    STEP_RESULT,
    STEP_SELECT,
    STEP_VOTE,
    VotePresenter,
)
from src.interfaces.web.streamlit.views.quadratic_voting.profile_step import (
    render_profile_step,
)
from src.interfaces.web.streamlit.views.quadratic_voting.result_step import (
    render_result_step,
)
from src.interfaces.web.streamlit.views.quadratic_voting.selection_step import (
    render_selection_step,
)
from src.interfaces.web.streamlit.views.quadratic_voting.vote_step import (
    render_vote_step,
)


_STEP_TITLES = {
    STEP_SELECT: "政策を選ぶ",
    STEP_VOTE: "政策に投票",
    STEP_RESULT: "結果",
}


def render_quadratic_voting_page(presenter: VotePresenter | None = None) -> None:
    """現在のステップに応じた画面を描画する."""
    if presenter is None:
        settings = get_settings()
        presenter = VotePresenter(
            catalogue=settings.candidates, grid_config=settings.to_grid_config()
        )

    step = presenter.get_step()
    st.header(_STEP_TITLES.get(step, "プロフィール入力"))

    if step == STEP_SELECT:
        render_selection_step(presenter)
    elif step == STEP_VOTE:
        render_vote_step(presenter)
    elif step == STEP_RESULT:
        render_result_step(presenter)
    else:
        render_profile_step(presenter)


def main() -> None:
    """Main entry point for the quadratic voting page."""
    render_quadratic_voting_page()


if __name__ == "__main__":
    main()
