"""候補選択ステップ."""

import streamlit as st

from src.interfaces.web.streamlit.presenters.vote_presenter import VotePresenter


def render_selection_step(presenter: VotePresenter) -> None:
    """関心のない候補を除外する一覧を描画する."""
    st.subheader("関心のない（投票しない）政策を選んでください")

    options = presenter.list_candidate_options()
    for option in options.options:
        col_name, col_button = st.columns([4, 1])
        with col_name:
            if option.excluded:
                st.markdown(f"~~{option.name}~~")
            else:
                st.markdown(option.name)
        with col_button:
            label = "戻す" if option.excluded else "除外"
            if st.button(label, key=f"qv_toggle_{option.name}"):
                success, error = presenter.toggle_candidate(option.name)
                if success:
                    st.rerun()
                else:
                    st.error(error)

    if st.button("次へ", type="primary", disabled=not options.can_proceed):
        success, error = presenter.confirm_selection()
        if success:
            st.rerun()
        else:
            st.error(error)
