"""投票ステップ."""

import streamlit as st

from src.interfaces.web.streamlit.components.vote_grid import color_badge, vote_grid
from src.interfaces.web.streamlit.presenters.vote_presenter import VotePresenter


def render_vote_step(presenter: VotePresenter) -> None:
    """残りポイント・グリッド・候補ごとの＋/－ボタンを描画する."""
    state = presenter.get_state()
    if state is None or not state.candidates:
        st.info("候補が指定されていません")
        return

    st.subheader("クアドラティックボーティング")
    st.markdown(f"残りポイント: **{state.remaining_budget}**")
    vote_grid(presenter.get_cell_matrix())

    if not state.success:
        st.error(state.error_message)
    elif not state.accepted:
        st.warning(state.rejection_message)

    for candidate in state.candidates:
        col_name, col_minus, col_votes, col_plus = st.columns([4, 1, 1, 1])
        with col_name:
            st.markdown(
                color_badge(candidate.index, candidate.name), unsafe_allow_html=True
            )
        with col_minus:
            if st.button("－", key=f"qv_minus_{candidate.index}"):
                presenter.change_vote(candidate.index, -1)
                st.rerun()
        with col_votes:
            st.markdown(f"{candidate.votes}票")
        with col_plus:
            if st.button("＋", key=f"qv_plus_{candidate.index}"):
                presenter.change_vote(candidate.index, 1)
                st.rerun()

    col_back, col_submit = st.columns(2)
    with col_back:
        if st.button("政策を変更", key="qv_back_to_selection"):
            presenter.back_to_selection()
            st.rerun()
    with col_submit:
        if st.button("投票を送信", key="qv_submit", type="primary"):
            result = presenter.submit_votes()
            if result.success:
                st.rerun()
            else:
                st.error(result.error_message)
