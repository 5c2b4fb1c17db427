"""結果ステップ."""

import streamlit as st

from src.interfaces.web.streamlit.presenters.vote_presenter import VotePresenter


def render_result_step(presenter: VotePresenter) -> None:
    """回答者の属性と候補ごとの票数・ポイント・割合を描画する."""
    st.subheader("投票結果")

    result = presenter.get_result()
    if result is None or not result.success:
        st.info("投票結果がありません")
        return

    if result.profile is not None:
        col_age, col_gender, col_region = st.columns(3)
        col_age.markdown(f"年代: {result.profile.age_group_label}")
        col_gender.markdown(f"性別: {result.profile.gender}")
        col_region.markdown(f"居住地: {result.profile.region}")

    df = presenter.summary_to_dataframe(result.summary)
    if df is None:
        st.info("投票結果がありません")
        return

    st.dataframe(df, use_container_width=True, hide_index=True)
    st.bar_chart(df, x="政策", y="割合(%)")
    st.caption(
        f"使用ポイント: {result.total_points} / 残りポイント: {result.remaining_budget}"
    )

    if st.button("最初からやり直す", key="qv_restart"):
        presenter.restart()
        st.rerun()
