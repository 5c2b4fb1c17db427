"""プロフィール入力ステップ."""

import streamlit as st

from src.interfaces.web.streamlit.presenters.vote_presenter import VotePresenter


_PLACEHOLDER = "選択してください"


def render_profile_step(presenter: VotePresenter) -> None:
    """年代・性別・居住地域の入力フォームを描画する."""
    budget = presenter.grid_config.budget
    st.subheader(f"あなたは{budget}ポイント持っています")
    st.markdown(
        "関心のある政策に票を投じてください。"
        "1つの政策にn票投じると n×n ポイントを消費します。"
    )

    options = presenter.get_profile_options()
    age_labels = {label: value for label, value in options.age_groups}

    with st.form("qv_profile_form"):
        age_label = st.selectbox("年代", [_PLACEHOLDER, *age_labels.keys()])
        gender = st.selectbox("性別", [_PLACEHOLDER, *options.genders])
        region = st.selectbox("居住地域", [_PLACEHOLDER, *options.regions])
        submitted = st.form_submit_button("投票を始める", type="primary")

    if not submitted:
        return

    success, error = presenter.register_profile(
        age_group=age_labels.get(age_label or "", ""),
        gender="" if gender == _PLACEHOLDER else gender or "",
        region="" if region == _PLACEHOLDER else region or "",
    )
    if success:
        st.rerun()
    else:
        st.error(error)
