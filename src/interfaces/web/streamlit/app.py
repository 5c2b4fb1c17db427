"""Streamlit アプリケーションのエントリーポイント.

``streamlit run src/interfaces/web/streamlit/app.py`` で起動する。
"""

import streamlit as st

from src.common.logging import is_configured, setup_logging
from src.infrastructure.config import get_settings
from src.interfaces.web.streamlit.views.quadratic_voting.page import (
    render_quadratic_voting_page,
)


def main() -> None:
    settings = get_settings()
    if not is_configured():
        setup_logging(settings.log_level, json_format=settings.log_format == "json")

    st.set_page_config(page_title="クアドラティックボーティング", layout="centered")
    render_quadratic_voting_page()


if __name__ == "__main__":
    main()
