"""vote_gridコンポーネントのテスト."""

from unittest.mock import MagicMock, patch

from src.interfaces.web.streamlit.components.vote_grid import (
    CANDIDATE_COLORS,
    EMPTY_COLOR,
    RESERVED_COLOR,
    build_grid_html,
    color_badge,
    get_candidate_color,
    vote_grid,
)


class TestGetCandidateColor:
    def test_palette_cycles(self) -> None:
        assert get_candidate_color(0) == "#f44336"
        assert get_candidate_color(len(CANDIDATE_COLORS)) == CANDIDATE_COLORS[0]


class TestBuildGridHtml:
    def test_cells_are_colored(self) -> None:
        html = build_grid_html([[0, None, "reserved"], [1, 1, None]])

        assert html.count("<span") == 6
        assert html.count(f"background-color:{EMPTY_COLOR};") == 2
        assert html.count(f"background-color:{RESERVED_COLOR};") == 1
        assert html.count(f"background-color:{CANDIDATE_COLORS[1]};") == 2
        assert html.count('<div style="line-height:0;">') == 2


class TestColorBadge:
    def test_label_is_escaped(self) -> None:
        badge = color_badge(2, "<b>ゴミ対策</b>")
        assert CANDIDATE_COLORS[2] in badge
        assert "&lt;b&gt;ゴミ対策&lt;/b&gt;" in badge


class TestVoteGrid:
    @patch("src.interfaces.web.streamlit.components.vote_grid.st")
    def test_vote_grid_renders_html(self, mock_st: MagicMock) -> None:
        vote_grid([[None]])
        mock_st.markdown.assert_called_once()
        assert mock_st.markdown.call_args.kwargs["unsafe_allow_html"] is True

    @patch("src.interfaces.web.streamlit.components.vote_grid.st")
    def test_empty_matrix_renders_nothing(self, mock_st: MagicMock) -> None:
        vote_grid([])
        mock_st.markdown.assert_not_called()
