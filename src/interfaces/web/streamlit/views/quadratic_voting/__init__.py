"""クアドラティック投票ページ."""
