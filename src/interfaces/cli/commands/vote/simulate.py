"""票数変更リクエストを順に適用するシミュレーションコマンド."""

import re

import click

from src.application.dtos.vote_allocation_dto import (
    AdjustWeightInputDto,
    AllocationStateOutputDto,
    ProposeWeightInputDto,
    StartVotingSessionInputDto,
)
from src.application.usecases.allocate_votes_usecase import AllocateVotesUseCase
from src.infrastructure.config import get_settings
from src.interfaces.cli.base import with_error_handling
from src.interfaces.cli.commands.vote.options import (
    echo_grid,
    echo_legend,
    grid_options,
    resolve_grid_config,
)


_REQUEST_PATTERN = re.compile(r"^(?P<index>\d+)(?:=(?P<weight>\d+)|(?P<step>[+-]))$")


def parse_request(text: str) -> tuple[int, int | None, str | None]:
    """``I=W`` / ``I+`` / ``I-`` 形式のリクエストを分解する.

    Returns:
        (候補インデックス, 票数, 増減記号)。票数と増減記号はどちらか一方のみ。
    """
    match = _REQUEST_PATTERN.match(text.strip())
    if match is None:
        raise click.BadParameter(
            f"リクエストは I=W, I+, I- のいずれかの形式で指定してください: {text}",
            param_hint="REQUESTS",
        )
    weight = match.group("weight")
    return (
        int(match.group("index")),
        int(weight) if weight is not None else None,
        match.group("step"),
    )


@click.command()
@click.option(
    "--candidate",
    "-c",
    "candidates",
    multiple=True,
    help="候補名（指定順が候補インデックス）。省略時は設定の候補一覧",
)
@click.argument("requests", nargs=-1)
@grid_options
@with_error_handling
def simulate(
    candidates: tuple[str, ...],
    requests: tuple[str, ...],
    width: int | None,
    height: int | None,
):
    """票数変更リクエストを先頭から順に適用する.

    REQUESTS は ``0=3``（候補0を3票に）、``1+``（候補1を1票増）、
    ``2-``（候補2を1票減）の形式。
    """
    parsed = [parse_request(r) for r in requests]
    names = list(candidates) or get_settings().candidates

    use_case = AllocateVotesUseCase(grid_config=resolve_grid_config(width, height))
    started = use_case.start_session(StartVotingSessionInputDto(candidates=names))
    if not started.success:
        click.echo(click.style(f"エラー: {started.error_message}", fg="red"), err=True)
        raise SystemExit(1)

    for text, (index, weight, step) in zip(requests, parsed, strict=True):
        if weight is not None:
            state = use_case.propose_weight(
                ProposeWeightInputDto(candidate_index=index, new_weight=weight)
            )
        elif step == "+":
            state = use_case.increment(AdjustWeightInputDto(candidate_index=index))
        else:
            state = use_case.decrement(AdjustWeightInputDto(candidate_index=index))
        _echo_outcome(text, state)

    final = use_case.get_state()
    click.echo("\n=== 最終配置 ===")
    echo_grid(use_case.get_cell_matrix())
    echo_legend([c.name for c in final.candidates], final.weights)
    click.echo(f"\n残りポイント: {final.remaining_budget} / {final.budget}")


def _echo_outcome(text: str, state: AllocationStateOutputDto) -> None:
    if not state.success:
        click.echo(click.style(f"  {text}: 無効 ({state.error_message})", fg="red"))
    elif not state.accepted:
        click.echo(
            click.style(f"  {text}: 却下 ({state.rejection_message})", fg="yellow")
        )
    else:
        click.echo(f"  {text}: 適用 (残り{state.remaining_budget}ポイント)")
