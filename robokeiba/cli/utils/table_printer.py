"""テーブル表示ユーティリティ"""

import click

from robokeiba.constants import LEARNING_THOUGHTS
from robokeiba.models import CalculationResult, HorseOdds, OddsSummary, RobotDefinition


def _truncate(name: str, width: int = 12) -> str:
    return name[:width] if len(name) > width else name


def print_results_table(results: list[CalculationResult]) -> None:
    """計算結果テーブルを表示する

    Args:
        results: 総合指数の降順に並んだ計算結果
    """
    if not results:
        click.echo("計算結果がありません")
        return

    click.echo(
        f"{'順位':^4} | {'馬名':^12} | {'根幹':^6} | {'能力':^6} | {'傾向':^6} | {'総合':^6}"
    )
    click.echo("-" * 60)

    for rank, result in enumerate(results, 1):
        click.echo(
            f"{rank:^4} | {_truncate(result.horse_name):^12} | "
            f"{result.base_index:^6.2f} | {result.ability_index:^6.2f} | "
            f"{result.tendency_index:^6.2f} | {result.total_index:^6.2f}"
        )

    top = results[0]
    click.echo("")
    click.echo(f"最高総合指数: {top.horse_name} ({top.total_index:.2f})")


def print_odds_table(horses: list[HorseOdds], summary: OddsSummary) -> None:
    """オッズ入力テーブルを表示する"""
    click.echo(f"{'馬番':^4} | {'馬名':^12} | {'オッズ':^8} | {'能力指数':^8}")
    click.echo("-" * 44)

    for horse in horses:
        odds = f"{horse.odds:.1f}" if horse.odds > 0 else "-"
        ability = f"{horse.ability_index:.2f}" if horse.ability_index is not None else "-"
        click.echo(
            f"{horse.horse_number:^4} | {_truncate(horse.horse_name):^12} | {odds:^8} | {ability:^8}"
        )

    click.echo("")
    click.echo(f"入力済み: {summary.valid_count} / {summary.horse_count}頭")
    click.echo(f"平均オッズ: {summary.mean:.2f}")
    click.echo(f"オッズ分散: {summary.variance:.2f}")


def format_robot_summary(robot: RobotDefinition) -> str:
    """ロボットのパラメータを1行にまとめる"""
    summary = [f"根幹: {robot.root_index}"]

    if robot.tendency_params:
        top_tendency = ", ".join(p.name for p in robot.tendency_params[:2])
        summary.append(f"傾向: {top_tendency}")

    if robot.race_params:
        top_race = ", ".join(p.category for p in robot.race_params[:2])
        summary.append(f"レース: {top_race}")

    if robot.learning_thought:
        title = LEARNING_THOUGHTS.get(robot.learning_thought, robot.learning_thought)
        summary.append(f"思考: {title}")

    return " / ".join(summary)
