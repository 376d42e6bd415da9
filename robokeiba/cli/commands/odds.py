"""odds コマンド - 想定オッズの入力・表示"""

import click

from robokeiba.cli.utils.options import db_option
from robokeiba.cli.utils.table_printer import print_odds_table
from robokeiba.db import get_engine, get_session, init_db
from robokeiba.exceptions import InvalidOddsError, NotFoundError
from robokeiba.repositories import SQLAlchemyRaceRepository
from robokeiba.services.odds_service import OddsService


def _parse_odds(ctx, param, values: tuple[str, ...]) -> dict[int, float]:
    """"馬番=オッズ" 形式の入力をパースする"""
    parsed = {}
    for value in values:
        number, sep, odds = value.partition("=")
        if not sep:
            raise click.BadParameter(f"馬番=オッズ の形式で指定してください: {value}")
        try:
            parsed[int(number)] = float(odds)
        except ValueError:
            raise click.BadParameter(f"馬番は整数、オッズは数値で指定してください: {value}")
    return parsed


@click.group()
def odds():
    """想定オッズを管理する"""
    pass


@odds.command("set")
@db_option
@click.option("--race", "race_id", required=True, type=int, help="レースID")
@click.option(
    "--odds",
    "-o",
    "odds_values",
    multiple=True,
    callback=_parse_odds,
    help="馬番=オッズ（例: 1=3.2）",
)
@click.option("--dry-run", is_flag=True, default=False, help="保存せずに能力指数と統計を表示")
def set_odds(db: str, race_id: int, odds_values: dict[int, float], dry_run: bool):
    """想定オッズを入力し、能力指数を再計算する"""
    engine = get_engine(db)
    init_db(engine)

    try:
        with get_session(engine) as session:
            service = OddsService(SQLAlchemyRaceRepository(session))
            preview = service.preview(race_id, odds_values)

            click.echo(f"{preview.race_name}")
            print_odds_table(list(preview.horses), preview.summary)

            if dry_run:
                return

            service.save(race_id, odds_values)
    except (InvalidOddsError, NotFoundError) as e:
        click.echo(f"エラー: {e}")
        raise SystemExit(1)

    click.echo("")
    click.echo("オッズを保存しました")


@odds.command("show")
@db_option
@click.option("--race", "race_id", type=int, default=None, help="レースID（省略時は全レース）")
def show_odds(db: str, race_id: int | None):
    """保存済みの想定オッズを表示する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        saved = SQLAlchemyRaceRepository(session).get_saved_odds(race_id)

        if not saved:
            click.echo("保存済みのオッズはありません")
            return

        for snapshot in saved:
            click.echo(
                f"[{snapshot.id}] レースID {snapshot.race_id} "
                f"（{snapshot.created_at:%Y/%m/%d %H:%M}）"
            )
            for horse in snapshot.horses:
                click.echo(
                    f"  {horse['horse_number']:>2} {horse['horse_name']}: "
                    f"{horse['odds']:.1f}倍 能力指数 {horse['ability_index']:.2f}"
                )
