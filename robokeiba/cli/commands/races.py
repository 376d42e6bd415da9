"""races / categories コマンド"""

import click

from robokeiba.cli.utils.options import db_option
from robokeiba.db import get_engine, get_session, init_db
from robokeiba.repositories import SQLAlchemyRaceRepository


@click.command()
@db_option
def races(db: str):
    """レース一覧を表示する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        repository = SQLAlchemyRaceRepository(session)
        race_list = repository.list_races()

        if not race_list:
            click.echo("レースが登録されていません（seedコマンドでサンプルを登録できます）")
            return

        for race in race_list:
            venue = f"{race.venue} {race.race_number}R " if race.venue else ""
            distance = f" {race.distance}m" if race.distance else ""
            click.echo(
                f"[{race.id}] {race.date} {venue}{race.name}{distance} "
                f"（{len(race.horses)}頭）"
            )


@click.command()
@db_option
def categories(db: str):
    """傾向パラメータの一覧を表示する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        catalog = SQLAlchemyRaceRepository(session).get_categories()

    if not catalog:
        click.echo("傾向パラメータが登録されていません（seedコマンドでサンプルを登録できます）")
        return

    click.echo(f"{'ID':^4} | {'名前':^10} | {'複勝率':^6} | {'複勝効率':^8}")
    click.echo("-" * 40)
    for category in catalog:
        click.echo(
            f"{category.id:^4} | {category.name:^10} | "
            f"{category.place_rate:^6.2f} | {category.efficiency:^8.2f}"
        )
