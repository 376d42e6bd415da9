"""predict コマンド - AIロボットで指数を計算する"""

import click

from robokeiba.cli.utils.options import db_option
from robokeiba.cli.utils.table_printer import print_results_table
from robokeiba.db import get_engine, get_session, init_db
from robokeiba.exceptions import NotFoundError
from robokeiba.repositories import SQLAlchemyRaceRepository, SQLAlchemyRobotRepository
from robokeiba.services.prediction_service import PredictionService


@click.command()
@db_option
@click.option("--robot", "robot_id", required=True, type=int, help="AIロボットID")
@click.option("--race", "race_id", required=True, type=int, help="レースID")
def predict(db: str, robot_id: int, race_id: int):
    """AIロボットの設定でレースの総合指数を計算する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        robot = SQLAlchemyRobotRepository(session).get(robot_id)
        if robot is None:
            click.echo(f"AIロボットが見つかりません: {robot_id}")
            raise SystemExit(1)

        race_repository = SQLAlchemyRaceRepository(session)
        try:
            race = race_repository.get_race(race_id)
            service = PredictionService(race_repository, race_repository.get_categories())
            results = service.predict(robot, race_id)
        except (NotFoundError, ValueError) as e:
            click.echo(f"エラー: {e}")
            raise SystemExit(1)

        click.echo("=" * 60)
        click.echo(f"{race.date} {race.name}")
        click.echo(f"AIロボット: {robot.name}（根幹指数 {robot.root_index}）")
        click.echo("=" * 60)

    print_results_table(results)
