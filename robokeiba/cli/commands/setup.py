"""init-db / seed コマンド"""

import click

from robokeiba.cli.utils.options import db_option
from robokeiba.data.dummy_data import seed as seed_data
from robokeiba.db import get_engine, get_session, init_db as create_tables


@click.command("init-db")
@db_option
def init_db(db: str):
    """データベースのテーブルを作成する"""
    engine = get_engine(db)
    create_tables(engine)
    click.echo(f"データベースを初期化しました: {db}")


@click.command()
@db_option
def seed(db: str):
    """サンプルのレース・出走馬・傾向パラメータを登録する"""
    engine = get_engine(db)
    create_tables(engine)

    with get_session(engine) as session:
        created = seed_data(session)

    click.echo(f"サンプルデータを登録しました: {created}件")
