"""Click CLIメインモジュール"""

import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="デバッグログを表示")
def main(verbose: bool):
    """AIロボット競走馬指数計算CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# コマンドの登録
from robokeiba.cli.commands.odds import odds
from robokeiba.cli.commands.predict import predict
from robokeiba.cli.commands.races import categories, races
from robokeiba.cli.commands.robot import robot
from robokeiba.cli.commands.setup import init_db, seed

main.add_command(init_db)
main.add_command(seed)
main.add_command(races)
main.add_command(categories)
main.add_command(robot)
main.add_command(odds)
main.add_command(predict)


__all__ = ["main"]
