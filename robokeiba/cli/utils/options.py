"""共通オプション"""

import click

db_option = click.option(
    "--db",
    required=True,
    type=click.Path(),
    envvar="ROBOKEIBA_DB",
    show_envvar=True,
    help="DBファイルパス",
)
