"""robot コマンド - AIロボットの作成・一覧・削除"""

import click

from robokeiba.cli.utils.options import db_option
from robokeiba.cli.utils.table_printer import format_robot_summary
from robokeiba.config.weights import DEFAULT_ROOT_INDEX
from robokeiba.constants import LEARNING_THOUGHTS
from robokeiba.db import get_engine, get_session, init_db
from robokeiba.exceptions import WizardError
from robokeiba.repositories import SQLAlchemyRobotRepository
from robokeiba.services.wizard import RobotWizard


def _parse_race_params(ctx, param, values: tuple[str, ...]) -> list[tuple[str, list[int]]]:
    """"騎手:1,2,3" 形式のレース傾向パラメータをパースする"""
    parsed = []
    for value in values:
        category, _, subs = value.partition(":")
        try:
            sub_ids = [int(s) for s in subs.split(",") if s.strip()]
        except ValueError:
            raise click.BadParameter(f"サブカテゴリIDは整数で指定してください: {value}")
        parsed.append((category.strip(), sub_ids))
    return parsed


def run_wizard(
    name: str,
    root_index: int,
    tendency: tuple[int, ...],
    race_params: list[tuple[str, list[int]]],
    thought: str,
) -> RobotWizard:
    """オプションの値でウィザードを最終ステップまで進める

    Raises:
        WizardError: いずれかのステップの入力が不完全な場合
    """
    wizard = RobotWizard()

    wizard.set_root_index(root_index)
    wizard.next()

    for category_id in tendency:
        wizard.toggle_tendency_category(category_id)
    wizard.next()

    for category, sub_ids in race_params:
        wizard.toggle_race_category(category)
        selected = next((p for p in wizard.race_params if p.category == category), None)
        if selected is not None and sub_ids:
            # 指定外の初期選択を外し、指定順に優先順位を付け直す
            for sub in selected.sub_categories:
                if sub.id not in sub_ids:
                    wizard.toggle_sub_category(category, sub.id)
            current = {sub.id for sub in selected.sub_categories}
            for sub_id in dict.fromkeys(sub_ids):
                if sub_id not in current:
                    wizard.toggle_sub_category(category, sub_id)
            for priority, sub_id in enumerate(dict.fromkeys(sub_ids), start=1):
                wizard.set_sub_category_priority(category, sub_id, priority)
    wizard.next()

    wizard.set_learning_thought(thought)
    wizard.next()

    wizard.set_robot_name(name)
    return wizard


@click.group()
def robot():
    """AIロボットを管理する"""
    pass


@robot.command()
@db_option
@click.option("--name", required=True, help="ロボット名")
@click.option(
    "--root-index",
    type=int,
    default=DEFAULT_ROOT_INDEX,
    show_default=True,
    help="根幹指数（0-100）",
)
@click.option(
    "--tendency",
    "-t",
    type=int,
    multiple=True,
    help="傾向パラメータID（優先順に4つ指定）",
)
@click.option(
    "--race-param",
    "-r",
    multiple=True,
    callback=_parse_race_params,
    help="レース傾向パラメータ（例: 騎手 または 騎手:1,2,3）。3つ指定",
)
@click.option(
    "--thought",
    type=click.Choice(list(LEARNING_THOUGHTS)),
    required=True,
    help="学習的思考",
)
def create(db: str, name: str, root_index: int, tendency, race_param, thought: str):
    """AIロボットを作成して保存する"""
    try:
        wizard = run_wizard(name, root_index, tendency, race_param, thought)
        definition = wizard.build()
    except WizardError as e:
        click.echo(f"エラー: {e}")
        raise SystemExit(1)

    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        saved = SQLAlchemyRobotRepository(session).save(definition)

    click.echo(f"AIロボットを保存しました: [{saved.id}] {saved.name}")
    click.echo(f"  {format_robot_summary(saved)}")


@robot.command("list")
@db_option
def list_robots(db: str):
    """保存済みのAIロボットを表示する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        robots = SQLAlchemyRobotRepository(session).list()

    if not robots:
        click.echo("保存済みのAIロボットはありません")
        return

    for saved in robots:
        created = saved.created_at.strftime("%Y/%m/%d %H:%M") if saved.created_at else "-"
        click.echo(f"[{saved.id}] {saved.name}（{created}）")
        click.echo(f"    {format_robot_summary(saved)}")


@robot.command()
@db_option
@click.argument("robot_id", type=int)
def show(db: str, robot_id: int):
    """AIロボットの設定を表示する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        saved = SQLAlchemyRobotRepository(session).get(robot_id)

    if saved is None:
        click.echo(f"AIロボットが見つかりません: {robot_id}")
        raise SystemExit(1)

    click.echo(f"[{saved.id}] {saved.name}")
    click.echo(f"根幹指数: {saved.root_index}")
    click.echo("傾向パラメータ:")
    for param in saved.tendency_params:
        click.echo(f"  {param.priority}. {param.name}")
    click.echo("レース傾向パラメータ:")
    for race_param in saved.race_params:
        subs = ", ".join(f"{s.priority}.{s.name}" for s in race_param.sub_categories)
        click.echo(f"  {race_param.category}: {subs}")
    click.echo(f"学習的思考: {LEARNING_THOUGHTS.get(saved.learning_thought, saved.learning_thought)}")


@robot.command()
@db_option
@click.argument("robot_id", type=int)
@click.option("--yes", is_flag=True, default=False, help="確認をスキップ")
def delete(db: str, robot_id: int, yes: bool):
    """AIロボットを削除する"""
    engine = get_engine(db)
    init_db(engine)

    with get_session(engine) as session:
        repository = SQLAlchemyRobotRepository(session)
        saved = repository.get(robot_id)
        if saved is None:
            click.echo(f"AIロボットが見つかりません: {robot_id}")
            raise SystemExit(1)

        if not yes and not click.confirm(f"「{saved.name}」を削除しますか？この操作は取り消せません。"):
            click.echo("削除を中止しました")
            return

        repository.delete(robot_id)

    click.echo(f"「{saved.name}」を削除しました")
