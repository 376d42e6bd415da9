"""データベース接続モジュール

ロボット定義・レース・出走馬・想定オッズをSQLiteに保存する。
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from robokeiba.models.base import Base

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLiteは接続ごとに外部キー制約を有効化する必要がある
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_path: str | Path) -> Engine:
    """SQLiteデータベースエンジンを作成する

    ファイルDBの場合は親ディレクトリを作成する。
    全接続で外部キー制約を有効にする。

    Args:
        db_path: データベースファイルのパス。":memory:" でインメモリDB

    Returns:
        SQLAlchemyのEngineオブジェクト
    """
    db_path = str(db_path)
    if db_path != MEMORY_DB:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(f"sqlite:///{db_path}")
    event.listen(engine, "connect", _enable_foreign_keys)
    logger.debug("Created engine for %s", db_path)
    return engine


@contextmanager
def get_session(engine: Engine) -> Generator[Session, None, None]:
    """コミット・ロールバックを自動で行うセッション

    コミット後も読み込んだ属性を参照できるよう expire_on_commit=False とする。
    """
    session = sessionmaker(bind=engine, expire_on_commit=False)()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> None:
    """全テーブルを作成する（作成済みのテーブルはそのまま）"""
    # 全モデルをメタデータに登録する
    import robokeiba.models  # noqa: F401

    Base.metadata.create_all(engine)
