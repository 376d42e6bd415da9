"""RobotWizard - AIロボット作成ウィザード

5つのステップを順に進めてAIロボットの定義を組み立てる。

1. 根幹指数入力（0-100）
2. 傾向パラメータ選択（8つから4つ、優先順位1-4）
3. レース傾向パラメータ選択（5カテゴリから3つ、各最大4サブカテゴリ）
4. 学習的思考の選択
5. ロボット名入力・保存
"""

import logging

from robokeiba.config.weights import (
    DEFAULT_ROOT_INDEX,
    MAX_SUB_CATEGORY_COUNT,
    REQUIRED_CATEGORY_COUNT,
    REQUIRED_RACE_CATEGORY_COUNT,
    ROOT_INDEX_MAX,
    ROOT_INDEX_MIN,
)
from robokeiba.constants import LEARNING_THOUGHTS, RACE_CATEGORIES, TENDENCY_CATEGORIES
from robokeiba.exceptions import WizardError
from robokeiba.models import RaceParam, RobotDefinition, SubCategory, TendencyParam

logger = logging.getLogger(__name__)

STEP_TITLES = {
    1: "根幹指数入力",
    2: "傾向パラメータ選択",
    3: "レース傾向パラメータ選択",
    4: "学習的思考の選択",
    5: "ロボット保存",
}
FIRST_STEP = 1
LAST_STEP = len(STEP_TITLES)


def _renumber(params: list, priority_field: str = "priority") -> list:
    """優先順位でソートし、1からの連番に振り直す"""
    ordered = sorted(params, key=lambda p: p[priority_field])
    for index, param in enumerate(ordered, start=1):
        param[priority_field] = index
    return ordered


class RobotWizard:
    """AIロボット作成ウィザード"""

    def __init__(self):
        self.current_step = FIRST_STEP
        self.root_index = DEFAULT_ROOT_INDEX
        self.learning_thought = ""
        self.robot_name = ""
        # [{"id", "name", "priority"}]
        self._tendency_params: list[dict] = []
        # {category: [{"id", "name", "priority"}]}（選択順を保持）
        self._race_params: dict[str, list[dict]] = {}

    @property
    def step_title(self) -> str:
        return STEP_TITLES[self.current_step]

    @property
    def tendency_params(self) -> tuple[TendencyParam, ...]:
        return tuple(TendencyParam(**p) for p in self._tendency_params)

    @property
    def race_params(self) -> tuple[RaceParam, ...]:
        return tuple(
            RaceParam(
                category=category,
                sub_categories=tuple(SubCategory(**s) for s in subs),
            )
            for category, subs in self._race_params.items()
        )

    # Step 1
    def set_root_index(self, value: int) -> None:
        """根幹指数を設定する（範囲チェックはcan_proceedで行う）"""
        self.root_index = value

    # Step 2
    def toggle_tendency_category(self, category_id: int) -> None:
        """傾向パラメータの選択を切り替える

        選択済みなら解除し、未選択なら末尾の優先順位で追加する。
        4つ選択済みの場合の追加は無視する。

        Raises:
            WizardError: 存在しないカテゴリIDの場合
        """
        category = next((c for c in TENDENCY_CATEGORIES if c["id"] == category_id), None)
        if category is None:
            raise WizardError(f"傾向パラメータが存在しません: {category_id}")

        selected_ids = [p["id"] for p in self._tendency_params]
        if category_id in selected_ids:
            self._tendency_params = [
                p for p in self._tendency_params if p["id"] != category_id
            ]
        elif len(selected_ids) < REQUIRED_CATEGORY_COUNT:
            self._tendency_params.append(
                {"id": category_id, "name": category["name"], "priority": 0}
            )
        else:
            logger.debug("Tendency selection is full; ignored %s", category_id)
            return

        # 選択順に優先順位を自動設定
        for index, param in enumerate(self._tendency_params, start=1):
            param["priority"] = index

    def set_tendency_priority(self, category_id: int, priority: int) -> None:
        """傾向パラメータの優先順位を変更する

        指定した項目を新しい優先順位に置き、その優先順位以下の項目を
        1つずつ下げてから1からの連番に振り直す。

        Raises:
            WizardError: 未選択のカテゴリ、または範囲外の優先順位の場合
        """
        if not 1 <= priority <= REQUIRED_CATEGORY_COUNT:
            raise WizardError(f"優先順位は1-{REQUIRED_CATEGORY_COUNT}で指定してください: {priority}")

        target = next((p for p in self._tendency_params if p["id"] == category_id), None)
        if target is None:
            raise WizardError(f"傾向パラメータが選択されていません: {category_id}")

        target["priority"] = priority
        for param in self._tendency_params:
            if param is not target and param["priority"] >= priority:
                param["priority"] += 1

        self._tendency_params = _renumber(self._tendency_params)

    # Step 3
    def toggle_race_category(self, category: str) -> None:
        """レース傾向カテゴリの選択を切り替える

        新しく選択したカテゴリには先頭4つのサブカテゴリを初期選択する。
        3つ選択済みの場合の追加は無視する。

        Raises:
            WizardError: 存在しないカテゴリの場合
        """
        if category not in RACE_CATEGORIES:
            raise WizardError(f"レース傾向カテゴリが存在しません: {category}")

        if category in self._race_params:
            del self._race_params[category]
        elif len(self._race_params) < REQUIRED_RACE_CATEGORY_COUNT:
            self._race_params[category] = [
                {"id": sub_id, "name": name, "priority": index}
                for index, (sub_id, name) in enumerate(
                    RACE_CATEGORIES[category][:MAX_SUB_CATEGORY_COUNT], start=1
                )
            ]
        else:
            logger.debug("Race category selection is full; ignored %s", category)

    def toggle_sub_category(self, category: str, sub_category_id: int) -> None:
        """サブカテゴリの選択を切り替える

        Raises:
            WizardError: カテゴリが未選択、またはサブカテゴリが存在しない場合
        """
        if category not in self._race_params:
            raise WizardError(f"レース傾向カテゴリが選択されていません: {category}")

        names = dict(RACE_CATEGORIES[category])
        if sub_category_id not in names:
            raise WizardError(f"サブカテゴリが存在しません: {category} / {sub_category_id}")

        subs = self._race_params[category]
        if any(s["id"] == sub_category_id for s in subs):
            subs = [s for s in subs if s["id"] != sub_category_id]
        elif len(subs) < MAX_SUB_CATEGORY_COUNT:
            subs.append(
                {"id": sub_category_id, "name": names[sub_category_id], "priority": len(subs) + 1}
            )
        else:
            return

        self._race_params[category] = _renumber(subs)

    def set_sub_category_priority(
        self, category: str, sub_category_id: int, priority: int
    ) -> None:
        """サブカテゴリの優先順位を変更する

        並べ替えのルールは set_tendency_priority と同じ。

        Raises:
            WizardError: カテゴリ・サブカテゴリが未選択、または範囲外の優先順位の場合
        """
        if not 1 <= priority <= MAX_SUB_CATEGORY_COUNT:
            raise WizardError(f"優先順位は1-{MAX_SUB_CATEGORY_COUNT}で指定してください: {priority}")
        if category not in self._race_params:
            raise WizardError(f"レース傾向カテゴリが選択されていません: {category}")

        subs = self._race_params[category]
        target = next((s for s in subs if s["id"] == sub_category_id), None)
        if target is None:
            raise WizardError(f"サブカテゴリが選択されていません: {category} / {sub_category_id}")

        target["priority"] = priority
        for sub in subs:
            if sub is not target and sub["priority"] >= priority:
                sub["priority"] += 1

        self._race_params[category] = _renumber(subs)

    # Step 4
    def set_learning_thought(self, thought: str) -> None:
        """学習的思考を設定する

        Raises:
            WizardError: 存在しない思考パターンの場合
        """
        if thought not in LEARNING_THOUGHTS:
            raise WizardError(f"学習的思考が存在しません: {thought}")
        self.learning_thought = thought

    # Step 5
    def set_robot_name(self, name: str) -> None:
        self.robot_name = name

    def can_proceed(self) -> bool:
        """現在のステップの入力が完了しているか"""
        if self.current_step == 1:
            return ROOT_INDEX_MIN <= self.root_index <= ROOT_INDEX_MAX
        if self.current_step == 2:
            return len(self._tendency_params) == REQUIRED_CATEGORY_COUNT
        if self.current_step == 3:
            return len(self._race_params) == REQUIRED_RACE_CATEGORY_COUNT and all(
                self._race_params.values()
            )
        if self.current_step == 4:
            return self.learning_thought != ""
        if self.current_step == 5:
            return self.robot_name.strip() != ""
        return False

    def next(self) -> int:
        """次のステップへ進む

        Returns:
            移動後のステップ番号

        Raises:
            WizardError: 現在のステップの入力が完了していない場合
        """
        if self.current_step >= LAST_STEP:
            return self.current_step
        if not self.can_proceed():
            raise WizardError(f"ステップ{self.current_step}（{self.step_title}）の入力が完了していません")

        self.current_step += 1
        return self.current_step

    def back(self) -> int:
        """前のステップへ戻る"""
        if self.current_step > FIRST_STEP:
            self.current_step -= 1
        return self.current_step

    def build(self) -> RobotDefinition:
        """ロボット定義を組み立てる

        Raises:
            WizardError: 最終ステップに到達していない、または未完了の場合
        """
        if self.current_step != LAST_STEP or not self.can_proceed():
            raise WizardError("ロボット名を入力して全ステップを完了してください")

        return RobotDefinition(
            name=self.robot_name.strip(),
            root_index=self.root_index,
            tendency_params=self.tendency_params,
            race_params=self.race_params,
            learning_thought=self.learning_thought,
        )
