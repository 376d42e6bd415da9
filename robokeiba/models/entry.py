"""Value objects consumed and produced by the index calculator.

This module provides immutable data transfer objects for horses, odds
entries, tendency categories and calculation results.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime

from robokeiba.config.weights import REQUIRED_CATEGORY_COUNT


@dataclass(frozen=True)
class RaceHorse:
    """A horse as the index calculator sees it.

    Attributes:
        id: The horse's identifier.
        name: The horse's name.
        odds: Current (expected) win odds.
        place_rate: Historical place rate (0.0-1.0).
        horse_number: The horse's number in the race (optional).
    """

    id: int
    name: str
    odds: float
    place_rate: float
    horse_number: int | None = None


@dataclass(frozen=True)
class HorseOdds:
    """An odds entry for one runner.

    Attributes:
        horse_id: The horse's identifier.
        horse_number: The horse's number in the race.
        horse_name: The horse's name.
        odds: Entered odds (0 means not entered yet).
        ability_index: Ability index derived from the odds, if calculated.
    """

    horse_id: int
    horse_number: int
    horse_name: str
    odds: float
    ability_index: float | None = None


@dataclass(frozen=True)
class TendencyCategory:
    """A tendency parameter the user can rank.

    Attributes:
        id: The category identifier.
        name: The category display name.
        place_rate: Historical place rate of the category (0.0-1.0).
        efficiency: Place efficiency coefficient (0.0-1.0).
        description: Short description.
    """

    id: int
    name: str
    place_rate: float
    efficiency: float
    description: str = ""


@dataclass(frozen=True)
class CategorySelection:
    """An ordered selection of exactly four tendency categories.

    The rank is implied by position: the first category has rank 1
    (most preferred), the last has rank 4.

    Raises:
        ValueError: If the selection does not contain exactly four
            distinct categories.
    """

    categories: tuple[TendencyCategory, ...]

    def __post_init__(self) -> None:
        if len(self.categories) != REQUIRED_CATEGORY_COUNT:
            raise ValueError(
                f"{REQUIRED_CATEGORY_COUNT}つの傾向パラメータを選択してください"
                f"（選択数: {len(self.categories)}）"
            )
        ids = [category.id for category in self.categories]
        if len(set(ids)) != len(ids):
            raise ValueError(f"傾向パラメータが重複しています: {ids}")

    @classmethod
    def from_priorities(
        cls, priorities: Mapping[TendencyCategory, int]
    ) -> "CategorySelection":
        """優先順位付きのカテゴリからSelectionを作成する

        Args:
            priorities: カテゴリ → 優先順位（1-4）

        Returns:
            優先順位順に並べたCategorySelection

        Raises:
            ValueError: 優先順位が1-4の順列でない場合
        """
        ranks = sorted(priorities.values())
        expected = list(range(1, REQUIRED_CATEGORY_COUNT + 1))
        if ranks != expected:
            raise ValueError(f"優先順位は1-4を1つずつ指定してください: {ranks}")

        ordered = sorted(priorities.items(), key=lambda item: item[1])
        return cls(tuple(category for category, _ in ordered))

    def ranked(self) -> Iterator[tuple[int, TendencyCategory]]:
        """(優先順位, カテゴリ) を優先順位順に返す"""
        return enumerate(self.categories, start=1)

    def weights(self) -> tuple[float, ...]:
        """各カテゴリの優先度係数を返す"""
        # index_calculator は本モジュールを参照するため関数内でimportする
        from robokeiba.analyzers.index_calculator import priority_weight

        return tuple(priority_weight(rank) for rank, _ in self.ranked())

    def __iter__(self) -> Iterator[TendencyCategory]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)


@dataclass(frozen=True)
class CalculationResult:
    """Per-horse calculation result.

    Attributes:
        horse_id: The horse's identifier.
        horse_name: The horse's name.
        base_index: Base index (root index × 0.5).
        ability_index: Ability index (0-50).
        tendency_index: Tendency index (0-50).
        total_index: Total index (0-50).
    """

    horse_id: int
    horse_name: str
    base_index: float
    ability_index: float
    tendency_index: float
    total_index: float


@dataclass(frozen=True)
class OddsSummary:
    """Descriptive statistics over a set of odds entries.

    Attributes:
        horse_count: Number of entries.
        valid_count: Number of entries with odds > 0.
        mean: Mean of the valid odds.
        variance: Population variance of the valid odds.
    """

    horse_count: int
    valid_count: int
    mean: float
    variance: float


@dataclass(frozen=True)
class TendencyParam:
    """傾向パラメータ（優先順位付き）"""

    id: int
    name: str
    priority: int


@dataclass(frozen=True)
class SubCategory:
    """レース傾向パラメータのサブカテゴリ"""

    id: int
    name: str
    priority: int


@dataclass(frozen=True)
class RaceParam:
    """レース傾向パラメータ"""

    category: str
    sub_categories: tuple[SubCategory, ...] = ()


@dataclass(frozen=True)
class RobotDefinition:
    """AIロボットの定義（イミュータブル）

    Attributes:
        name: ロボット名
        root_index: 根幹指数の入力値（0-100）
        tendency_params: 傾向パラメータ（優先順位順）
        race_params: レース傾向パラメータ
        learning_thought: 学習的思考
        id: 保存後に付与されるID
        created_at: 保存日時
    """

    name: str
    root_index: int
    tendency_params: tuple[TendencyParam, ...]
    race_params: tuple[RaceParam, ...]
    learning_thought: str
    id: int | None = None
    created_at: datetime | None = field(default=None, compare=False)
