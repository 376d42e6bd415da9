"""指数計算の重み設定

能力指数・傾向指数・総合指数の計算に使う定数を定義する。
"""

# 能力指数・傾向指数の上限（50点満点）
MAX_INDEX = 50.0

# 根幹指数 = 入力値 × 0.5
BASE_INDEX_RATIO = 0.5

# 総合指数の配分除数: (x / 200) * 能力指数 + ((200 - x) / 200) * 傾向指数
TOTAL_INDEX_DIVISOR = 200.0

# 根幹指数の入力範囲とウィザードの初期値
ROOT_INDEX_MIN = 0
ROOT_INDEX_MAX = 100
DEFAULT_ROOT_INDEX = 50

# 傾向パラメータは4つ選択し、優先順位1-4を付ける
REQUIRED_CATEGORY_COUNT = 4

# レース傾向パラメータは3カテゴリ、各カテゴリ最大4サブカテゴリ
REQUIRED_RACE_CATEGORY_COUNT = 3
MAX_SUB_CATEGORY_COUNT = 4

# 想定オッズの有効範囲（0 < odds <= 1000）
ODDS_MIN_EXCLUSIVE = 0.0
ODDS_MAX = 1000.0
