"""Constants for robokeiba."""

# 傾向パラメータ（ウィザード Step 2）: 8つから4つを選択
TENDENCY_CATEGORIES: tuple[dict, ...] = (
    {"id": 1, "name": "血統分析", "description": "血統による能力予測"},
    {"id": 2, "name": "調教師実績", "description": "調教師の過去成績"},
    {"id": 3, "name": "騎手実績", "description": "騎手の過去成績"},
    {"id": 4, "name": "馬場適性", "description": "馬場条件への適応性"},
    {"id": 5, "name": "距離適性", "description": "レース距離への適応性"},
    {"id": 6, "name": "天候適性", "description": "天候条件への適応性"},
    {"id": 7, "name": "出走間隔", "description": "前走からの経過日数"},
    {"id": 8, "name": "負担重量", "description": "負担重量の影響度"},
)

# レース傾向パラメータ（ウィザード Step 3）: 5カテゴリから3つ、各最大4サブカテゴリ
RACE_CATEGORIES: dict[str, tuple[tuple[int, str], ...]] = {
    "騎手": (
        (1, "勝率"),
        (2, "複勝率"),
        (3, "平均順位"),
        (4, "重賞実績"),
        (5, "距離適性"),
        (6, "馬場適性"),
    ),
    "調教師": (
        (7, "勝率"),
        (8, "複勝率"),
        (9, "出走数"),
        (10, "重賞実績"),
        (11, "距離適性"),
        (12, "馬場適性"),
    ),
    "馬場": (
        (13, "芝適性"),
        (14, "ダート適性"),
        (15, "良馬場"),
        (16, "重馬場"),
        (17, "稍重馬場"),
        (18, "不良馬場"),
    ),
    "距離": (
        (19, "短距離"),
        (20, "マイル"),
        (21, "中距離"),
        (22, "長距離"),
        (23, "上り坂"),
        (24, "下り坂"),
    ),
    "天候": (
        (25, "晴天"),
        (26, "雨天"),
        (27, "曇天"),
        (28, "風速"),
        (29, "気温"),
        (30, "湿度"),
    ),
}

# 学習的思考（ウィザード Step 4）
LEARNING_THOUGHTS: dict[str, str] = {
    "jockey": "騎手心理思考",
    "trainer": "調教師心理思考",
    "predictor": "予想家心理思考",
}
