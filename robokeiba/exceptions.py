"""robokeiba例外定義"""


class RobokeibaError(Exception):
    """robokeibaの基底例外"""


class WizardError(RobokeibaError, ValueError):
    """ウィザードの入力が不完全・不正な場合の例外"""


class InvalidOddsError(RobokeibaError, ValueError):
    """オッズが有効範囲外の場合の例外

    Attributes:
        invalid: 不正なオッズ（馬ID → オッズ）。空の場合は未入力
    """

    def __init__(self, invalid: dict[int, float]):
        self.invalid = invalid
        if not invalid:
            super().__init__("オッズが1頭も入力されていません")
            return
        detail = ", ".join(f"{horse_id}: {odds}" for horse_id, odds in invalid.items())
        super().__init__(f"オッズは0より大きく1000以下で入力してください（{detail}）")


class NotFoundError(RobokeibaError, LookupError):
    """対象データが存在しない場合の例外"""
