"""robokeiba - AIロボットによる競走馬指数計算ツール"""

__version__ = "0.1.0"
