"""サンプルデータ"""
