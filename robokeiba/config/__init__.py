"""設定モジュール"""
