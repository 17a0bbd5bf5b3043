"""
どこで: `common` パッケージ。
何を: 環境変数・設定ファイル・ロギングの軽量ユーティリティ。
なぜ: 色計算 (`iro`) から実行環境まわりの処理を分離するため。
"""
