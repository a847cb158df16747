"""
どこで: `api.watch_runner` パッケージ。
何を: `api.watch` ランナーの純粋な設定解決ヘルパ群。
なぜ: ランナー本体を薄く保ち、GUI なしでテストできる部分を分離するため。
"""
