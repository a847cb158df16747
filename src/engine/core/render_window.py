"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア）と描画コールバック登録を提供。
なぜ: 文字盤コンポジタ/サーフェス層から GUI 依存を切り離すため。

使用例:
    win = RenderWindow(640, 640, bg_color=(0, 0, 0, 1))
    win.add_draw_callback(draw_face)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "PyxiWatch",
        bg_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
    ):
        """リサイズ可能なウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        try:
            # 線描画を滑らかにするために MSAA を有効化
            config = Config(double_buffer=True, sample_buffers=1, samples=4)
            super().__init__(
                width=width, height=height, caption=caption, resizable=True, config=config
            )
        except pyglet.window.NoSuchConfigException:
            # MSAA 非対応の環境
            super().__init__(width=width, height=height, caption=caption, resizable=True)
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()
