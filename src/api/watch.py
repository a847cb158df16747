"""
どこで: `api.watch`（対話ランナー）。
何を: pyglet ウィンドウで文字盤を毎フレーム描き、キー/ホイール入力を `FaceState` へ反映する。
なぜ: コア（純粋な形状生成）に対する薄い I/O ラッパとして、入力 → 状態更新 → 描画を 1 スレッドで直列化するため。

実行フロー（概要）:
1) 設定解決: `util.utils.load_config()` の `watch:` セクションと引数/環境変数から FPS・サイズ・背景色・初期モードを確定。
2) 状態/テーマ: `FaceState.from_config(...)`（星はここで 1 度だけ生成）と `resolve_theme(...)`。
3) ウィンドウ: `RenderWindow` を生成し、`PygletSurface` + `WatchFaceCompositor` を描画コールバックに登録。
4) 時間: `FrameClock([state])` を `pyglet.clock.schedule_interval` で駆動し、経過秒（星の瞬き）を進める。
5) 入力: `q`/`Esc`/`Ctrl+C` 終了、`s` 星、`l` 夜光、`m` スムース秒、ホイールでベゼル回転。

操作:
- ホイール上 = 反時計回り 1 クリック、下 = 時計回り 1 クリック（120 クリックで 1 周）。

注意:
- ヘッドレス環境では pyglet の初期化に失敗する。`init_only=True` なら pyglet を import せずに
  `(state, theme)` を返す（設定検証用）。
"""

from __future__ import annotations

import logging

from common.logging import setup_default_logging
from common.settings import get as get_settings
from engine.core.clock import local_now
from face.state import FaceState
from face.theme import ThemeProfile, resolve_theme
from util.utils import watch_section

from .watch_runner.utils import resolve_run_config

logger = logging.getLogger(__name__)


def run_watch(
    *,
    theme: str | ThemeProfile | None = None,
    fps: int | None = None,
    window_size: int | None = None,
    background: object | None = None,
    stars: bool | None = None,
    lume: bool | None = None,
    smooth: bool | None = None,
    init_only: bool = False,
) -> tuple[FaceState, ThemeProfile] | None:
    """文字盤ウィンドウを開き、閉じられるまでイベントループを回す。

    Parameters
    ----------
    theme : str | ThemeProfile | None
        テーマ名またはプロファイル。None で `PXW_THEME` → YAML → `submariner`。
    fps : int | None
        経過時間の更新と再描画のレート。None で `PXW_FPS` → YAML → 30。
    window_size : int | None
        初期ウィンドウの一辺（px）。リサイズ時は中央の最大正方形に文字盤を収める。
    background : str | tuple | None
        背景色（名前/Hex/RGBA）。
    stars, lume, smooth : bool | None
        初期モード。None で YAML の値（既定 False）。
    init_only : bool, default False
        True で GUI を起動せず `(state, theme)` を返す。
    """
    section = watch_section()
    setup_default_logging(get_settings().LOG_LEVEL or section.get("log_level"))

    run_cfg = resolve_run_config(section, fps=fps, window_size=window_size, background=background)
    profile = resolve_theme(theme)
    state = FaceState.from_config(
        section, stars_enabled=stars, lume_mode=lume, smooth_seconds=smooth
    )
    if init_only:
        return state, profile

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import RenderWindow
    from engine.render.layout import fit_square
    from engine.render.pyglet_surface import PygletSurface
    from face.compositor import WatchFaceCompositor
    from face.controls import action_for_key, apply_action, bezel_clicks_from_scroll

    window = RenderWindow(run_cfg.window_size, run_cfg.window_size, bg_color=run_cfg.background)
    surface = PygletSurface()
    compositor = WatchFaceCompositor()

    def _draw_face() -> None:
        # shapes はウィンドウ座標系（HiDPI でも論理サイズ）
        surface.begin(fit_square(window.width, window.height))
        compositor.draw(surface, state, profile, local_now())
        surface.flush()

    window.add_draw_callback(_draw_face)

    frame_clock = FrameClock([state])
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / run_cfg.fps)

    @window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        action = action_for_key(key.symbol_string(sym), ctrl=bool(mods & key.MOD_CTRL))
        if action is None:
            return None
        if not apply_action(state, action):
            window.close()
        # ESC の既定動作（close）は上で処理済み
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_mouse_scroll(x, y, scroll_x, scroll_y):  # noqa: ANN001
        clicks = bezel_clicks_from_scroll(scroll_y)
        if clicks:
            state.rotate_bezel(clicks)

    @window.event
    def on_close():  # noqa: ANN001
        pyglet.clock.unschedule(frame_clock.tick)
        logger.info("closing after %d frames", frame_clock.frames)
        pyglet.app.exit()

    logger.info(
        "watch start: theme=%s fps=%d size=%d", profile.name, run_cfg.fps, run_cfg.window_size
    )
    pyglet.app.run()
    return None


__all__ = ["run_watch"]
