"""
Main application for the wobble curve GUI.

Provides a DearPyGui window whose render loop drives the
RenderCoordinator once per frame.
"""

import dearpygui.dearpygui as dpg
from typing import Optional
from pathlib import Path

from ..config import AppConfig, load_config
from ..renderer import RenderCoordinator
from ..utils.logger import Logger
from .viewport import CurveViewport


class BezierWobbleApp:
    """
    Main application for the interactive curve.

    Usage:
        app = BezierWobbleApp(config)
        app.run()
    """

    def __init__(self, config: AppConfig):
        """
        Args:
            config: Application configuration.
        """
        self.config = config
        self.coordinator = RenderCoordinator(config)
        self.viewport = CurveViewport()

        self._is_running = False

    def run(self) -> None:
        """Run the application (blocking)."""
        window = self.config.window

        dpg.create_context()
        # Input callbacks are queued and drained on this thread, between ticks
        dpg.configure_app(manual_callback_management=True)
        try:
            dpg.create_viewport(title=window.title, width=window.width, height=window.height)

            self.viewport.create(window.width, window.height)
            self.viewport.set_callbacks(
                on_press=self.coordinator.press,
                on_move=self.coordinator.move,
                on_release=self.coordinator.release,
                on_leave=self.coordinator.leave
            )
            dpg.set_viewport_resize_callback(self._on_resize)

            dpg.setup_dearpygui()
            dpg.show_viewport()

            self._on_resize()
            Logger.log("application started", Logger.LogPriority.INFO)

            # Main loop: one coordinator tick per rendered frame
            self._is_running = True
            while dpg.is_dearpygui_running() and self._is_running:
                self._run_frame()
        finally:
            dpg.destroy_context()
            Logger.log("application stopped", Logger.LogPriority.INFO)

    def stop(self) -> None:
        """Stop the application."""
        self._is_running = False

    def _run_frame(self) -> None:
        """Drain queued pointer/resize callbacks, then tick and render once."""
        dpg.run_callbacks(dpg.get_callback_queue())
        self._frame_update()
        dpg.render_dearpygui_frame()

    def _frame_update(self) -> None:
        self.coordinator.tick(self.viewport)
        self.viewport.draw_status(self.coordinator.get_status())

    def _on_resize(self, sender=None, app_data=None) -> None:
        width = dpg.get_viewport_client_width()
        height = dpg.get_viewport_client_height()
        # Leave room for the window padding
        width, height = max(1, width - 16), max(1, height - 16)
        self.viewport.set_size(width, height)
        self.coordinator.resize(width, height)


def run_gui(config_path: Optional[str] = None, **overrides) -> None:
    """
    Launch GUI from config file or defaults.

    Args:
        config_path: Path to YAML config file (optional).
        overrides: width, height, title or seed replacing config values.
    """
    config = load_config(Path(config_path)) if config_path else AppConfig()

    for name in ("width", "height", "title"):
        if overrides.get(name) is not None:
            setattr(config.window, name, overrides[name])
    if overrides.get("seed") is not None:
        config.interaction.seed = overrides["seed"]

    if config.logging.enabled:
        Logger.initialize(config.logging.path)
    else:
        Logger.disable_logging()

    Logger.log(f"config: {config_path or 'defaults'}", Logger.LogPriority.INFO)

    app = BezierWobbleApp(config)
    app.run()
