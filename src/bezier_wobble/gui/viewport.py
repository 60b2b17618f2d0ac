"""
Curve viewport backed by a DearPyGui drawlist.

Draws whatever the RenderCoordinator emits and turns mouse events into
surface-local press/move/release/leave calls.
"""

import dearpygui.dearpygui as dpg
from typing import Optional, Callable, Tuple

from ..canvas import DrawSink
from ..exceptions import CanvasUnavailableError
from ..renderer import CurveStatus


class CurveViewport(DrawSink):
    """
    Drawlist surface filling the primary window.

    Pointer positions are converted from viewport space to drawlist space
    so the coordinator only ever sees surface-local pixels.
    """

    def __init__(self):
        self._drawlist_tag: Optional[int] = None
        self._window_tag: Optional[int] = None

        self._on_press: Optional[Callable[[float, float], None]] = None
        self._on_move: Optional[Callable[[float, float], None]] = None
        self._on_release: Optional[Callable[[], None]] = None
        self._on_leave: Optional[Callable[[], None]] = None

        self._pointer_inside = False

    def create(self, width: int, height: int) -> int:
        """
        Create the primary window and its drawlist.

        Raises:
            CanvasUnavailableError: If the drawlist could not be created.
        """
        with dpg.window(
            tag="curve_window",
            no_scrollbar=True,
            no_scroll_with_mouse=True,
            no_title_bar=True,
            no_move=True
        ) as self._window_tag:
            self._drawlist_tag = dpg.add_drawlist(
                width=width,
                height=height,
                tag="curve_drawlist"
            )

        if not self._drawlist_tag or not dpg.does_item_exist(self._drawlist_tag):
            raise CanvasUnavailableError()

        dpg.set_primary_window(self._window_tag, True)

        with dpg.handler_registry():
            dpg.add_mouse_click_handler(button=dpg.mvMouseButton_Left, callback=self._on_mouse_click)
            dpg.add_mouse_move_handler(callback=self._on_mouse_move)
            dpg.add_mouse_release_handler(button=dpg.mvMouseButton_Left, callback=self._on_mouse_release)

        return self._window_tag

    def set_size(self, width: int, height: int) -> None:
        dpg.configure_item(self._drawlist_tag, width=width, height=height)

    def set_callbacks(
        self,
        on_press: Optional[Callable[[float, float], None]] = None,
        on_move: Optional[Callable[[float, float], None]] = None,
        on_release: Optional[Callable[[], None]] = None,
        on_leave: Optional[Callable[[], None]] = None
    ) -> None:
        """
        Set interaction callbacks.

        Args:
            on_press: Left button pressed on the surface (x, y).
            on_move: Pointer moved (x, y), surface-local.
            on_release: Left button released.
            on_leave: Pointer left the surface.
        """
        self._on_press = on_press
        self._on_move = on_move
        self._on_release = on_release
        self._on_leave = on_leave

    # ------------------------------------------------------------------
    # DrawSink
    # ------------------------------------------------------------------

    def begin_frame(self) -> None:
        dpg.delete_item(self._drawlist_tag, children_only=True)

    def fill_rect(self, x, y, width, height, color) -> None:
        dpg.draw_rectangle(
            (x, y), (x + width, y + height),
            color=color,
            fill=color,
            parent=self._drawlist_tag
        )

    def stroke_polyline(self, points, color, thickness) -> None:
        dpg.draw_polyline(
            [list(p) for p in points],
            color=color,
            thickness=thickness,
            parent=self._drawlist_tag
        )

    def draw_circle(self, center, radius, fill, outline) -> None:
        dpg.draw_circle(
            center,
            radius,
            color=outline,
            fill=fill,
            thickness=1,
            parent=self._drawlist_tag
        )

    def draw_status(self, status: CurveStatus) -> None:
        """Small status line in the top-left corner."""
        dragged = status.dragged.value if status.dragged else "-"
        wobbling = ",".join(p.value for p in status.wobbling) or "-"
        dpg.draw_text(
            (10, 10),
            f"drag: {dragged}   wobble: {wobbling}",
            color=(200, 200, 200, 255),
            size=14,
            parent=self._drawlist_tag
        )

    # ------------------------------------------------------------------
    # Mouse handling
    # ------------------------------------------------------------------

    def _local_mouse_pos(self) -> Tuple[float, float]:
        """Mouse position relative to the drawlist's top-left corner."""
        mx, my = dpg.get_mouse_pos(local=False)
        ox, oy = dpg.get_item_rect_min(self._drawlist_tag)
        return mx - ox, my - oy

    def _contains(self, x: float, y: float) -> bool:
        width, height = dpg.get_item_rect_size(self._drawlist_tag)
        return 0 <= x <= width and 0 <= y <= height

    def _on_mouse_click(self, sender, app_data) -> None:
        x, y = self._local_mouse_pos()
        if self._contains(x, y) and self._on_press:
            self._on_press(x, y)

    def _on_mouse_move(self, sender, app_data) -> None:
        x, y = self._local_mouse_pos()
        inside = self._contains(x, y)

        if self._pointer_inside and not inside and self._on_leave:
            self._on_leave()
        self._pointer_inside = inside

        if self._on_move:
            self._on_move(x, y)

    def _on_mouse_release(self, sender, app_data) -> None:
        if self._on_release:
            self._on_release()
