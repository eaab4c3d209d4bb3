import flet as ft
from patchsorter.config import (
    COLOR_PRIMARY,
    COLOR_ROW_SELECTED,
    COLOR_TEXT_MAIN,
)
from patchsorter.domain.categories import canonical_order
from patchsorter.ui.helpers import row_color


class PatchRow(ft.GestureDetector):
    def __init__(
        self,
        index: int,
        name: str,
        categories,
        selected: bool,
        on_select_callback,
        on_open_callback,
    ):
        super().__init__()
        self.row_index = index
        self.patch_name = name
        self.categories = canonical_order(categories)
        self.is_selected = selected
        self.on_select_callback = on_select_callback
        self.on_open_callback = on_open_callback

        self.on_tap = self._handle_tap
        self.on_double_tap = self._handle_double_tap
        self.content = self._build_content()

    def _handle_tap(self, e):
        if self.on_select_callback:
            self.on_select_callback(self.row_index)

    def _handle_double_tap(self, e):
        if self.on_open_callback:
            self.on_open_callback(self.row_index)

    def _build_content(self):
        tag_chips = [
            ft.Container(
                content=ft.Text(
                    c.code,
                    size=11,
                    color=COLOR_PRIMARY,
                    weight=ft.FontWeight.W_500,
                ),
                bgcolor="#E6F2FF",
                padding=ft.Padding.symmetric(horizontal=8, vertical=2),
                border_radius=10,
            )
            for c in self.categories
        ]
        return ft.Container(
            content=ft.Row(
                controls=[
                    ft.Text(
                        self.patch_name,
                        size=13,
                        color=COLOR_TEXT_MAIN,
                        weight=ft.FontWeight.BOLD if self.is_selected else ft.FontWeight.NORMAL,
                        max_lines=1,
                        overflow=ft.TextOverflow.ELLIPSIS,
                        expand=True,
                    ),
                    *tag_chips,
                ],
                spacing=4,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            bgcolor=COLOR_ROW_SELECTED if self.is_selected else row_color(self.row_index),
            padding=ft.Padding.symmetric(horizontal=8, vertical=4),
        )
