"""
views.py - UI view builders
Single responsibility: build flet Views from the store using provided
callbacks/state.
"""

import flet as ft

from patchsorter.config import (
    APP_TITLE,
    COLOR_BG,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_CARD,
)
from patchsorter.domain.filters import PatchFilter
from patchsorter.services.patch_store import PatchStore
from patchsorter.ui.components.patch_row import PatchRow
from patchsorter.ui.helpers import shortcut_legend


def build_filter_bar(active: PatchFilter, on_filter) -> ft.Row:
    def build_filter_btn(option: PatchFilter):
        selected = option == active
        color = COLOR_PRIMARY if selected else COLOR_TEXT_MUTED
        return ft.Container(
            content=ft.Text(
                option.label,
                color=color,
                weight=ft.FontWeight.BOLD if selected else ft.FontWeight.NORMAL,
            ),
            padding=ft.Padding.symmetric(vertical=8, horizontal=12),
            border=ft.border.only(
                bottom=ft.BorderSide(2, COLOR_PRIMARY if selected else "transparent")
            ),
            on_click=lambda _, opt=option: on_filter(opt),
            ink=True,
            border_radius=ft.border_radius.only(top_left=6, top_right=6),
        )

    return ft.Row(
        controls=[ft.Text("Filter by:", color=COLOR_TEXT_MAIN)]
        + [build_filter_btn(option) for option in PatchFilter.options()],
        spacing=0,
        wrap=True,
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
    )


def build_legend() -> ft.Container:
    return ft.Container(
        content=ft.Column(
            controls=[
                ft.Text(line, size=12, color=COLOR_TEXT_MUTED)
                for line in shortcut_legend()
            ],
            spacing=2,
        ),
        padding=ft.Padding.all(5),
    )


def build_patch_list_view(
    page: ft.Page,
    state,
    store: PatchStore,
    on_select_patch,
    on_open_patch,
    on_filter,
):
    visible = store.visible_patches()

    if visible:
        rows = [
            PatchRow(
                index=i,
                name=name,
                categories=store.categories_for(name),
                selected=i == state.selected_index,
                on_select_callback=on_select_patch,
                on_open_callback=on_open_patch,
            )
            for i, name in enumerate(visible)
        ]
    else:
        rows = [
            ft.Container(
                content=ft.Text(
                    "No patches match this filter",
                    color=COLOR_TEXT_MUTED,
                    size=16,
                ),
                alignment=ft.Alignment.CENTER,
                padding=60,
            )
        ]

    patch_list = ft.ListView(controls=rows, spacing=0, expand=True)

    return ft.View(
        route="/",
        bgcolor=COLOR_BG,
        padding=10,
        controls=[
            build_filter_bar(store.active_filter, on_filter),
            ft.Container(
                content=patch_list,
                bgcolor=COLOR_CARD,
                border=ft.border.all(1, COLOR_BORDER),
                border_radius=BORDER_RADIUS_CARD,
                expand=True,
            ),
            ft.Row(
                controls=[
                    build_legend(),
                    ft.Container(expand=True),
                    ft.Text(
                        f"{len(visible)} / {len(store.catalog)} patches",
                        size=12,
                        color=COLOR_TEXT_MUTED,
                    ),
                ],
                vertical_alignment=ft.CrossAxisAlignment.END,
            ),
        ],
        appbar=ft.AppBar(
            title=ft.Text(APP_TITLE, color=COLOR_TEXT_MAIN, weight=ft.FontWeight.BOLD),
            bgcolor=COLOR_CARD,
            automatically_imply_leading=False,
        ),
    )
