"""
actions.py - UI-side dialogs
Single responsibility: progress and error dialogs shown over the list.
"""

import flet as ft

from patchsorter.config import (
    APP_TITLE,
    BORDER_RADIUS_CARD,
    COLOR_DANGER,
)


def show_progress_dialog(page: ft.Page, message: str, on_cancel=None) -> ft.AlertDialog:
    """Open a modal dialog with an indeterminate progress bar."""
    actions = []
    if on_cancel is not None:
        actions.append(ft.TextButton("Cancel", on_click=lambda _e: on_cancel()))

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(APP_TITLE),
        content=ft.Column(
            controls=[ft.Text(message), ft.ProgressBar(value=None, width=320)],
            spacing=12,
            tight=True,
        ),
        actions=actions,
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
    return dialog


def close_dialog(page: ft.Page, dialog: ft.AlertDialog) -> None:
    dialog.open = False
    page.update()


def show_error_dialog(page: ft.Page, title: str, detail: str) -> None:
    def on_close(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title, color=COLOR_DANGER, weight=ft.FontWeight.BOLD),
        content=ft.Text(detail),
        actions=[ft.TextButton("OK", on_click=on_close)],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def show_snack(page: ft.Page, message: str) -> None:
    page.snack_bar = ft.SnackBar(ft.Text(message), bgcolor=COLOR_DANGER)
    page.snack_bar.open = True
    page.update()
