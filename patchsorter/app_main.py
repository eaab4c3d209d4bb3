"""
app_main.py - Paper Patch Sorter main application
Paper Patch Sorter v1.0
"""

import logging

import flet as ft

from patchsorter.config import (
    APP_TITLE,
    CATEGORIES_FILE,
    CLONE_DIR,
    COLOR_BG,
    COLOR_PRIMARY,
    PAPER_REPO_URL,
    PATCHES_DIR,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from patchsorter.domain.categories import Category
from patchsorter.exceptions import BootstrapError, CatalogError, TagSaveError
from patchsorter.services.patch_store import PatchStore
from patchsorter.ui import actions, views
from patchsorter.ui.helpers import move_selection
from patchsorter.ui.state import AppState
from patchsorter.utils.bootstrap import BootstrapTask, needs_bootstrap

logger = logging.getLogger(__name__)


def run_bootstrap(page: ft.Page) -> bool:
    """
    Clone the patch source if it is missing. Blocks this handler thread
    while the progress dialog keeps the window responsive.
    """
    if not needs_bootstrap(PATCHES_DIR):
        return True

    task = BootstrapTask(PAPER_REPO_URL, CLONE_DIR)
    dialog = actions.show_progress_dialog(
        page, "Cloning Paper repository", on_cancel=task.cancel
    )
    try:
        task.start().wait()
    except BootstrapError as exc:
        logger.error("Failed to clone paper repository: %s", exc)
        actions.close_dialog(page, dialog)
        actions.show_error_dialog(page, "Failed to clone repository", str(exc))
        return False
    actions.close_dialog(page, dialog)
    return True


def main(page: ft.Page):
    page.title = APP_TITLE
    page.window.width = WINDOW_WIDTH
    page.window.height = WINDOW_HEIGHT
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    state = AppState()
    store = PatchStore(PATCHES_DIR, CATEGORIES_FILE)

    def refresh_list():
        try:
            page.views.clear()
            page.views.append(
                views.build_patch_list_view(
                    page=page,
                    state=state,
                    store=store,
                    on_select_patch=handle_select,
                    on_open_patch=handle_open,
                    on_filter=handle_filter,
                )
            )
            page.update()
        except Exception as exc:
            logger.exception("Error in refresh_list")
            actions.show_error_dialog(page, "Something went wrong", f"Details: {exc}")

    def handle_select(index: int):
        state.selected_index = index
        refresh_list()

    def handle_open(index: int):
        state.selected_index = index
        try:
            path = store.open_patch(index)
            logger.info("Opened %s", path)
        except (OSError, IndexError) as exc:
            logger.warning("Failed to open file: %s", exc)
            actions.show_snack(page, f"Failed to open file: {exc}")
        refresh_list()

    def handle_filter(patch_filter):
        store.set_filter(patch_filter)
        state.selected_index = None
        refresh_list()

    def handle_toggle(category: Category):
        if state.selected_index is None:
            return
        try:
            store.toggle_tag(state.selected_index, category)
        except IndexError:
            state.selected_index = None
        except TagSaveError as exc:
            # The toggle is kept in memory; only the file is stale
            actions.show_error_dialog(page, "Tags were not saved", str(exc))
        refresh_list()

    def on_keyboard(e: ft.KeyboardEvent):
        if e.ctrl or e.alt or e.meta:
            return
        count = len(store.visible_patches())
        if e.key == "Arrow Down":
            state.selected_index = move_selection(state.selected_index, 1, count)
            refresh_list()
        elif e.key == "Arrow Up":
            state.selected_index = move_selection(state.selected_index, -1, count)
            refresh_list()
        elif e.key == "Enter" and state.selected_index is not None:
            handle_open(state.selected_index)
        else:
            category = Category.by_shortcut(e.key)
            if category is not None:
                handle_toggle(category)

    page.on_keyboard_event = on_keyboard

    if not run_bootstrap(page):
        return

    try:
        store.load()
    except CatalogError as exc:
        logger.error("Failed to load patches: %s", exc)
        actions.show_error_dialog(page, "Failed to load patches", str(exc))
        return

    refresh_list()


# ==========================================================================
# Entry point
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
