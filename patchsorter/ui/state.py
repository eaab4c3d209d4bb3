"""
state.py - UI state container
"""


class AppState:
    def __init__(self):
        self.selected_index: int | None = None
