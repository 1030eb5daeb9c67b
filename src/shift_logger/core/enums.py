from __future__ import annotations

from enum import Enum


class MenuOption(str, Enum):
    """Operations offered by the console main menu."""

    ADD_WORKER = "add_worker"
    UPDATE_WORKER = "update_worker"
    DELETE_WORKER = "delete_worker"
    SHOW_WORKER_BY_ID = "show_worker_by_id"
    SHOW_WORKER_BY_NAME = "show_worker_by_name"
    SHOW_WORKERS = "show_workers"
    CREATE_SHIFT = "create_shift"
    UPDATE_SHIFT = "update_shift"
    DELETE_SHIFT = "delete_shift"
    SHOW_SHIFT_BY_ID = "show_shift_by_id"
    SHOW_SHIFTS_BY_WORKER_ID = "show_shifts_by_worker_id"
    SHOW_SHIFTS = "show_shifts"
    EXIT = "exit"

    @property
    def display_name(self) -> str:
        return _MENU_DISPLAY_NAMES[self]


_MENU_DISPLAY_NAMES = {
    MenuOption.ADD_WORKER: "Add a worker to the shifts logger",
    MenuOption.UPDATE_WORKER: "Update a worker that has been added to the shifts logger",
    MenuOption.DELETE_WORKER: "Delete a worker from the shifts logger",
    MenuOption.SHOW_WORKER_BY_ID: "Show detailed information on a worker by id",
    MenuOption.SHOW_WORKER_BY_NAME: "Show detailed information on a worker by name",
    MenuOption.SHOW_WORKERS: "Show all workers",
    MenuOption.CREATE_SHIFT: "Log a new shift",
    MenuOption.UPDATE_SHIFT: "Update an existing shift",
    MenuOption.DELETE_SHIFT: "Delete an existing shift",
    MenuOption.SHOW_SHIFT_BY_ID: "Show a shift based on id",
    MenuOption.SHOW_SHIFTS_BY_WORKER_ID: "Show all shifts for a worker based on worker id",
    MenuOption.SHOW_SHIFTS: "Show all shifts",
    MenuOption.EXIT: "Exit the program",
}


class PageNavigation(str, Enum):
    """Choices offered below a page of a paginated list."""

    PREVIOUS = "Previous"
    EXIT = "Exit"
    NEXT = "Next"
