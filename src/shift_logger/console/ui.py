"""Interactive menu loop for the shift logger.

One interaction at a time: menu -> input -> (confirmation) -> API call ->
result display -> pause. Every operation handler returns a ``Result``; the
loop is the only place failures are printed.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, Optional, Sequence, TextIO, TypeVar

import click

from ..client.api_client import ApiClient
from ..common.datetime_utils import format_duration
from ..common.validators import is_valid_input_string, is_valid_numeric_input
from ..core.constants import CANCELLED_MESSAGE, DATE_FORMAT, DATE_FORMAT_DISPLAY, DEFAULT_PAGE_SIZE
from ..core.enums import MenuOption
from ..core.result import Result, ValueResult
from ..shifts.dto import ShiftResponse
from ..workers.dto import WorkerResponse
from .pagination import Paginator
from .prompter import ConsolePrompter
from .request_builders import (
    build_create_shift_request,
    build_date_time,
    build_update_shift_request,
    build_update_worker_request,
    build_worker_request,
)
from .tables import format_table

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound=Result)

_NOT_AVAILABLE = "Not available"

# click raises Abort for Ctrl+C and end-of-input at a prompt.
_INTERRUPTS = (KeyboardInterrupt, EOFError, click.Abort)


class ShiftLoggerUI:
    def __init__(
        self,
        api_client: ApiClient,
        *,
        output: Optional[TextIO] = None,
        prompter: Optional[ConsolePrompter] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._api = api_client
        self._output = output
        self._prompter = prompter or ConsolePrompter(output)
        self._page_size = page_size

        self._handlers: Dict[MenuOption, Callable[[], Result]] = {
            MenuOption.ADD_WORKER: self.create_worker,
            MenuOption.UPDATE_WORKER: self.update_worker,
            MenuOption.DELETE_WORKER: self.delete_worker,
            MenuOption.SHOW_WORKER_BY_ID: self.show_worker_by_id,
            MenuOption.SHOW_WORKER_BY_NAME: self.show_worker_by_name,
            MenuOption.SHOW_WORKERS: self.show_workers,
            MenuOption.CREATE_SHIFT: self.create_shift,
            MenuOption.UPDATE_SHIFT: self.update_shift,
            MenuOption.DELETE_SHIFT: self.delete_shift,
            MenuOption.SHOW_SHIFT_BY_ID: self.show_shift_by_id,
            MenuOption.SHOW_SHIFTS_BY_WORKER_ID: self.show_shifts_by_worker_id,
            MenuOption.SHOW_SHIFTS: self.show_shifts,
        }

    # --- loop ------------------------------------------------------------

    def run(self) -> None:
        options = list(MenuOption)
        while True:
            try:
                choice = self._prompter.select_menu(options)
            except _INTERRUPTS:
                choice = MenuOption.EXIT

            if choice is MenuOption.EXIT:
                self._message("Goodbye!", "green")
                return

            self.show_result(self.run_operation(choice))

            try:
                self._prompter.pause()
            except _INTERRUPTS:
                return

    def run_operation(self, option: MenuOption) -> Result:
        handler = self._handlers[option]
        logger.debug("Running menu option %s", option.value)
        try:
            return handler()
        except _INTERRUPTS:
            logger.info("Menu option %s cancelled by user", option.value)
            return Result.fail(CANCELLED_MESSAGE)

    def show_result(self, result: Result) -> None:
        if result.is_success:
            return
        if result.error == CANCELLED_MESSAGE:
            self._message("Operation cancelled by user", "yellow")
        elif result.error.lower().endswith("cancelled"):
            self._message(result.error, "yellow")
        else:
            self._message(result.error, "red")

    # --- workers ---------------------------------------------------------

    def create_worker(self) -> Result:
        name = self._prompter.ask_text("Please enter worker name: ").strip()
        department = self._prompter.ask_text("Please enter worker's department: ").strip()
        email = (
            self._prompter.ask_text("Please enter worker's email address: ")
            if self._prompter.confirm(f"Do you wish to enter an email for {name}? ")
            else None
        )
        phone_number = (
            self._prompter.ask_text("Please enter the worker's telephone number: ")
            if self._prompter.confirm(f"Do you wish to enter a telephone number for {name}? ")
            else None
        )

        request = build_worker_request(name, department, email, phone_number)
        if request.is_failure:
            return request

        if not self._prompter.confirm(f"Add worker {name} ({department})? "):
            return Result.fail("Worker creation cancelled")

        created = self._call(f"Creating worker {name}...", lambda: self._api.create_worker(request.value))
        if created.is_failure:
            return created

        self._message(f"Successfully added worker with id = {created.value.id}.", "green")
        return Result.ok()

    def update_worker(self) -> Result:
        preview = self._preview_workers()
        if preview.is_failure:
            return preview

        worker_id = self._prompter.ask_int("Enter the id for the worker to update: ")
        if not is_valid_numeric_input(worker_id):
            return Result.fail("Worker id must be greater than 0")

        name = self._optional_text("Do you wish to update the worker's name? ", "Enter updated name: ")
        department = self._optional_text("Do you wish to update the worker's department? ", "Enter updated department: ")
        email = self._optional_text("Do you wish to update the worker's email address? ", "Enter updated email address: ")
        phone_number = self._optional_text(
            "Do you wish to update the worker's telephone number? ", "Enter updated telephone number: "
        )

        request = build_update_worker_request(name, department, email, phone_number)
        if request.is_failure:
            return request

        updated = self._call(
            f"Updating worker {worker_id}...", lambda: self._api.update_worker(worker_id, request.value)
        )
        if updated.is_failure:
            return updated

        self._message(f"Successfully updated worker {worker_id}", "green")
        self.display_worker(updated.value)
        return Result.ok()

    def delete_worker(self) -> Result:
        preview = self._preview_workers()
        if preview.is_failure:
            return preview

        worker_id = self._prompter.ask_int("Enter the id of the worker to delete: ")
        if not is_valid_numeric_input(worker_id):
            return Result.fail("Worker id must be greater than 0")

        if not self._prompter.confirm(f"Are you sure that you wish to delete worker {worker_id} and all their shifts? "):
            return Result.fail("Deletion cancelled")

        deleted = self._call(f"Deleting worker {worker_id}...", lambda: self._api.delete_worker(worker_id))
        if deleted.is_failure:
            return deleted

        self._message(f"Successfully deleted worker with id = {worker_id}.", "green")
        return Result.ok()

    def show_worker_by_id(self) -> Result:
        preview = self._preview_workers()
        if preview.is_failure:
            return preview

        worker_id = self._prompter.ask_int("Enter the id of the worker to see detailed information for: ")
        if not is_valid_numeric_input(worker_id):
            return Result.fail("Worker id must be greater than 0")

        retrieved = self._call(
            f"Retrieving information for worker {worker_id}...", lambda: self._api.get_worker_by_id(worker_id)
        )
        if retrieved.is_failure:
            return retrieved

        self.display_worker(retrieved.value)
        return Result.ok()

    def show_worker_by_name(self) -> Result:
        name = self._prompter.ask_text("Enter the name (or part of it) of the worker to search for: ").strip()
        if not is_valid_input_string(name):
            return Result.fail("Invalid worker name")

        retrieved = self._call(f"Retrieving workers matching {name}...", lambda: self._api.get_workers(name))
        if retrieved.is_failure:
            return retrieved

        self.show_paginated(retrieved.value, f"workers matching the name {name}", self.display_workers)
        return Result.ok()

    def show_workers(self) -> Result:
        retrieved = self._call("Retrieving workers...", lambda: self._api.get_workers())
        if retrieved.is_failure:
            return retrieved

        self.show_paginated(retrieved.value, "workers", self.display_workers)
        return Result.ok()

    # --- shifts ----------------------------------------------------------

    def create_shift(self) -> Result:
        preview = self._preview_workers()
        if preview.is_failure:
            return preview

        worker_id = self._prompter.ask_int("Enter the id of the worker to log a shift for: ")
        if not is_valid_numeric_input(worker_id):
            return Result.fail("Worker id must be greater than 0")

        start_time = build_date_time(self._prompter.ask_text(f"Enter the start time in format {DATE_FORMAT_DISPLAY}: "))
        if start_time.is_failure:
            return start_time
        end_time = build_date_time(self._prompter.ask_text(f"Enter the end time in format {DATE_FORMAT_DISPLAY}: "))
        if end_time.is_failure:
            return end_time

        request = build_create_shift_request(worker_id, start_time.value, end_time.value)
        if request.is_failure:
            return request

        if not self._prompter.confirm(
            f"Log shift for worker {worker_id} from {start_time.value.strftime(DATE_FORMAT)} "
            f"to {end_time.value.strftime(DATE_FORMAT)}? "
        ):
            return Result.fail("Shift creation cancelled")

        created = self._call(f"Creating shift for worker {worker_id}...", lambda: self._api.create_shift(request.value))
        if created.is_failure:
            return created

        self._message(
            f"Shift {created.value.id} for worker with id = {created.value.worker_id} added "
            f"(duration {format_duration(created.value.duration)}).",
            "green",
        )
        return Result.ok()

    def update_shift(self) -> Result:
        preview = self._preview_shifts()
        if preview.is_failure:
            return preview

        shift_id = self._prompter.ask_int("Enter the id of the shift to update: ")
        if not is_valid_numeric_input(shift_id):
            return Result.fail("Shift id must be greater than 0")

        current = self._call(f"Retrieving shift {shift_id}...", lambda: self._api.get_shift_by_id(shift_id))
        if current.is_failure:
            return current
        shift = current.value

        worker_id = shift.worker_id
        if self._prompter.confirm(f"Do you wish to change the worker (currently {shift.worker_id}, {shift.worker_name})? "):
            worker_id = self._prompter.ask_int("Enter the id of the worker for this shift: ")
            if not is_valid_numeric_input(worker_id):
                return Result.fail("Worker id must be greater than 0")

        start_time = build_date_time(self._prompt_update_date("start", shift.start_time))
        if start_time.is_failure:
            return start_time
        end_time = build_date_time(self._prompt_update_date("end", shift.end_time))
        if end_time.is_failure:
            return end_time

        request = build_update_shift_request(worker_id, start_time.value, end_time.value)
        if request.is_failure:
            return request

        updated = self._call(f"Updating shift {shift_id}...", lambda: self._api.update_shift(shift_id, request.value))
        if updated.is_failure:
            return updated

        self._message(f"Shift {shift_id} for worker with id = {updated.value.worker_id} updated.", "green")
        self.display_shift(updated.value)
        return Result.ok()

    def delete_shift(self) -> Result:
        preview = self._preview_shifts()
        if preview.is_failure:
            return preview

        shift_id = self._prompter.ask_int("Enter the id of the shift to delete: ")
        if not is_valid_numeric_input(shift_id):
            return Result.fail("Shift id must be greater than 0")

        if not self._prompter.confirm(f"Are you sure you want to delete shift {shift_id}? "):
            return Result.fail("Deletion cancelled")

        deleted = self._call(f"Deleting shift {shift_id}...", lambda: self._api.delete_shift(shift_id))
        if deleted.is_failure:
            return deleted

        self._message(f"Successfully deleted shift with id = {shift_id}.", "green")
        return Result.ok()

    def show_shift_by_id(self) -> Result:
        preview = self._preview_shifts()
        if preview.is_failure:
            return preview

        shift_id = self._prompter.ask_int("Enter the id of the shift to see detailed information for: ")
        if not is_valid_numeric_input(shift_id):
            return Result.fail("Shift id must be greater than 0")

        retrieved = self._call(f"Retrieving shift {shift_id}...", lambda: self._api.get_shift_by_id(shift_id))
        if retrieved.is_failure:
            return retrieved

        self.display_shift(retrieved.value)
        return Result.ok()

    def show_shifts_by_worker_id(self) -> Result:
        preview = self._preview_workers()
        if preview.is_failure:
            return preview

        worker_id = self._prompter.ask_int("Enter the id of the worker whose shifts you wish to see: ")
        if not is_valid_numeric_input(worker_id):
            return Result.fail("Worker id must be greater than 0")

        retrieved = self._call(f"Retrieving shifts for worker {worker_id}...", lambda: self._api.get_shifts(worker_id))
        if retrieved.is_failure:
            return retrieved

        self.show_paginated(retrieved.value, f"shifts for worker {worker_id}", self.display_shifts)
        return Result.ok()

    def show_shifts(self) -> Result:
        retrieved = self._call("Retrieving shifts...", lambda: self._api.get_shifts())
        if retrieved.is_failure:
            return retrieved

        self.show_paginated(retrieved.value, "shifts", self.display_shifts)
        return Result.ok()

    # --- display ---------------------------------------------------------

    def show_paginated(self, items: Sequence[T], entity_name: str, display: Callable[[Sequence[T]], None]) -> None:
        if not items:
            self._message(f"No {entity_name} found", "yellow")
            return

        paginator = Paginator(items, self._page_size)
        while True:
            self._message(paginator.header(), "blue")
            display(paginator.current_page())

            choice = self._prompter.choose("Navigate pages", [c.value for c in paginator.choices()])
            try:
                if not paginator.navigate(choice):
                    return
            except ValueError as e:
                self._message(str(e), "red")

    def display_worker(self, worker: WorkerResponse) -> None:
        self._message(f"Information for worker {worker.id}:", "blue")
        self._message(f"Name: {worker.name}", "blue")
        self._message(f"Department: {worker.department}", "blue")
        self._message(f"Email Address: {worker.email or _NOT_AVAILABLE}", "blue")
        self._message(f"Telephone Number: {worker.phone_number or _NOT_AVAILABLE}", "blue")

    def display_shift(self, shift: ShiftResponse) -> None:
        self._message(f"Information for shift {shift.id}:", "blue")
        self._message(f"Worker id: {shift.worker_id}", "blue")
        self._message(f"Worker name: {shift.worker_name}", "blue")
        self._message(f"Worker department: {shift.worker_department}", "blue")
        self._message(f"Shift start time: {shift.start_time.strftime(DATE_FORMAT)}", "blue")
        self._message(f"Shift end time: {shift.end_time.strftime(DATE_FORMAT)}", "blue")
        self._message(f"Shift duration: {format_duration(shift.duration)}", "blue")

    def display_workers(self, workers: Sequence[WorkerResponse]) -> None:
        rows = [
            (str(w.id), w.name, w.department, w.email or _NOT_AVAILABLE, w.phone_number or _NOT_AVAILABLE)
            for w in workers
        ]
        headers = ("Id", "Name", "Department", "Email address", "Telephone number")
        click.echo(format_table("Workers", headers, rows), file=self._output)

    def display_shifts(self, shifts: Sequence[ShiftResponse]) -> None:
        rows = [
            (
                str(s.id),
                str(s.worker_id),
                s.worker_name,
                s.worker_department,
                s.start_time.strftime(DATE_FORMAT),
                s.end_time.strftime(DATE_FORMAT),
                format_duration(s.duration),
            )
            for s in shifts
        ]
        headers = ("Id", "Worker Id", "Worker Name", "Worker Department", "Start", "End", "Duration")
        click.echo(format_table("Shifts", headers, rows), file=self._output)

    # --- helpers ---------------------------------------------------------

    def _call(self, label: str, api_call: Callable[[], R]) -> R:
        """Announce and run one API call. Ctrl+C becomes a "Cancelled" failure."""
        self._message(label, "yellow")
        try:
            return api_call()
        except _INTERRUPTS:
            logger.info("%s cancelled by user", label)
            return ValueResult.fail(CANCELLED_MESSAGE)

    def _preview_workers(self) -> Result:
        workers = self._call("Retrieving workers...", lambda: self._api.get_workers())
        if workers.is_failure:
            return workers
        if not workers.value:
            return Result.fail("There are no workers yet, add a worker first")
        self.show_paginated(workers.value, "workers", self.display_workers)
        return Result.ok()

    def _preview_shifts(self) -> Result:
        shifts = self._call("Retrieving shifts...", lambda: self._api.get_shifts())
        if shifts.is_failure:
            return shifts
        if not shifts.value:
            return Result.fail("There are no shifts to display")
        self.show_paginated(shifts.value, "shifts", self.display_shifts)
        return Result.ok()

    def _optional_text(self, question: str, prompt: str) -> Optional[str]:
        return self._prompter.ask_text(prompt).strip() if self._prompter.confirm(question) else None

    def _prompt_update_date(self, label: str, current: datetime) -> str:
        if self._prompter.confirm(f"Do you wish to update the {label} time (currently {current.strftime(DATE_FORMAT)})? "):
            return self._prompter.ask_text(f"Enter updated {label} time (24-hour clock) in format {DATE_FORMAT_DISPLAY}: ")
        return current.strftime(DATE_FORMAT)

    def _message(self, message: str, fg: str = "cyan") -> None:
        click.echo(click.style(message, fg=fg), file=self._output)
