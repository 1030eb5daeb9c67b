from __future__ import annotations

import io
from datetime import datetime, timedelta

import pytest

from shift_logger.console.ui import ShiftLoggerUI
from shift_logger.core.constants import CANCELLED_MESSAGE
from shift_logger.core.enums import MenuOption
from shift_logger.core.result import Result, ValueResult
from shift_logger.shifts.dto import ShiftResponse
from shift_logger.workers.dto import WorkerResponse

ALICE = WorkerResponse(id=1, name="Alice", department="Ops")
START = datetime(2024, 1, 2, 8, 0)
END = datetime(2024, 1, 2, 16, 30)
ALICE_SHIFT = ShiftResponse(
    id=1,
    worker_id=1,
    worker_name="Alice",
    worker_department="Ops",
    start_time=START,
    end_time=END,
    duration=END - START,
)


class ScriptedPrompter:
    """Replays canned answers; an exception class in a script is raised instead."""

    def __init__(self, *, menu=(), texts=(), ints=(), confirms=(), choices=()):
        self.menu = list(menu)
        self.texts = list(texts)
        self.ints = list(ints)
        self.confirms = list(confirms)
        self.choices = list(choices)
        self.offered = []
        self.pauses = 0

    @staticmethod
    def _next(script):
        answer = script.pop(0)
        if isinstance(answer, type) and issubclass(answer, BaseException):
            raise answer()
        return answer

    def ask_text(self, message):
        return self._next(self.texts)

    def ask_int(self, message):
        return self._next(self.ints)

    def confirm(self, message):
        return self._next(self.confirms)

    def choose(self, title, choices):
        self.offered.append(list(choices))
        return self._next(self.choices)

    def select_menu(self, options):
        return self._next(self.menu)

    def pause(self):
        self.pauses += 1


class FakeApi:
    def __init__(self, workers=(ALICE,), shifts=(ALICE_SHIFT,)):
        self.workers = list(workers)
        self.shifts = list(shifts)
        self.calls = []
        self.raise_on = None

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if self.raise_on == name:
            raise KeyboardInterrupt

    def get_workers(self, name_filter=None):
        self._record("get_workers", name_filter)
        return ValueResult.ok(list(self.workers))

    def get_worker_by_id(self, worker_id):
        self._record("get_worker_by_id", worker_id)
        return ValueResult.ok(ALICE)

    def create_worker(self, request):
        self._record("create_worker", request)
        return ValueResult.ok(WorkerResponse(id=2, name=request.name, department=request.department))

    def update_worker(self, worker_id, request):
        self._record("update_worker", worker_id, request)
        return ValueResult.ok(ALICE)

    def delete_worker(self, worker_id):
        self._record("delete_worker", worker_id)
        return Result.ok()

    def get_shifts(self, worker_id=None):
        self._record("get_shifts", worker_id)
        return ValueResult.ok(list(self.shifts))

    def get_shift_by_id(self, shift_id):
        self._record("get_shift_by_id", shift_id)
        return ValueResult.ok(ALICE_SHIFT)

    def create_shift(self, request):
        self._record("create_shift", request)
        return ValueResult.ok(ALICE_SHIFT)

    def update_shift(self, shift_id, request):
        self._record("update_shift", shift_id, request)
        return ValueResult.ok(ALICE_SHIFT)

    def delete_shift(self, shift_id):
        self._record("delete_shift", shift_id)
        return Result.ok()

    def called(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def output():
    return io.StringIO()


def make_ui(api, prompter, output):
    return ShiftLoggerUI(api, output=output, prompter=prompter)


def test_invalid_worker_input_never_reaches_the_api(output):
    api = FakeApi()
    prompter = ScriptedPrompter(texts=["   ", "Ops"], confirms=[False, False])

    result = make_ui(api, prompter, output).run_operation(MenuOption.ADD_WORKER)

    assert result.error == "Worker name must be provided"
    assert api.calls == []


def test_add_worker_after_confirmation(output):
    api = FakeApi()
    prompter = ScriptedPrompter(texts=["Bob", "Logistics", "bob@example.com"], confirms=[True, False, True])

    result = make_ui(api, prompter, output).run_operation(MenuOption.ADD_WORKER)

    assert result.is_success
    (_, request), = api.called("create_worker")
    assert request.email == "bob@example.com"
    assert request.phone_number is None
    assert "Successfully added worker with id = 2." in output.getvalue()


def test_declined_delete_skips_the_api(output):
    api = FakeApi()
    prompter = ScriptedPrompter(ints=[1], confirms=[False], choices=["Exit"])

    result = make_ui(api, prompter, output).run_operation(MenuOption.DELETE_WORKER)

    assert result.error == "Deletion cancelled"
    assert api.called("delete_worker") == []


def test_non_positive_id_short_circuits(output):
    api = FakeApi()
    prompter = ScriptedPrompter(ints=[0], choices=["Exit"])

    result = make_ui(api, prompter, output).run_operation(MenuOption.SHOW_SHIFT_BY_ID)

    assert result.error == "Shift id must be greater than 0"
    assert api.called("get_shift_by_id") == []


def test_shift_with_end_before_start_is_rejected_locally(output):
    api = FakeApi()
    prompter = ScriptedPrompter(ints=[1], texts=["01-02-2024 17:00", "01-02-2024 08:00"], choices=["Exit"])

    result = make_ui(api, prompter, output).run_operation(MenuOption.CREATE_SHIFT)

    assert result.error == "End time must come after start time"
    assert api.called("create_shift") == []


def test_shift_with_bad_date_is_rejected_locally(output):
    api = FakeApi()
    prompter = ScriptedPrompter(ints=[1], texts=["2024-01-02 08:00"], choices=["Exit"])

    result = make_ui(api, prompter, output).run_operation(MenuOption.CREATE_SHIFT)

    assert result.error == "Invalid date, date must match format: MM-dd-yyyy HH:mm"
    assert api.called("create_shift") == []


def test_create_shift_sends_parsed_times(output):
    api = FakeApi()
    prompter = ScriptedPrompter(
        ints=[1], texts=["01-02-2024 08:00", "01-02-2024 16:30"], confirms=[True], choices=["Exit"]
    )

    result = make_ui(api, prompter, output).run_operation(MenuOption.CREATE_SHIFT)

    assert result.is_success
    (_, request), = api.called("create_shift")
    assert (request.worker_id, request.start_time, request.end_time) == (1, START, END)


def test_update_shift_keeps_fields_not_changed(output):
    api = FakeApi()
    prompter = ScriptedPrompter(ints=[1], confirms=[False, False, True], texts=["01-02-2024 18:00"], choices=["Exit"])

    result = make_ui(api, prompter, output).run_operation(MenuOption.UPDATE_SHIFT)

    assert result.is_success
    (_, shift_id, request), = api.called("update_shift")
    assert shift_id == 1
    assert request.worker_id == 1
    assert request.start_time == START
    assert request.end_time == datetime(2024, 1, 2, 18, 0)


def test_interrupt_during_an_operation_is_cancellation(output):
    api = FakeApi()
    api.raise_on = "get_workers"
    ui = make_ui(api, ScriptedPrompter(), output)

    result = ui.run_operation(MenuOption.SHOW_WORKERS)
    ui.show_result(result)

    assert result.error == CANCELLED_MESSAGE
    assert "Operation cancelled by user" in output.getvalue()


def test_interrupt_at_a_prompt_is_cancellation(output):
    api = FakeApi()
    prompter = ScriptedPrompter(texts=[KeyboardInterrupt])

    result = make_ui(api, prompter, output).run_operation(MenuOption.SHOW_WORKER_BY_NAME)

    assert result.error == CANCELLED_MESSAGE


def test_show_workers_paginates(output):
    api = FakeApi(workers=[WorkerResponse(id=i, name=f"Worker {i}", department="Ops") for i in range(1, 13)])
    prompter = ScriptedPrompter(menu=[MenuOption.SHOW_WORKERS, MenuOption.EXIT], choices=["Next", "Exit"])

    make_ui(api, prompter, output).run()

    assert prompter.offered == [["Exit", "Next"], ["Previous", "Exit"]]
    assert "Page 1 of 2 (showing 10 of 12)" in output.getvalue()
    assert "Page 2 of 2 (showing 2 of 12)" in output.getvalue()
    assert prompter.pauses == 1


def test_empty_list_reports_nothing_found(output):
    api = FakeApi(shifts=[])

    result = make_ui(api, ScriptedPrompter(), output).run_operation(MenuOption.SHOW_SHIFTS)

    assert result.is_success
    assert "No shifts found" in output.getvalue()


def test_exit_and_interrupt_leave_the_loop(output):
    api = FakeApi()

    exit_prompter = ScriptedPrompter(menu=[MenuOption.EXIT])
    make_ui(api, exit_prompter, output).run()
    interrupt_prompter = ScriptedPrompter(menu=[KeyboardInterrupt])
    make_ui(api, interrupt_prompter, output).run()

    assert exit_prompter.pauses == 0
    assert interrupt_prompter.pauses == 0
    assert api.calls == []


def test_failures_are_shown_after_each_operation(output):
    api = FakeApi()
    prompter = ScriptedPrompter(menu=[MenuOption.SHOW_WORKER_BY_ID, MenuOption.EXIT], ints=[-4], choices=["Exit"])

    make_ui(api, prompter, output).run()

    assert "Worker id must be greater than 0" in output.getvalue()
    assert prompter.pauses == 1
