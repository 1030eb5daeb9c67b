from datetime import datetime

from shift_logger.console.request_builders import (
    build_create_shift_request,
    build_date_time,
    build_update_shift_request,
    build_update_worker_request,
    build_worker_request,
)

START = datetime(2024, 1, 2, 8, 0)
END = datetime(2024, 1, 2, 16, 0)


def test_build_date_time_parses_console_format():
    result = build_date_time(" 01-02-2024 08:00 ")

    assert result.value == START


def test_build_date_time_rejects_other_formats():
    for value in ("2024-01-02 08:00", "1-2-2024 8:00", "", "01-02-2024"):
        result = build_date_time(value)
        assert result.error == "Invalid date, date must match format: MM-dd-yyyy HH:mm"


def test_worker_request_requires_name_and_department():
    assert build_worker_request("", "Ops").error == "Worker name must be provided"
    assert build_worker_request("Alice", "  ").error == "Worker department must be provided"

    request = build_worker_request(" Alice ", "Ops", email=" ", phone_number="555-0101").value
    assert request.name == "Alice"
    assert request.email is None
    assert request.phone_number == "555-0101"


def test_update_worker_request_needs_one_field():
    assert build_update_worker_request(None, " ", None, "").is_failure
    assert build_update_worker_request(None, "Logistics", None, None).value.department == "Logistics"


def test_shift_requests_check_worker_and_times():
    assert build_create_shift_request(0, START, END).error == "Worker id must be greater than 0"
    assert build_create_shift_request(1, END, START).error == "End time must come after start time"
    assert build_update_shift_request(1, START, START).error == "End time must come after start time"

    request = build_update_shift_request(2, START, END).value
    assert (request.worker_id, request.start_time, request.end_time) == (2, START, END)
