import logging

from infrastructure.observability import entry_log_context, make_run_tag, set_run_context
from infrastructure.observability.logging import ContextInjectFilter, cv_entry_id


def _record() -> logging.LogRecord:
    return logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)


def test_run_tag_is_stable_and_short() -> None:
    assert make_run_tag("20260101_full_entries") == make_run_tag("20260101_full_entries")
    assert len(make_run_tag("20260101_full_entries")) == 8


def test_filter_injects_run_and_entry() -> None:
    run_tag = set_run_context("run-1")
    assert run_tag == make_run_tag("run-1")

    with entry_log_context(42):
        record = _record()
        assert ContextInjectFilter().filter(record)

    assert record.run == run_tag
    assert record.entry == "42"


def test_entry_context_is_restored_after_the_block() -> None:
    with entry_log_context("outer"):
        with entry_log_context("inner"):
            assert cv_entry_id.get() == "inner"
        assert cv_entry_id.get() == "outer"

    record = _record()
    ContextInjectFilter().filter(record)
    assert record.entry == "-"
