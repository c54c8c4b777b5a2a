"""Tests for the text and in-memory result sinks."""

import pytest

from src.airline_router.adapters.sinks import MemoryResultSink, TextFileResultSink
from src.airline_router.schemas.route import RouteRequest, RouteResult


@pytest.fixture
def results():
    found = RouteResult.from_legs(RouteRequest("B", "B", 1), ["B"], [])
    missing = RouteResult.no_route(RouteRequest("A", "C", 1))
    invalid = RouteResult.invalid(RouteRequest("A", "Z", 1), "unknown")
    return [found, missing, invalid]


class TestTextFileResultSink:
    def test_writes_one_line_per_result_in_order(self, tmp_path, results):
        path = tmp_path / "nested" / "output.out"

        with TextFileResultSink(path) as sink:
            written = sink.write_all(results)

        assert written == 3
        assert path.read_text().splitlines() == ["B 0.00000", "no route", "invalid request"]

    def test_truncates_existing_file(self, tmp_path, results):
        path = tmp_path / "output.out"
        path.write_text("stale\nstale\nstale\nstale\n")

        with TextFileResultSink(path) as sink:
            sink.write(results[1])

        assert path.read_text() == "no route\n"

    def test_lines_visible_after_flush_interval(self, tmp_path):
        path = tmp_path / "output.out"
        sink = TextFileResultSink(path, flush_interval=2)

        sink.write_line("one")
        sink.write_line("two")

        assert path.read_text() == "one\ntwo\n"
        assert sink.lines_written == 2
        sink.close()

    def test_close_is_idempotent(self, tmp_path, results):
        sink = TextFileResultSink(tmp_path / "output.out")
        sink.write(results[0])

        sink.close()
        sink.close()

        assert (tmp_path / "output.out").read_text() == "B 0.00000\n"

    def test_opens_lazily(self, tmp_path):
        path = tmp_path / "output.out"
        TextFileResultSink(path)

        assert not path.exists()

    def test_invalid_flush_interval(self, tmp_path):
        with pytest.raises(ValueError):
            TextFileResultSink(tmp_path / "output.out", flush_interval=0)


class TestMemoryResultSink:
    def test_collects_results(self, results):
        sink = MemoryResultSink()

        with sink:
            sink.write_all(results)

        assert sink.results == results
        assert sink.lines == ["B 0.00000", "no route", "invalid request"]
