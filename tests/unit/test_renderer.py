import pytest

from pdftable.enums import TableEvent
from pdftable.layout.renderer import CellPosition
from pdftable.table import PdfTable
from tests.utils.recording_surface import RecordingSurface


def make_table(surface, **kwargs):
    params = {
        "min_row_height": 1,
        "bottom_margin": 5,
        "show_headers": True,
        "repeat_header": True,
        "new_page_fn": lambda t: t.surface.add_page(),
    }
    params.update(kwargs)
    table = PdfTable(surface, **params)
    table.add_columns(
        [{"id": "a", "width": 100, "header": "A"}, {"id": "b", "width": 100, "header": "B"}]
    )
    return table


def record_flow(table):
    """Log row and page events with the row they concern"""
    log = []
    table.on_row_add(lambda t, row, m: log.append(("row-add", row["a"])))
    table.on_row_added(lambda t, row, m: log.append(("row-added", row["a"])))
    table.on_page_add(lambda t: log.append(("page-add", t.surface.pages)))
    table.on_page_added(lambda t: log.append(("page-added", t.surface.pages)))
    table.on_header_add(lambda t, header_row: log.append(("header-add", t.surface.pages)))
    table.on_header_added(lambda t, header_row, m: log.append(("header-added", t.surface.pages)))
    return log


class TestSingleRow:
    """Tests for a single row that fits on the page."""

    def test_cursor_after_row(self):
        surface = RecordingSurface(text_heights={"x": 20})
        table = make_table(surface, show_headers=False)

        table.add_body([{"a": "x", "b": "x"}])

        assert surface.pages == 1
        assert surface.get_y() == 36 + 20 + 10
        assert table.context.y == surface.get_y()
        assert [(t.x, t.y) for t in surface.texts] == [(36, 36), (136, 36)]

    def test_starts_at_surface_cursor(self):
        surface = RecordingSurface()
        surface.set_y(500)
        table = make_table(surface, show_headers=False)

        table.add_body([{"a": "x", "b": "y"}])

        assert surface.texts[0].y == 500

    def test_row_spacing_uses_line_height(self):
        surface = RecordingSurface(line_height=12)
        table = make_table(surface, min_row_height=2, show_headers=False)
        assert table.row_spacing == 24

        table.add_body([{"a": "x"}])

        assert surface.get_y() == 36 + 10 + 24


class TestPagination:
    """Tests for page breaks over a 50 row body."""

    @pytest.fixture
    def surface(self):
        return RecordingSurface(default_text_height=20)

    @pytest.fixture
    def rows(self):
        return [{"a": f"r{i}", "b": "x"} for i in range(50)]

    def test_single_break(self, surface, rows):
        table = make_table(surface, min_row_height=0)
        log = record_flow(table)

        table.add_body(rows)

        # header 36-56, then rows of 20 until the 801 break point
        assert surface.pages == 2
        assert [e for e in log if e[0] == "page-add"] == [("page-add", 1)]
        first_page = surface.drawn(page=1)
        assert first_page[:2] == ["A", "B"]
        assert first_page[-2:] == ["r36", "x"]
        assert table.context.page_index == 1

    def test_header_redrawn_before_breaking_row(self, surface, rows):
        table = make_table(surface, min_row_height=0)

        table.add_body(rows)

        second_page = surface.texts[len(surface.drawn(page=1)):]
        assert [t.text for t in second_page[:3]] == ["A", "B", "r37"]
        assert second_page[0].y == 36
        assert second_page[2].y == 56
        assert surface.get_y() == 56 + 13 * 20

    def test_hook_order_around_break(self, surface, rows):
        table = make_table(surface, min_row_height=0)
        log = record_flow(table)

        table.add_body(rows)

        start = log.index(("row-add", "r37"))
        assert log[start - 1] == ("row-added", "r36")
        assert log[start:start + 7] == [
            ("row-add", "r37"),
            ("page-add", 1),
            ("page-added", 2),
            ("header-add", 2),
            ("header-added", 2),
            ("row-added", "r37"),
            ("row-add", "r38"),
        ]

    def test_no_header_repeat(self, surface, rows):
        table = make_table(surface, min_row_height=0, repeat_header=False)

        table.add_body(rows)

        assert surface.drawn(page=2)[:2] == ["r37", "x"]
        assert surface.drawn().count("A") == 1

    def test_no_headers(self, surface, rows):
        table = make_table(surface, min_row_height=0, show_headers=False)

        table.add_body(rows)

        # rows 36-56 up to 776-796: 38 rows on the first page
        assert "A" not in surface.drawn()
        assert surface.drawn(page=2)[0] == "r38"

    def test_without_new_page_fn(self, surface, rows):
        table = make_table(surface, min_row_height=0, new_page_fn=None)
        log = record_flow(table)

        table.add_body(rows)

        assert surface.pages == 1
        assert table.context.page_index == 0
        assert len([e for e in log if e[0] == "page-add"]) == 13
        assert not any(e[0] == "page-added" for e in log)
        assert len([e for e in log if e[0] == "header-add"]) == 1

    def test_break_decisions_are_deterministic(self, rows):
        pages = []
        for _ in range(2):
            surface = RecordingSurface(default_text_height=20)
            make_table(surface, min_row_height=0).add_body(rows)
            pages.append([(t.text, t.page, t.y) for t in surface.texts])
        assert pages[0] == pages[1]

    def test_header_that_does_not_fit(self, surface):
        table = make_table(surface)
        log = record_flow(table)
        surface.set_y(790)

        table.add_header()

        assert log == [
            ("header-add", 1),
            ("page-add", 1),
            ("page-added", 2),
            ("header-added", 2),
        ]
        assert surface.drawn(page=2) == ["A", "B"]


class TestCellDrawing:
    """Tests for cell positioning and decorations."""

    def test_padding_and_vertical_alignment(self):
        surface = RecordingSurface(text_heights={"tall": 40, "x": 10})
        table = PdfTable(surface, show_headers=False)
        table.add_columns(
            [
                {"id": "a", "width": 100},
                {"id": "b", "width": 100, "padding": [2, 4], "valign": "bottom"},
                {"id": "c", "width": 100, "padding": [2, 4], "valign": "center"},
            ]
        )

        table.add_body([{"a": "tall", "b": "x", "c": "x"}])

        tall, bottom, center = surface.texts
        assert (tall.x, tall.y, tall.width) == (36, 36, 100)
        assert (bottom.x, bottom.y, bottom.width) == (140, 36 + 2 + 30, 92)
        assert (center.x, center.y, center.width) == (240, 36 + 2 + 15, 92)
        assert bottom.height == 40

    def test_header_cells_are_padded(self):
        surface = RecordingSurface()
        table = PdfTable(surface)
        table.add_columns([{"id": "a", "width": 100, "header": "A", "padding": [3, 6]}])

        table.add_header()

        assert (surface.texts[0].x, surface.texts[0].y) == (42, 39)

    def test_empty_content_is_not_drawn(self):
        surface = RecordingSurface()
        table = PdfTable(surface, show_headers=False)
        table.add_columns([{"id": "a", "width": 100}, {"id": "b", "width": 100}])

        table.add_body([{"a": None, "b": 0}, {"a": ""}])

        assert surface.drawn() == ["0"]

    def test_text_options_forwarded(self):
        surface = RecordingSurface()
        table = PdfTable(surface, show_headers=False)
        table.add_columns([{"id": "a", "width": 100, "align": "right", "font_size": 7}])

        table.add_body([{"a": "x"}])

        assert surface.texts[0].options == {"align": "right", "font_size": 7}

    def test_borders(self):
        surface = RecordingSurface(text_heights={"x": 20})
        table = PdfTable(surface, show_headers=False)
        table.add_columns([{"id": "a", "width": 100, "border": "LTBR"}])

        table.add_body([{"a": "x"}])

        assert surface.lines == [
            (36, 36, 36, 56),
            (36, 36, 136, 36),
            (36, 56, 136, 56),
            (136, 36, 136, 56),
        ]

    def test_header_border_and_fill(self):
        surface = RecordingSurface()
        table = PdfTable(surface)
        table.add_columns(
            [{"id": "a", "width": 100, "header": "A", "header_border": "B", "header_fill": True}]
        )

        table.add_body([{"a": "x"}])

        assert surface.rects == [(36, 36, 100, 10, None, 1)]
        assert surface.lines == [(36, 46, 136, 46)]

    def test_hidden_column_not_drawn(self):
        surface = RecordingSurface()
        table = PdfTable(surface, show_headers=False)
        table.add_columns([{"id": "a", "width": 100, "hidden": True}, {"id": "b", "width": 50}])

        table.add_body([{"a": "hidden", "b": "shown"}])

        assert surface.drawn() == ["shown"]
        assert surface.texts[0].x == 36


class TestContentCache:
    """Tests for content functions with and without cache."""

    def _table(self, cache):
        calls = []

        def content(t, row, final, column, position):
            calls.append((final, position))
            return "done" if final else "measured"

        surface = RecordingSurface()
        table = PdfTable(surface, show_headers=False)
        table.add_columns(
            [{"id": "a", "width": 100, "padding": [1, 2], "cache": cache, "content_fn": content}]
        )
        table.add_body([{"a": "raw"}])
        return surface, calls

    def test_cached_content_called_once(self):
        surface, calls = self._table(cache=True)
        assert calls == [(False, None)]
        assert surface.drawn() == ["measured"]

    def test_uncached_content_called_at_draw_time(self):
        surface, calls = self._table(cache=False)
        assert calls == [(False, None), (True, CellPosition(36, 36, 2, 1))]
        assert surface.drawn() == ["done"]


class TestBodyEvents:
    """Tests for the lifecycle of add_body."""

    def test_event_order(self, table, event_log):
        table.add_columns([{"id": "a", "width": 100, "header": "A"}])
        event_log.clear()

        table.add_body([{"a": 1}, {"a": 2}])

        assert event_log == [
            TableEvent.BODY_ADD,
            TableEvent.HEADER_ADD,
            TableEvent.HEADER_HEIGHT_CALCULATE,
            TableEvent.HEADER_HEIGHT_CALCULATED,
            TableEvent.HEADER_ADDED,
            TableEvent.ROW_HEIGHT_CALCULATE,
            TableEvent.ROW_HEIGHT_CALCULATED,
            TableEvent.ROW_ADD,
            TableEvent.ROW_ADDED,
            TableEvent.ROW_ADD,
            TableEvent.ROW_ADDED,
            TableEvent.BODY_ADDED,
        ]

    def test_measurements_available_before_drawing(self, table, surface):
        surface.text_heights = {"1": 10, "2": 30}
        table.add_columns([{"id": "a", "width": 100}])
        seen = []
        table.on_row_height_calculated(
            lambda t, rows, measurements: seen.append([m.height for m in measurements])
        )

        table.add_body([{"a": 1}, {"a": 2}])

        assert seen == [[10, 30]]

    def test_listener_error_aborts_pass(self, table, surface):
        table.add_columns([{"id": "a", "width": 100}])

        def failing(t, row, measurement):
            if row["a"] == 2:
                raise RuntimeError("stop")

        table.on_row_add(failing)

        with pytest.raises(RuntimeError):
            table.add_body([{"a": 1}, {"a": 2}, {"a": 3}])
        assert "1" in surface.drawn()
        assert "3" not in surface.drawn()

    def test_empty_body(self, table, event_log):
        table.add_columns([{"id": "a", "width": 100}])
        event_log.clear()

        table.set_show_headers(False).add_body(None)

        assert event_log == [
            TableEvent.BODY_ADD,
            TableEvent.ROW_HEIGHT_CALCULATE,
            TableEvent.ROW_HEIGHT_CALCULATED,
            TableEvent.BODY_ADDED,
        ]
