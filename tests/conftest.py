import pytest

from pdftable.table import PdfTable
from tests.utils.recording_surface import RecordingSurface


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def table(surface):
    """Table on a recording surface with pages added through the surface"""
    return PdfTable(
        surface,
        min_row_height=1,
        bottom_margin=5,
        show_headers=True,
        repeat_header=True,
        new_page_fn=lambda t: t.surface.add_page(),
    )


@pytest.fixture
def event_log(table):
    """Names of every table event in firing order"""
    from pdftable.enums import TableEvent

    log = []
    for event in TableEvent:
        table.on(event, lambda t, *payload, _event=event: log.append(_event))
    return log
