from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from pdftable.table import PdfTable


@runtime_checkable
class TablePlugin(Protocol):
    """Protocol for table plugins.

    ``configure`` is called once by ``PdfTable.add_plugin``; hooks subscribed
    from there belong to the plugin and are dropped by ``remove_plugin``.
    """

    id: str

    def configure(self, table: PdfTable) -> None: ...
