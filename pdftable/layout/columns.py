"""Column definitions and the ordered column registry."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from pdftable.enums import BorderSide, HorizontalAlign, PaddingDirection, VerticalAlign
from pdftable.exceptions import ColumnConfigurationError
from pdftable.layout.padding import get_padding_value

# fn(table, row, final, column, position) -> display value
ContentFn = Callable[..., Any]

_BORDER_LETTERS = {
    "L": BorderSide.LEFT,
    "T": BorderSide.TOP,
    "B": BorderSide.BOTTOM,
    "R": BorderSide.RIGHT,
}


def _parse_border(value) -> frozenset[BorderSide]:
    if not value:
        return frozenset()
    if isinstance(value, BorderSide):
        return frozenset({value})
    if isinstance(value, str):
        try:
            return frozenset({BorderSide(value.lower())})
        except ValueError:
            pass
        letters = value.upper()
        if not all(letter in _BORDER_LETTERS for letter in letters):
            raise ValueError(f"unknown border sides '{value}', expected a subset of LTBR")
        return frozenset(_BORDER_LETTERS[letter] for letter in letters)
    sides = set()
    for item in value:
        sides |= _parse_border(item)
    return frozenset(sides)


def _is_open(bound) -> bool:
    return bound is None or bound == ""


class Column(BaseModel):
    """A table column.

    Besides the declared fields, any extra keyword is stored on the column and
    can be read back with ``ColumnRegistry.get_param``.

    Attributes:
        id: Key of the column value in each row mapping
        width: Column width in surface units, padding included
        header: Header label used to build the header row
        height: Minimum body cell height (None means the natural text height)
        header_height: Minimum header cell height
        align: Horizontal text alignment
        valign: Vertical text alignment inside the row height
        border: Sides drawn around body cells ("LTBR" letters or side names)
        header_border: Sides drawn around the header cell
        fill: Fill body cells with the current surface fill colour
        header_fill: Fill the header cell with the current surface fill colour
        padding: 0 to 4 values, top/right/bottom/left shorthand order
        cache: When False, content_fn is called again at draw time with final=True
        hidden: Hidden columns are neither drawn nor counted in widths
        content_fn: Produces the body cell value from the row
        header_content_fn: Produces the header cell value
    """

    model_config = ConfigDict(
        extra="allow", validate_assignment=True, arbitrary_types_allowed=True
    )

    id: str | int
    width: float = Field(gt=0)
    header: Any = None
    height: float | None = None
    header_height: float | None = None
    align: HorizontalAlign = HorizontalAlign.LEFT
    valign: VerticalAlign = VerticalAlign.TOP
    border: frozenset[BorderSide] = frozenset()
    header_border: frozenset[BorderSide] = frozenset()
    fill: bool = False
    header_fill: bool = False
    padding: tuple[float, ...] = ()
    cache: bool = True
    hidden: bool = False
    content_fn: ContentFn | None = None
    header_content_fn: ContentFn | None = None
    font_family: str | None = None
    font_style: str | None = None
    font_size: float | None = None

    @field_validator("border", "header_border", mode="before")
    @classmethod
    def _coerce_border(cls, value):
        return _parse_border(value)

    @field_validator("padding", mode="before")
    @classmethod
    def _coerce_padding(cls, value):
        if value is None:
            return ()
        if isinstance(value, (int, float)):
            return (value,)
        value = tuple(value)
        if len(value) > 4:
            raise ValueError(f"padding accepts at most 4 values, got {len(value)}")
        return value

    @model_validator(mode="after")
    def _check_text_width(self):
        padding = get_padding_value(PaddingDirection.HORIZONTAL, self.padding)
        if padding >= self.width:
            raise ValueError(
                f"horizontal padding {padding} leaves no room for text in width {self.width}"
            )
        return self

    def min_height(self, is_header: bool = False) -> float | None:
        return self.header_height if is_header else self.height

    def get_content_fn(self, is_header: bool = False) -> ContentFn | None:
        return self.header_content_fn if is_header else self.content_fn

    def get_border(self, is_header: bool = False) -> frozenset[BorderSide]:
        return self.header_border if is_header else self.border

    def has_fill(self, is_header: bool = False) -> bool:
        return self.header_fill if is_header else self.fill

    def text_options(self) -> dict[str, Any]:
        """Options forwarded to the surface when measuring and drawing text"""
        options = {"align": self.align.value}
        for key in ("font_family", "font_style", "font_size"):
            value = getattr(self, key)
            if value is not None:
                options[key] = value
        return options


class ColumnRegistry:
    """Ordered set of columns with visibility and width queries.

    The registry never fires events; the table wraps width changes so that
    listeners are notified.
    """

    def __init__(self):
        self.columns: list[Column] = []
        self.defaults: dict[str, Any] = {}

    def set_defaults(self, params: Mapping[str, Any] | None) -> None:
        self.defaults = dict(params or {})

    def build(self, column: Column | Mapping[str, Any]) -> Column:
        """Create a column, defaults first and caller fields on top"""
        if isinstance(column, Column):
            fields = {key: getattr(column, key) for key in column.model_fields_set}
            fields.update(column.model_extra or {})
        else:
            fields = dict(column)
        data = {**self.defaults, **fields}
        try:
            return Column(**data)
        except ValidationError as e:
            raise ColumnConfigurationError(data.get("id"), str(e)) from e

    def add(self, column: Column | Mapping[str, Any]) -> Column:
        column = self.build(column)
        if self.get(column.id) is not None:
            raise ColumnConfigurationError(column.id, "id is already registered")
        self.columns.append(column)
        return column

    def remove(self, column_id) -> Column | None:
        column = self.get(column_id)
        if column is not None:
            self.columns.remove(column)
        return column

    def clear(self) -> None:
        self.columns = []

    def get_columns(self, with_hidden: bool = False) -> list[Column]:
        if with_hidden:
            return list(self.columns)
        return [column for column in self.columns if not column.hidden]

    def get(self, column_id) -> Column | None:
        return next((c for c in self.columns if c.id == column_id), None)

    def get_param(self, column_id, key: str) -> Any:
        column = self.get(column_id)
        return getattr(column, key, None) if column is not None else None

    def set_param(self, column_id, key: str, value: Any) -> Column | None:
        column = self.get(column_id)
        if column is None:
            return None
        if key == "id" and value != column_id and self.get(value) is not None:
            raise ColumnConfigurationError(value, "id is already registered")
        try:
            # a failed assignment must leave the column untouched
            Column(**{**column.model_dump(), key: value})
            setattr(column, key, value)
        except ValidationError as e:
            raise ColumnConfigurationError(column_id, str(e)) from e
        return column

    def width_between(self, column_a=None, column_b=None) -> float:
        """Sum widths from column_a to column_b, both included.

        Example: registry.width_between("B", "D")
        <pre>
        | A | B | C | D | E |
        |   |-> | ->| ->|   |
        </pre>

        Without column_a the sum starts at the first column and stops before
        column_b (see width_until). Without column_b the sum runs to the end.
        """
        width = 0
        summing = False
        for column in self.get_columns():
            if _is_open(column_a) or column.id == column_a:
                summing = True
            if _is_open(column_a) and column.id == column_b:
                break
            if summing:
                width += column.width
            if column.id == column_b:
                break
        return width

    def width_until(self, column_id) -> float:
        """Width from the first column up to column_id, excluded"""
        return self.width_between(None, column_id)

    def width_from(self, column_id) -> float:
        """Width from column_id, included, to the last column"""
        return self.width_between(column_id, None)

    def total_width(self) -> float:
        return self.width_between(None, None)
