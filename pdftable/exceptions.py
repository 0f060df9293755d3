"""Exception hierarchy for pdftable.

Lookup misses (unknown column or plugin id) are not errors and never raise;
everything below is raised for configuration mistakes the caller must fix.
"""


class PdfTableError(Exception):
    """Base exception for all pdftable errors."""


class ConfigurationError(PdfTableError):
    """Raised when a table, column or plugin is configured incorrectly."""


class ColumnConfigurationError(ConfigurationError):
    """Raised when a column definition is invalid or its id is already taken."""

    def __init__(self, column_id, reason: str):
        self.column_id = column_id
        super().__init__(f"Column [{column_id}] is invalid: {reason}")


class PluginConfigurationError(ConfigurationError):
    """Raised when a plugin cannot be registered."""

    def __init__(self, plugin_id, reason: str = "must have a configure() method"):
        self.plugin_id = plugin_id
        super().__init__(f"Plugin [{plugin_id}] {reason}.")


class SurfaceError(PdfTableError):
    """Raised when the drawing surface is not usable for table rendering."""
