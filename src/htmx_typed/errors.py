"""
Error types for htmx-typed.

The encoders themselves are total over their typed inputs; invalid values
are rejected when a model is constructed (``pydantic.ValidationError``).
The types here cover the configuration layer.
"""


class HtmxTypedError(Exception):
    """Base exception for all htmx-typed errors."""

    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class ConfigError(HtmxTypedError):
    """
    Raised when configuration cannot be loaded.

    Examples:
    - ``[tool.htmx-typed]`` is not a table
    - An option has the wrong type
    - The config file is not valid TOML
    """

    pass
