"""Printer settings shared by the renderers and the literal dumper."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PrinterConfig:
    """Formatting options for generated code.

    Args:
        indentation: String used for one indentation level
        wrap_length: Line length above which arrays and parameter lists wrap

    Example:
        config = PrinterConfig(indentation="    ")
        render_class(cls, config=config)
    """

    indentation: str = "\t"
    wrap_length: int = 100


DEFAULT_CONFIG = PrinterConfig()
