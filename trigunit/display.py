"""Rich terminal rendering of angles.

Functions:
    conversion_table: Build a table showing angles in every unit.
    print_conversions: Print that table to a console.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from .unit import Angle, ClockFace


def conversion_table(*angles: Angle, digits: int = 6, title: str = "Angle conversions") -> Table:
    """Build a table with one row per angle and one column per unit.

    Args:
        *angles: Angles in any unit.
        digits: Significant digits shown for numeric units.
        title: Table title.

    Returns:
        Table: Rich table ready to print.
    """
    table = Table(title=title)
    table.add_column("Angle", style="bold")
    for unit in Angle.units():
        table.add_column(unit.NAME, justify="right")

    spec = f".{digits}g"
    for angle in angles:
        if not isinstance(angle, Angle):
            raise TypeError(f"Expected an Angle, got {type(angle).__name__}")
        cells = []
        for unit in Angle.units():
            converted = angle.as_unit(unit)
            cells.append(str(converted) if isinstance(converted, ClockFace) else format(converted, spec))
        table.add_row(repr(angle), *cells)
    return table


def print_conversions(*angles: Angle, console: Console | None = None, **kwargs) -> None:
    """Print the conversion table of ``angles``."""
    console = console or Console()
    console.print(conversion_table(*angles, **kwargs))
