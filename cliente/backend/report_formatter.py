"""Formateador puro del reporte de estadisticas por categoria."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime

from shared.categories import category_label
from shared.protocol import CategoryTotal

REPORT_TITLE = "Talabartería Duarte - Distribución por Categorías"
_NO_DATA = "No se encontraron productos con cantidad válida."


def format_category_report(
    totals: Sequence[CategoryTotal],
    generated_at: datetime,
) -> list[str]:
    """Construye el reporte como lineas de texto, una por categoria."""
    lines = [
        REPORT_TITLE,
        f"Generado: {generated_at:%Y-%m-%d %H:%M}",
        "",
    ]
    if not totals:
        lines.append(_NO_DATA)
        return lines

    grand_total: int | float = 0
    for total in totals:
        grand_total += total.total_quantity
        lines.append(
            f"{category_label(total.category)}: {format_quantity(total.total_quantity)} unidades"
        )

    lines.append("")
    lines.append(f"Total: {format_quantity(grand_total)} unidades")
    return lines


def format_quantity(value: int | float) -> str:
    """Formatea cantidad con hasta dos decimales y sin ceros finales."""
    if math.isclose(value, round(value), abs_tol=1e-9):
        return str(int(round(value)))
    return f"{value:.2f}".rstrip("0").rstrip(".")
