from __future__ import annotations

from typing import List, Sequence


def format_table(title: str, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render rows as a fixed-width text table with a title line."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    rule = "-+-".join("-" * w for w in widths)
    out: List[str] = [title, line(headers), rule]
    out.extend(line(row) for row in rows)
    return "\n".join(out)
