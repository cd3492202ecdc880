from decimal import ROUND_HALF_UP, Decimal
from typing import List, Literal, Optional


def format_price(amount: Decimal) -> str:
    """'$1234.5' -> '$1234.50', rounded half up to cents."""
    return "$" + str(Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _md_cell(value) -> str:
    # a bare pipe would split the cell
    return str(value).replace("|", "\\|")


def generate_markdown_table(
    headers: Optional[List[str]],
    rows: List[List],
    aligns: Optional[List[Literal["l", "c", "r"]]] = None,
) -> str:
    """
    Render rows as a Markdown table.

    Args:
        headers: column headers, or None to promote the first row.
        rows: table body, cells are passed through str().
        aligns: 'l', 'c' or 'r' per column, centered when omitted.

    Returns:
        str: the table, or "" when there are no rows.
    """
    if not rows:
        return ""

    if not headers:
        headers, rows = rows[0], rows[1:]

    headers = [_md_cell(h) for h in headers]
    aligns = aligns or ["c"] * len(headers)
    if len(aligns) != len(headers):
        raise ValueError("Length of aligns must match number of headers.")

    align_map = {"l": ":---", "c": ":---:", "r": "---:"}
    lines = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(align_map[a] for a in aligns) + " |",
    ]
    lines.extend("| " + " | ".join(_md_cell(c) for c in row) + " |" for row in rows)
    return "\n".join(lines)
