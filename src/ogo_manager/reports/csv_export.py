from __future__ import annotations

import csv
import io
from typing import Sequence

from .rows import EXPORT_COLUMNS


def projects_to_csv(rows: Sequence[dict]) -> bytes:
    """Encode export rows as CSV (UTF-8 with BOM so Excel picks the encoding up)."""
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=EXPORT_COLUMNS, quoting=csv.QUOTE_ALL)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")
