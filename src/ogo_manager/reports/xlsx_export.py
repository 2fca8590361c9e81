from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from .rows import EXPORT_COLUMNS

SHEET_NAME = "Projects"


def projects_to_xlsx(rows: Sequence[dict]) -> bytes:
    df = pd.DataFrame(list(rows), columns=EXPORT_COLUMNS)
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
    out.seek(0)
    return out.getvalue()
