from __future__ import annotations

from dataclasses import dataclass
from typing import IO, List, Tuple, Union

import pandas as pd

from ..core.constants import IMPORT_NAME_COLUMN, IMPORT_RATE_COLUMN
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ImportResult:
    imported: int
    failed: int


def _normalize(col) -> str:
    return str(col).strip().lower()


def read_employee_rows(source: Union[str, IO[bytes]]) -> List[Tuple[object, object]]:
    """Read ``(name, rate)`` pairs from the first sheet of an xlsx file.

    Raises ValidationError for unreadable, empty or mis-formatted files.
    """
    try:
        df = pd.read_excel(source, sheet_name=0, engine="openpyxl", dtype=object)
    except Exception as e:
        raise ValidationError("Could not read the spreadsheet") from e

    if df.empty:
        raise ValidationError("The file is empty")

    columns = {_normalize(c): c for c in df.columns}
    name_col = columns.get(_normalize(IMPORT_NAME_COLUMN))
    rate_col = columns.get(_normalize(IMPORT_RATE_COLUMN))
    if name_col is None or rate_col is None:
        raise ValidationError(
            f'Invalid format: columns must be named "{IMPORT_NAME_COLUMN}" and "{IMPORT_RATE_COLUMN}"'
        )

    df = df.astype(object).where(pd.notna(df), None)
    return [(r[name_col], r[rate_col]) for _, r in df.iterrows()]
