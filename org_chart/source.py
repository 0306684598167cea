import os

import pandas as pd

from org_chart import config
from org_chart.records import OrgChartError

EXCEL_EXTENSIONS = {".xlsx", ".xlsm", ".xls"}


def read_table(path, sheet=config.SHEET_NAME):
    """
    Load a whole sheet as a list of rows, headers included as row 0.
    Blank cells come back as None.
    """
    ext = os.path.splitext(path)[1].lower()
    try:
        if ext in EXCEL_EXTENSIONS:
            df = pd.read_excel(path, sheet_name=sheet, header=None, dtype=object)
        elif ext == ".csv":
            df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
        else:
            raise OrgChartError(f"Unsupported source file type: {path}")
    except pd.errors.EmptyDataError:
        return []
    except OSError as exc:
        raise OrgChartError(f"Cannot read {path}: {exc}") from exc

    df = df.astype(object).where(df.notna(), None)
    rows = df.values.tolist()
    print(f"[INFO] Loaded {len(rows)} row(s) from {path}")
    return rows
