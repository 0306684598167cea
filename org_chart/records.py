import math
from dataclasses import dataclass

import pandas as pd

from org_chart import config


class OrgChartError(RuntimeError):
    """Fatal problem with the input; nothing is written."""


class MissingColumnsError(OrgChartError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            "Source table is missing required column(s): " + ", ".join(self.missing)
        )


class EmptySourceError(OrgChartError):
    def __init__(self):
        super().__init__("Source table has no data rows below the header.")


@dataclass(frozen=True)
class EmployeeRecord:
    name: str
    user_id: str
    job_title: str = ""
    organization: str = ""
    location: str = ""
    email: str = ""
    telephone: str = ""
    manager_user_id: str = ""
    status: str = config.CURRENT_STATUS
    employee_type: str = ""
    region: str = ""


# -------------------------------------------
# HELPERS
# -------------------------------------------
def is_null(x):
    return (
        x is None
        or x is pd.NA
        or x is pd.NaT
        or (isinstance(x, float) and math.isnan(x))
        or (isinstance(x, str) and x.strip() == "")
    )


def clean_text(x) -> str:
    """Normalize one cell: blanks -> "", 1001.0 -> "1001", strip strings."""
    if is_null(x):
        return ""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x).strip()


def raw_text(x) -> str:
    """Blanks -> "", anything else as-is. For exact-match cells (headers, Status)."""
    return "" if is_null(x) else str(x)


def first_non_empty(columns):
    """Element-wise first non-empty value across several cleaned columns."""
    result = columns[0]
    for col in columns[1:]:
        result = result.where(result != "", col)
    return result


# -------------------------------------------
# PARSE
# -------------------------------------------
def parse_rows(rows):
    """
    Turn raw table rows (row 0 = headers) into the working set of
    EmployeeRecords: current employees with a non-empty name, in input order.
    """
    rows = [list(r) for r in rows]
    if len(rows) < 2:
        raise EmptySourceError()

    header = [raw_text(h) for h in rows[0]]
    missing = [col for col in config.REQUIRED_COLUMNS if col not in header]
    if missing:
        raise MissingColumnsError(missing)

    # header name -> position, first occurrence wins
    col_index = {}
    for i, name in enumerate(header):
        col_index.setdefault(name, i)

    width = len(header)
    data = [(r + [None] * width)[:width] for r in rows[1:]]
    df = pd.DataFrame(data, dtype=object)

    def column(name, clean=clean_text):
        if name in col_index:
            return df[col_index[name]].map(clean)
        return pd.Series([""] * len(df), index=df.index, dtype=object)

    clean = pd.DataFrame({
        "name": column(config.COL_NAME),
        "user_id": column(config.COL_USER_ID),
        "job_title": first_non_empty([column(c) for c in config.TITLE_COLUMNS]),
        "organization": column(config.COL_ORG),
        "location": column(config.COL_LOCATION),
        "email": column(config.COL_EMAIL),
        "telephone": first_non_empty([column(c) for c in config.PHONE_COLUMNS]),
        "manager_user_id": column(config.COL_MANAGER),
        "status": column(config.COL_STATUS, raw_text),  # must match exactly
        "employee_type": column(config.COL_EMPLOYEE_TYPE),
        "region": column(config.COL_REGION),
    })

    keep = (clean["status"] == config.CURRENT_STATUS) & (clean["name"] != "")
    records = [EmployeeRecord(**row) for row in clean[keep].to_dict("records")]

    print(f"[INFO] Accepted {len(records)} of {len(df)} row(s) as current employees.")
    return records
