from dataclasses import dataclass
from typing import Optional, Union

# -------------------------------------------
# CONFIG
# -------------------------------------------
SHEET_NAME = 0                        # first sheet
OUTPUT_DOCX = "org_chart.docx"
OUTPUT_CHART = "org_chart"            # will create org_chart.png (or .pdf)
OUTPUT_JSON = "org_data.json"
RANKDIR = "TB"                        # "TB" = top-bottom, "LR" = left-right
FONT = "Helvetica"

# Columns (adjust if your file uses different names)
COL_NAME = "Name"
COL_USER_ID = "User ID"
COL_TITLE = "Job Title"
COL_CARD_TITLE = "Business Card Title"
COL_ORG = "Organization Name"
COL_LOCATION = "Location"
COL_EMAIL = "Email"
COL_MANAGER = "Manager UID"
COL_STATUS = "Status"
COL_PHONE = "Telephone"
COL_MOBILE = "Mobile"
COL_HOME_PHONE = "Home Phone"
COL_REGION = "Region"
COL_EMPLOYEE_TYPE = "Employee Type"

REQUIRED_COLUMNS = [
    COL_NAME,
    COL_USER_ID,
    COL_TITLE,
    COL_ORG,
    COL_LOCATION,
    COL_EMAIL,
    COL_MANAGER,
    COL_STATUS,
]

# first non-empty wins
TITLE_COLUMNS = [COL_TITLE, COL_CARD_TITLE]
PHONE_COLUMNS = [COL_PHONE, COL_MOBILE, COL_HOME_PHONE]

CURRENT_STATUS = "Current Employee"
UNKNOWN = "Unknown"

# Font size (pt) per tree depth; deeper levels use the last entry
FONT_SIZES = [14, 12, 11]

DOC_TITLE = "Organization Chart"
STATS_TITLE = "Summary Statistics"


@dataclass
class ChartConfig:
    """Endpoints and options for a single run."""

    source: str
    destination: str = OUTPUT_DOCX
    sheet: Union[int, str] = SHEET_NAME
    force_new: bool = False
    root_id: Optional[str] = None
