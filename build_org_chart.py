"""
Quick entry point: edit the CONFIG block and run `python build_org_chart.py`.
For options use the `org-chart` command instead (see org_chart/cli.py).
"""
import sys

from org_chart.config import ChartConfig
from org_chart.pipeline import run
from org_chart.records import OrgChartError

# -------------------------------------------
# CONFIG
# -------------------------------------------
INPUT_FILE = "employees.xlsx"
SHEET_NAME = 0                # first sheet; change if needed
OUTPUT_FILE = "org_chart.docx"
FORCE_NEW = False             # True = never overwrite an existing document
ROOT_ID = None                # e.g. "a1" to chart one person's team only


def main():
    cfg = ChartConfig(
        source=INPUT_FILE,
        destination=OUTPUT_FILE,
        sheet=SHEET_NAME,
        force_new=FORCE_NEW,
        root_id=ROOT_ID,
    )
    try:
        result = run(cfg)
    except OrgChartError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    print(f"Org chart generated: {result.path} ({result.stats.total} employees)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
