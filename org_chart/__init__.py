"""Build organization charts from flat employee tables."""

from org_chart.config import ChartConfig
from org_chart.hierarchy import TreeNode, build_forest, find_subtree
from org_chart.records import (
    EmployeeRecord,
    EmptySourceError,
    MissingColumnsError,
    OrgChartError,
    parse_rows,
)
from org_chart.render import OrgStats, RenderLine, collect_stats, render_lines
from org_chart.titles import level, rank

__version__ = "0.3.0"
