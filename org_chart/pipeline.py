from dataclasses import dataclass

from org_chart.document import write_document
from org_chart.hierarchy import build_forest, find_subtree
from org_chart.records import OrgChartError, parse_rows
from org_chart.render import OrgStats, collect_stats, render_lines
from org_chart.source import read_table


@dataclass
class RunResult:
    path: str
    stats: OrgStats


def load_records(cfg):
    return parse_rows(read_table(cfg.source, cfg.sheet))


def build_chart(records, root_id=None):
    """Forest for the whole working set, or only root_id's team."""
    forest = build_forest(records)
    if root_id:
        node = find_subtree(forest, root_id)
        if node is None:
            raise OrgChartError(f"No current employee with User ID {root_id!r}.")
        forest = [node]
    return forest


def run(cfg, now=None):
    """Source table -> org chart document, in one pass."""
    records = load_records(cfg)
    forest = build_chart(records, cfg.root_id)
    lines = render_lines(forest)
    stats = collect_stats(forest)
    path = write_document(lines, stats, cfg.destination, force_new=cfg.force_new, now=now)
    return RunResult(path=path, stats=stats)


def validate(cfg):
    """Dry run: parse the source and report how many records would be charted."""
    records = load_records(cfg)
    print(f"[INFO] Validation passed: {len(records)} current employee record(s).")
    return len(records)
