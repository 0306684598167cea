from collections import Counter
from dataclasses import dataclass, field
from typing import Tuple

from org_chart import config
from org_chart.hierarchy import iter_nodes
from org_chart.titles import level


@dataclass(frozen=True)
class RenderLine:
    depth: int
    text: str
    name_span: Tuple[int, int]
    font_size: int


def build_label(record):
    """
    Name, then " - " and whichever details are present:
    Title | Organization | Location | Email | Phone
    """
    details = [
        ("Title", record.job_title),
        ("Organization", record.organization),
        ("Location", record.location),
        ("Email", record.email),
        ("Phone", record.telephone),
    ]
    parts = [f"{label}: {value}" for label, value in details if value]
    if not parts:
        return record.name
    return f"{record.name} - " + " | ".join(parts)


def font_size_for(depth: int) -> int:
    return config.FONT_SIZES[min(depth, len(config.FONT_SIZES) - 1)]


def render_lines(forest):
    """Depth-first, pre-order RenderLines for the whole forest."""
    return [
        RenderLine(
            depth=depth,
            text=build_label(node.record),
            name_span=(0, len(node.record.name)),
            font_size=font_size_for(depth),
        )
        for node, depth in iter_nodes(forest)
    ]


# -------------------------------------------
# STATISTICS
# -------------------------------------------
@dataclass
class OrgStats:
    total: int = 0
    by_organization: Counter = field(default_factory=Counter)
    by_location: Counter = field(default_factory=Counter)
    by_level: Counter = field(default_factory=Counter)

    def organizations(self):
        return _by_count(self.by_organization)

    def locations(self):
        return _by_count(self.by_location)

    def levels(self):
        return sorted(self.by_level.items())


def _by_count(counter):
    # most common first, ties alphabetical
    return sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))


def collect_stats(forest):
    stats = OrgStats()
    for node, _ in iter_nodes(forest):
        rec = node.record
        stats.total += 1
        stats.by_organization[rec.organization or config.UNKNOWN] += 1
        stats.by_location[rec.location or config.UNKNOWN] += 1
        stats.by_level[level(rec.job_title)] += 1
    return stats
