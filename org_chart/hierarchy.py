from collections import defaultdict
from dataclasses import dataclass, field
from typing import List

from org_chart.records import EmployeeRecord
from org_chart.titles import rank


@dataclass
class TreeNode:
    record: EmployeeRecord
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def user_id(self):
        return self.record.user_id


def sibling_key(node):
    """Ascending rank, then name (case-insensitive, exact name as tie-break)."""
    name = node.record.name
    return (rank(node.record.job_title), name.casefold(), name)


# -------------------------------------------
# BUILD
# -------------------------------------------
def build_forest(records):
    """
    Resolve manager references into an ordered list of root TreeNodes.

    Every record ends up in exactly one node. A record is a root when its
    Manager UID is empty or names nobody in the working set. Cycles fully
    inside the working set are broken by promoting the record that closes
    the loop to a root.
    """
    records = list(records)

    # user id -> position of the record that owns it (last one wins)
    id_to_pos = {}
    for pos, rec in enumerate(records):
        if rec.user_id in id_to_pos:
            prev = records[id_to_pos[rec.user_id]]
            print(
                f"[WARN] Duplicate User ID {rec.user_id!r}: "
                f"{rec.name!r} replaces {prev.name!r} as the manager of record."
            )
        id_to_pos[rec.user_id] = pos

    manager_to_reports = defaultdict(list)
    for pos, rec in enumerate(records):
        if rec.manager_user_id:
            manager_to_reports[rec.manager_user_id].append(pos)

    nodes = [TreeNode(rec) for rec in records]
    placed = set()
    roots = []

    def expand(root_pos):
        placed.add(root_pos)
        stack = [root_pos]
        while stack:
            current = stack.pop()
            uid = records[current].user_id
            if id_to_pos.get(uid) != current:
                continue  # overwritten duplicate stays a leaf
            for child in manager_to_reports.get(uid, []):
                if child in placed:
                    continue
                placed.add(child)
                nodes[current].children.append(nodes[child])
                stack.append(child)

    for pos, rec in enumerate(records):
        mgr = rec.manager_user_id
        if not mgr or mgr not in id_to_pos:
            roots.append(nodes[pos])
            expand(pos)

    # anything left over sits on (or under) a manager cycle
    for start in range(len(records)):
        if start in placed:
            continue
        on_path = set()
        current = start
        while current not in on_path:
            on_path.add(current)
            current = id_to_pos[records[current].manager_user_id]
        rec = records[current]
        print(
            f"[WARN] Reporting cycle through {rec.name!r} ({rec.user_id}); "
            "promoting to a top-level entry."
        )
        roots.append(nodes[current])
        expand(current)

    sort_forest(roots)
    print(f"[INFO] Built {len(roots)} tree(s) over {len(records)} employee(s).")
    return roots


def sort_forest(forest):
    """Sort every sibling list in place. Safe to call repeatedly."""
    forest.sort(key=sibling_key)
    stack = list(forest)
    while stack:
        node = stack.pop()
        node.children.sort(key=sibling_key)
        stack.extend(node.children)
    return forest


# -------------------------------------------
# WALK
# -------------------------------------------
def iter_nodes(forest):
    """Pre-order (node, depth) pairs, roots in forest order."""
    stack = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


def find_subtree(forest, user_id):
    """Node for one person (their whole team below them), or None."""
    for node, _ in iter_nodes(forest):
        if node.user_id == user_id:
            return node
    return None
