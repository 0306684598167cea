import re
from collections import defaultdict

from graphviz import Digraph

from org_chart import config
from org_chart.hierarchy import iter_nodes

# pastel-ish department colors
PALETTE = [
    "#E3F2FD",  # light blue
    "#FFF3E0",  # light orange
    "#E8F5E9",  # light green
    "#F3E5F5",  # light purple
    "#E0F7FA",  # light cyan
    "#FBE9E7",  # light coral
    "#FFFDE7",  # light yellow
]
ROOT_FILL = "#e3f2fd"


def node_label(record):
    """Compact, readable node label: Name + Title."""
    if record.job_title:
        return f"{record.name}\n{record.job_title}"
    return record.name


def safe_name(s: str) -> str:
    """Make a string safe for use as a Graphviz ID."""
    return re.sub(r"[^A-Za-z0-9]+", "_", s).strip("_") or "cluster"


def build_diagram(forest, rankdir=config.RANKDIR, clusters=False, title="Org Chart"):
    """
    Graphviz Digraph of the forest: one box per person, an edge from each
    manager to each direct report. With clusters=True people are framed by
    organization.
    """
    dot = Digraph(comment=title, format="png")

    dot.graph_attr.update(
        rankdir=rankdir,
        splines="ortho",
        fontsize="10",
        labelloc="t",
        label=title,
        pad="0.1",
        margin="0.05",
        nodesep="0.25",
        ranksep="0.4",
        ratio="compress",
    )
    dot.node_attr.update(
        shape="box",
        style="rounded,filled",
        fillcolor="#f9f9f9",
        color="#555555",
        fontname=config.FONT,
        fontsize="9",
        margin="0.12,0.06",
    )
    dot.edge_attr.update(
        color="#888888",
        arrowsize="0.7",
    )

    # node ids follow walk order so duplicate User IDs can't collide
    walk = list(iter_nodes(forest))
    node_ids = {id(node): f"n{i}" for i, (node, _) in enumerate(walk)}

    def add_node(graph, node, depth):
        gid = node_ids[id(node)]
        label = node_label(node.record)
        if depth == 0:
            graph.node(gid, label=label, fillcolor=ROOT_FILL,
                       style="rounded,filled,bold", penwidth="1.3")
        else:
            graph.node(gid, label=label)

    if clusters:
        org_to_nodes = defaultdict(list)
        for node, depth in walk:
            org_to_nodes[node.record.organization or config.UNKNOWN].append((node, depth))

        for i, org in enumerate(sorted(org_to_nodes)):
            color = PALETTE[i % len(PALETTE)]
            with dot.subgraph(name=f"cluster_{safe_name(org)}") as c:
                c.attr(
                    label=org,
                    style="rounded,filled",
                    color=color,
                    fillcolor=color,
                    penwidth="1.4",
                    fontsize="10",
                    fontname=config.FONT,
                )
                for node, depth in org_to_nodes[org]:
                    add_node(c, node, depth)
    else:
        for node, depth in walk:
            add_node(dot, node, depth)

    # EDGES: reporting lines as resolved in the forest
    for node, _ in walk:
        for child in node.children:
            dot.edge(node_ids[id(node)], node_ids[id(child)])

    return dot


def render_diagram(forest, output=config.OUTPUT_CHART, fmt="png", **kwargs):
    dot = build_diagram(forest, **kwargs)
    dot.format = fmt
    output_path = dot.render(filename=output, cleanup=True)
    print(f"[INFO] Org chart diagram generated: {output_path}")
    return output_path
