import argparse
import sys

from org_chart import config
from org_chart.config import ChartConfig
from org_chart.diagram import render_diagram
from org_chart.export import write_json
from org_chart.pipeline import build_chart, load_records, run, validate
from org_chart.records import OrgChartError


def _sheet(value):
    return int(value) if value.isdigit() else value


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="org-chart",
        description="Build an organization chart from an employee spreadsheet.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_source(p):
        p.add_argument("source", help="Employee table (.xlsx, .xls or .csv)")
        p.add_argument("--sheet", type=_sheet, default=config.SHEET_NAME,
                       help="Sheet name or index (default: first sheet)")

    def add_root(p):
        p.add_argument("--root", dest="root_id", default=None,
                       help="Only chart this User ID and everyone below them")

    p = sub.add_parser("run", help="Write the org chart document")
    add_source(p)
    add_root(p)
    p.add_argument("-o", "--output", default=config.OUTPUT_DOCX,
                   help=f"Destination .docx (default: {config.OUTPUT_DOCX})")

    p = sub.add_parser("new", help="Like run, but never overwrite an existing document")
    add_source(p)
    add_root(p)
    p.add_argument("-o", "--output", default=config.OUTPUT_DOCX,
                   help=f"Destination .docx (default: {config.OUTPUT_DOCX})")

    p = sub.add_parser("validate", help="Parse the source and report the record count")
    add_source(p)

    p = sub.add_parser("diagram", help="Render a Graphviz org chart image")
    add_source(p)
    add_root(p)
    p.add_argument("-o", "--output", default=config.OUTPUT_CHART,
                   help=f"Output file name without extension (default: {config.OUTPUT_CHART})")
    p.add_argument("--format", default="png", help="png, pdf, svg... (default: png)")
    p.add_argument("--rankdir", choices=["TB", "LR"], default=config.RANKDIR)
    p.add_argument("--clusters", action="store_true",
                   help="Frame people by organization")

    p = sub.add_parser("export", help="Write the hierarchy as nested JSON")
    add_source(p)
    add_root(p)
    p.add_argument("-o", "--output", default=config.OUTPUT_JSON,
                   help=f"Output .json (default: {config.OUTPUT_JSON})")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    cfg = ChartConfig(
        source=args.source,
        destination=getattr(args, "output", config.OUTPUT_DOCX),
        sheet=args.sheet,
        force_new=args.command == "new",
        root_id=getattr(args, "root_id", None),
    )

    try:
        if args.command == "validate":
            validate(cfg)
        elif args.command in ("run", "new"):
            run(cfg)
        else:
            forest = build_chart(load_records(cfg), cfg.root_id)
            if args.command == "diagram":
                render_diagram(forest, args.output, fmt=args.format,
                               rankdir=args.rankdir, clusters=args.clusters)
            else:
                write_json(forest, args.output)
    except OrgChartError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
