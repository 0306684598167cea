"""
Write the org chart and its summary statistics to a .docx file.

Layout: centered title, italic timestamp, one bullet per person (nesting
follows depth, name in bold), page break, then the statistics sections.
"""
import os
import zipfile
from datetime import datetime

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.opc.exceptions import PackageNotFoundError
from docx.oxml.ns import qn
from docx.shared import Inches, Pt

from org_chart import config

BULLET_STYLES = ["List Bullet", "List Bullet 2", "List Bullet 3"]

# an existing destination that raises one of these is replaced by a new file
DESTINATION_ERRORS = (
    PackageNotFoundError,
    zipfile.BadZipFile,
    KeyError,
    ValueError,
    OSError,
)


def fresh_path(path, now):
    """Timestamped sibling of path that does not exist yet."""
    stem, ext = os.path.splitext(path)
    ext = ext or ".docx"
    candidate = f"{stem}_{now:%Y%m%d_%H%M%S}{ext}"
    n = 1
    while os.path.exists(candidate):
        candidate = f"{stem}_{now:%Y%m%d_%H%M%S}_{n}{ext}"
        n += 1
    return candidate


def _open_existing(path):
    doc = Document(path)
    body = doc.element.body
    for child in list(body):
        if child.tag != qn("w:sectPr"):  # keep page setup
            body.remove(child)
    return doc


def _add_line(doc, line):
    style = BULLET_STYLES[min(line.depth, len(BULLET_STYLES) - 1)]
    p = doc.add_paragraph(style=style)
    if line.depth >= len(BULLET_STYLES):
        p.paragraph_format.left_indent = Inches(0.25 * (line.depth + 1))

    start, end = line.name_span
    name, rest = line.text[start:end], line.text[end:]
    if name:
        run = p.add_run(name)
        run.bold = True
        run.font.size = Pt(line.font_size)
    if rest:
        run = p.add_run(rest)
        run.font.size = Pt(line.font_size)


def _fill(doc, lines, stats, now):
    heading = doc.add_heading(config.DOC_TITLE, level=0)
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

    p = doc.add_paragraph()
    p.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = p.add_run(f"Generated: {now:%B %d, %Y %H:%M}")
    run.italic = True

    for line in lines:
        _add_line(doc, line)

    doc.add_page_break()

    # Summary
    doc.add_heading(config.STATS_TITLE, level=1)
    doc.add_paragraph(f"Total Employees: {stats.total}")
    sections = [
        ("By Organization", stats.organizations()),
        ("By Location", stats.locations()),
        ("By Title Level", stats.levels()),
    ]
    for title, items in sections:
        doc.add_heading(title, level=2)
        for key, count in items:
            doc.add_paragraph(f"  {key}: {count}")


def write_document(lines, stats, path=config.OUTPUT_DOCX, force_new=False, now=None):
    """
    Write the chart to path and return the path actually written.

    An existing file is cleared and rewritten in place unless force_new is
    set. If it can't be opened or saved, a new timestamped file is created
    next to it instead.
    """
    now = now or datetime.now()
    target = path

    if os.path.exists(path):
        if force_new:
            target = fresh_path(path, now)
        else:
            try:
                doc = _open_existing(path)
                _fill(doc, lines, stats, now)
                doc.save(path)
                print(f"[INFO] Org chart document updated: {path}")
                return path
            except DESTINATION_ERRORS as exc:
                target = fresh_path(path, now)
                print(f"[WARN] Could not rewrite {path} ({exc}); writing {target} instead.")

    doc = Document()
    _fill(doc, lines, stats, now)
    doc.save(target)
    print(f"[INFO] Org chart document generated: {target}")
    return target
