import json

from org_chart import config


def forest_to_dicts(forest):
    """Nested dicts (id, name, title, department, location, children)."""
    tree = []
    stack = [(node, tree) for node in reversed(forest)]
    while stack:
        node, siblings = stack.pop()
        rec = node.record
        entry = {
            "id": rec.user_id,
            "name": rec.name,
            "title": rec.job_title,
            "department": rec.organization,
            "location": rec.location,
            "region": rec.region,
            "children": [],
        }
        siblings.append(entry)
        stack.extend((child, entry["children"]) for child in reversed(node.children))
    return tree


def write_json(forest, path=config.OUTPUT_JSON):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(forest_to_dicts(forest), f, indent=2)
    print(f"[INFO] Saved {path}")
    return path
