"""Print the canonical tag taxonomy, or preview how tags and text would be tagged.

Run from the repo root: python -m tools.list_tags --flat
"""

from __future__ import annotations

import argparse
import json

from domain.tagging import auto_tag_entry, explain_entry
from domain.taxonomy import TAG_GROUPS, list_canonical_tags, normalize_tags


def build_payload(flat: bool) -> object:
    if flat:
        return list_canonical_tags()
    return {group: list(tags) for group, tags in TAG_GROUPS.items()}


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--flat", action="store_true", help="Print one flat list in taxonomy order (auto-complete feed)")
    p.add_argument("--normalize", metavar="TAGS", help="Normalize a comma-separated legacy tag string")
    p.add_argument("--text", metavar="TEXT", help="Auto-tag a piece of free text and show which layers matched")
    args = p.parse_args(argv)

    if args.normalize is not None:
        print(json.dumps({"input": args.normalize, "normalized": normalize_tags(args.normalize)}, ensure_ascii=False))
        return 0

    if args.text is not None:
        entry = {"description": args.text}
        print(
            json.dumps(
                {"tags": auto_tag_entry(entry), "matches": explain_entry(entry)},
                ensure_ascii=False,
                indent=2,
            )
        )
        return 0

    print(json.dumps(build_payload(args.flat), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
