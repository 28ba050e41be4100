"""Merkle Funnel — CLI for building a tree and printing its root.

Usage:
    python3 -m merkle_funnel.cli                         # Demo transactions
    python3 -m merkle_funnel.cli A B C                   # Items from argv
    python3 -m merkle_funnel.cli --file records.txt      # One item per line
    python3 -m merkle_funnel.cli --file - --layers       # stdin, all layers
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from merkle_funnel.config import MerkleFunnelConfig, load_config
from merkle_funnel.merkle.tree import EmptyInputError, MerkleTree

log = logging.getLogger("merkle.cli")

DEMO_ITEMS = ["alice->bob:10", "bob->charlie:5"]


def read_items(source: str, encoding: str = "utf-8", skip_blank: bool = True) -> list[str]:
    """Read one item per line from a file path, or stdin for '-'.

    Both sources are decoded with the given encoding.
    """
    if source == "-":
        lines = sys.stdin.buffer.read().decode(encoding).splitlines()
    else:
        lines = Path(source).read_text(encoding=encoding).splitlines()
    if skip_blank:
        lines = [line for line in lines if line.strip()]
    return lines


def run(
    items: list[str],
    *,
    include_layers: bool = False,
) -> dict[str, Any]:
    """Build a tree from items and return a status dict."""
    try:
        tree = MerkleTree.build(items)
    except EmptyInputError as e:
        return {"status": "ERROR", "error": str(e)}

    return {"status": "OK", **tree.summary(include_layers=include_layers)}


def main(argv: list[str] | None = None, config: MerkleFunnelConfig | None = None) -> None:
    load_dotenv()
    cfg = config or load_config()

    parser = argparse.ArgumentParser(description="Merkle Funnel — build a Merkle tree")
    parser.add_argument("items", nargs="*", help="Leaf items, in order")
    parser.add_argument("--file", metavar="PATH", help="Read items one per line ('-' for stdin)")
    parser.add_argument("--layers", action="store_true", help="Include every layer in the output")
    parser.add_argument("--no-demo", action="store_true", help="Do not fall back to demo items")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else cfg.log_level_value(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    items: list[str] = list(args.items)
    if args.file:
        try:
            items.extend(read_items(
                args.file,
                encoding=cfg.cli.input_encoding,
                skip_blank=cfg.cli.skip_blank_lines,
            ))
        except (OSError, UnicodeDecodeError, LookupError) as e:
            print(json.dumps({"status": "ERROR", "error": f"cannot read {args.file}: {e}"}, indent=2))
            sys.exit(1)
    elif not items and not args.no_demo:
        log.info("No items given, using demo transactions")
        items = list(DEMO_ITEMS)

    result = run(items, include_layers=args.layers or cfg.cli.show_layers)
    print(json.dumps(result, indent=2))
    sys.exit(0 if result["status"] == "OK" else 1)


if __name__ == "__main__":
    main()
