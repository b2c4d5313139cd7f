#!/usr/bin/env python3
"""prismrp CLI - convert dumped Prism trees into ruby_parser sexps.

Usage:
    prismrp <tree.json>                     # Print the converted sexp
    prismrp <tree.json> --lines             # Include .line(N) annotations
    prismrp <tree.json> --nodes             # Show the loaded input tree
    prismrp <tree.json> --expect "s(...)"   # Compare with a printed sexp
"""

import argparse
import logging
import pathlib
import sys

import prismrp
from prismrp import nodes


def prettynodes(node, indent=0, show_positions=False):
    """Pretty-print an input tree, one node per line with its scalar fields."""
    prefix = "  " * indent
    scalars = []
    children = []
    for name, value in vars(node).items():
        if name == "location" or value is None or value == ():
            continue
        if isinstance(value, nodes.Node):
            children.append((name, [value]))
        elif isinstance(value, tuple) and any(isinstance(v, nodes.Node) for v in value):
            children.append((name, value))
        elif not name.endswith("_loc"):
            scalars.append(f"{name}={value!r}")

    pos = f" @{node.location.format()}" if show_positions else ""
    fields = f" {' '.join(scalars)}" if scalars else ""
    print(f"{prefix}{type(node).__name__}{fields}{pos}")
    for name, kids in children:
        print(f"{prefix}  {name}:")
        for kid in kids:
            prettynodes(kid, indent + 2, show_positions)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="prismrp",
        description="Convert a dumped Prism syntax tree into ruby_parser sexps")
    parser.add_argument("source",
        help="JSON file holding the dumped tree")
    parser.add_argument("--text", action="store_true",
        help="Treat source as JSON text instead of a file path")
    parser.add_argument("--lines", action="store_true",
        help="Annotate output with .line(N) and compare lines with --expect")
    parser.add_argument("--nodes", action="store_true",
        help="Show the loaded input tree instead of converting it")
    parser.add_argument("--pos", action="store_true",
        help="Show line:column positions with --nodes")
    parser.add_argument("--expect", metavar="SEXP",
        help="Printed sexp the conversion must match")
    parser.add_argument("--file", metavar="PATH",
        help="Path reported for __FILE__")
    parser.add_argument("--debug", action="store_true",
        help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    if args.text:
        source = args.source
    else:
        filepath = pathlib.Path(args.source)
        if not filepath.is_absolute():
            filepath = pathlib.Path.cwd() / filepath
        try:
            source = filepath.read_text()
        except OSError as e:
            print(f"Cannot read {filepath}: {e}", file=sys.stderr)
            return 1

    try:
        tree = prismrp.loads(source)
        if args.nodes:
            prettynodes(tree, show_positions=args.pos)
            return 0
        result = prismrp.convert(tree, filepath=args.file)
        expected = prismrp.parse_sexp(args.expect) if args.expect is not None else None
    except (prismrp.TreeLoadError, prismrp.ConversionError, prismrp.ParseError) as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    text = prismrp.ruby_inspect(result)
    if args.lines and isinstance(result, prismrp.Sexp):
        text = result.format(lines=True)
    print(text)

    if args.expect is None:
        return 0
    if isinstance(expected, prismrp.Sexp) and isinstance(result, prismrp.Sexp):
        same = expected.matches(result, lines=args.lines)
    else:
        same = expected == result
    if not same:
        print(f"Mismatch\n  expected: {args.expect}\n  actual:   {text}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
