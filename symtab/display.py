import argparse
import logging
import sys
from typing import Iterable, List, Optional

from symtab import BasicBST

logger = logging.getLogger(__name__)


def build_tree(tokens: Iterable[str]) -> BasicBST:
    """Put each token with its zero-based input position as the value."""
    tree = BasicBST()
    for i, token in enumerate(tokens):
        tree.put(token, i)
    return tree


def render_report(tree: BasicBST) -> str:
    lines: List[str] = []

    lines.append("Tree printed in level order, showing keys and heights:")
    for key in tree.level_order():
        lines.append("{} {}".format(key, tree.height(key)))
    lines.append("")

    lines.append("Tree printed in order, showing keys and heights:")
    for key in tree.keys():
        lines.append("{} {}".format(key, tree.height(key)))
    lines.append("")

    lines.append("Leaf keys printed in order: ")
    lines.append("".join(str(key) + " " for key in tree.leaves()))

    return "\n".join(lines) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a binary search tree from whitespace-separated "
        "tokens and print its traversals"
    )
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"),
                        default=sys.stdin,
                        help="File to read tokens from (default: stdin)")
    parser.add_argument("--tree", action="store_true",
                        help="Also print the tree sideways, one node per line")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    tokens = args.input.read().split()
    logger.info("read %d tokens", len(tokens))

    tree = build_tree(tokens)
    logger.info("built tree with %d keys, height %d", tree.size(), tree.height())

    print(render_report(tree), end="")

    if args.tree:
        print()
        print(tree.print(), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
