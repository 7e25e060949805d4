"""copydir: copy a directory with optional transformations."""

from __future__ import annotations

import argparse
import sys

from .copy_dir import copy_dir
from .errors import CopyDirError, UsageError
from .logger import install_exception_hooks, logger, setup_logging
from .rename import dot_rename, identity_rename
from .types import CopyDirArgs

PROG = "copydir"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Copy a directory with optional transformations.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="be verbose")
    parser.add_argument("--dot", action="store_true", help="rename each dot.something to .something")
    parser.add_argument("srcdir", help="directory to copy")
    parser.add_argument("dstdir", help="existing directory to copy into")
    parser.add_argument(
        "keyvals",
        nargs="*",
        metavar="KEY=VALUE",
        help="template data; enables template processing of file names and contents",
    )
    return parser


def make_template_data(keyvals: list[str]) -> dict[str, str]:
    """Convert ``key=value`` strings into a template data mapping.

    Splits on the first ``=``, so values may themselves contain ``=``.
    """
    data: dict[str, str] = {}
    for kv in keyvals:
        key, sep, value = kv.partition("=")
        if not sep:
            raise UsageError(f"missing '=' in {kv}")
        if not key:
            raise UsageError(f"empty key in {kv}")
        data[key] = value
    return data


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    args = CopyDirArgs(
        src_dir=ns.srcdir,
        dst_dir=ns.dstdir,
        dot=ns.dot,
        verbose=ns.verbose,
        keyvals=ns.keyvals,
    )
    if args.verbose:
        setup_logging("DEBUG")
    logger.debug("Parsed arguments", **args.model_dump(mode="json"))

    try:
        tmpl_data = make_template_data(args.keyvals)
        rename = dot_rename if args.dot else identity_rename
        created = copy_dir(args.src_dir, args.dst_dir, rename, tmpl_data)
    except (CopyDirError, OSError) as err:
        print(f"{PROG}: error: {err}", file=sys.stderr)
        return 1

    logger.debug("Copy complete", dst=str(created))
    return 0


def run() -> None:
    install_exception_hooks()
    sys.exit(main())
