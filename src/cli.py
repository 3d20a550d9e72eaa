"""Command-line entry point: print the modules changed between two revisions."""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional, Sequence

from src.config.settings import Settings, get_settings
from src.logging_config import configure_logging
from src.models import ChangeSetError, StaticDiffProvider
from src.schemas import ChangeSetResult
from src.services import create_resolver_from_settings

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="changeset-resolver",
        description="List the modules (first path segments) touched between two revisions.",
    )
    parser.add_argument(
        "--old",
        default=None,
        help="Old revision (defaults to the parent of --new; all-zero SHA means none).",
    )
    parser.add_argument("--new", default="HEAD", help="New revision (default: HEAD).")
    parser.add_argument(
        "--filter",
        dest="path_filter",
        default=None,
        help="Path prefix or glob restricting changed files (default: DEFAULT_PATH_FILTER, then repo name).",
    )
    parser.add_argument("--repo", default=None, help="Repository path (default: REPO_PATH).")
    parser.add_argument(
        "--depth",
        type=positive_int,
        default=None,
        help="Leading path segments forming a module id (default: MODULE_DEPTH).",
    )
    parser.add_argument(
        "--files-from",
        default=None,
        help=(
            "Read changed paths from a file ('-' for stdin) instead of git. "
            "Lines may be plain paths (treated as modified) or "
            "`git diff --name-status` output, which keeps --exclude-deleted working."
        ),
    )
    parser.add_argument(
        "--exclude-deleted",
        action="store_true",
        help="Ignore deleted files when computing modules.",
    )
    parser.add_argument(
        "--malformed",
        choices=("skip", "error"),
        default=None,
        help="Policy for paths with too few segments.",
    )
    parser.add_argument(
        "--initial-commit",
        choices=("all", "error"),
        default=None,
        help="Policy when the new revision has no parent.",
    )
    parser.add_argument(
        "--output",
        choices=("json", "csv", "newline"),
        default="json",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--github-output",
        action="store_true",
        help="Also append modules/any_changed to $GITHUB_OUTPUT.",
    )
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return a copy of settings with CLI flags applied on top."""
    overrides = {}
    if args.repo is not None:
        overrides["REPO_PATH"] = args.repo
    if args.depth is not None:
        overrides["MODULE_DEPTH"] = args.depth
    if args.exclude_deleted:
        overrides["INCLUDE_DELETED"] = False
    if args.malformed is not None:
        overrides["MALFORMED_PATH_POLICY"] = args.malformed
    if args.initial_commit is not None:
        overrides["INITIAL_COMMIT_POLICY"] = args.initial_commit
    return settings.model_copy(update=overrides)


def format_output(modules: Sequence[str], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(list(modules), separators=(",", ":"))
    if fmt == "csv":
        return ",".join(modules)
    return "\n".join(modules)


def write_github_output(result: ChangeSetResult) -> None:
    output_file = os.getenv("GITHUB_OUTPUT", "").strip()
    if not output_file:
        logger.warning("--github-output given but GITHUB_OUTPUT is not set")
        return
    with open(output_file, "a", encoding="utf-8") as handle:
        handle.write(f"modules={result.to_json()}\n")
        handle.write(f"any_changed={'false' if result.is_empty else 'true'}\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_overrides(get_settings(), args)
    configure_logging(settings.LOG_LEVEL)

    diff_provider = None
    if args.files_from == "-":
        diff_provider = StaticDiffProvider.from_stream(sys.stdin)
    elif args.files_from:
        try:
            diff_provider = StaticDiffProvider.from_file(args.files_from)
        except OSError as e:
            print(f"Cannot read {args.files_from}: {e}", file=sys.stderr)
            return 1

    resolver = create_resolver_from_settings(settings, diff_provider)
    try:
        result = resolver.resolve(args.old, args.new, args.path_filter)
    except ChangeSetError as e:
        print(f"changeset-resolver: {e}", file=sys.stderr)
        return 1
    finally:
        resolver.diff_provider.close()

    print(format_output(result.modules, args.output))
    if args.github_output:
        write_github_output(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
