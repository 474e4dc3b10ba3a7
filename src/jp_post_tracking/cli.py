# src/jp_post_tracking/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config.logging_config import get_logger
from .config.env import EnvError, get_app_env
from .io.paths import derive_output_paths
from .io.schema import INPUT_CODE_COLUMN


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jp-post-tracking",
        description="Look up Japan Post tracking numbers and report whether each was used and delivered.",
    )
    p.add_argument("codes", nargs="*",
                   help="Tracking numbers (non-digits such as '-' are ignored).")
    p.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read tracking numbers from a .xlsx or .csv file.",
    )
    p.add_argument(
        "--column",
        default=INPUT_CODE_COLUMN,
        help=f"Column holding tracking numbers in --input. Default: {INPUT_CODE_COLUMN!r}",
    )
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write results to this .xlsx/.csv (default: <input>_tracking.xlsx when --input is given).",
    )
    p.add_argument(
        "--replay-dir",
        type=Path,
        default=None,
        help="Directory containing <tracking number>.html pages for deterministic replays.",
    )
    p.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Log file (default: <input>.log when --input is given).",
    )
    p.add_argument(
        "--no-console",
        action="store_true",
        help="Disable console logging (file logging remains).",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO",
    )
    p.add_argument(
        "--strict-env",
        action="store_true",
        help="Require JP_POST_SEARCH_URL to be present; otherwise exit 2.",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    output_path = args.output
    log_path = args.log_file
    if args.input is not None:
        try:
            default_output, default_log = derive_output_paths(args.input)
        except FileNotFoundError:
            print(f"error: input file not found: {args.input}", file=sys.stderr)
            return 2
        output_path = output_path or default_output
        log_path = log_path or default_log

    logger = get_logger(
        "jp_post_tracking",
        level=args.log_level,
        console=not args.no_console,
        log_file=log_path,
    )
    logger.debug("Logger initialized.")

    try:
        env_cfg = get_app_env(strict=args.strict_env)
    except EnvError as e:
        logger.error("Environment error: %s", e)
        return 2

    codes = list(args.codes)
    if args.input is not None:
        from .io.codes import read_tracking_codes

        try:
            codes.extend(read_tracking_codes(args.input, column=args.column))
        except KeyError as e:
            logger.error("Input error: %s", e)
            return 2
        logger.info("Input: %s", args.input)

    if not codes:
        logger.error("No tracking numbers given.")
        return 2

    if args.replay_dir:
        from .api.client import ReplayClient

        try:
            client = ReplayClient(args.replay_dir)
        except ValueError as e:
            logger.error("Replay error: %s", e)
            return 2
        logger.info("Replay mode enabled: %s", args.replay_dir)
    else:
        from .api.japanpost import JapanPostClient, JapanPostConfig

        cfg = JapanPostConfig.from_env(env_cfg)
        client = JapanPostClient(cfg)
        logger.info("Live Japan Post lookup (url=%s proxy=%s)",
                    cfg.search_url, client.is_available_proxy())

    from .pipelines.tracker import TrackingPipeline, outcomes_to_frame

    outcomes = TrackingPipeline(logger, client=client).run(codes)

    if output_path is not None:
        from .io.writer import write_results

        try:
            written = write_results(outcomes_to_frame(outcomes), output_path)
        except OSError as e:
            logger.error("Failed to write results: %s", e)
            return 1
        logger.info("Results: %s", written)

    if not all(o.ok for o in outcomes):
        return 1
    logger.info("Done.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
