"""
CLI entrypoint for batch-scoring language guesses.

This script performs the following steps:
- loads .env and configs/engine.yaml
- creates a per-run output folder under outputs/
- loads the language taxonomy (primary + constructed-language sources)
- reads a table of guess/correct locale pairs
- scores every pair and writes a JSON report
- logs a short summary
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import LanguageFamilyEngine, report_records, score_pairs
from application.constants import CORRECT_COL, GUESS_COL, LOG_FILENAME, OUTPUT_ROOT, REPORT_FILENAME
from infrastructure.config import load_engine_config
from infrastructure.constants import ENGINE_CONFIG_FILE
from infrastructure.io import ensure_exists, read_table, write_json
from infrastructure.observability import configure_logging, get_log_context, set_log_context

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Score language guesses against a language-family taxonomy")
    p.add_argument("pairs", type=str, help="CSV/Excel file with guess and correct locale columns")
    p.add_argument(
        "--config",
        type=str,
        default=str(ENGINE_CONFIG_FILE),
        help="Path to engine.yaml (default: configs/engine.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env; skipped if missing)",
    )
    p.add_argument("--guess-col", type=str, default=GUESS_COL)
    p.add_argument("--correct-col", type=str, default=CORRECT_COL)
    p.add_argument(
        "--output-root",
        type=str,
        default=str(OUTPUT_ROOT),
        help="Directory under which a per-run folder is created",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    ensure_exists(config_path, "engine.yaml")
    pairs_path = Path(args.pairs)
    ensure_exists(pairs_path, "pairs table")

    cfg = load_engine_config(config_path)

    run_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{pairs_path.stem}"
    run_dir = Path(args.output_root) / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(log_file=log_path, console_level=getattr(logging, args.console_level))
    set_log_context(session_id=run_id, pairs_file=pairs_path.name)
    logger.info("Starting run: run_id=%s", run_id)

    engine = LanguageFamilyEngine(cfg)
    if not asyncio.run(engine.load()):
        logger.error("Taxonomy unavailable; aborting. See %s", log_path)
        return 1

    pairs_df = read_table(pairs_path)
    logger.info("Pairs loaded: %d rows from %s", pairs_df.shape[0], pairs_path)

    report_df = score_pairs(engine, pairs_df, guess_col=args.guess_col, correct_col=args.correct_col)
    report_path = write_json(
        run_dir / REPORT_FILENAME,
        {"context": get_log_context(), "comparisons": report_records(report_df)},
    )

    scored = report_df["score"].dropna()
    if not scored.empty:
        logger.info("Mean similarity: %.1f over %d scored pair(s)", scored.astype(float).mean(), len(scored))
    logger.info("Saved report to %s", report_path)
    logger.info("Detailed log: %s", log_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
