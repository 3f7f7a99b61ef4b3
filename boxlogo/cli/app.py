from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, GeneratorConfig, default_config, load_config
from ..logging.init import log_summary, set_debug, setup_logging
from ..models.color import ColorRole
from ..models.errors import ErrorKind, GeneratorAbort
from ..render.renderer import TemplateRenderer
from ..services.colors import resolve_color
from ..services.orchestrator import load_rows, run_batch
from ..services.prompts import ConsolePrompter, Prompter
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then config (``--config`` > ``$BOXLOGO_CONFIG`` > config/boxlogo.yml)
- Run the batch (CSV / output directory from flags or interactive prompts)
- Every fatal path logs exactly one message and returns its ErrorKind exit code
"""

EXIT_SUCCESS = 0

DEFAULT_CONFIG_PATH = Path("config/boxlogo.yml")
CONFIG_ENV_VAR = "BOXLOGO_CONFIG"


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv (values override the process environment)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="CSV -> box logo PNG batch generator")
    p.add_argument("--csv", type=Path, help="CSV file to read (prompted when omitted)")
    p.add_argument("--output", type=Path, help="Output directory (prompted when omitted)")
    p.add_argument("--config", type=Path, help=f"Config YAML (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--list-rows", action="store_true", help="Print parsed rows with resolved colors then exit")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _resolve_config(explicit: Path | None) -> GeneratorConfig:
    """Pick and load the config.

    An explicit path (flag or env var) must exist; the default path is
    optional and built-in defaults apply when it is absent.
    """
    if explicit is None and os.getenv(CONFIG_ENV_VAR):
        explicit = Path(os.environ[CONFIG_ENV_VAR])
    if explicit is not None:
        return load_config(explicit)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()


def _list_rows(csv_path: Path) -> int:
    rows = load_rows(csv_path)
    print(f"FILE: {csv_path.name} valid_rows={len(rows)}")
    for i, row in enumerate(rows):
        text = resolve_color(row, ColorRole.TITLE).to_hex()
        bg = resolve_color(row, ColorRole.BACKGROUND).to_hex()
        print(f"  [{i}] {row.mode.value} name={row.file_name!r} text={row.label_text!r} title={text} background={bg}")
    return EXIT_SUCCESS


def _abort(logger, abort: GeneratorAbort) -> int:
    kind = abort.kind
    if abort.detail:
        logger.debug(f"abort: {kind.name}: {abort.detail}")
    if kind is ErrorKind.CANCELLED:
        logger.info(kind.operator_message())
    else:
        logger.error(kind.operator_message())
    return kind.exit_code


def main(argv: list[str] | None = None, prompter: Prompter | None = None) -> int:
    logger = setup_logging()

    # [] が渡された場合に sys.argv が混入しないよう None のときのみ読む
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"), override=True)

    try:
        cfg = _resolve_config(args.config)
    except ConfigError as e:
        logger.debug(f"config: {e}")
        logger.error(f"{ErrorKind.CONFIG_INVALID.operator_message()} ({e})")
        return ErrorKind.CONFIG_INVALID.exit_code

    if prompter is None:
        prompter = ConsolePrompter()

    try:
        if args.list_rows:
            csv_path = args.csv or prompter.select_csv_file()
            if csv_path is None:
                raise GeneratorAbort(ErrorKind.CANCELLED, "csv selection cancelled")
            return _list_rows(csv_path)

        renderer = TemplateRenderer(cfg.template, output_suffix=cfg.output.suffix)
        result = run_batch(
            prompter,
            renderer,
            csv_path=args.csv,
            output_directory=args.output,
        )
    except GeneratorAbort as abort:
        return _abort(logger, abort)

    # log_summary が "SUMMARY " を付与するので prefix を除く
    summary_line = render_summary_line(result)
    log_summary(summary_line[len("SUMMARY "):])
    return EXIT_SUCCESS
