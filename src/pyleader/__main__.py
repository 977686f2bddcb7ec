# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	Entry point: python -m pyleader
#
# Notes:
#	- --prompt tk shows alerts and the conflict prompt as Tk dialogs;
#	  --prompt console (default) keeps everything in the terminal.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/17/2025	Paul G. LeDuc				Initial coding / release
# 01/16/2026	Paul G. LeDuc				Console front end + CLI options
# ---------------------------------------------------------------------------

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from pyleader.app.app import LeaderApp
from pyleader.app.console import run_console
from pyleader.core.logging import get_app_logger, init_logging
from pyleader.core.settings import AppConfig
from pyleader.core.telemetry import init_telemetry


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="pyleader", description="Leader-key action menu.")
	parser.add_argument("--config-dir", help="Directory holding config.json.")
	parser.add_argument("--settings", help="Path to settings.json.")
	parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...).")
	parser.add_argument("--prompt", choices=("console", "tk"), default="console", help="Where alerts and conflict prompts appear.")
	parser.add_argument("--url", help="Handle one pyleader:// URL and exit.")
	return parser


def build_app(cfg: AppConfig, prompt: str) -> LeaderApp:
	if prompt == "tk":
		from pyleader.ui.dialogs import TkAlertHandler, TkConflictPrompt

		return LeaderApp(
			cfg,
			alert_handler=TkAlertHandler(),
			conflict_prompt=TkConflictPrompt(theme=cfg.get("ui.theme")),
		)
	return LeaderApp(cfg)


def main(argv: Optional[Sequence[str]] = None) -> int:
	args = build_parser().parse_args(argv)

	cfg = AppConfig.load(args.settings).with_overrides(
		config_dir=args.config_dir,
		logging__level=args.log_level,
	)
	init_logging(cfg)
	init_telemetry(cfg, logger=get_app_logger("telemetry"))

	app = build_app(cfg, args.prompt)
	app.start()
	try:
		if args.url:
			app.open_url(args.url)
		else:
			run_console(app)
	finally:
		app.shutdown()
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
