from __future__ import annotations

import argparse
import logging
import os

import uvicorn

from server.config import ENV_AI_SEED, ENV_COMPUTER_DELAY, ENV_STATE_FILE


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the Checkers FastAPI backend.")
	parser.add_argument("--host", default="0.0.0.0", help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=8000, help="Port for the API server.")
	parser.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")
	parser.add_argument("--log-level", default="info", help="Log level for the app and uvicorn.")
	parser.add_argument("--state-file", default=None, help="JSON file used to save and resume the game.")
	parser.add_argument("--computer-delay", type=float, default=None, help="Seconds to wait before a computer move.")
	parser.add_argument("--ai-seed", type=int, default=None, help="Seed for the computer opponent's tie-breaks.")
	return parser.parse_args()


def _export_settings(args: argparse.Namespace) -> None:
	# The app reads its settings from the environment so reload workers see them too.
	if args.state_file is not None:
		os.environ[ENV_STATE_FILE] = args.state_file
	if args.computer_delay is not None:
		os.environ[ENV_COMPUTER_DELAY] = str(args.computer_delay)
	if args.ai_seed is not None:
		os.environ[ENV_AI_SEED] = str(args.ai_seed)


def main() -> None:
	args = parse_args()
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	_export_settings(args)
	uvicorn.run(
		"server.app:app",
		host=args.host,
		port=args.port,
		reload=args.reload,
		log_level=args.log_level,
	)


if __name__ == "__main__":
	main()
