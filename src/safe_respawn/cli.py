# Area: Shared
"""
safe_respawn.cli - Command-line interface
=========================================

Maintenance commands for the config and data files.

Usage:
    python -m safe_respawn --write-config                 # Create or migrate config
    python -m safe_respawn --show-config                  # Print effective config
    python -m safe_respawn --status                       # Data file summary
    python -m safe_respawn --reset-data                   # Forget all players

Paths can also be set through environment variables (a .env file in the
working directory is honoured):
    SAFE_RESPAWN_CONFIG, SAFE_RESPAWN_DATA, SAFE_RESPAWN_LOG_LEVEL
"""

import argparse
import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from ._core import ProtectionRegistry
from ._shared import JsonConnectedPlayersStore, log_error, setup_logging
from .config import load_config
from .errors import ConfigError

DEFAULT_CONFIG_PATH = "config/SafeRespawn.json"
DEFAULT_DATA_PATH = "data/SafeRespawn.json"


def _read_bytes(path: str) -> Optional[bytes]:
    config_path = Path(path)
    return config_path.read_bytes() if config_path.is_file() else None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Safe Respawn - spawn protection maintenance tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m safe_respawn --write-config
  python -m safe_respawn --config server/SafeRespawn.json --show-config
  SAFE_RESPAWN_DATA=data/sr.json python -m safe_respawn --status
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        default=os.environ.get("SAFE_RESPAWN_CONFIG", DEFAULT_CONFIG_PATH),
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--data",
        type=str,
        default=os.environ.get("SAFE_RESPAWN_DATA", DEFAULT_DATA_PATH),
        help="Path to JSON data file holding previously connected players",
    )

    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Create the config file with defaults, or migrate an older one",
    )

    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration as JSON",
    )

    parser.add_argument(
        "--status",
        action="store_true",
        help="Print how many players have connected before",
    )

    parser.add_argument(
        "--reset-data",
        action="store_true",
        help="Forget every previously connected player",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("SAFE_RESPAWN_LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)
    setup_logging(log_file_path=None, level=getattr(logging, args.log_level.upper(), logging.INFO))

    config_before = _read_bytes(args.config)
    try:
        config = load_config(args.config)
    except ConfigError as e:
        log_error(e)
        return 1

    if args.write_config:
        if _read_bytes(args.config) != config_before:
            print(f"Config written to {args.config} (version {config.version})")
        else:
            print(f"Config {args.config} is up to date (version {config.version})")

    if args.show_config:
        print(json.dumps(config.to_json_dict(), indent=2))

    if args.status or args.reset_data:
        registry = ProtectionRegistry(store=JsonConnectedPlayersStore(args.data))
        if args.reset_data:
            registry.reset_connected()
            print(f"Previously connected players reset in {args.data}")
        if args.status:
            print(f"Previously connected players: {registry.connected_count}")

    return 0
