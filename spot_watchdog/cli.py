"""
Command line entry point for the spot instance watchdog.
"""

import argparse
import sys
from pathlib import Path

from tabulate import tabulate

from .core.compute import ComputeProvider, GceComputeProvider
from .instances.discovery import describe_instance, fetch_instance
from .notifications.email import EmailNotifier
from .orchestration.scheduler import PeriodicScheduler
from .orchestration.watchdog import InstanceWatchdog
from .utils.config import WatchdogConfig, load_config, validate_config
from .utils.exceptions import WatchdogError
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spot-watchdog",
        description="Restart a terminated spot instance and email its new IP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Poll the instance every POLLING_RATE seconds until interrupted
  spot-watchdog --env-file /app/.env

  # Run a single check (e.g. from cron)
  spot-watchdog --once

  # Show the instance status without restarting it
  spot-watchdog --status
        """,
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Environment file with KEY=VALUE lines (default: ./.env if present)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--once", action="store_true", help="Run a single check and exit"
    )
    mode.add_argument(
        "--status", action="store_true", help="Show the instance status and exit"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: LOG_LEVEL or INFO)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file",
    )

    return parser


def show_status(config: WatchdogConfig, provider: ComputeProvider) -> None:
    """Print the current instance status as a table."""
    instance = fetch_instance(
        provider, config.project_id, config.zone, config.instance_name
    )
    summary = describe_instance(instance)
    headers = ["Instance", "Zone", "Status", "Public IP"]
    table_data = [
        [summary["name"], summary["zone"], summary["status"], summary["public_ip"]]
    ]
    print(tabulate(table_data, headers=headers, tablefmt="grid"))


def run_watchdog(
    watchdog: InstanceWatchdog, interval: float, poll_timeout: float = 1.0
) -> int:
    """Run the watchdog until interrupted. Returns the process exit code."""
    scheduler = PeriodicScheduler(watchdog.run_tick, interval)

    logger.info(f"Polling {watchdog.instance_name} every {interval} seconds.")
    scheduler.start_scheduler()

    try:
        while not scheduler.wait(poll_timeout):
            pass
    except KeyboardInterrupt:
        scheduler.stop_scheduler()
        logger.info("Interrupt signal received. Exiting...")
        return 0

    if scheduler.failed:
        logger.error(f"Watchdog stopped after a fatal error: {scheduler.error}")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level or "INFO", args.log_file)

    try:
        config = load_config(args.env_file)
    except WatchdogError as e:
        logger.error(f"Error loading environment file: {e}")
        return 1

    if args.log_level is None and config.log_level.upper() != "INFO":
        setup_logging(config.log_level, args.log_file)

    errors = validate_config(config)
    if errors:
        logger.error("Configuration validation failed:")
        for error in errors:
            logger.error(f"  - {error}")
        return 1

    try:
        provider = GceComputeProvider.from_credentials(config.credentials_file)

        if args.status:
            show_status(config, provider)
            return 0

        watchdog = InstanceWatchdog(config, provider, EmailNotifier(config))

        if args.once:
            logger.info(f"Running spot check for {config.instance_name}")
            watchdog.run_tick()
            return 0

        return run_watchdog(watchdog, config.polling_interval)

    except KeyboardInterrupt:
        logger.info("Interrupt signal received. Exiting...")
        return 0

    except WatchdogError as e:
        logger.error(f"Watchdog failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
