"""
Command-line interface for the deal widget backend.

Runs the selector on a saved polling envelope, or fetches live payloads
first, and prints the plugin payload as JSON.
"""

import asyncio
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from steam_deals.config import CheapSharkConfig, get_settings
from steam_deals.logger import get_logger, setup_logging

logger = get_logger(__name__, component="cli")


class CLIOutput(BaseModel):
    """Structured output for CLI commands."""

    success: bool
    command: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] | list[Any] | None = None
    error: str | None = None


def print_json(output: CLIOutput) -> None:
    """Print output as formatted JSON."""
    print(json.dumps(output.model_dump(), indent=2, default=str))


def load_envelope(source: str) -> Any:
    """Read a polling envelope from a file path, or stdin for ``-``."""
    if source == "-":
        return json.load(sys.stdin)
    with Path(source).open(encoding="utf-8") as f:
        return json.load(f)


def cmd_transform(source: str = "-") -> None:
    """Run the selector on a saved envelope."""
    from steam_deals.selection import run_transform

    logger.info("Running transform", source=source)

    envelope = load_envelope(source)
    # Steam settings are not read on this path
    payload = run_transform(envelope, icon_base_url=CheapSharkConfig().icon_base_url)

    print_json(CLIOutput(success=True, command="transform", data=payload))


async def cmd_fetch(custom_fields: dict[str, Any]) -> None:
    """Fetch live payloads, then run the selector."""
    from steam_deals.polling import PayloadFetcher
    from steam_deals.selection import run_transform

    logger.info("Fetching live payloads", **custom_fields)

    async with PayloadFetcher() as fetcher:
        envelope = await fetcher.fetch_envelope(custom_fields)

    payload = run_transform(envelope, icon_base_url=get_settings().cheapshark.icon_base_url)
    print_json(CLIOutput(success=True, command="fetch", data=payload))


def cmd_test_config() -> None:
    """Test configuration loading."""
    settings = get_settings()

    output = CLIOutput(
        success=True,
        command="test-config",
        data={
            "environment": settings.environment,
            "cheapshark_base_url": settings.cheapshark.base_url,
            "cheapshark_page_size": settings.cheapshark.page_size,
            "icon_base_url": settings.cheapshark.icon_base_url,
            "steam_base_url": settings.steam.base_url,
            "steam_id_configured": settings.steam.steam_id is not None,
            "api_key_configured": settings.steam.api_key is not None,
            "log_level": settings.logging.level,
        },
    )
    print_json(output)


def parse_fetch_options(args: list[str]) -> dict[str, Any]:
    """Turn ``fetch`` options into plugin custom field values."""
    custom_fields: dict[str, Any] = {}
    options = {"--min-savings": "min_savings", "--min-deal-rating": "min_deal_rating"}

    idx = 0
    while idx < len(args):
        arg = args[idx]
        if arg == "--wishlist-only":
            custom_fields["wishlist_only"] = True
        elif arg in options:
            if idx + 1 >= len(args):
                raise ValueError(f"{arg} requires a value")
            custom_fields[options[arg]] = args[idx + 1]
            idx += 1
        else:
            raise ValueError(f"Unknown option: {arg}")
        idx += 1

    return custom_fields


def print_usage() -> None:
    """Print CLI usage information."""
    usage = """
Steam Deals CLI
===============

Usage: steam-deals <command> [arguments]

Commands:
  transform [path|-]          Select a deal from a saved polling envelope (stdin by default)
  fetch [options]             Fetch live payloads and select a deal
  test-config                 Test configuration loading

Fetch options:
  --min-savings <n>           Minimum percent off
  --min-deal-rating <n>       Minimum CheapShark deal rating
  --wishlist-only             Only pick wishlisted games

Examples:
  steam-deals transform tests/fixtures/envelope.json
  steam-deals fetch --min-savings 50 --min-deal-rating 8
"""
    print(usage)


def main() -> None:
    """Main CLI entry point."""
    setup_logging()

    if len(sys.argv) < 2:
        print_usage()
        sys.exit(1)

    command = sys.argv[1]

    try:
        if command == "transform":
            source = sys.argv[2] if len(sys.argv) > 2 else "-"
            cmd_transform(source)

        elif command == "fetch":
            custom_fields = parse_fetch_options(sys.argv[2:])
            asyncio.run(cmd_fetch(custom_fields))

        elif command == "test-config":
            cmd_test_config()

        elif command in ("help", "--help", "-h"):
            print_usage()

        else:
            print(f"Unknown command: {command}")
            print_usage()
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.exception("CLI error", error=str(e))
        output = CLIOutput(
            success=False,
            command=command,
            error=str(e),
        )
        print_json(output)
        sys.exit(1)


if __name__ == "__main__":
    main()
