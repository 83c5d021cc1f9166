#!/usr/bin/env python3
"""
LUIS command-line tool

Thin wrapper over LuisProgClient for inspecting applications and driving the
train/publish cycle from a shell. Configuration comes from get_config()
(config/config.yml and LUIS_* environment variables).

Usage:
    luis-prog apps
    luis-prog apps --name Demo
    luis-prog intents <app-id> 0.1
    luis-prog train <app-id> 0.1
    luis-prog status <app-id> 0.1
    luis-prog publish <app-id> 0.1 --region westus --staging
"""
import argparse
import asyncio
import json
import sys
from typing import Any, List, Optional

from pydantic import BaseModel

from .common.config import get_config
from .common.logger import configure_logging, get_logger
from .core.client import LuisProgClient
from .core.exceptions import LuisError
from .factory import create_luis_client

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="luis-prog", description="LUIS Programmatic API client")
    parser.add_argument("--config", default=None, help="Path to YAML configuration file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    apps = subparsers.add_parser("apps", help="List applications or look one up")
    lookup = apps.add_mutually_exclusive_group()
    lookup.add_argument("--id", dest="app_id", help="Application ID")
    lookup.add_argument("--name", help="Exact application name")

    for command, help_text in (
        ("intents", "List intents of an application version"),
        ("entities", "List entities of an application version"),
        ("train", "Start training an application version"),
        ("status", "Show training status of an application version"),
        ("publish", "Publish an application version"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("app_id", help="Application ID")
        sub.add_argument("version_id", help="Application version")
        if command == "publish":
            sub.add_argument("--region", required=True, help="Publish region")
            sub.add_argument("--staging", action="store_true", help="Publish to the staging slot")

    return parser


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(by_alias=True, exclude_none=True)
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


async def run_command(client: LuisProgClient, args: argparse.Namespace) -> Any:
    """Execute one parsed command against the client"""
    if args.command == "apps":
        if args.app_id:
            return await client.get_app_by_id(args.app_id)
        if args.name:
            return await client.get_app_by_name(args.name)
        return await client.get_all_apps()
    if args.command == "intents":
        return await client.get_all_intents(args.app_id, args.version_id)
    if args.command == "entities":
        return await client.get_all_entities(args.app_id, args.version_id)
    if args.command == "train":
        return await client.train(args.app_id, args.version_id)
    if args.command == "status":
        return await client.get_training_status_list(args.app_id, args.version_id)
    if args.command == "publish":
        return await client.publish(args.app_id, args.version_id, args.staging, args.region)
    raise ValueError(f"Unknown command: {args.command}")


async def _run(args: argparse.Namespace) -> Any:
    config = get_config(args.config)
    configure_logging(log_level=config.log_level, use_json_formatter=config.log_json)
    async with create_luis_client(config) as client:
        return await run_command(client, args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        result = asyncio.run(_run(args))
    except (LuisError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(_to_jsonable(result), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
