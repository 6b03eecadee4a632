"""Command line access to an avatar store."""

from __future__ import annotations

import argparse
import os
import shutil
import sys
from pathlib import Path
from typing import List, Optional

from avatarstore.exceptions import AvatarStoreError
from avatarstore.logging_config import get_logger, setup_logging
from avatarstore.settings import LOG_LEVELS, Settings
from avatarstore.storage.local import LocalAvatarStore

logger = get_logger(__name__)


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="avatarstore", description="Store and fetch avatar images")
    parser.add_argument("--config", type=Path, help="YAML configuration file (default: config/default.yaml)")
    parser.add_argument("--base-dir", type=Path, help="Avatar root directory, overrides the configuration")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Log level, overrides the configuration")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")

    commands = parser.add_subparsers(dest="command", required=True)

    put = commands.add_parser("put", help="Store an image for an owner and print the avatar filename")
    put.add_argument("owner", help="Owner key, e.g. a user id")
    put.add_argument("file", type=Path, help="Image file to store")
    put.add_argument("--max-dimension", type=int, help="Resize limit in pixels, 0 disables resizing")

    get = commands.add_parser("get", help="Fetch a stored avatar")
    get.add_argument("filename", help="Avatar filename returned by put")
    get.add_argument("--output", "-o", type=Path, help="Write the avatar here instead of stdout")

    ident = commands.add_parser("id", help="Print the cache-busting id of an avatar")
    ident.add_argument("filename", help="Avatar filename returned by put")

    location = commands.add_parser("location", help="Print the shard directory of a key")
    location.add_argument("key", help="Owner key or avatar filename")

    return parser.parse_args(args)


def _load_settings(args: argparse.Namespace) -> Settings:
    if args.config is None and not os.getenv("AVATARSTORE_CONFIG") and not Path("config/default.yaml").exists():
        settings = Settings.from_environment()
    else:
        settings = Settings.load(args.config)

    avatars = settings.avatars
    if args.base_dir is not None:
        avatars = avatars.model_copy(update={"base_dir": args.base_dir})
    if getattr(args, "max_dimension", None) is not None:
        avatars = avatars.model_copy(update={"max_dimension": args.max_dimension})

    log_settings = settings.logging
    if args.log_level:
        log_settings = log_settings.model_copy(update={"level": args.log_level})
    if args.json_logs:
        log_settings = log_settings.model_copy(update={"json_format": True})
    return settings.model_copy(update={"avatars": avatars, "logging": log_settings})


def run(args: argparse.Namespace) -> int:
    settings = _load_settings(args)
    setup_logging(
        level=settings.logging.level,
        json_format=settings.logging.json_format,
        log_file=settings.logging.log_file,
    )
    store = LocalAvatarStore.from_settings(settings)

    if args.command == "put":
        with args.file.open("rb") as src:
            filename = store.put(args.owner, src)
        print(filename)
    elif args.command == "get":
        with store.reading(args.filename) as (fh, size):
            if args.output is not None:
                with args.output.open("wb") as dst:
                    shutil.copyfileobj(fh, dst)
                logger.info(f"Wrote {size} bytes to {args.output}")
            else:
                shutil.copyfileobj(fh, sys.stdout.buffer)
    elif args.command == "id":
        print(store.id(args.filename))
    elif args.command == "location":
        print(store.location(args.key))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    try:
        return run(args)
    except AvatarStoreError as exc:
        logger.error(exc.message)
        return 1
    except OSError as exc:
        logger.error(f"{args.command} failed: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
