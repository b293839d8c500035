#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Events & participants backend (SQLite + FastAPI)

Commands:
  init                Create the events/participants tables if absent
  serve               Run the HTTP API with uvicorn (default port 3000)

Notes:
- The database path comes from EVENTS_DB_PATH, then config.yaml, then ./events.db.
"""

import argparse
import logging
import sys

from .db import DEFAULT_PORT, Store, read_config_yaml
from .errors import StoreError


# ---------------- Commands ----------------

def cmd_init(args):
    store = Store(cfg_path=args.config)
    try:
        store.ensure_schema()
    except StoreError as e:
        raise SystemExit(f"DB init failed: {e}")
    print(f"DB initialized at {store.db_path}.")


def cmd_serve(args):
    import uvicorn

    from .api import create_app

    cfg = read_config_yaml(args.config)
    host = args.host or cfg.get("host", "127.0.0.1")
    port = args.port or cfg.get("port", DEFAULT_PORT)
    app = create_app(cfg_path=args.config)
    logging.getLogger(__name__).info("Server running on port %s", port)
    uvicorn.run(app, host=host, port=port)


# ---------------- Entry ----------------

def main(argv=None):
    parser = argparse.ArgumentParser(description="Events & participants backend (SQLite + FastAPI)")
    parser.add_argument("--config", default=None, help="path to config.yaml (default: project root)")
    parser.add_argument("--log-level", default="INFO")
    sub = parser.add_subparsers()

    p_init = sub.add_parser("init", help="create the database schema")
    p_init.set_defaults(func=cmd_init)

    p_serve = sub.add_parser("serve", help="run the HTTP API")
    p_serve.add_argument("--host", required=False)
    p_serve.add_argument("--port", required=False, type=int)
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
