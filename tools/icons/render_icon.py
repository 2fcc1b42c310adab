#!/usr/bin/env python3
"""Render an iconkit scene to a PNG file."""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from packages.iconkit_core.render.config import IconConfig, load_config
from packages.iconkit_core.render.errors import InvalidConfigError
from packages.iconkit_core.render.scene import render_icon_to_file


def default_out_path() -> Path:
    raw = os.environ.get("ICONKIT_ICON_PATH")
    if raw:
        return Path(raw)
    return ROOT / "assets" / "icon.png"


def main() -> int:
    parser = argparse.ArgumentParser(description="Render an icon scene to PNG")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Icon config JSON (default: built-in robot icon)",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output PNG path (default: $ICONKIT_ICON_PATH or assets/icon.png)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON output",
    )
    args = parser.parse_args()

    if args.config is not None and not args.config.exists():
        print(f"ERR: config file not found: {args.config}")
        return 1

    try:
        config = load_config(args.config) if args.config else IconConfig()
    except InvalidConfigError as exc:
        print(f"ERROR: {exc}")
        for detail in exc.details:
            loc = ".".join(str(part) for part in detail.get("loc", ()))
            print(f"ERR: {loc}: {detail.get('msg')}")
        return 1

    out_path, size = render_icon_to_file(args.out or default_out_path(), config)

    if args.json:
        payload = {
            "ok": True,
            "out_path": str(out_path),
            "bytes": size,
            "width": config.width,
            "height": config.height,
        }
        print(json.dumps(payload, indent=2))
    else:
        print(f"Icon written to {out_path} ({size} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
