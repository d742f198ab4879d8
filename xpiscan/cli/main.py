from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List

from xpiscan.core.manifest import RDF_DEFAULT_NAMESPACE, ManifestError
from xpiscan.core.plugins import PluginRegistry, load_builtin_plugins, select_manifest_inspector
from xpiscan.utils.json_safe import to_jsonable

log = logging.getLogger("xpiscan.cli")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_log_level() -> str:
    level = os.environ.get("XPISCAN_LOG_LEVEL", "").strip().upper()
    return level if level in LOG_LEVELS else "WARNING"


def _configure_logging(level: str) -> None:
    # Diagnostics go to stderr so stdout stays machine-readable JSON.
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the xpiscan API server (binds to 127.0.0.1 by default)."""

    try:
        import uvicorn
    except ImportError as e:
        print(f"error: uvicorn is required to serve the API: {e}", file=sys.stderr)
        return 2

    from xpiscan.api.server import create_app

    app = create_app()
    uvicorn.run(app, host=args.host, port=int(args.port), log_level=args.log_level)
    return 0


def cmd_list_plugins(_: argparse.Namespace) -> int:
    """List loaded plugins."""
    registry = PluginRegistry()
    load_builtin_plugins(registry)

    for p in registry.list_plugins():
        md = p.metadata
        actions = ",".join(sorted(md.allowed_actions))
        print(f"{md.plugin_id}  v{md.version}  actions=[{actions}]  name={md.name}")
    return 0


def cmd_inspect_file(args: argparse.Namespace) -> int:
    """Extract install.rdf metadata from a package or bare manifest.

    Prints {plugin_id, file, metadata, messages} as JSON. Field diagnostics
    are part of the output; structural failures exit non-zero.
    """

    _configure_logging(args.log_level)

    path = os.path.abspath(args.path)
    if not os.path.exists(path):
        print(f"error: file not found: {path}", file=sys.stderr)
        return 2
    if not os.path.isfile(path):
        print(f"error: not a regular file: {path}", file=sys.stderr)
        return 2

    registry = PluginRegistry()
    load_builtin_plugins(registry)

    try:
        plugin = select_manifest_inspector(registry, path)
    except RuntimeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    log.debug("Selected %s for %s", plugin.metadata.plugin_id, os.path.basename(path))

    try:
        inspection = plugin.inspect_file(path, namespace=args.namespace)
    except ManifestError as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(to_jsonable(inspection), indent=2, sort_keys=True))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    p = argparse.ArgumentParser(prog="xpiscan", description="install.rdf metadata extractor")
    sub = p.add_subparsers(dest="cmd", required=True)

    lp = sub.add_parser("list-plugins", help="List built-in plugins")
    lp.set_defaults(func=cmd_list_plugins)

    ip = sub.add_parser("inspect-file", help="Extract metadata from an .xpi or install.rdf")
    ip.add_argument("path", help="Path to file")
    ip.add_argument(
        "--namespace",
        default=os.environ.get("XPISCAN_RDF_NAMESPACE") or RDF_DEFAULT_NAMESPACE,
        help="Namespace URI qualifying <em:*> field tags",
    )
    ip.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=_default_log_level())
    ip.set_defaults(func=cmd_inspect_file)

    sv = sub.add_parser("serve", help="Run the xpiscan FastAPI server")
    sv.add_argument("--host", default="127.0.0.1")
    sv.add_argument("--port", default=8080, type=int)
    sv.add_argument("--log-level", type=str.lower, choices=[lv.lower() for lv in LOG_LEVELS], default="info")
    sv.set_defaults(func=cmd_serve)

    return p


def main(argv: List[str] | None = None) -> int:
    """CLI entry."""
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
