#!/usr/bin/env python3
"""
Launch the sort trace API from the repo root:

    python run_server.py

This launcher can:
- auto-select a free port if the requested one is taken
- start the FastAPI server
- open the browser to the algorithm listing
"""
from __future__ import annotations

import argparse
import socket
import sys
import threading
import webbrowser
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent
SRC_DIR = REPO_ROOT / "src"


def _add_repo_paths() -> None:
    # Make the package importable when running from a checkout without installing.
    src = str(SRC_DIR)
    if src not in sys.path:
        sys.path.insert(0, src)


_WILDCARD_HOSTS = {"0.0.0.0": "127.0.0.1", "::": "::1"}


def _url_host(host: str) -> str:
    """Host to put in the printed URL; wildcard binds map to loopback."""
    host = _WILDCARD_HOSTS.get(host, host)
    return f"[{host}]" if ":" in host else host


def _bind_error(host: str, port: int) -> OSError | None:
    """Return the bind error for ``port``, or ``None`` when it can be bound."""
    try:
        with socket.create_server((host, port)):
            return None
    except OSError as exc:
        return exc


def find_available_port(host: str, start_port: int, *, max_tries: int = 50) -> tuple[int, bool]:
    """First bindable port in ``start_port .. start_port + max_tries - 1``.

    The flag is true when the requested port itself was taken.
    """
    if max_tries < 1:
        raise ValueError("max_tries must be >= 1")

    errors: list[OSError] = []
    for port in range(start_port, start_port + max_tries):
        error = _bind_error(host, port)
        if error is None:
            return port, port != start_port
        errors.append(error)

    raise RuntimeError(
        f"Ports {start_port}-{start_port + max_tries - 1} on {host} are all in use (last error: {errors[-1]})"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python run_server.py",
        description="Launch the sort trace API (pick a free port, run uvicorn, open browser).",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host to listen on (default: %(default)s).")
    parser.add_argument("--port", type=int, default=7070, help="Starting port (default: %(default)s).")
    parser.add_argument("--no-reload", action="store_true", help="Disable uvicorn --reload.")
    parser.add_argument("--no-open", action="store_true", help="Skip opening the browser automatically.")
    args = parser.parse_args(argv)

    try:
        chosen_port, did_fallback = find_available_port(args.host, args.port, max_tries=50)
    except (RuntimeError, ValueError) as exc:
        print(f"[sort-trace] Failed to select a free port: {exc}", file=sys.stderr)
        return 2

    url = f"http://{_url_host(args.host)}:{chosen_port}"
    if did_fallback:
        print(f"[sort-trace] Serving on {url} (selected because {args.port} was in use).")
    else:
        print(f"[sort-trace] Serving on {url}.")
    print("  GET  /algorithms")
    print("  POST /run?algorithm=bubble")
    print("  GET  /generate?count=N&max=n")

    if not args.no_open:
        threading.Timer(1.0, webbrowser.open, args=(f"{url}/algorithms",)).start()

    _add_repo_paths()

    import uvicorn

    try:
        uvicorn.run(
            "sort_trace.web.main:app",
            host=args.host,
            port=chosen_port,
            reload=not args.no_reload,
        )
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
