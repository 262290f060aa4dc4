#!/usr/bin/env python3
"""Cross-platform setup and run script for the Weather Dashboard.

Works on Windows 10+, macOS, and Linux without make, bash, or
any platform-specific tooling beyond Python 3.10+.

Usage:
    python manage.py setup       Create the venv and install the package
    python manage.py run         Start the production server
    python manage.py dev         Start the server with auto-reload
    python manage.py test        Run backend tests
    python manage.py clean       Remove the venv and caches
    python manage.py status      Check installation state
"""

import argparse
import os
import shutil
import subprocess
import sys
import textwrap
import venv
from pathlib import Path

# ---------------------------------------------------------------------------
# Platform detection and paths
# ---------------------------------------------------------------------------

IS_WINDOWS = sys.platform == "win32"
ROOT = Path(__file__).resolve().parent
BACKEND_DIR = ROOT / "backend"
VENV_DIR = ROOT / ".venv"

if IS_WINDOWS:
    VENV_PYTHON = VENV_DIR / "Scripts" / "python.exe"
    VENV_PIP = VENV_DIR / "Scripts" / "pip.exe"
else:
    VENV_PYTHON = VENV_DIR / "bin" / "python"
    VENV_PIP = VENV_DIR / "bin" / "pip"

MIN_PYTHON = (3, 10)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def heading(msg: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {msg}")
    print(f"{'=' * 60}\n")


def step(msg: str) -> None:
    print(f"  -> {msg}")


def ok(msg: str) -> None:
    print(f"  [OK] {msg}")


def warn(msg: str) -> None:
    print(f"  [!!] {msg}")


def fail(msg: str) -> None:
    print(f"  [FAIL] {msg}", file=sys.stderr)


def run_cmd(
    cmd: list[str],
    cwd: Path | None = None,
    env: dict | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    kwargs: dict = {
        "cwd": str(cwd) if cwd else None,
        "check": check,
    }
    if env:
        kwargs["env"] = {**os.environ, **env}
    return subprocess.run(cmd, **kwargs)


def require_venv() -> bool:
    if VENV_PYTHON.exists():
        return True
    fail("Virtual environment not found. Run:  python manage.py setup")
    return False


def uvicorn_cmd(host: str, port: int, reload: bool = False) -> list[str]:
    cmd = [str(VENV_PYTHON), "-m", "uvicorn", "app.main:app",
           "--host", host, "--port", str(port), "--log-level", "info"]
    if reload:
        cmd += ["--reload", "--reload-dir", str(BACKEND_DIR / "app")]
    return cmd


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_setup(_args: argparse.Namespace) -> int:
    """Create venv, install the package with test extras, seed .env."""
    heading("Checking prerequisites")
    v = sys.version_info
    if v < MIN_PYTHON:
        fail(f"Python {v.major}.{v.minor} found — need {MIN_PYTHON[0]}.{MIN_PYTHON[1]}+")
        return 1
    ok(f"Python {v.major}.{v.minor}.{v.micro}")

    heading("Creating Python virtual environment")
    if VENV_PYTHON.exists():
        ok(f"venv already exists at {VENV_DIR}")
    else:
        step(f"Creating venv in {VENV_DIR}")
        venv.create(str(VENV_DIR), with_pip=True)
        ok("venv created")

    heading("Installing Python dependencies")
    step("Upgrading pip")
    run_cmd([str(VENV_PIP), "install", "--upgrade", "pip"])
    step("Installing weather-dashboard with test extras")
    run_cmd([str(VENV_PIP), "install", "-e", f"{ROOT}[test]"])
    ok("Python dependencies installed")

    env_file = ROOT / ".env"
    env_example = ROOT / ".env.example"
    if not env_file.exists() and env_example.exists():
        heading("Creating default .env file")
        shutil.copy2(env_example, env_file)
        ok(f"Created {env_file}")
        step("Set WEATHER_OPENWEATHER_API_KEY in .env before the first lookup")

    heading("Setup complete")
    print(textwrap.dedent("""\
        Next steps:
          1. Add your OpenWeatherMap API key to .env
          2. Run the server:  python manage.py run
          3. Try http://localhost:8000/api/lookup?location=Baxter,%20IA
    """))
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Start the production server."""
    if not require_venv():
        return 1

    heading("Starting Weather Dashboard")
    step(f"Server at http://{args.host}:{args.port}")
    step("Press Ctrl+C to stop\n")

    return run_cmd(uvicorn_cmd(args.host, args.port), cwd=BACKEND_DIR, check=False).returncode


def cmd_dev(args: argparse.Namespace) -> int:
    """Start the server with auto-reload on source changes."""
    if not require_venv():
        return 1

    heading("Starting development server")
    step(f"Backend -> http://{args.host}:{args.port}  (auto-reload)")
    step("Press Ctrl+C to stop\n")

    try:
        return run_cmd(
            uvicorn_cmd(args.host, args.port, reload=True),
            cwd=BACKEND_DIR,
            check=False,
        ).returncode
    except KeyboardInterrupt:
        return 0


def cmd_test(_args: argparse.Namespace) -> int:
    """Run backend tests."""
    if not require_venv():
        return 1

    heading("Running backend tests")
    result = run_cmd(
        [str(VENV_PYTHON), "-m", "pytest", str(ROOT / "tests" / "backend"), "-v"],
        cwd=ROOT,
        check=False,
    )
    return result.returncode


def cmd_clean(_args: argparse.Namespace) -> int:
    """Remove the venv and Python caches."""
    heading("Cleaning build artifacts")
    if VENV_DIR.exists():
        step(f"Removing {VENV_DIR.relative_to(ROOT)}")
        shutil.rmtree(VENV_DIR)

    for pattern in ("__pycache__", ".pytest_cache", "*.egg-info"):
        for d in ROOT.rglob(pattern):
            if d.is_dir() and VENV_DIR not in d.parents:
                step(f"Removing {d.relative_to(ROOT)}")
                shutil.rmtree(d)

    ok("Clean complete")
    return 0


def cmd_status(_args: argparse.Namespace) -> int:
    """Check installation state."""
    heading("Installation status")

    v = sys.version_info
    ok(f"Python {v.major}.{v.minor}.{v.micro}")

    if VENV_PYTHON.exists():
        ok(f"Python venv: {VENV_DIR}")
    else:
        warn("Python venv: not created")

    env_file = ROOT / ".env"
    if not env_file.exists():
        warn(".env file: not created (will use defaults)")
        return 0

    ok(f".env file: {env_file}")
    has_key = any(
        line.startswith("WEATHER_OPENWEATHER_API_KEY=") and line.split("=", 1)[1].strip()
        for line in env_file.read_text().splitlines()
    )
    if has_key or os.environ.get("WEATHER_OPENWEATHER_API_KEY"):
        ok("OpenWeatherMap API key: set")
    else:
        warn("OpenWeatherMap API key: not set")

    return 0


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="manage.py",
        description="Weather Dashboard — cross-platform setup and launcher",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("setup", help="Create the venv and install the package")
    for name, help_text in (("run", "Start the production server"),
                            ("dev", "Start the server with auto-reload")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--host", default="0.0.0.0")
        p.add_argument("--port", type=int, default=8000)
    sub.add_parser("test", help="Run backend tests")
    sub.add_parser("clean", help="Remove the venv and caches")
    sub.add_parser("status", help="Check installation state")

    args = parser.parse_args()

    commands = {
        "setup": cmd_setup,
        "run": cmd_run,
        "dev": cmd_dev,
        "test": cmd_test,
        "clean": cmd_clean,
        "status": cmd_status,
    }

    if args.command is None:
        parser.print_help()
        return 0

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
