"""Command line entry point: ``tuiporal`` or ``python -m tuiporal``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tuiporal.constants.defaults import LOG_LEVEL_DEFAULT
from tuiporal.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)
from tuiporal.models.state.config_manager import CONFIG_DIR, CONFIG_FILE, ConfigManager

logger = logging.getLogger("tuiporal")

LOG_FILE_DEFAULT = CONFIG_DIR / "tuiporal.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tuiporal",
        description="Terminal dashboard for Temporal workflows.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_FILE,
        help=f"Config file path (default: {CONFIG_FILE}).",
    )
    parser.add_argument("--profile", default=None, help="Connection profile to use.")
    parser.add_argument(
        "--namespace",
        default=None,
        help="Namespace to open, overriding the profile's namespace.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=LOG_FILE_DEFAULT,
        help=f"Log file path (default: {LOG_FILE_DEFAULT}).",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL_DEFAULT,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level.",
    )
    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Write the effective settings to the config path and exit.",
    )
    return parser


def configure_logging(log_file: Path, level: str) -> None:
    """Send all logging to a file so it never draws over the terminal UI."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_file),
        level=getattr(logging, level),
        format=LOG_FORMAT,
        force=True,
    )


def load_settings(
    config_path: Path,
    profile: str | None = None,
    namespace: str | None = None,
) -> AppSettings:
    """Load settings and apply command line overrides.

    An unreadable or invalid config file is logged and replaced by defaults.
    """
    try:
        settings = ConfigManager.load(config_path)
    except ConfigLoadError as e:
        logger.warning(f"{e}; using default settings")
        settings = AppSettings()

    if profile:
        settings.active_profile = profile
    if namespace:
        active = settings.get_active_profile()
        if active is not None:
            updated = active.model_copy(update={"namespace": namespace})
            settings.profiles = [
                updated if item.name == active.name else item for item in settings.profiles
            ]
    return settings


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    settings = load_settings(args.config, args.profile, args.namespace)

    if args.write_config:
        try:
            path = ConfigManager.save(settings, args.config)
        except ConfigSaveError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(f"Wrote {path}")
        return 0

    # Imported here so --write-config works without loading the UI stack.
    from tuiporal.app import TuiporalApp
    from tuiporal.engine.runtime import DashboardRuntime

    runtime = DashboardRuntime(settings)
    app = TuiporalApp(runtime)
    try:
        app.run()
    except Exception:
        logger.exception("Terminal surface failed to start")
        return 1
    finally:
        runtime.shutdown()
    return app.return_code or 0


if __name__ == "__main__":
    raise SystemExit(main())
