import argparse

from statusrelay.core.config import ConfigManager
from statusrelay.core.demo import run_scenario
from statusrelay.core.events import EventRegistry
from statusrelay.core.logging import setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(prog="statusrelay", description="Network status relay demo")
    parser.add_argument("--config", "-c", default="statusrelay.json", help="settings file (JSON or TOML)")
    parser.add_argument("--debug", action="store_true", help="force DEBUG console logging")
    args = parser.parse_args(argv)

    config = ConfigManager(args.config)
    setup_logging(debug_mode=args.debug or config.data.general.debug_mode,
                  log_dir=config.data.general.log_dir)

    registry = EventRegistry()
    for label, panels in run_scenario(registry, config.data.listeners.initial_status):
        print(f"--- {label} ---")
        for name, state in panels.items():
            print(f"  {name:<7} {state}")


if __name__ == "__main__":
    main()
