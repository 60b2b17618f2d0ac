"""
GUI command-line interface entry point.

Usage:
    python -m bezier_wobble.gui_cli [-c config.yaml] [--width 1200] [--height 800]
"""

import argparse
import sys


def main():
    parser = argparse.ArgumentParser(
        description="Interactive cubic Bezier curve with wobbling handles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Run with defaults
    python -m bezier_wobble.gui_cli

    # Custom config and a reproducible release kick
    python -m bezier_wobble.gui_cli -c examples/default.yaml --seed 7
"""
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to YAML config file (optional)"
    )
    parser.add_argument("--width", type=int, default=None, help="Initial window width")
    parser.add_argument("--height", type=int, default=None, help="Initial window height")
    parser.add_argument("--title", type=str, default=None, help="Window title")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the release kick")

    args = parser.parse_args()

    # Import here to avoid DearPyGui import if just checking help
    from .gui.app import run_gui

    try:
        run_gui(args.config, width=args.width, height=args.height, title=args.title, seed=args.seed)
    except KeyboardInterrupt:
        print("\nGUI closed.")
        sys.exit(0)
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
