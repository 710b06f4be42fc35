"""CLI entry point for profile3d."""

import argparse
import logging
import os
import sys
from pathlib import Path

import yaml

from profile3d.config import DEFAULT_FILE_NAME, LayoutConfig, load_config, load_settings, load_user_info
from profile3d.errors import Profile3DError
from profile3d.render.svg import create_svg
from profile3d.templates import DEFAULT_THEMES
from profile3d.writer import write_file

logger = logging.getLogger(__name__)


def _resolve_output_dir(cli_value: str | None, config_dir: Path) -> Path:
    if cli_value:
        return Path(cli_value)
    env_dir = os.environ.get("OUTPUT_DIR")
    if env_dir:
        return Path(env_dir)
    return config_dir


def render(
    calendar_path: Path,
    settings_path: Path | None,
    output_dir: Path,
    force_animation: bool = False,
    layout: LayoutConfig | None = None,
) -> list[Path]:
    """Render every requested theme and write one SVG per theme."""
    user_info = load_user_info(calendar_path)
    logger.info(
        "Loaded %d calendar days, %d contributions",
        len(user_info.contribution_calendar), user_info.total_contributions,
    )

    written: list[Path] = []
    if settings_path is not None:
        for settings in load_settings(settings_path):
            svg = create_svg(user_info, settings, force_animation, layout)
            written.append(write_file(settings.file_name or DEFAULT_FILE_NAME, svg, output_dir))
    else:
        # built-in themes always animate
        for settings in DEFAULT_THEMES:
            svg = create_svg(user_info, settings, True, layout)
            written.append(write_file(settings.file_name or DEFAULT_FILE_NAME, svg, output_dir))
    return written


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Isometric 3D contribution calendar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command")

    render_parser = sub.add_parser("render", help="Render profile SVGs from an aggregated calendar")
    render_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    render_parser.add_argument("calendar", type=Path, help="Aggregated user info (JSON or YAML)")
    render_parser.add_argument(
        "--settings", type=Path, default=None,
        help="Theme file (one theme or a list). Built-in Solarized themes if omitted.",
    )
    render_parser.add_argument("-o", "--output-dir", default=None, help="Output directory")
    render_parser.add_argument(
        "--force-animation", action="store_true",
        help="Animate even when the theme does not ask for it",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command != "render":
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        output_dir = _resolve_output_dir(args.output_dir, config.resolved_output_dir)
        written = render(
            args.calendar, args.settings, output_dir,
            force_animation=args.force_animation, layout=config.layout,
        )
    except (Profile3DError, ValueError, yaml.YAMLError, OSError) as e:
        logger.error("Render failed: %s", e)
        return 1

    for path in written:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
