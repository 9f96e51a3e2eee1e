"""
Render a layout preset for a viewport size.

Prints the computed rectangles (or JSON with --json) and optionally saves
a PNG preview of the grid and panels.

Usage:
    python scripts/render_layout_preview.py --preset showcase --width 1280 --height 800
    python scripts/render_layout_preview.py --presets-file my_presets.json \\
        --preset hero --width 375 --height 812 --output preview.png
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path so we can import panel_grid
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from panel_grid.controller import layout_preset
from panel_grid.layout.presets import PRESET_LAYOUTS, PresetValidationError, load_presets

logger = logging.getLogger("render_layout_preview")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compute and preview a panel layout")
    parser.add_argument("--preset", default="default", help="Preset name (default: default)")
    parser.add_argument("--presets-file", type=Path, help="JSON file with extra presets")
    parser.add_argument("--width", type=float, default=1920, help="Viewport width in px")
    parser.add_argument("--height", type=float, default=1080, help="Viewport height in px")
    parser.add_argument("--output", type=Path, help="Save a PNG preview to this path")
    parser.add_argument("--json", action="store_true", help="Print the layout as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    presets = dict(PRESET_LAYOUTS)
    if args.presets_file:
        try:
            presets.update(load_presets(args.presets_file))
        except (OSError, PresetValidationError) as e:
            logger.error(f"Could not load presets: {e}")
            for error in getattr(e, "errors", []):
                logger.error(f"  {error}")
            return 1

    try:
        result = layout_preset(args.preset, args.width, args.height, presets=presets)
    except (KeyError, ValueError) as e:
        logger.error(str(e))
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(f"Tier: {result.tier.value} ({result.config.columns}x{result.config.rows})")
        for panel_id, rect in result.positions.items():
            print(
                f"  {panel_id:<12} x={rect.x:.1f} y={rect.y:.1f} "
                f"w={rect.width:.1f} h={rect.height:.1f}"
            )
        for panel_id in result.skipped:
            print(f"  {panel_id:<12} (skipped, no room)")

    if args.output:
        from panel_grid.debug import save_layout_preview
        save_layout_preview(result, args.width, args.height, args.output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
