"""Demo entry point: render a page indicator stepping through every page."""

import argparse
import asyncio
from pathlib import Path

from page_indicator import IndicatorSettings, PageIndicator
from page_indicator.adapters import render_png_bytes
from page_indicator.core.logging import configure_logging, get_logger

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line options for the demo."""
    parser = argparse.ArgumentParser(
        description="Render one PNG per selection step of a scrolling page indicator."
    )
    parser.add_argument("--pages", type=int, default=12, help="number of pages")
    parser.add_argument("--width", type=float, default=120, help="viewport width")
    parser.add_argument("--height", type=float, default=16, help="viewport height")
    parser.add_argument("--scale", type=int, default=4, help="pixels per unit")
    parser.add_argument(
        "--out", type=Path, default=Path("frames"), help="output directory"
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> None:
    """Step through all pages, wrapping once, and write a frame per step."""
    args = parse_args(argv)
    settings = IndicatorSettings.from_env()

    indicator = PageIndicator.from_settings(settings)
    indicator.pages = args.pages
    indicator.resize(args.width, args.height)

    args.out.mkdir(parents=True, exist_ok=True)
    logger.info("demo_starting", pages=indicator.pages, out=str(args.out))

    # One extra step so the last page wraps back to the first
    for step in range(indicator.pages + 1):
        if step > 0:
            indicator.next_page(wrap=True)
        await indicator.wait_idle()

        path = args.out / f"frame_{step:03d}.png"
        path.write_bytes(render_png_bytes(indicator, pixel_scale=args.scale))
        logger.info(
            "frame_written",
            path=str(path),
            selected=indicator.selected_page,
            page_offset=indicator.controller.page_offset,
        )


if __name__ == "__main__":
    asyncio.run(main())
