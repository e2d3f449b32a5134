"""
Fauxtoshop console application and command line entry point.

Interactive mode walks the user through opening an image, choosing a
filter, entering its parameters and saving the result. Passing --filter
and --input runs the same pipeline headless.

Example:
    $ fauxtoshop
    $ fauxtoshop --filter scatter --input photo.png --radius 5 --output out.png
    $ fauxtoshop --filter 4 --input a.png --compare-with b.png --no-display
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple
import argparse
import logging
import sys

from FT_Libs import __version__
from FT_Libs.constants import (
    EDGE_THRESHOLD_MIN,
    FILTER_COMPARE,
    FILTER_EDGE_DETECTION,
    FILTER_GREEN_SCREEN,
    FILTER_SCATTER,
    GREEN_SCREEN_TOLERANCE_MIN,
    MESSAGE_CHOOSE_STICKER,
    MESSAGE_CLICK_TO_PLACE,
    MESSAGE_IMAGES_DIFFER,
    MESSAGE_IMAGES_SAME,
    MESSAGE_NO_MOUSE,
    MESSAGE_WELCOME,
    PROMPT_COMPARE_IMAGE,
    PROMPT_EDGE_THRESHOLD,
    PROMPT_FILTER_FOOTER,
    PROMPT_FILTER_HEADER,
    PROMPT_FILTER_ITEM,
    PROMPT_LOCATION,
    PROMPT_OPEN_IMAGE,
    PROMPT_SAVE_IMAGE,
    PROMPT_SCATTER_RADIUS,
    PROMPT_STICKER_IMAGE,
    PROMPT_TOLERANCE,
    SCATTER_RADIUS_MAX,
    SCATTER_RADIUS_MIN,
)
from FT_Libs.ConsoleLib.prompts import ConsolePrompter, InputFunc, OutputFunc, parse_location
from FT_Libs.DisplayLib.image_window import DisplayClosedError, ImageWindow, NullDisplay
from FT_Libs.FilterNodesLib.filter_nodes import (
    create_compare_node,
    create_edge_detection_node,
    create_green_screen_node,
    create_scatter_node,
)
from FT_Libs.ImageEditingLib.image_io import load_grid
from FT_Libs.ImageEditingLib.image_models import DimensionMismatchError, PixelGrid
from FT_Libs.ImageEditingLib.scatter_filter import NumpyRandomSource
from FT_Libs.PipelineLib.filter_pipeline import run_filter
from FT_Libs.PipelineLib.filter_registry import FilterRegistry, get_default_registry
from FT_Libs.PipelineLib.output_handler import OutputConfig, OutputHandler

logger = logging.getLogger(__name__)


def format_comparison(count: int) -> str:
    if count == 0:
        return MESSAGE_IMAGES_SAME
    return MESSAGE_IMAGES_DIFFER.format(count=count)


def format_filter_menu(registry: FilterRegistry) -> str:
    """Build the numbered filter choice prompt from the registry's menu."""
    lines = [
        PROMPT_FILTER_ITEM.format(number=number, label=registry.get_metadata(filter_type)["menu_label"])
        for number, filter_type in registry.menu_items()
    ]
    return PROMPT_FILTER_HEADER + "".join(lines) + PROMPT_FILTER_FOOTER


class FauxtoshopConsole:
    """
    Interactive Fauxtoshop session.

    Args:
        registry: Filter registry (default: global registry)
        display: Object with show(grid), wait_for_click() and supports_clicks
        input_func: Replacement for input()
        output_func: Replacement for print()
        random_source: Random source for Scatter (default: unseeded)
    """

    def __init__(
        self,
        registry: Optional[FilterRegistry] = None,
        display: Optional[Any] = None,
        input_func: InputFunc = input,
        output_func: OutputFunc = print,
        random_source: Optional[Any] = None,
    ):
        self.registry = registry or get_default_registry()
        self.display = display or NullDisplay()
        self.prompter = ConsolePrompter(input_func, output_func)
        self.random_source = random_source
        self._filter_handlers: Dict[str, Callable[[PixelGrid], PixelGrid]] = {
            FILTER_SCATTER: self._apply_scatter,
            FILTER_EDGE_DETECTION: self._apply_edge_detection,
            FILTER_GREEN_SCREEN: self._apply_green_screen,
            FILTER_COMPARE: self._apply_comparison,
        }

    def run(self) -> int:
        """Run one session. Returns the process exit code."""
        self.prompter.say(MESSAGE_WELCOME)

        grid = self.prompt_image(PROMPT_OPEN_IMAGE, allow_quit=True)
        if grid is None:
            return 0
        self.display.show(grid)

        filter_type = self.choose_filter()
        if filter_type is None:
            return 0

        filtered = self.apply_filter(filter_type, grid)
        self.display.show(filtered, title=filter_type)
        self.save_filtered_image(filtered, filter_type)
        return 0

    def prompt_image(self, prompt: str, allow_quit: bool = False) -> Optional[PixelGrid]:
        """
        Prompt until an image loads.

        Returns:
            The loaded grid, or None on a blank reply when allow_quit is set
        """
        while True:
            file_name = self.prompter.get_line(prompt)
            if not file_name and allow_quit:
                return None
            try:
                return load_grid(file_name)
            except OSError as e:
                logger.warning(f"Could not open '{file_name}': {e}")

    def choose_filter(self) -> Optional[str]:
        """Prompt for a filter. Returns None on a blank reply."""
        prompt = format_filter_menu(self.registry)
        while True:
            choice = self.prompter.get_line(prompt)
            if not choice:
                return None
            try:
                return self.registry.resolve_choice(choice)
            except KeyError:
                logger.debug(f"Rejected filter choice '{choice}'")

    def apply_filter(self, filter_type: str, grid: PixelGrid) -> PixelGrid:
        handler = self._filter_handlers.get(filter_type)
        if handler is None:
            raise KeyError(f"No console handler for filter type '{filter_type}'")
        return handler(grid)

    def _apply_scatter(self, grid: PixelGrid) -> PixelGrid:
        radius = self.prompter.get_integer_in_range(
            PROMPT_SCATTER_RADIUS, SCATTER_RADIUS_MIN, SCATTER_RADIUS_MAX
        )
        node = create_scatter_node("scatter-1", radius, random_source=self.random_source)
        return self.registry.execute(FILTER_SCATTER, node, [grid])

    def _apply_edge_detection(self, grid: PixelGrid) -> PixelGrid:
        threshold = self.prompter.get_integer_in_range(PROMPT_EDGE_THRESHOLD, EDGE_THRESHOLD_MIN)
        node = create_edge_detection_node("edge-detection-1", threshold)
        return self.registry.execute(FILTER_EDGE_DETECTION, node, [grid])

    def _apply_green_screen(self, grid: PixelGrid) -> PixelGrid:
        self.prompter.say(MESSAGE_CHOOSE_STICKER)
        sticker = self.prompt_image(PROMPT_STICKER_IMAGE)
        tolerance = self.prompter.get_integer_in_range(PROMPT_TOLERANCE, GREEN_SCREEN_TOLERANCE_MIN)
        place_row, place_col = self.get_sticker_location()

        node = create_green_screen_node("green-screen-1", tolerance, place_row, place_col)
        return self.registry.execute(FILTER_GREEN_SCREEN, node, [grid, sticker])

    def _apply_comparison(self, grid: PixelGrid) -> PixelGrid:
        other = self.prompt_image(PROMPT_COMPARE_IMAGE)
        try:
            count = self.registry.execute(FILTER_COMPARE, create_compare_node("compare-1"), [grid, other])
        except DimensionMismatchError as e:
            self.prompter.say(f"These images differ in size. {e}")
        else:
            self.prompter.say(format_comparison(count))
        return grid

    def get_sticker_location(self) -> Tuple[int, int]:
        """
        Prompt for "(row,col)" with both values >= 0, or a blank line to click.

        Returns:
            (row, col)
        """
        while True:
            reply = self.prompter.get_line(PROMPT_LOCATION)
            if not reply:
                if not self.display.supports_clicks:
                    self.prompter.say(MESSAGE_NO_MOUSE)
                    continue
                self.prompter.say(MESSAGE_CLICK_TO_PLACE)
                try:
                    row, col = self.display.wait_for_click()
                except DisplayClosedError as e:
                    self.prompter.say(str(e))
                    continue
                self.prompter.say(f"You chose ({row},{col})")
                return row, col

            location = parse_location(reply)
            if location is not None and location[0] >= 0 and location[1] >= 0:
                return location

    def save_filtered_image(self, grid: PixelGrid, filter_type: str = "") -> Optional[Path]:
        """Prompt until the image saves. Returns None on a blank reply."""
        while True:
            file_name = self.prompter.get_line(PROMPT_SAVE_IMAGE)
            if not file_name:
                return None
            try:
                handler = OutputHandler(OutputConfig(output_path=file_name, overwrite=True))
                return handler.save(grid, filter_type)
            except (OSError, ValueError) as e:
                logger.warning(f"Could not save '{file_name}': {e}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fauxtoshop",
        description="Apply scatter, edge detection, green screen or compare filters to an image.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--filter", help="Filter number (1-4) or name; runs without prompts")
    parser.add_argument("--input", type=Path, help="Image to filter")
    parser.add_argument("--output", help="Where to save the result ({DATE}, {TIME}, {FILTER} tags allowed)")
    parser.add_argument("--radius", type=int, help="Scatter radius [1-100]")
    parser.add_argument("--threshold", type=int, help="Edge detection threshold (> 0)")
    parser.add_argument("--tolerance", type=int, help="Green screen tolerance (> 0)")
    parser.add_argument("--overlay", type=Path, help="Green screen sticker image")
    parser.add_argument("--place", type=int, nargs=2, metavar=("ROW", "COL"), help="Sticker position")
    parser.add_argument("--compare-with", type=Path, help="Image to compare against")
    parser.add_argument("--seed", type=int, help="Seed for the scatter random source")
    parser.add_argument("--no-display", action="store_true", help="Do not open an image window")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def _node_params(args: argparse.Namespace) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "radius": args.radius,
        "threshold": args.threshold,
        "tolerance": args.tolerance,
    }
    if args.place:
        params["place_row"], params["place_col"] = args.place
    return {key: value for key, value in params.items() if value is not None}


def run_headless(args: argparse.Namespace, output_func: OutputFunc = print) -> int:
    random_source = NumpyRandomSource(args.seed) if args.seed is not None else None
    try:
        result = run_filter(
            args.filter,
            args.input,
            _node_params(args),
            secondary_path=args.overlay or args.compare_with,
            output_path=args.output,
            random_source=random_source,
        )
    except KeyError as e:
        logger.error(e.args[0] if e.args else str(e))
        return 1
    except (ValueError, OSError) as e:
        logger.error(str(e))
        return 1

    if result.difference_count is not None:
        output_func(format_comparison(result.difference_count))
    if result.output_file is not None:
        output_func(f"Saved {result.filter_type} result to {result.output_file}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.filter is not None or args.input is not None:
        if args.filter is None or args.input is None:
            parser.error("--filter and --input must be given together")
        return run_headless(args)

    if args.no_display:
        display = NullDisplay()
    else:
        display = ImageWindow()

    random_source = NumpyRandomSource(args.seed) if args.seed is not None else None
    console = FauxtoshopConsole(display=display, random_source=random_source)
    try:
        return console.run()
    finally:
        display.close()


if __name__ == "__main__":
    sys.exit(main())
