"""
Main entry point for the Gray Code Visualizer.

    gray-visualizer                      # open the window
    gray-visualizer --bits 4 --speed 400
    gray-visualizer --print --bits 5     # table to stdout, no window
"""

import argparse
import sys

from gray_visualizer.config import (
    BITS_DEFAULT, BITS_MAX, BITS_MIN, PRINT_BITS_MAX,
    SPEED_DEFAULT, SPEED_MAX, SPEED_MIN, SPEED_STEP, TABS, TAB_DEFAULT,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gray-visualizer",
        description="Step through the binary reflected Gray code sequence.",
    )
    parser.add_argument(
        "--bits",
        type=int,
        default=BITS_DEFAULT,
        help=f"Bit width (GUI: {BITS_MIN}-{BITS_MAX}, --print: 1-{PRINT_BITS_MAX}; "
             f"default: {BITS_DEFAULT}).",
    )
    parser.add_argument(
        "--speed",
        type=int,
        default=SPEED_DEFAULT,
        help=f"Auto-play interval in ms ({SPEED_MIN}-{SPEED_MAX}, step {SPEED_STEP}; "
             f"default: {SPEED_DEFAULT}).",
    )
    parser.add_argument(
        "--tab",
        choices=TABS,
        default=TAB_DEFAULT,
        help=f"Tab to open on (default: {TAB_DEFAULT}).",
    )
    parser.add_argument(
        "--print",
        dest="print_table",
        action="store_true",
        help="Print the sequence table to stdout instead of opening the window.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show debug messages on the console.",
    )
    parser.add_argument(
        "--log-file",
        help="Also write the full log to this file.",
    )
    return parser


def format_table(bits: int) -> str:
    """Index, Gray code, decimal read-out and flipped bit for each step."""
    from gray_visualizer.model.gray_code import binary_to_decimal, changed_bit, generate_sequence

    sequence = generate_sequence(bits)
    width = max(len("Gray"), bits)
    lines = [f"{'Step':>6}  {'Gray':<{width}}  {'Dec':>6}  Changed"]
    previous = None
    for idx, code in enumerate(sequence):
        flipped = changed_bit(previous, code)
        flipped_text = "-" if flipped is None else str(flipped)
        lines.append(f"{idx:>6}  {code:<{width}}  {binary_to_decimal(code):>6}  {flipped_text}")
        previous = code
    return "\n".join(lines)


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.print_table:
        if not 1 <= args.bits <= PRINT_BITS_MAX:
            raise SystemExit(f"--bits must be between 1 and {PRINT_BITS_MAX} for --print")
        print(format_table(args.bits))
        return 0

    if not BITS_MIN <= args.bits <= BITS_MAX:
        raise SystemExit(f"--bits must be between {BITS_MIN} and {BITS_MAX}")
    if not SPEED_MIN <= args.speed <= SPEED_MAX:
        raise SystemExit(f"--speed must be between {SPEED_MIN} and {SPEED_MAX}")

    from gray_visualizer.utils.logger import logger, LogLevel

    if args.debug:
        logger.set_level(LogLevel.DEBUG)
    if args.log_file:
        logger.enable_file_logging(args.log_file)

    logger.info("=" * 40, component="APP")
    logger.info("Gray Code Visualizer starting", component="APP")
    logger.info(f"Bits: {args.bits}  Speed: {args.speed}ms  Tab: {args.tab}", component="APP")
    logger.info("=" * 40, component="APP")

    from PyQt5.QtWidgets import QApplication

    app = QApplication(sys.argv[:1])

    from gray_visualizer.gui.main_frame import MainFrame
    from gray_visualizer.model.playback import PlaybackSettings

    window = MainFrame(PlaybackSettings(bits=args.bits, speed_ms=args.speed), initial_tab=args.tab)
    window.show()

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
