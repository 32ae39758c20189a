import argparse
import logging

from tic_tac_toe.ui_terminal import TerminalUi

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    match args.app:
        case "game":
            TerminalUi().run()
        case "needle":
            # pygame is only needed for the demo window.
            from tic_tac_toe.needle import NeedleDemo  # noqa: PLC0415

            NeedleDemo().run()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tic_tac_toe")

    parser.add_argument("--app", choices=("game", "needle"), default="game")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
