"""Command line entry point: keep dated copies of saves as they are written."""

from __future__ import annotations

import argparse
import itertools
import logging
import sys

from savewatch.paths import delay_ms
from savewatch.savefiles import SavefileManager


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="savewatch", description="Watch the save folder and keep dated copies.")
    parser.add_argument("--save-path", default=None, help="save-game folder to watch")
    parser.add_argument("--dirs-file", default="../data/savefile_dirs.txt", help="file listing savefile folders")
    parser.add_argument("--interval", type=float, default=0.0, help="milliseconds between checks")
    parser.add_argument("--iterations", type=int, default=None, help="stop after this many checks")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        manager = SavefileManager(args.save_path, args.dirs_file)
    except FileNotFoundError as exc:
        print(f"cannot watch {exc.filename or exc}", file=sys.stderr)
        return 1
    counter = itertools.count() if args.iterations is None else range(args.iterations)
    with manager:
        try:
            for _ in counter:
                manager.update()
                if args.interval:
                    delay_ms(args.interval)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())