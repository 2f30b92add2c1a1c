"""Main entry point for the interactive face recognition shell."""

import argparse

from configs.config import (
    BULK_LOAD_SIZE,
    DEFAULT_LABEL_MODE,
    LABEL_MODE_FILENAME,
    LABEL_MODE_SEQUENTIAL,
    TEMPLATE_SIZE,
)
from core import CommandDispatcher, Session


def main():
    """Main entry point for the face recognition shell."""
    parser = argparse.ArgumentParser(description="Train and query OpenCV face recognizers interactively.")
    parser.add_argument(
        "--database",
        metavar="PATH",
        default=None,
        help="Database root for resized images (otherwise set by 'create <ALGO> <dir>')",
    )
    parser.add_argument(
        "--labels",
        choices=[LABEL_MODE_FILENAME, LABEL_MODE_SEQUENTIAL],
        default=DEFAULT_LABEL_MODE,
        help="'filename' parses a trailing -<digits> label, 'sequential' numbers images in order",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=BULK_LOAD_SIZE,
        help="Images per incremental training batch (LBPH only)",
    )
    parser.add_argument(
        "--template-size",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=list(TEMPLATE_SIZE),
        help="Size every image is resized to before training or search",
    )
    args = parser.parse_args()

    if args.batch_size < 1:
        parser.error("--batch-size must be positive")

    session = Session(
        database=args.database,
        template_size=tuple(args.template_size),
        label_mode=args.labels,
        batch_size=args.batch_size,
    )
    CommandDispatcher(session).run()


if __name__ == "__main__":
    main()
