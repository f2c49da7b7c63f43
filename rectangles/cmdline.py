import argparse
import io
import logging
import sys

import fsspec

from rectangles.config import check_config_value, config_context, get_config
from rectangles.exceptions import RectanglesParameterError
from rectangles.session import RectangleSession


def _read_input(path: str) -> io.StringIO:
    with fsspec.open(path, "rt", encoding="utf-8") as fp:
        return io.StringIO(fp.read())


def run_session(argv=sys.argv[1:]):
    parser = argparse.ArgumentParser(
        description="Create a list of rectangles and scale each of them by 3 "
        "about its midpoint"
    )
    parser.add_argument(
        "--input",
        help="File (or fsspec url) to read the answers from instead of stdin",
    )
    parser.add_argument(
        "--add-keyword",
        default=get_config("keyword.add"),
        help="Keyword that precedes a rectangle name",
    )
    parser.add_argument(
        "--stop-keyword",
        default=get_config("keyword.stop"),
        help="Word that ends the list of rectangles",
    )
    parser.add_argument(
        "--verbose",
        default=False,
        help="Show debug logging",
        action="store_true",
    )

    opts = parser.parse_args(argv)

    log_level = "DEBUG" if opts.verbose else get_config("logging.level")
    try:
        check_config_value("keyword.add", opts.add_keyword)
        check_config_value("keyword.stop", opts.stop_keyword)
        check_config_value("logging.level", log_level)
    except RectanglesParameterError as e:
        parser.error(str(e))

    logger = logging.getLogger("run_session")
    logging.basicConfig(
        stream=sys.stderr,
        level=log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # basicConfig is a no-op when the root logger already has handlers
    logging.getLogger("rectangles").setLevel(log_level.upper())

    stdin = None
    if opts.input:
        logger.info(f"Reading answers from {opts.input}")
        stdin = _read_input(opts.input)

    with config_context(
        "keyword.add",
        opts.add_keyword,
        "keyword.stop",
        opts.stop_keyword,
    ):
        session = RectangleSession(
            stdin=stdin, stdout=sys.stdout, echo=stdin is not None
        )
        collection = session.run()

    logger.info(f"Session ended with {len(collection)} rectangle(s)")
    return 0


if __name__ == "__main__":
    sys.exit(run_session())
