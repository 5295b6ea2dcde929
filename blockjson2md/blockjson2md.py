"""
Main entrypoint for regenerating the core blocks reference when run as a script.
"""

import logging
import sys
from pprint import pformat

from .args import ArgumentError, Arguments
from .config import Config
from .error import BlockJson2MdError
from .log import config_logger
from .pipeline import generate_block_docs


def main() -> int:
    """
    Core blocks reference generation script.

    This function coordinates the run when invoked as
    `python -m blockjson2md` on the command line:

    1. Parse command-line arguments
    2. Configure logging based on user preferences
    3. Read every block.json file and render the entries
    4. Splice the entries into the docs file

    Returns
    -------
    int
        Exit code: 0 for success, 1 for failure.

    Notes
    -----
    Nothing is printed on success. On failure a short message is printed and
    details are only available through -v flags and/or --log.
    """
    log = None
    try:
        args = Arguments().parse(sys.argv[1:])

        config_logger(file_logging=args.log, verbosity_level=args.verbosity)
        log = logging.getLogger(__name__)
        log.info("Logger configured")

        log.debug("Parsed arguments: %s", pformat(args, indent=2))

        config = Config.from_root(args.root, strict=args.strict)
        log.debug("Configuration: %s", config)

        result = generate_block_docs(config)

        if result.found:
            log.info("Successfully updated %s", config.docs_file)
        else:
            log.info("No autogenerated region in %s, nothing replaced", config.docs_file)
        return 0

    except ArgumentError as e:
        print(f"Argument error: {e}")
        return 1
    except BlockJson2MdError as e:
        if log is not None:
            log.exception("%s", e)
        print(
            f"Documentation update failed: {e}\n"
            "Increase verbosity (-v, -vv, -vvv) for more details. Use --log to log messages to a file.",
        )
        return 1
    except Exception as e:  # pylint: disable=W0718
        print(
            "Something went wrong. Increase verbosity (-v, -vv, -vvv) for more details. Use --log to log messages to a file.",
        )
        if log is not None:
            log.exception("Exception received. Error message: %s", e)
        else:
            print("Logging not configured, dumping exception:")
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
