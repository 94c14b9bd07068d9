import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Loggers from rich's dependencies that are noisy at DEBUG.
_THIRD_PARTY_LOGGERS = ("markdown_it", "asyncio")


def _root_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Route log records to stderr so tables on stdout stay clean.

    INFO by default, DEBUG with ``verbose``, WARNING with ``quiet``.
    ``verbose`` takes precedence when both are set.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_root_level(verbose=verbose, quiet=quiet))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)

    third_party_level = logging.NOTSET if verbose else logging.WARNING
    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)
