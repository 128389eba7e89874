"""
Logging setup for rnpmrc.

- structlog console renderer, printed to stderr so stdout carries only command output.
- Default level from RNPMRC_LOG_LEVEL (WARNING); DEBUG when verbose.
"""

import logging
import sys

import structlog

from rnpmrc.config import cfg

_initialized = False


def initialize_logging(verbose: bool = False):
    """Configure structlog once; later calls are no-ops."""
    global _initialized
    if _initialized:
        return

    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName(cfg.log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                }
            ),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger(logger_name=__name__)
    if verbose:
        logger.debug("Structlog configured for rnpmrc CLI.")
    _initialized = True
