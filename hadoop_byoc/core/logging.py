import logging

import structlog

from hadoop_byoc.core.config import settings

_configured = False


def configure_logging():
    """
    Set up structlog for the installer and the deploy steps.

    LOG_LEVEL picks the stdlib level (INFO unless configured), LOG_JSON_FORMAT
    switches the console renderer for JSON lines, handy when the pyinfra
    output is collected by a CI job.
    """
    global _configured

    log_level = settings.LOG_LEVEL.upper()
    use_json = settings.LOG_JSON_FORMAT

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if use_json:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False, exception_formatter=structlog.dev.plain_traceback),
        ]
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    # pyinfra installs its own handlers on the "pyinfra" logger, leave those alone
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(message)s",
    )
    _configured = True

    return structlog.get_logger()


def get_logger(name=None, **context) -> structlog.stdlib.BoundLogger:
    """Logger for ``name`` with ``context`` bound; configures logging on first use."""
    if not _configured:
        configure_logging()
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
