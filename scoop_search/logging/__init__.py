from pathlib import Path

from logly import _LoggerProxy, logger


def init_logger(
    level: str = "WARNING",
    console: bool = False,
    log_file: Path | None = None,
) -> _LoggerProxy:
    """Initialize the logger.

    The console sink is off by default so that stdout only carries the search
    report.

    Args:
        level: Minimum level to emit (e.g. "DEBUG", "WARNING").
        console: Whether to also log to the console.
        log_file: Optional file to append logs to. It is rotated at 10MB.

    """
    logger.configure(
        level=level,
        color=console,
        console=console,
        auto_sink=console,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(str(log_file), size_limit="10MB", retention=3)

    logger.debug("logger initialized!")

    return logger
