from pathlib import Path

from logly import logger


def init_logger(log_dir: Path | None = None, level: str = "INFO"):
    """Initialize the logger.

    Configures console output and, when `log_dir` is given, a rotating
    `vslocate.log` file in that directory. Importing `vslocate` never does this;
    applications call it once at startup.

    Args:
        log_dir: Directory for the log file. None logs to the console only.
        level: Minimum level to emit.
    """
    logger.configure(
        level=level,
        color=True,
        console=True,
        auto_sink=True,
    )

    if log_dir is not None:
        logger.add(f"{log_dir}/vslocate.log", size_limit="10MB", retention=3)

    logger.success("logger initialized!")

    return logger
