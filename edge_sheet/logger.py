import logging
import sys
from pathlib import Path


def setup_logger(log_file_name="edge_sheet.log"):
    """
    Setups the initial logger.
    param: log_file_name: filename to be used for the logfile.
    return: logger instance created.
    """
    logger = logging.getLogger("EdgeSheet")

    # Check if the logger has already been configured
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        log_file_path = (
            Path(sys.executable).parent / log_file_name
            if getattr(sys, "frozen", False)
            else Path(__file__).parent / log_file_name
        )

        # Create handlers
        console_handler = logging.StreamHandler(sys.stdout)
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")

        # Create formatter and add it to handlers
        log_format = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(log_format)
        file_handler.setFormatter(log_format)

        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger


def set_console_level(logger_to_adjust, level):
    """
    Change the verbosity of the console handler only; the log file keeps everything.
    @param: logger_to_adjust: logger returned by setup_logger.
    @param: level: logging level name or number.
    """
    for handler in logger_to_adjust.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


if __name__ == "__main__":
    logger = setup_logger()
    logger.info("This is a test log message")
    logger.debug("This is a debug message with an argument: %s", "test arg")
