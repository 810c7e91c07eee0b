import logging
import os
from datetime import datetime


def setup_logging(module_name: str, log_dir: str = "logs", verbose: bool = False) -> str:
    """
    Set up logging configuration for a command.
    Returns the path to the log file.
    """
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # one timestamped log file per run
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"{module_name}_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8", delay=True)
    file_handler.setLevel(logging.ERROR)  # Only errors to file

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[file_handler, console_handler],
    )

    return log_file
