from typing import Any, Dict
import logging
import yaml


def read_yaml_file(file_path: str) -> Dict[str, Any]:
    """
    Reads a YAML file and returns its content.

    Args:
        file_path (str): The path to the YAML file.

    Returns:
        Dict[str, Any]: A dictionary containing the content of the YAML file.

    Raises:
        FileNotFoundError: If the YAML file does not exist.
        yaml.YAMLError: If the YAML file cannot be parsed.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            try:
                return yaml.safe_load(file) or {}
            except yaml.YAMLError as exc:
                logging.error(f"Error parsing YAML file at {file_path}: {exc}")
                raise
    except FileNotFoundError:
        logging.error(f"YAML file not found at {file_path}.")
        raise FileNotFoundError(f"YAML file not found at {file_path}.")


def read_text_file(file_path: str) -> str:
    """
    Reads a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()
