"""Utility functions for loading serialized schema trees.

This module loads the JSON form of a parsed schema tree from files and
URLs with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.schema import SchemaNode, parse_schema_tree
from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoadError(Exception):
    """Custom exception for schema tree loading errors."""

    pass


def decode_schema_tree(data: Any, source: str) -> list[SchemaNode]:
    """Convert decoded JSON into root nodes.

    Args:
        data: Decoded JSON document.
        source: Description of where the document came from, for errors.

    Returns:
        List of root SchemaNodes.

    Raises:
        SchemaLoadError: If the document does not describe a schema tree.
    """
    try:
        roots = parse_schema_tree(data)
    except ValueError as e:
        logger.error(f"Invalid schema tree in {source}: {e}")
        raise SchemaLoadError(f"Invalid schema tree in {source}: {e}") from e

    logger.info(f"Loaded {len(roots)} root element(s) from {source}")
    return roots


def load_schema_from_file(file_path: str | Path) -> tuple[str, list[SchemaNode]]:
    """Load a schema tree from a local JSON file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, root nodes).

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoadError: If file cannot be read or is not a schema tree.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load schema tree from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
        raise SchemaLoadError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SchemaLoadError(f"Error reading file {file_path}: {e}") from e

    return str(file_path), decode_schema_tree(data, str(file_path))


def load_schema_from_url(url: str, timeout: int = 30) -> tuple[str, list[SchemaNode]]:
    """Load a schema tree from a URL.

    Args:
        url: URL to fetch the JSON document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, root nodes).

    Raises:
        SchemaLoadError: If URL is invalid, request fails, or response isn't a schema tree.
    """
    logger.debug(f"Attempting to load schema tree from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise SchemaLoadError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "application/json" not in content_type and not url.endswith(".json"):
            logger.warning(f"URL {url} does not have JSON content type: {content_type}")

        data = response.json()

    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaLoadError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SchemaLoadError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise SchemaLoadError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}", exc_info=True)
        raise SchemaLoadError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SchemaLoadError(f"Request error for URL {url}: {e}") from e

    return url, decode_schema_tree(data, url)


def load_schema_tree(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, list[SchemaNode]]:
    """Load a schema tree from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, root nodes).

    Raises:
        SchemaLoadError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise SchemaLoadError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise SchemaLoadError("Cannot specify both file_path and url")

    if file_path:
        return load_schema_from_file(file_path)
    else:
        return load_schema_from_url(url, timeout)
