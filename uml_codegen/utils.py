"""Loading of class-diagram model documents.

A model document is a JSON object with a ``classifiers`` list. It can
be read from disk or fetched over HTTP; ``load_model`` additionally
converts it into the classifier graph the generators consume.
"""

import json
from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlparse

import requests

from .core.model import Classifier, ModelError, convert_model_dict
from .logging_config import get_logger

logger = get_logger(__name__)


class ModelLoaderError(Exception):
    """A model document could not be read, fetched or converted."""

    pass


def read_model_file(file_path: str | Path) -> tuple[str, Any]:
    """Read a model document from disk.

    Args:
        file_path: Location of the document.

    Returns:
        Tuple of (document source, parsed document).

    Raises:
        FileNotFoundError: If there is no file at ``file_path``.
        ModelLoaderError: If the file is unreadable or not JSON.
    """
    file_path = Path(file_path)
    logger.debug(f"Reading model document {file_path}")

    if not file_path.exists():
        logger.error(f"No model document at {file_path}")
        raise FileNotFoundError(f"No model document at {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"Model document {file_path} is not a .json file, parsing it anyway")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Model document {file_path} is not JSON: {e}")
        raise ModelLoaderError(f"Model document {file_path} is not JSON: {e}") from e
    except OSError as e:
        logger.error(f"Cannot read model document {file_path}: {e}")
        raise ModelLoaderError(f"Cannot read model document {file_path}: {e}") from e

    logger.info(f"Read model document {file_path}")
    return str(file_path), document


def fetch_model_document(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Download a model document.

    Args:
        url: Absolute http(s) URL of the document.
        timeout: Seconds to wait for the server.

    Returns:
        Tuple of (document source, parsed document).

    Raises:
        ModelLoaderError: If the URL is malformed, the download fails or
            the body is not JSON.
    """
    logger.debug(f"Fetching model document {url}")

    parsed_url = urlparse(url)
    if not parsed_url.scheme or not parsed_url.netloc:
        logger.error(f"Not an absolute URL: {url}")
        raise ModelLoaderError(f"Model document URL must be absolute: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "json" not in content_type and not url.endswith(".json"):
            logger.warning(f"Model document {url} served as '{content_type}', parsing it anyway")

        document = response.json()
    except requests.exceptions.Timeout as e:
        logger.error(f"Model document {url} timed out after {timeout}s")
        raise ModelLoaderError(f"Timed out after {timeout}s fetching {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Cannot connect for model document {url}: {e}")
        raise ModelLoaderError(f"Cannot connect to fetch {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code
        logger.error(f"Model document {url} answered HTTP {status}")
        raise ModelLoaderError(f"Fetching {url} failed with HTTP {status}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Fetching model document {url} failed: {e}")
        raise ModelLoaderError(f"Fetching {url} failed: {e}") from e
    except ValueError as e:
        # requests raises a ValueError subclass for undecodable bodies
        logger.error(f"Model document {url} is not JSON: {e}")
        raise ModelLoaderError(f"Model document {url} is not JSON: {e}") from e

    logger.info(f"Fetched model document {url}")
    return url, document


def load_model_document(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Read or fetch a model document, from exactly one source.

    Raises:
        ModelLoaderError: If no source or both sources are given, or
            loading fails.
        FileNotFoundError: If ``file_path`` does not exist.
    """
    if bool(file_path) == bool(url):
        raise ModelLoaderError("Give exactly one model source: a file path or a URL")

    if file_path:
        return read_model_file(file_path)
    return fetch_model_document(url, timeout)


def load_model(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Dict[str, Classifier]]:
    """Load a model document and convert it into classifiers.

    Returns:
        Tuple of (document source, classifiers keyed by qualified name).

    Raises:
        ModelLoaderError: If loading fails or the document is malformed.
        FileNotFoundError: If ``file_path`` does not exist.
    """
    source, document = load_model_document(file_path, url, timeout)
    try:
        classifiers = convert_model_dict(document)
    except (ModelError, KeyError) as e:
        # KeyError: a feature entry without its "name"
        logger.error(f"Malformed model document {source}: {e}")
        raise ModelLoaderError(f"Malformed model document {source}: {e}") from e

    logger.info(f"{source}: {len(classifiers)} classifiers")
    return source, classifiers
