"""Input acquisition: file path, URL or standard input."""

import logging
import re
import sys
from pathlib import Path
from typing import Optional, TextIO

import requests

from .. import __version__
from ..types import ErrorType, InputError

URL_RE = re.compile(r"^https?://", re.IGNORECASE)


def is_url(source: str) -> bool:
    """Check whether an input source names an HTTP(S) URL."""
    return URL_RE.match(source) is not None


class InputReader:
    """
    Reads the whole input document before any processing starts.

    A source of ``None`` or ``-`` means standard input; ``http://`` and
    ``https://`` sources are fetched; anything else is a file path.
    """

    def __init__(self, timeout: float = 10.0,
                 user_agent: Optional[str] = None,
                 stdin: Optional[TextIO] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the input reader.

        Args:
            timeout: Timeout in seconds for URL fetches
            user_agent: User-Agent header sent with URL fetches
            stdin: Stream used for standard input (defaults to sys.stdin)
            logger: Optional logger instance
        """
        self.timeout = timeout
        self.user_agent = user_agent or f"gron/{__version__}"
        self.stdin = stdin
        self.logger = logger or logging.getLogger(__name__)

    def read(self, source: Optional[str] = None) -> str:
        """
        Read the complete input text.

        Args:
            source: File path, URL, ``-`` or None

        Returns:
            Input text

        Raises:
            InputError: If the input cannot be opened, fetched or read
        """
        if source is None or source == "-":
            return self.read_stdin()
        if is_url(source):
            return self.fetch_url(source)
        return self.read_file(source)

    def read_stdin(self) -> str:
        stream = self.stdin or sys.stdin
        self.logger.debug("Reading input from standard input")
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"failed to read input: {e}", ErrorType.READ_INPUT)

    def read_file(self, filename: str) -> str:
        path = Path(filename)
        self.logger.debug(f"Reading input from file {path}")
        try:
            handle = path.open("r", encoding="utf-8")
        except OSError as e:
            raise InputError(f"failed to open file: {e}", ErrorType.OPEN_FILE,
                             context={"path": str(path)})
        with handle:
            try:
                return handle.read()
            except (OSError, UnicodeDecodeError) as e:
                raise InputError(f"failed to read input: {e}", ErrorType.READ_INPUT,
                                 context={"path": str(path)})

    def fetch_url(self, url: str) -> str:
        self.logger.info(f"Fetching {url}")
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise InputError(f"failed to fetch URL: {e}", ErrorType.FETCH_URL,
                             context={"url": url})
        return response.text
