#!/usr/bin/env python3
"""
Bulgarian Online Stress Service

Finds word stress with the public accent dictionary at slovored.com.
Accepts one word or a whole passage and returns it with a combining accent
after every stressed vowel.

The service is slow (one HTTP request per call) and best effort: when the
page cannot be loaded or does not contain the query, the input comes back
unmodified and a warning is logged.
"""

import urllib.error
import urllib.parse
import urllib.request
from logging import getLogger

from bs4 import BeautifulSoup

from src.bg_nlp.stress_service.types import StressLookupError
from src.bg_nlp.utils.stress_marks import encode_for_service, has_stress_mark, strip_stress_marks

logger = getLogger(__name__)

ACCENT_SERVICE_URL = "https://slovored.com/search/accent/"
USER_AGENT = "Mozilla/5.0 (compatible; bg-phonetic-transcription)"


class OnlineStressService:
    """
    Stress lookup backed by the slovored.com accent dictionary.

    Usage:
        service = OnlineStressService()
        service.lookup("череша")        # "черѐша"
        service.lookup("от града")      # "от гра̀да"
        service.close()

    Or with context manager:
        with OnlineStressService(timeout=5.0) as service:
            stressed = service.lookup("апартамент")
    """

    def __init__(self, timeout: float = 10.0, base_url: str = ACCENT_SERVICE_URL):
        """
        Initialize online stress service.

        Args:
            timeout: Seconds to wait for the accent dictionary to answer
            base_url: Query URL prefix; the encoded text is appended to it
        """
        self.timeout = timeout
        self.base_url = base_url
        logger.info(f"Online stress service initialized: {self.base_url} (timeout {self.timeout}s)")

    def lookup(self, text: str) -> str:
        """
        Add stress marks to ``text``.

        Args:
            text: One or more Bulgarian words without stress marks

        Returns:
            The stressed text, or ``text`` itself if it is already marked,
            empty, or the lookup fails.
        """
        if not text.strip() or has_stress_mark(text):
            return text

        try:
            html = self._fetch(encode_for_service(text))
            stressed = self._parse(html, text)
        except StressLookupError as e:
            logger.warning(f"Stress lookup failed for '{text}': {e}")
            return text

        logger.debug(f"Stress lookup: '{text}' -> '{stressed}'")
        return stressed

    def _fetch(self, query: str) -> str:
        """Download the accent dictionary page for an encoded query."""
        url = self.base_url + urllib.parse.quote(query, safe="+")
        request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                charset = response.headers.get_content_charset() or "utf-8"
                return response.read().decode(charset)
        except (urllib.error.URLError, OSError, UnicodeDecodeError) as e:
            raise StressLookupError(f"could not load {url}: {e}") from e

    @staticmethod
    def _parse(html: str, text: str) -> str:
        """
        Pick the stressed answer out of the result page.

        The answer is the first element whose text carries a stress mark and
        reads like the query once the marks are removed.
        """
        wanted = _collapse_spaces(text).lower()
        soup = BeautifulSoup(html, "html.parser")

        for element in soup.find_all(True):
            candidate = _collapse_spaces(element.get_text())
            if not has_stress_mark(candidate):
                continue
            if strip_stress_marks(candidate).lower() == wanted:
                return candidate

        raise StressLookupError("no stressed form of the query on the result page")

    def close(self):
        """Nothing to release; present for the StressLookup interface."""
        logger.debug("Online stress service closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def _collapse_spaces(text: str) -> str:
    return " ".join(text.split())
