"""Basel open data portal (data.bs.ch) client for passenger counts.

Dataset 100075 holds weekly and monthly boarding passenger counts. The JSON
export is a flat array of objects with the keys understood by
ridership.analysis.loader.
"""

import logging

import requests

logger = logging.getLogger(__name__)

DATASET_ID = "100075"
DEFAULT_URL = f"https://data.bs.ch/api/explore/v2.1/catalog/datasets/{DATASET_ID}/exports/json"


class OpenDataSource:
    """Passenger data downloaded from the open data portal."""

    def __init__(self, url: str = DEFAULT_URL, timeout: int = 30):
        self.url = url
        self.timeout = timeout

    def read_text(self) -> str:
        """Download the JSON export. HTTP errors are raised."""
        logger.info("Downloading passenger data from %s", self.url)
        resp = requests.get(self.url, timeout=self.timeout)
        resp.raise_for_status()
        resp.encoding = resp.encoding or "utf-8"
        return resp.text
