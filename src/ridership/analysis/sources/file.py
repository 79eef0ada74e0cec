"""Read passenger data from a local JSON file."""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class FileSource:
    """Passenger data stored in a JSON file on disk."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def read_text(self) -> str:
        text = self.path.read_text(encoding=self.encoding)
        logger.info("Read %d characters from %s", len(text), self.path)
        return text
