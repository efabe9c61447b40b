# Area: Shared
"""
safe_respawn._shared.datafile - JSON data files
===============================================

Small JSON data-file helper and the previously-connected-players store
built on it. The store is best-effort: load failures read as an empty
set and save failures are logged, never raised.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, Set, Union

from ..errors import DataFileError
from ..types import PlayerId

logger = logging.getLogger("safe_respawn.datafile")

PREVIOUSLY_CONNECTED_KEY = "Previously Connected Players"


class DataFile:
    """
    A JSON object stored on disk.

    Provides existence checks, strict loading and atomic saving.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize data file.

        Args:
            path: Location of the JSON file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load_strict(self) -> Dict[str, Any]:
        """
        Load the file contents.

        Returns:
            The JSON object, or an empty dict if the file does not exist

        Raises:
            DataFileError: If the file exists but is not a JSON object
        """
        if not self.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DataFileError(str(self.path), str(e)) from e
        if not isinstance(data, dict):
            raise DataFileError(str(self.path), "top-level value must be an object")
        return data

    def save(self, data: Dict[str, Any]) -> None:
        """
        Write ``data`` as indented JSON, creating parent directories.

        The data is serialized first and written to a temporary file that
        replaces the target, so a failed save leaves the old file intact.

        Raises:
            TypeError, ValueError: If ``data`` is not JSON serializable
            OSError: If the file cannot be written
        """
        text = json.dumps(data, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


class JsonConnectedPlayersStore:
    """Previously connected players kept in a JSON data file."""

    def __init__(self, path: Union[str, Path]):
        self.data_file = DataFile(path)

    def load(self) -> Set[PlayerId]:
        try:
            data = self.data_file.load_strict()
        except DataFileError as e:
            logger.warning(f"Treating previously connected players as empty: {e}")
            return set()
        players = data.get(PREVIOUSLY_CONNECTED_KEY, [])
        if not isinstance(players, list):
            logger.warning(
                f"Ignoring malformed '{PREVIOUSLY_CONNECTED_KEY}' in {self.data_file.path}"
            )
            return set()
        return set(players)

    def save(self, players: Iterable[PlayerId]) -> None:
        data = {PREVIOUSLY_CONNECTED_KEY: sorted(players, key=str)}
        try:
            self.data_file.save(data)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Could not save {self.data_file.path}: {e}")
