"""JSON document store for link mappings."""

import json
import logging
import os
import stat
import tempfile
from typing import Dict, Optional

DEFAULT_FILE_MODE = 0o644


class LinkStore:
    """Single-file store holding the full code -> target mapping.

    The whole document is read on every ``load`` and rewritten on every
    ``save``; nothing is cached between calls.
    """

    def __init__(self, path: str, logger: Optional[logging.Logger] = None):
        """Initialize link store.

        Args:
            path: Location of the JSON document (created on first save)
            logger: Optional logger instance
        """
        self.path = path
        self.logger = logger or logging.getLogger(__name__)

    def load(self) -> Dict[str, str]:
        """Read the full mapping.

        Returns an empty mapping when the document is absent, empty or not
        a JSON object. Entries whose code or target is not a string are
        skipped.

        Returns:
            Dictionary of code -> target
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            return {}
        except OSError as e:
            self.logger.warning(f"Could not read link store {self.path}: {e}")
            return {}

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            self.logger.warning(f"Ignoring malformed link store {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            self.logger.warning(
                f"Ignoring link store {self.path}: expected an object, got {type(data).__name__}"
            )
            return {}

        return {
            code: target
            for code, target in data.items()
            if isinstance(code, str) and isinstance(target, str)
        }

    def save(self, mapping: Dict[str, str]) -> None:
        """Overwrite the document with the full mapping.

        The data goes to a temporary file beside the document which then
        replaces it, so readers see either the old or the new mapping.

        Args:
            mapping: Complete code -> target mapping

        Raises:
            OSError: If the document cannot be written
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(prefix=".links-", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(mapping, f, indent=2, ensure_ascii=False)
            # mkstemp creates 0600; keep the document's permissions across the swap
            os.chmod(tmp_path, self._file_mode())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

        self.logger.debug(f"Saved {len(mapping)} links to {self.path}")

    def _file_mode(self) -> int:
        """Permission bits of the current document, or DEFAULT_FILE_MODE if absent."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE

    def get(self, code: str) -> Optional[str]:
        """Look up a single target.

        Args:
            code: The short code to lookup

        Returns:
            Target URL or None if not found
        """
        return self.load().get(code)
