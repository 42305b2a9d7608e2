"""Business logic service for link locker."""

import asyncio
import logging
from typing import Any, List, Optional

from .errors import InvalidTargetError, InvalidCodeError, DuplicateCodeError
from .models import LinkMapping
from .shortcode import ShortCodeGenerator
from .store import LinkStore
from .common.validators import is_valid_target, is_valid_short_code


class LinkService:
    """Service layer for creating and resolving links."""

    def __init__(
        self,
        store: LinkStore,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize link service.

        Args:
            store: Link store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        # Serializes load-assign-save so concurrent creates don't drop each other
        self._write_lock = asyncio.Lock()

    async def create_link(self, target: Any, code: Any = None) -> LinkMapping:
        """Create a new link.

        Args:
            target: Destination the link resolves to
            code: Optional caller-chosen short code

        Returns:
            The stored mapping

        Raises:
            InvalidTargetError: If target is missing or not a string
            InvalidCodeError: If the custom code has an unusable format
            DuplicateCodeError: If the custom code is already taken
            OSError: If the store cannot be written
        """
        is_valid, error = is_valid_target(target)
        if not is_valid:
            raise InvalidTargetError(error)

        custom_code = self._normalize_code(code)

        async with self._write_lock:
            links = await asyncio.to_thread(self.store.load)

            if custom_code is not None:
                if custom_code in links:
                    raise DuplicateCodeError(custom_code)
                short_code = custom_code
            else:
                short_code = self._generate_unique_code(links)

            links[short_code] = target
            await asyncio.to_thread(self.store.save, links)

        self.logger.info(f"Created link: {short_code} -> {target}")
        return LinkMapping(code=short_code, target=target)

    async def get_target(self, code: str) -> Optional[str]:
        """Get the target for a short code.

        Args:
            code: The short code to lookup

        Returns:
            Target URL or None if not found
        """
        target = await asyncio.to_thread(self.store.get, code)
        if target is None:
            self.logger.warning(f"Short code not found: {code}")
        else:
            self.logger.debug(f"Resolved link: {code} -> {target}")
        return target

    async def list_links(self) -> List[LinkMapping]:
        """List every stored link, ordered by code."""
        links = await asyncio.to_thread(self.store.load)
        return [LinkMapping.from_item(item) for item in sorted(links.items())]

    def _normalize_code(self, code: Any) -> Optional[str]:
        """Return the custom code to use, or None to generate one."""
        # Non-string and empty codes are ignored, same as an omitted one.
        # Anything else is kept byte for byte.
        if not isinstance(code, str) or code == "":
            return None

        is_valid, error = is_valid_short_code(code)
        if not is_valid:
            raise InvalidCodeError(f"Invalid short code: {error}")
        return code

    def _generate_unique_code(self, links: dict) -> str:
        """Draw random codes until one is absent from the snapshot."""
        attempts = 1
        code = self.generator.generate_random()
        while code in links:
            attempts += 1
            code = self.generator.generate_random()

        if attempts > 1:
            self.logger.debug(f"Generated code after {attempts} attempts: {code}")
        return code
