"""Replacement of ``#dskey{...}`` tokens by datastore values."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final, overload

from ..domain.models import VALUE_MISSING
from ..ports.logger import LoggerPort
from ..ports.metrics import MetricsPort

# Everything up to the first closing brace on the same line
DATASTORE_KEY_PATTERN: Final = re.compile(r"#dskey\{([^}\r\n]*)\}")

ValueResolver = Callable[[str, str], str]


class KeyReplacer:
    """Substitutes datastore tokens in text.

    Each ``#dskey{key}`` token is replaced by ``resolver(key, VALUE_MISSING)``.
    Replacement values are inserted literally and never re-scanned, so a
    value containing a token does not get expanded.
    """

    def __init__(
        self,
        resolver: ValueResolver,
        logger: LoggerPort | None = None,
        metrics: MetricsPort | None = None,
    ):
        """Initialize the replacer.

        Args:
            resolver: Callable returning the value for a key, or the given default
            logger: Optional logger receiving a warning per missing key
            metrics: Optional metrics port counting missing keys
        """
        self._resolver = resolver
        self._logger = logger
        self._metrics = metrics

    @overload
    def replace_keys(self, source: str) -> str: ...

    @overload
    def replace_keys(self, source: None) -> None: ...

    def replace_keys(self, source: str | None) -> str | None:
        """Replace every datastore token in ``source``.

        Args:
            source: Text possibly containing ``#dskey{key}`` tokens

        Returns:
            The text with tokens replaced; ``source`` itself when it holds
            no token (including None)
        """
        if source is None or DATASTORE_KEY_PATTERN.search(source) is None:
            return source
        return DATASTORE_KEY_PATTERN.sub(self._resolve_match, source)

    def _resolve_match(self, match: re.Match[str]) -> str:
        key = match.group(1)
        value = self._resolver(key, VALUE_MISSING)
        if value == VALUE_MISSING:
            if self._metrics:
                self._metrics.increment("datastore.keys.missing")
            if self._logger:
                self._logger.warning(
                    f"Datastore Key missing : {key} - Please fix to avoid performance issues.",
                    key=key,
                )
        return value
