import re
import threading
from typing import Dict, Optional, Pattern, Tuple

from rfcdoctool.config.validation_patterns import MULTILINE_PATTERNS, NAMED_PATTERNS


class PatternCache:
    """Thread-safe cache for compiled regex patterns and the named pattern registry."""

    def __init__(self, patterns: Optional[Dict[str, str]] = None) -> None:
        self._cache: Dict[Tuple[str, int], Pattern] = {}
        self._lock = threading.Lock()
        self._pattern_registry: Dict[str, str] = dict(
            NAMED_PATTERNS if patterns is None else patterns
        )
        self._load_patterns()

    def _load_patterns(self) -> None:
        """Pre-compile and cache all registered patterns."""
        for name in self._pattern_registry:
            self.get(name)

    def get_pattern(self, pattern_str: str, flags: int = 0) -> Pattern:
        """Get a compiled pattern from cache or compile and cache it."""
        key = (pattern_str, flags)
        with self._lock:
            if key not in self._cache:
                try:
                    self._cache[key] = re.compile(pattern_str, flags)
                except re.error as e:
                    raise ValueError(f"Invalid regex pattern: {pattern_str}") from e
            return self._cache[key]

    def get(self, name: str) -> Pattern:
        """Get a registered pattern by name."""
        try:
            pattern_str = self._pattern_registry[name]
        except KeyError:
            raise KeyError(f"Unknown pattern name: {name}") from None
        flags = re.MULTILINE if name in MULTILINE_PATTERNS else 0
        return self.get_pattern(pattern_str, flags)

    def clear(self) -> None:
        """Clear the pattern cache."""
        with self._lock:
            self._cache.clear()


# Shared instance used by the scanner, formatters and checks
PATTERNS = PatternCache()
