"""In-memory logging adapter for testing.

Records the configuration each initialization receives instead of starting
the lib_log_rich runtime, so wiring such as ``build_from_config`` can be
asserted without global side effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lib_layered_config import Config


def _empty_config_list() -> list[Config]:
    return []


@dataclass
class LoggingSpy:
    """Captures init_logging calls.

    Example:
        >>> spy = LoggingSpy()
        >>> spy.init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))
        >>> spy.initialised
        True
        >>> spy.configs[0].get("lib_log_rich.environment")
        'test'
    """

    configs: list[Config] = field(default_factory=_empty_config_list)

    @property
    def initialised(self) -> bool:
        return bool(self.configs)

    def init_logging(self, config: Config) -> None:
        """Record *config*; mirrors the production signature."""
        self.configs.append(config)


__all__ = ["LoggingSpy"]
