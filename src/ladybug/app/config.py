from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class AppConfig:
    title: str = "Ladybug Runner"
    width: int = 800
    height: int = 450
    fps: int = 60
    seed: int | None = None  # None = nondeterministic obstacle layout
    log_level: str = "INFO"

    def with_overrides(self, **kwargs) -> AppConfig:
        return replace(self, **kwargs)


def load_config(**overrides) -> AppConfig:
    """Defaults with any non-None override applied."""
    config = AppConfig()
    given = {k: v for k, v in overrides.items() if v is not None}
    if given:
        config = config.with_overrides(**given)
    if config.width <= 0 or config.height <= 0:
        raise ValueError("width/height must be > 0")
    if config.fps <= 0:
        raise ValueError("fps must be > 0")
    return config
