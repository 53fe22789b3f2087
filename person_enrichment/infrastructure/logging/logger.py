import logging
from typing import Optional

from person_enrichment.infrastructure.config.settings import Settings

DEFAULT_LEVEL = logging.INFO


def resolve_level(level: Optional[str]) -> Optional[int]:
    resolved = logging.getLevelName((level or "").upper())
    return resolved if isinstance(resolved, int) else None


def setup_logging(level: Optional[str] = None, noisy_libs: Optional[dict[str, int]] = None) -> int:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    resolved = resolve_level(level)
    unknown = resolved is None
    if unknown:
        resolved = DEFAULT_LEVEL
    logging.basicConfig(
        level=resolved,
        handlers=[handler],
        force=True,
    )
    if level and unknown:
        logging.getLogger(__name__).warning("Unknown log level %r, using %s", level, logging.getLevelName(resolved))

    if noisy_libs is not None:
        for lib, lib_level in noisy_libs.items():
            logging.getLogger(lib).setLevel(lib_level)
    return resolved


def configure_logging(settings: Settings) -> int:
    return setup_logging(settings.LOG_LEVEL, noisy_libs={"httpx": logging.WARNING})
