import logging
from typing import Optional

NOISY_LIBS = {"httpx": logging.WARNING, "httpcore": logging.WARNING}


def setup_logging(level: str = "INFO", noisy_libs: Optional[dict[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
        force=True,
    )

    for lib, lib_level in (noisy_libs if noisy_libs is not None else NOISY_LIBS).items():
        logging.getLogger(lib).setLevel(lib_level)
