import logging
from rich.logging import RichHandler

def configure(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_time=False, show_path=False)],
        force=True,
    )
    logging.getLogger("trainfinder").debug("Logging initialised (level=%s)", level.upper())
