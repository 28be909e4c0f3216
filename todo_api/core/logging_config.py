import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the root logger; safe to call repeatedly."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(getattr(h, "_todo_api", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._todo_api = True  # type: ignore[attr-defined]
        root.addHandler(handler)
