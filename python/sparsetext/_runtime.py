import logging
import os

KERNELS = ("indexed", "scan")

_current_kernel = "indexed"


def set_matmul_kernel(name: str) -> None:
    global _current_kernel
    name = str(name).strip().lower()
    if name not in KERNELS:
        raise ValueError(f"unknown matmul kernel {name!r}; expected one of {KERNELS}")
    _current_kernel = name
    os.environ["SPARSETEXT_MATMUL_KERNEL"] = name


def get_matmul_kernel() -> str:
    # If user set env externally, honor it
    env = os.environ.get("SPARSETEXT_MATMUL_KERNEL")
    if env:
        env = env.strip().lower()
        if env in KERNELS:
            return env
    return _current_kernel


def configure_logging(level=None) -> logging.Logger:
    """Attach a stream handler to the ``sparsetext`` logger.

    ``level`` may be a level name or number; when omitted the
    ``SPARSETEXT_LOG_LEVEL`` environment variable is used, else ``WARNING``.
    """
    if level is None:
        level = os.environ.get("SPARSETEXT_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger = logging.getLogger("sparsetext")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
