"""Error reporting that raises during development and logs in release builds."""

from __future__ import annotations

from pathlib import Path

DEFAULT_LOG_PATH = "errors.log"


def save_to_log(
    error: BaseException | None,
    is_release: bool,
    path: str | Path = DEFAULT_LOG_PATH,
) -> None:
    """Raise ``error`` in development builds; append its message to ``path`` in release builds.

    Nothing happens when ``error`` is None. If the log file cannot be read it is
    created empty first; failing to create it raises the underlying ``OSError``.
    """
    if error is None:
        return

    if not is_release:
        raise error

    log = Path(path)
    try:
        data = log.read_text(encoding="utf-8")
    except OSError:
        data = ""
        log.write_text(data, encoding="utf-8")

    log.write_text(data + str(error), encoding="utf-8")