"""File-system helpers for exporting workouts as text files."""
from __future__ import annotations

from pathlib import Path
import logging
import os

from backend import DEFAULT_DOCUMENTS_DIR
from backend import settings as app_settings
from backend.export_utils import make_export_name, serialize_workout
from backend.workout import Workout


def get_documents_dir() -> Path:
    """Return the directory workout exports are written to.

    A ``documents_dir`` setting takes precedence. On Android the
    app-private storage path is used so no storage permission is required.
    Everywhere else exports go to :data:`DEFAULT_DOCUMENTS_DIR`. The
    directory is created if it does not exist yet.
    """

    configured = app_settings.get_value("documents_dir")
    if configured:
        documents = Path(configured)
    else:
        try:  # pragma: no cover - imports require Android
            from android.storage import app_storage_path
        except ImportError:
            documents = DEFAULT_DOCUMENTS_DIR
        else:
            documents = Path(app_storage_path()) / "documents"
    documents.mkdir(parents=True, exist_ok=True)
    return documents.resolve()


def _atomic_write_text(dest: Path, text: str) -> None:
    """Write ``text`` to ``dest`` using a temporary file then rename.

    The temporary file is removed if the write or the rename fails.
    """

    tmp = dest.with_name(dest.name + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp, dest)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def write_workout(workout: Workout, dest_dir: Path | None = None) -> Path:
    """Export ``workout`` to ``dest_dir`` as ``<name>.txt``.

    Any existing export with the same name is overwritten. On success the
    absolute path of the file is returned. File-system errors are logged
    with full stack traces and re-raised so the caller decides how to
    report them. A name that would place the file outside ``dest_dir``,
    such as ``"../x"`` or ``"Push/Pull"``, raises :class:`OSError`.
    """

    dest_dir = Path(dest_dir or get_documents_dir()).resolve()
    dest = (dest_dir / make_export_name(workout.name)).resolve()
    if dest.parent != dest_dir:
        logging.error("Workout name %r escapes %s", workout.name, dest_dir)
        raise OSError(f"Invalid workout file name: {workout.name!r}")
    try:
        _atomic_write_text(dest, serialize_workout(workout))
    except PermissionError:
        logging.exception("Permission denied writing workout to %s", dest)
        raise
    except OSError:
        logging.exception("OS error writing workout to %s", dest)
        raise
    logging.info("Workout saved to %s", dest)
    return dest
