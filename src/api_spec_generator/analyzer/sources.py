"""Collect controller source files from an archive or a local checkout."""

import logging
import zipfile
from pathlib import Path

from api_spec_generator.errors import ArchiveError

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIXES = (".jar", ".zip")


def is_controller_source(name: str) -> bool:
    """A controller source is a .java file whose path mentions 'controller'."""
    return name.endswith(".java") and "controller" in name.lower()


def collect_sources(path: Path) -> list[str]:
    """Return the text of every controller source under ``path``.

    ``path`` may be a .jar/.zip archive or a directory.
    """
    if path.is_dir():
        return collect_from_directory(path)
    return collect_from_archive(path)


def collect_from_archive(archive_path: Path) -> list[str]:
    """Extract controller sources from a JAR or ZIP archive, in entry order."""
    if not archive_path.exists():
        raise ArchiveError(f"Archive not found: {archive_path}")
    try:
        with zipfile.ZipFile(archive_path) as archive:
            sources = []
            for info in archive.infolist():
                if info.is_dir() or not is_controller_source(info.filename):
                    continue
                sources.append(archive.read(info).decode("utf-8", errors="replace"))
                logger.debug("Extracted %s", info.filename)
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveError(f"Could not read archive {archive_path.name}: {e}") from e

    logger.info("Found %d controller files in %s", len(sources), archive_path.name)
    return sources


def collect_from_directory(root: Path) -> list[str]:
    """Read controller sources from a source checkout, sorted by path."""
    sources = []
    for file_path in sorted(root.rglob("*.java")):
        relative = file_path.relative_to(root).as_posix()
        if not file_path.is_file() or not is_controller_source(relative):
            continue
        sources.append(file_path.read_text(encoding="utf-8", errors="replace"))
        logger.debug("Read %s", relative)

    logger.info("Found %d controller files in %s", len(sources), root)
    return sources
