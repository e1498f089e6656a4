"""
Generation driver.

One run:

    1. build the element table (catalog lookups + composition)
    2. render the builder module and the smoke test module in memory
    3. write both files

Any lookup failure surfaces in step 1, so an inconsistent table never
produces output. Both files are staged as temporary siblings before either
is renamed into place, so a failing write leaves the previous pair intact.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from markupgen.backends import generate_builder_module, generate_smoke_tests
from markupgen.catalog import Catalogs
from markupgen.config import GeneratorConfig
from markupgen.model import ElementDescriptor
from markupgen.table import build_element_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileWriteResult:
    path: Path
    line_count: int
    byte_count: int


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generator run."""

    element_count: int
    builder: FileWriteResult
    tests: FileWriteResult

    @property
    def files(self) -> Tuple[FileWriteResult, FileWriteResult]:
        return (self.builder, self.tests)


def render_sources(elements: Sequence[ElementDescriptor], config: GeneratorConfig) -> Dict[Path, str]:
    """Render both generated files, keyed by output path."""
    return {
        config.builder_path: generate_builder_module(elements, runtime_module=config.runtime_module),
        config.test_path: generate_smoke_tests(elements, builder_module=config.builder_module),
    }


def _file_mode(path: Path) -> int:
    """Mode for a file written at path: the existing file's, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _stage(path: Path, data: bytes) -> str:
    """Write data to a temporary sibling of path and return its name."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.chmod(tmp_name, _file_mode(path))
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return tmp_name


def write_files(sources: Dict[Path, str]) -> List[FileWriteResult]:
    """
    Replace every path in sources with its content.

    All contents are staged in temporary files in the target directories
    before the first one is renamed into place, so a failed write leaves
    every target untouched. Only a failing rename can leave the set half
    replaced.

    Existing files keep their permission bits; new files get 0o666 minus
    the umask.

    Raises:
        OSError: Propagated from the filesystem
    """
    staged: List[Tuple[Path, str, str, int]] = []
    try:
        for path, content in sources.items():
            data = content.encode("utf-8")
            staged.append((path, _stage(path, data), content, len(data)))
        for path, tmp_name, _, _ in staged:
            os.replace(tmp_name, path)
    except BaseException:
        for _, tmp_name, _, _ in staged:
            Path(tmp_name).unlink(missing_ok=True)
        raise

    results = []
    for path, _, content, byte_count in staged:
        logger.info("Wrote %s (%d lines)", path, content.count("\n"))
        results.append(FileWriteResult(path=path, line_count=content.count("\n"), byte_count=byte_count))
    return results


def write_file(path: Path, content: str) -> FileWriteResult:
    """Replace path with content. Same guarantees as write_files."""
    return write_files({path: content})[0]


def generate(
    config: Optional[GeneratorConfig] = None,
    catalogs: Optional[Catalogs] = None,
    entries: Optional[Sequence[Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Run the generator.

    Args:
        config: Output configuration (defaults to GeneratorConfig())
        catalogs: Catalogs to resolve against (packaged catalogs if None)
        entries: Raw element table entries (packaged table if None)

    Returns:
        GenerationResult describing both written files

    Raises:
        UnresolvedCatalogKey: If the table references an unknown key;
            nothing is written in that case
        TableError: If the table is malformed; nothing is written
        OSError: If a file cannot be written; both previous files are kept
            unless the failure is in the final renames
    """
    if config is None:
        config = GeneratorConfig()

    elements = build_element_table(catalogs=catalogs, entries=entries)
    sources = render_sources(elements, config)

    config.output_dir.mkdir(parents=True, exist_ok=True)
    results = write_files(sources)

    logger.info("Generated builders and smoke tests for %d elements", len(elements))
    return GenerationResult(element_count=len(elements), builder=results[0], tests=results[1])
