"""Load pipeline for wordnet-graph: data files -> builder -> handle."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO

from wordnet_graph.builder import GraphBuilder
from wordnet_graph.config import LoaderConfig
from wordnet_graph.exceptions import DataSourceError
from wordnet_graph.handle import Wordnet
from wordnet_graph.parser import parse_stream

logger = logging.getLogger(__name__)


def is_data_file(name: str, prefix: str = "data") -> bool:
    """Check if a file name is a WNDB data file (not hidden, not a backup)."""
    if name.startswith(".") or name.endswith(("~", "#")):
        return False
    return name.startswith(prefix)


def discover_data_files(directory: str | Path, prefix: str = "data") -> list[Path]:
    """List data files under ``directory``, recursively, in sorted order."""
    directory = Path(directory)
    found = []
    for root, dirs, files in os.walk(directory, onerror=_raise_walk_error):
        dirs.sort()
        for name in sorted(files):
            if is_data_file(name, prefix):
                found.append(Path(root) / name)
    return found


def _raise_walk_error(error: OSError) -> None:
    raise DataSourceError(f"Cannot read {error.filename}: {error}") from error


def _new_builder(config: LoaderConfig) -> GraphBuilder:
    return GraphBuilder(
        strict_redefinition=config.strict_redefinition,
        validate_targets=config.validate_targets,
        verify_offsets=config.verify_offsets,
    )


def _finish(builder: GraphBuilder, start: float) -> Wordnet:
    wordnet = Wordnet(builder.build())
    logger.info(
        f"Loaded {len(wordnet)} synsets, {wordnet.lemma_count} lemmas "
        f"in {time.perf_counter() - start:.3f}s"
    )
    return wordnet


def load(path: str | Path, config: LoaderConfig | None = None) -> Wordnet:
    """Build a WordNet handle from a directory of WNDB data files.

    ``path`` may also name a single data file. Loading is all or nothing:
    the first malformed line or inconsistency aborts it.

    Raises:
        DataSourceError: If ``path`` is missing, unreadable, or holds no
            data files.
        FormatError: If a line does not follow the record grammar.
        IntegrityError: If the records do not form a consistent graph.
    """
    config = config or LoaderConfig()
    path = Path(path)
    if path.is_file():
        files = [path]
    elif path.is_dir():
        files = discover_data_files(path, config.file_prefix)
    else:
        raise DataSourceError(f"No such file or directory: {path}")
    if not files:
        raise DataSourceError(
            f"No data files ({config.file_prefix}*) found under {path}"
        )

    start = time.perf_counter()
    builder = _new_builder(config)
    for file in files:
        file_start = time.perf_counter()
        try:
            with open(file, "rb") as f:
                count = builder.add_all(parse_stream(f, source=str(file)))
        except OSError as e:
            raise DataSourceError(f"Cannot read {file}: {e}") from e
        logger.debug(
            f"{file}: {count} synsets in {time.perf_counter() - file_start:.3f}s"
        )
    return _finish(builder, start)


def load_streams(
    streams: Iterable[tuple[str, BinaryIO]],
    config: LoaderConfig | None = None,
) -> Wordnet:
    """Build a WordNet handle from already opened binary streams."""
    config = config or LoaderConfig()
    start = time.perf_counter()
    builder = _new_builder(config)
    for name, stream in streams:
        count = builder.add_all(parse_stream(stream, source=name))
        logger.debug(f"{name}: {count} synsets")
    return _finish(builder, start)
