"""File-level conversion: read CSV files, render them, write HTML documents."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from anki_table.config import Config, get_config
from anki_table.error_codes import ErrorCode
from anki_table.exceptions import AnkiTableError, InputPathError, OutputWriteError
from anki_table.table.parser import parse
from anki_table.table.renderer import TableRenderer
from anki_table.utils.io import atomic_write
from anki_table.utils.logging import get_logger

logger = get_logger(__name__)

TITLE_DIRECTIVE = "#title="
INPUT_SUFFIX = ".csv"
OUTPUT_SUFFIX = ".html"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one CSV file."""

    input_path: Path
    output_path: Path
    title: str
    data_rows: int
    columns: int


@dataclass
class BatchResult:
    """Outcome of converting every CSV file in a directory."""

    converted: list[ConversionResult] = field(default_factory=list)
    failed: dict[Path, AnkiTableError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def total(self) -> int:
        return len(self.converted) + len(self.failed)


def derive_output_path(csv_path: Path) -> Path:
    """Place the HTML document next to its CSV source."""
    return csv_path.with_suffix(OUTPUT_SUFFIX)


def derive_title(raw_text: str, output_path: Path) -> str:
    """Pick the document title.

    A ``#title=<value>`` directive on the first line wins; otherwise the
    output file name without its ``.html`` extension is used.
    """
    first_line = raw_text.lstrip("\ufeff").split("\n", 1)[0].strip()
    if first_line.startswith(TITLE_DIRECTIVE):
        title = first_line[len(TITLE_DIRECTIVE) :].strip()
        if title:
            return title

    name = output_path.name
    if name.lower().endswith(OUTPUT_SUFFIX):
        return name[: -len(OUTPUT_SUFFIX)]
    return output_path.stem


def convert_text(raw_text: str, title: str, config: Config | None = None) -> str:
    """Parse and render one input text entirely in memory."""
    config = config or get_config()
    table = parse(raw_text, config.csv_format)
    return TableRenderer(config.render).render(table, title)


def _read_input(csv_path: Path, encoding: str) -> str:
    if not csv_path.is_file():
        raise InputPathError(
            f"Input file not found: {csv_path}",
            error_code=ErrorCode.IO_PATH_INVALID.value,
            context={"path": str(csv_path)},
        )
    try:
        return csv_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise InputPathError(
            f"Cannot decode {csv_path} as {encoding}",
            suggestion="Set input_encoding in the config",
            error_code=ErrorCode.IO_DECODE_FAILED.value,
            context={"path": str(csv_path)},
        ) from e


def convert_file(
    csv_path: Path,
    output_path: Path | None = None,
    title: str | None = None,
    config: Config | None = None,
) -> ConversionResult:
    """Convert one CSV file to an HTML document.

    The document is rendered completely before anything is written, and the
    write itself is atomic, so a failure never leaves a partial output file.

    Args:
        csv_path: Input CSV file
        output_path: Target HTML file, defaults to the input with ``.html``
        title: Document title, derived from the input when omitted
        config: Converter configuration, defaults to the loaded global config

    Returns:
        ConversionResult describing the written document

    Raises:
        InputPathError: If the input is missing or cannot be decoded
        ValidationError: If the input is malformed or inconsistent
        OutputWriteError: If the output cannot be written
    """
    config = config or get_config()
    csv_path = Path(csv_path)
    output_path = Path(output_path) if output_path else derive_output_path(csv_path)
    start_time = time.time()

    raw_text = _read_input(csv_path, config.input_encoding)
    title = title if title is not None else derive_title(raw_text, output_path)
    logger.info(
        "conversion_started",
        file=str(csv_path),
        output=str(output_path),
        title=title,
    )

    table = parse(raw_text, config.csv_format)
    document = TableRenderer(config.render).render(table, title)

    try:
        with atomic_write(output_path, encoding=config.output_encoding) as f:
            f.write(document)
    except OSError as e:
        raise OutputWriteError(
            f"Cannot write {output_path}: {e}",
            error_code=ErrorCode.IO_WRITE_FAILED.value,
            context={"path": str(output_path)},
        ) from e

    result = ConversionResult(
        input_path=csv_path,
        output_path=output_path,
        title=title,
        data_rows=len(table.data_records),
        columns=table.column_count,
    )
    logger.info(
        "conversion_completed",
        file=str(csv_path),
        output=str(output_path.absolute()),
        data_rows=result.data_rows,
        duration_seconds=round(time.time() - start_time, 3),
    )
    return result


def find_csv_files(directory: Path) -> list[Path]:
    """List regular ``*.csv`` files directly inside ``directory``, by name."""
    directory = Path(directory)
    if not directory.exists():
        raise InputPathError(
            f"Directory does not exist: {directory}",
            error_code=ErrorCode.IO_PATH_INVALID.value,
            context={"path": str(directory)},
        )
    if not directory.is_dir():
        raise InputPathError(
            f"Not a directory: {directory}",
            error_code=ErrorCode.IO_PATH_INVALID.value,
            context={"path": str(directory)},
        )
    return sorted(
        p for p in directory.iterdir() if p.is_file() and p.suffix == INPUT_SUFFIX
    )


def convert_directory(directory: Path, config: Config | None = None) -> BatchResult:
    """Convert every CSV file in ``directory`` next to its source.

    A failing file is recorded in the result and does not stop the
    remaining files from being converted.

    Raises:
        InputPathError: If ``directory`` is missing or not a directory
    """
    config = config or get_config()
    csv_files = find_csv_files(directory)
    logger.info("batch_started", directory=str(directory), files=len(csv_files))

    result = BatchResult()
    for csv_path in csv_files:
        try:
            result.converted.append(convert_file(csv_path, config=config))
        except AnkiTableError as e:
            logger.error("conversion_failed", file=str(csv_path), **e.to_dict())
            result.failed[csv_path] = e

    logger.info(
        "batch_completed",
        directory=str(directory),
        converted=len(result.converted),
        failed=len(result.failed),
    )
    return result
