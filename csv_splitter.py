import asyncio
import codecs
import os
from dataclasses import dataclass, field, fields, replace

import chardet
from tqdm import tqdm

# Defaults

@dataclass(frozen=True)
class SplitOptions:
    rows_per_chunk: int = 100000
    name_template: str = "{name}_{num}.csv"

    def __post_init__(self):
        if isinstance(self.rows_per_chunk, bool) or not isinstance(self.rows_per_chunk, int):
            raise ValueError(f"rows_per_chunk must be an integer, got {self.rows_per_chunk!r}")
        if self.rows_per_chunk < 1:
            raise ValueError(f"rows_per_chunk must be positive, got {self.rows_per_chunk}")
        if not isinstance(self.name_template, str):
            raise ValueError(f"name_template must be a string, got {self.name_template!r}")


DEFAULT_OPTIONS = SplitOptions()


@dataclass
class SplitResult:
    files_written: int = 0
    preamble_lines_skipped: int = 0
    output_paths: list = field(default_factory=list)

# Errors

class SplitError(Exception):
    """Base error for a failed split; `stage` names the step that failed."""

    stage = "split"

    def __init__(self, path, cause=None, stage=None):
        if stage is not None:
            self.stage = stage
        self.path = path
        self.cause = cause
        message = f"{self.stage} failed for '{path}'"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class SourceNotFoundError(SplitError):
    stage = "source-open"


class SourceUnreadableError(SplitError):
    stage = "source-open"


class SinkCreateError(SplitError):
    stage = "sink-create"


class SinkWriteError(SplitError):
    stage = "sink-write"

# Helpers

def resolve_options(options=None):
    """Merge partial overrides (a dict or SplitOptions) over the defaults."""
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, SplitOptions):
        return options
    known = {f.name for f in fields(SplitOptions)}
    unknown = set(options) - known
    if unknown:
        raise TypeError(f"Unknown split option(s): {', '.join(sorted(unknown))}")
    overrides = {key: value for key, value in options.items() if value is not None}
    return replace(DEFAULT_OPTIONS, **overrides)


def is_csv_line(line):
    return "," in line


def format_file_name(pattern, base_name, sequence_number):
    """
    Build an output file name from a pattern.

    The first `{name}` becomes the base name and the first `{num}` becomes the
    sequence number, zero padded to 3 digits. Either token may be missing.
    The number is substituted after the name, so a `{num}` in the base name
    is the one that gets replaced.
    """
    if sequence_number < 1:
        raise ValueError(f"sequence_number must be >= 1, got {sequence_number}")

    padded_num = f"{sequence_number:03d}"
    return pattern.replace("{name}", base_name, 1).replace("{num}", padded_num, 1)


def get_base_name(file_path):
    return os.path.splitext(os.path.basename(file_path))[0]


def detect_encoding(file_path):
    try:
        with open(file_path, 'rb') as f:
            rawdata = f.read(10000)
    except FileNotFoundError as e:
        raise SourceNotFoundError(file_path, e) from e
    except OSError as e:
        raise SourceUnreadableError(file_path, e) from e
    result = chardet.detect(rawdata)
    encoding = result['encoding']
    if not encoding:
        return 'utf-8'
    try:
        codecs.lookup(encoding)
    except LookupError:
        return 'utf-8'
    return encoding


def read_lines(source, file_path):
    """Yield lines without their newline; read errors become SourceUnreadableError."""
    while True:
        try:
            line = source.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnreadableError(file_path, e, stage="source-read") from e
        if not line:
            return
        yield line[:-1] if line.endswith("\n") else line


class ChunkSink:
    """One output file: header first, then data rows, each newline-terminated."""

    def __init__(self, path, encoding):
        self.path = path
        self.rows = 0
        try:
            self.file = open(path, 'w', encoding=encoding, errors='surrogateescape', newline='')
        except OSError as e:
            raise SinkCreateError(path, e) from e

    def write_line(self, line):
        try:
            self.file.write(f"{line}\n")
        except OSError as e:
            raise SinkWriteError(self.path, e) from e

    def close(self):
        if self.file.closed:
            return
        try:
            self.file.close()
        except OSError as e:
            raise SinkWriteError(self.path, e) from e

# Core logic

def split_csv_file(file_path, output_dir, options=None):
    """
    Split a CSV file into files of at most `rows_per_chunk` data rows.

    Leading lines without a comma are skipped, the first line with one becomes
    the header and is repeated at the top of every output file. Output files are
    written to `output_dir`, which must already exist.
    """
    config = resolve_options(options)
    base_name = get_base_name(file_path)
    encoding = detect_encoding(file_path)

    result = SplitResult()
    header = None
    sink = None

    try:
        source = open(file_path, 'r', encoding=encoding, errors='surrogateescape')
    except FileNotFoundError as e:
        raise SourceNotFoundError(file_path, e) from e
    except OSError as e:
        raise SourceUnreadableError(file_path, e) from e

    try:
        with source:
            for line in read_lines(source, file_path):
                # skip metadata until the first CSV line, which is the header
                if header is None:
                    if not is_csv_line(line):
                        result.preamble_lines_skipped += 1
                        continue
                    header = line
                    continue

                if sink is None or sink.rows == config.rows_per_chunk:
                    if sink is not None:
                        sink.close()
                    file_name = format_file_name(config.name_template, base_name, result.files_written + 1)
                    output_file_path = os.path.join(output_dir, file_name)
                    tqdm.write(f"Creating file: {output_file_path}")
                    sink = ChunkSink(output_file_path, encoding)
                    result.files_written += 1
                    result.output_paths.append(output_file_path)
                    sink.write_line(header)

                sink.write_line(line)
                sink.rows += 1

        if sink is not None:
            sink.close()
    finally:
        if sink is not None and not sink.file.closed:
            sink.file.close()

    tqdm.write(
        f"Split {os.path.basename(file_path)} into {result.files_written} files "
        f"with up to {config.rows_per_chunk} lines per file (excluding header)."
    )
    if result.preamble_lines_skipped > 0:
        tqdm.write(f"Discarded {result.preamble_lines_skipped} metadata line(s) from the beginning of the file.")

    return result


async def split_csv_file_async(file_path, output_dir, options=None):
    """Awaitable split_csv_file; the blocking I/O runs in a worker thread."""
    return await asyncio.to_thread(split_csv_file, file_path, output_dir, options)
