#
# rotire
#
# A small cross-platform CLI tool to rotate the files of a single directory: keep the newest N, delete or archive the rest.
#
# Copyright (c) 2025-2026 Thomas Kuhlmann
#
# Licensed under the MIT License. See LICENSE file in the project root for license information.
#

import argparse
import contextlib
import stat
import sys
import tarfile
import tempfile
import threading
import time
import traceback
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from pathlib import Path
from types import SimpleNamespace
from typing import BinaryIO, NoReturn, Optional, TextIO, no_type_check


VERSION: str = "dev-1.0.0"

LOCK_FILE_NAME: str = ".rotire.lock"

ARCHIVE_NAME_PREFIX: str = "rotire-archive-"
ARCHIVE_NAME_SUFFIX: str = ".tar.gz"

COPY_BUFFER_SIZE: int = 1024 * 1024
SPOOL_MAX_MEMORY: int = 16 * 1024 * 1024


class ConcurrencyError(Exception):
    pass


class ArchiveError(Exception):
    pass


class InvalidEntryError(ValueError):
    pass


class ConfigNamespace(SimpleNamespace):
    pass


class LogLevel(IntEnum):
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3

    @classmethod
    def from_name_or_number(cls, prefix: str) -> "LogLevel":
        try:
            return next(m for m in cls if m.name.startswith(prefix.upper()))
        except StopIteration:
            try:
                return cls(int(prefix))
            except ValueError:
                raise ValueError("Invalid log level: " + prefix)


def format_size(bytes: int) -> str:
    units = ["", "K", "M", "G", "T", "E", "P"]
    idx, value = 0, float(bytes)
    while value >= 1024 and idx < len(units) - 1:
        value /= 1024
        idx += 1
    return f"{value:.2f}".rstrip("0").rstrip(".") + units[idx]


def format_timestamp(seconds: Optional[float]) -> str:
    return str(datetime.fromtimestamp(seconds)) if seconds is not None else "unavailable"


@dataclass(frozen=True)
class DirectoryEntry:
    path: Path
    size: int
    modified_at: Optional[float]

    @property
    def modified_at_unavailable(self) -> bool:
        return self.modified_at is None

    @property
    def name(self) -> str:
        if not self.path.name:  # e.g. '/' or ''
            raise InvalidEntryError(f"Entry has no file name: '{self.path}'")
        return self.path.name

    def describe(self) -> str:
        return f"mtime: {format_timestamp(self.modified_at)}, size: {format_size(self.size)}"


class Logger:
    _verbose: LogLevel

    def __init__(self, verbose: LogLevel = LogLevel.ERROR) -> None:
        self._verbose = verbose

    def has_log_level(self, level: LogLevel) -> bool:
        return level <= int(self._verbose)

    def _raw_verbose(self, level: LogLevel, message: str, file: Optional[TextIO] = None, prefix: str = "") -> None:
        if file is None:
            file = sys.stderr if level <= LogLevel.WARN else sys.stdout
        print(f"[{prefix or LogLevel(level).name}] {message}", file=file)

    def verbose(self, level: LogLevel, message: str, file: Optional[TextIO] = None, prefix: str = "") -> None:
        if self.has_log_level(level):
            self._raw_verbose(level, message, file, prefix)


# Filter chain


class FilterKind(Enum):
    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class Filter:
    kind: FilterKind
    value: str

    def satisfies(self, entry: DirectoryEntry) -> bool:
        if self.kind is FilterKind.PREFIX:
            return entry.name.startswith(self.value)
        if self.kind is FilterKind.SUFFIX:
            return entry.name.endswith(self.value)
        raise ValueError(f"invalid filter kind: {self.kind}")

    def __str__(self) -> str:
        return f"{self.kind.value} '{self.value}'"


def satisfies_all(filters: Iterable[Filter], entry: DirectoryEntry) -> bool:
    return all(f.satisfies(entry) for f in filters)


# Entry scanner


def read_entry(path: Path) -> Optional[DirectoryEntry]:
    """Return the entry for ``path``, or None if it is no readable regular file."""
    try:
        file_stat = path.stat()
    except OSError:  # vanished between listing and stat, or not accessible
        return None
    if not stat.S_ISREG(file_stat.st_mode):
        return None
    return DirectoryEntry(path=path, size=file_stat.st_size, modified_at=file_stat.st_mtime)


def scan_directory(directory: Path, filters: Sequence[Filter] = (), logger: Optional[Logger] = None) -> list[DirectoryEntry]:
    logger = logger or Logger()
    if not directory.exists():
        raise FileNotFoundError(f"Path not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {directory}")

    entries: list[DirectoryEntry] = []
    for child in sorted(directory.iterdir()):
        if child.name == LOCK_FILE_NAME:  # Ignore lock file (in any case, even if it is is disabled by user)
            continue
        entry = read_entry(child)
        if entry is None:
            logger.verbose(LogLevel.DEBUG, f"Skipping '{child.name}': no readable regular file")
            continue
        if not satisfies_all(filters, entry):
            logger.verbose(LogLevel.DEBUG, f"Skipping '{entry.name}': filtered out")
            continue
        entries.append(entry)
    return entries


# Retention partitioner


def sort_entries(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    # Oldest first; entries without timestamp count as oldest. sorted() is stable, so ties keep scan order.
    return sorted(entries, key=lambda e: (not e.modified_at_unavailable, e.modified_at or 0.0))


@dataclass
class PartitionResult:
    kept: list[DirectoryEntry]
    rotate: list[DirectoryEntry]


def partition_entries(entries: Iterable[DirectoryEntry], keep_count: int) -> PartitionResult:
    ordered = sort_entries(entries)
    split = max(0, len(ordered) - max(0, keep_count))
    return PartitionResult(kept=ordered[split:], rotate=ordered[:split])


# Action executor


class ActionKind(Enum):
    DELETE = "delete"
    ARCHIVE = "archive"


@dataclass(frozen=True)
class ActionSpec:
    kind: ActionKind = ActionKind.ARCHIVE
    dry_run: bool = False


class EntryStatus(Enum):
    DELETED = "deleted"
    ARCHIVED = "archived"
    ARCHIVED_NOT_REMOVED = "archived, but not removed"
    WOULD_DELETE = "would be deleted"
    WOULD_ARCHIVE = "would be archived"
    SKIPPED_REMOVE_FAILED = "skipped, remove failed"
    SKIPPED_OPEN_FAILED = "skipped, open failed"
    SKIPPED_APPEND_FAILED = "skipped, append to archive failed"
    SKIPPED_WRITE_FAILED = "skipped, archive write failed"

    @property
    def counted(self) -> bool:
        return not self.name.startswith("SKIPPED_")


@dataclass(frozen=True)
class EntryOutcome:
    entry: DirectoryEntry
    status: EntryStatus
    reason: Optional[str] = None


@dataclass
class RotationResult:
    """Totals of one action run plus the outcome of every entry it touched.

    ``affected_count`` and ``affected_bytes`` are only changed through ``record`` and never decrease.
    """

    affected_count: int = 0
    affected_bytes: int = 0
    outcomes: list[EntryOutcome] = field(default_factory=list)
    archive_path: Optional[Path] = None

    def record(self, outcome: EntryOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.status.counted:
            self.affected_count += 1
            self.affected_bytes += outcome.entry.size

    @property
    def skipped(self) -> list[EntryOutcome]:
        return [o for o in self.outcomes if not o.status.counted]

    def __str__(self) -> str:
        return f"Affected files: {self.affected_count}, size: {format_size(self.affected_bytes)}"


def archive_name(timestamp_ms: int) -> str:
    return f"{ARCHIVE_NAME_PREFIX}{timestamp_ms}{ARCHIVE_NAME_SUFFIX}"


def new_archive_path(directory: Path) -> Path:
    return directory / archive_name(time.time_ns() // 1_000_000)


def delete_entries(entries: Iterable[DirectoryEntry], logger: Logger) -> RotationResult:
    result = RotationResult()
    for entry in entries:
        logger.verbose(LogLevel.INFO, f"DELETING: {entry.name} ({entry.describe()})")
        try:
            entry.path.unlink()
        except OSError as e:  # Catch deletion error, report it, and continue
            logger.verbose(LogLevel.WARN, f"Error while deleting file '{entry.name}': {e}")
            result.record(EntryOutcome(entry, EntryStatus.SKIPPED_REMOVE_FAILED, str(e)))
            continue
        result.record(EntryOutcome(entry, EntryStatus.DELETED))
    return result


def _spool_member(handle: BinaryIO, size: int) -> "tempfile.SpooledTemporaryFile[bytes]":
    """Copy exactly ``size`` bytes of ``handle``; raise OSError if the file is shorter or longer."""
    spool: "tempfile.SpooledTemporaryFile[bytes]" = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_MEMORY)
    try:
        copied = 0
        while copied < size:
            chunk = handle.read(min(COPY_BUFFER_SIZE, size - copied))
            if not chunk:
                break
            spool.write(chunk)
            copied += len(chunk)
        if copied != size or handle.read(1):
            raise OSError(f"file changed while archiving (expected {size} bytes)")
        spool.seek(0)
    except BaseException:
        spool.close()
        raise
    return spool


def _archive_entry(tar: tarfile.TarFile, entry: DirectoryEntry, logger: Logger) -> EntryOutcome:
    try:
        handle = entry.path.open("rb")
    except OSError as e:
        logger.verbose(LogLevel.WARN, f"Error while opening file '{entry.name}': {e}")
        return EntryOutcome(entry, EntryStatus.SKIPPED_OPEN_FAILED, str(e))

    logger.verbose(LogLevel.INFO, f"ARCHIVING: {entry.name} ({entry.describe()})")
    with handle:
        try:
            tarinfo = tar.gettarinfo(arcname=entry.name, fileobj=handle)
            spool = _spool_member(handle, tarinfo.size)
        except (OSError, tarfile.TarError) as e:  # nothing written to the archive, original stays on disk
            logger.verbose(LogLevel.WARN, f"Error while archiving file '{entry.name}': {e}")
            return EntryOutcome(entry, EntryStatus.SKIPPED_APPEND_FAILED, str(e))

    with spool:
        try:
            tar.addfile(tarinfo, spool)
        except (OSError, tarfile.TarError) as e:  # member may be partially written
            logger.verbose(LogLevel.WARN, f"Error while writing file '{entry.name}' to archive: {e}")
            return EntryOutcome(entry, EntryStatus.SKIPPED_WRITE_FAILED, str(e))

    try:
        entry.path.unlink()
    except OSError as e:
        logger.verbose(LogLevel.WARN, f"Error while deleting archived file '{entry.name}': {e}")
        return EntryOutcome(entry, EntryStatus.ARCHIVED_NOT_REMOVED, str(e))
    return EntryOutcome(entry, EntryStatus.ARCHIVED)


def _finalize_archive(tar: tarfile.TarFile, archive_path: Path) -> None:
    try:
        tar.close()
    except (OSError, tarfile.TarError) as e:
        raise ArchiveError(f"Could not finalize archive '{archive_path}': {e}") from e


def archive_entries(entries: Iterable[DirectoryEntry], directory: Path, logger: Logger) -> RotationResult:
    """Move ``entries`` into a new ``rotire-archive-<epoch ms>.tar.gz`` inside ``directory``.

    A file is only deleted after it was appended to the archive. Per-file errors are recorded and skipped.
    Once a write to the archive failed, its stream can no longer be trusted, so no further file is archived
    or deleted. Failing to create or to finalize the archive raises ``ArchiveError``.
    """
    result = RotationResult(archive_path=new_archive_path(directory))
    try:
        tar = tarfile.open(result.archive_path, "x:gz", format=tarfile.PAX_FORMAT)
    except (OSError, tarfile.TarError) as e:
        raise ArchiveError(f"Could not create archive '{result.archive_path}': {e}") from e

    logger.verbose(LogLevel.INFO, f"Writing archive: {result.archive_path.name}")
    write_error: Optional[str] = None
    try:
        for entry in entries:
            if write_error is not None:
                logger.verbose(LogLevel.WARN, f"Not archiving file '{entry.name}': archive write failed before")
                result.record(EntryOutcome(entry, EntryStatus.SKIPPED_WRITE_FAILED, write_error))
                continue
            outcome = _archive_entry(tar, entry, logger)
            result.record(outcome)
            if outcome.status is EntryStatus.SKIPPED_WRITE_FAILED:
                write_error = outcome.reason
    except Exception:
        with contextlib.suppress(OSError, tarfile.TarError):  # the loop's error takes precedence
            tar.close()
        raise
    _finalize_archive(tar, result.archive_path)
    return result


def dry_run_entries(entries: Iterable[DirectoryEntry], kind: ActionKind, logger: Logger) -> RotationResult:
    status = EntryStatus.WOULD_DELETE if kind is ActionKind.DELETE else EntryStatus.WOULD_ARCHIVE
    result = RotationResult()
    for entry in entries:
        logger.verbose(LogLevel.INFO, f"DRY-RUN {kind.name}: {entry.name} ({entry.describe()})")  # Just simulate
        result.record(EntryOutcome(entry, status))
    return result


def execute_action(entries: Sequence[DirectoryEntry], spec: ActionSpec, directory: Path, logger: Logger) -> RotationResult:
    if spec.dry_run:
        return dry_run_entries(entries, spec.kind, logger)
    if spec.kind is ActionKind.DELETE:
        return delete_entries(entries, logger)
    if spec.kind is ActionKind.ARCHIVE:
        return archive_entries(entries, directory, logger)
    raise ValueError(f"invalid action kind: {spec.kind}")


# Rotation engine


class RotationEngine:
    """Scans one directory, keeps the newest entries and applies an action to the rest.

    Each instance allows only one ``run`` at a time; a second call while one is in progress
    raises ``ConcurrencyError`` and does not touch the file system.
    """

    _directory: Path
    _filters: list[Filter]
    _logger: Logger
    _run_lock: threading.Lock

    def __init__(self, directory: "Path | str", filters: Optional[Iterable[Filter]] = None, logger: Optional[Logger] = None) -> None:
        self._directory = Path(directory)
        self._filters = list(filters or [])
        self._logger = logger or Logger()
        self._run_lock = threading.Lock()

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def filters(self) -> tuple[Filter, ...]:
        return tuple(self._filters)

    @property
    def is_running(self) -> bool:
        return self._run_lock.locked()

    def add_filter(self, filter: Filter) -> None:
        # Must not be called while a run is in progress
        self._filters.append(filter)

    def run(self, keep_count: int, spec: ActionSpec) -> RotationResult:
        if not self._run_lock.acquire(blocking=False):
            raise ConcurrencyError(f"A rotation is already running on {self._directory}")
        try:
            return self._run(keep_count, spec)
        finally:
            self._run_lock.release()

    def _run(self, keep_count: int, spec: ActionSpec) -> RotationResult:
        entries = scan_directory(self._directory, self._filters, self._logger)
        filter_info = " and ".join(str(f) for f in self._filters) or "no filter"
        self._logger.verbose(LogLevel.INFO, f"Found {len(entries)} files in '{self._directory}' using {filter_info}")

        partition = partition_entries(entries, keep_count)
        self._logger.verbose(LogLevel.INFO, f"Total files to keep:   {len(partition.kept):03d}")
        self._logger.verbose(LogLevel.INFO, f"Total files to rotate: {len(partition.rotate):03d}")
        self._logger.verbose(LogLevel.DEBUG, "Files to keep: " + ", ".join(f'"{e.name}"' for e in partition.kept))

        return execute_action(partition.rotate, spec, self._directory, self._logger)


# Command line


class ModernHelpFormatter(argparse.HelpFormatter):
    @no_type_check
    def __init__(self, *a, **kw) -> None:  # noqa: ANN002, ANN003
        super().__init__(*a, max_help_position=30, width=160, **kw)

    @no_type_check
    def start_section(self, heading) -> None:  # noqa: ANN001
        super().start_section(heading.capitalize())


class ModernStrictArgumentParser(argparse.ArgumentParser):
    @no_type_check
    def __init__(self, *a, **kw) -> None:  # noqa: ANN002, ANN003
        super().__init__(*a, **kw)
        self._errors: list[str] = []

    def add_error(self, msg: str) -> None:
        if msg not in self._errors:
            self._errors.append(msg)

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print("\nError(s):", file=sys.stderr)
        for line in message.split("\n"):
            print(f"  • {line}", file=sys.stderr)
        print("\nHint: Try '--help' for more information.", file=sys.stderr)
        sys.exit(2)

    # Argument type helpers
    def int_argument(self, value: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid value '{value}': must be an integer")

    def filter_value_argument(self, value: str) -> str:
        if not value:
            raise argparse.ArgumentTypeError("Invalid filter value: must not be empty")
        if "/" in value:
            raise argparse.ArgumentTypeError(f"Invalid filter value '{value}': must not contain '/'")
        return value

    def verbose_argument(self, value: str) -> LogLevel:
        try:
            return LogLevel.from_name_or_number(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid verbose value '{value}' (use ERROR, WARN, INFO, DEBUG or 0, 1, 2, 3)")

    # Internal helper methods
    def _suggest(self, argument: str) -> list[str]:
        opts = [o for a in self._actions for o in a.option_strings if o.startswith("--")]
        cand = [o for o in opts if abs(len(o) - len(argument)) <= 2 and sum(a != b for a, b in zip(o, argument)) <= 2]
        return cand[:1]

    @no_type_check
    def _collect_raw_args(self, args):  # noqa: ANN202, ANN001
        if args is not None:
            return list(args)
        return sys.argv[1:]  # default argparse behavior

    @no_type_check
    def _detect_duplicate_flags(self, raw_args) -> None:  # noqa: ANN001
        # Normalize option strings
        alias = {opt: action.option_strings[0] for action in self._actions for opt in action.option_strings}
        repeatable = {action.option_strings[0] for action in self._actions if isinstance(action, argparse._AppendAction)}
        seen = set()

        for tok in raw_args:
            if not tok.startswith("-") or tok[1:2].isdigit():  # values like '-1' are no flags
                continue

            # Extract option (handles -k3, -k=3, --keep=3)
            opt = tok.split("=", 1)[0]

            # Handle -k3 → -k
            if len(opt) > 2 and opt.startswith("-") and not opt.startswith("--"):
                opt = opt[:2]

            key = alias.get(opt, opt)
            if key in repeatable:
                continue

            if key in seen:
                self.add_error(f"Duplicate flag: {key}")
            seen.add(key)

    # Main hook
    @no_type_check
    def parse_known_args(self, args=None, namespace=None) -> tuple[argparse.Namespace, list[str]]:  # noqa: ANN001
        self._errors = []
        raw_args = self._collect_raw_args(args)
        self._detect_duplicate_flags(raw_args)

        ns, unknown = super().parse_known_args(raw_args, namespace or argparse.Namespace())

        if unknown:
            sug = self._suggest(unknown[0])
            if sug:
                self.add_error(f"Unknown option: {unknown[0]} (did you mean {sug[0]}?)")
            else:
                self.add_error(f"Unknown option: {unknown[0]}")

        if self._errors:
            msg = "\n".join(f"{e}" for e in self._errors)
            self.error(msg)

        return ns, unknown


def create_parser() -> ModernStrictArgumentParser:
    parser: ModernStrictArgumentParser = ModernStrictArgumentParser(
        description=f"rotire {VERSION}\n\nA small CLI tool to rotate the files of a single directory",
        usage=("rotire --directory DIR [action] [options]\n\nExample:\n  rotire -d /var/log/myapp -k 7 -s .log archive"),
        epilog="Use with caution!! This tool deletes files unless --dry-run is set.",
        formatter_class=ModernHelpFormatter,
        add_help=False,
    )

    g_main = parser.add_argument_group("Main arguments")
    g_ret = parser.add_argument_group("Retention arguments")
    g_filter = parser.add_argument_group("Filter arguments")
    g_behavior = parser.add_argument_group("Behavior arguments")
    g_common = parser.add_argument_group("Common arguments")

    g_main.add_argument("--directory", "-d", required=True, metavar="DIR", help="Directory to rotate (recursion is not supported)")
    g_main.add_argument("action", nargs="?", choices=[k.value for k in ActionKind], default=ActionKind.ARCHIVE.value, help="Action for rotated files: archive or delete (default: archive)")

    g_ret.add_argument("--keep", "-k", type=parser.int_argument, default=4, metavar="N", help="Keep the N most recently modified files (default: 4, values < 0 count as 0)")

    # fmt: off
    g_filter.add_argument("--prefix-filter", "-p", type=parser.filter_value_argument, action="append", dest="prefix_filters", default=[], metavar="VALUE",
        help="Only rotate files whose name starts with VALUE (repeatable, all filters must match)")
    g_filter.add_argument("--suffix-filter", "-s", type=parser.filter_value_argument, action="append", dest="suffix_filters", default=[], metavar="VALUE",
        help="Only rotate files whose name ends with VALUE (repeatable, all filters must match)")

    g_behavior.add_argument("--dry-run", "-X", action="store_true", help="Show planned actions but do not delete or archive any files")
    g_behavior.add_argument("--verbose", "-V", "-v", type=parser.verbose_argument, default=LogLevel.INFO, nargs="?", const=LogLevel.INFO, metavar="lev",
        help="Verbosity level: 0 = error, 1 = warn, 2 = info, 3 = debug (default: 'info'; use numbers or names)")
    # fmt: on
    g_behavior.add_argument("--no-lock-file", action="store_false", dest="use_lock_file", default=True, help="Omit lock file (default: enabled)")

    g_common.add_argument("--version", "-R", action="version", version=f"%(prog)s {VERSION}")
    g_common.add_argument("--help", "-H", action="help", help="Show this help message and exit")
    g_common.add_argument("--stacktrace", action="store_true", help=argparse.SUPPRESS)

    return parser


def parse_arguments() -> ConfigNamespace:
    parser = create_parser()
    args = parser.parse_args()
    return ConfigNamespace(**vars(args))


def build_filters(args: ConfigNamespace) -> list[Filter]:
    return [Filter(FilterKind.PREFIX, v) for v in args.prefix_filters] + [Filter(FilterKind.SUFFIX, v) for v in args.suffix_filters]


def build_action_spec(args: ConfigNamespace) -> ActionSpec:
    return ActionSpec(kind=ActionKind(args.action), dry_run=args.dry_run)


def handle_exception(exception: Exception, exit_code: int, stacktrace: bool, prefix: str = "") -> None:
    if stacktrace:
        traceback.print_exc()
    print(f"[{prefix or LogLevel.ERROR.name}] {exception}", file=sys.stderr)
    sys.exit(exit_code)


def main() -> None:
    args: Optional[ConfigNamespace] = None
    lock_file: Optional[Path] = None
    created_lock_file = False

    try:
        args = parse_arguments()
        logger = Logger(args.verbose)

        logger.verbose(LogLevel.DEBUG, f"Parsed arguments: {args}")

        engine = RotationEngine(args.directory, build_filters(args), logger)

        if args.use_lock_file:
            lock_file = engine.directory / LOCK_FILE_NAME
            try:
                lock_file.touch(exist_ok=False)
            except FileExistsError:
                raise ConcurrencyError(f"A rotation process is already running on {args.directory} (or there is a stale lockfile)") from None
            created_lock_file = True

        result = engine.run(args.keep, build_action_spec(args))

        if result.archive_path is not None:
            logger.verbose(LogLevel.INFO, f"Archive written: {result.archive_path}")
        if result.skipped:
            logger.verbose(LogLevel.WARN, f"{len(result.skipped)} file(s) could not be processed")
        logger.verbose(LogLevel.INFO, f"Operation completed successfully: {result}")

    except OSError as e:
        handle_exception(e, 1, args.stacktrace if args is not None else True)
    except ValueError as e:
        handle_exception(e, 2, args.stacktrace if args is not None else True)
    except ConcurrencyError as e:
        handle_exception(e, 5, args.stacktrace if args is not None else True)
    except ArchiveError as e:
        handle_exception(e, 6, args.stacktrace if args is not None else True)
    except Exception as e:
        handle_exception(e, 9, args.stacktrace if args is not None else True, prefix="UNEXPECTED ERROR")
    finally:
        if created_lock_file and lock_file is not None:
            lock_file.unlink(missing_ok=True)


if __name__ == "__main__":
    main()
