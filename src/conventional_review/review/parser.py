# src/conventional_review/review/parser.py
import fnmatch
import logging
from unidiff import PatchSet, UnidiffParseError
from conventional_review.errors import MalformedDiff
from conventional_review.models.diff import Change, ChangeKind, Chunk, DiffFile


logger = logging.getLogger(__name__)

DEV_NULL = "/dev/null"


def is_excluded(path: str, patterns: list[str]) -> bool:
    """Check if a target path matches any exclude glob."""
    for pattern in patterns:
        if fnmatch.fnmatch(path, pattern):
            return True
        # "**/x" should also match "x" at the repository root
        if pattern.startswith("**/") and fnmatch.fnmatch(path, pattern[3:]):
            return True
    return False


def _target_path(target_file: str | None) -> str | None:
    if not target_file or target_file == DEV_NULL:
        return None
    if target_file.startswith("b/"):
        return target_file[2:]
    return target_file


def _to_change(line) -> Change | None:
    content = line.value.rstrip("\r\n")
    if line.is_added:
        return Change(kind=ChangeKind.ADDITION, content=content, line_number=line.target_line_no)
    if line.is_removed:
        return Change(kind=ChangeKind.DELETION, content=content, line_number=line.source_line_no)
    if line.is_context:
        return Change(kind=ChangeKind.CONTEXT, content=content, line_number=line.target_line_no)
    # "\ No newline at end of file"
    return None


def normalize_diff(diff_text: str, exclude_patterns: list[str] | None = None) -> list[DiffFile]:
    """Parse a unified diff into line-addressable files, dropping deleted and excluded ones."""
    if not diff_text.strip():
        return []

    try:
        patch = PatchSet(diff_text)
    except UnidiffParseError as e:
        raise MalformedDiff(f"Could not parse diff: {e}") from e

    if len(patch) == 0:
        raise MalformedDiff("Diff contains no file sections")

    patterns = exclude_patterns or []
    files = []

    for patched_file in patch:
        path = _target_path(patched_file.target_file)
        if path is None:
            logger.debug(f"Skipping deleted file {patched_file.source_file}")
            continue
        if is_excluded(path, patterns):
            logger.debug(f"Skipping excluded file {path}")
            continue
        if patched_file.is_binary_file:
            logger.debug(f"Skipping binary file {path}")
            continue

        chunks = []
        for hunk in patched_file:
            changes = [change for change in map(_to_change, hunk) if change is not None]
            chunks.append(Chunk(changes=changes))

        files.append(DiffFile(path=path, chunks=chunks))

    logger.info(f"Diff has {len(patch)} files, {len(files)} eligible for review")
    return files
