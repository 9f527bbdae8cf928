"""Summaries for GitHub push events."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

import structlog

from app.timezone import Clock, format_utc, utc_now

logger = structlog.get_logger()

MAX_COMMIT_MESSAGES = 2  # Only the first two commits are listed.
MAX_FILES_PER_SECTION = 3

BRANCH_PREFIX = "refs/heads/"
UNKNOWN = "unknown"
DEFAULT_PUSHER = "Unknown"
DEFAULT_REF = BRANCH_PREFIX + UNKNOWN
DEFAULT_REPO_NAME = "unknown-repo"
DEFAULT_REPO_FULL_NAME = "unknown/unknown-repo"
NO_TOP_COMMIT = "No commit message provided"
NO_MESSAGE = "No message"

BULLET = "  - "
NONE_LINE = BULLET + "None"
DIVIDER = "─" * 18

# Characters Telegram's legacy Markdown treats as entity delimiters.
MARKDOWN_SPECIALS = ("_", "*", "`", "[")


def _esc_md(value: str) -> str:
    for char in MARKDOWN_SPECIALS:
        value = value.replace(char, "\\" + char)
    return value


def _ensure_mapping(payload: Any) -> Mapping[str, Any]:
    return payload if isinstance(payload, Mapping) else {}


def _ensure_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def _text(value: Any, default: str) -> str:
    return value if isinstance(value, str) and value else default


def _first_line(text: Any, default: str) -> str:
    if not isinstance(text, str) or not text:
        return default
    lines = text.splitlines()
    return lines[0] if lines else ""


def _branch(ref: str) -> str:
    return ref.removeprefix(BRANCH_PREFIX) or UNKNOWN


def _repo(payload: Mapping[str, Any]) -> str:
    repository = payload.get("repository")
    if not isinstance(repository, Mapping) or not repository:
        return DEFAULT_REPO_FULL_NAME
    for key in ("full_name", "name"):
        value = repository.get(key)
        if isinstance(value, str) and value:
            return value
    return DEFAULT_REPO_FULL_NAME


def _pusher(payload: Mapping[str, Any]) -> str:
    pusher = _ensure_mapping(payload.get("pusher"))
    return _text(pusher.get("name"), DEFAULT_PUSHER)


def _bullets(items: Iterable[str]) -> str:
    lines = [f"{BULLET}{_esc_md(item)}" for item in items]
    return "\n".join(lines) if lines else NONE_LINE


def _collect_files(commits: Sequence[Mapping[str, Any]], key: str) -> list[str]:
    """Paths under ``key`` across every commit, deduplicated in first-seen order."""
    seen: dict[str, None] = {}
    for commit in commits:
        for path in _ensure_list(commit.get(key)):
            if path is None:
                continue
            seen.setdefault(str(path), None)
    return list(seen)[:MAX_FILES_PER_SECTION]


def _render_push(payload: Mapping[str, Any], timestamp: str) -> str:
    pusher = _pusher(payload)
    ref = _text(payload.get("ref"), DEFAULT_REF)
    branch = _branch(ref)
    repo = _repo(payload)
    commits = [_ensure_mapping(c) for c in _ensure_list(payload.get("commits"))]
    commit_count = len(commits)

    logger.debug("push_formatting", commits=commit_count, pusher=pusher, branch=branch)

    top_commit = _first_line(commits[0].get("message"), NO_TOP_COMMIT) if commits else NO_TOP_COMMIT
    commit_messages = _bullets(
        _first_line(commit.get("message"), NO_MESSAGE)
        for commit in commits[:MAX_COMMIT_MESSAGES]
    )
    added = _bullets(_collect_files(commits, "added"))
    modified = _bullets(_collect_files(commits, "modified"))
    removed = _bullets(_collect_files(commits, "removed"))

    count_line = f"{commit_count}"
    if commit_count == 0:
        count_line += " (No commits found)"

    sections = [
        f"🚀 *New Push Alert* 🚀\n{DIVIDER}",
        f"👤 *Pusher*: @{_esc_md(pusher)}",
        f"📦 *Repository*: {_esc_md(repo)}",
        f"🌿 *Branch*: {_esc_md(branch)}",
        f"🔢 *Commits*: {count_line}",
        f"📜 *Commit Messages*:\n{commit_messages}",
        f"📝 *Top Commit*: {_esc_md(top_commit)}",
        f"➕ *Added*:\n{added}",
        f"✏️ *Modified*:\n{modified}",
        f"🗑️ *Removed*:\n{removed}",
        f"🕒 *Pushed At*: {timestamp}\n{DIVIDER}",
    ]
    return "\n\n".join(sections)


def _timestamp(clock: Clock) -> str:
    try:
        return format_utc(clock())
    except Exception:
        logger.exception("clock_failed")
        return format_utc(utc_now())


def format_failure(clock: Clock = utc_now) -> str:
    """Fallback text delivered when a push payload could not be summarized."""
    return f"⚠️ *Push processing failed* ⚠️\n🕒 *At*: {_timestamp(clock)}"


def format_push_event(payload: Mapping[str, Any] | None, *, clock: Clock = utc_now) -> str:
    """
    Build the Telegram push notification for a GitHub ``push`` payload.

    Missing or malformed fields are replaced by placeholders. Only the first
    two commit messages are listed, while file changes are aggregated across
    all commits (deduplicated, at most three per section). Never raises: an
    unexpected failure yields :func:`format_failure` instead.
    """
    try:
        return _render_push(_ensure_mapping(payload), _timestamp(clock))
    except Exception:
        logger.exception("push_format_failed")
        return format_failure(clock)
