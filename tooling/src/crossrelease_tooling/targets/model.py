"""Target list model: ordered (triple, enabled) entries, build policies, and the built-in defaults."""

from __future__ import annotations

from typing import Any, NamedTuple

from crossrelease_tooling.errors import TargetConfigError

FAIL_FAST = "fail-fast"
KEEP_GOING = "keep-going"
POLICIES = (FAIL_FAST, KEEP_GOING)


class TargetEntry(NamedTuple):
    """One Target List entry. triple is opaque and passed verbatim to the toolchain."""

    triple: str
    enabled: bool = True


def check_triple(triple: Any, where: str) -> str:
    """Return triple unchanged if it is a non-empty string with no surrounding whitespace.

    Raises TargetConfigError naming where it came from (config index or CLI flag).
    """
    if not isinstance(triple, str) or not triple.strip():
        msg = f"{where}: target triple must be a non-empty string"
        raise TargetConfigError(msg)
    if triple != triple.strip():
        msg = f"{where}: target triple {triple!r} has leading or trailing whitespace"
        raise TargetConfigError(msg)
    return triple


# Disabled entries stay listed so they can be re-enabled without retyping them.
DEFAULT_TARGETS: tuple[TargetEntry, ...] = (
    TargetEntry("x86_64-unknown-linux-gnu"),
    TargetEntry("x86_64-pc-windows-gnu"),
    TargetEntry("aarch64-unknown-linux-gnu", enabled=False),
    TargetEntry("aarch64-apple-darwin", enabled=False),
)


def enabled_targets(entries: list[TargetEntry] | tuple[TargetEntry, ...]) -> list[str]:
    """Triples of enabled entries, in list order."""
    return [e.triple for e in entries if e.enabled]


def select_targets(
    entries: list[TargetEntry] | tuple[TargetEntry, ...],
    only: list[str] | None = None,
    skip: list[str] | None = None,
) -> list[TargetEntry]:
    """Apply --target / --skip filters. Returns a new list; entries is not modified.

    only: keep just these triples (list order), enabling them. Names not in the
    list are appended as enabled entries in the order given.
    skip: disable these triples.
    Raises TargetConfigError for an empty or whitespace-padded name.
    """
    for t in only or []:
        check_triple(t, "--target")
    for t in skip or []:
        check_triple(t, "--skip")
    out = list(entries)
    if only:
        wanted = list(dict.fromkeys(only))
        known = {e.triple for e in out}
        out = [TargetEntry(e.triple, True) for e in out if e.triple in wanted]
        out.extend(TargetEntry(t, True) for t in wanted if t not in known)
    if skip:
        skipped = set(skip)
        out = [TargetEntry(e.triple, False) if e.triple in skipped else e for e in out]
    return out
