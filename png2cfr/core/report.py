"""Report builder — text and JSON output for png2cfr results."""

import json
from typing import Any

from png2cfr.core.types import Candidate, Report

HIGHLIGHT_ON = '\033[33m'  # yellow
HIGHLIGHT_OFF = '\033[0m'


def highlight_tail(commands: str, limit: int, color: bool = True) -> str:
    """Colour everything past the first `limit` tokens."""
    if not color or len(commands) <= limit:
        return commands
    return f'{commands[:limit]}{HIGHLIGHT_ON}{commands[limit:]}{HIGHLIGHT_OFF}'


def format_candidate(candidate: Candidate) -> str:
    v = candidate.variant
    return f'#{v.index} {v.name:<14} {len(candidate.raw)}→{candidate.length}  {candidate.compressed}'


def format_text(
    report: Report,
    show_all: bool = False,
    expanded: bool = False,
    limit: int = 1000,
    color: bool = False,
) -> str:
    """Format report as text. Without show_all this is the bare command string."""
    if show_all:
        lines = [f'png2cfr: {report.image_path} ({report.image_width}×{report.image_height})', '']
        for candidate in report.candidates:
            mark = '*' if candidate is report.best else ' '
            lines.append(f'{mark} {format_candidate(candidate)}')
        return '\n'.join(lines)

    if report.best is None:
        return ''
    commands = report.best.raw if expanded else report.best.compressed
    return highlight_tail(commands, limit, color)


def _candidate_obj(candidate: Candidate) -> dict[str, Any]:
    return {
        'index': candidate.variant.index,
        'name': candidate.variant.name,
        'raw_length': len(candidate.raw),
        'length': candidate.length,
        'commands': candidate.compressed,
    }


def format_json(report: Report, show_all: bool = False) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'image': report.image_path,
        'dimensions': {'width': report.image_width, 'height': report.image_height},
    }
    if report.best is not None:
        obj['best'] = _candidate_obj(report.best)
    if show_all:
        obj['variants'] = [_candidate_obj(c) for c in report.candidates]
    return json.dumps(obj, indent=2)
