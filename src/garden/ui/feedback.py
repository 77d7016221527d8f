from typing import Dict, Optional

from ..engine.validator import Outcome, Violation

MESSAGES: Dict[Violation, str] = {
    Violation.ROW_CONFLICT: "Row Conflict!",
    Violation.COLUMN_CONFLICT: "Column Conflict!",
    Violation.REGION_CONFLICT: "Region Conflict!",
    Violation.ADJACENT: "Rabbits are touching!",
}

WIN_MESSAGE = "All carrots found!"

def message_for(outcome: Outcome, target_count: int) -> str:
    if outcome.ok:
        return WIN_MESSAGE
    if outcome.violation is Violation.WRONG_COUNT:
        return f"Find exactly {target_count} carrots!"
    return MESSAGES[outcome.violation]

def penalty_banner(outcome: Outcome, target_count: int, seconds: int) -> str:
    """Text shown on the check button after a failed check, e.g. '+10s: Row Conflict!'."""
    return f"+{seconds}s: {message_for(outcome, target_count)}"

def format_clock(seconds: int) -> str:
    """
    MM:SS, zero-padded. Minutes are not capped, so an hour reads 60:00.
    """
    if seconds < 0:
        raise ValueError("seconds must be >= 0")
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"

def share_text(elapsed: int, link: Optional[str] = None) -> str:
    """Score line players paste elsewhere after a win."""
    lines = ["🐰 Poogy's Garden", f"Time: {format_clock(elapsed)}"]
    if link:
        lines.append(f"Try it: {link}")
    return "\n".join(lines)
