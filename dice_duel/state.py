# dice_duel/state.py
import uuid
from typing import Dict, Optional

from .engine.models import MatchState
from .engine.resolver import new_match

duel_matches: Dict[str, MatchState] = {}
sid_to_match: Dict[str, str] = {}


def create_match(seed: Optional[int] = None, sid: Optional[str] = None) -> MatchState:
    """Start a hot-seat match; a socket client owns at most one."""
    if sid is not None:
        drop_match_for(sid)
    match_id = f"duel-{uuid.uuid4().hex[:10]}"
    match = new_match(match_id=match_id, seed=seed)
    duel_matches[match_id] = match
    if sid is not None:
        sid_to_match[sid] = match_id
    return match


def get_match(match_id: str) -> Optional[MatchState]:
    return duel_matches.get(match_id)


def get_match_by_sid(sid: str) -> Optional[MatchState]:
    match_id = sid_to_match.get(sid)
    if not match_id:
        return None
    return duel_matches.get(match_id)


def drop_match(match_id: str) -> bool:
    """Forget a match and any socket client bound to it."""
    match = duel_matches.pop(match_id, None)
    if not match:
        return False
    for sid in [sid for sid, mid in sid_to_match.items() if mid == match_id]:
        sid_to_match.pop(sid, None)
    return True


def drop_match_for(sid: str) -> None:
    match_id = sid_to_match.pop(sid, None)
    if match_id:
        drop_match(match_id)


def clear() -> None:
    duel_matches.clear()
    sid_to_match.clear()
