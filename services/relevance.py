from __future__ import annotations

import logging
from typing import List, Optional

from models.candidate_profile import CandidateProfile

logger = logging.getLogger(__name__)


def relevance_score(candidate_name: Optional[str], target_name: Optional[str]) -> int:
    """Score 0-100 for how well a profile name matches the searched name.

    Missing or whitespace-only names on either side score 0.

    Token pairs contribute exact (+30), prefix (+20) or substring (+10),
    first tier wins per pair and pairs are summed. Whole-name containment
    adds 25 and equal token counts add 5. The total is clamped to 100.
    """
    cand = (candidate_name or "").lower().strip()
    target = (target_name or "").lower().strip()
    # A blank name carries no evidence either way
    if not cand or not target:
        return 0
    if cand == target:
        return 100

    cand_parts = cand.split()
    target_parts = target.split()

    score = 0
    for tp in target_parts:
        if len(tp) < 2:
            continue
        for cp in cand_parts:
            if cp == tp:
                score += 30
            elif cp.startswith(tp) or tp.startswith(cp):
                score += 20
            elif tp in cp or cp in tp:
                score += 10

    if target in cand or cand in target:
        score += 25

    if len(cand_parts) == len(target_parts):
        score += 5

    return min(score, 100)


def rank_profiles(profiles: List[CandidateProfile], target_name: Optional[str]) -> List[CandidateProfile]:
    """Return profiles best match first. Ties keep their incoming order."""
    scored = [(relevance_score(p.name, target_name), p) for p in profiles]
    for score, p in scored:
        logger.debug(f"score={score} name={p.name!r} url={p.linkedin_url}")
    # list.sort is stable, so equal scores keep search order
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [p for _score, p in scored]
