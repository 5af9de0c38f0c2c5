from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from models.candidate_profile import CandidateProfile
from models.identity_hint import IdentityHint
from models.partial_identity import PartialIdentity
from utils.logging_setup import init_logging


@dataclass
class LookupContext:
    email: str
    name: Optional[str] = None
    country: Optional[str] = None
    partials: Dict[str, Optional[PartialIdentity]] = field(default_factory=dict)
    hint: Optional[IdentityHint] = None
    matched: List[CandidateProfile] = field(default_factory=list)
    company_name: Optional[str] = None
    employees: List[CandidateProfile] = field(default_factory=list)

    def partial(self, source_name: str) -> Optional[PartialIdentity]:
        return self.partials.get(source_name)


class Step(Protocol):
    def run(self, ctx: LookupContext) -> LookupContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: LookupContext) -> LookupContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
