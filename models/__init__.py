from .partial_identity import PartialIdentity
from .identity_hint import IdentityHint
from .candidate_profile import CandidateProfile
from .lookup_result import LookupRequest, LookupResult, SourcesChecked

__all__ = [
    "PartialIdentity",
    "IdentityHint",
    "CandidateProfile",
    "LookupRequest",
    "LookupResult",
    "SourcesChecked",
]
