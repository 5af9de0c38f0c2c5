# Namespace for pipeline steps
from .discover_identity import DiscoverIdentity  # noqa: F401
from .assemble_hint import AssembleHint  # noqa: F401
from .search_profiles import SearchMatchedProfiles, BackfillPrimary  # noqa: F401
from .ensure_candidates import EnsureCandidates  # noqa: F401
from .company_employees import SearchCompanyEmployees  # noqa: F401
from .filter_industry import FilterIndustry  # noqa: F401
