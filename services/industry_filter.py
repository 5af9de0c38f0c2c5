from __future__ import annotations

from typing import List, Tuple

from models.candidate_profile import CandidateProfile


# Plain substring vocabulary. Short tokens like "ai " or "api" over-match;
# that trade-off is accepted.
IT_KEYWORDS: Tuple[str, ...] = (
    # Roles
    "software", "developer", "engineer", "programmer", "architect",
    "devops", "sre", "full stack", "fullstack", "frontend", "front-end",
    "backend", "back-end", "data scientist", "data engineer", "data analyst",
    "machine learning", "ml engineer", "ai ", "artificial intelligence",
    "cloud", "cybersecurity", "cyber security", "information security",
    "infosec", "security analyst", "security engineer", "penetration",
    "soc analyst", "network engineer", "network admin", "sysadmin",
    "system admin", "systems admin", "database admin", "dba",
    "qa engineer", "quality assurance", "test engineer", "automation engineer",
    "scrum master", "product manager", "product owner", "agile",
    "ux designer", "ui designer", "ux/ui", "ui/ux",
    "technical", "tech lead", "cto", "cio", "ciso", "vp of engineering",
    "it manager", "it director", "it specialist", "it consultant",
    "it support", "help desk", "desktop support", "solutions architect",
    "web developer", "mobile developer", "ios developer", "android developer",
    # Technologies
    "python", "java", "javascript", "typescript", "react", "angular", "vue",
    "node.js", "nodejs", ".net", "c#", "c++", "ruby", "golang", "rust",
    "aws", "azure", "gcp", "google cloud", "kubernetes", "docker",
    "terraform", "jenkins", "ci/cd", "microservices", "api",
    "sql", "mongodb", "postgresql", "oracle", "salesforce", "sap",
    "blockchain", "fintech", "saas", "paas", "iaas",
    # Industries and companies
    "technology", "tech", "software company", "it services",
    "information technology", "consulting", "digital", "analytics",
    "startup", "computer", "semiconductor", "telecom",
    "microsoft", "google", "amazon", "meta", "apple",
    "ibm", "cisco", "intel", "nvidia", "adobe",
    "infosys", "tcs", "wipro", "cognizant", "accenture", "deloitte",
    "capgemini", "hcl", "tech mahindra",
)


def is_it_related(profile: CandidateProfile) -> bool:
    text = " ".join([
        profile.title or "",
        profile.company or "",
        profile.snippet or "",
    ]).lower()
    return any(keyword in text for keyword in IT_KEYWORDS)


def apply_industry_filter(
    matched: List[CandidateProfile],
    employees: List[CandidateProfile],
) -> Tuple[List[CandidateProfile], List[CandidateProfile]]:
    """Keep matched[0] unconditionally; everything else must look IT-related."""
    if matched:
        matched = [matched[0]] + [p for p in matched[1:] if is_it_related(p)]
    employees = [p for p in employees if is_it_related(p)]
    return matched, employees
