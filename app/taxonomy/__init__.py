from .roles import DEFAULT_ROLE, ROLE_PROFILES, TECH_STACKS, RoleProfile, get_role_profile
from .vocabulary import NAME_NOT_FOUND, SECTION_HEADER_KEYWORDS, SKILL_VOCABULARY

__all__ = [
    "RoleProfile",
    "ROLE_PROFILES",
    "DEFAULT_ROLE",
    "TECH_STACKS",
    "get_role_profile",
    "NAME_NOT_FOUND",
    "SECTION_HEADER_KEYWORDS",
    "SKILL_VOCABULARY",
]
