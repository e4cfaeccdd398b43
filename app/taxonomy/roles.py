from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class RoleProfile:
    """Everything the analyzer knows about one professional role.

    indicators drive role detection, required_skills drive skill-gap feedback,
    core_skills and title_variations drive job matching.
    """

    name: str
    indicators: tuple[str, ...]
    required_skills: tuple[str, ...]
    core_skills: tuple[str, ...]
    title_variations: tuple[str, ...]


# Declaration order is the tie-break order; the first profile is also the
# fallback when nothing scores.
ROLE_PROFILES: tuple[RoleProfile, ...] = (
    RoleProfile(
        name="Software Engineer",
        indicators=("javascript", "python", "java", "react", "node", "git", "api", "database", "web development"),
        required_skills=("Git", "Testing", "Debugging", "Algorithms", "System Design"),
        core_skills=("JavaScript", "Python", "React", "Node.js", "Git", "HTML", "CSS"),
        title_variations=(
            "Software Developer",
            "Full Stack Developer",
            "Software Engineer",
            "Web Developer",
            "Application Developer",
        ),
    ),
    RoleProfile(
        name="Data Scientist",
        indicators=("python", "machine learning", "data analysis", "statistics", "pandas", "numpy", "sql"),
        required_skills=("Statistics", "Machine Learning", "Data Visualization", "SQL", "Python/R"),
        core_skills=("Python", "SQL", "Machine Learning", "Pandas", "Statistics", "Tableau"),
        title_variations=(
            "Data Scientist",
            "Data Analyst",
            "Machine Learning Engineer",
            "Research Scientist",
            "Data Engineer",
        ),
    ),
    RoleProfile(
        name="Product Manager",
        indicators=("product management", "roadmap", "stakeholder", "analytics", "user research", "agile"),
        required_skills=("Analytics", "User Research", "Roadmap Planning", "Stakeholder Management"),
        core_skills=("Analytics", "Agile", "Roadmap", "Stakeholder Management", "User Research"),
        title_variations=(
            "Product Manager",
            "Product Owner",
            "Program Manager",
            "Technical Product Manager",
            "Growth Product Manager",
        ),
    ),
    RoleProfile(
        name="UX Designer",
        indicators=("ux", "ui", "design", "figma", "sketch", "photoshop", "prototyping"),
        required_skills=("User Experience", "Prototyping", "Design Systems", "User Research"),
        core_skills=("Figma", "Sketch", "Prototyping", "User Research", "Design Systems"),
        title_variations=(
            "UX Designer",
            "UI Designer",
            "Product Designer",
            "User Experience Designer",
            "Digital Designer",
        ),
    ),
    RoleProfile(
        name="Marketing Specialist",
        indicators=("marketing", "seo", "content", "social media", "campaign", "analytics"),
        required_skills=("SEO", "Content Marketing", "Analytics", "Social Media", "Email Marketing"),
        core_skills=("SEO", "Google Analytics", "Content Marketing", "Social Media", "Email Marketing", "Copywriting"),
        title_variations=(
            "Marketing Specialist",
            "Digital Marketing Manager",
            "Content Marketing Manager",
            "SEO Specialist",
            "Growth Marketer",
        ),
    ),
    RoleProfile(
        name="DevOps Engineer",
        indicators=("aws", "docker", "kubernetes", "jenkins", "ci/cd", "terraform", "monitoring"),
        required_skills=("Linux", "CI/CD", "Infrastructure as Code", "Monitoring", "Networking"),
        core_skills=("AWS", "Docker", "Kubernetes", "Jenkins", "Terraform", "Linux"),
        title_variations=(
            "DevOps Engineer",
            "Site Reliability Engineer",
            "Cloud Engineer",
            "Infrastructure Engineer",
            "Platform Engineer",
        ),
    ),
    RoleProfile(
        name="Frontend Developer",
        indicators=("react", "vue", "angular", "html", "css", "javascript", "typescript"),
        required_skills=("Accessibility", "Responsive Design", "Testing", "Performance Optimization", "TypeScript"),
        core_skills=("JavaScript", "TypeScript", "React", "HTML", "CSS", "Vue", "Angular"),
        title_variations=(
            "Frontend Developer",
            "Frontend Engineer",
            "UI Engineer",
            "JavaScript Developer",
            "React Developer",
        ),
    ),
    RoleProfile(
        name="Backend Developer",
        indicators=("node.js", "python", "java", "api", "database", "microservices", "server"),
        required_skills=("API Design", "Databases", "Caching", "Testing", "System Design"),
        core_skills=("Python", "Java", "Node.js", "SQL", "PostgreSQL", "Docker", "Redis"),
        title_variations=(
            "Backend Developer",
            "Backend Engineer",
            "API Developer",
            "Server-Side Engineer",
            "Platform Developer",
        ),
    ),
    RoleProfile(
        name="Mobile Developer",
        indicators=("react native", "flutter", "ios", "android", "swift", "kotlin", "mobile"),
        required_skills=("iOS", "Android", "App Store Deployment", "Mobile UI Design", "Testing"),
        core_skills=("Swift", "Kotlin", "Flutter", "React Native", "Android", "iOS"),
        title_variations=(
            "Mobile Developer",
            "iOS Developer",
            "Android Developer",
            "Mobile Engineer",
            "Flutter Developer",
        ),
    ),
)

DEFAULT_ROLE = ROLE_PROFILES[0].name

TECH_STACKS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "React Developer": ("react", "javascript", "html", "css", "node"),
        "Python Developer": ("python", "django", "flask", "fastapi", "sql"),
        "Java Developer": ("java", "spring", "hibernate", "maven", "sql"),
        "Cloud Engineer": ("aws", "azure", "gcp", "docker", "kubernetes"),
        "Machine Learning Engineer": ("python", "tensorflow", "pytorch", "scikit-learn", "pandas"),
        "Mobile Developer": ("react native", "flutter", "swift", "kotlin", "mobile"),
    }
)


def get_role_profile(name: str, profiles: tuple[RoleProfile, ...] = ROLE_PROFILES) -> RoleProfile | None:
    for profile in profiles:
        if profile.name == name:
            return profile
    return None
