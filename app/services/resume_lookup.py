"""
Resume lookup: map a free-text question to an answer drawn from the resume document.

Responsibility: Keyword dispatch only. The question is lower-cased and checked
against RULES top to bottom; the first rule whose predicate matches produces the
answer. No scoring, no ranking. Unmatched questions get FALLBACK_ANSWER.
Pure: reads the immutable ResumeDocument, never raises for unmatched input.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from app.schemas.resume import ResumeDocument

logger = logging.getLogger(__name__)

PROFILE_INTRO = (
    "Roshan Poudel is a Senior Full Stack Software Engineer with over 5 years of experience "
    "specializing in Node.js, .NET, JavaScript, and React."
)
FALLBACK_ANSWER = (
    "Sorry, I couldn't find an exact match for your question. "
    "Try asking about email, experience, phone, skills, projects, or certifications."
)


@dataclass(frozen=True)
class LookupRule:
    name: str
    predicate: Callable[[str], bool]
    producer: Callable[[ResumeDocument], str]


def contains_any(*keywords: str) -> Callable[[str], bool]:
    """Predicate: normalized text contains at least one keyword."""
    return lambda text: any(k in text for k in keywords)


def contains_all(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    """Predicate: every sub-predicate matches."""
    return lambda text: all(p(text) for p in predicates)


def _profile(resume: ResumeDocument) -> str:
    return f"{PROFILE_INTRO}\n\n{resume.objective}"


def _education(resume: ResumeDocument) -> str:
    edu = resume.education
    return f"Roshan completed his {edu.degree} from {edu.institution}"


def _certifications(resume: ResumeDocument) -> str:
    return "Roshan has the following certifications:\n- " + "\n- ".join(resume.certifications)


def _skills(resume: ResumeDocument) -> str:
    skills = resume.technical_skills
    groups = [
        ("Backend", skills.backend),
        ("Frontend", skills.frontend),
        ("Databases", skills.databases),
        ("Cloud & DevOps", skills.cloud_and_devops),
        ("Real-Time & Microservices", skills.real_time),
        ("Security", skills.security),
        ("CI/CD & Monitoring", skills.ci_cd_monitoring),
    ]
    return "\n".join(f"{label}: {', '.join(items)}" for label, items in groups).strip()


def _experience(resume: ResumeDocument) -> str:
    return "\n".join(f"{job.role} at {job.company} ({job.duration})" for job in resume.work_experience)


def _projects(resume: ResumeDocument) -> str:
    return "\n".join(f"- {p.name}: {p.description}" for p in resume.projects)


# Order matters: first match wins.
RULES: tuple[LookupRule, ...] = (
    LookupRule(
        "profile",
        contains_all(contains_any("roshan"), contains_any("who", "about", "profile", "what", "is")),
        _profile,
    ),
    LookupRule("email", contains_any("email"), lambda r: f"Roshan's email is {r.contact.email}"),
    LookupRule("phone", contains_any("phone"), lambda r: f"Roshan's phone number is {r.contact.phone}"),
    LookupRule("linkedin", contains_any("linkedin"), lambda r: f"Roshan's LinkedIn: {r.contact.linkedin}"),
    LookupRule("github", contains_any("github"), lambda r: f"Roshan's GitHub: {r.contact.github}"),
    LookupRule("portfolio", contains_any("portfolio"), lambda r: f"Roshan's portfolio: {r.contact.portfolio}"),
    LookupRule("address", contains_any("address"), lambda r: f"Roshan lives in {r.contact.address}"),
    LookupRule("birth_date", contains_any("birth", "dob"), lambda r: f"Roshan was born on {r.contact.date_of_birth}"),
    LookupRule("education", contains_any("education", "study"), _education),
    LookupRule("certifications", contains_any("certification", "certified"), _certifications),
    LookupRule("objective", contains_any("objective", "goal"), lambda r: r.objective),
    LookupRule("skills", contains_any("skills", "technologies", "tech", "stack"), _skills),
    LookupRule("experience", contains_any("experience", "worked", "job", "career", "history"), _experience),
    LookupRule("projects", contains_any("project"), _projects),
)


def find_rule(question: str) -> LookupRule | None:
    """Return the first rule matching the question, or None."""
    text = (question or "").lower()
    for rule in RULES:
        if rule.predicate(text):
            return rule
    return None


def match_rule(question: str) -> str:
    """Name of the rule that would answer the question ("fallback" if none)."""
    rule = find_rule(question)
    return rule.name if rule else "fallback"


def answer_question(question: str, resume: ResumeDocument) -> str:
    """Answer a question about the resume. Always returns a string."""
    rule = find_rule(question)
    if rule is None:
        logger.info("[resume_lookup:answer_question] question=%r -> fallback", question)
        return FALLBACK_ANSWER
    answer = rule.producer(resume)
    logger.info("[resume_lookup:answer_question] question=%r -> rule=%s answer_len=%d", question, rule.name, len(answer))
    return answer
