"""
Unit tests for the resume lookup dispatcher: per-rule answers, rule priority, fallback.
"""

import pytest

from app.services.resume_lookup import (
    FALLBACK_ANSWER,
    PROFILE_INTRO,
    RULES,
    answer_question,
    match_rule,
)


class TestRuleTable:
    """Tests for the ordered RULES table."""

    def test_rule_order(self) -> None:
        assert [r.name for r in RULES] == [
            "profile",
            "email",
            "phone",
            "linkedin",
            "github",
            "portfolio",
            "address",
            "birth_date",
            "education",
            "certifications",
            "objective",
            "skills",
            "experience",
            "projects",
        ]

    def test_profile_beats_email(self) -> None:
        assert match_rule("who is roshan's email") == "profile"

    def test_profile_needs_name(self) -> None:
        assert match_rule("what is the email?") == "email"

    def test_email_beats_skills(self) -> None:
        assert match_rule("email about tech stack") == "email"

    def test_skills_beats_experience(self) -> None:
        assert match_rule("tech experience") == "skills"

    def test_unmatched_is_fallback(self) -> None:
        assert match_rule("favourite colour?") == "fallback"


class TestAnswerQuestion:
    """Tests for answer_question()."""

    @pytest.mark.parametrize(
        "question",
        ["email", "What's his EMAIL address?", "send me the e-mail... no, the Email please"],
    )
    def test_email_contains_address(self, resume, question: str) -> None:
        assert resume.contact.email in answer_question(question, resume)

    def test_email_answer(self, resume) -> None:
        assert answer_question("email", resume) == f"Roshan's email is {resume.contact.email}"

    def test_contact_fields(self, resume) -> None:
        c = resume.contact
        assert answer_question("phone number?", resume) == f"Roshan's phone number is {c.phone}"
        assert answer_question("LinkedIn?", resume) == f"Roshan's LinkedIn: {c.linkedin}"
        assert answer_question("github link", resume) == f"Roshan's GitHub: {c.github}"
        assert answer_question("portfolio site", resume) == f"Roshan's portfolio: {c.portfolio}"
        assert answer_question("home address", resume) == f"Roshan lives in {c.address}"
        assert answer_question("date of birth", resume) == f"Roshan was born on {c.date_of_birth}"
        assert answer_question("DOB?", resume) == f"Roshan was born on {c.date_of_birth}"

    def test_profile(self, resume) -> None:
        answer = answer_question("Who is Roshan?", resume)
        assert answer == f"{PROFILE_INTRO}\n\n{resume.objective}"

    def test_education(self, resume) -> None:
        answer = answer_question("Where did he study?", resume)
        assert answer == f"Roshan completed his {resume.education.degree} from {resume.education.institution}"

    def test_certifications_listed_in_order(self, resume) -> None:
        answer = answer_question("certifications", resume)
        lines = answer.split("\n")
        assert lines[0] == "Roshan has the following certifications:"
        assert lines[1:] == [f"- {c}" for c in resume.certifications]

    def test_objective(self, resume) -> None:
        assert answer_question("career goal", resume) == resume.objective

    def test_skills_block(self, resume) -> None:
        answer = answer_question("list the skills", resume)
        lines = answer.split("\n")
        assert [line.split(":")[0] for line in lines] == [
            "Backend",
            "Frontend",
            "Databases",
            "Cloud & DevOps",
            "Real-Time & Microservices",
            "Security",
            "CI/CD & Monitoring",
        ]
        assert lines[0] == "Backend: " + ", ".join(resume.technical_skills.backend)
        assert answer == answer.strip()

    def test_experience_in_document_order(self, resume) -> None:
        answer = answer_question("work experience", resume)
        assert answer.split("\n") == [f"{j.role} at {j.company} ({j.duration})" for j in resume.work_experience]

    def test_projects(self, resume) -> None:
        answer = answer_question("projects", resume)
        assert answer.split("\n") == [f"- {p.name}: {p.description}" for p in resume.projects]

    @pytest.mark.parametrize("question", ["hello", "favourite colour?", "xyz"])
    def test_fallback(self, resume, question: str) -> None:
        assert answer_question(question, resume) == FALLBACK_ANSWER

    def test_empty_question_falls_back(self, resume) -> None:
        assert answer_question("", resume) == FALLBACK_ANSWER

    def test_idempotent(self, resume) -> None:
        q = "What are Roshan's skills?"
        assert answer_question(q, resume) == answer_question(q, resume)
