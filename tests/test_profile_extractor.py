from interview_coach.core.profile_extractor import (
    extract_education,
    extract_experience,
    extract_job_title,
    extract_profile,
    extract_skills,
)
from interview_coach.models.profile import (
    DEFAULT_EDUCATION,
    DEFAULT_EXPERIENCE,
    DEFAULT_JOB_TITLE,
    DEFAULT_SKILLS,
)

RESUME = """Jane Doe
Senior data scientist at Acme
Work experience: 6 years building models in Python and SQL
Led a Machine Learning platform role
Previous job: analyst
Education: MSc Statistics, State University
Bachelor of Science in Mathematics
PhD coursework (incomplete)
"""


def test_job_title_first_pattern_wins_and_keeps_resume_casing():
    text = "Business Analyst turned Software engineer"
    assert extract_job_title(text) == "Software engineer"


def test_job_title_fallback():
    assert extract_job_title("Chef and gardener") == DEFAULT_JOB_TITLE


def test_skills_in_catalog_order():
    assert extract_skills("sql, python, react and SEO") == ["Python", "React", "SQL", "SEO"]


def test_skills_use_word_boundaries():
    # "Java" must not match inside "JavaScript"
    assert extract_skills("Expert in JavaScript") == ["JavaScript"]
    assert extract_skills("Wrote C++ and Node.js services") == ["Node.js", "C++"]


def test_skills_fallback_is_a_fresh_list():
    skills = extract_skills("nothing relevant")
    assert skills == DEFAULT_SKILLS
    skills.append("Extra")
    assert extract_skills("nothing relevant") == DEFAULT_SKILLS


def test_experience_takes_first_three_matching_lines():
    assert extract_experience(RESUME) == "\n".join([
        "Work experience: 6 years building models in Python and SQL",
        "Led a Machine Learning platform role",
        "Previous job: analyst",
    ])


def test_education_takes_first_two_matching_lines():
    assert extract_education(RESUME) == "\n".join([
        "Education: MSc Statistics, State University",
        "Bachelor of Science in Mathematics",
    ])


def test_line_fallbacks():
    assert extract_experience("hello") == DEFAULT_EXPERIENCE
    assert extract_education("hello") == DEFAULT_EDUCATION


def test_extract_profile():
    profile = extract_profile(RESUME)
    assert profile.job_title == "data scientist"
    assert profile.skills == ["Python", "SQL", "Machine Learning"]
    assert profile.experience.startswith("Work experience")


def test_extract_profile_from_empty_text_uses_all_fallbacks():
    profile = extract_profile("")
    assert profile.job_title == DEFAULT_JOB_TITLE
    assert profile.skills == DEFAULT_SKILLS
    assert profile.experience == DEFAULT_EXPERIENCE
    assert profile.education == DEFAULT_EDUCATION
