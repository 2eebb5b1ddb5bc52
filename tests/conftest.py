import pytest

from cofounder_match.data_models import Profile


@pytest.fixture
def viewer() -> Profile:
    return Profile(
        id="viewer",
        full_name="Adaeze Okonkwo",
        university="University Of Lagos",
        skills=["Python", "React"],
        interests=["FinTech"],
        role="Looking for a co-founder",
        is_onboarded=True,
    )


@pytest.fixture
def full_candidate() -> Profile:
    """Candidate that fills every completeness section."""
    return Profile(
        id="cand-full",
        full_name="Kwame Asante",
        university="university of lagos",
        bio="MBA candidate with three years of consulting experience.",
        skills=["Marketing"],
        interests=["FinTech"],
        role="Ready to join as co-founder",
        linkedin_url="https://www.linkedin.com/in/kwame-asante",
        avatar_url="https://avatars.example.com/kwame.png",
        is_onboarded=True,
    )
