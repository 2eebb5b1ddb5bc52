#!/usr/bin/env python3
"""Pydantic models for generated demo profiles.

The Literal vocabularies mirror the onboarding form, so every generated profile
only uses values a real student could have picked.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


Role = Literal[
    "Looking for a co-founder",
    "Ready to join as co-founder",
    "Just exploring",
    "Looking for team members",
    "Mentor/Advisor",
]

Skill = Literal[
    "Software Development",
    "UI/UX Design",
    "Marketing",
    "Sales",
    "Finance",
    "Operations",
    "Data Science",
    "AI/ML",
    "Product Management",
    "Business Development",
    "Content Creation",
    "Legal",
]

Interest = Literal[
    "FinTech",
    "HealthTech",
    "EdTech",
    "AgriTech",
    "E-commerce",
    "Clean Energy",
    "Logistics",
    "Real Estate",
    "Entertainment",
    "Social Impact",
    "Food & Beverage",
    "Fashion",
]


class SyntheticProfile(BaseModel):
    """Schema for a single generated profile.

    Notes:
    - Names and emails are fabricated; `email` uses the reserved example.com domain.
    - `skills` and `interests` are lists drawn from the onboarding options.
    """

    id: str = Field(..., description="Unique identifier for this profile")
    full_name: str = Field(..., min_length=1, description="Fabricated, non-PII name")
    email: str
    university: str
    bio: Optional[str] = Field(default=None, description="Short self-summary")
    skills: List[Skill] = Field(default_factory=list)
    interests: List[Interest] = Field(default_factory=list)
    role: Optional[Role] = None
    linkedin_url: Optional[str] = None
    avatar_url: Optional[str] = None
    is_onboarded: bool = True
