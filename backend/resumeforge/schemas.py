from pydantic import BaseModel, Field, field_validator
from typing import List

from .sections import DYNAMIC_SECTIONS


# ----- Resume document -----
# Every field is a plain string so the preview can always show what was typed;
# field rules live in validation.py.

class Header(BaseModel):
    name: str = ""
    role: str = ""
    location: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str = ""   # empty means "no link"
    github: str = ""
    portfolio: str = ""

class Education(BaseModel):
    degree: str = ""
    university: str = ""
    specialization: str = ""
    institute: str = ""     # school/faculty inside the university
    year: str = ""
    gpa: str = ""

class Skills(BaseModel):
    frontend: str = ""
    architecture: str = ""
    cloud: str = ""

class Experience(BaseModel):
    title: str = ""
    company: str = ""
    duration: str = ""
    responsibilities: str = ""  # one bullet per line

class Project(BaseModel):
    name: str = ""
    description: str = ""
    tech_stack: str = ""

class Certification(BaseModel):
    name: str = ""
    issuer: str = ""

class ResumeDocument(BaseModel):
    header: Header = Field(default_factory=Header)
    education: List[Education] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    experience: List[Experience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    achievements: str = ""


# List sections whose entries can be added and removed one at a time.
ENTRY_MODELS = {
    "education": Education,
    "experience": Experience,
    "projects": Project,
    "certifications": Certification,
}


def default_document() -> ResumeDocument:
    """Sample content a fresh editor session starts with."""
    return ResumeDocument(
        header=Header(
            name="John Doe",
            role="Frontend Engineer – React & Next.js",
            location="San Francisco, CA",
            phone="123-456-7890",
            email="john.doe@email.com",
            linkedin="https://linkedin.com/in/johndoe",
            github="https://github.com/johndoe",
            portfolio="https://johndoe.dev",
        ),
        education=[
            Education(
                degree="Bachelor of Technology",
                university="State University",
                specialization="Computer Science",
                institute="School of Engineering",
                year="2018-2022",
                gpa="3.8/4.0",
            )
        ],
        skills=Skills(
            frontend="React, Next.js, TypeScript, JavaScript (ES6+), HTML5, CSS3, Tailwind CSS",
            architecture="State Management (Redux, Zustand), Component-driven design",
            cloud="Vercel, Firebase, AWS (S3, CloudFront)",
        ),
        experience=[
            Experience(
                title="Senior Frontend Engineer",
                company="Tech Corp",
                duration="Jan 2022 - Present",
                responsibilities="- Led development of a new design system.\n- Improved page load speed by 30%.",
            )
        ],
        projects=[
            Project(
                name="Personal Portfolio",
                description="A showcase of my projects and skills.",
                tech_stack="Next.js, Tailwind CSS, Vercel",
            )
        ],
        certifications=[Certification(name="Certified React Developer", issuer="React Association")],
        achievements="- Won company-wide hackathon.\n- Speaker at local tech meetup.",
    )


# ----- Gateway results -----

class SectionOrderSuggestion(BaseModel):
    orderedSections: List[str] = Field(min_length=1)
    reasoning: str = ""

    @field_validator("orderedSections")
    @classmethod
    def _known_sections(cls, names: List[str]) -> List[str]:
        names = [n.strip().lower() for n in names]
        unknown = [n for n in names if n not in DYNAMIC_SECTIONS]
        if unknown:
            raise ValueError(f"unknown sections: {', '.join(unknown)}")
        return names

class AtsSuggestions(BaseModel):
    suggestions: str = Field(min_length=1)

class GatewayError(BaseModel):
    error: str


# ----- Validation -----

class FieldIssue(BaseModel):
    path: str       # dotted form path, e.g. "education.0.degree"
    message: str


# ----- API bodies -----

class SectionOrderRequest(BaseModel):
    education: str = ""
    skills: str = ""
    experience: str = ""
    projects: str = ""

class AtsSuggestionsRequest(BaseModel):
    resume: str
    jobDescription: str

class SessionAtsRequest(BaseModel):
    jobDescription: str

class SessionOut(BaseModel):
    id: str
    document: ResumeDocument
    sectionOrder: List[str]
    issues: List[FieldIssue]
    optimizing: bool = False

class SectionOrderOutcome(BaseModel):
    sectionOrder: List[str]
    reasoning: str = ""
