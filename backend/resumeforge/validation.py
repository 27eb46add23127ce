"""
Field-level validation for resume documents.

The rules mirror the form's error indicators. They never block preview
rendering or any other operation; callers just get a list of issues.
"""
import re
from typing import Annotated, List
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from .schemas import FieldIssue, ResumeDocument

EMAIL_RX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _required(message: str) -> AfterValidator:
    def check(value: str) -> str:
        if not value:
            raise PydanticCustomError("required", message)
        return value
    return AfterValidator(check)


def _email(value: str) -> str:
    if not EMAIL_RX.match(value):
        raise PydanticCustomError("email", "Invalid email address")
    return value


def _optional_url(value: str) -> str:
    if not value:
        return value
    parts = urlparse(value)
    if not parts.scheme or not parts.netloc or " " in value:
        raise PydanticCustomError("url", "Invalid url")
    return value


OptionalUrl = Annotated[str, AfterValidator(_optional_url)]


class HeaderRules(BaseModel):
    name: Annotated[str, _required("Full name is required")]
    role: Annotated[str, _required("Role/Title is required")]
    location: str
    phone: str
    email: Annotated[str, AfterValidator(_email)]
    linkedin: OptionalUrl
    github: OptionalUrl
    portfolio: OptionalUrl

class EducationRules(BaseModel):
    degree: Annotated[str, _required("Degree is required")]
    university: Annotated[str, _required("University is required")]

class ExperienceRules(BaseModel):
    title: Annotated[str, _required("Job title is required")]
    company: Annotated[str, _required("Company is required")]

class ProjectRules(BaseModel):
    name: Annotated[str, _required("Project name is required")]

class CertificationRules(BaseModel):
    name: Annotated[str, _required("Certification name is required")]

class DocumentRules(BaseModel):
    header: HeaderRules
    education: List[EducationRules]
    experience: List[ExperienceRules]
    projects: List[ProjectRules]
    certifications: List[CertificationRules]


def validate_document(document: ResumeDocument) -> List[FieldIssue]:
    """Return every rule violation in ``document``; empty when it is valid."""
    try:
        DocumentRules.model_validate(document.model_dump())
    except ValidationError as e:
        return [
            FieldIssue(path=".".join(str(p) for p in err["loc"]), message=err["msg"])
            for err in e.errors()
        ]
    return []
