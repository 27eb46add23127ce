from resumeforge.schemas import Certification, Education, Experience, Project, ResumeDocument, default_document
from resumeforge.validation import validate_document


def _issues(doc):
    return {i.path: i.message for i in validate_document(doc)}


def test_default_document_is_valid():
    assert validate_document(default_document()) == []


def test_blank_header_reports_required_fields_and_bad_email():
    issues = _issues(ResumeDocument())
    assert issues["header.name"] == "Full name is required"
    assert issues["header.role"] == "Role/Title is required"
    assert issues["header.email"] == "Invalid email address"
    # optional links may stay empty
    assert "header.linkedin" not in issues
    assert "header.location" not in issues


def test_malformed_links_are_flagged():
    doc = default_document()
    doc.header.linkedin = "linkedin.com/in/johndoe"
    doc.header.github = "not a url"
    doc.header.portfolio = "https://johndoe.dev"
    issues = _issues(doc)
    assert issues["header.linkedin"] == "Invalid url"
    assert issues["header.github"] == "Invalid url"
    assert "header.portfolio" not in issues


def test_email_must_look_like_an_address():
    doc = default_document()
    for bad in ["john", "john@", "john@email", "jo hn@email.com"]:
        doc.header.email = bad
        assert _issues(doc)["header.email"] == "Invalid email address"
    doc.header.email = "john.doe+cv@email.co.uk"
    assert "header.email" not in _issues(doc)


def test_entry_issues_carry_their_index():
    doc = default_document()
    doc.education.append(Education())
    doc.experience.append(Experience(title="Engineer"))
    doc.projects.append(Project(description="no name"))
    doc.certifications.append(Certification(issuer="Somebody"))
    issues = _issues(doc)
    assert issues == {
        "education.1.degree": "Degree is required",
        "education.1.university": "University is required",
        "experience.1.company": "Company is required",
        "projects.1.name": "Project name is required",
        "certifications.1.name": "Certification name is required",
    }


def test_unconstrained_fields_accept_anything():
    doc = default_document()
    doc.skills.frontend = ""
    doc.achievements = ""
    doc.education[0].gpa = ""
    doc.experience[0].duration = ""
    assert validate_document(doc) == []
