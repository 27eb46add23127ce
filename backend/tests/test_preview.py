from resumeforge.preview import bullet_lines, render_preview
from resumeforge.schemas import ResumeDocument, default_document
from resumeforge.sections import default_section_order, reconcile


def _positions(html, *needles):
    return [html.index(n) for n in needles]


def test_bullet_lines_strips_dash_and_blank_lines():
    assert bullet_lines("- one\n\n  \ntwo\n- three") == ["one", "two", "three"]
    assert bullet_lines("") == []


def test_preview_follows_section_order():
    doc = default_document()
    html = render_preview(doc, reconcile(default_section_order(), ["projects", "experience"]))
    pos = _positions(
        html,
        "<h1>John Doe</h1>",
        "<h2>Projects</h2>",
        "<h2>Work Experience</h2>",
        "<h2>Education</h2>",
        "<h2>Skills</h2>",
        "<h2>Certifications</h2>",
        "<h2>Achievements</h2>",
    )
    assert pos == sorted(pos)


def test_preview_renders_entry_details():
    html = render_preview(default_document(), default_section_order())
    assert "State University, School of Engineering" in html
    assert "Specialization: Computer Science" in html
    assert "GPA: 3.8/4.0" in html
    assert "Senior Frontend Engineer at Tech Corp" in html
    assert "<li>Led development of a new design system.</li>" in html
    assert "Certified React Developer - React Association" in html
    assert "<li>Won company-wide hackathon.</li>" in html
    assert '<a href="mailto:john.doe@email.com">' in html
    assert ">LinkedIn</a>" in html


def test_preview_omits_empty_sections():
    doc = ResumeDocument()
    doc.header.name = "Jane"
    html = render_preview(doc, default_section_order())
    assert "<h1>Jane</h1>" in html
    assert "<h2>" not in html
    assert "LinkedIn" not in html


def test_preview_shows_partially_filled_skills():
    doc = ResumeDocument()
    doc.skills.cloud = "AWS"
    html = render_preview(doc, default_section_order())
    assert "<h2>Skills</h2>" in html
    assert "Cloud/DevOps:</strong> AWS" in html
    assert "Frontend:" not in html


def test_preview_escapes_user_input():
    doc = default_document()
    doc.header.name = "<script>alert(1)</script>"
    html = render_preview(doc, default_section_order())
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_preview_renders_invalid_documents_too():
    doc = default_document()
    doc.header.email = "not-an-email"
    doc.education[0].degree = ""
    html = render_preview(doc, default_section_order())
    assert "not-an-email" in html
