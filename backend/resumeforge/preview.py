from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .schemas import ResumeDocument

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

SECTION_TITLES = {
    "education": "Education",
    "skills": "Skills",
    "experience": "Work Experience",
    "projects": "Projects",
    "certifications": "Certifications",
    "achievements": "Achievements",
}


def bullet_lines(text: str) -> List[str]:
    """One list item per non-blank line, without a leading "- "."""
    out = []
    for line in (text or "").split("\n"):
        if not line.strip():
            continue
        out.append(line[2:] if line.startswith("- ") else line)
    return out


def has_content(document: ResumeDocument, section: str) -> bool:
    if section == "skills":
        s = document.skills
        return bool(s.frontend or s.architecture or s.cloud)
    if section == "achievements":
        return bool(document.achievements)
    return len(getattr(document, section)) > 0


env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["bullets"] = bullet_lines
preview_tpl = env.get_template("preview.html")


def render_preview(document: ResumeDocument, section_order: Sequence[str]) -> str:
    """HTML preview: header first, then every non-empty section in order."""
    sections = [s for s in section_order if has_content(document, s)]
    return preview_tpl.render(r=document, sections=sections, titles=SECTION_TITLES)
