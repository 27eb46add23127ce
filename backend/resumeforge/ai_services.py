"""
AI Services Module for ResumeForge
Handles the two prompt use-cases: section reordering and ATS suggestions.

The gateway functions at the bottom are the boundary: they never raise, every
failure comes back as a GatewayError.
"""
import json
import logging
import re
from typing import Any, Dict, Optional, Protocol, Union

import httpx
from pydantic import ValidationError

from .config import get_settings
from .schemas import AtsSuggestions, GatewayError, ResumeDocument, SectionOrderSuggestion

logger = logging.getLogger(__name__)

SectionOrderResult = Union[SectionOrderSuggestion, GatewayError]
AtsResult = Union[AtsSuggestions, GatewayError]

SYSTEM_PROMPT = "You are an expert resume writer and ATS optimization specialist. Always provide valid JSON responses."

SECTION_ORDER_PROMPT = """
You are an expert career coach. Decide the most effective order for the main
sections of this resume so that a recruiter sees the strongest material first.

Education:
{education}

Skills:
{skills}

Experience:
{experience}

Projects:
{projects}

Only these four sections may be ordered: education, skills, experience, projects.
Return every one of them exactly once, reordered. Do not add, rename or drop sections.

Provide a JSON response with:
{{
    "orderedSections": ["experience", "projects", "skills", "education"],
    "reasoning": "One short paragraph explaining why this order works for this candidate"
}}

Return only JSON.
"""

ATS_SUGGESTIONS_PROMPT = """
You are an expert ATS resume reviewer and career coach. Analyze the provided resume
against the given job description and provide actionable suggestions to improve its
ATS score and overall effectiveness.

Resume (JSON format):
{resume}

Job Description:
{job_description}

Please provide the following:
1. A list of specific, actionable suggestions to improve the resume.
2. Focus on incorporating relevant keywords from the job description into the resume's experience, skills, and projects sections.
3. Suggest improvements to the bullet points in the experience section to better match the job requirements, using action verbs.
4. Provide an estimated percentage improvement in the ATS score if the suggestions are applied.

Provide a JSON response with:
{{
    "suggestions": "Your entire answer as a single markdown string"
}}

Return only JSON.
"""


class SuggestionProvider(Protocol):
    """One async method per prompt use-case; each returns the decoded JSON reply."""

    async def suggest_section_order(self, education: str, skills: str, experience: str, projects: str) -> Any: ...

    async def suggest_ats_improvements(self, resume: str, job_description: str) -> Any: ...


def _extract_json(text: str) -> Any:
    # Models like to wrap the object in ```json ... ```
    fence = re.search(r"```(?:json)?\s*([\s\S]*?)```", text, re.I)
    blob = fence.group(1) if fence else text
    decoder = json.JSONDecoder()
    # First complete object wins; braces in surrounding prose are skipped.
    for m in re.finditer(r"\{", blob):
        try:
            obj, _ = decoder.raw_decode(blob, m.start())
        except json.JSONDecodeError:
            continue
        if isinstance(obj, dict):
            return obj
    raise ValueError("AI response did not contain a JSON object")


class AIService:
    """SuggestionProvider backed by an OpenAI-compatible chat completions endpoint"""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        settings = get_settings()
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.default_ai_model
        self.base_url = settings.openai_base_url
        self.temperature = settings.ai_temperature
        self.max_tokens = settings.ai_max_tokens
        self.timeout = settings.ai_timeout

    async def suggest_section_order(self, education: str, skills: str, experience: str, projects: str) -> Any:
        prompt = SECTION_ORDER_PROMPT.format(
            education=education, skills=skills, experience=experience, projects=projects
        )
        return _extract_json(await self._call_llm(prompt))

    async def suggest_ats_improvements(self, resume: str, job_description: str) -> Any:
        prompt = ATS_SUGGESTIONS_PROMPT.format(resume=resume, job_description=job_description)
        return _extract_json(await self._call_llm(prompt))

    async def _call_llm(self, prompt: str) -> str:
        """HTTP call to OpenAI-compatible endpoint (local or hosted)"""
        use_local = self.base_url.startswith("http://localhost") or \
                    self.base_url.startswith("http://127.0.0.1") or \
                    "host.docker.internal" in self.base_url
        if not self.api_key and not use_local:
            raise ValueError("No API key configured")

        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt}
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens
        }

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                f"{self.base_url}/chat/completions",
                headers=headers,
                json=payload
            )

            if response.status_code != 200:
                raise Exception(f"API call failed: {response.status_code} {response.text}")

            result = response.json()
            return result["choices"][0]["message"]["content"]


def get_ai_service(user_api_key: Optional[str] = None, model: Optional[str] = None) -> AIService:
    """Get AI service instance with user's API key or system default"""
    return AIService(api_key=user_api_key, model=model)


# ----- Request serialization -----

SKILL_LABELS = (
    ("frontend", "Frontend"),
    ("architecture", "Architecture"),
    ("cloud", "Cloud/DevOps"),
)


def section_order_inputs(document: ResumeDocument) -> Dict[str, str]:
    """The four text blobs the section-order prompt is filled with."""
    skills = document.skills.model_dump()
    return {
        "education": json.dumps([e.model_dump() for e in document.education], indent=2),
        "skills": "\n".join(f"{label}: {skills[key]}" for key, label in SKILL_LABELS),
        "experience": json.dumps([e.model_dump() for e in document.experience], indent=2),
        "projects": json.dumps([p.model_dump() for p in document.projects], indent=2),
    }


def ats_resume_text(document: ResumeDocument) -> str:
    return document.model_dump_json(indent=2)


# ----- Gateway -----

async def request_section_order(
    provider: SuggestionProvider, education: str, skills: str, experience: str, projects: str
) -> SectionOrderResult:
    try:
        reply = await provider.suggest_section_order(education, skills, experience, projects)
        if not isinstance(reply, dict) or "orderedSections" not in reply:
            raise ValueError("AI failed to return a valid response.")
        return SectionOrderSuggestion.model_validate(reply)
    except ValidationError as e:
        logger.error(f"Section order response rejected: {e}")
        return GatewayError(error="Failed to optimize section order: AI returned a malformed response.")
    except Exception as e:
        logger.error(f"Section order request failed: {e}")
        return GatewayError(error=f"Failed to optimize section order: {e}")


async def request_ats_suggestions(provider: SuggestionProvider, resume: str, job_description: str) -> AtsResult:
    try:
        reply = await provider.suggest_ats_improvements(resume, job_description)
        if not isinstance(reply, dict) or not reply.get("suggestions"):
            raise ValueError("AI failed to return a valid response.")
        return AtsSuggestions.model_validate(reply)
    except ValidationError as e:
        logger.error(f"ATS suggestions response rejected: {e}")
        return GatewayError(error="Failed to get suggestions: AI returned a malformed response.")
    except Exception as e:
        logger.error(f"Error getting ATS suggestions: {e}")
        return GatewayError(error=f"Failed to get suggestions: {e}")
