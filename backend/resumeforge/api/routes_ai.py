"""
Stateless gateway endpoints: the client sends the text, gets the model's
structured answer or an {"error": ...} body back.
"""
from fastapi import APIRouter

from ..ai_services import get_ai_service, request_ats_suggestions, request_section_order
from ..schemas import AtsSuggestionsRequest, SectionOrderRequest

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/section-order")
async def section_order(body: SectionOrderRequest):
    result = await request_section_order(
        get_ai_service(), body.education, body.skills, body.experience, body.projects
    )
    return result.model_dump()


@router.post("/ats-suggestions")
async def ats_suggestions(body: AtsSuggestionsRequest):
    result = await request_ats_suggestions(get_ai_service(), body.resume, body.jobDescription)
    return result.model_dump()
