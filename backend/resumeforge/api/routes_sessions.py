from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from ..ai_services import get_ai_service
from ..editor import ReorderInProgress, ResumeEditor
from ..preview import render_preview
from ..schemas import FieldIssue, ResumeDocument, SessionAtsRequest, SessionOut
from ..sessions import SessionStore, get_session_store

router = APIRouter(prefix="/sessions", tags=["sessions"])


class HeaderPatch(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    portfolio: Optional[str] = None

class SkillsPatch(BaseModel):
    frontend: Optional[str] = None
    architecture: Optional[str] = None
    cloud: Optional[str] = None

class AchievementsIn(BaseModel):
    text: str


def _editor(session_id: str, store: SessionStore) -> ResumeEditor:
    try:
        return store.get(session_id)
    except KeyError:
        raise HTTPException(404, "session not found")

def _session_out(session_id: str, editor: ResumeEditor) -> SessionOut:
    return SessionOut(
        id=session_id,
        document=editor.document,
        sectionOrder=list(editor.section_order),
        issues=editor.issues(),
        optimizing=editor.optimizing,
    )


@router.post("", response_model=SessionOut)
async def create_session(store: SessionStore = Depends(get_session_store)):
    session_id = store.create()
    return _session_out(session_id, store.get(session_id))

@router.get("/{session_id}", response_model=SessionOut)
async def get_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    return _session_out(session_id, _editor(session_id, store))

@router.delete("/{session_id}")
async def delete_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    _editor(session_id, store)
    store.discard(session_id)
    return {"ok": True}

# ----- Document edits -----

@router.put("/{session_id}/document", response_model=SessionOut)
async def replace_document(session_id: str, body: ResumeDocument, store: SessionStore = Depends(get_session_store)):
    editor = _editor(session_id, store)
    editor.replace_document(body)
    return _session_out(session_id, editor)

@router.patch("/{session_id}/header", response_model=SessionOut)
async def patch_header(session_id: str, body: HeaderPatch, store: SessionStore = Depends(get_session_store)):
    editor = _editor(session_id, store)
    editor.update_header(**body.model_dump(exclude_unset=True, exclude_none=True))
    return _session_out(session_id, editor)

@router.patch("/{session_id}/skills", response_model=SessionOut)
async def patch_skills(session_id: str, body: SkillsPatch, store: SessionStore = Depends(get_session_store)):
    editor = _editor(session_id, store)
    editor.update_skills(**body.model_dump(exclude_unset=True, exclude_none=True))
    return _session_out(session_id, editor)

@router.put("/{session_id}/achievements", response_model=SessionOut)
async def put_achievements(session_id: str, body: AchievementsIn, store: SessionStore = Depends(get_session_store)):
    editor = _editor(session_id, store)
    editor.set_achievements(body.text)
    return _session_out(session_id, editor)

@router.post("/{session_id}/{section}/entries", response_model=SessionOut)
async def add_entry(session_id: str, section: str, store: SessionStore = Depends(get_session_store)):
    editor = _editor(session_id, store)
    try:
        editor.add_entry(section)
    except KeyError:
        raise HTTPException(404, f"unknown section: {section}")
    return _session_out(session_id, editor)

@router.delete("/{session_id}/{section}/entries/{index}", response_model=SessionOut)
async def remove_entry(session_id: str, section: str, index: int, store: SessionStore = Depends(get_session_store)):
    editor = _editor(session_id, store)
    try:
        editor.remove_entry(section, index)
    except KeyError:
        raise HTTPException(404, f"unknown section: {section}")
    except IndexError as e:
        raise HTTPException(404, str(e))
    return _session_out(session_id, editor)

@router.get("/{session_id}/issues", response_model=List[FieldIssue])
async def get_issues(session_id: str, store: SessionStore = Depends(get_session_store)):
    return _editor(session_id, store).issues()

@router.get("/{session_id}/preview", response_class=HTMLResponse)
async def get_preview(session_id: str, store: SessionStore = Depends(get_session_store)):
    editor = _editor(session_id, store)
    return HTMLResponse(render_preview(editor.document, editor.section_order))

# ----- AI actions -----

@router.post("/{session_id}/section-order/optimize")
async def optimize_section_order(session_id: str, store: SessionStore = Depends(get_session_store)):
    """Ask the model for a better section order and apply it to the session"""
    editor = _editor(session_id, store)
    try:
        result = await editor.optimize_section_order(get_ai_service())
    except ReorderInProgress as e:
        raise HTTPException(409, str(e))
    return result.model_dump()

@router.post("/{session_id}/ats-suggestions")
async def ats_suggestions(session_id: str, body: SessionAtsRequest, store: SessionStore = Depends(get_session_store)):
    editor = _editor(session_id, store)
    result = await editor.ats_suggestions(get_ai_service(), body.jobDescription)
    return result.model_dump()
