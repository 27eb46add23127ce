import logging
from typing import List, Optional

from .ai_services import (
    AtsResult,
    SuggestionProvider,
    ats_resume_text,
    request_ats_suggestions,
    request_section_order,
    section_order_inputs,
)
from .schemas import (
    ENTRY_MODELS,
    FieldIssue,
    GatewayError,
    ResumeDocument,
    SectionOrderOutcome,
    default_document,
)
from .sections import default_section_order, reconcile
from .validation import validate_document

logger = logging.getLogger(__name__)


class ReorderInProgress(Exception):
    """A section reorder is already waiting on the AI service."""


class ResumeEditor:
    """One user's resume and its section order.

    The document changes only through user edits; the section order changes
    only when a reorder suggestion is applied.
    """

    def __init__(self, document: Optional[ResumeDocument] = None):
        self.document = document if document is not None else default_document()
        self.section_order: List[str] = default_section_order()
        self.optimizing = False

    # ----- document edits -----

    def issues(self) -> List[FieldIssue]:
        return validate_document(self.document)

    def replace_document(self, document: ResumeDocument) -> List[FieldIssue]:
        self.document = document
        return self.issues()

    def update_header(self, **fields) -> List[FieldIssue]:
        self.document.header = self.document.header.model_copy(update=fields)
        return self.issues()

    def update_skills(self, **fields) -> List[FieldIssue]:
        self.document.skills = self.document.skills.model_copy(update=fields)
        return self.issues()

    def set_achievements(self, text: str) -> List[FieldIssue]:
        self.document.achievements = text
        return self.issues()

    def add_entry(self, section: str) -> List[FieldIssue]:
        model = ENTRY_MODELS[section]
        getattr(self.document, section).append(model())
        return self.issues()

    def remove_entry(self, section: str, index: int) -> List[FieldIssue]:
        if section not in ENTRY_MODELS:
            raise KeyError(section)
        entries = getattr(self.document, section)
        if index < 0 or index >= len(entries):
            raise IndexError(f"{section} has no entry {index}")
        del entries[index]
        return self.issues()

    # ----- AI actions -----

    async def optimize_section_order(self, provider: SuggestionProvider) -> SectionOrderOutcome | GatewayError:
        if self.optimizing:
            logger.warning("Section reorder requested while another one is in flight")
            raise ReorderInProgress("A section reorder is already in progress")

        # Set before the first await so a second trigger on the loop sees it.
        self.optimizing = True
        snapshot = self.document.model_copy(deep=True)
        try:
            result = await request_section_order(provider, **section_order_inputs(snapshot))
        finally:
            self.optimizing = False

        if isinstance(result, GatewayError):
            return result

        self.section_order = reconcile(self.section_order, result.orderedSections)
        logger.info(f"Sections reordered: {', '.join(self.section_order)}")
        return SectionOrderOutcome(sectionOrder=list(self.section_order), reasoning=result.reasoning)

    async def ats_suggestions(self, provider: SuggestionProvider, job_description: str) -> AtsResult:
        return await request_ats_suggestions(provider, ats_resume_text(self.document), job_description)
