# pipeline.py - validate, score, render and translate one insurance application
import logging
import uuid
from enum import Enum
from typing import Optional

from pydantic import ValidationError

from errors import ApplicationRejected, MalformedInput
from messages import BASE_LANGUAGE, render_outcome, strip_markup
from schemas import Application, Decision
from scoring import score_application
from translator import TranslatorClient
from validator import validate_application

logger = logging.getLogger("insurance-decision.pipeline")


class DecisionStage(str, Enum):
    RECEIVED = "received"
    VALIDATING = "validating"
    REJECTED = "rejected"
    SCORING = "scoring"
    RENDERING = "rendering"
    TRANSLATING = "translating"
    TRANSLATED = "translated"
    TRANSLATION_FAILED = "translation_failed"
    COMPLETED = "completed"


def needs_translation(preferred_language: Optional[str]) -> bool:
    """A missing, blank or base-language preference keeps the rendered text."""
    if preferred_language is None or not preferred_language.strip():
        return False
    return preferred_language.strip().lower() != BASE_LANGUAGE


class DecisionPipeline:
    """Runs one application end to end and produces exactly one Decision.

    Validation failures stop the run and propagate as ApplicationRejected.
    Translation failures never do: the untranslated text is used instead.
    """

    def __init__(self, translator: TranslatorClient):
        self.translator = translator

    def _enter(self, request_id: str, stage: DecisionStage):
        logger.debug("[%s] -> %s", request_id, stage.value)

    def parse(self, raw: bytes) -> Application:
        try:
            return Application.model_validate_json(raw)
        except ValidationError as e:
            raise MalformedInput(str(e)) from e

    async def decide(self, application: Application, request_id: Optional[str] = None) -> Decision:
        request_id = request_id or str(uuid.uuid4())

        self._enter(request_id, DecisionStage.VALIDATING)
        try:
            validate_application(application)
        except ApplicationRejected as e:
            self._enter(request_id, DecisionStage.REJECTED)
            logger.info(
                "[%s] Input validation stopped processing: %s (element=%s)",
                request_id, e.message, e.element_name,
            )
            raise

        self._enter(request_id, DecisionStage.SCORING)
        assessment = score_application(application)
        logger.debug("[%s] risk score=%d", request_id, assessment.score)

        self._enter(request_id, DecisionStage.RENDERING)
        text = render_outcome(assessment.is_approved, application.first_name, application.last_name)

        if needs_translation(application.preferred_language):
            self._enter(request_id, DecisionStage.TRANSLATING)
            outcome = await self.translator.translate_or_fallback(text, application.preferred_language.strip())
            if outcome.translated:
                self._enter(request_id, DecisionStage.TRANSLATED)
            else:
                self._enter(request_id, DecisionStage.TRANSLATION_FAILED)
                logger.error("[%s] Translation failed, using base language text: %s", request_id, outcome.error)
            text = outcome.text

        decision = Decision(is_approved=assessment.is_approved, outcome_description=strip_markup(text))
        self._enter(request_id, DecisionStage.COMPLETED)

        logger.info("[%s] Application approved => %s", request_id, decision.is_approved)
        logger.info("[%s] Application outcome full text => %s", request_id, decision.outcome_description)
        return decision

    async def process(self, raw: bytes, request_id: Optional[str] = None) -> Decision:
        request_id = request_id or str(uuid.uuid4())
        self._enter(request_id, DecisionStage.RECEIVED)
        try:
            application = self.parse(raw)
        except MalformedInput as e:
            logger.info("[%s] Malformed request body: %s", request_id, e.detail)
            raise
        return await self.decide(application, request_id)
