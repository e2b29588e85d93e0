import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from outreach.dependencies import get_ai_client
from outreach.schemas.ai import (
    AnalyzeCompanyRequest,
    AnalyzeJobRequest,
    DecisionMakers,
    EmailDraft,
    FindDecisionMakerRequest,
    FindEmailRequest,
    FoundEmail,
    GenerateCompanyEmailRequest,
    GenerateEmailRequest,
)
from outreach.schemas.company import CompanyAnalysis
from outreach.schemas.job import JobAnalysis
from outreach.services import prompts
from outreach.services.ai_service import AIClient, AIServiceError, clean_and_parse_json

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ai"])


def _structured(model, data: dict | None):
    if data is None:
        raise HTTPException(status_code=500, detail="AI response was not valid JSON")
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.error("AI response did not match %s: %s", model.__name__, exc)
        raise HTTPException(status_code=500, detail=f"AI response did not match {model.__name__}")


@router.post("/analyze-job", response_model=JobAnalysis)
async def analyze_job(req: AnalyzeJobRequest, ai: AIClient = Depends(get_ai_client)):
    system, prompt = prompts.analyze_job(req.job, req.settings)
    try:
        data = await ai.generate_json(prompt, system=system)
    except AIServiceError as exc:
        logger.error("Job analysis failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
    return _structured(JobAnalysis, data)


@router.post("/generate-email", response_model=EmailDraft)
async def generate_email(req: GenerateEmailRequest, ai: AIClient = Depends(get_ai_client)):
    system, prompt = prompts.generate_job_email(req.job, req.settings)
    try:
        data = await ai.generate_json(prompt, system=system, temperature=0.7)
    except AIServiceError as exc:
        logger.error("Email generation failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
    return _structured(EmailDraft, data)


@router.post("/find-email", response_model=FoundEmail)
async def find_email(req: FindEmailRequest, ai: AIClient = Depends(get_ai_client)):
    system, prompt = prompts.find_email(req.job)
    try:
        completion = await ai.complete(prompt, system=system, web_search=True)
    except AIServiceError as exc:
        logger.error("Find email failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
    email, name = prompts.parse_found_email(completion.text)
    return FoundEmail(email=email, name=name, sources=completion.sources)


@router.post("/analyze-company", response_model=CompanyAnalysis | None)
async def analyze_company(req: AnalyzeCompanyRequest, ai: AIClient = Depends(get_ai_client)):
    system, prompt = prompts.analyze_company(req.company, req.settings)
    try:
        completion = await ai.complete(prompt, system=system, web_search=True)
    except AIServiceError as exc:
        logger.error("Company analysis failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
    data = clean_and_parse_json(completion.text or "{}")
    if data is None:
        return None
    analysis = _structured(CompanyAnalysis, data)
    analysis.sources = completion.sources
    return analysis


@router.post("/find-decision-maker", response_model=DecisionMakers)
async def find_decision_maker(req: FindDecisionMakerRequest, ai: AIClient = Depends(get_ai_client)):
    system, prompt = prompts.find_decision_maker(req.company)
    try:
        completion = await ai.complete(prompt, system=system, web_search=True)
    except AIServiceError as exc:
        logger.error("Find decision maker failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
    data = clean_and_parse_json(completion.text or "{}")
    if data is None:
        return DecisionMakers()
    result = _structured(DecisionMakers, data)
    result.decision_maker_sources = completion.sources
    return result


@router.post("/generate-company-email", response_model=EmailDraft)
async def generate_company_email(req: GenerateCompanyEmailRequest, ai: AIClient = Depends(get_ai_client)):
    system, prompt = prompts.generate_company_email(
        req.company, req.settings, req.contact_name, req.contact_role
    )
    try:
        data = await ai.generate_json(prompt, system=system)
    except AIServiceError as exc:
        logger.error("Company email generation failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))
    return _structured(EmailDraft, data)
