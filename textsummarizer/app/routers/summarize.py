from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from ..prompts import MAX_TEXT_LENGTH, build_prompt
from ..providers import ProviderError, SummaryProvider, get_provider
from ..schemas import ErrorResponse, SummarizeRequest, SummarizeResponse

router = APIRouter(prefix="/api", tags=["summarize"])


@router.get(
    "/models",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def list_models(provider: SummaryProvider = Depends(get_provider)) -> dict[str, Any]:
    try:
        return await provider.list_models()
    except ProviderError as exc:
        logger.error(f"Model listing failed: {exc}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def summarize(
    payload: SummarizeRequest,
    provider: SummaryProvider = Depends(get_provider),
) -> SummarizeResponse:
    text = payload.text
    if not text or not text.strip():
        logger.warning("Rejected summarize request: empty text")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Text is required")

    if len(text) > MAX_TEXT_LENGTH:
        logger.warning(f"Rejected summarize request: {len(text)} characters")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Text is too long. Maximum {MAX_TEXT_LENGTH:,} characters.",
        )

    prompt = build_prompt(text, payload.length)
    try:
        summary = await provider.generate(prompt)
    except ProviderError as exc:
        logger.error(f"Summary generation failed: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to generate summary", "message": str(exc)},
        ) from exc

    logger.info(f"Summary generated: length={payload.length}, input_chars={len(text)}")
    return SummarizeResponse(summary=summary)
