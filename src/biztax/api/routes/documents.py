"""Document vault endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from biztax.api.dependencies import State
from biztax.api.schemas import (
    DocumentAnalyzeRequest,
    DocumentDetailResponse,
    DocumentListResponse,
    DocumentResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/documents", tags=["documents"])

ANALYSIS_FAILED_MESSAGE = "Failed to analyze document. Please try again."


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    state: State,
    q: Annotated[str | None, Query()] = None,
) -> DocumentListResponse:
    documents = state.documents.search(q)
    return DocumentListResponse(
        items=[DocumentResponse.from_record(d) for d in documents],
        total=len(documents),
    )


@router.post(
    "/analyze",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def analyze_document(state: State, payload: DocumentAnalyzeRequest) -> DocumentResponse:
    """Run AI analysis on pasted text and store the result."""
    result = await state.documents.analyze_and_store(payload.text, state.advisor)
    if result.error is not None:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=ANALYSIS_FAILED_MESSAGE)
    return DocumentResponse.from_record(result.value)


@router.get(
    "/{document_id}",
    response_model=DocumentDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_document(state: State, document_id: str) -> DocumentDetailResponse:
    """One stored document including the raw text it was analysed from."""
    record = state.documents.get(document_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Document {document_id} not found",
        )
    return DocumentDetailResponse.from_record(record)
