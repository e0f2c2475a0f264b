"""In-memory store of compliance documents with AI summaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from biztax.ai.base import AiResult, DocumentAnalysis
from biztax.ai.client import TaxAdvisorClient
from biztax.calculators.types import InvalidInputError


@dataclass(frozen=True)
class DocumentRecord:
    """A stored document and what was extracted from it."""

    name: str
    type: str
    upload_date: datetime
    summary: str | None = None
    category: str | None = None
    content: str | None = None
    id: str = field(default_factory=lambda: uuid4().hex)


def sample_documents() -> list[DocumentRecord]:
    return [
        DocumentRecord(
            id="1",
            name="TCC-2023.pdf",
            type="Certificate",
            upload_date=datetime.now(timezone.utc),
            category="Compliance",
            summary="Tax Clearance Certificate for 2023 Tax Year.",
        )
    ]


def record_from_analysis(
    document_text: str, analysis: DocumentAnalysis, now: datetime | None = None
) -> DocumentRecord:
    """Build a vault record for scanned text."""
    now = now or datetime.now(timezone.utc)
    return DocumentRecord(
        name=f"Scan-{now:%d-%m-%Y}.txt",
        type=analysis.type or "Unknown",
        upload_date=now,
        summary=analysis.summary or "No summary available",
        category="Financial" if analysis.has_amount else "General",
        content=document_text,
    )


class DocumentVault:
    """Newest-first list of documents."""

    def __init__(self, documents: list[DocumentRecord] | None = None):
        self._documents: list[DocumentRecord] = list(documents or [])

    def add(self, record: DocumentRecord) -> DocumentRecord:
        self._documents.insert(0, record)
        return record

    def get(self, document_id: str) -> DocumentRecord | None:
        return next((d for d in self._documents if d.id == document_id), None)

    def documents(self) -> list[DocumentRecord]:
        return list(self._documents)

    def search(self, query: str | None) -> list[DocumentRecord]:
        """Case-insensitive match over name, type, summary and category."""
        needle = (query or "").strip().lower()
        if not needle:
            return self.documents()
        return [
            d
            for d in self._documents
            if any(needle in (value or "").lower() for value in (d.name, d.type, d.summary, d.category))
        ]

    async def analyze_and_store(
        self, document_text: str, advisor: TaxAdvisorClient
    ) -> AiResult[DocumentRecord]:
        """Analyse pasted text and keep it only when analysis succeeds."""
        if not document_text or not document_text.strip():
            raise InvalidInputError("document_text", "must not be empty")

        analysis = await advisor.analyze_document(document_text)
        if analysis.error is not None:
            return AiResult(error=analysis.error)

        record = self.add(record_from_analysis(document_text, analysis.value))
        return AiResult.success(record)
