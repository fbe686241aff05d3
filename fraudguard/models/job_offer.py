"""JobOffer model and the three intake paths that build it.

Each submission builds a fresh JobOffer.  Validation happens here so that
invalid input is rejected before the Analysis Client is ever called.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath

from pydantic import BaseModel, Field

from fraudguard.errors import OfferValidationError

ALLOWED_FILE_EXTENSIONS: frozenset[str] = frozenset({".pdf", ".doc", ".docx", ".txt"})
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024
DEFAULT_MIN_EMAIL_LENGTH = 20


class SourceType(str, Enum):
    """Which intake path produced the offer."""

    MANUAL = "manual"
    EMAIL = "email"
    FILE = "file"


class JobOffer(BaseModel):
    """A normalized job offer ready to be analysed."""

    title: str = Field(..., description="Job title")
    company: str = Field(default="", description="Company name")
    salary: str = Field(default="", description="Salary or stipend as written")
    location: str = Field(default="", description="Job location")
    recruiter_email: str = Field(default="", description="Recruiter e-mail address")
    website: str = Field(default="", description="Company website URL")
    description: str = Field(..., description="Free-text job description")
    source_type: SourceType = Field(default=SourceType.MANUAL)

    def check_submittable(self, min_email_length: int = DEFAULT_MIN_EMAIL_LENGTH) -> None:
        """Apply the intake rules of this offer's source type to an already-built offer.

        Raises OfferValidationError for an offer that none of the intake
        constructors would have produced.
        """
        description = self.description.strip()
        if self.source_type is SourceType.EMAIL:
            if len(description) < min_email_length:
                raise OfferValidationError(
                    f"Pasted e-mail must be at least {min_email_length} characters long.",
                    field="description",
                )
        elif self.source_type is SourceType.FILE:
            if not description:
                raise OfferValidationError("The selected file is empty.", field="description")
        else:
            if not self.title.strip():
                raise OfferValidationError("Job title is required.", field="title")
            if not description:
                raise OfferValidationError("Job description is required.", field="description")

    # ── Intake constructors ───────────────────────────────────────────────

    @classmethod
    def from_manual(
        cls,
        title: str,
        description: str,
        company: str = "",
        salary: str = "",
        location: str = "",
        recruiter_email: str = "",
        website: str = "",
    ) -> "JobOffer":
        """Build an offer from the manual entry form."""
        title = (title or "").strip()
        description = (description or "").strip()
        if not title:
            raise OfferValidationError("Job title is required.", field="title")
        if not description:
            raise OfferValidationError("Job description is required.", field="description")

        return cls(
            title=title,
            company=(company or "").strip(),
            salary=(salary or "").strip(),
            location=(location or "").strip(),
            recruiter_email=(recruiter_email or "").strip(),
            website=(website or "").strip(),
            description=description,
            source_type=SourceType.MANUAL,
        )

    @classmethod
    def from_email(
        cls, content: str, min_length: int = DEFAULT_MIN_EMAIL_LENGTH
    ) -> "JobOffer":
        """Build an offer from a pasted recruitment e-mail."""
        text = (content or "").strip()
        if len(text) < min_length:
            raise OfferValidationError(
                f"Pasted e-mail must be at least {min_length} characters long.",
                field="content",
            )

        return cls(
            title="Extracted from Email",
            company="Unknown",
            salary="N/A",
            location="Remote/Unknown",
            recruiter_email="N/A",
            website="N/A",
            description=text,
            source_type=SourceType.EMAIL,
        )

    @classmethod
    def from_file(
        cls,
        filename: str | None,
        content: bytes | None,
        max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ) -> "JobOffer":
        """Build an offer from an uploaded document.

        The bytes are decoded as UTF-8 text with replacement characters;
        binary formats (PDF, DOCX) are not extracted and arrive lossy.
        """
        if not filename:
            raise OfferValidationError("Please select a file to analyse.", field="file")

        extension = PurePath(filename).suffix.lower()
        if extension not in ALLOWED_FILE_EXTENSIONS:
            allowed = ", ".join(sorted(e.lstrip(".").upper() for e in ALLOWED_FILE_EXTENSIONS))
            raise OfferValidationError(
                f"Unsupported file type '{extension or filename}'. Allowed: {allowed}.",
                field="file",
            )

        size = len(content or b"")
        if size > max_bytes:
            raise OfferValidationError(
                f"File is too large. Max file size: {max_bytes / (1024 * 1024):g}MB.",
                field="file",
            )
        if size == 0:
            raise OfferValidationError("The selected file is empty.", field="file")

        text = content.decode("utf-8", errors="replace").strip()
        return cls(
            title=PurePath(filename).name,
            company="Extracted from File",
            salary="N/A",
            location="N/A",
            recruiter_email="N/A",
            website="N/A",
            description=text or f"Analysis request for file: {filename}",
            source_type=SourceType.FILE,
        )
