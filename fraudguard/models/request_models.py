"""Request models for the FraudGuard API."""

from pydantic import BaseModel, Field

from fraudguard.controllers.view_controller import View


class ManualOfferRequest(BaseModel):
    """Manual entry form."""

    title: str = Field(default="", examples=["Senior Software Engineer"])
    company: str = Field(default="", examples=["Google"])
    salary: str = Field(default="", examples=["$120,000 / year"])
    location: str = Field(default="", examples=["New York, NY"])
    recruiter_email: str = Field(default="", examples=["hr@company.com"])
    website: str = Field(default="", examples=["https://company.com"])
    description: str = Field(default="", examples=["Paste the full job description here..."])


class EmailOfferRequest(BaseModel):
    """Pasted recruitment e-mail body."""

    content: str = Field(
        default="",
        description="The entire body of the e-mail you received",
    )


class NavigateRequest(BaseModel):
    view: View = Field(..., examples=["about"])


class ChatRequest(BaseModel):
    """A new chat message for the session's assistant."""

    message: str = Field(
        ...,
        min_length=1,
        description="The user's message",
        examples=["Is it normal to pay for training before starting a job?"],
    )
