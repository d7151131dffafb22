"""Tipos del inquiry-service (consultas de portales y su automatización)."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class InquiryStatus(str, Enum):
    ACTIVE = "active"
    PINNED = "pinned"
    DONE = "done"


class EmailValidationStatus(str, Enum):
    PROCESSED = "PROCESSED"
    NOT_INQUIRY = "NOT_INQUIRY"
    TO_BE_PROCESSED = "TO_BE_PROCESSED"


class Inquiry(BaseModel):
    """Consulta recibida desde un portal inmobiliario."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    iex_send_at: int | None = Field(default=None, alias="iexSendAt")
    iex_opened_at: int | None = Field(default=None, alias="iexOpenedAt")
    contact: str | None = None
    estate: str | None = None
    portal_id: str | None = Field(default=None, alias="portalId")
    inquiry_text: str | None = Field(default=None, alias="inquiryText")
    status: InquiryStatus = InquiryStatus.ACTIVE
    is_sending_iex_automatically_enabled: bool = Field(
        default=True,
        alias="isSendingIEXAutomaticallyEnabled",
    )
    real_estate_agent: str | None = Field(default=None, alias="realEstateAgent")
    inquiry_recipient: str | None = Field(default=None, alias="inquiryRecipient")
    created: int | None = None


class InquiryAutomation(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = None
    company_id: str = Field(..., alias="companyId")
    is24_contact_api_active: bool = Field(default=False, alias="is24ContactApiActive")
    is_active: bool = Field(default=False, alias="isActive")


class EmailVerificationResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    reason: str | None = None
    status: EmailValidationStatus


class PreconditionResponse(BaseModel):
    """Respuesta de los endpoints `/preconditions/*`.

    El backend no publica su forma: los campos se conservan tal cual en
    `model_extra`.
    """

    model_config = ConfigDict(extra="allow")
