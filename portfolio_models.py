from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


DEFAULT_PROFILE_IMAGE_URL = "/images/portf.png"
DEFAULT_NAME = "Balachandran Thabotharan"
DEFAULT_TITLE = "Infrastructure Engineer & IT Professional"
DEFAULT_BIO = (
    "IT professional with hands-on experience in system administration, "
    "infrastructure engineering, and web application development."
)

EDITABLE_FIELDS = ("profile_image_url", "name", "title", "bio")


class Profile(BaseModel):
    """The site owner's editable card. One record is expected per store."""

    model_config = ConfigDict(populate_by_name=True)

    table: ClassVar[str] = "profiles"
    timestamps: ClassVar[bool] = True

    id: Optional[int] = None
    profile_image_url: str = Field(default=DEFAULT_PROFILE_IMAGE_URL, min_length=1, alias="profileImageUrl")
    name: str = DEFAULT_NAME
    title: str = DEFAULT_TITLE
    bio: str = DEFAULT_BIO
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Resume(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    table: ClassVar[str] = "resumes"
    timestamps: ClassVar[bool] = False

    id: Optional[int] = None
    name: str = Field(min_length=1)
    data: bytes
    content_type: str = Field(min_length=1, alias="contentType")
    upload_date: datetime = Field(default_factory=utcnow, alias="uploadDate")


class ProfileUpdate(BaseModel):
    """
    Partial profile payload. A field left as None was not sent by the client;
    an empty string was sent but carries no value.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    profile_image_url: Optional[str] = Field(default=None, alias="profileImageUrl")
    name: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ProfileUpdate":
        if not isinstance(payload, dict):
            return cls()
        # non-string values are dropped instead of rejected
        fields = {
            key: value
            for key, value in payload.items()
            if key in ("profileImageUrl", "name", "title", "bio") and isinstance(value, str)
        }
        return cls(**fields)

    def sent_fields(self) -> Dict[str, str]:
        return {k: v for k, v in self.model_dump().items() if v is not None}

    def changes(self) -> Dict[str, str]:
        return {k: v for k, v in self.sent_fields().items() if v}
