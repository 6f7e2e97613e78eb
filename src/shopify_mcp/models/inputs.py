"""Base input model and nested input shapes shared by several tools."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ToolInput(BaseModel):
    """Arguments accepted by a tool.

    Wire names are camelCase; unknown keys are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def provided(self, *exclude: str) -> Dict[str, Any]:
        """Fields the caller actually supplied, by wire name.

        Omitted fields are left out entirely so the mutation leaves them
        unchanged; defaults are not included.
        """
        return self.model_dump(
            by_alias=True,
            exclude_unset=True,
            exclude=set(exclude),
        )


class SEOInput(ToolInput):
    title: Optional[str] = None
    description: Optional[str] = None


class AuthorInput(ToolInput):
    name: str


class MetafieldInput(ToolInput):
    id: Optional[str] = None
    namespace: Optional[str] = None
    key: Optional[str] = None
    value: str
    type: Optional[str] = None


class CustomAttributeInput(ToolInput):
    key: str
    value: str


class MailingAddressInput(ToolInput):
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    company: Optional[str] = None
    country: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    province: Optional[str] = None
    zip: Optional[str] = None
