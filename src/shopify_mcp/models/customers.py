"""Customer result records."""

from typing import List, Optional, Union

from pydantic import Field

from .common import MailingAddress, Money, ShopifyModel


class Customer(ShopifyModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    note: Optional[str] = None
    tax_exempt: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    default_address: Optional[MailingAddress] = None
    addresses: List[MailingAddress] = Field(default_factory=list)
    amount_spent: Optional[Money] = None
    # UnsignedInt64 is serialized as a string by the Admin API.
    number_of_orders: Optional[Union[int, str]] = None
