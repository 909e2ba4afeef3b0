"""
Pydantic schemas for cost estimates.

``selectedProducts`` is an ordered list of product references as sent
by the calculator page.  The front end decides their shape (ids,
names or full product objects), so items are stored untouched.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field

from .common import CamelModel


class CostEstimateCreate(CamelModel):
    selected_products: Optional[List[Any]] = Field(
        None,
        alias="selectedProducts",
        examples=[[{"id": "hub-pro", "name": "Hub Pro", "price": 199}]],
    )
    total_cost: Optional[float] = Field(None, alias="totalCost", examples=[199.0])


class CostEstimateRead(CamelModel):
    id: int
    selected_products: List[Any] = Field(..., alias="selectedProducts")
    total_cost: float = Field(..., alias="totalCost")
    created_at: datetime = Field(..., alias="createdAt")
