"""
Service layer for cost estimates produced by the product calculator.
"""

import logging
import math
from typing import List

from ..core.errors import NotFoundError, ValidationError
from ..core.store import RecordStore
from ..schemas.estimate import CostEstimateCreate, CostEstimateRead

logger = logging.getLogger(__name__)


class EstimateService:
    """Save, list and delete cost estimates."""

    @classmethod
    async def create_estimate(cls, store: RecordStore, data: CostEstimateCreate) -> CostEstimateRead:
        """Store an estimate.

        At least one product must be selected and the total must be a
        finite positive number (``NaN`` and ``Infinity`` are rejected).
        """
        products = data.selected_products
        logger.info(
            "Cost estimate request: products=%s total=%s",
            len(products) if products is not None else None,
            data.total_cost,
        )
        if not products:
            raise ValidationError("Please select at least one product")
        if data.total_cost is None or not math.isfinite(data.total_cost) or data.total_cost <= 0:
            raise ValidationError("Invalid total cost")
        record = store.estimates.create(selected_products=products, total_cost=data.total_cost)
        logger.info("Saved estimate %s", record["id"])
        return CostEstimateRead(**record)

    @classmethod
    async def list_estimates(cls, store: RecordStore) -> List[CostEstimateRead]:
        return [CostEstimateRead(**row) for row in store.estimates.list()]

    @classmethod
    async def delete_estimate(cls, store: RecordStore, estimate_id: int) -> None:
        if not store.estimates.delete_by_id(estimate_id):
            raise NotFoundError("Estimate not found")
        logger.info("Deleted estimate %s", estimate_id)
