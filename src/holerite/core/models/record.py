"""Persisted payroll record envelope."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from holerite.core.models.payroll import PayrollResult


class PayrollRecord(BaseModel):
    """A calculated payroll result as kept by the record service."""

    id: int = Field(..., description="Repository-assigned identifier")
    result: PayrollResult = Field(..., description="Calculated payroll")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (UTC)")
    is_deleted: bool = Field(default=False, description="Soft delete flag")
    deleted_at: Optional[datetime] = Field(default=None)

    @property
    def employee_id(self) -> str:
        return self.result.employee_id

    @property
    def reference_month(self) -> int:
        return self.result.reference_month

    @property
    def reference_year(self) -> int:
        return self.result.reference_year

    model_config = {"frozen": True}
