from pydantic import BaseModel, model_validator
from typing import Any, Dict


class PatchModel(BaseModel):
    """
    Body of a partial update.

    Every field is either absent (kept as stored) or present with a value
    (written). Presence comes from ``model_fields_set``, so ``changes()`` only
    returns what the client actually sent. Columns are non-nullable, so an
    explicit ``null`` is refused here instead of at the database.
    """

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"{', '.join(nulls)} may not be null")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
