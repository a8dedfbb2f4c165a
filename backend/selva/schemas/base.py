# selva/schemas/base.py
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire and in stored documents."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_document(self, partial: bool = False) -> dict:
        # exclude_none on partial updates: a null field means "leave unchanged"
        doc = self.model_dump(by_alias=True, exclude_unset=partial, exclude_none=partial)
        if "id" in doc and doc["id"] is None:
            del doc["id"]
        return doc
