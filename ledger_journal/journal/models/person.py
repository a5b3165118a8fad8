from pydantic import BaseModel, ConfigDict, Field


class Person(BaseModel):
    """A document stored in the People table."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", min_length=1, description="First name")
    last_name: str = Field(..., alias="lastName", description="Last name")
    age: int = Field(..., ge=0, description="Age in years")

    def to_document(self) -> dict:
        """Return the document as stored in the ledger (ledger field names)."""
        return self.model_dump(by_alias=True)
