from pydantic import BaseModel, ConfigDict

class BaseDTO(BaseModel):
    """
    Base class for every DTO (Data Transfer Object) in JobApp.

    Features:
        - from_attributes=True (build from domain objects)
        - str_strip_whitespace=True (strip surrounding whitespace)
        - populate_by_name=True (accept field names as well as aliases)
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        populate_by_name=True
    )
