# coworker/application/dtos/base_dto.py

"""
Base class for custom DTOs.

Defines CustomBaseModel, which extends Pydantic's BaseModel with
behaviour shared by every DTO of the application.
"""

from pydantic import BaseModel, ConfigDict


class CustomBaseModel(BaseModel):
    """
    Custom base model for every DTO of the application.

    Reads ORM attributes when validating from objects.
    """

    model_config = ConfigDict(from_attributes=True)
