"""
Base classes for the tool input and Jira response models.
"""

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """
    Base model for data exchanged with callers or with Jira.

    Fields use snake_case in Python and their camelCase wire name as alias.
    Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
