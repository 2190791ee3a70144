"""
Pydantic models for Jira status categories.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StatusCategoryKey(str, Enum):
    """Keys of the status categories every Jira instance ships with."""
    COMPLETE = "done"
    IN_PROGRESS = "indeterminate"
    TO_DO = "new"
    UNDEFINED = "undefined"


STATUS_CATEGORY_COMPLETE = StatusCategoryKey.COMPLETE.value
STATUS_CATEGORY_IN_PROGRESS = StatusCategoryKey.IN_PROGRESS.value
STATUS_CATEGORY_TO_DO = StatusCategoryKey.TO_DO.value
STATUS_CATEGORY_UNDEFINED = StatusCategoryKey.UNDEFINED.value


class StatusCategory(BaseModel):
    """Category a workflow status belongs to.

    Categories can be user defined on every Jira instance; ``key`` is the
    stable identifier to match them across instances.
    """
    self_url: str = Field(..., alias="self", description="Canonical URL of the resource")
    id: int = Field(..., description="Numeric identifier, unique per instance")
    name: str = Field(..., description="Display name")
    key: str = Field(..., description="Stable short identifier, e.g. 'done'")
    color_name: str = Field(..., alias="colorName", description="Display color token")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "self": "https://your-domain.atlassian.net/rest/api/3/statuscategory/1",
                "id": 1,
                "name": "To Do",
                "key": "new",
                "colorName": "blue-gray"
            }
        }
    )

    def is_default(self) -> bool:
        """Whether this is one of the categories shipped with every instance."""
        return self.key in {k.value for k in StatusCategoryKey}

    def is_complete(self) -> bool:
        return self.key == StatusCategoryKey.COMPLETE
