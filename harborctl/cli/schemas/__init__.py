# Request parameter schemas
from harborctl.cli.schemas.labels import (
    LabelCreate,
    LabelIdParams,
    LabelsListParams,
    LabelUpdate,
)

__all__ = [
    "LabelCreate",
    "LabelIdParams",
    "LabelsListParams",
    "LabelUpdate",
]
