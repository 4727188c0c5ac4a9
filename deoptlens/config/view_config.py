#!filepath: deoptlens/config/view_config.py
from pydantic import BaseModel, Field


class ViewConfig(BaseModel):
    """
    Presentation knobs read by the view models.
    """
    unknown_location_text: str = "<unknown>"
    timestamp_precision: int = Field(default=3, ge=0, le=9)
    address_width: int = Field(default=12, ge=1)
    history_uri_scheme: str = "deoptlens-function-history"
