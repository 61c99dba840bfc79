from pydantic import BaseModel, Field
from typing import Optional, List, Dict


class SessionRecord(BaseModel):
    nodeid: str
    session_id: str
    outcome: str  # "passed" | "failed" | "skipped" | "error"
    url: Optional[str] = None
    title: Optional[str] = None
    viewport: Optional[Dict[str, int]] = None
    console_errors: List[str] = Field(default_factory=list)
    page_errors: List[str] = Field(default_factory=list)
    screenshot_path: Optional[str] = None


class AxeViolation(BaseModel):
    id: str
    impact: Optional[str] = None
    description: str = ""
    help_url: Optional[str] = Field(default=None, alias="helpUrl")
    node_count: int = 0

    model_config = {"populate_by_name": True}
