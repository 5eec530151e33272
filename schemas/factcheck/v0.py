from pydantic import BaseModel, ConfigDict
from schemas.registry import register

VERSION = "v0"
MODULE = "factcheck"

@register(MODULE, VERSION)
class FactCheckBase(BaseModel):
    # Unknown keys from the model are dropped, not rejected.
    model_config = ConfigDict(extra="ignore")
