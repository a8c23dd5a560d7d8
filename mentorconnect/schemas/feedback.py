from pydantic import BaseModel, Field
from typing import Optional

# ======================
# FEEDBACK FORM MODELS
# ======================

class FeedbackFormUpdate(BaseModel):
    """Partial update; omitted fields keep their current value. Rating 0 clears the stars."""
    rating: Optional[int] = Field(None, ge=0, le=5)
    comment: Optional[str] = Field(None, max_length=1000)
