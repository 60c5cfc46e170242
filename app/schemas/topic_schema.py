"""DSA topic schema."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class Topic(BaseModel):
    """Static reference entry shown on the topic list."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    savage_intro: str
    difficulty: Literal["Beginner", "Intermediate", "Advanced"]
    icon: str
