from pydantic import BaseModel


class CaptchaChallengeResponse(BaseModel):
    a: int
    b: int
    question: str
