from fastapi import APIRouter

from jobboard.schemas.captcha import CaptchaChallengeResponse
from jobboard.services import captcha_service

router = APIRouter(prefix="/captcha", tags=["captcha"])


@router.get("", response_model=CaptchaChallengeResponse)
async def new_challenge():
    a, b = captcha_service.generate()
    return CaptchaChallengeResponse(a=a, b=b, question=captcha_service.question(a, b))
