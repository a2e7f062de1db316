from fastapi import APIRouter, Response
from .. import schemas, utils
from ..config import settings

router = APIRouter(tags=["auth"])


def _cookie_flags() -> dict:
    if settings.is_production:
        return {"secure": True, "samesite": "none"}
    return {"secure": False, "samesite": "strict"}


@router.post("/jwt", response_model=schemas.Success)
def issue_token(user: schemas.Identity, response: Response):
    token = utils.create_access_token(user.model_dump(mode="json"))
    response.set_cookie(
        key=settings.TOKEN_COOKIE,
        value=token,
        httponly=True,
        **_cookie_flags(),
    )
    return {"success": True}


@router.post("/logout", response_model=schemas.Success)
def logout(response: Response):
    response.delete_cookie(key=settings.TOKEN_COOKIE, httponly=True, **_cookie_flags())
    return {"success": True}
