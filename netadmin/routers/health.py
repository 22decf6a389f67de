from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["monitoring"])


@router.get("/health", response_class=PlainTextResponse)
def health():
    return PlainTextResponse("OK\n", headers={"Cache-Control": "no-cache"})
