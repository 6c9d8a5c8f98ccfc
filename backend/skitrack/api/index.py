from fastapi import APIRouter

from skitrack.schemas.envelope import Envelope, Greeting, build_links

router = APIRouter(prefix="/api", tags=["index"])


@router.get("/", response_model=Envelope[Greeting])
def index():
    return Envelope[Greeting](
        links=build_links("/api"),
        data=Greeting(message="Hello, world!"),
    )
