from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from skitrack.core.constants import API_LINKS

DataT = TypeVar("DataT")


class Link(BaseModel):
    href: str
    method: str


class Greeting(BaseModel):
    message: str


class Envelope(BaseModel, Generic[DataT]):
    """Response body: navigation links under `_links`, payload under `data`."""

    links: dict[str, Link] = Field(alias="_links")
    data: DataT

    model_config = ConfigDict(populate_by_name=True)


def build_links(self_href: str, self_method: str = "GET") -> dict[str, Link]:
    links = {"self": Link(href=self_href, method=self_method)}
    for name, (href, method) in API_LINKS.items():
        links[name] = Link(href=href, method=method)
    return links
