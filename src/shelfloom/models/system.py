"""Pydantic models for instance information and the API documentation listing."""

from typing import Any

from pydantic import Field, RootModel

from ..version import BookStackVersion
from .base import ApiModel


class SystemInfo(ApiModel):
    version: str
    instance_id: str
    app_name: str
    app_logo: str | None = None
    base_url: str

    @property
    def bookstack_version(self) -> BookStackVersion:
        """The parsed ``version``, for comparisons such as feature checks."""
        return BookStackVersion.parse(self.version)


class ApiDoc(ApiModel):
    """Description of one API endpoint as published by ``docs.json``."""

    name: str
    uri: str
    method: str
    controller: str
    controller_method: str
    controller_method_kebab: str
    description: str | None = None
    body_params: dict[str, list[Any]] | list[Any] | None = None
    example_request: str | None = None
    example_response: str | None = None


class ApiDocResult(RootModel[dict[str, list[ApiDoc]]]):
    """Endpoint descriptions grouped by resource name."""

    root: dict[str, list[ApiDoc]] = Field(default_factory=dict)

    def __getitem__(self, group: str) -> list[ApiDoc]:
        return self.root[group]

    def groups(self) -> list[str]:
        return list(self.root)
