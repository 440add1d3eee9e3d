"""GraphQL image type.

Catalogue images are stored as a URL template plus the list of versions
that were rendered, e.g. ``https://img.example/abc/:version.jpg`` with
``["square", "tall"]``.
"""

from __future__ import annotations

from typing import Annotated

import strawberry

VERSION_PLACEHOLDER = ":version"
DEFAULT_IMAGE_VERSION = "square"


@strawberry.type(name="Image", description="An image rendered in one or more versions")
class ImageType:
    url_template: strawberry.Private[str]
    versions: list[str] = strawberry.field(description="Rendered versions of the image")

    @strawberry.field(description="URL of one rendered version")
    def url(
        self,
        version: Annotated[
            str, strawberry.argument(description="Version to link; falls back to the first one")
        ] = DEFAULT_IMAGE_VERSION,
    ) -> str | None:
        if self.versions and version not in self.versions:
            version = self.versions[0]
        return self.url_template.replace(VERSION_PLACEHOLDER, version)

    @classmethod
    def from_template(cls, url_template: str | None, versions: list[str]) -> ImageType | None:
        if not url_template:
            return None
        return cls(url_template=url_template, versions=list(versions))


__all__ = ["ImageType"]
