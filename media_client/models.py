from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Rendition(BaseModel):
    """A single encoded variant (size/format) of a media asset."""

    model_config = ConfigDict(extra="allow", frozen=True)

    href: Optional[str] = None
    usage: Optional[str] = None
    mimetype: Optional[str] = None
    title: Optional[str] = None
    variant: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    sizeinbytes: Optional[int] = None


class Subject(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    code: Optional[str] = None
    name: Optional[str] = None
    scheme: Optional[str] = None


class Association(BaseModel):
    """
    Media item attached to a document (image, video, ...).

    ``renditions`` maps rendition name (e.g. "thumbnail") to its descriptor.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    uri: Optional[str] = None
    type: Optional[str] = None
    headline: Optional[str] = None
    byline: Optional[str] = None
    description_text: Optional[str] = None
    renditions: Dict[str, Rendition] = Field(default_factory=dict)


class Document(BaseModel):
    """
    Rendered TTNINJS news item as served by the media API.

    Unknown fields are kept (``extra="allow"``) so additions to the API schema
    do not break decoding.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    uri: Optional[str] = None
    type: Optional[str] = None
    version: Optional[str] = None
    versioncreated: Optional[str] = None
    firstcreated: Optional[str] = None
    language: Optional[str] = None
    headline: str = ""
    slugline: Optional[str] = None
    byline: Optional[str] = None
    located: Optional[str] = None
    description_text: Optional[str] = None
    body_text: Optional[str] = None
    body_html5: Optional[str] = None
    subject: List[Subject] = Field(default_factory=list)
    product: List[Dict[str, Any]] = Field(default_factory=list)
    renditions: Dict[str, Rendition] = Field(default_factory=dict)
    associations: Dict[str, Association] = Field(default_factory=dict)
