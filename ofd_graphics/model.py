"""Dataclasses describing the OFD document tree assembled in memory."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple, Union

from .identifiers import STID

__all__ = [
    "Box",
    "PageArea",
    "DocInfo",
    "DocBody",
    "OFD",
    "CommonData",
    "PageRef",
    "Document",
    "MultiMedia",
    "MultiMedias",
    "DrawParam",
    "DrawParams",
    "Resource",
    "Res",
    "ImageObject",
    "PageContent",
    "format_number",
]

Color = Tuple[int, int, int]


def format_number(value: float) -> str:
    """Render *value* the way OFD boxes and matrices expect (no trailing zeros)."""

    text = f"{float(value):.3f}".rstrip("0").rstrip(".")
    return "0" if text in {"", "-0"} else text


@dataclass(frozen=True, slots=True)
class Box:
    """Rectangle ``x y width height`` in millimetres."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Box width and height must be positive, got {self.width}x{self.height}"
            )

    def __str__(self) -> str:
        return " ".join(format_number(v) for v in (self.x, self.y, self.width, self.height))


@dataclass(frozen=True, slots=True)
class PageArea:
    """Physical and application box of a page."""

    physical_box: Box
    application_box: Optional[Box] = None

    @classmethod
    def of_size(cls, width: float, height: float) -> "PageArea":
        box = Box(0, 0, width, height)
        return cls(physical_box=box, application_box=box)

    @property
    def box(self) -> Box:
        return self.application_box or self.physical_box


@dataclass(slots=True)
class DocInfo:
    doc_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    creation_date: date = field(default_factory=date.today)
    creator: Optional[str] = None
    creator_version: Optional[str] = None


@dataclass(slots=True)
class DocBody:
    doc_info: DocInfo
    doc_root: str = "Doc_0/Document.xml"


@dataclass(slots=True)
class OFD:
    """Entry file of the package (``OFD.xml``)."""

    bodies: List[DocBody] = field(default_factory=list)
    version: str = "1.0"
    doc_type: str = "OFD"

    def add_doc_body(self, body: DocBody) -> "OFD":
        self.bodies.append(body)
        return self


@dataclass(slots=True)
class CommonData:
    page_area: PageArea
    max_unit_id: int = 0
    public_res: List[str] = field(default_factory=list)

    def add_public_res(self, location: str) -> "CommonData":
        self.public_res.append(location)
        return self


@dataclass(frozen=True, slots=True)
class PageRef:
    """Entry of the document page index."""

    id: STID
    base_loc: str


@dataclass(slots=True)
class Document:
    """Root of ``Doc_0/Document.xml``."""

    common_data: CommonData
    pages: List[PageRef] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class MultiMedia:
    """Media resource descriptor; immutable once registered."""

    id: STID
    media_file: str
    type: str = "Image"
    format: str = "PNG"


@dataclass(slots=True)
class MultiMedias:
    items: Dict[int, MultiMedia] = field(default_factory=dict)

    def add(self, media: MultiMedia) -> None:
        self.items[int(media.id)] = media

    def __len__(self) -> int:
        return len(self.items)


@dataclass(slots=True)
class DrawParam:
    """Reusable drawing parameters (line style and colours)."""

    obj_id: Optional[STID] = None
    relative: Optional[STID] = None
    line_width: float = 0.353
    join: str = "Miter"
    cap: str = "Butt"
    dash_offset: float = 0.0
    dash_pattern: Optional[Tuple[float, ...]] = None
    miter_limit: float = 3.528
    fill_color: Optional[Color] = None
    stroke_color: Optional[Color] = None


@dataclass(slots=True)
class DrawParams:
    items: Dict[int, DrawParam] = field(default_factory=dict)

    def add(self, param: DrawParam) -> None:
        if param.obj_id is None:
            raise ValueError("DrawParam must carry an object identifier before registration")
        self.items[int(param.obj_id)] = param

    def __len__(self) -> int:
        return len(self.items)


Resource = Union[MultiMedias, DrawParams]


@dataclass(slots=True)
class Res:
    """Public resource listing (``Doc_0/PublicRes.xml``)."""

    base_loc: str = "Res"
    resources: List[Resource] = field(default_factory=list)

    def add_resource(self, resource: Resource) -> "Res":
        self.resources.append(resource)
        return self


@dataclass(frozen=True, slots=True)
class ImageObject:
    """Placement of a media resource on a page."""

    id: STID
    resource_id: STID
    boundary: Box

    @property
    def ctm(self) -> Tuple[float, float, float, float, float, float]:
        return (self.boundary.width, 0.0, 0.0, self.boundary.height, 0.0, 0.0)


@dataclass(slots=True)
class PageContent:
    """Body of ``Pages/Page_N/Content.xml``."""

    area: Optional[PageArea] = None
    layer_id: Optional[STID] = None
    objects: List[ImageObject] = field(default_factory=list)
