"""Construct individual OFD XML parts from the document tree."""

from __future__ import annotations

from typing import Optional
from xml.etree.ElementTree import Element, SubElement, tostring

from ..model import (
    CommonData,
    Document,
    DrawParam,
    DrawParams,
    MultiMedias,
    OFD,
    PageArea,
    PageContent,
    Res,
    format_number,
)
from .namespaces import OFD_PREFIX

__all__ = [
    "build_content_xml",
    "build_document_xml",
    "build_ofd_xml",
    "build_public_res_xml",
    "serialize",
]


def serialize(element: Element) -> bytes:
    return tostring(element, encoding="utf-8", xml_declaration=True)


def _tag(name: str) -> str:
    return f"{OFD_PREFIX}{name}"


def _text(parent: Element, name: str, value: object) -> Element:
    child = SubElement(parent, _tag(name))
    child.text = str(value)
    return child


def _color(parent: Element, name: str, value: Optional[tuple[int, int, int]]) -> None:
    if value is None:
        return
    SubElement(parent, _tag(name), {"Value": " ".join(str(int(c)) for c in value)})


def _page_area(parent: Element, name: str, area: PageArea) -> Element:
    element = SubElement(parent, _tag(name))
    _text(element, "PhysicalBox", area.physical_box)
    if area.application_box is not None:
        _text(element, "ApplicationBox", area.application_box)
    return element


def build_ofd_xml(ofd: OFD) -> bytes:
    root = Element(_tag("OFD"), {"Version": ofd.version, "DocType": ofd.doc_type})
    for body in ofd.bodies:
        body_el = SubElement(root, _tag("DocBody"))
        info = body.doc_info
        info_el = SubElement(body_el, _tag("DocInfo"))
        _text(info_el, "DocID", info.doc_id)
        _text(info_el, "CreationDate", info.creation_date.isoformat())
        if info.creator:
            _text(info_el, "Creator", info.creator)
        if info.creator_version:
            _text(info_el, "CreatorVersion", info.creator_version)
        _text(body_el, "DocRoot", body.doc_root)
    return serialize(root)


def _common_data(parent: Element, cdata: CommonData) -> None:
    element = SubElement(parent, _tag("CommonData"))
    _text(element, "MaxUnitID", cdata.max_unit_id)
    _page_area(element, "PageArea", cdata.page_area)
    for location in cdata.public_res:
        _text(element, "PublicRes", location)


def build_document_xml(document: Document) -> bytes:
    root = Element(_tag("Document"))
    _common_data(root, document.common_data)
    pages_el = SubElement(root, _tag("Pages"))
    for page in document.pages:
        SubElement(pages_el, _tag("Page"), {"ID": str(page.id), "BaseLoc": page.base_loc})
    return serialize(root)


def _draw_param(parent: Element, param: DrawParam) -> None:
    attrs = {
        "ID": str(param.obj_id),
        "LineWidth": format_number(param.line_width),
        "Join": param.join,
        "Cap": param.cap,
        "DashOffset": format_number(param.dash_offset),
        "MiterLimit": format_number(param.miter_limit),
    }
    if param.relative is not None:
        attrs["Relative"] = str(param.relative)
    if param.dash_pattern:
        attrs["DashPattern"] = " ".join(format_number(v) for v in param.dash_pattern)
    element = SubElement(parent, _tag("DrawParam"), attrs)
    _color(element, "FillColor", param.fill_color)
    _color(element, "StrokeColor", param.stroke_color)


def build_public_res_xml(res: Res) -> bytes:
    root = Element(_tag("Res"), {"BaseLoc": res.base_loc})
    for resource in res.resources:
        if isinstance(resource, MultiMedias):
            container = SubElement(root, _tag("MultiMedias"))
            for media in resource.items.values():
                media_el = SubElement(
                    container,
                    _tag("MultiMedia"),
                    {"ID": str(media.id), "Type": media.type, "Format": media.format},
                )
                _text(media_el, "MediaFile", media.media_file)
        elif isinstance(resource, DrawParams):
            container = SubElement(root, _tag("DrawParams"))
            for param in resource.items.values():
                _draw_param(container, param)
        else:
            raise TypeError(f"Unsupported resource manifest: {type(resource)!r}")
    return serialize(root)


def build_content_xml(content: PageContent) -> bytes:
    root = Element(_tag("Page"))
    if content.area is not None:
        _page_area(root, "Area", content.area)
    if content.layer_id is not None:
        content_el = SubElement(root, _tag("Content"))
        layer = SubElement(content_el, _tag("Layer"), {"ID": str(content.layer_id)})
        for obj in content.objects:
            SubElement(
                layer,
                _tag("ImageObject"),
                {
                    "ID": str(obj.id),
                    "ResourceID": str(obj.resource_id),
                    "Boundary": str(obj.boundary),
                    "CTM": " ".join(format_number(v) for v in obj.ctm),
                },
            )
    return serialize(root)
