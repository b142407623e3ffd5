# ar_core/annotations/parsers/legacy_xml.py
# -*- coding: utf-8 -*-
"""
Legacy YouTube annotation XML ingest.

Input shape (read-only, never produced here):
```
<document>
  <annotations>
    <annotation id="..." type="text" style="popup">
      <TEXT>Hello</TEXT>
      <segment>
        <movingRegion type="rect">
          <rectRegion x="10" y="20" w="30" h="15" t="0:05.0"/>
          <rectRegion x="10" y="20" w="30" h="15" t="0:10.0"/>
        </movingRegion>
      </segment>
      <action type="openUrl">
        <url value="https://www.youtube.com/watch?v=abc&src_vid=abc#t=1m"/>
      </action>
      <appearance bgAlpha="0.25" bgColor="0" fgColor="16777215" textSize="3.6"/>
    </annotation>
  </annotations>
</document>
```

Each annotation element becomes an Annotation or is dropped. A bad record
never aborts the batch; only an unparsable document raises.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from lxml import etree as ET

from ...errors import FormatError
from ...models.annotations import Action, Annotation, Appearance, Geometry, TimeRange
from ...models.enums import AnnotationType
from ..utils.timestamps import parse_duration_colon, parse_duration_letters

logger = logging.getLogger(__name__)

# Only links into the video platform itself are honored
DEFAULT_TRUSTED_PREFIX = "https://www.youtube.com/"

TIME_FRAGMENT_PREFIX = "t="

_XML_DECLARATION = re.compile(r"^\s*<\?xml\b[^>]*\?>")


def _parse_document(xml_text: str | bytes) -> ET._Element:
    parser = ET.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=True)
    if isinstance(xml_text, str):
        # Text is already decoded; a declared encoding no longer applies
        xml_text = _XML_DECLARATION.sub("", xml_text.lstrip("\ufeff"), count=1).encode("utf-8")
    try:
        return ET.fromstring(xml_text, parser)
    except (ET.XMLSyntaxError, ValueError) as e:
        raise FormatError(f"Invalid annotation XML: {e}") from e


def ingest_document(xml_text: str | bytes, trusted_prefix: str = DEFAULT_TRUSTED_PREFIX) -> list[Annotation]:
    """
    Parse legacy annotation XML into Annotations.

    Args:
        xml_text: Whole XML document. Bytes are decoded per their XML
            declaration; str is taken as already-decoded text
        trusted_prefix: URL prefix that click actions must start with

    Returns:
        Annotations in document order, unusable records omitted

    Raises:
        FormatError: If the document itself is not well-formed XML
    """
    root = _parse_document(xml_text)

    elements = list(root.iter("annotation"))
    annotations = []
    for element in elements:
        annotation = ingest_one(element, trusted_prefix)
        if annotation is not None:
            annotations.append(annotation)

    logger.info(
        "Ingested %d of %d legacy annotations (%d dropped)",
        len(annotations), len(elements), len(elements) - len(annotations),
    )
    return annotations


def ingest_one(element: ET._Element, trusted_prefix: str = DEFAULT_TRUSTED_PREFIX) -> Optional[Annotation]:
    """
    Convert a single <annotation> element.

    Returns None (drops the record) when it is a pause, has no usable moving
    region, or its geometry/timing cannot be parsed. Never raises for bad data.
    """
    ann_id = element.get("id")

    ann_type = element.get("type")
    if not ann_type or ann_type == AnnotationType.PAUSE.value:
        logger.debug("Dropping annotation %s: type=%r", ann_id, ann_type)
        return None

    regions = _get_regions(element)
    if not regions:
        logger.debug("Dropping annotation %s: no moving region", ann_id)
        return None

    geometry = _get_geometry(regions[0])
    if geometry is None:
        logger.debug("Dropping annotation %s: unusable region geometry", ann_id)
        return None

    time_range = _get_time_range(regions)
    if time_range is None:
        logger.debug("Dropping annotation %s: unusable region timing", ann_id)
        return None

    annotation = Annotation(type=ann_type, geometry=geometry, time_range=time_range)

    style = element.get("style")
    if style is not None:
        annotation.style = style

    text = _get_text(element)
    if text:
        annotation.text = text

    action = _get_action(element, trusted_prefix)
    if action is not None:
        annotation.action = action

    appearance = _get_appearance(element)
    if appearance is not None:
        annotation.appearance = appearance

    return annotation


def _get_regions(element: ET._Element) -> list[ET._Element]:
    moving_region = element.find(".//movingRegion")
    if moving_region is None:
        return []
    region_type = moving_region.get("type")
    if not region_type:
        return []
    # Tag comparison, not a path query: the type attribute is untrusted text
    region_tag = f"{region_type}Region"
    return [el for el in moving_region.iterdescendants() if el.tag == region_tag]


def _parse_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def _get_geometry(region: ET._Element) -> Optional[Geometry]:
    # Only the first region positions the box; later ones just carry timestamps
    values = [_parse_float(region.get(attr)) for attr in ("x", "y", "w", "h")]
    if any(v is None for v in values):
        return None
    x, y, w, h = values
    return Geometry(x=x, y=y, width=w, height=h)


def _get_time_range(regions: list[ET._Element]) -> Optional[TimeRange]:
    try:
        start = parse_duration_colon(regions[0].get("t"))
        end = parse_duration_colon(regions[-1].get("t"))
    except FormatError:
        return None
    return TimeRange(start=start, end=end)


def _get_text(element: ET._Element) -> Optional[str]:
    text_el = element.find(".//TEXT")
    if text_el is None:
        return None
    return "".join(text_el.itertext())


def _get_action(element: ET._Element, trusted_prefix: str) -> Optional[Action]:
    action_el = element.find(".//action")
    if action_el is None:
        return None
    url_el = action_el.find(".//url")
    if url_el is None:
        return None

    href = url_el.get("value")
    if not href or not href.startswith(trusted_prefix):
        logger.debug("Ignoring untrusted action target: %r", href)
        return None

    url = urlsplit(href)
    query = parse_qs(url.query)
    src_vid = query.get("src_vid", [None])[0]
    to_vid = query.get("v", [None])[0]
    if not src_vid or not to_vid:
        return None

    if src_vid != to_vid:
        return Action.link(href)

    # Same video: a timestamp jump; no usable fragment means the start
    seconds = 0
    if url.fragment.startswith(TIME_FRAGMENT_PREFIX):
        seconds = parse_duration_letters(url.fragment[len(TIME_FRAGMENT_PREFIX):])
    return Action.seek(seconds)


def _get_appearance(element: ET._Element) -> Optional[Appearance]:
    appearance_el = element.find(".//appearance")
    if appearance_el is None:
        return None

    appearance = Appearance(
        bg_opacity=_parse_float(appearance_el.get("bgAlpha")),
        bg_color=_parse_color(appearance_el.get("bgColor")),
        fg_color=_parse_color(appearance_el.get("fgColor")),
        text_size=_parse_float(appearance_el.get("textSize")),
    )
    return None if appearance.is_empty() else appearance


def _parse_color(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value, 10)
    except ValueError:
        number = _parse_float(value)
        return int(number) if number is not None and number.is_integer() else None
