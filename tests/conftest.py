# tests/conftest.py
import pytest

from ar_core.models.annotations import Action, Annotation, Appearance, Geometry, TimeRange


SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<document>
  <annotations>
    <annotation id="annotation_1" type="text" style="popup">
      <TEXT>Hello, world</TEXT>
      <segment>
        <movingRegion type="rect">
          <rectRegion x="10.5" y="20" w="30" h="15" t="0:05"/>
          <rectRegion x="99" y="99" w="1" h="1" t="0:10"/>
        </movingRegion>
      </segment>
      <appearance bgAlpha="0.25" bgColor="0" fgColor="16777215" textSize="3.6"/>
    </annotation>
    <annotation id="annotation_2" type="pause">
      <segment>
        <movingRegion type="rect">
          <rectRegion x="0" y="0" w="0" h="0" t="0:20"/>
          <rectRegion x="0" y="0" w="0" h="0" t="0:25"/>
        </movingRegion>
      </segment>
    </annotation>
    <annotation id="annotation_3" type="highlight">
      <segment>
        <movingRegion type="anchored">
          <anchoredRegion x="50" y="50" w="10" h="10" t="1:00.5"/>
          <anchoredRegion x="50" y="50" w="10" h="10" t="1:30"/>
        </movingRegion>
      </segment>
      <action type="openUrl">
        <url value="https://www.youtube.com/watch?v=abc123&amp;src_vid=abc123#t=1m"/>
      </action>
    </annotation>
    <annotation id="annotation_4" type="branding">
      <TEXT>no region</TEXT>
    </annotation>
  </annotations>
</document>
"""


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def make_annotation():
    """Factory for minimal valid annotations."""
    def _make(start=10.0, end=20.0, **kwargs):
        return Annotation(
            type=kwargs.pop("type", "text"),
            geometry=kwargs.pop("geometry", Geometry(x=10, y=20, width=30, height=15)),
            time_range=TimeRange(start=start, end=end),
            **kwargs,
        )
    return _make


@pytest.fixture
def full_annotation():
    """An annotation using every field the AR format knows."""
    return Annotation(
        type="highlight",
        style="popup",
        geometry=Geometry(x=12.5, y=40, width=20.25, height=10),
        time_range=TimeRange(start=1.5, end=7.25),
        text="Ünïcode, commas; equals= & 100%",
        action=Action.link("https://www.youtube.com/watch?v=other&src_vid=this"),
        appearance=Appearance(bg_opacity=0.8, bg_color=16777215, fg_color=0, text_size=3.6),
    )
