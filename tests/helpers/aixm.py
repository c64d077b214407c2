"""Builders for small AIXM 5.1 basic message documents."""

from __future__ import annotations

from itertools import count

_ids = count(1)

MESSAGE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<message:AIXMBasicMessage
    xmlns:message="http://www.aixm.aero/schema/5.1/message"
    xmlns:aixm="http://www.aixm.aero/schema/5.1"
    xmlns:gml="http://www.opengis.net/gml/3.2"
    gml:id="msg-1">
{members}
</message:AIXMBasicMessage>
"""


def aixm_message(*members: str) -> bytes:
    return MESSAGE_TEMPLATE.format(members="\n".join(members)).encode()


def _member(kind: str, body: str, *, interpretation: str = "BASELINE") -> str:
    ident = next(_ids)
    return f"""<message:hasMember>
  <aixm:{kind} gml:id="{kind.lower()}-{ident}">
    <aixm:timeSlice>
      <aixm:{kind}TimeSlice gml:id="{kind.lower()}-{ident}-ts">
        <aixm:interpretation>{interpretation}</aixm:interpretation>
        {body}
      </aixm:{kind}TimeSlice>
    </aixm:timeSlice>
  </aixm:{kind}>
</message:hasMember>"""


def _point(tag: str, point: str, latitude: float, longitude: float) -> str:
    return (
        f'<aixm:{tag}><aixm:{point} gml:id="pt-{next(_ids)}">'
        f"<gml:pos>{latitude} {longitude}</gml:pos></aixm:{point}></aixm:{tag}>"
    )


def airport(designator: str, latitude: float, longitude: float, *, icao: str | None = None) -> str:
    icao_element = (
        f"<aixm:locationIndicatorICAO>{icao}</aixm:locationIndicatorICAO>" if icao else ""
    )
    return _member(
        "AirportHeliport",
        f"<aixm:designator>{designator}</aixm:designator>{icao_element}"
        + _point("ARP", "ElevatedPoint", latitude, longitude),
    )


def vor(designator: str, frequency: str, latitude: float, longitude: float) -> str:
    return _member(
        "VOR",
        f"<aixm:designator>{designator}</aixm:designator>"
        f'<aixm:frequency uom="MHZ">{frequency}</aixm:frequency>'
        + _point("location", "ElevatedPoint", latitude, longitude),
    )


def ndb(designator: str, frequency: str, latitude: float, longitude: float) -> str:
    return _member(
        "NDB",
        f"<aixm:designator>{designator}</aixm:designator>"
        f'<aixm:frequency uom="KHZ">{frequency}</aixm:frequency>'
        + _point("location", "ElevatedPoint", latitude, longitude),
    )


def designated_point(designator: str, latitude: float, longitude: float) -> str:
    return _member(
        "DesignatedPoint",
        f"<aixm:designator>{designator}</aixm:designator>"
        + _point("location", "Point", latitude, longitude),
    )


def feature(kind: str, body: str = "", *, interpretation: str = "BASELINE") -> str:
    return _member(kind, body, interpretation=interpretation)
