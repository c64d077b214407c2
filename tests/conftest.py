from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.aixm import airport, aixm_message, designated_point, ndb, vor

if TYPE_CHECKING:
    from pathlib import Path

SECTOR_TEXT = """\
; Langen sample pack
#define COLOR_APP 32768

[INFO]
Langen FIR Sample
EDDF_CTR
EDDF
N050.01.59.000
E008.32.35.000
60
40
0
1

[VOR]
FFM 114.200 N050.03.12.000 E008.38.15.000 ; Frankfurt
; Spessart
SPE 113.700 N049.51.38.000 E009.20.54.000

[NDB]
CHA 345.000 N049.55.00.000 E008.01.00.000

[FIXES]
ANEKI N050.05.00.000 E008.45.00.000
CINDY N049.40.00.000 E007.50.00.000

[AIRPORT]
EDDF 118.780 N050.01.59.000 E008.32.35.000 C
EDFE 000.000 N049.57.41.000 E008.38.38.000 D

[ARTCC]
EDGG_CTR N050.00.00.000 E008.00.00.000 N050.10.00.000 E008.10.00.000
"""

ISEC_TEXT = """\
; designator latitude longitude
ANEKI 50.083333 8.75
ANEKI 48.5 11.25 ; same name, far away
DF123 50.1 8.6 extra
"""


def catalog_payload() -> dict[str, object]:
    return {
        "Amdts": [
            {
                "Amdt": 0,
                "Metadata": {
                    "datasets": [
                        {
                            "type": "group",
                            "name": "AIXM",
                            "items": [
                                {
                                    "type": "leaf",
                                    "name": "ED Navaids",
                                    "releases": [
                                        {"type": "OFMX", "filename": "ED_Navaids.ofmx"},
                                        {"type": "AIXM 5.1", "filename": "ED_Navaids.xml"},
                                    ],
                                },
                                {
                                    "type": "group",
                                    "name": "Nested",
                                    "items": [
                                        {
                                            "type": "leaf",
                                            "name": "ED AirportHeliport",
                                            "releases": [
                                                {
                                                    "type": "AIXM 5.1",
                                                    "filename": "ED_AirportHeliport.xml",
                                                }
                                            ],
                                        }
                                    ],
                                },
                                {
                                    "type": "leaf",
                                    "name": "ED Waypoints",
                                    "releases": [
                                        {"type": "AIXM 5.1", "filename": "ED_Waypoints.xml"}
                                    ],
                                },
                            ],
                        }
                    ]
                },
            },
            {
                "Amdt": 1,
                "Metadata": {
                    "datasets": [
                        {
                            "type": "leaf",
                            "name": "ED Navaids",
                            "releases": [{"type": "AIXM 5.1", "filename": "next_navaids.xml"}],
                        }
                    ]
                },
            },
        ]
    }


@pytest.fixture
def sector_text() -> str:
    return SECTOR_TEXT


@pytest.fixture
def isec_text() -> str:
    return ISEC_TEXT


@pytest.fixture
def catalog_json() -> dict[str, object]:
    return catalog_payload()


@pytest.fixture
def navaids_document() -> bytes:
    return aixm_message(
        vor("FFM", "114.2", 50.06, 8.64),
        vor("TAU", "116.7", 50.2, 8.4),
        ndb("CHA", "345", 49.92, 8.02),
    )


@pytest.fixture
def airports_document() -> bytes:
    return aixm_message(
        airport("EDDF", 50.0333, 8.5706, icao="EDDF"),
        airport("EDNY", 47.6713, 9.5115, icao="EDNY"),
        airport("EDXX", 48.0, 9.0),
    )


@pytest.fixture
def waypoints_document() -> bytes:
    return aixm_message(
        designated_point("ANEKI", 50.0834, 8.7501),
        designated_point("DOMUX", 49.5, 8.1),
        designated_point("12345", 49.6, 8.2),
    )


@pytest.fixture
def pack_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "pack"
    directory.mkdir()
    (directory / "EDGG.sct").write_text(SECTOR_TEXT, encoding="utf-8")
    (directory / "ISEC.txt").write_text(ISEC_TEXT, encoding="utf-8")
    (directory / "EDGG.ese").write_text("[POSITIONS]\n", encoding="utf-8")
    (directory / "readme.md").write_text("notes\n", encoding="utf-8")
    return directory
