from __future__ import annotations

import pytest

from airac_updater.adapters.euroscope import (
    parse_sector_file,
    read_sector_file,
    serialize_sector_file,
)
from airac_updater.common.errors import SectorParseError
from airac_updater.domain.model import Coordinate, SectionKind, SectorNdb


def test_unchanged_file_round_trips(sector_text: str) -> None:
    assert serialize_sector_file(parse_sector_file(sector_text)) == sector_text


def test_decodes_typed_sections(sector_text: str) -> None:
    sector = parse_sector_file(sector_text)

    assert sector.name == "Langen FIR Sample"
    assert [vor.designator for vor in sector.vors] == ["FFM", "SPE"]
    assert sector.vors[0].frequency == "114.200"
    assert sector.vors[0].comment == "; Frankfurt"
    assert sector.vors[1].leading_lines == ["; Spessart"]
    assert [ndb.designator for ndb in sector.ndbs] == ["CHA"]
    assert [fix.designator for fix in sector.fixes] == ["ANEKI", "CINDY"]
    eddf = sector.airports[0]
    assert (eddf.designator, eddf.frequency, eddf.ctr_airspace) == ("EDDF", "118.780", "C")
    assert eddf.coordinate.latitude == pytest.approx(50 + 1 / 60 + 59 / 3600)
    assert [section.kind for section in sector.sections] == [
        SectionKind.INFO,
        SectionKind.VOR,
        SectionKind.NDB,
        SectionKind.FIXES,
        SectionKind.AIRPORT,
        SectionKind.OTHER,
    ]


def test_only_coordinates_change_on_update(sector_text: str) -> None:
    sector = parse_sector_file(sector_text)
    sector.vors[0].coordinate = Coordinate(50.5, 8.25)

    lines = serialize_sector_file(sector).splitlines()

    assert "FFM 114.200 N050.30.00.000 E008.15.00.000 ; Frankfurt" in lines
    assert "SPE 113.700 N049.51.38.000 E009.20.54.000" in lines
    assert "EDGG_CTR N050.00.00.000 E008.00.00.000 N050.10.00.000 E008.10.00.000" in lines


def test_missing_typed_section_is_appended() -> None:
    sector = parse_sector_file("[INFO]\nTest\n\n[VOR]\nFFM 114.200 N050.03.12.000 E008.38.15.000\n")
    sector.ndbs.append(
        SectorNdb(designator="CHA", coordinate=Coordinate(49.5, 8.0), frequency="345.000")
    )

    text = serialize_sector_file(sector)

    assert text.endswith("E008.38.15.000\n\n[NDB]\nCHA 345.000 N049.30.00.000 E008.00.00.000\n")


def test_preserves_crlf_and_missing_final_newline() -> None:
    text = "[INFO]\r\nTest\r\n[FIXES]\r\nANEKI N050.05.00.000 E008.45.00.000"

    assert serialize_sector_file(parse_sector_file(text)) == text


def test_falls_back_to_latin1() -> None:
    data = "; M\xfcnchen\n[INFO]\nTest\n".encode("latin-1")

    sector = read_sector_file(data)

    assert sector.encoding == "latin-1"
    assert sector.preamble == ["; M\xfcnchen"]


def test_utf8_is_kept() -> None:
    sector = read_sector_file("; M\xfcnchen\n".encode())

    assert sector.encoding == "utf-8"


@pytest.mark.parametrize(
    ("line", "line_number"),
    [
        ("FFM 114.200 N050.03.12.000", 3),
        ("FFM 114.200 X050.03.12.000 E008.38.15.000", 3),
    ],
)
def test_malformed_typed_line_reports_position(line: str, line_number: int) -> None:
    with pytest.raises(SectorParseError) as excinfo:
        parse_sector_file(f"[VOR]\n; comment\n{line}\n")

    assert excinfo.value.line_number == line_number
    assert excinfo.value.line == line
