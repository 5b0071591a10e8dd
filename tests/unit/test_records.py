"""Tests for version-dispatched record builders."""

import pytest

from cwrcodec.formatting import SUBMITTER_CODE_WIDTH_V2, SUBMITTER_CODE_WIDTH_V3
from cwrcodec.models import (
    AlternateTitle,
    CWRVersion,
    Performer,
    Recording,
    TransactionType,
)
from cwrcodec.records import (
    build_alt,
    build_grh,
    build_grt,
    build_hdr,
    build_opu,
    build_owr,
    build_per,
    build_pwr,
    build_rec,
    build_spt,
    build_spu,
    build_swr,
    build_swt,
    build_trl,
    build_wrk,
    render,
)

V21, V22, V30, V31 = CWRVersion.V21, CWRVersion.V22, CWRVersion.V30, CWRVersion.V31
ALL_VERSIONS = [V21, V22, V30, V31]


def _by_family(v2: int, v3: int) -> dict[CWRVersion, int]:
    return {V21: v2, V22: v2, V30: v3, V31: v3}


# ---------------------------------------------------------------------------
# Record widths
# ---------------------------------------------------------------------------

_EXPECTED_LENGTHS = {
    "HDR": _by_family(101, 195),
    "GRH": _by_family(28, 26),
    "GRT": _by_family(37, 24),
    "TRL": _by_family(24, 24),
    "WRK": _by_family(251, 209),
    "SPU": _by_family(183, 112),
    "SPT": _by_family(58, 99),
    "SWR": _by_family(180, 134),
    "SWT": _by_family(52, 99),
    "OWR": _by_family(180, 180),
    "OPU": _by_family(183, 183),
    "ALT": _by_family(83, 83),
    "PER": _by_family(118, 126),
    "PWR": {V21: 110, V22: 112, V30: 73, V31: 73},
    "REC": {V21: 266, V22: 540, V30: 346, V31: 346},
}


@pytest.fixture
def all_records(context_for, make_work, make_writer, make_publisher):
    """Render one record of every type for a given version."""

    def _render(version: CWRVersion) -> dict[str, str]:
        context = context_for(version)
        writer = make_writer(publisher_code="P001", ipi_name_number="12345678956")
        publisher = make_publisher()
        work = make_work(iswc="T-123456789-2", duration=125, language="EN")
        return {
            "HDR": build_hdr(context),
            "GRH": build_grh(context),
            "GRT": build_grt(context, 1, 10),
            "TRL": build_trl(context, 1, 12),
            "WRK": build_wrk(context, work, 1),
            "SPU": build_spu(context, publisher, 1, 1),
            "SPT": build_spt(context, publisher, 1, 2),
            "SWR": build_swr(context, writer, 1, 3),
            "SWT": build_swt(context, writer, 1, 4),
            "PWR": build_pwr(context, writer, publisher, 1, 5),
            "OWR": build_owr(context, make_writer("W002", controlled=False), 1, 6),
            "OPU": build_opu(context, (50.0, 50.0, 50.0), 1, 7),
            "ALT": build_alt(context, AlternateTitle("YESTERDAY DUB"), 1, 8),
            "PER": build_per(context, Performer("BEATLES"), 1, 9),
            "REC": build_rec(
                context,
                Recording(isrc="GB-AYE-65-00001", title="YESTERDAY", duration=125),
                work.work_code,
                1,
                10,
            ),
        }

    return _render


@pytest.mark.unit
@pytest.mark.parametrize("version", ALL_VERSIONS)
def test_record_lengths(all_records, version: CWRVersion) -> None:
    """Test every record has the exact layout width for its version."""
    records = all_records(version)

    for record_type, lengths in _EXPECTED_LENGTHS.items():
        line = records[record_type]
        assert len(line) == lengths[version], f"{record_type} {version.label}"
        assert "\n" not in line and "\r" not in line


@pytest.mark.unit
@pytest.mark.parametrize("version", ALL_VERSIONS)
def test_record_prefixes(all_records, version: CWRVersion) -> None:
    """Test records start with their type and sequence numbers."""
    records = all_records(version)

    assert records["SPU"][:19] == "SPU0000000100000001"
    assert records["SWT"][:19] == "SWT0000000100000004"
    assert records["REC"][:19] == "REC0000000100000010"


# ---------------------------------------------------------------------------
# HDR / GRH / GRT / TRL
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_hdr_v2_uses_last_nine_ipi_digits(context_for) -> None:
    """Test 2.x headers identify the sender by IPI."""
    line = build_hdr(context_for(V21))

    assert line[:5] == "HDRPB"
    assert line[5:14] == "345678956"
    assert line[14:59].rstrip() == "ACME MUSIC PUBLISHING"
    assert line[59:64] == "01.10"
    assert line[64:72] == "20241201"
    assert line[72:78] == "143005"


@pytest.mark.unit
@pytest.mark.parametrize(("version", "label"), [(V30, "3.0000"), (V31, "3.1000")])
def test_hdr_v3_carries_version_and_software(context_for, version, label: str) -> None:
    """Test 3.x headers carry the submitter code and software fields."""
    context = context_for(version)
    line = build_hdr(context)

    assert line[5:9] == "ABCD"
    assert line[102:108] == label
    assert line[108:138].rstrip() == "CWRCODEC"
    assert line[138:168].rstrip() == "0.1.0"
    assert line[168:195].rstrip() == context.filename


@pytest.mark.unit
def test_submitter_code_width_follows_formatter() -> None:
    """Test submitter code limits come from the formatter's width table."""
    assert V21.submitter_code_width == SUBMITTER_CODE_WIDTH_V2 == 3
    assert V22.submitter_code_width == SUBMITTER_CODE_WIDTH_V2
    assert V30.submitter_code_width == SUBMITTER_CODE_WIDTH_V3 == 4
    assert V31.submitter_code_width == SUBMITTER_CODE_WIDTH_V3


@pytest.mark.unit
def test_codes_are_written_upper_case(context_for, make_work) -> None:
    """Test work and language codes reach the wire upper-cased."""
    work = make_work("wk-42", language="en", version_type="mod")
    line = build_wrk(context_for(V21), work, 1)

    assert line[79:81] == "EN"
    assert line[81:95].rstrip() == "WK-42"
    assert line[142:145] == "MOD"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("version", "group_version"),
    [(V21, "02.10"), (V22, "02.20"), (V30, "03.00"), (V31, "03.10")],
)
def test_grh_version(context_for, version, group_version: str) -> None:
    """Test the group header names transaction type and version."""
    line = build_grh(context_for(version, TransactionType.REV))

    assert line[:6] == "GRHREV"
    assert line[6:11] == "00001"
    assert line[11:16] == group_version


@pytest.mark.unit
def test_grt_and_trl_counts(context_for) -> None:
    """Test trailers carry group id, transaction and record counts."""
    context = context_for(V21)

    grt = build_grt(context, 3, 20)
    trl = build_trl(context, 3, 22)

    assert grt[:24] == "GRT000010000000300000020"
    assert grt[24:] == "   0000000000"
    assert trl == "TRL000010000000300000022"


# ---------------------------------------------------------------------------
# Work record
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("version", "transaction_type", "record_type"),
    [
        (V21, TransactionType.NWR, "NWR"),
        (V22, TransactionType.REV, "REV"),
        (V30, TransactionType.NWR, "WRK"),
        (V31, TransactionType.REV, "WRK"),
    ],
)
def test_work_record_type(context_for, make_work, version, transaction_type, record_type) -> None:
    """Test NWR/REV before 3.0 and WRK from 3.0 on."""
    line = build_wrk(context_for(version, transaction_type), make_work(), 1)

    assert line[:3] == record_type


@pytest.mark.unit
@pytest.mark.parametrize("version", ALL_VERSIONS)
def test_work_record_fields(context_for, make_work, version) -> None:
    """Test work fields sit at the same offsets in every version."""
    work = make_work(
        "WK-42",
        title="Yesterday",
        iswc="T-123.456.789-2",
        duration=125,
        language="EN",
        recorded_indicator="Y",
        version_type="MOD",
    )
    line = build_wrk(context_for(version), work, 7)

    assert line[3:11] == "00000007"
    assert line[11:19] == "00000000"
    assert line[19:79].rstrip() == "YESTERDAY"
    assert line[79:81] == "EN"
    assert line[81:95].rstrip() == "WK-42"
    assert line[95:106] == "T1234567892"
    assert line[126:129] == "UNC"
    assert line[129:135] == "000205"
    assert line[135] == "Y"
    assert line[142:145] == "MOD"


@pytest.mark.unit
def test_work_title_truncated(context_for, make_work) -> None:
    """Test overlong titles are cut at 60 characters."""
    line = build_wrk(context_for(V21), make_work(title="X" * 80), 1)

    assert line[19:79] == "X" * 60
    assert len(line) == 251


# ---------------------------------------------------------------------------
# Party records
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_swr_v2_inline_shares(context_for, make_writer) -> None:
    """Test 2.x writer records embed society and share per right."""
    writer = make_writer(pr_society="PRS", pr_share=50, mr_share=25.5, sr_share=0)
    line = build_swr(context_for(V21), writer, 1, 1)

    assert line[19:28] == "W001     "
    assert line[28:73].rstrip() == "LENNON"
    assert line[73:103].rstrip() == "JOHN"
    assert line[104:106] == "CA"
    assert line[126:150] == "05205000" + "   02550" + "   00000"


@pytest.mark.unit
def test_swt_v3_territory(context_for, make_writer) -> None:
    """Test 3.x territory records carry 4-digit societies and a status trailer."""
    writer = make_writer(pr_society="PRS", pr_share=50, mr_share=50, sr_share=50)
    line = build_swt(context_for(V31), writer, 1, 2)

    assert line[19:22] == "001"
    assert line[22:31] == "W001     "
    assert line[31:46] == "050000500005000"
    assert line[46:51] == "I2136"
    assert line[51:55] == "0052"
    assert line[-4:] == "0000"


@pytest.mark.unit
def test_pwr_v22_appends_publisher_sequence(context_for, make_writer, make_publisher) -> None:
    """Test 2.2 extends the 2.1 link record with the chain sequence."""
    writer = make_writer(publisher_code="P001")
    publisher = make_publisher(chain_sequence=1)

    v21 = build_pwr(context_for(V21), writer, publisher, 1, 3)
    v22 = build_pwr(context_for(V22), writer, publisher, 1, 3)

    assert v22[:110] == v21
    assert v22[110:] == "01"
    assert v21[19:28] == "P001     "
    assert v21[101:110] == "W001     "


@pytest.mark.unit
def test_pwr_v3_keyed_by_chain_sequence(context_for, make_writer, make_publisher) -> None:
    """Test 3.x link records lead with the chain sequence."""
    line = build_pwr(
        context_for(V30), make_writer(), make_publisher(chain_sequence=2), 1, 3
    )

    assert line[19:21] == "02"
    assert line[21:30] == "P001     "
    assert line[30:39] == "W001     "
    assert line[53:57] == "0052"


@pytest.mark.unit
def test_opu_shares(context_for) -> None:
    """Test the unknown publisher record carries the remainder shares."""
    line = build_opu(context_for(V21), (50.0, 25.0, 0.0), 1, 1)

    assert line[:3] == "OPU"
    assert line[75] == "Y"
    assert line[76:78] == "E "
    assert line[115:120] == "05000"
    assert line[123:128] == "02500"
    assert line[131:136] == "00000"


# ---------------------------------------------------------------------------
# Detail records
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_alt_record(context_for) -> None:
    """Test alternate titles carry their type and language."""
    line = build_alt(context_for(V22), AlternateTitle("Hier", "OT", "FR"), 2, 4)

    assert line[:19] == "ALT0000000200000004"
    assert line[19:79].rstrip() == "HIER"
    assert line[79:81] == "OT"
    assert line[81:83] == "FR"


@pytest.mark.unit
def test_per_v3_adds_ipi_and_isni(context_for) -> None:
    """Test 3.x performer records carry IPI and ISNI."""
    performer = Performer("McCartney", "Paul", "12345678956", "0000000121268987")

    v2 = build_per(context_for(V21), performer, 1, 1)
    v3 = build_per(context_for(V30), performer, 1, 1)

    assert v2[19:64].rstrip() == "MCCARTNEY"
    assert v2[94:].strip() == ""
    assert v3[94:105] == "12345678956"
    assert v3[105:121] == "0000000121268987"


@pytest.mark.unit
def test_rec_fields_grow_by_version(context_for) -> None:
    """Test REC carries ISRC in 2.1 and adds titles and work code in 2.2."""
    recording = Recording(
        isrc="GB-AYE-65-00001",
        title="Yesterday",
        release_date="1965-09-13",
        duration=125,
        record_label="Parlophone",
    )

    v21 = build_rec(context_for(V21), recording, "WK001", 1, 1)
    v22 = build_rec(context_for(V22), recording, "WK001", 1, 1)
    v3 = build_rec(context_for(V30), recording, "WK001", 1, 1)

    assert v21[19:27] == "19650913"
    assert v21[87:93] == "000205"
    assert v21[249:261] == "GBAYE6500001"
    assert v22[:266] == v21
    assert v22[266:326].rstrip() == "YESTERDAY"
    assert v22[446:506].rstrip() == "PARLOPHONE"
    assert v22[526:540].rstrip() == "WK001"
    assert v3[19:27] == "19650913"
    assert v3[27:33] == "000205"
    assert v3[33:45] == "GBAYE6500001"
    assert v3[45:105].rstrip() == "YESTERDAY"
    assert v3[332:346].rstrip() == "WK001"


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_render_requires_layout_for_version(context_for) -> None:
    """Test a table without the context version is rejected."""
    table = {V21: lambda context: "X"}

    assert render(table, context_for(V21)) == "X"
    with pytest.raises(ValueError, match="3.1"):
        render(table, context_for(V31))
