"""Tests for share calculation."""

import pytest

from cwrcodec.engine import (
    RightShares,
    ShareInput,
    calculate_ownership,
    calculate_shares,
    uncontrolled_publisher_shares,
)


@pytest.mark.unit
def test_controlled_writer_split_with_publisher(make_writer, make_publisher) -> None:
    """Test a controlled writer cedes the manuscript share to the publisher."""
    writer = make_writer(publisher_code="P001")
    result = calculate_shares([ShareInput(writer, 100)], [make_publisher()])

    assert result.writers[0].pr_share == 50.0
    assert result.publishers[0].pr_share == 50.0
    assert result.publishers[0].chain_sequence == 1
    assert result.totals == RightShares(100.0, 100.0, 100.0)
    assert result.controlled.pr == 100.0
    assert result.warnings == []


@pytest.mark.unit
def test_custom_manuscript_share(make_writer, make_publisher) -> None:
    """Test the publisher part follows the manuscript share."""
    writer = make_writer(publisher_code="P001")
    result = calculate_shares(
        [ShareInput(writer, 100, manuscript_share=33.333)], [make_publisher()]
    )

    assert result.writers[0].mr_share == 66.67
    assert result.publishers[0].mr_share == 33.33


@pytest.mark.unit
def test_publisher_shares_accumulate(make_writer, make_publisher) -> None:
    """Test writers linked to one publisher add up on that publisher."""
    entries = [
        ShareInput(make_writer("W1", publisher_code="P2"), 50),
        ShareInput(make_writer("W2", publisher_code="P1"), 30),
        ShareInput(make_writer("W3", publisher_code="P2"), 20),
    ]
    publishers = [make_publisher("P1"), make_publisher("P2")]

    result = calculate_shares(entries, publishers)

    assert [p.code for p in result.publishers] == ["P2", "P1"]
    assert [p.chain_sequence for p in result.publishers] == [1, 2]
    assert result.publishers[0].pr_share == 35.0
    assert result.publishers[1].pr_share == 15.0


@pytest.mark.unit
def test_uncontrolled_writer_keeps_full_share(make_writer) -> None:
    """Test uncontrolled writers are not split."""
    writer = make_writer(controlled=False)
    result = calculate_shares([ShareInput(writer, 100)], [])

    assert result.writers[0].pr_share == 100
    assert result.publishers == []
    assert result.controlled.pr == 0


@pytest.mark.unit
def test_warnings(make_writer, make_publisher) -> None:
    """Test share inconsistencies are reported, not raised."""
    entries = [
        ShareInput(make_writer("W1", publisher_code="NOPE"), 60),
        ShareInput(make_writer("W2", controlled=False), 30),
    ]

    result = calculate_shares(entries, [make_publisher()])

    assert "Writer shares total 90.00%, expected 100%" in result.warnings
    assert "Writer W1 linked to unknown publisher NOPE" in result.warnings
    assert "Total PR shares = 60.00%, expected 100%" in result.warnings


@pytest.mark.unit
def test_calculate_ownership(make_writer, make_publisher) -> None:
    """Test ownership counts controlled writers and all publishers."""
    writers = [make_writer("W1", pr_share=25), make_writer("W2", pr_share=50, controlled=False)]
    publishers = [make_publisher(pr_share=25)]

    assert calculate_ownership(writers, publishers).pr == 50


@pytest.mark.unit
def test_uncontrolled_publisher_shares(make_work, make_writer) -> None:
    """Test the OPU remainder is capped at 50 per right."""
    work = make_work(writers=[make_writer(pr_share=50, mr_share=80, sr_share=110)])

    assert uncontrolled_publisher_shares(work) == RightShares(50, 20, -10)
    assert uncontrolled_publisher_shares(work).any_positive()
