"""Unit tests for positional/address-join transformers (HK, CH, IT)."""

from __future__ import annotations

from whoisprep.dialects.address import ChTransformer, HkTransformer, ItTransformer


def test_hk_sample_normalizes_sections_addresses_and_names(whois_sample) -> None:
    """HK sample should produce section-prefixed, address-joined canonical lines."""

    assert HkTransformer().transform(whois_sample("hk")).split("\n") == [
        "Domain Name: EXAMPLE.HK",
        "Registrar Name: Example Registrar Ltd.",
        "Registrar Contact Email: support@registrar.hk",
        "Registrar Contact Phone: +852 1234 5678",
        "Registrant Contact Information:",
        "Registrant Company English Name: Example Ltd",
        "Registrant Address: Flat A, 1/F, Example Building, Hong Kong",
        "Registrant Country: Hong Kong",
        "Administrative Contact Information:",
        "Admin Given name: Chan Tai Man",
        "Admin Address: Flat B, Kowloon",
        "Admin Email: admin@example.hk",
        "Technical Contact Information:",
        "Technical Given name: Tech",
        "Domain Name Commencement Date: 01-01-2000",
        "Expiry Date: 01-01-2030",
    ]


def test_hk_drops_empty_family_name() -> None:
    """An empty `Family name` should emit nothing and leave the given name intact."""

    text = "Registrant Contact Information:\nGiven name: Chan\nFamily name:\nEmail: a@example.hk\n"

    assert HkTransformer().transform(text).split("\n") == [
        "Registrant Contact Information:",
        "Registrant Given name: Chan",
        "Registrant Email: a@example.hk",
    ]


def test_hk_unmatched_registrar_contact_passes_through() -> None:
    """Registrar contact text without the Email/Hotline pattern should stay as-is."""

    text = "Registrar Contact Information: call +852 0000 0000\n"

    assert HkTransformer().transform(text) == "Registrar Contact Information: call +852 0000 0000"


def test_hk_registrar_contact_without_hotline_emits_email_only() -> None:
    """A missing hotline should yield only the registrar email line."""

    text = "Registrar Contact Information: Email: help@registrar.hk\n"

    assert HkTransformer().transform(text) == "Registrar Contact Email: help@registrar.hk"


def test_hk_blank_line_ends_section_and_address() -> None:
    """A blank line surviving the collapse should end section and address mode."""

    text = "Registrant Contact Information:\nAddress: A\n\n\nB\n"

    assert HkTransformer().transform(text).split("\n") == [
        "Registrant Contact Information:",
        "Registrant Address: A",
        "B",
    ]


def test_ch_explodes_holder_into_three_registrant_fields() -> None:
    """`Holder` values should split into organization, name and street."""

    output = ChTransformer().transform("Holder\nAcme AG, Jane Doe, Main Street 1\n")

    assert output.split("\n") == [
        "Registrant organization: Acme AG",
        "Registrant name: Jane Doe",
        "Registrant street: Main Street 1",
    ]


def test_ch_sample_joins_blocks_and_folds_surplus_segments(whois_sample) -> None:
    """Multi-line blocks should comma-join, surplus parts folding into street."""

    assert ChTransformer().transform(whois_sample("ch")).split("\n") == [
        "Domain name: example.ch",
        "Registrant organization: Acme AG",
        "Registrant name: Jane Doe",
        "Registrant street: Main Street 1",
        "Technical organization: Example Hosting AG",
        "Technical name: Tech Team",
        "Technical street: Hostweg 2, 8000 Zurich",
        "Registrar: Example Registrar AG",
        "Name servers: ns1.example.ch, ns2.example.ch",
        "First registration date: 01.01.2000",
    ]


def test_ch_matches_tokens_case_insensitively_and_strips_empty_values() -> None:
    """Token prefixes should ignore case; empty fields render as `Label:`."""

    text = "dnssec\nREGISTRAR Example AG\nstray line\n"

    assert ChTransformer().transform(text).split("\n") == [
        "DNSSEC:",
        "Registrar: Example AG, stray line",
    ]


def test_ch_drops_lines_before_first_token() -> None:
    """Lines with no preceding token have no field to join and are dropped."""

    assert ChTransformer().transform("preamble\nRegistrar\nExample AG\n") == (
        "Registrar: Example AG"
    )


def test_it_prefixes_sections_and_joins_wrapped_address() -> None:
    """IT sub-fields should carry the section; wrapped lines join the field."""

    text = (
        "*********************************************************************\n"
        "* Please note that the following result could be a subgroup of: it *\n"
        "*********************************************************************\n"
        "\n"
        "Domain: example.it\n"
        "Status: ok\n"
        "\n"
        "Registrant\n"
        "  Organization: Example S.r.l.\n"
        "  Address: Via Roma 1\n"
        "           Roma\n"
        "           00100\n"
        "           IT\n"
        "\n"
        "Admin Contact\n"
        "  Name: Mario Rossi\n"
        "\n"
        "Nameservers\n"
        "  ns1.example.it\n"
        "  ns2.example.it\n"
    )

    assert ItTransformer().transform(text).split("\n") == [
        "*********************************************************************",
        "* Please note that the following result could be a subgroup of: it *",
        "*********************************************************************",
        "Domain: example.it",
        "Status: ok",
        "Registrant Organization: Example S.r.l.",
        "Registrant Address: Via Roma 1, Roma, 00100, IT",
        "Admin Contact Name: Mario Rossi",
        "Nameservers: ns1.example.it",
        "Nameservers: ns2.example.it",
    ]
