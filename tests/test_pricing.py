"""
Tests for session-package and itemized subcategory pricing.
"""

from __future__ import annotations

from clinic_booking.application.utils.pricing import (
    describe_selection,
    discount_of,
    format_price,
    price_package,
    price_subcategories,
    quote_package,
    resolve_package,
    resolve_selection,
    round2,
    round_half_up,
    session_count_of,
)
from clinic_booking.domain.entities.selection_state import SelectionState
from clinic_booking.domain.entities.treatment import PricingOption, TreatmentSubcategory


def test_session_count_of():
    assert session_count_of("6 sessions") == 6
    assert session_count_of("1 session") == 1
    assert session_count_of("package of 10") == 10
    assert session_count_of("single") == 1


def test_discount_table_is_exact():
    assert discount_of("1 session") == 0
    assert discount_of("3 sessions") == 0.25
    assert discount_of("6 sessions") == 0.35
    assert discount_of("10 sessions") == 0.45
    assert discount_of("4 sessions") == 0
    assert discount_of("7 sessions") == 0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round2(0.125) == 0.13
    assert round2(12.344) == 12.34


def test_six_session_package_quote():
    quote = quote_package(100, "6 sessions")

    assert quote.per_session_price == 65.00
    assert quote.total_amount == 390.00
    assert quote.discount_percent == 35
    assert quote.total_savings == 210.00


def test_price_package_summary():
    summary = price_package(80, "3 sessions")

    assert summary.session_count == 3
    assert summary.unit_price == 60.00
    assert summary.discount_percent == 25
    assert summary.total_amount == 180.00


def test_single_session_has_no_discount():
    summary = price_package(49.99, "1 session")

    assert summary.session_count == 1
    assert summary.unit_price == 49.99
    assert summary.discount_percent == 0
    assert summary.total_amount == 49.99


def test_itemized_pricing():
    selections = {
        "Upper Lip": PricingOption(name="Small", price=45),
        "Chin": PricingOption(name="Large", price=60),
    }
    reversed_selections = dict(reversed(list(selections.items())))

    summary = price_subcategories(selections)

    assert summary.session_count == 2
    assert summary.total_amount == 105.00
    assert summary.unit_price == 105.00
    assert summary.discount_percent == 0
    assert price_subcategories(reversed_selections) == summary


def test_itemized_pricing_ignores_absent_selections():
    summary = price_subcategories({"Upper Lip": PricingOption("Small", 45), "Chin": None})

    assert summary.session_count == 1
    assert summary.total_amount == 45


def test_toggle_same_option_deselects():
    option = PricingOption(name="Small", price=45)
    state = SelectionState()

    selected = state.toggle("Upper Lip", option)
    assert selected.selected() == {"Upper Lip": option}

    toggled_back = selected.toggle("Upper Lip", option)
    assert toggled_back.selected() == state.selected() == {}


def test_toggle_other_option_replaces():
    small = PricingOption(name="Small", price=45)
    large = PricingOption(name="Large", price=60)

    state = SelectionState().toggle("Upper Lip", small).toggle("Upper Lip", large)

    assert state.selected() == {"Upper Lip": large}


def test_toggle_does_not_mutate_original():
    state = SelectionState()
    state.toggle("Chin", PricingOption("Small", 10))

    assert state.selected() == {}


def test_resolve_package_falls_back_to_single_session():
    packages = ["1 session", "2 sessions", "3 sessions"]

    assert resolve_package("3 sessions", packages) == "3 sessions"
    assert resolve_package("6 sessions", packages) == "1 session"
    assert resolve_package(None, packages) == "1 session"


def test_describe_selection():
    text = describe_selection(
        {"Upper Lip": PricingOption("Small", 45), "Chin": PricingOption("Large", 60)}
    )

    assert text == "Upper Lip - Small, Chin - Large"


def test_format_price():
    assert format_price(65) == "£65.00"
    assert format_price(12.5, "$") == "$12.50"


def test_resolve_selection_uses_catalog_prices():
    catalog = [TreatmentSubcategory(name="Chin", pricing=(PricingOption("Small", 20.0), PricingOption("Large", 30.0)))]

    resolved = resolve_selection(catalog, {"Chin": PricingOption("Large", 0.01)})

    assert resolved == {"Chin": PricingOption("Large", 30.0)}


def test_resolve_selection_rejects_unknown_entries():
    catalog = [TreatmentSubcategory(name="Chin", pricing=(PricingOption("Small", 20.0),))]

    assert resolve_selection(catalog, {"Made Up": PricingOption("Free", 0.01)}) is None
    assert resolve_selection(catalog, {"Chin": PricingOption("Huge", 20.0)}) is None
    assert resolve_selection(catalog, {"Chin": None}) == {}
