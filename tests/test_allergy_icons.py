from menu_publisher.services.allergy_icons import (
    ALLERGY_ICON_MAP,
    available_allergies,
    canonical_allergy,
    has_icon,
    icon_for,
    unique_allergies,
)


def test_lookup_is_case_and_whitespace_insensitive():
    assert icon_for("  Gluten ") == icon_for("gluten") == "/static/allergy_icons/gluten.svg"


def test_synonyms_share_the_canonical_icon():
    assert icon_for("soy") == icon_for("soya")
    assert icon_for("Dairy") == icon_for("milk")
    assert icon_for("seseme") == icon_for("sesame")
    assert canonical_allergy("Tree Nuts") == "nuts"


def test_unknown_allergy_has_no_icon():
    assert icon_for("kiwi") is None
    assert not has_icon("kiwi")
    assert canonical_allergy("kiwi") == "kiwi"


def test_unique_allergies_drops_synonym_when_canonical_present():
    assert unique_allergies({"soy", "soya"}) == ["soya"]
    assert unique_allergies(["soy"]) == ["soy"]
    assert unique_allergies(["Milk", "dairy", "fish"]) == ["fish", "milk"]


def test_legend_lists_each_canonical_allergy_once():
    legend = unique_allergies(available_allergies())

    assert len(legend) == 16
    assert "soy" not in legend and "soya" in legend
    assert all(name in ALLERGY_ICON_MAP for name in legend)
