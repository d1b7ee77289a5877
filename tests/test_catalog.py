import json

import pytest

from cardswarm.data.catalog import DEFAULT_CATALOG, Card, Category, catalog_to_dicts, load_catalog


def test_default_catalog_layout():
    assert len(DEFAULT_CATALOG) == 20
    cats = [c.category for c in DEFAULT_CATALOG]
    assert cats[:6] == [Category.SERVICE] * 6
    assert all(c is Category.TECH for c in cats[6:])
    assert all(c.href == "#services" for c in DEFAULT_CATALOG)


def test_load_yaml_catalog_accepts_type_alias(tmp_path):
    p = tmp_path / "cards.yaml"
    p.write_text(
        "- {label: Python, href: '#tech', category: tech}\n"
        "- {label: Consulting, href: '#svc', type: service}\n",
        encoding="utf-8",
    )
    cards = load_catalog(p)
    assert cards == [Card("Python", "#tech", Category.TECH), Card("Consulting", "#svc", Category.SERVICE)]


def test_load_json_catalog_round_trips_dicts(tmp_path):
    p = tmp_path / "cards.json"
    p.write_text(json.dumps({"cards": catalog_to_dicts(DEFAULT_CATALOG[:3])}), encoding="utf-8")
    assert load_catalog(p) == list(DEFAULT_CATALOG[:3])


@pytest.mark.parametrize(
    "entry, msg",
    [
        ({"href": "#x"}, "missing label"),
        ({"label": "A"}, "missing href"),
        ({"label": "A", "href": "#x", "category": "gadget"}, "unknown category"),
    ],
)
def test_malformed_entries_name_the_index(tmp_path, entry, msg):
    p = tmp_path / "bad.json"
    p.write_text(json.dumps([{"label": "ok", "href": "#ok"}, entry]), encoding="utf-8")
    with pytest.raises(ValueError, match=msg) as ei:
        load_catalog(p)
    assert "entry 1" in str(ei.value)
