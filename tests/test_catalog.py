# ===============================================
# Component catalog loading
# ===============================================

import dataclasses

import pytest

from uigen.catalog import CatalogError, ComponentDescriptor, load_catalog, parse_catalog

EXPECTED_ORDER = [
    "Avatar", "Badge", "Button", "Card", "Form", "Input",
    "Label", "RadioGroup", "Select", "Textarea", "Carousel",
]


def test_packaged_catalog_order(catalog):
    assert isinstance(catalog, tuple)
    assert [c.name for c in catalog] == EXPECTED_ORDER


def test_descriptors_are_immutable(catalog):
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog[0].name = "Other"


def test_descriptor_fields(catalog):
    badge = next(c for c in catalog if c.name == "Badge")
    assert badge.import_docs == 'import { Badge } from "@/components/ui/badge"'
    assert badge.usage_docs.startswith("<Badge>Badge</Badge>")
    assert not badge.usage_docs.endswith("\n")


def test_load_from_path(tmp_path):
    path = tmp_path / "components.yaml"
    path.write_text(
        "- name: Switch\n"
        "  import: import { Switch } from \"@/components/ui/switch\"\n"
        "  usage: <Switch />\n",
        encoding="utf-8",
    )
    assert load_catalog(str(path)) == (
        ComponentDescriptor(
            name="Switch",
            import_docs='import { Switch } from "@/components/ui/switch"',
            usage_docs="<Switch />",
        ),
    )


def test_missing_file(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog(str(tmp_path / "nope.yaml"))


@pytest.mark.parametrize(
    "data",
    [
        {"name": "Button"},
        ["Button"],
        [{"name": "Button", "import": "x"}],
        [
            {"name": "Button", "import": "x", "usage": "y"},
            {"name": "Button", "import": "x", "usage": "y"},
        ],
    ],
)
def test_malformed_catalog(data):
    with pytest.raises(CatalogError):
        parse_catalog(data)
