"""Tests for the skill taxonomy."""

import pytest

from services.skill_taxonomy import (
    AVAILABLE_FIELDS,
    SKILLS_DATABASE,
    SkillTaxonomy,
    get_taxonomy,
    load_taxonomy,
)


def test_builtin_fields(taxonomy):
    assert taxonomy.fields() == [
        "Software Development",
        "Frontend Development",
        "Backend Development",
        "Data Science",
    ]


def test_devops_and_mobile_have_no_taxonomy(taxonomy):
    assert "DevOps Engineering" in AVAILABLE_FIELDS
    assert not taxonomy.has_field("DevOps Engineering")
    assert not taxonomy.has_field("Mobile Development")


def test_skills_for_field_flattens_categories(taxonomy):
    skills = taxonomy.skills_for_field("Frontend Development")
    assert skills["React"][:3] == ("react", "reactjs", "react.js")
    assert "Webpack" in skills
    assert "UI/UX" in skills
    assert taxonomy.canonical_skills("Frontend Development")[0] == "JavaScript"


def test_skill_in_two_categories_keeps_both_synonym_lists():
    tax = SkillTaxonomy(
        {"Web": {"a": {"React": ["react"]}, "b": {"React": ["reactjs"]}}},
        default_field="Web",
    )
    assert tax.skills_for_field("Web")["React"] == ("react", "reactjs")


def test_synonyms_are_lowercased():
    tax = SkillTaxonomy({"Web": {"core": {"React": ["ReactJS", " React "]}}}, default_field="Web")
    assert tax.skills_for_field("Web")["React"] == ("reactjs", "react")


def test_taxonomy_is_read_only(taxonomy):
    with pytest.raises(TypeError):
        taxonomy.categories("Data Science")["core"] = {}
    assert isinstance(taxonomy.skills_for_field("Data Science")["Python"], tuple)


def test_taxonomy_copies_input():
    data = {"Web": {"core": {"React": ["react"]}}}
    tax = SkillTaxonomy(data, default_field="Web")
    data["Web"]["core"]["React"].append("vue")
    assert tax.skills_for_field("Web")["React"] == ("react",)


def test_all_skills(taxonomy):
    skills = taxonomy.all_skills()
    assert {"Kubernetes", "NLP", "Svelte", "C#"} <= skills


def test_resolve_known_field(taxonomy):
    assert taxonomy.resolve_field("Data Science") == ("Data Science", False)


def test_resolve_unknown_field_falls_back(taxonomy, caplog):
    with caplog.at_level("WARNING"):
        assert taxonomy.resolve_field("Mobile Development") == ("Software Development", True)
    assert "Mobile Development" in caplog.text


def test_resolve_missing_field_uses_default(taxonomy):
    assert taxonomy.resolve_field(None) == ("Software Development", False)
    assert taxonomy.resolve_field("") == ("Software Development", False)


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"Web": ["react"]},
        {"Web": {"core": ["react"]}},
        {"Web": {"core": {"React": "react"}}},
        {"Web": {"core": {"React": [1, 2]}}},
    ],
)
def test_malformed_taxonomy_rejected(data):
    with pytest.raises(ValueError):
        SkillTaxonomy(data, default_field="Web")


def test_default_field_must_exist():
    with pytest.raises(ValueError):
        SkillTaxonomy({"Web": {"core": {"React": ["react"]}}})


def test_load_taxonomy_from_yaml(tmp_path):
    path = tmp_path / "taxonomy.yaml"
    path.write_text(
        "Web:\n"
        "  core:\n"
        "    React: [react, reactjs]\n"
        "    Node.js: [node, express]\n",
        encoding="utf-8",
    )
    tax = load_taxonomy(path, default_field="Web")
    assert tax.fields() == ["Web"]
    assert tax.canonical_skills("Web") == ["React", "Node.js"]


def test_load_taxonomy_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_taxonomy(tmp_path / "nope.yaml")


def test_get_taxonomy_is_cached():
    assert get_taxonomy() is get_taxonomy()
    assert get_taxonomy().fields() == list(SKILLS_DATABASE)
