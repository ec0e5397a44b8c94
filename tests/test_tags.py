import json
import logging
from datetime import date

import pytest

from patchnotes.errors import ArchiveError, TagCasingError
from patchnotes.models import ChangeRecord
from patchnotes.tags import TagRules, TextPrefix, check_tags, clean_tag, fix_casing, read_archive_tags


def record(*tags):
    return ChangeRecord.create(date=date(2023, 1, 24), tags=list(tags), text="Fixed a crash.")


# clean_tag

@pytest.mark.parametrize("raw, expected", [
    ("Azure Vaults (Heroic)", ["Azure Vault"]),
    ("The Azure Vaults (Mythic)", ["Azure Vault"]),
    ("Discipline, Shadow", ["Discipline", "Shadow"]),
    ("Dungeons and Raids", ["Dungeons and Raids"]),
    ("Dungeons", ["Dungeons and Raids"]),
    ("Player versus Player", ["PvP"]),
    ("PLAYER VERSUS PLAYER", ["PvP"]),
    ("Wrath of the Lich King", ["WotLK"]),
    ("Mining/Herbalism", ["Mining", "Herbalism"]),
    ("Fire and Ice", ["Fire", "Ice"]),
    ("FIRE AND ICE", ["FIRE", "ICE"]),
    ("Iskaara Tuskar", ["Iskaara Tuskarr"]),
    ("THE NOKHUD OFFENSIVE", ["NOKHUD OFFENSIVE"]),
    ("  Mythic+  ", ["Mythic+"]),
])
def test_clean_tag(rules, raw, expected):
    assert clean_tag(raw, rules) == expected


def test_clean_tag_repairs_mojibake_quote(rules):
    assert clean_tag("Hackclawâ€™s War-Band", rules) == ["Hackclaw's Warband"]


def test_clean_tag_drops_metadata_headings(rules):
    assert clean_tag("Developers' notes", rules) == []
    assert clean_tag("Developersâ€™ Notes", rules) == []


def test_clean_tag_empty_input(rules):
    assert clean_tag("", rules) == []
    assert clean_tag("   ", rules) == []


def test_clean_tag_moves_qualifier_to_text_prefix(rules):
    tags = clean_tag("Realms [With Weekly Restarts]", rules)

    assert tags == ["[With Weekly Restarts]", "Realms"]
    assert isinstance(tags[0], TextPrefix)
    assert not isinstance(tags[1], TextPrefix)


def test_clean_tag_stacked_qualifiers(rules):
    tags = clean_tag("Items [with weekly maintenance] [with weekly restarts]", rules)

    assert [str(tag) for tag in tags] == ["[with weekly restarts]", "[with weekly maintenance]", "Items"]
    assert all(isinstance(tag, TextPrefix) for tag in tags[:2])


def test_clean_tag_never_returns_empty_strings():
    custom = TagRules(aliases={"Placeholder": ["", "Quests"]})

    assert clean_tag("Placeholder", custom) == ["Quests"]
    assert clean_tag("Night and ", custom) == ["Night and"]


def test_alias_lookup_ignores_case(rules):
    assert clean_tag("azure vaults", rules) == ["Azure Vault"]


# fix_casing

def test_fix_casing_uses_archive():
    rules = TagRules(casing_overrides={})

    fixed = fix_casing([record("PVP")], rules, archive_tags=["PvP"])

    assert fixed[0].tags == ["PvP"]


def test_fix_casing_static_override(rules):
    fixed = fix_casing([record("10.0.5", "RATED SOLO SHUFFLE")], rules)

    assert fixed[0].tags == ["10.0.5", "Solo Shuffle"]


def test_fix_casing_first_batch_spelling_wins():
    rules = TagRules(casing_overrides={})
    changes = [record("Mythic+"), record("MYTHIC+"), record("mythic+")]

    fixed = fix_casing(changes, rules, archive_tags=["MYthic+"])

    assert [change.tags for change in fixed] == [["Mythic+"], ["Mythic+"], ["Mythic+"]]


def test_fix_casing_override_beats_batch():
    rules = TagRules(casing_overrides={"UI": "User Interface"})

    fixed = fix_casing([record("Ui"), record("UI")], rules)

    assert [change.tags for change in fixed] == [["User Interface"], ["User Interface"]]


def test_fix_casing_empty_canonical_drops_tag():
    rules = TagRules(casing_overrides={"DEVELOPERS NOTES": ""})

    fixed = fix_casing([record("Classes", "DEVELOPERS NOTES")], rules)

    assert fixed[0].tags == ["Classes"]


def test_fix_casing_rejects_residual_upper_case(rules, caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(TagCasingError) as exc_info:
            fix_casing([record("ZZZ", "Classes"), record("ZZZ")], rules)

    assert exc_info.value.tags == ["ZZZ"]
    assert "ZZZ" in str(exc_info.value)
    assert "Upper case tag: ZZZ" in caplog.text


def test_fix_casing_ignores_tags_without_letters(rules):
    fixed = fix_casing([record("10.0.5")], rules)

    assert fixed[0].tags == ["10.0.5"]


def test_fix_casing_is_stable(rules):
    changes = [record("PLAYER VERSUS PLAYER", "Mythic+"), record("MYTHIC+")]

    once = fix_casing(changes, rules)
    twice = fix_casing(once, rules)

    assert once == twice


def test_fix_casing_returns_new_records(rules):
    changes = [record("PLAYER VERSUS PLAYER")]

    fix_casing(changes, rules)

    assert changes[0].tags == ["PLAYER VERSUS PLAYER"]


# read_archive_tags

def write_log(path, *tag_lists):
    changes = [{"Date": "2023-01-24", "Weekday": "Tuesday", "Tags": tags, "Text": "x."} for tags in tag_lists]
    path.write_text(json.dumps({"Changes": changes}))


def test_read_archive_tags(tmp_path):
    write_log(tmp_path / "2023-01.json", ["Classes", "Paladin"], ["PvP"])
    write_log(tmp_path / "2023-02.json", ["Classes"])
    (tmp_path / "empty.json").write_text("")
    (tmp_path / "notes.txt").write_text("not json")

    assert read_archive_tags(str(tmp_path)) == ["Classes", "Paladin", "PvP"]


def test_read_archive_tags_missing_directory(tmp_path):
    assert read_archive_tags(str(tmp_path / "missing")) == []
    assert read_archive_tags(None) == []


def test_read_archive_tags_rejects_bad_json(tmp_path):
    (tmp_path / "broken.json").write_text("{not json")

    with pytest.raises(ArchiveError):
        read_archive_tags(str(tmp_path))


def test_read_archive_tags_rejects_non_object(tmp_path):
    (tmp_path / "list.json").write_text("[]")

    with pytest.raises(ArchiveError):
        read_archive_tags(str(tmp_path))


@pytest.mark.parametrize("content", [
    '{"Changes": ["oops"]}',
    '{"Changes": {"Tags": ["PvP"]}}',
    '{"Changes": [{"Tags": "PvP"}]}',
    '{"Changes": [{"Tags": [1, 2]}]}',
])
def test_read_archive_tags_rejects_malformed_changes(tmp_path, content):
    (tmp_path / "malformed.json").write_text(content)

    with pytest.raises(ArchiveError, match="malformed.json"):
        read_archive_tags(str(tmp_path))


# check_tags

def test_check_tags_reports_prefixes(caplog):
    changes = [record("Classes", "Mythic"), record("Mythic+"), record("Uldaman")]

    with caplog.at_level(logging.WARNING):
        pairs = check_tags(changes)

    assert pairs == [("Mythic", "Mythic+")]
    assert "'Mythic' is prefix of 'Mythic+'" in caplog.text


def test_check_tags_clean_batch():
    assert check_tags([record("Classes", "Paladin"), record("PvP")]) == []
