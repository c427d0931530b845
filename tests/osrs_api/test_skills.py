"""Tests for skill lookup and the experience table."""

from osrs_api.skills import Skill, SkillStat, xp_for_level, xp_to_next_level


class TestSkill:
    def test_ordered_matches_hiscore_lines(self):
        ordered = Skill.ordered()

        assert ordered[0] is Skill.OVERALL
        assert ordered[-1] is Skill.SAILING
        assert [s.line_index for s in ordered] == list(range(len(ordered)))

    def test_find_by_display_name(self):
        assert Skill.find_by_name("Runecraft") is Skill.RUNECRAFT
        assert Skill.find_by_name("  defence ") is Skill.DEFENCE

    def test_find_by_alias(self):
        assert Skill.find_by_name("wc") is Skill.WOODCUTTING
        assert Skill.find_by_name("HP") is Skill.HITPOINTS
        assert Skill.find_by_name("total") is Skill.OVERALL

    def test_unknown(self):
        assert Skill.find_by_name("dungeoneering") is None
        assert Skill.find_by_name("") is None
        assert Skill.find_by_name(None) is None


class TestXpTable:
    def test_known_thresholds(self):
        assert xp_for_level(1) == 0
        assert xp_for_level(2) == 83
        assert xp_for_level(99) == 13034431
        assert xp_for_level(150) == xp_for_level(120)

    def test_xp_to_next_level(self):
        assert xp_to_next_level(1, 0) == 83
        assert xp_to_next_level(98, 12000000) == 13034431 - 12000000

    def test_capped_levels(self):
        assert xp_to_next_level(120, 200000000) == 0
        assert xp_to_next_level(0, 0) == 0

    def test_virtual_levels_past_99(self):
        assert xp_to_next_level(99, 13034431) == xp_for_level(100) - 13034431

    def test_skill_stat(self):
        stat = SkillStat(Skill.ATTACK, 1, 50)

        assert stat.xp_to_next_level == 33
