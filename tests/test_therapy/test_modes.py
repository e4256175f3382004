import pytest

from soundtherapy.therapy.modes import MODE_CATALOG, get_mode, is_unlocked
from soundtherapy.therapy.templates import MOOD_TEMPLATES, resolve_template


class TestModeCatalog:
    def test_modes_in_display_order(self) -> None:
        assert [m.mode for m in MODE_CATALOG] == ["relaxation", "focus", "sleep", "premium"]

    def test_only_premium_requires_unlock(self) -> None:
        assert [m.mode for m in MODE_CATALOG if m.requires_unlock] == ["premium"]

    def test_non_premium_modes_have_templates(self) -> None:
        for mode in MODE_CATALOG:
            if not mode.requires_unlock:
                assert mode.mode in MOOD_TEMPLATES

    def test_get_mode_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown therapy mode"):
            get_mode("party")

    def test_premium_lock(self) -> None:
        premium = get_mode("premium")
        assert is_unlocked(premium, premium_unlocked=False) is False
        assert is_unlocked(premium, premium_unlocked=True) is True
        assert is_unlocked(get_mode("focus"), premium_unlocked=False) is True


class TestResolveTemplate:
    def test_known(self) -> None:
        template, recognized = resolve_template("sleep")
        assert recognized is True
        assert template is MOOD_TEMPLATES["sleep"]

    def test_premium_aliases_relaxation(self) -> None:
        template, recognized = resolve_template("premium")
        assert recognized is True
        assert template is MOOD_TEMPLATES["relaxation"]

    def test_unknown(self) -> None:
        template, recognized = resolve_template("anxious")
        assert recognized is False
        assert template is MOOD_TEMPLATES["relaxation"]
