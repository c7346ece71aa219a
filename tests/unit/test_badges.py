"""Tests for marketplace badge generation and README insertion."""

from __future__ import annotations

from launchpad.contrib.badges import badge_suite, generate_badges, insert_into_readme


class TestGenerateBadges:
    def test_three_badges(self):
        badges = generate_badges("NexGenMeta", "alpha")
        assert badges.count("![") == 3
        assert "visual-studio-marketplace/v/NexGenMeta.alpha" in badges
        assert "visual-studio-marketplace/i/NexGenMeta.alpha" in badges
        assert "visual-studio-marketplace/r/NexGenMeta.alpha" in badges


class TestInsertIntoReadme:
    def test_after_title(self, tmp_path):
        readme = tmp_path / "README.md"
        readme.write_text("# Alpha\nBody", encoding="utf-8")
        assert insert_into_readme(tmp_path, "BADGES") is True
        lines = readme.read_text(encoding="utf-8").split("\n")
        assert lines[0] == "# Alpha"
        assert "BADGES" in lines
        assert lines[-1] == "Body"

    def test_without_title(self, tmp_path):
        readme = tmp_path / "README.md"
        readme.write_text("Body", encoding="utf-8")
        assert insert_into_readme(tmp_path, "BADGES") is True
        assert readme.read_text(encoding="utf-8").startswith("BADGES\n")

    def test_already_badged(self, tmp_path):
        (tmp_path / "README.md").write_text("# A\n![Version](x)", encoding="utf-8")
        assert insert_into_readme(tmp_path, "BADGES") is False

    def test_missing_readme(self, tmp_path):
        assert insert_into_readme(tmp_path, "BADGES") is False


class TestBadgeSuite:
    def test_counts_updated_readmes(self, tmp_path, write_project):
        alpha = write_project("alpha")
        (alpha / "README.md").write_text("# Alpha\n", encoding="utf-8")
        write_project("beta")  # no README
        lib = write_project("lib", {"name": "lib"})
        (lib / "README.md").write_text("# Lib\n", encoding="utf-8")

        assert badge_suite(tmp_path) == 1
        assert "NexGenMeta.alpha" in (alpha / "README.md").read_text(encoding="utf-8")
        assert "![Version]" not in (lib / "README.md").read_text(encoding="utf-8")
        assert badge_suite(tmp_path) == 0

    def test_undecodable_readme_is_skipped(self, tmp_path, write_project):
        alpha = write_project("alpha")
        (alpha / "README.md").write_bytes(b"# A\n\xff\xfe\xfa broken")
        beta = write_project("beta")
        (beta / "README.md").write_text("# Beta\n", encoding="utf-8")

        assert badge_suite(tmp_path) == 1
        assert "NexGenMeta.beta" in (beta / "README.md").read_text(encoding="utf-8")
        assert (alpha / "README.md").read_bytes() == b"# A\n\xff\xfe\xfa broken"
