"""Tests for the archgen command-line interface (archgen.cli).

Covers:
- Non-interactive generate with -a/-m
- Interactive selection, module prompt and confirmation
- Existing-directory handling (decline, accept, --force)
- Exit codes for validation errors, closed input and interrupts
- list, preview, --version and bare invocation
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from archgen.cli import EXIT_ERROR, EXIT_INTERRUPTED, EXIT_OK, build_parser, main


MODULE = "github.com/acme/shop"


def _go_mod(root: Path) -> str:
    return (root / "go.mod").read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParser:
    @pytest.mark.unit
    def test_generate_flags(self):
        args = build_parser().parse_args(
            ["generate", "-a", "ddd", "-m", MODULE, "--no-fuzzy", "-f", "-y", "--staged", "-o", "out"]
        )
        assert args.command == "generate"
        assert args.arch == "ddd"
        assert args.module == MODULE
        assert args.no_fuzzy and args.force and args.yes and args.staged
        assert args.output == "out"

    @pytest.mark.unit
    def test_generate_defaults(self):
        args = build_parser().parse_args(["generate"])
        assert args.arch == ""
        assert args.module == ""
        assert args.staged is None
        assert args.output is None

    @pytest.mark.unit
    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "archgen 1.0.0" in capsys.readouterr().out

    @pytest.mark.unit
    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_OK
        assert "usage: archgen" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# generate: non-interactive
# ---------------------------------------------------------------------------


class TestGenerateNonInteractive:
    @pytest.mark.unit
    def test_creates_project_in_cwd(self, work_dir: Path, capsys):
        with patch("archgen.cli.Confirm.ask") as confirm:
            code = main(["generate", "-a", "clean", "-m", MODULE])
        assert code == EXIT_OK
        confirm.assert_not_called()
        root = work_dir / "project_clean"
        assert _go_mod(root).startswith(f"module {MODULE}\n")
        out = capsys.readouterr().out
        assert "Project structure preview (clean)" in out
        assert "Project generated successfully!" in out
        assert "Next steps:" in out
        assert "go mod tidy" in out
        assert "go run ." in out

    @pytest.mark.unit
    def test_output_dir_flag(self, tmp_path: Path):
        assert main(["generate", "-a", "ddd", "-m", MODULE, "-o", str(tmp_path)]) == EXIT_OK
        assert (tmp_path / "project_ddd" / "cmd" / "api" / "main.go").is_file()

    @pytest.mark.unit
    def test_output_dir_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ARCHGEN_OUTPUT_DIR", str(tmp_path))
        assert main(["generate", "-a", "flat", "-m", MODULE]) == EXIT_OK
        assert (tmp_path / "project_flat" / "main.go").is_file()

    @pytest.mark.unit
    def test_staged_flag(self, tmp_path: Path):
        code = main(["generate", "-a", "monorepo", "-m", MODULE, "-o", str(tmp_path), "--staged"])
        assert code == EXIT_OK
        assert [p.name for p in tmp_path.iterdir()] == ["project_monorepo"]

    @pytest.mark.unit
    def test_monorepo_next_steps(self, tmp_path: Path, capsys):
        main(["generate", "-a", "monorepo", "-m", MODULE, "-o", str(tmp_path)])
        out = capsys.readouterr().out
        assert "go work sync" in out
        assert "go run ./services/api" in out

    @pytest.mark.unit
    def test_unknown_architecture(self, work_dir: Path, capsys):
        assert main(["generate", "-a", "mvc", "-m", MODULE]) == EXIT_ERROR
        assert "unsupported architecture: mvc" in capsys.readouterr().out
        assert list(work_dir.iterdir()) == []

    @pytest.mark.unit
    def test_invalid_module(self, work_dir: Path, capsys):
        assert main(["generate", "-a", "clean", "-m", "1invalid"]) == EXIT_ERROR
        assert "invalid module name format: 1invalid" in capsys.readouterr().out
        assert list(work_dir.iterdir()) == []


# ---------------------------------------------------------------------------
# generate: existing destination
# ---------------------------------------------------------------------------


class TestGenerateExistingDestination:
    @pytest.mark.unit
    def test_decline_overwrite(self, work_dir: Path, capsys):
        (work_dir / "project_clean").mkdir()
        with patch("archgen.cli.Confirm.ask", return_value=False) as confirm:
            code = main(["generate", "-a", "clean", "-m", MODULE])
        assert code == EXIT_OK
        assert confirm.call_args.args[0] == "Do you want to overwrite the existing directory?"
        assert confirm.call_args.kwargs["default"] is False
        out = capsys.readouterr().out
        assert "already exists" in out
        assert "Generation cancelled." in out
        assert list((work_dir / "project_clean").iterdir()) == []

    @pytest.mark.unit
    def test_accept_overwrite(self, work_dir: Path):
        root = work_dir / "project_clean"
        root.mkdir()
        (root / "notes.txt").write_text("mine", encoding="utf-8")
        with patch("archgen.cli.Confirm.ask", return_value=True):
            code = main(["generate", "-a", "clean", "-m", MODULE])
        assert code == EXIT_OK
        assert (root / "notes.txt").read_text(encoding="utf-8") == "mine"
        assert _go_mod(root).startswith(f"module {MODULE}")

    @pytest.mark.unit
    def test_force_skips_prompt(self, work_dir: Path):
        (work_dir / "project_onion").mkdir()
        with patch("archgen.cli.Confirm.ask") as confirm:
            code = main(["generate", "-a", "onion", "-m", MODULE, "--force"])
        assert code == EXIT_OK
        confirm.assert_not_called()
        assert (work_dir / "project_onion" / "go.mod").is_file()

    @pytest.mark.unit
    def test_filesystem_failure_exit_code(self, work_dir: Path, capsys):
        root = work_dir / "project_clean"
        root.mkdir()
        (root / "domain").write_text("blocker", encoding="utf-8")
        code = main(["generate", "-a", "clean", "-m", MODULE, "--force"])
        assert code == EXIT_ERROR
        assert "failed to materialize" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# generate: interactive
# ---------------------------------------------------------------------------


class TestGenerateInteractive:
    @pytest.mark.unit
    def test_full_flow_with_defaults(self, work_dir: Path):
        with patch("archgen.selection.IntPrompt.ask", return_value=3), \
             patch("archgen.cli.Prompt.ask", return_value="") as prompt, \
             patch("archgen.cli.Confirm.ask", return_value=True) as confirm:
            code = main(["generate", "--no-fuzzy"])
        assert code == EXIT_OK
        assert prompt.call_args.kwargs["default"] == "github.com/user/project"
        assert confirm.call_args.args[0] == "Generate project?"
        assert _go_mod(work_dir / "project_clean").startswith("module github.com/user/project\n")

    @pytest.mark.unit
    def test_module_prompt_only(self, work_dir: Path):
        with patch("archgen.cli.Prompt.ask", return_value="  example.org/x/y  "), \
             patch("archgen.cli.Confirm.ask", return_value=True):
            code = main(["generate", "-a", "cqrs"])
        assert code == EXIT_OK
        assert _go_mod(work_dir / "project_cqrs").startswith("module example.org/x/y\n")

    @pytest.mark.unit
    def test_architecture_prompt_only(self, work_dir: Path):
        with patch("archgen.selection.IntPrompt.ask", return_value=1), \
             patch("archgen.cli.Prompt.ask") as prompt, \
             patch("archgen.cli.Confirm.ask", return_value=True):
            code = main(["generate", "--no-fuzzy", "-m", MODULE])
        assert code == EXIT_OK
        prompt.assert_not_called()
        assert (work_dir / "project_flat" / "main.go").is_file()

    @pytest.mark.unit
    def test_decline_generation(self, work_dir: Path, capsys):
        with patch("archgen.cli.Prompt.ask", return_value=MODULE), \
             patch("archgen.cli.Confirm.ask", return_value=False):
            code = main(["generate", "-a", "layered"])
        assert code == EXIT_OK
        assert "Generation cancelled." in capsys.readouterr().out
        assert list(work_dir.iterdir()) == []

    @pytest.mark.unit
    def test_yes_skips_confirmation(self, work_dir: Path):
        with patch("archgen.cli.Prompt.ask", return_value=MODULE), \
             patch("archgen.cli.Confirm.ask") as confirm:
            code = main(["generate", "-a", "feature", "--yes"])
        assert code == EXIT_OK
        confirm.assert_not_called()
        assert (work_dir / "project_feature").is_dir()

    @pytest.mark.unit
    def test_invalid_prompted_module(self, work_dir: Path, capsys):
        with patch("archgen.cli.Prompt.ask", return_value="bad module"):
            code = main(["generate", "-a", "flat"])
        assert code == EXIT_ERROR
        assert "invalid module name format" in capsys.readouterr().out
        assert list(work_dir.iterdir()) == []

    @pytest.mark.unit
    def test_closed_input(self, work_dir: Path, capsys):
        with patch("archgen.cli.Prompt.ask", side_effect=EOFError):
            code = main(["generate", "-a", "flat"])
        assert code == EXIT_ERROR
        assert "input closed" in capsys.readouterr().out

    @pytest.mark.unit
    def test_selection_failure(self, work_dir: Path, capsys):
        with patch("archgen.selection.IntPrompt.ask", side_effect=EOFError):
            code = main(["generate", "--no-fuzzy", "-m", MODULE])
        assert code == EXIT_ERROR
        assert "selecting architecture" in capsys.readouterr().out
        assert list(work_dir.iterdir()) == []

    @pytest.mark.unit
    def test_interrupt(self, work_dir: Path, capsys):
        with patch("archgen.cli.Prompt.ask", side_effect=KeyboardInterrupt):
            code = main(["generate", "-a", "flat"])
        assert code == EXIT_INTERRUPTED
        assert "Generation cancelled." in capsys.readouterr().out


# ---------------------------------------------------------------------------
# list / preview
# ---------------------------------------------------------------------------


class TestListAndPreview:
    @pytest.mark.unit
    def test_list(self, capsys):
        assert main(["list"]) == EXIT_OK
        out = capsys.readouterr().out
        for name in ("flat", "hexagonal", "monorepo", "layered"):
            assert name in out

    @pytest.mark.unit
    def test_preview(self, work_dir: Path, capsys):
        assert main(["preview", "flat"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "project_flat/" in out
        assert "README.md" in out
        assert list(work_dir.iterdir()) == []

    @pytest.mark.unit
    def test_preview_unknown(self, capsys):
        assert main(["preview", "Clean"]) == EXIT_ERROR
        assert "unsupported architecture: Clean" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Output of user-supplied paths
# ---------------------------------------------------------------------------


class TestPathOutput:
    @pytest.mark.unit
    def test_bracketed_output_dir_printed_verbatim(self, tmp_path: Path):
        out_dir = tmp_path / "out[red]x"
        wide = Console(record=True, width=500, color_system=None)
        with patch("archgen.cli.console", wide), patch("archgen.utils.console", wide):
            code = main(["generate", "-a", "flat", "-m", MODULE, "-o", str(out_dir)])

        assert code == EXIT_OK
        root = out_dir / "project_flat"
        assert (root / "main.go").is_file()
        lines = wide.export_text().splitlines()
        assert f"  cd {root}" in lines
        location = [line for line in lines if "Location" in line]
        assert location
        assert f"{root}/" in location[0]
