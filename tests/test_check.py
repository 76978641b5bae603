"""
Tests for the check use case — ordering, tally, recipes, list file.
"""

from pathlib import Path

from has.adapters.mock import MockProbeAdapter
from has.core.config.loader import Settings
from has.core.models.probe import OutcomeKind, ProbeStrategy
from has.core.services.strategy_table import StrategyTable
from has.core.use_cases.check import (
    STARTUP_ERROR_EXIT_CODE,
    check_one,
    collect_names,
    run_check,
)


class TestCollectNames:
    def test_cli_names_first(self, tmp_path: Path):
        rc = tmp_path / ".hasrc"
        rc.write_text("curl\n# comment\n\nmake\n")
        assert collect_names(["git"], rc) == ["git", "curl", "make"]

    def test_no_rc(self):
        assert collect_names(["git", "node"], None) == ["git", "node"]


class TestCheckOne:
    def test_found_with_version(self, strategy_table, mock_adapter):
        mock_adapter.set_output("git", "git version 2.39.1")
        line = check_one("git", strategy_table, mock_adapter)
        assert line.outcome.kind is OutcomeKind.FOUND_WITH_VERSION
        assert line.outcome.version == "2.39.1"

    def test_alias_probes_canonical(self, strategy_table, mock_adapter):
        mock_adapter.set_output("go", "go version go1.22.1 linux/amd64")
        line = check_one("golang", strategy_table, mock_adapter)
        assert line.request == "golang"
        assert line.command == "go"
        assert line.outcome.version == "1.22.1"
        command, strategy = mock_adapter.call_log[0]
        assert command == "go"
        assert strategy.args == ["version"]

    def test_unknown_not_understood_no_probe(self, strategy_table, mock_adapter):
        line = check_one("nonexistent-tool-xyz", strategy_table, mock_adapter)
        assert line.outcome.kind is OutcomeKind.NOT_UNDERSTOOD
        assert mock_adapter.call_count == 0

    def test_unknown_unsafe_probes_version_flag(self, mock_adapter):
        table = StrategyTable.from_file(allow_unsafe=True)
        mock_adapter.set_output("sometool", "sometool 0.4.2")
        line = check_one("sometool", table, mock_adapter)
        assert line.outcome.version == "0.4.2"
        assert mock_adapter.call_log[0][1].args == ["--version"]

    def test_not_installed(self, strategy_table, mock_adapter):
        line = check_one("git", strategy_table, mock_adapter)
        assert line.outcome.kind is OutcomeKind.NOT_INSTALLED

    def test_nonzero_exit_found_no_version(self, strategy_table, mock_adapter):
        mock_adapter.set_output("make", "make: weird 4.3", status=2)
        line = check_one("make", strategy_table, mock_adapter)
        assert line.outcome.kind is OutcomeKind.FOUND_NO_VERSION
        assert line.outcome.ok

    def test_found_without_parsable_version(self, strategy_table, mock_adapter):
        mock_adapter.set_output("vim", "VIM - Vi IMproved")
        line = check_one("vim", strategy_table, mock_adapter)
        assert line.outcome.kind is OutcomeKind.FOUND_WITH_VERSION
        assert line.outcome.version == ""
        assert line.outcome.ok


class TestRecipes:
    def test_inverted_status(self, strategy_table, mock_adapter):
        mock_adapter.set_output("gor", "Version: 1.3.0", status=1)
        line = check_one("goreplay", strategy_table, mock_adapter)
        assert line.command == "gor"
        assert line.outcome.kind is OutcomeKind.FOUND_WITH_VERSION
        assert line.outcome.version == "1.3.0"

    def test_inverted_status_zero(self, strategy_table, mock_adapter):
        mock_adapter.set_output("gor", "unexpected", status=0)
        line = check_one("gor", strategy_table, mock_adapter)
        assert line.outcome.kind is OutcomeKind.FOUND_NO_VERSION

    def test_inverted_not_installed(self, strategy_table, mock_adapter):
        line = check_one("gor", strategy_table, mock_adapter)
        assert line.outcome.kind is OutcomeKind.NOT_INSTALLED

    def test_zip_line_two(self, strategy_table, mock_adapter):
        mock_adapter.set_output(
            "zip",
            "Copyright (c) 1990-2008 Info-ZIP 2.1 - Type 'zip \"-L\"' for software license.\n"
            "This is Zip 3.0 (July 5th 2008), by Info-ZIP.\n",
        )
        line = check_one("zip", strategy_table, mock_adapter)
        assert line.outcome.version == "3.0"

    def test_rvm_line_two(self, strategy_table, mock_adapter):
        mock_adapter.set_output("rvm", "\nrvm 1.29.12 (latest) by Michal Papis [https://rvm.io]\n")
        line = check_one("rvm", strategy_table, mock_adapter)
        assert line.outcome.version == "1.29.12"
        assert mock_adapter.call_log[0][1].env == {"rvm_verbose_flag": "0"}

    def test_gradle_skips_decoys(self, strategy_table, mock_adapter):
        mock_adapter.set_output(
            "gradle",
            "Daemon will be stopped at the end of the build after 0.52s\n"
            "------------------------------------------------------------\n"
            "Gradle 8.2.1\n"
            "------------------------------------------------------------\n"
            "Build time:   2023-07-10 12:12:35 UTC\n"
            "Kotlin:       1.8.20\n",
        )
        line = check_one("gradle", strategy_table, mock_adapter)
        assert line.outcome.version == "8.2.1"

    def test_coreutils_sentinel(self, strategy_table, mock_adapter):
        mock_adapter.set_output("gnu_coreutils", "ls (GNU coreutils) 9.1\n")
        line = check_one("coreutils", strategy_table, mock_adapter)
        assert line.command == "gnu_coreutils"
        assert line.outcome.version == "9.1"
        assert mock_adapter.call_log[0][1].executable == "ls"

    def test_hub_reports_its_own_version(self, strategy_table, mock_adapter):
        mock_adapter.set_output("hub", "git version 2.39.1\nhub version 2.14.2\n")
        line = check_one("hub", strategy_table, mock_adapter)
        assert line.outcome.version == "2.14.2"

    def test_elixir_skips_erlang_banner(self, strategy_table, mock_adapter):
        mock_adapter.set_output(
            "elixir",
            "Erlang/OTP 26 [erts-14.2.1] [source] [64-bit] [smp:8:8]\n"
            "\n"
            "Elixir 1.16.0 (compiled with Erlang/OTP 26)\n",
        )
        line = check_one("elixir", strategy_table, mock_adapter)
        assert line.outcome.version == "1.16.0"

    def test_ssh_patch_suffix(self, strategy_table, mock_adapter):
        mock_adapter.set_output("ssh", "OpenSSH_9.6p1 Ubuntu-3ubuntu13, OpenSSL 3.0.13 30 Jan 2024\n")
        line = check_one("ssh", strategy_table, mock_adapter)
        assert line.outcome.version == "9.6p1"
        assert mock_adapter.call_log[0][1].args == ["-V"]

    def test_openssl_letter_release(self, strategy_table, mock_adapter):
        mock_adapter.set_output("openssl", "OpenSSL 1.1.1w  11 Sep 2023\n")
        line = check_one("openssl", strategy_table, mock_adapter)
        assert line.outcome.version == "1.1.1w"


class TestRunCheck:
    def test_usage_when_nothing_requested(self, mock_adapter, strategy_table):
        result = run_check(names=[], adapter=mock_adapter, table=strategy_table)
        assert result.usage
        assert result.exit_code == 0
        assert mock_adapter.call_count == 0

    def test_usage_when_rc_empty(self, tmp_path: Path, mock_adapter, strategy_table):
        rc = tmp_path / ".hasrc"
        rc.write_text("# only comments\n\n")
        result = run_check(rc_path=rc, adapter=mock_adapter, table=strategy_table)
        assert result.usage
        assert mock_adapter.call_count == 0

    def test_order_and_tally(self, tmp_path: Path, mock_adapter, strategy_table):
        rc = tmp_path / ".hasrc"
        rc.write_text("curl\nnonexistent-tool-xyz\n")
        mock_adapter.set_output("git", "git version 2.39.1")
        mock_adapter.set_output("curl", "curl 8.5.0 (x86_64-pc-linux-gnu)")

        seen = []
        result = run_check(
            names=["git", "node"],
            rc_path=rc,
            adapter=mock_adapter,
            table=strategy_table,
            on_line=seen.append,
        )

        assert [line.request for line in result.lines] == [
            "git", "node", "curl", "nonexistent-tool-xyz",
        ]
        assert seen == result.lines
        assert [c for c, _ in mock_adapter.call_log] == ["git", "node", "curl"]
        assert result.tally.ok == 2
        assert result.tally.ko == 2
        assert result.exit_code == 2

    def test_exit_code_clamped(self):
        table = StrategyTable({}, allow_unsafe=False)
        result = run_check(names=[f"tool{i}" for i in range(200)], adapter=MockProbeAdapter(), table=table)
        assert result.tally.ko == 200
        assert result.exit_code == 126

    def test_settings_unsafe_used_for_default_table(self, mock_adapter):
        mock_adapter.set_output("sometool", "sometool 1.0")
        result = run_check(
            names=["sometool"],
            settings=Settings(allow_unsafe=True),
            adapter=mock_adapter,
        )
        assert result.exit_code == 0
        assert result.lines[0].outcome.version == "1.0"

    def test_settings_unsafe_applies_to_given_table(self, mock_adapter):
        table = StrategyTable({})
        mock_adapter.set_output("sometool", "sometool 2.5.0")
        result = run_check(
            names=["sometool"],
            settings=Settings(allow_unsafe=True),
            adapter=mock_adapter,
            table=table,
        )
        assert result.lines[0].outcome.version == "2.5.0"
        assert mock_adapter.call_log[0][1].args == ["--version"]
        assert table.allow_unsafe is False

    def test_unsafe_table_kept_without_unsafe_settings(self, mock_adapter):
        table = StrategyTable({}, allow_unsafe=True)
        mock_adapter.set_output("sometool", "sometool 2.5.0")
        result = run_check(names=["sometool"], adapter=mock_adapter, table=table)
        assert result.exit_code == 0

    def test_unreadable_rc_is_startup_error(self, tmp_path: Path, mock_adapter, strategy_table):
        rc = tmp_path / ".hasrc"
        rc.mkdir()
        result = run_check(names=["git"], rc_path=rc, adapter=mock_adapter, table=strategy_table)
        assert result.error
        assert result.exit_code == STARTUP_ERROR_EXIT_CODE
        assert mock_adapter.call_count == 0
        assert "error" in result.to_dict()

    def test_to_dict(self, mock_adapter, strategy_table):
        mock_adapter.set_output("git", "git version 2.39.1")
        data = run_check(names=["git"], adapter=mock_adapter, table=strategy_table).to_dict()
        assert data["results"][0]["version"] == "2.39.1"
        assert data["summary"] == {"ok": 1, "ko": 0, "exit_code": 0}

    def test_custom_table_strategy(self, mock_adapter):
        table = StrategyTable({"foo": ProbeStrategy(args=["-V"], line=2)})
        mock_adapter.set_output("foo", "foo 9.9\nrelease 1.4\n")
        result = run_check(names=["foo"], adapter=mock_adapter, table=table)
        assert result.lines[0].outcome.version == "1.4"


class TestEndToEnd:
    def test_git_and_missing_tool(self, fake_bin):
        fake_bin("git", "git version 2.39.1")
        result = run_check(names=["git", "nonexistent-tool-xyz"], settings=Settings(allow_unsafe=True))
        git, missing = result.lines
        assert git.outcome.version == "2.39.1"
        assert missing.outcome.kind is OutcomeKind.NOT_INSTALLED
        assert result.exit_code == 1

    def test_unknown_command_never_spawned(self, fake_bin):
        marker = fake_bin("sometool")
        marker.write_text("#!/bin/sh\ntouch \"$0.ran\"\n")
        result = run_check(names=["sometool"])
        assert result.lines[0].outcome.kind is OutcomeKind.NOT_UNDERSTOOD
        assert not Path(f"{marker}.ran").exists()
        assert result.exit_code == 1
