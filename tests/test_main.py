# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import io
from pathlib import Path
from unittest.mock import patch

import pytest

from appversion.main import main, parse_args


class TestArgumentParsing:
    """Test command-line argument parsing."""

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            parse_args([])

    def test_parse_args_sort(self):
        args = parse_args(["sort", "--reverse", "--file", "x.txt", "1.0", "2.0"])
        assert args.command == "sort"
        assert args.reverse
        assert not args.unique
        assert args.file == "x.txt"
        assert args.versions == ["1.0", "2.0"]

    def test_parse_args_check(self):
        args = parse_args(["check", "a/metadata.json", "b/metadata.json"])
        assert args.paths == [Path("a/metadata.json"), Path("b/metadata.json")]


def stdout_lines(capsys: pytest.CaptureFixture[str]) -> list[str]:
    return capsys.readouterr().out.splitlines()


class TestParseCommand:
    def test_prints_canonical_form(self, cli_logger, capsys):
        main(["parse", "7.4.1 (4452929)", "1.0-rc1"])
        assert stdout_lines(capsys) == ["7.4.1", "1.0.rc.1"]

    def test_bad_version_fails_after_printing_the_rest(self, cli_logger, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["parse", "1.0", "1.0 (x", "2"])
        assert exc.value.code == 1
        assert stdout_lines(capsys) == ["1.0", "2"]
        assert cli_logger.warning_messages == ["'1.0 (x': invalid version:  (x"]
        assert cli_logger.error_messages == ["Completed with 1 warnings."]


class TestCompareCommand:
    @pytest.mark.parametrize(
        ("left", "right", "symbol"),
        [
            ("1.2", "1.2.0", "="),
            ("1.0", "1.0.rc1", ">"),
            ("1.0", "1.0.1", "<"),
        ],
    )
    def test_compare(self, cli_logger, capsys, left, right, symbol):
        main(["compare", left, right])
        assert stdout_lines(capsys) == [symbol]

    def test_compare_invalid(self, cli_logger, capsys):
        with pytest.raises(SystemExit):
            main(["compare", "1.0", "-"])
        assert cli_logger.error_messages == ["invalid version: -"]
        assert stdout_lines(capsys) == []


class TestSortCommand:
    def test_sorts_arguments(self, cli_logger, capsys):
        main(["sort", "1.0.1", "1.0", "0.9", "1.0.a.2", "1.0.b1"])
        assert stdout_lines(capsys) == ["0.9", "1.0.a.2", "1.0.b1", "1.0", "1.0.1"]

    def test_sorts_file_reverse_unique(self, cli_logger, capsys, build_fake_filesystem):
        build_fake_filesystem({"releases.txt": "1.0\n# old\n0.9\n1.0.0\n2.0-beta\n"})
        main(["sort", "--file", "/releases.txt", "--reverse", "--unique"])
        assert stdout_lines(capsys) == ["2.0-beta", "1.0", "0.9"]

    def test_reads_stdin(self, cli_logger, capsys):
        with patch("sys.stdin", io.StringIO("3\n1\n2\n")):
            main(["sort", "--file", "-"])
        assert stdout_lines(capsys) == ["1", "2", "3"]

    def test_missing_file_is_a_warning(self, cli_logger, capsys, fs):
        with pytest.raises(SystemExit):
            main(["sort", "--file", "/missing.txt", "1.0"])
        assert stdout_lines(capsys) == ["1.0"]
        assert len(cli_logger.warning_messages) == 1


class TestCheckCommand:
    def test_all_correct(self, cli_logger, metadata_file):
        path = metadata_file(["2.0", "1.10", "1.9", "1.0"])
        main(["check", path])
        assert cli_logger.warning_messages == []
        assert cli_logger.success_messages == [f"{path}: 4 versions in order"]

    def test_problems_are_annotated(self, cli_logger, metadata_file):
        path = metadata_file(["1.0", "2.0", "1.0.0"])
        with pytest.raises(SystemExit):
            main(["check", path])
        assert cli_logger.warning_messages == [
            "version 2.0 is listed after lower version 1.0",
            "version 1.0.0 duplicates 1.0",
        ]
        assert [loc.line for loc in cli_logger.locations if loc] == [4, 5]
        assert cli_logger.error_messages == ["Completed with 2 warnings."]

    def test_duplicate_is_annotated_on_the_repeated_entry(self, cli_logger, metadata_file):
        path = metadata_file(["2.0", "1.0", "2.0"])
        with pytest.raises(SystemExit):
            main(["check", path])
        assert cli_logger.warning_messages == [
            "version 2.0 duplicates 2.0",
        ]
        assert [loc.line for loc in cli_logger.locations if loc] == [5]


def test_github_actions_annotations(metadata_file, capsys):
    path = metadata_file(["1.0", "1.1"])
    with patch.dict("os.environ", {"GITHUB_ACTIONS": "true"}):
        with pytest.raises(SystemExit):
            main(["check", path])
    out = stdout_lines(capsys)
    assert out[0].startswith("::warning file=")
    assert out[0].endswith(
        "metadata.json,line=4::appversion.main "
        "version 1.1 is listed after lower version 1.0"
    )
    assert out[1] == "::error::appversion.main Completed with 1 warnings."
