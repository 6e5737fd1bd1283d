"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

import pytest

from resgen.cli import _build_parser, main


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "build"])
    assert args.verbose is True
    assert args.command == "build"
    assert args.path == "."


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["build", "--verbose"])
    assert args.verbose is True
    assert args.command == "build"


def test_cli_accepts_build_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["build", "app", "--dry-run", "--strict"])
    assert args.path == "app"
    assert args.dry_run is True
    assert args.strict is True


def test_cli_accepts_outputs_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["outputs", "app"])
    assert args.command == "outputs"
    assert args.path == "app"
    assert args.verbose is False


def test_cli_requires_a_command() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_main_build_writes_output(project_builder, capsys) -> None:
    project_builder.pubspec(["images/icon.png"])
    project_builder.touch(["images/icon.png"])

    main(["build", str(project_builder.path())])

    assert (project_builder.path() / "lib" / "r.dart").exists()
    assert "Generated" in capsys.readouterr().out


def test_main_build_dry_run_prints_content(project_builder, capsys) -> None:
    project_builder.pubspec(["images/icon.png"])
    project_builder.touch(["images/icon.png"])

    main(["build", str(project_builder.path()), "--dry-run"])

    out = capsys.readouterr().out
    assert "final String icon = 'images/icon.png';" in out
    assert not (project_builder.path() / "lib" / "r.dart").exists()


def test_main_build_reports_skipped_generation(project_builder, capsys) -> None:
    project_builder.pubspec([])
    project_builder.write({"r_options.yaml": "path: out\n"})

    main(["build", str(project_builder.path())])

    captured = capsys.readouterr()
    assert "Nothing generated" in captured.out
    assert 'should start with "lib/"' in captured.err


def test_main_build_strict_exits_non_zero(project_builder, capsys) -> None:
    project_builder.pubspec([])
    project_builder.write({"r_options.yaml": "path: out\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(project_builder.path()), "--strict"])

    assert excinfo.value.code == 1
    assert "resgen build failed" in capsys.readouterr().err


def test_main_build_exits_when_manifest_missing(project_builder, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(project_builder.path())])

    assert excinfo.value.code == 1
    assert "pubspec.yaml" in capsys.readouterr().err


def test_main_exits_for_missing_project(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(tmp_path / "absent")])

    assert excinfo.value.code == 1


def test_main_outputs_lists_declared_files(project_builder, capsys) -> None:
    project_builder.write({"r_options.yaml": "path: lib/generated\n"})

    main(["outputs", str(project_builder.path())])

    assert capsys.readouterr().out.splitlines() == ["generated/r.dart"]
