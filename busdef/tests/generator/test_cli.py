"""Tests for CLI interface."""

import json
import os
import tempfile

from click.testing import CliRunner

from busdef.generator.cli import cli

FILE_DIR = os.path.dirname(os.path.realpath(__file__))


def _write_temp(content, suffix):
    with tempfile.NamedTemporaryFile("w", suffix=suffix, delete=False) as f:
        f.write(content)
        return f.name


def describe_gen_command():
    def generates_introspection_xml(expect):
        runner = CliRunner()
        with tempfile.NamedTemporaryFile(suffix=".xml", delete=False) as f:
            output_file = f.name

        try:
            result = runner.invoke(
                cli,
                [
                    "gen",
                    "-i",
                    f"{FILE_DIR}/example.busdef",
                    "-o",
                    output_file,
                    "--path",
                    "/org/example",
                ],
            )
            expect(result.exit_code) == 0
            with open(output_file) as f:
                content = f.read()
            expect('<node name="/org/example">' in content) == True
            expect('<interface name="com.example.Iface">' in content) == True
            expect('<signal name="Notify">' in content) == True
            expect('<property name="Volume" type="i" access="readwrite"/>' in content) == True
        finally:
            os.unlink(output_file)

    def reads_introspection_input(expect):
        runner = CliRunner()
        input_file = _write_temp(
            '<node><interface name="com.example.A"><signal name="Tick"/></interface></node>',
            ".xml",
        )
        with tempfile.NamedTemporaryFile(suffix=".xml", delete=False) as f:
            output_file = f.name

        try:
            result = runner.invoke(cli, ["gen", "-i", input_file, "-o", output_file])
            expect(result.exit_code) == 0
            with open(output_file) as f:
                expect('<signal name="Tick"/>' in f.read()) == True
        finally:
            os.unlink(input_file)
            os.unlink(output_file)

    def fails_on_invalid_definitions(expect):
        runner = CliRunner()
        input_file = _write_temp("interface a.B {} interface a.B {}", ".busdef")

        try:
            result = runner.invoke(cli, ["gen", "-i", input_file, "-o", os.devnull])
            expect(result.exit_code) != 0
            expect("declared 2 times" in result.output) == True
        finally:
            os.unlink(input_file)

    def requires_input_option(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["gen", "-o", "out.xml"])
        expect(result.exit_code) != 0


def describe_info_command():
    def displays_members(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-i", f"{FILE_DIR}/example.busdef"])
        expect(result.exit_code) == 0
        expect("com.example.Iface" in result.output) == True
        expect("Notify" in result.output) == True
        expect("deprecated" in result.output) == True
        expect("sessionless" in result.output) == True

    def outputs_json(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-i", f"{FILE_DIR}/example.busdef", "--json"])
        expect(result.exit_code) == 0

        data = json.loads(result.output)
        expect(len(data)) == 1
        expect(data[0]["name"]) == "com.example.Iface"
        signals = {s["name"]: s for s in data[0]["signals"]}
        expect(signals["Changed"]["signature"]) == "sv"
        expect(signals["Notify"]["annotations"]) == {"org.freedesktop.DBus.Deprecated": "true"}
        expect(data[0]["properties"][0]["access"]) == "readwrite"

    def accepts_verbose_flag(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "info", "-i", f"{FILE_DIR}/example.busdef"])
        expect(result.exit_code) == 0


def describe_check_command():
    def passes_consistent_definitions(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "-i", f"{FILE_DIR}/example.busdef"])
        expect(result.exit_code) == 0
        expect("1 interfaces OK" in result.output) == True

    def reports_bad_arguments(expect):
        runner = CliRunner()
        input_file = _write_temp(
            '<interface name="com.example.A"><signal name="Bad">'
            '<arg name="p" type="si"/></signal></interface>',
            ".xml",
        )

        try:
            result = runner.invoke(cli, ["check", "-i", input_file])
            expect(result.exit_code) == 1
            expect("com.example.A.Bad" in result.output) == True
        finally:
            os.unlink(input_file)

    def reports_syntax_errors(expect):
        runner = CliRunner()
        input_file = _write_temp("interface a.B { signal }", ".busdef")

        try:
            result = runner.invoke(cli, ["check", "-i", input_file])
            expect(result.exit_code) == 1
            expect(isinstance(result.exception, SystemExit)) == True
            expect("Error:" in result.output) == True
        finally:
            os.unlink(input_file)
