"""
GitHub Actions Runtime Tests

Inputs from INPUT_* variables, workflow commands on the stream,
outputs appended to GITHUB_OUTPUT.
"""

import io

import pytest

from actions.base import MissingInputError
from actions.github import GitHubActionsRuntime
from actions.stub import RecordingRuntime


def make_runtime(environ=None):
    stream = io.StringIO()
    return GitHubActionsRuntime(environ=environ or {}, stream=stream), stream


class TestInputs:
    def test_reads_upper_cased_input_variable(self):
        runtime, _ = make_runtime({"INPUT_PROJECT-ID": "  my-project  "})

        assert runtime.get_input("project-id") == "my-project"

    def test_spaces_in_name_become_underscores(self):
        runtime, _ = make_runtime({"INPUT_MY_INPUT": "value"})

        assert runtime.get_input("my input") == "value"

    def test_absent_optional_input_is_empty(self):
        runtime, _ = make_runtime()

        assert runtime.get_input("wait-time") == ""

    def test_missing_required_input_raises(self):
        runtime, _ = make_runtime({"INPUT_BUCKET-NAME": "   "})

        with pytest.raises(MissingInputError, match="bucket-name"):
            runtime.get_input("bucket-name", required=True)

    def test_trim_can_be_disabled(self):
        runtime, _ = make_runtime({"INPUT_ACCESS-TOKEN": " tok "})

        assert runtime.get_input("access-token", trim_whitespace=False) == " tok "


class TestCommands:
    def test_info_is_plain_line(self):
        runtime, stream = make_runtime()

        runtime.info("try head operation: op-1")

        assert stream.getvalue() == "try head operation: op-1\n"

    def test_levels_use_workflow_commands(self):
        runtime, stream = make_runtime()

        runtime.debug("body")
        runtime.warning("glossary terms is not found, continue to create")
        runtime.error("delete request failed")

        assert stream.getvalue().splitlines() == [
            "::debug::body",
            "::warning::glossary terms is not found, continue to create",
            "::error::delete request failed",
        ]

    def test_command_data_is_escaped(self):
        runtime, stream = make_runtime()

        runtime.error("100% broken\nsecond line\r")

        assert stream.getvalue() == "::error::100%25 broken%0Asecond line%0D\n"

    def test_set_failed_writes_error_command(self):
        runtime, stream = make_runtime()

        runtime.set_failed("create operation failed")

        assert stream.getvalue() == "::error::create operation failed\n"


class TestOutputs:
    def test_output_appended_to_github_output_file(self, tmp_path):
        output_file = tmp_path / "output.txt"
        output_file.write_text("existing=1\n", encoding="utf-8")
        runtime, stream = make_runtime({"GITHUB_OUTPUT": str(output_file)})

        runtime.set_output("operation-name", "projects/1/locations/us-central1/operations/op")

        assert output_file.read_text(encoding="utf-8") == (
            "existing=1\n"
            "operation-name=projects/1/locations/us-central1/operations/op\n"
        )
        assert stream.getvalue() == ""

    def test_multiline_output_uses_delimiter(self, tmp_path):
        output_file = tmp_path / "output.txt"
        runtime, _ = make_runtime({"GITHUB_OUTPUT": str(output_file)})

        runtime.set_output("notes", "a\nb")

        lines = output_file.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("notes<<ghadelimiter_")
        assert lines[1:3] == ["a", "b"]
        assert lines[3] == lines[0].split("<<", 1)[1]

    def test_legacy_command_without_github_output(self):
        runtime, stream = make_runtime()

        runtime.set_output("operation-name", "op-1")

        assert "::set-output name=operation-name::op-1" in stream.getvalue()


class TestRecordingRuntime:
    def test_records_in_call_order(self):
        runtime = RecordingRuntime({"glossary-name": " terms "})

        runtime.info("one")
        runtime.warning("two")
        runtime.set_output("operation-name", "op")
        runtime.set_failed("three")

        assert runtime.get_input("glossary-name", required=True) == "terms"
        assert runtime.records == [
            ("info", "one"),
            ("warning", "two"),
            ("error", "three"),
        ]
        assert runtime.outputs == {"operation-name": "op"}
        assert runtime.failure == "three"
