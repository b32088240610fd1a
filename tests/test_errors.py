"""Tests for vscodeconfigurator.errors."""

from vscodeconfigurator.errors import (
    ConfiguratorError,
    ErrorKind,
    ExternalProcessError,
)


class TestConfiguratorError:
    def test_default_kind(self) -> None:
        error = ConfiguratorError("Something went wrong.")
        assert error.kind is ErrorKind.UNKNOWN_ERROR
        assert error.message == "Something went wrong."
        assert str(error) == "Something went wrong."

    def test_kind_values_are_display_names(self) -> None:
        assert ErrorKind.NO_SUBCOMMAND_PROVIDED.value == "NoSubcommandProvided"
        assert ErrorKind.FILE_PATH_DOES_NOT_EXIST.value == "FilePathDoesNotExist"


class TestExternalProcessError:
    """ExternalProcessError carries the failed command."""

    def test_message_includes_command_and_status(self) -> None:
        error = ExternalProcessError("cargo", ["init", "--lib"], 101, "error: bad edition\n")

        assert error.kind is ErrorKind.EXTERNAL_PROCESS_FAILED
        assert error.returncode == 101
        assert error.stderr == "error: bad edition"
        assert str(error) == "'cargo init --lib' exited with status 101.\nerror: bad edition"

    def test_without_stderr(self) -> None:
        error = ExternalProcessError("git", ["init"], 128)
        assert str(error) == "'git init' exited with status 128."
        assert isinstance(error, ConfiguratorError)
