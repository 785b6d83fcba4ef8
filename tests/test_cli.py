from typer.testing import CliRunner

from condaview import __version__
from condaview._src.conda import Conda
from condaview.cli.root import app

from conftest import FakeRunner, MissingRunner, failed, ok


runner = CliRunner()

INSTALL_HINT = "It appears conda is not installed or in your PATH."


def invoke(args, conda):
    return runner.invoke(app, args, obj=conda)


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "list-envs" in result.output
    assert "list-packages" in result.output


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_envs(make_conda):
    conda = make_conda({
        ("env", "list", "--json"): ok({"envs": ["/opt/conda/envs/base", "/opt/conda/envs/ml"]}),
    })
    result = invoke(["list-envs"], conda)
    assert result.exit_code == 0
    assert "1. base (/opt/conda/envs/base)" in result.output
    assert "2. ml (/opt/conda/envs/ml)" in result.output
    assert "Total environments: 2" in result.output


def test_list_packages(make_conda):
    conda = make_conda({
        ("list", "-n", "ml", "--json"): ok([
            {"name": "six", "version": "1.16.0", "channel": "conda-forge"},
            {"name": "numpy", "version": "1.26.4", "channel": "pkgs/main"},
        ]),
    })
    result = invoke(["list-packages", "ml"], conda)
    assert result.exit_code == 0
    assert "Listing packages for environment: ml" in result.output
    assert "six" in result.output
    assert "numpy" in result.output
    assert "Total packages: 2" in result.output


def test_list_packages_yaml(make_conda):
    conda = make_conda({
        ("list", "-n", "ml", "--json"): ok([
            {"name": "six", "version": "1.16.0", "channel": "conda-forge"},
        ]),
    })
    result = invoke(["list-packages", "ml", "--format", "yaml"], conda)
    assert result.exit_code == 0
    assert result.output == "- name: six\n  version: 1.16.0\n  channel: conda-forge\n"


def test_list_packages_requires_env_name(make_conda):
    result = invoke(["list-packages"], make_conda())
    assert result.exit_code != 0


def test_environment_not_found(make_conda):
    stderr = b"EnvironmentLocationNotFound: could not find environment: ghost\n"
    conda = make_conda({("list", "-n", "ghost", "--json"): failed(stderr=stderr)})
    result = invoke(["list-packages", "ghost"], conda)
    assert result.exit_code == 1
    assert "Error: Conda environment 'ghost' not found" in result.output
    assert "condaview list-envs" in result.output
    assert INSTALL_HINT not in result.output


def test_parse_error(make_conda):
    conda = make_conda({("env", "list", "--json"): ok(b"{not json")})
    result = invoke(["list-envs"], conda)
    assert result.exit_code == 1
    assert "Error: Failed to parse JSON output from conda" in result.output
    assert "unexpected format" in result.output


def test_command_failed(make_conda):
    conda = make_conda({("env", "list", "--json"): failed(stderr=b"CondaHTTPError: timeout")})
    result = invoke(["list-envs"], conda)
    assert result.exit_code == 1
    assert "Error: Conda command failed: CondaHTTPError: timeout" in result.output
    assert INSTALL_HINT not in result.output


def test_not_installed():
    result = invoke(["list-envs"], Conda(runner=MissingRunner()))
    assert result.exit_code == 1
    assert "Error: Failed to execute `conda`" in result.output
    assert INSTALL_HINT in result.output
    assert "Total environments" not in result.output


def test_failure_probes_for_install():
    fake = FakeRunner({
        ("env", "list", "--json"): failed(exit_code=127),
        ("--version",): FileNotFoundError(2, "No such file or directory"),
    })
    result = invoke(["list-envs"], Conda(runner=fake))
    assert result.exit_code == 1
    assert "exit code 127" in result.output
    assert INSTALL_HINT in result.output
    assert fake.calls[-1] == ["conda", "--version"]
